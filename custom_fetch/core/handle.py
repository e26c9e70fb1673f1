"""Deferred handle for a single call.

Nothing is sent when a handle is created. ``await handle.execute()`` runs the
before-hooks, hands the result to the transport, runs the after-hooks on the
response and then exposes the outcome on the handle.
"""

import logging
from typing import Any, Optional

from custom_fetch.core.context import Cancelled, RequestContext
from custom_fetch.core.transport import FetchTransport, ResponseType
from custom_fetch.exceptions import FetchNotExecutedError, FetchStatusError
from custom_fetch.hooks.pipeline import HookPipeline

logger = logging.getLogger(__name__)


class FetchHandle:
    """A call that runs when executed.

    Attributes:
        method: HTTP verb.
        url: Request URL before hooks run.
        data: Parsed response body (success or error), or None.
        validated: Value produced by the matching schema, if one was declared.
        status_code: HTTP status, or None if nothing was received.
        error: The exception that failed the call, if any.
        is_finished: True once ``execute()`` has returned or raised.
        is_cancelled: True if the before-hooks cancelled the call.
        cancel_reason: Why the call was cancelled.
    """

    def __init__(
        self,
        method: str,
        url: str,
        pipeline: HookPipeline,
        transport: FetchTransport,
        response_type: ResponseType = "json",
    ):
        self.method = method.upper()
        self.url = url
        self.pipeline = pipeline
        self.transport = transport
        self.response_type = response_type
        self._reset()

    def _reset(self) -> None:
        self.data: Any = None
        self.validated: Any = None
        self.status_code: Optional[int] = None
        self.headers: dict[str, str] = {}
        self.error: Optional[BaseException] = None
        self.is_fetching = False
        self.is_finished = False
        self.is_cancelled = False
        self.cancel_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300

    async def execute(self) -> "FetchHandle":
        """
        Runs the call once.

        Returns:
            This handle, populated.

        Raises:
            SchemaValidationError: A declared schema rejected the body.
            httpx.HTTPError: The transport failed.
        """
        self._reset()
        self.is_fetching = True
        context = RequestContext(method=self.method, url=self.url)
        try:
            result = self.pipeline.run_before(context)
            if isinstance(result, Cancelled):
                self.is_cancelled = True
                self.cancel_reason = result.reason

            response = await self.transport.send(result, response_type=self.response_type)
            if response is None:
                return self

            self.status_code = response.status_code
            self.headers = response.headers
            self.data = response.data
            response = self.pipeline.run_after(response)
            self.validated = response.validated
        except Exception as e:
            self.error = e
            # A body that failed its schema is not handed to the caller.
            self.data = None
            raise
        finally:
            self.is_fetching = False
            self.is_finished = True
        return self

    def raise_for_status(self) -> None:
        """Raise if the call never completed or the status is not 2xx."""
        if not self.is_finished or self.status_code is None:
            raise FetchNotExecutedError(f"{self.method} {self.url} has not completed")
        if not self.ok:
            raise FetchStatusError(
                f"{self.method} {self.url} returned status {self.status_code}", status_code=self.status_code
            )

    def __repr__(self) -> str:
        return f"<FetchHandle {self.method} {self.url} status={self.status_code} finished={self.is_finished}>"
