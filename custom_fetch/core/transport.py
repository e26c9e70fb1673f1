import json
import logging
from typing import Any, Literal, Optional

import httpx

from custom_fetch.core.context import BeforeFetchResult, BlobPayload, Cancelled, ResponseContext

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 50.0

ResponseType = Literal["json", "blob"]


def parse_json_body(response: httpx.Response) -> Any:
    """Parse a JSON response body.

    An empty body parses to None; a body that is not JSON is returned as text.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


def parse_blob_body(response: httpx.Response) -> BlobPayload:
    return BlobPayload(
        content=response.content,
        content_type=response.headers.get("content-type", "application/octet-stream"),
    )


class FetchTransport:
    """Sends a prepared request through httpx.

    Attributes:
        base_url: Prefixed to every relative request URL.
        timeout: Fixed timeout, in seconds, for every request.
        transport: Optional httpx transport (``MockTransport``, ``ASGITransport``)
            used instead of the network.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or ""
        self.timeout = timeout
        self.transport = transport
        self.logger = logger

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    async def send(self, result: BeforeFetchResult, response_type: ResponseType = "json") -> Optional[ResponseContext]:
        """
        Sends the request held by a before-pipeline result.

        Args:
            result: ``Proceed`` or ``Cancelled`` from the before-hooks.
            response_type: How to parse the body: ``"json"`` or ``"blob"``.

        Returns:
            The response context, or None when the request was cancelled
            (no network call is made).

        Raises:
            httpx.HTTPError: Timeouts and connection failures propagate unchanged.
        """
        if isinstance(result, Cancelled):
            self.logger.info(f"[{result.context.transaction_id}] Request not sent: {result.reason}")
            return None

        context = result.context
        self.logger.info(f"[{context.transaction_id}] Sending {context.method} request to {context.url}")
        try:
            async with self._client() as client:
                response = await client.request(
                    method=context.method,
                    url=context.url,
                    headers=context.headers,
                    content=context.content,
                )
        except httpx.TimeoutException as e:
            self.logger.error(f"[{context.transaction_id}] Timeout error during request: {e}")
            raise
        except httpx.ConnectError as e:
            self.logger.error(f"[{context.transaction_id}] Connection error during request: {e}")
            raise
        except httpx.HTTPError as e:
            self.logger.error(f"[{context.transaction_id}] HTTP error during request: {e}")
            raise

        self.logger.info(f"[{context.transaction_id}] Received response with status {response.status_code}")
        data = parse_blob_body(response) if response_type == "blob" else parse_json_body(response)
        return ResponseContext(
            status_code=response.status_code,
            headers=dict(response.headers),
            data=data,
            transaction_id=context.transaction_id,
        )
