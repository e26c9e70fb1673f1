"""Client facade: one method per HTTP verb.

Each method builds a ``FetchOptions`` value from its arguments, binds a fresh
hook pipeline to the transport and returns an unexecuted ``FetchHandle``::

    api = ApiClient(base_url="http://localhost:8787")
    handle = api.get("/posts", {"name": "testing"}, response_schema=Post)
    await handle.execute()
    handle.data  # {"name": "testing"}

The ``*_with_auth`` variants require a bearer token; when it is missing the
call is cancelled and nothing is sent. ``delete`` and ``delete_with_auth``
run immediately and return only the status code.
"""

import logging
from typing import Any, Optional

import httpx

from custom_fetch.core.diagnostics import FetchDiagnostics
from custom_fetch.core.handle import FetchHandle
from custom_fetch.core.options import FetchOptions, MultipartForm
from custom_fetch.core.transport import DEFAULT_TIMEOUT_SECONDS, FetchTransport, ResponseType
from custom_fetch.hooks.registry import build_pipeline
from custom_fetch.settings import Settings
from custom_fetch.types import JsonValue, RequestParams

logger = logging.getLogger(__name__)


class ApiClient:
    """Builds deferred calls against one base URL.

    Args:
        base_url: Base URL for relative request URLs. Falls back to
            ``Settings.get_api_base_url()``.
        settings: Source of the base URL and run mode.
        transport: Optional httpx transport used instead of the network.
        diagnostics: Schema failure reporter. Defaults to one that is verbose
            only in dev mode.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        diagnostics: Optional[FetchDiagnostics] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.settings = settings or Settings()
        self.base_url = base_url or self.settings.get_api_base_url()
        if not self.base_url:
            logger.warning("No base URL configured (API_BASE_URL unset); request URLs must be absolute.")
        self.diagnostics = diagnostics or FetchDiagnostics(verbose=self.settings.dev_mode())
        self.transport = FetchTransport(base_url=self.base_url, timeout=timeout, transport=transport)

    def request(
        self,
        method: str,
        url: str,
        options: Optional[FetchOptions] = None,
        response_type: ResponseType = "json",
    ) -> FetchHandle:
        """Build a call from a caller-assembled options value."""
        pipeline = build_pipeline(options or FetchOptions(), diagnostics=self.diagnostics, name=f"{method} {url}")
        return FetchHandle(method, url, pipeline, self.transport, response_type=response_type)

    # --- GET --- #

    def get(
        self,
        url: str,
        query: Optional[RequestParams] = None,
        response_schema: Any = None,
        error_schema: Any = None,
    ) -> FetchHandle:
        options = FetchOptions(query=query, response_schema=response_schema, error_schema=error_schema)
        return self.request("GET", url, options)

    def get_with_auth(
        self,
        url: str,
        token: Optional[str],
        query: Optional[RequestParams] = None,
        response_schema: Any = None,
        error_schema: Any = None,
    ) -> FetchHandle:
        options = FetchOptions(
            bearer_token_required=True,
            token=token,
            query=query,
            response_schema=response_schema,
            error_schema=error_schema,
        )
        return self.request("GET", url, options)

    # --- JSON body verbs --- #

    def _json_call(
        self,
        method: str,
        url: str,
        json_body: JsonValue,
        response_schema: Any,
        error_schema: Any,
        token: Optional[str] = None,
        with_auth: bool = False,
    ) -> FetchHandle:
        options = FetchOptions(
            bearer_token_required=with_auth,
            token=token,
            json_body=json_body,
            response_schema=response_schema,
            error_schema=error_schema,
        )
        return self.request(method, url, options)

    def post(
        self, url: str, json_body: JsonValue = None, response_schema: Any = None, error_schema: Any = None
    ) -> FetchHandle:
        return self._json_call("POST", url, json_body, response_schema, error_schema)

    def post_with_auth(
        self,
        url: str,
        token: Optional[str],
        json_body: JsonValue = None,
        response_schema: Any = None,
        error_schema: Any = None,
    ) -> FetchHandle:
        return self._json_call("POST", url, json_body, response_schema, error_schema, token=token, with_auth=True)

    def put(
        self, url: str, json_body: JsonValue = None, response_schema: Any = None, error_schema: Any = None
    ) -> FetchHandle:
        return self._json_call("PUT", url, json_body, response_schema, error_schema)

    def put_with_auth(
        self,
        url: str,
        token: Optional[str],
        json_body: JsonValue = None,
        response_schema: Any = None,
        error_schema: Any = None,
    ) -> FetchHandle:
        return self._json_call("PUT", url, json_body, response_schema, error_schema, token=token, with_auth=True)

    def patch(
        self, url: str, json_body: JsonValue = None, response_schema: Any = None, error_schema: Any = None
    ) -> FetchHandle:
        return self._json_call("PATCH", url, json_body, response_schema, error_schema)

    def patch_with_auth(
        self,
        url: str,
        token: Optional[str],
        json_body: JsonValue = None,
        response_schema: Any = None,
        error_schema: Any = None,
    ) -> FetchHandle:
        return self._json_call("PATCH", url, json_body, response_schema, error_schema, token=token, with_auth=True)

    # --- DELETE --- #

    async def delete(self, url: str) -> Optional[int]:
        """Send a DELETE and return its status code."""
        handle = await self.request("DELETE", url).execute()
        return handle.status_code

    async def delete_with_auth(self, url: str, token: Optional[str]) -> Optional[int]:
        """Send an authenticated DELETE; None if cancelled for a missing token."""
        options = FetchOptions(bearer_token_required=True, token=token)
        handle = await self.request("DELETE", url, options).execute()
        return handle.status_code

    # --- Multipart upload --- #

    def upload(
        self, url: str, form: MultipartForm, response_schema: Any = None, error_schema: Any = None
    ) -> FetchHandle:
        options = FetchOptions(multipart_form=form, response_schema=response_schema, error_schema=error_schema)
        return self.request("POST", url, options)

    def upload_with_auth(
        self,
        url: str,
        token: Optional[str],
        form: MultipartForm,
        response_schema: Any = None,
        error_schema: Any = None,
    ) -> FetchHandle:
        options = FetchOptions(
            bearer_token_required=True,
            token=token,
            multipart_form=form,
            response_schema=response_schema,
            error_schema=error_schema,
        )
        return self.request("POST", url, options)

    # --- Url-encoded form --- #

    def post_form(
        self, url: str, form: RequestParams, response_schema: Any = None, error_schema: Any = None
    ) -> FetchHandle:
        options = FetchOptions(urlencoded_form=form, response_schema=response_schema, error_schema=error_schema)
        return self.request("POST", url, options)

    def post_form_with_auth(
        self,
        url: str,
        token: Optional[str],
        form: RequestParams,
        response_schema: Any = None,
        error_schema: Any = None,
    ) -> FetchHandle:
        options = FetchOptions(
            bearer_token_required=True,
            token=token,
            urlencoded_form=form,
            response_schema=response_schema,
            error_schema=error_schema,
        )
        return self.request("POST", url, options)

    # --- Binary preview --- #

    def preview(self, url: str, query: Optional[RequestParams] = None) -> FetchHandle:
        """GET a binary payload; ``data`` is a ``BlobPayload``, never validated."""
        return self.request("GET", url, FetchOptions(query=query), response_type="blob")

    def preview_with_auth(self, url: str, token: Optional[str], query: Optional[RequestParams] = None) -> FetchHandle:
        options = FetchOptions(bearer_token_required=True, token=token, query=query)
        return self.request("GET", url, options, response_type="blob")
