# Hooks that encode the request body.

import json

import httpx

from custom_fetch.core.context import BeforeFetchResult, BodyKind, Proceed, RequestContext
from custom_fetch.core.encoding import encode_search_params
from custom_fetch.core.options import FetchOptions, MultipartForm
from custom_fetch.hooks.hook import BeforeFetchHook, HookStage
from custom_fetch.hooks.slot import Absent, slot_of

JSON_CONTENT_TYPE = "application/json"
URLENCODED_CONTENT_TYPE = "application/x-www-form-urlencoded"

# httpx needs an absolute URL to build a request; only the encoded body is kept.
_ENCODER_URL = "http://multipart.invalid/"


class JsonBodyHook(BeforeFetchHook):
    """Serializes the JSON body as UTF-8 ``application/json`` text."""

    stage = HookStage.JSON_BODY

    @classmethod
    def from_options(cls, options: FetchOptions) -> "JsonBodyHook":
        return cls(slot_of(options.json_body))

    def apply(self, context: RequestContext) -> BeforeFetchResult:
        if isinstance(self.slot, Absent):
            self.logger.debug(f"[{context.transaction_id}] No-op: slot absent ({self.name}).")
            return Proceed(context)
        content = json.dumps(self.slot.payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        context.set_body(content, JSON_CONTENT_TYPE, BodyKind.JSON)
        self.logger.info(f"[{context.transaction_id}] JSON body set ({len(content)} bytes) ({self.name}).")
        return Proceed(context)


def encode_multipart(form: MultipartForm) -> tuple[bytes, str]:
    """Encode a form with httpx's multipart encoder.

    Returns:
        The body bytes and the ``multipart/form-data; boundary=...`` content type.
    """
    request = httpx.Request("POST", _ENCODER_URL, files=form.to_httpx_files())
    return request.read(), request.headers["Content-Type"]


class MultipartBodyHook(BeforeFetchHook):
    """Attaches a multipart form body."""

    stage = HookStage.MULTIPART_BODY

    @classmethod
    def from_options(cls, options: FetchOptions) -> "MultipartBodyHook":
        return cls(slot_of(options.multipart_form, empty_is_absent=True))

    def apply(self, context: RequestContext) -> BeforeFetchResult:
        if isinstance(self.slot, Absent):
            self.logger.debug(f"[{context.transaction_id}] No-op: slot absent ({self.name}).")
            return Proceed(context)
        content, content_type = encode_multipart(self.slot.payload)
        context.set_body(content, content_type, BodyKind.MULTIPART)
        self.logger.info(
            f"[{context.transaction_id}] Multipart body set ({len(self.slot.payload)} part(s)) ({self.name})."
        )
        return Proceed(context)


class UrlEncodedBodyHook(BeforeFetchHook):
    """Encodes the form as ``application/x-www-form-urlencoded``."""

    stage = HookStage.URLENCODED_BODY

    @classmethod
    def from_options(cls, options: FetchOptions) -> "UrlEncodedBodyHook":
        return cls(slot_of(options.urlencoded_form, empty_is_absent=True))

    def apply(self, context: RequestContext) -> BeforeFetchResult:
        if isinstance(self.slot, Absent):
            self.logger.debug(f"[{context.transaction_id}] No-op: slot absent ({self.name}).")
            return Proceed(context)
        content = encode_search_params(self.slot.payload).encode("ascii")
        context.set_body(content, URLENCODED_CONTENT_TYPE, BodyKind.URLENCODED)
        self.logger.info(f"[{context.transaction_id}] Url-encoded body set ({self.name}).")
        return Proceed(context)
