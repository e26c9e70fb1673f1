# Defines the per-call request and response contexts threaded through the hooks.

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


class BodyKind(str, Enum):
    """Which encoding currently occupies the request body."""

    NONE = "none"
    JSON = "json"
    MULTIPART = "multipart"
    URLENCODED = "urlencoded"


@dataclass
class RequestContext:
    """Holds the outgoing request for a single call.

    Created fresh for every call and mutated in place by the before-hooks.

    Attributes:
        method: HTTP verb.
        url: Request URL, relative to the transport's base URL.
        headers: Outgoing headers.
        content: Encoded body bytes, or None when there is no body.
        body_kind: Encoding of ``content``. At most one encoding is set;
            the last body hook to run wins.
        transaction_id: Identifier used to correlate log lines for this call.
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None
    body_kind: BodyKind = BodyKind.NONE
    transaction_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def set_body(self, content: bytes, content_type: str, kind: BodyKind) -> None:
        """Replace the body and its Content-Type header."""
        self.headers = {k: v for k, v in self.headers.items() if k.lower() != "content-type"}
        self.headers["Content-Type"] = content_type
        self.content = content
        self.body_kind = kind


@dataclass
class Proceed:
    """Before-pipeline result: the request should be sent."""

    context: RequestContext


@dataclass
class Cancelled:
    """Before-pipeline result: the request must not be sent."""

    context: RequestContext
    reason: str


BeforeFetchResult = Union[Proceed, Cancelled]


@dataclass
class BlobPayload:
    """Raw binary response body."""

    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class ResponseContext:
    """Holds a received response while the after-hooks run.

    Attributes:
        status_code: HTTP status code.
        ok: True iff the status code is in the 2xx range.
        headers: Response headers.
        data: Parsed body: a JSON value, text, ``BlobPayload`` or None.
        validated: Value produced by a successful schema validation, if any.
        transaction_id: Copied from the originating RequestContext.
    """

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    data: Any = None
    validated: Any = None
    transaction_id: Optional[uuid.UUID] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
