"""Caller-declared options for a single call.

Every field is optional. An absent field leaves its hook slot empty, and the
hook passes the context through unchanged.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from custom_fetch.types import JsonValue, RequestInputs

MultipartFileSpec = Tuple[Optional[str], bytes, Optional[str]]


@dataclass
class FormPart:
    """One named part of a multipart form.

    A part with a ``filename`` is sent as a file; otherwise it is a plain field.
    """

    name: str
    content: Union[bytes, str]
    filename: Optional[str] = None
    content_type: Optional[str] = None

    def to_bytes(self) -> bytes:
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return self.content


@dataclass
class MultipartForm:
    """An ordered set of named text/binary parts."""

    parts: List[FormPart] = field(default_factory=list)

    def append(
        self,
        name: str,
        content: Union[bytes, str],
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> "MultipartForm":
        self.parts.append(FormPart(name=name, content=content, filename=filename, content_type=content_type))
        return self

    def has(self, name: str) -> bool:
        return any(part.name == name for part in self.parts)

    def get(self, name: str) -> Optional[FormPart]:
        return next((part for part in self.parts if part.name == name), None)

    def to_httpx_files(self) -> List[Tuple[str, MultipartFileSpec]]:
        """Render every part in the ``files=`` shape httpx's multipart encoder takes."""
        return [(part.name, (part.filename, part.to_bytes(), part.content_type)) for part in self.parts]

    def __len__(self) -> int:
        return len(self.parts)


class FetchOptions(BaseModel):
    """Options for one call.

    Attributes:
        bearer_token_required: When True, ``token`` is sent as
            ``Authorization: Bearer <token>``; a missing token cancels the call.
        token: Bearer token. Ignored unless ``bearer_token_required`` is set.
        query: Appended to the URL as a query string. None or empty: no-op.
        json_body: Sent as ``application/json``. Only None means absent, so
            ``{}`` and ``[]`` are still sent.
        multipart_form: Sent as ``multipart/form-data``. None or empty: no-op.
        urlencoded_form: Sent as ``application/x-www-form-urlencoded``.
            None or empty: no-op.
        response_schema: Validates the parsed body of 2xx responses.
        error_schema: Validates the parsed body of non-2xx responses.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    bearer_token_required: bool = Field(default=False)
    token: Optional[str] = Field(default=None)
    query: Optional[Dict[str, RequestInputs]] = Field(default=None)
    json_body: JsonValue = Field(default=None)
    multipart_form: Optional[MultipartForm] = Field(default=None)
    urlencoded_form: Optional[Dict[str, RequestInputs]] = Field(default=None)
    response_schema: Any = Field(default=None)
    error_schema: Any = Field(default=None)
