# custom_fetch exceptions

from typing import Any, Dict, List, Optional

from pydantic import ValidationError


class CustomFetchError(Exception):
    """Base exception for all custom_fetch errors."""

    def __init__(self, *args, status_code: int | None = None, detail: str | None = None):
        super().__init__(*args)
        self.status_code = status_code
        # Use the first arg as detail if detail kwarg is not provided and args exist
        self.detail = detail or (args[0] if args else None)


class SchemaValidationError(CustomFetchError):
    """Raised when a parsed response body does not match its declared schema.

    Attributes:
        validation_error: The underlying pydantic ValidationError.
        errors: Field paths and messages, one dict per failing field.
        status_code: HTTP status of the response that failed validation.
    """

    kind: str = "response"

    def __init__(self, validation_error: ValidationError, status_code: Optional[int] = None):
        self.validation_error = validation_error
        self.errors: List[Dict[str, Any]] = [
            {"loc": tuple(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in validation_error.errors()
        ]
        detail = f"{self.kind} body failed schema validation ({len(self.errors)} error(s))"
        super().__init__(detail, status_code=status_code, detail=detail)


class ResponseSchemaError(SchemaValidationError):
    """A successful (2xx) response body failed its response schema."""

    kind = "response"


class ErrorResponseSchemaError(SchemaValidationError):
    """A non-2xx response body failed its error schema."""

    kind = "error response"


class FetchNotExecutedError(CustomFetchError):
    """Raised when a result is read from a FetchHandle that has not completed."""

    pass


class FetchStatusError(CustomFetchError):
    """Raised by FetchHandle.raise_for_status() for a non-2xx response."""

    pass
