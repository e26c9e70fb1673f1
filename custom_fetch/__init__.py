from .client import ApiClient
from .core.context import BlobPayload, BodyKind, Cancelled, Proceed, RequestContext, ResponseContext
from .core.diagnostics import FetchDiagnostics
from .core.handle import FetchHandle
from .core.options import FetchOptions, FormPart, MultipartForm
from .core.transport import DEFAULT_TIMEOUT_SECONDS, FetchTransport
from .exceptions import (
    CustomFetchError,
    ErrorResponseSchemaError,
    FetchNotExecutedError,
    FetchStatusError,
    ResponseSchemaError,
    SchemaValidationError,
)

__all__ = [
    "ApiClient",
    "BlobPayload",
    "BodyKind",
    "Cancelled",
    "CustomFetchError",
    "DEFAULT_TIMEOUT_SECONDS",
    "ErrorResponseSchemaError",
    "FetchDiagnostics",
    "FetchHandle",
    "FetchNotExecutedError",
    "FetchOptions",
    "FetchStatusError",
    "FetchTransport",
    "FormPart",
    "MultipartForm",
    "Proceed",
    "RequestContext",
    "ResponseContext",
    "ResponseSchemaError",
    "SchemaValidationError",
]
