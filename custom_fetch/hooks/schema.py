"""Hooks validating the parsed response body against a declared schema.

A schema is anything pydantic can build a ``TypeAdapter`` for: a ``BaseModel``
subclass, a ``TypedDict``, ``list[...]`` and so on. Validation failure is fatal
for the call: the hook reports it through the diagnostics collaborator and
raises.
"""

from functools import cached_property
from typing import Any, Optional, Type

from pydantic import TypeAdapter, ValidationError

from custom_fetch.core.context import ResponseContext
from custom_fetch.core.diagnostics import FetchDiagnostics
from custom_fetch.core.options import FetchOptions
from custom_fetch.exceptions import ErrorResponseSchemaError, ResponseSchemaError, SchemaValidationError
from custom_fetch.hooks.hook import AfterFetchHook, HookStage
from custom_fetch.hooks.slot import ABSENT, Absent, Slot, slot_of


class _SchemaHook(AfterFetchHook):
    """Shared validation logic; subclasses pick which responses they check."""

    error_class: Type[SchemaValidationError]
    diagnostic_kind: str

    def __init__(self, slot: Slot = ABSENT, diagnostics: Optional[FetchDiagnostics] = None, name: Optional[str] = None):
        super().__init__(slot, name=name)
        self.diagnostics = diagnostics or FetchDiagnostics()

    @cached_property
    def adapter(self) -> TypeAdapter:
        return TypeAdapter(self.slot.payload)

    def applies_to(self, response: ResponseContext) -> bool:
        raise NotImplementedError

    def apply(self, response: ResponseContext) -> ResponseContext:
        if isinstance(self.slot, Absent) or not self.applies_to(response):
            self.logger.debug(f"[{response.transaction_id}] No-op: nothing to validate ({self.name}).")
            return response
        try:
            response.validated = self.validate(response.data)
        except ValidationError as e:
            self.diagnostics.report_schema_failure(self.diagnostic_kind, e)
            raise self.error_class(e, status_code=response.status_code) from e
        self.logger.info(f"[{response.transaction_id}] {self.diagnostic_kind} body matches schema ({self.name}).")
        return response

    def validate(self, data: Any) -> Any:
        return self.adapter.validate_python(data)


class ResponseSchemaHook(_SchemaHook):
    """Validates 2xx response bodies."""

    stage = HookStage.RESPONSE_SCHEMA
    error_class = ResponseSchemaError
    diagnostic_kind = "response"

    @classmethod
    def from_options(
        cls, options: FetchOptions, diagnostics: Optional[FetchDiagnostics] = None
    ) -> "ResponseSchemaHook":
        return cls(slot_of(options.response_schema), diagnostics=diagnostics)

    def applies_to(self, response: ResponseContext) -> bool:
        return response.ok


class ErrorSchemaHook(_SchemaHook):
    """Validates non-2xx response bodies."""

    stage = HookStage.ERROR_SCHEMA
    error_class = ErrorResponseSchemaError
    diagnostic_kind = "error"

    @classmethod
    def from_options(cls, options: FetchOptions, diagnostics: Optional[FetchDiagnostics] = None) -> "ErrorSchemaHook":
        return cls(slot_of(options.error_schema), diagnostics=diagnostics)

    def applies_to(self, response: ResponseContext) -> bool:
        return not response.ok
