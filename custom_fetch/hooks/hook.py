# Interfaces for the request/response hooks.

import abc
import logging
from enum import Enum
from typing import ClassVar, Optional

from custom_fetch.core.context import BeforeFetchResult, RequestContext, ResponseContext
from custom_fetch.hooks.slot import ABSENT, Slot


class HookStage(str, Enum):
    """Every slot of the before/after pipelines, in pipeline order."""

    AUTHORIZATION = "authorization"
    QUERY = "query"
    JSON_BODY = "json_body"
    MULTIPART_BODY = "multipart_body"
    URLENCODED_BODY = "urlencoded_body"
    RESPONSE_SCHEMA = "response_schema"
    ERROR_SCHEMA = "error_schema"


class FetchHook(abc.ABC):
    """Common state of a hook occupying one pipeline stage.

    Attributes:
        stage: The pipeline slot this hook fills.
        slot: The hook's input: ``Absent`` or ``Present(payload)``.
        name: Name used in log lines. Defaults to the class name.
        logger: The logger instance for this hook.
    """

    stage: ClassVar[HookStage]

    def __init__(self, slot: Slot = ABSENT, name: Optional[str] = None):
        self.slot = slot
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(self.__class__.__module__)

    @property
    def is_active(self) -> bool:
        """True when the slot holds a payload."""
        return bool(self.slot)

    def __repr__(self) -> str:
        state = "present" if self.is_active else "absent"
        return f"<{self.name}(stage={self.stage.value}, {state})>"


class BeforeFetchHook(FetchHook):
    """A transform applied to the outgoing request before it is sent."""

    @abc.abstractmethod
    def apply(self, context: RequestContext) -> BeforeFetchResult:
        """
        Apply the hook to the request context.

        Args:
            context: The outgoing request. Hooks mutate it in place.

        Returns:
            ``Proceed(context)``, or ``Cancelled(context, reason)`` when the
            request must not be sent.
        """
        raise NotImplementedError


class AfterFetchHook(FetchHook):
    """A check applied to the received response before it reaches the caller."""

    @abc.abstractmethod
    def apply(self, response: ResponseContext) -> ResponseContext:
        """
        Apply the hook to the response context.

        Args:
            response: The received response.

        Returns:
            The response context.

        Raises:
            Exception: Hooks raise to fail the call.
        """
        raise NotImplementedError
