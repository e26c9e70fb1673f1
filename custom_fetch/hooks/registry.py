# Fixed, ordered hook registry.

from typing import List, Optional, Tuple, Type

from custom_fetch.core.diagnostics import FetchDiagnostics
from custom_fetch.core.options import FetchOptions
from custom_fetch.hooks.authorization import AuthorizationHook
from custom_fetch.hooks.body import JsonBodyHook, MultipartBodyHook, UrlEncodedBodyHook
from custom_fetch.hooks.hook import AfterFetchHook, BeforeFetchHook
from custom_fetch.hooks.pipeline import HookPipeline
from custom_fetch.hooks.query import QueryStringHook
from custom_fetch.hooks.schema import ErrorSchemaHook, ResponseSchemaHook

# Order matters: the query hook rewrites the URL before any body is encoded,
# and among the body hooks the last one supplied wins.
BEFORE_HOOK_CLASSES: Tuple[Type[BeforeFetchHook], ...] = (
    AuthorizationHook,
    QueryStringHook,
    JsonBodyHook,
    MultipartBodyHook,
    UrlEncodedBodyHook,
)

AFTER_HOOK_CLASSES: Tuple[Type[AfterFetchHook], ...] = (
    ResponseSchemaHook,
    ErrorSchemaHook,
)


def build_before_hooks(options: FetchOptions) -> List[BeforeFetchHook]:
    """One hook per before-stage, in pipeline order."""
    return [hook_cls.from_options(options) for hook_cls in BEFORE_HOOK_CLASSES]  # type: ignore[attr-defined]


def build_after_hooks(options: FetchOptions, diagnostics: Optional[FetchDiagnostics] = None) -> List[AfterFetchHook]:
    """One hook per after-stage, in pipeline order."""
    return [
        hook_cls.from_options(options, diagnostics=diagnostics)  # type: ignore[attr-defined]
        for hook_cls in AFTER_HOOK_CLASSES
    ]


def build_pipeline(
    options: FetchOptions, diagnostics: Optional[FetchDiagnostics] = None, name: Optional[str] = None
) -> HookPipeline:
    """Build the full pipeline for one call."""
    return HookPipeline(
        before_hooks=build_before_hooks(options),
        after_hooks=build_after_hooks(options, diagnostics=diagnostics),
        name=name,
    )
