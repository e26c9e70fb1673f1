from .authorization import AuthorizationHook
from .body import JsonBodyHook, MultipartBodyHook, UrlEncodedBodyHook
from .hook import AfterFetchHook, BeforeFetchHook, FetchHook, HookStage
from .pipeline import HookPipeline
from .query import QueryStringHook
from .registry import AFTER_HOOK_CLASSES, BEFORE_HOOK_CLASSES, build_after_hooks, build_before_hooks, build_pipeline
from .schema import ErrorSchemaHook, ResponseSchemaHook
from .slot import ABSENT, Absent, Present, Slot, slot_of

__all__ = [
    "ABSENT",
    "AFTER_HOOK_CLASSES",
    "Absent",
    "AfterFetchHook",
    "AuthorizationHook",
    "BEFORE_HOOK_CLASSES",
    "BeforeFetchHook",
    "ErrorSchemaHook",
    "FetchHook",
    "HookPipeline",
    "HookStage",
    "JsonBodyHook",
    "MultipartBodyHook",
    "Present",
    "QueryStringHook",
    "ResponseSchemaHook",
    "Slot",
    "UrlEncodedBodyHook",
    "build_after_hooks",
    "build_before_hooks",
    "build_pipeline",
]
