from custom_fetch.core.context import BeforeFetchResult, Proceed, RequestContext
from custom_fetch.core.encoding import append_query_string
from custom_fetch.core.options import FetchOptions
from custom_fetch.hooks.hook import BeforeFetchHook, HookStage
from custom_fetch.hooks.slot import Absent, slot_of


class QueryStringHook(BeforeFetchHook):
    """Appends the encoded query params to the request URL."""

    stage = HookStage.QUERY

    @classmethod
    def from_options(cls, options: FetchOptions) -> "QueryStringHook":
        return cls(slot_of(options.query, empty_is_absent=True))

    def apply(self, context: RequestContext) -> BeforeFetchResult:
        if isinstance(self.slot, Absent):
            self.logger.debug(f"[{context.transaction_id}] No-op: slot absent ({self.name}).")
            return Proceed(context)
        context.url = append_query_string(context.url, self.slot.payload)
        self.logger.info(f"[{context.transaction_id}] Query string applied: {context.url} ({self.name}).")
        return Proceed(context)
