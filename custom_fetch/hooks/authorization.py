# Hook for adding the bearer token to outgoing requests.

from custom_fetch.core.context import BeforeFetchResult, Cancelled, Proceed, RequestContext
from custom_fetch.core.options import FetchOptions
from custom_fetch.hooks.hook import BeforeFetchHook, HookStage
from custom_fetch.hooks.slot import ABSENT, Absent, Present

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "
MISSING_TOKEN_REASON = "bearer token required but missing"


class AuthorizationHook(BeforeFetchHook):
    """Adds ``Authorization: Bearer <token>`` to the request.

    The slot is present only when a bearer token is required; its payload is
    the token, which may itself be missing. A required-but-missing token
    cancels the call instead of raising.
    """

    stage = HookStage.AUTHORIZATION

    @classmethod
    def from_options(cls, options: FetchOptions) -> "AuthorizationHook":
        if not options.bearer_token_required:
            return cls(ABSENT)
        return cls(Present(options.token))

    def apply(self, context: RequestContext) -> BeforeFetchResult:
        if isinstance(self.slot, Absent):
            self.logger.debug(f"[{context.transaction_id}] No-op: slot absent ({self.name}).")
            return Proceed(context)

        token = self.slot.payload
        if not token:
            self.logger.warning(f"[{context.transaction_id}] Bearer token required but missing; cancelling request.")
            return Cancelled(context, MISSING_TOKEN_REASON)

        headers = {k: v for k, v in context.headers.items() if k.lower() != AUTHORIZATION_HEADER.lower()}
        headers[AUTHORIZATION_HEADER] = f"{BEARER_PREFIX}{token}"
        context.headers = headers
        self.logger.info(f"[{context.transaction_id}] Authorization header set ({self.name}).")
        return Proceed(context)
