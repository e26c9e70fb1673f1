# Pipeline that folds a context through an ordered sequence of hooks.

import logging
from typing import Optional, Sequence

from custom_fetch.core.context import BeforeFetchResult, Cancelled, Proceed, RequestContext, ResponseContext
from custom_fetch.hooks.hook import AfterFetchHook, BeforeFetchHook

logger = logging.getLogger(__name__)


class HookPipeline:
    """
    Applies the before-hooks and after-hooks of one call, strictly in order.

    Before-hooks never short-circuit: once a hook cancels the call, the result
    stays cancelled (the first reason is kept) but the remaining hooks still
    run against the context. After-hooks stop at the first exception, which
    propagates to the caller.

    Attributes:
        before_hooks: Hooks applied to the outgoing request.
        after_hooks: Hooks applied to the received response.
        name: The name of this pipeline, used for logging.
    """

    def __init__(
        self,
        before_hooks: Sequence[BeforeFetchHook],
        after_hooks: Sequence[AfterFetchHook],
        name: Optional[str] = None,
    ):
        self.before_hooks = list(before_hooks)
        self.after_hooks = list(after_hooks)
        self.logger = logger
        self.name = name or self.__class__.__name__

    def run_before(self, context: RequestContext) -> BeforeFetchResult:
        """
        Applies every before-hook to the request context.

        Args:
            context: A fresh request context.

        Returns:
            ``Proceed`` if the request should be sent, ``Cancelled`` otherwise.
        """
        self.logger.debug(f"[{context.transaction_id}] Entering before-hooks: {self.name}")
        result: BeforeFetchResult = Proceed(context)
        for i, hook in enumerate(self.before_hooks):
            self.logger.debug(
                f"[{context.transaction_id}] Applying before-hook {i + 1}/{len(self.before_hooks)} "
                f"in {self.name}: {hook!r}"
            )
            step = hook.apply(result.context)
            if isinstance(result, Cancelled):
                result = Cancelled(step.context, result.reason)
            else:
                result = step
        if isinstance(result, Cancelled):
            self.logger.info(f"[{context.transaction_id}] Request cancelled in {self.name}: {result.reason}")
        return result

    def run_after(self, response: ResponseContext) -> ResponseContext:
        """
        Applies every after-hook to the response context.

        Raises:
            Exception: Propagates any exception raised by a hook.
        """
        current = response
        for i, hook in enumerate(self.after_hooks):
            self.logger.debug(
                f"[{response.transaction_id}] Applying after-hook {i + 1}/{len(self.after_hooks)} "
                f"in {self.name}: {hook!r}"
            )
            try:
                current = hook.apply(current)
            except Exception as e:
                self.logger.error(
                    f"[{response.transaction_id}] Error applying after-hook {hook.name} within {self.name}: {e}"
                )
                raise
        return current

    def __repr__(self) -> str:
        before = ", ".join(repr(h) for h in self.before_hooks)
        after = ", ".join(repr(h) for h in self.after_hooks)
        return f"<{self.name}(before=[{before}], after=[{after}])>"
