import logging
from typing import Optional

from pydantic import ValidationError


class FetchDiagnostics:
    """Reports schema validation failures for developers.

    Detail is only emitted when ``verbose`` is set. The flag is fixed at
    construction time; nothing here reads the environment.
    """

    def __init__(self, verbose: bool = False, logger: Optional[logging.Logger] = None):
        self.verbose = verbose
        self.logger = logger or logging.getLogger(__name__)

    def report_schema_failure(self, kind: str, error: ValidationError) -> None:
        """Log which fields failed validation and why."""
        if not self.verbose:
            return
        self.logger.warning(f"[api {kind}] type error: {error.error_count()} field(s) failed validation")
        for err in error.errors():
            loc = ".".join(str(part) for part in err["loc"]) or "<root>"
            self.logger.warning(f"[api {kind}]   {loc}: {err['msg']}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(verbose={self.verbose})"
