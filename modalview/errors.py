"""Fatal error type for the modalview editor."""

from typing import Optional


class FatalIOError(Exception):
    """An unrecoverable terminal or file I/O failure.

    ``context`` names the operation that failed (``"tcgetattr"``,
    ``"fopen"``, ``"getWindowSize"``...). ``cause`` is the underlying
    exception, if any.
    """

    def __init__(self, context: str, cause: Optional[BaseException] = None):
        self.context = context
        self.cause = cause
        super().__init__(context, cause)

    def __str__(self) -> str:
        if self.cause is None:
            return self.context
        return f"{self.context}: {self.cause}"
