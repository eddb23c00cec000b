from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    UPSTREAM_HTTP = "upstream-http"
    TRANSPORT = "transport"
    CONFIG = "config"


class ReportWorkerError(Exception):
    """Failure of a platform call or of the worker configuration.

    The message is the text handed back to the host when the error reaches
    the entry point.
    """

    def __init__(self, message: str, kind: ErrorKind, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code

    @property
    def status_text(self) -> str:
        return str(self.status_code) if self.status_code is not None else "<none>"
