"""Error types shared by the preflight checks and the conversion pipeline."""
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a notes2md failure."""
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_INPUT = "invalid_input"
    INVALID_DATA = "invalid_data"


class Notes2MdError(Exception):
    """A failure annotated with its kind.

    ``str(error)`` is the human readable message, which always names the
    offending path or value.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"Notes2MdError({self.kind.value!r}, {self.message!r})"
