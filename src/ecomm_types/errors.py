"""Errors raised when building a Timestamp from caller input.

Everything else in the library either converts totally or reports broken
invariants through protean's ``ValidationError``.
"""

from typing import Optional

NIL_PB_TIMESTAMP_MESSAGE = "cannot interpret nil protobuf timestamp"


class ParseError(ValueError):
    """A string could not be read as an RFC 3339 timestamp."""

    def __init__(self, value: str, reason: Optional[str] = None):
        self.value = value
        self.reason = reason or "does not match the RFC 3339 grammar"
        super().__init__(f"cannot parse {value!r} as an RFC 3339 timestamp: {self.reason}")


class NilInputError(ValueError):
    """A wire timestamp was expected but ``None`` was supplied."""

    def __init__(self, message: str = NIL_PB_TIMESTAMP_MESSAGE):
        super().__init__(message)
