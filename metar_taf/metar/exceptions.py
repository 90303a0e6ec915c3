"""Errors raised when a METAR report cannot be decoded."""

from enum import Enum
from typing import Optional, Sequence, Tuple


class ErrorKind(Enum):
    """Kind of parsing failure, for callers that branch on the cause."""

    MISSING_FIELD = "missing_field"
    MALFORMED_FIELD = "malformed_field"
    UNRECOGNIZED_TOKEN = "unrecognized_token"


class MetarParsingError(Exception):
    """
    Base exception raised when a METAR report can't be parsed.

    Attributes:
        kind: ErrorKind of the failure
        token: Offending token, or None when the report ended early
        field: Name of the report field involved, if any
        expected: Description of the grammar that was expected, if any
        remaining: Tokens left in the stream when the failure occurred
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        remaining: Sequence[str] = (),
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.field = field
        self.expected = expected
        self.remaining: Tuple[str, ...] = tuple(remaining)

    def __str__(self) -> str:
        if self.token is None:
            return f"{self.message}: end of report"
        return f"{self.message}: {self.token}"


class MissingFieldError(MetarParsingError):
    """A mandatory field never matched where the parser required it."""

    kind = ErrorKind.MISSING_FIELD

    def __init__(
        self,
        field: str,
        expected: str,
        token: Optional[str] = None,
        remaining: Sequence[str] = (),
    ):
        super().__init__(
            f"Missing {field}, expected {expected}",
            token=token,
            field=field,
            expected=expected,
            remaining=remaining,
        )


class MalformedFieldError(MissingFieldError):
    """A token handed to a required recognizer does not fit its grammar."""

    kind = ErrorKind.MALFORMED_FIELD

    def __init__(self, field: str, expected: str, token: Optional[str] = None):
        super().__init__(field, expected, token=token)
        self.message = f"Unrecognized {field} information"
        self.args = (self.message,)


class UnrecognizedTokenError(MetarParsingError):
    """A token was rejected by every recognizer before the remarks section."""

    kind = ErrorKind.UNRECOGNIZED_TOKEN

    def __init__(self, token: str, remaining: Sequence[str] = ()):
        super().__init__("Unrecognized token", token=token, remaining=remaining)

    def __str__(self) -> str:
        text = super().__str__()
        if self.remaining:
            return f"{text} (followed by: {' '.join(self.remaining)})"
        return text
