"""Parse errors raised by the field validator.

Every error carries the user-facing ``message`` verbatim and a stable
``code`` that the service layer copies into ``ServiceError.code``.
"""

from __future__ import annotations

from typing import ClassVar


class ParseError(Exception):
    """Raw input could not be turned into a value object."""

    code: ClassVar[str] = "PARSE_ERROR"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class EmptyValueError(ParseError):
    """A required field was blank after trimming."""

    code: ClassVar[str] = "EMPTY_VALUE"


class FieldOverflowError(ParseError):
    """A field was longer than its configured maximum."""

    code: ClassVar[str] = "OVERFLOW"


class ConstraintsError(ParseError):
    """A field failed its pattern or semantic rule."""

    code: ClassVar[str] = "CONSTRAINTS"


class InvalidIndexError(ParseError):
    """An index token was not a non-zero unsigned integer."""

    code: ClassVar[str] = "INVALID_INDEX"


class DeliveryDateFormatError(ConstraintsError):
    """The delivery date matches none of the accepted formats."""

    code: ClassVar[str] = "INVALID_DATE_FORMAT"


class DeliveryDateValueError(ConstraintsError):
    """The delivery date is earlier than the allowed horizon."""

    code: ClassVar[str] = "DATE_IN_PAST"
