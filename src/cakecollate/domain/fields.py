"""Order field value objects.

Each value object wraps a single trimmed string and owns the predicate and
user-facing messages for its field. Instances are frozen pydantic models, so
equality and hashing are by content and sets of tags or descriptions
deduplicate naturally.

INVARIANT: a constructed value object always satisfies its predicate.
Length limits and the delivery-date horizon are parse-time rules applied by
:mod:`cakecollate.parser` and are not re-checked here.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

_ALNUM = r"[A-Za-z0-9]+"
_EMAIL_LOCAL = rf"{_ALNUM}(?:[+_.\-]{_ALNUM})*"
_EMAIL_LABEL = rf"{_ALNUM}(?:-{_ALNUM})*"
_NUMERIC_DATE = re.compile(r"(\d{2})([/.-])(\d{2})\2(\d{4})", re.ASCII)
_NAMED_MONTH_DATE = re.compile(r"(\d{2}) ([A-Za-z]{3}) (\d{4})", re.ASCII)
_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

DEFAULT_ORDER_ITEM_COST = Decimal("10")


class FieldValue(BaseModel):
    """Base for single-string value objects.

    Subclasses set ``PATTERN`` (matched against the whole value) or override
    :meth:`is_valid`, plus ``MESSAGE_CONSTRAINTS``.
    """

    model_config = {"frozen": True}

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r".*")
    MESSAGE_CONSTRAINTS: ClassVar[str] = ""

    value: str

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True if *value* satisfies this field's predicate."""
        return cls.PATTERN.fullmatch(value) is not None

    @field_validator("value")
    @classmethod
    def check_value(cls, value: str) -> str:
        if not cls.is_valid(value):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return value

    def __str__(self) -> str:
        return self.value


class Name(FieldValue):
    """Customer name."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    MESSAGE_EMPTY: ClassVar[str] = "Name cannot be empty."
    MESSAGE_OVERFLOW: ClassVar[str] = "Name cannot be longer than {limit} characters."


class Phone(FieldValue):
    """Customer phone number."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{3,}")
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    MESSAGE_EMPTY: ClassVar[str] = "Phone number cannot be empty."
    MESSAGE_OVERFLOW: ClassVar[str] = "Phone number cannot be longer than {limit} digits."


class Address(FieldValue):
    """Delivery address."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"\S.*")
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"
    MESSAGE_EMPTY: ClassVar[str] = "Address cannot be empty."


class Email(FieldValue):
    """Customer email address.

    ``local-part@domain`` where the local part is alphanumeric runs joined by
    single ``+``, ``_``, ``.`` or ``-`` characters, and the domain is
    dot-separated labels whose last label is at least two characters long.
    """

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        rf"{_EMAIL_LOCAL}@(?:{_EMAIL_LABEL}\.)*(?=[A-Za-z0-9-]{{2,}}$){_EMAIL_LABEL}"
    )
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by "
        "hyphens, if any."
    )
    MESSAGE_EMPTY: ClassVar[str] = "Email cannot be empty."


class OrderDescription(FieldValue):
    """One line of an order's description. May be empty."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r".*")
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Order descriptions should be a single line of text without line breaks"
    )


class Tag(FieldValue):
    """Free-form order tag."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    MESSAGE_OVERFLOW: ClassVar[str] = "Tag names cannot be longer than {limit} characters."


class DeliveryDate(FieldValue):
    """Requested delivery date, stored exactly as the user typed it."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Delivery dates should be in one of these formats: dd/mm/yyyy, dd-mm-yyyy, "
        "dd.mm.yyyy or dd MMM yyyy (e.g. 01 Jan 2030), and must be a valid calendar date"
    )
    MESSAGE_CONSTRAINTS_FORMAT: ClassVar[str] = MESSAGE_CONSTRAINTS
    MESSAGE_CONSTRAINTS_VALUE: ClassVar[str] = (
        "The delivery date {} has already passed. Delivery dates should be today or later."
    )
    MESSAGE_EMPTY: ClassVar[str] = "Delivery date cannot be empty."

    @classmethod
    def to_date(cls, value: str) -> date | None:
        """Parse *value* into a calendar date, or return None.

        Day and month are always two digits. Month abbreviations are the
        English ones in any case, independent of the process locale.
        """
        numeric = _NUMERIC_DATE.fullmatch(value)
        named = _NAMED_MONTH_DATE.fullmatch(value)
        if numeric is not None:
            day, _, month, year = numeric.groups()
            month_number = int(month)
        elif named is not None and named.group(2).lower() in _MONTHS:
            day, month, year = named.groups()
            month_number = _MONTHS.index(month.lower()) + 1
        else:
            return None
        try:
            return date(int(year), month_number, int(day))
        except ValueError:
            return None

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return cls.to_date(value) is not None

    @classmethod
    def is_valid_format(cls, value: str) -> bool:
        return cls.is_valid(value)

    @classmethod
    def is_x_days_later(cls, value: str, days: int, *, today: date | None = None) -> bool:
        """Return True if *value* falls on or after ``today + days``.

        *value* must already be in a valid format.
        """
        parsed = cls.to_date(value)
        if parsed is None:
            return False
        reference = today or date.today()
        return parsed >= reference + timedelta(days=days)

    @property
    def calendar_date(self) -> date:
        parsed = self.to_date(self.value)
        if parsed is None:
            raise ValueError(f"Not a delivery date: {self.value!r}")
        return parsed


class OrderItemType(FieldValue):
    """Kind of item being ordered, e.g. ``Chocolate Cake``."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 '&-]*")
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Order item types should start with a letter or digit and only contain letters, "
        "digits, spaces, hyphens, apostrophes and ampersands"
    )


class OrderItem(BaseModel):
    """An orderable item and its unit cost.

    Cost is a placeholder default until pricing is supported.
    """

    model_config = {"frozen": True}

    type: OrderItemType
    cost: Decimal = Field(default=DEFAULT_ORDER_ITEM_COST, ge=0)

    def __str__(self) -> str:
        return str(self.type)
