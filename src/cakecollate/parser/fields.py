"""Field parsers: raw user strings into order value objects.

Each ``parse_*`` function trims its input, then applies the field's rules in
a fixed order (emptiness, length, pattern) and raises the first matching
:class:`~cakecollate.parser.errors.ParseError`. Nothing is retained between
calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

import structlog

from cakecollate.config.models import DEFAULT_CONFIG, ValidatorConfig
from cakecollate.domain.fields import (
    Address,
    DeliveryDate,
    Email,
    Name,
    OrderDescription,
    OrderItem,
    OrderItemType,
    Phone,
    Tag,
)
from cakecollate.parser.errors import (
    ConstraintsError,
    DeliveryDateFormatError,
    DeliveryDateValueError,
    EmptyValueError,
    FieldOverflowError,
)

log = structlog.get_logger(__name__)


def _require_text(trimmed: str, message: str, field: str) -> None:
    if not trimmed:
        raise EmptyValueError(message, field=field)


def _require_length(trimmed: str, limit: int, message: str, field: str) -> None:
    if len(trimmed) > limit:
        raise FieldOverflowError(message.format(limit=limit), field=field)


def parse_name(name: str, *, config: ValidatorConfig | None = None) -> Name:
    """Parse a customer name.

    Raises:
        EmptyValueError: blank input.
        FieldOverflowError: longer than ``limits.name_length``.
        ConstraintsError: not alphanumeric words.
    """
    cfg = config or DEFAULT_CONFIG
    trimmed = name.strip()
    _require_text(trimmed, Name.MESSAGE_EMPTY, "name")
    _require_length(trimmed, cfg.limits.name_length, Name.MESSAGE_OVERFLOW, "name")
    if not Name.is_valid(trimmed):
        raise ConstraintsError(Name.MESSAGE_CONSTRAINTS, field="name")
    return Name(value=trimmed)


def parse_phone(phone: str, *, config: ValidatorConfig | None = None) -> Phone:
    """Parse a phone number (digits only, at least three)."""
    cfg = config or DEFAULT_CONFIG
    trimmed = phone.strip()
    _require_text(trimmed, Phone.MESSAGE_EMPTY, "phone")
    _require_length(trimmed, cfg.limits.phone_length, Phone.MESSAGE_OVERFLOW, "phone")
    if not Phone.is_valid(trimmed):
        raise ConstraintsError(Phone.MESSAGE_CONSTRAINTS, field="phone")
    return Phone(value=trimmed)


def parse_address(address: str, *, config: ValidatorConfig | None = None) -> Address:
    trimmed = address.strip()
    _require_text(trimmed, Address.MESSAGE_EMPTY, "address")
    if not Address.is_valid(trimmed):
        raise ConstraintsError(Address.MESSAGE_CONSTRAINTS, field="address")
    return Address(value=trimmed)


def parse_email(email: str, *, config: ValidatorConfig | None = None) -> Email:
    trimmed = email.strip()
    _require_text(trimmed, Email.MESSAGE_EMPTY, "email")
    if not Email.is_valid(trimmed):
        raise ConstraintsError(Email.MESSAGE_CONSTRAINTS, field="email")
    return Email(value=trimmed)


def parse_order_description(
    order_description: str,
    *,
    config: ValidatorConfig | None = None,
) -> OrderDescription:
    """Parse one order description line. Empty descriptions are allowed."""
    trimmed = order_description.strip()
    if not OrderDescription.is_valid(trimmed):
        raise ConstraintsError(OrderDescription.MESSAGE_CONSTRAINTS, field="description")
    return OrderDescription(value=trimmed)


def parse_order_descriptions(
    order_descriptions: Iterable[str],
    *,
    config: ValidatorConfig | None = None,
) -> set[OrderDescription]:
    """Parse every description, failing on the first invalid one."""
    return {parse_order_description(d, config=config) for d in order_descriptions}


def parse_tag(tag: str, *, config: ValidatorConfig | None = None) -> Tag:
    """Parse a tag name.

    There is no separate emptiness check; a blank tag fails the pattern.
    """
    cfg = config or DEFAULT_CONFIG
    trimmed = tag.strip()
    _require_length(trimmed, cfg.limits.tag_length, Tag.MESSAGE_OVERFLOW, "tag")
    if not Tag.is_valid(trimmed):
        raise ConstraintsError(Tag.MESSAGE_CONSTRAINTS, field="tag")
    return Tag(value=trimmed)


def parse_tags(tags: Iterable[str], *, config: ValidatorConfig | None = None) -> set[Tag]:
    """Parse every tag, failing on the first invalid one."""
    return {parse_tag(t, config=config) for t in tags}


def parse_delivery_date(
    delivery_date: str,
    *,
    today: date | None = None,
    config: ValidatorConfig | None = None,
) -> DeliveryDate:
    """Parse a delivery date that must fall today or later.

    The format is checked before the date itself, so a malformed past date
    reports the format problem.

    Args:
        delivery_date: Raw input, e.g. ``"24/12/2030"``.
        today: Reference date; defaults to the local current date.
        config: Supplies ``delivery.min_days_ahead``.

    Raises:
        EmptyValueError: blank input.
        DeliveryDateFormatError: no accepted format matches.
        DeliveryDateValueError: the date is before the allowed horizon.
    """
    cfg = config or DEFAULT_CONFIG
    trimmed = delivery_date.strip()
    _require_text(trimmed, DeliveryDate.MESSAGE_EMPTY, "date")
    if not DeliveryDate.is_valid_format(trimmed):
        log.debug("delivery_date_rejected", reason="format", input=trimmed)
        raise DeliveryDateFormatError(DeliveryDate.MESSAGE_CONSTRAINTS_FORMAT, field="date")
    if not DeliveryDate.is_x_days_later(trimmed, cfg.delivery.min_days_ahead, today=today):
        log.debug("delivery_date_rejected", reason="past", input=trimmed)
        raise DeliveryDateValueError(
            DeliveryDate.MESSAGE_CONSTRAINTS_VALUE.format(trimmed),
            field="date",
        )
    return DeliveryDate(value=trimmed)


def parse_order_item(order_item_type: str, *, config: ValidatorConfig | None = None) -> OrderItem:
    """Parse an order item type into an OrderItem at the default cost."""
    cfg = config or DEFAULT_CONFIG
    trimmed = order_item_type.strip()
    if not OrderItemType.is_valid(trimmed):
        raise ConstraintsError(OrderItemType.MESSAGE_CONSTRAINTS, field="item")
    return OrderItem(type=OrderItemType(value=trimmed), cost=cfg.order_item.default_cost)
