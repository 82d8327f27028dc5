"""Field validator — turns raw command arguments into value objects."""

from cakecollate.parser.errors import (
    ConstraintsError,
    DeliveryDateFormatError,
    DeliveryDateValueError,
    EmptyValueError,
    FieldOverflowError,
    InvalidIndexError,
    ParseError,
)
from cakecollate.parser.fields import (
    parse_address,
    parse_delivery_date,
    parse_email,
    parse_name,
    parse_order_description,
    parse_order_descriptions,
    parse_order_item,
    parse_phone,
    parse_tag,
    parse_tags,
)
from cakecollate.parser.indices import parse_index, parse_index_list

__all__ = [
    "ConstraintsError",
    "DeliveryDateFormatError",
    "DeliveryDateValueError",
    "EmptyValueError",
    "FieldOverflowError",
    "InvalidIndexError",
    "ParseError",
    "parse_address",
    "parse_delivery_date",
    "parse_email",
    "parse_index",
    "parse_index_list",
    "parse_name",
    "parse_order_description",
    "parse_order_descriptions",
    "parse_order_item",
    "parse_phone",
    "parse_tag",
    "parse_tags",
]
