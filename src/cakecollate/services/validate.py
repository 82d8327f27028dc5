"""ValidateService — run a field parser and report the outcome as a ServiceResult."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

from cakecollate.config.models import DEFAULT_CONFIG, ValidatorConfig
from cakecollate.domain.fields import DeliveryDate, FieldValue, OrderItem
from cakecollate.domain.index import Index
from cakecollate.parser import (
    ParseError,
    parse_address,
    parse_delivery_date,
    parse_email,
    parse_index,
    parse_index_list,
    parse_name,
    parse_order_description,
    parse_order_item,
    parse_phone,
    parse_tag,
)
from cakecollate.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

SINGLE_FIELDS: tuple[str, ...] = (
    "name",
    "phone",
    "address",
    "email",
    "description",
    "tag",
    "date",
    "item",
    "index",
)

MULTI_FIELDS: dict[str, str] = {
    "tags": "tag",
    "descriptions": "description",
}


class ValidateService:
    """Validate raw field input against a fixed configuration.

    Usage::

        svc = ValidateService(settings.validator_config)
        result = svc.validate("phone", " 91234567 ")
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        *,
        today: date | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._today = today

    def _parser(self, field: str) -> Callable[[str], Any]:
        cfg = self._config
        parsers: dict[str, Callable[[str], Any]] = {
            "name": lambda raw: parse_name(raw, config=cfg),
            "phone": lambda raw: parse_phone(raw, config=cfg),
            "address": lambda raw: parse_address(raw, config=cfg),
            "email": lambda raw: parse_email(raw, config=cfg),
            "description": lambda raw: parse_order_description(raw, config=cfg),
            "tag": lambda raw: parse_tag(raw, config=cfg),
            "date": lambda raw: parse_delivery_date(raw, today=self._today, config=cfg),
            "item": lambda raw: parse_order_item(raw, config=cfg),
            "index": lambda raw: parse_index(raw, config=cfg),
        }
        return parsers[field]

    def validate(self, field: str, raw: str) -> ServiceResult:
        """Parse a single-valued field."""
        op = f"parse_{field}"
        if field not in SINGLE_FIELDS:
            return _unknown_field(op, field)
        try:
            parsed = self._parser(field)(raw)
        except ParseError as exc:
            return _failure(op, exc, field, raw)
        return ServiceResult(ok=True, op=op, data={"field": field, **_describe(parsed)})

    def validate_many(self, field: str, raws: Sequence[str]) -> ServiceResult:
        """Parse a multi-valued field (``tags`` or ``descriptions``) into a set.

        The first invalid element fails the whole call.
        """
        op = f"parse_{field}"
        single = MULTI_FIELDS.get(field)
        if single is None:
            return _unknown_field(op, field)
        parse = self._parser(single)
        parsed: list[FieldValue] = []
        for raw in raws:
            try:
                parsed.append(parse(raw))
            except ParseError as exc:
                return _failure(op, exc, field, raw)

        unique = set(parsed)
        values = sorted(v.value for v in unique)
        warnings: list[str] = []
        repeated = sorted(v.value for v, n in Counter(parsed).items() if n > 1)
        if repeated:
            warnings.append(f"Duplicate {field} ignored: {', '.join(repeated)}")
        return ServiceResult(
            ok=True,
            op=op,
            data={"field": field, "values": values, "count": len(values)},
            warnings=warnings,
        )

    def validate_indices(self, raw: str) -> ServiceResult:
        """Parse a space-separated index list, highest index first."""
        op = "parse_indices"
        try:
            indices = parse_index_list(raw, config=self._config)
        except ParseError as exc:
            return _failure(op, exc, "indices", raw)
        return ServiceResult(
            ok=True,
            op=op,
            data={"field": "indices", "indices": indices.one_based()},
        )


def _describe(parsed: Any) -> dict[str, Any]:
    """Flatten a parsed value into JSON-safe result data."""
    if isinstance(parsed, OrderItem):
        return {"value": parsed.type.value, "cost": str(parsed.cost)}
    if isinstance(parsed, DeliveryDate):
        return {"value": parsed.value, "date": parsed.calendar_date.isoformat()}
    if isinstance(parsed, Index):
        return {"value": parsed.one_based}
    return {"value": parsed.value}


def _failure(op: str, exc: ParseError, field: str, raw: str) -> ServiceResult:
    logger.debug("%s rejected: %s", op, exc.code)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=exc.code,
            message=exc.message,
            detail={"field": exc.field or field, "input": raw},
        ),
    )


def _unknown_field(op: str, field: str) -> ServiceResult:
    known = sorted([*SINGLE_FIELDS, *MULTI_FIELDS])
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="UNKNOWN_FIELD",
            message=f"Unknown field '{field}'. Expected one of: {', '.join(known)}",
            detail={"field": field},
        ),
    )
