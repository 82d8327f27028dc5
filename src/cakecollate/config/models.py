"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cakecollate.toml only contains
overrides. An absent or empty file reproduces the stock validator.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from cakecollate.domain.fields import DEFAULT_ORDER_ITEM_COST


class FieldLimits(BaseModel):
    """[limits] section."""

    model_config = {"frozen": True}

    name_length: int = Field(default=80, gt=0)
    phone_length: int = Field(default=20, gt=0)
    tag_length: int = Field(default=30, gt=0)
    # Largest signed 32-bit integer; ten digits at most.
    max_index: int = Field(default=2_147_483_647, gt=0)


class OrderItemConfig(BaseModel):
    """[order_item] section."""

    model_config = {"frozen": True}

    default_cost: Decimal = Field(default=DEFAULT_ORDER_ITEM_COST, ge=0)


class DeliveryConfig(BaseModel):
    """[delivery] section."""

    model_config = {"frozen": True}

    # A century ahead keeps today + horizon inside the datetime range.
    min_days_ahead: int = Field(default=0, ge=0, le=36_500)


class ValidatorConfig(BaseModel):
    """Root configuration composing all sections.

    Matches the full cakecollate.toml schema.
    """

    model_config = {"frozen": True}

    limits: FieldLimits = Field(default_factory=FieldLimits)
    order_item: OrderItemConfig = Field(default_factory=OrderItemConfig)
    delivery: DeliveryConfig = Field(default_factory=DeliveryConfig)


DEFAULT_CONFIG = ValidatorConfig()
