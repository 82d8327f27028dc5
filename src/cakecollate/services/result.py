"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: every ValidateService method returns a ServiceResult; parse
errors never escape the service layer as exceptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` mirrors the ParseError subclass so callers can branch on the
    kind of failure without matching message text.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the input was accepted.
        op: Name of the operation (e.g. ``"parse_name"``).
        data: The parsed value(s) on success.
        warnings: Non-fatal issues noticed while parsing.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
