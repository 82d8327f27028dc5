"""Shared pytest fixtures for cakecollate tests."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from cakecollate.config.models import FieldLimits, ValidatorConfig


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def today() -> date:
    """Fixed reference date so delivery-date tests never depend on the clock."""
    return date(2030, 6, 15)


@pytest.fixture
def tight_config() -> ValidatorConfig:
    """Config with small limits, for exercising overrides."""
    return ValidatorConfig(
        limits=FieldLimits(name_length=5, phone_length=4, tag_length=3, max_index=99),
    )


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no CAKECOLLATE_* overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes
    so a stray cakecollate.toml above the checkout cannot leak in.
    """
    for key in (
        "CAKECOLLATE_CONFIG",
        "CAKECOLLATE_LIMITS__NAME_LENGTH",
        "CAKECOLLATE_DELIVERY__MIN_DAYS_AHEAD",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
