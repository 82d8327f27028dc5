"""Tests for the parse command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cakecollate.cli import cli

FAR_FUTURE = "24/12/2999"


@pytest.mark.usefixtures("_isolated_cwd")
class TestSingleFields:
    @pytest.mark.parametrize(
        "args,expected",
        [
            (["name", "  Alex Yeoh "], "Alex Yeoh"),
            (["phone", "91234567"], "91234567"),
            (["address", "Blk 30 Geylang Street 29, #06-40"], "Blk 30 Geylang Street 29, #06-40"),
            (["email", "alexyeoh@example.com"], "alexyeoh@example.com"),
            (["description", "2 x Chocolate Cake"], "2 x Chocolate Cake"),
            (["tag", "birthday"], "birthday"),
            (["date", FAR_FUTURE], FAR_FUTURE),
            (["item", "Chocolate Cake"], "Chocolate Cake"),
            (["index", "3"], 3),
        ],
    )
    def test_accepts(self, cli_runner: CliRunner, args: list[str], expected: object) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", *args])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["value"] == expected

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "name", "Alex Yeoh"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "value: Alex Yeoh" in result.stdout

    def test_rejects_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "phone", "12"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "at least 3 digits" in result.stderr

    def test_rejects_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "name", "   "])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "EMPTY_VALUE"

    def test_past_date(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "date", "01/01/2000"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "DATE_IN_PAST"
        assert "01/01/2000" in data["error"]["message"]

    def test_item_cost(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "item", "cake"])
        assert json.loads(result.stdout)["data"]["cost"] == "10"

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "email", "alex@example.com"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "OK: parse_email"


@pytest.mark.usefixtures("_isolated_cwd")
class TestMultiFields:
    def test_tags_set(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "tags", "b", "a", "b"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["values"] == ["a", "b"]
        assert data["warnings"] == ["Duplicate tags ignored: b"]

    def test_duplicate_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "tags", "a", "a"])
        assert result.exit_code == 0
        assert "WARNING: Duplicate tags ignored: a" in result.stderr

    def test_tags_require_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "tags"])
        assert result.exit_code == 2

    def test_descriptions(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "descriptions", "Tart", "Cake"])
        assert json.loads(result.stdout)["data"]["count"] == 2

    def test_indices_descending(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "indices", "3 1 2"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["indices"] == [3, 2, 1]

    def test_indices_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "indices", "5 abc"])
        assert result.exit_code == 1
        assert "Index is not a non-zero unsigned integer." in result.stderr


@pytest.mark.usefixtures("_isolated_cwd")
class TestConfigFile:
    def test_toml_limits_apply(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "cakecollate.toml").write_text("[limits]\nname_length = 4\n")
        result = cli_runner.invoke(cli, ["--json", "parse", "name", "Alex Yeoh"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "OVERFLOW"

    def test_explicit_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "shop.toml"
        cfg.write_text('[order_item]\ndefault_cost = "25"\n')
        result = cli_runner.invoke(cli, ["--json", "-c", str(cfg), "parse", "item", "cake"])
        assert json.loads(result.stdout)["data"]["cost"] == "25"


@pytest.mark.usefixtures("_isolated_cwd")
class TestExamples:
    @pytest.mark.parametrize(
        "args,snippet",
        [
            (["parse", "--examples"], "cakecollate parse tags"),
            (["parse", "date", "--examples"], "24 Dec 2030"),
            (["parse", "indices", "--examples"], '"3 1 2"'),
        ],
    )
    def test_examples(self, cli_runner: CliRunner, args: list[str], snippet: str) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert snippet in result.output

    def test_help_lists_subcommands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--help"])
        assert result.exit_code == 0
        for name in ("name", "phone", "address", "email", "date", "item", "indices", "tags"):
            assert name in result.output
