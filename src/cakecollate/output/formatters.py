"""Rich/JSON output helpers.

The CLI renders a ServiceResult for humans (Rich text) or machines
(``--json``). ``--quiet`` reduces human output to the status line.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from cakecollate.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from cakecollate.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)

    console = create_console()
    if result.ok:
        _render_ok(result, console)
    else:
        _render_error(result, console, verbose=settings.verbose)
    return get_output(console).rstrip("\n")


def _format_quiet(result: ServiceResult) -> str:
    if result.ok:
        return f"OK: {result.op}"
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {msg}"


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _render_ok(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="cake.ok"), Text(f"  {result.op}", style="cake.op"))
    for key, value in result.data.items():
        console.print(
            Text(f"  {key}: ", style="cake.key"),
            Text(_format_value(value), style="cake.value"),
            sep="",
        )


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="cake.error"),
        Text(f"  {result.op}", style="cake.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="cake.code"))
        for k, v in err.detail.items():
            console.print(f"  {k}: {v!r}", markup=False)
