"""Click base classes that add an eager ``--examples`` flag.

``--help`` stays short; ``--examples`` prints sample invocations for the
command and exits with status 0.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Store an ``examples`` block and expose it through ``--examples``."""

    examples: str | None
    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class CakeCommand(_ExamplesMixin, click.Command):
    """Click Command that accepts ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class CakeGroup(_ExamplesMixin, click.Group):
    """Click Group that accepts ``examples=``.

    Subcommands default to :class:`CakeCommand`, so ``@group.command``
    takes ``examples=`` without an explicit ``cls=``.
    """

    command_class = CakeCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
