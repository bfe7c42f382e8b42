from __future__ import annotations

import click

from zipit.cli.context import CLIContext, build_context


def _register_commands(cli_group: click.Group) -> None:
    from zipit.cli.commands import archive, diagnostics

    for module in (
        diagnostics,
        archive,
    ):
        module.register(cli_group)


@click.group()
@click.option("--log-level", type=str, default=None, help="Override ZIPIT_LOG_LEVEL for this session.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """zipit CLI."""
    ctx.obj = build_context(log_level)


_register_commands(cli)


def main() -> None:
    cli()


__all__ = ["CLIContext", "cli", "main"]
