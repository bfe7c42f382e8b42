from __future__ import annotations

import click

from zipit.cli.context import CLIContext


def register(cli: click.Group) -> None:
    @cli.command("env-info")
    @click.pass_obj
    def env_info_cmd(ctx: CLIContext) -> None:
        """Print the effective build settings."""
        settings = ctx.settings

        click.echo("--- Loaded from Settings ---")
        click.echo(f"COMPRESSION:    {settings.compression}")
        click.echo(f"COMPRESSLEVEL:  {settings.compresslevel if settings.compresslevel is not None else '(default)'}")
        click.echo(f"MAX_WORKERS:    {settings.max_workers}")
        click.echo(f"TEXT_ENCODING:  {settings.text_encoding}")
        click.echo(f"PLATFORM:       {settings.platform}")
        click.echo(f"LOG_LEVEL:      {settings.log_level}")
