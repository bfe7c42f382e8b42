from __future__ import annotations

from pathlib import Path
from typing import Tuple

import click

from zipit.cli.context import CLIContext
from zipit.cli.shared import describe_member, format_size
from zipit.core.builder import build_archive
from zipit.errors import ZipitError
from zipit.utils.archive import read_archive


def _parse_inline(values: Tuple[str, ...]) -> list[dict]:
    items = []
    for value in values:
        name, sep, data = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=DATA, got {value!r}", param_hint="--inline")
        items.append({"name": name, "data": data})
    return items


def register(cli: click.Group) -> None:
    @cli.command("create")
    @click.argument("inputs", nargs=-1, type=str)
    @click.option(
        "-o",
        "--output",
        "output",
        type=click.Path(dir_okay=False, path_type=Path),
        required=True,
        help="Where to write the archive.",
    )
    @click.option(
        "--inline",
        "inline",
        multiple=True,
        help="Inline entry as NAME=DATA; added after the path inputs.",
    )
    @click.option(
        "--cwd",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=None,
        help="Base directory for relative inputs.",
    )
    @click.option("--store", is_flag=True, default=False, help="Store entries without compression.")
    @click.pass_obj
    def create_cmd(
        ctx: CLIContext,
        inputs: Tuple[str, ...],
        output: Path,
        inline: Tuple[str, ...],
        cwd: Path | None,
        store: bool,
    ) -> None:
        """Build a zip archive from files, directories and inline data."""
        items = list(inputs) + _parse_inline(inline)
        if not items:
            raise click.UsageError("Provide at least one INPUT or --inline entry.")

        settings = ctx.settings
        if store:
            settings = settings.model_copy(update={"compression": "STORE"})

        try:
            blob = build_archive(items, cwd, settings=settings)
        except ZipitError as exc:
            click.secho(f"Failed to build archive: {exc}", fg="red", err=True)
            raise SystemExit(1) from exc

        output.write_bytes(blob)
        click.secho(f"Wrote {output} ({format_size(len(blob))})", fg="green")

    @cli.command("list")
    @click.argument("archive", type=click.Path(exists=True, dir_okay=False, path_type=Path))
    @click.pass_obj
    def list_cmd(ctx: CLIContext, archive: Path) -> None:
        """List the entries of an archive in stored order."""
        try:
            members = read_archive(archive.read_bytes())
        except ZipitError as exc:
            click.secho(f"Failed to read archive: {exc}", fg="red", err=True)
            raise SystemExit(1) from exc

        for member in members:
            click.echo(describe_member(member))
