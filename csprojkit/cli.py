"""csprojkit CLI - Inspect the nearest .csproj above a path."""

from __future__ import annotations

import asyncio
import codecs
import dataclasses
import json
import logging
from pathlib import Path

import click

from csprojkit.config import ProjectSummary, ReaderConfig
from csprojkit.dotnet.reader import CsprojReader


@click.group()
def cli() -> None:
    """csprojkit - Resolve build facts from .NET project files."""
    pass


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _format(value: object) -> str:
    if value is None:
        return "[dim]-[/dim]"
    if isinstance(value, bool):
        return "[green]yes[/green]" if value else "[red]no[/red]"
    if isinstance(value, list):
        return ", ".join(f'"{v}"' for v in value) if value else "[dim]none[/dim]"
    return str(value)


def _print_summary(summary: ProjectSummary) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Project: {Path(summary.path).name}", show_edge=False)
    table.add_column("Property", style="bold")
    table.add_column("Value")

    table.add_row("Path", summary.path)
    table.add_row("RootNamespace", _format(summary.root_namespace))
    table.add_row("AssemblyName", _format(summary.assembly_name))
    table.add_row("TargetFramework", _format(summary.target_framework))
    if len(summary.target_frameworks) > 1:
        table.add_row("TargetFrameworks", _format(summary.target_frameworks))
    table.add_row(".NET 6 or later", _format(summary.is_net6_or_later))
    table.add_row("ImplicitUsings", _format(summary.implicit_usings))
    table.add_row("Using Include", _format(summary.usings_include))
    table.add_row("Using Remove", _format(summary.usings_remove))

    Console().print(table)


def _validate_encoding(ctx, param, value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError:
        raise click.BadParameter(f"unknown encoding: {value}")
    return value


async def _inspect(path: str, config: ReaderConfig) -> ProjectSummary | None:
    reader = await CsprojReader.create_from_path(path, config=config)
    if reader is None:
        return None
    return await reader.summarize()


@cli.command("inspect")
@click.argument("path", type=click.Path())
@click.option("--pattern", default=None, help="Project file glob (default *.csproj)")
@click.option(
    "--encoding", default="utf-8-sig", show_default=True,
    callback=_validate_encoding, help="Project file encoding",
)
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.option("--verbose", is_flag=True, help="Show debug logging")
def inspect_cmd(
    path: str,
    pattern: str | None,
    encoding: str,
    as_json: bool,
    verbose: bool,
) -> None:
    """Find the project file at or above PATH and show what it resolves to."""
    _configure_logging(verbose)
    config = ReaderConfig(pattern=pattern, encoding=encoding)

    summary = asyncio.run(_inspect(str(Path(path).resolve()), config))
    if summary is None:
        raise click.ClickException(f"No {pattern or CsprojReader.pattern} found at or above {path}")

    if as_json:
        click.echo(json.dumps(dataclasses.asdict(summary), indent=2))
    else:
        _print_summary(summary)


if __name__ == "__main__":
    cli()
