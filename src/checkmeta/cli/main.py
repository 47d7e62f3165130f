"""CLI entry point - Click commands for checkmeta."""

from __future__ import annotations

import sys

import click

from checkmeta import __version__
from checkmeta.cli._loader import LoadError
from checkmeta.cli._output import (
    format_json,
    format_policies_json,
    format_policies_text,
    format_text,
)
from checkmeta.cli._runner import run_check
from checkmeta.core.config import CheckmetaConfig, ConfigError, load_config


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", message="checkmeta %(version)s")
def cli() -> None:
    """checkmeta - check metadata wellformedness validator."""


@cli.command()
@click.argument("modules", nargs=-1)
@click.option(
    "--strict", is_flag=True, help="Also exit 1 when a module declares no checks."
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--exclude", default="", help="Comma-separated check names to skip.")
@click.option("--no-color", is_flag=True, envvar="NO_COLOR", help="Disable ANSI colors.")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Path to .checkmeta.toml or pyproject.toml config file.",
)
def check(
    modules: tuple[str, ...],
    strict: bool,
    fmt: str,
    exclude: str,
    no_color: bool,
    config_path: str | None,
) -> None:
    """Validate the check metadata declared in MODULES."""
    try:
        config: CheckmetaConfig = load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Error: invalid config: {exc}", err=True)
        sys.exit(2)

    modules = modules or config.modules
    if not modules:
        click.echo("Error: no modules given and none configured", err=True)
        sys.exit(2)

    excluded = {n.strip() for n in exclude.split(",") if n.strip()} if exclude else None

    try:
        report = run_check(modules, config=config, exclude=excluded)
    except LoadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if fmt == "json":
        click.echo(format_json(report))
    else:
        click.echo(format_text(report, no_color=no_color))

    if report.failures or (strict and report.empty_modules):
        sys.exit(1)


@cli.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--no-color", is_flag=True, envvar="NO_COLOR", help="Disable ANSI colors.")
def policies(fmt: str, no_color: bool) -> None:
    """List link and suppression policies."""
    if fmt == "json":
        click.echo(format_policies_json())
    else:
        click.echo(format_policies_text(no_color=no_color))
