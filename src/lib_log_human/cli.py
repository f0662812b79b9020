"""Click command group exposing metadata and a router demonstration.

Purpose
-------
Give packaging smoke tests and humans a way to see the three verbosity
modes in action: ``demo`` installs a terminal router and logs one record per
severity, ``-v`` raising the verbosity the way host CLIs are expected to.

Contents
--------
* :func:`cli` - root group with ``--use-dotenv`` and ``--version``.
* :func:`info` / :func:`demo` - subcommands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import click

from . import __init__conf__, summary_info
from . import config as config_module
from .domain import TRACE, ColourChoice, VerbosityMode
from .runtime import LoggerAlreadyInstalled, install, shutdown, terminal

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

DEMO_MESSAGES = (
    (logging.ERROR, "This is an error!"),
    (logging.WARNING, "This is a warning!"),
    (logging.INFO, "This is an info message!"),
    (logging.DEBUG, "This is a debug message!"),
    (TRACE, "This is a trace message!"),
)


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None, version: bool) -> None:
    """Human-friendly log router."""

    if config_module.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()
    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CONTEXT_SETTINGS)
def info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", "verbosity", count=True, help="Repeat to raise verbosity (debug, full).")
@click.option(
    "--color",
    "color",
    type=click.Choice([choice.value for choice in ColourChoice], case_sensitive=False),
    default=None,
    help="Colour policy for both terminal sinks (default: auto, or LOG_COLOR).",
)
def demo(verbosity: int, color: str | None) -> None:
    """Install a terminal router and log one message per severity."""

    if verbosity:
        mode = VerbosityMode.from_verbosity_count(verbosity)
    else:
        mode = config_module.resolve_mode(None)
    choice = ColourChoice.from_name(color) if color else config_module.resolve_colour(None)
    try:
        install(terminal(mode, colour=choice))
    except LoggerAlreadyInstalled as exc:
        click.echo(f"WARNING: Failed to initialize logger: {exc} (no logging enabled for this session)", err=True)
        return
    try:
        logger = logging.getLogger(__name__)
        for level, message in DEMO_MESSAGES:
            logger.log(level, message)
    finally:
        shutdown()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "demo", "info", "main"]
