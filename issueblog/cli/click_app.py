"""CLI entrypoint."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from issueblog.cli.commands.build import build_command
from issueblog.cli.types import AppEnv
from issueblog.lib.log import configure_logging
from issueblog.version import ISSUEBLOG_VERSION


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Log debug events (skipped issues, rewritten links)")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines on stderr")
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Path to issueblog.json")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, json_logs: bool, config_path: Optional[Path]) -> None:
    """Publish a GitHub repository's issues as a static blog."""
    configure_logging(verbose=verbose, json_logs=json_logs)
    ctx.obj = AppEnv(config_path=config_path, verbose=verbose)


@cli.command("version")
def version_command() -> None:
    """Print the issueblog version."""
    click.echo(ISSUEBLOG_VERSION)


cli.add_command(build_command)


def main() -> None:
    cli()


__all__ = ["cli", "main"]
