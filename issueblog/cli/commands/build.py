"""Static blog build command."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import click

if TYPE_CHECKING:
    from issueblog.cli.types import AppEnv


@click.command("build")
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output directory (default: output_dir from the config)",
)
@click.option(
    "--theme",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Theme directory (default: theme_dir from the config)",
)
@click.option(
    "--token",
    default=None,
    help="GitHub token (default: $GITHUB_TOKEN)",
)
@click.option(
    "--issues-file",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Build from a saved JSON array of issues instead of the GitHub API",
)
@click.pass_obj
def build_command(
    env: AppEnv,
    output: Optional[Path],
    theme: Optional[Path],
    token: Optional[str],
    issues_file: Optional[Path],
) -> None:
    """Build the blog from the repository's issues.

    \b
    Examples:
        issueblog build                            # Use ./issueblog.json
        issueblog --config blog.json build -o out  # Custom config and output
        issueblog build --issues-file issues.json  # Offline build
    """
    from issueblog.config import load_config, load_theme
    from issueblog.errors import IssueBlogError
    from issueblog.github import GitHubIssueSource, load_issues_file
    from issueblog.site import SiteBuilder

    try:
        config = load_config(env.config_path)
        if output is not None:
            config.output_dir = output
        if theme is not None:
            config.theme_dir = theme
        theme_config = load_theme(config.theme_dir)

        if issues_file is not None:
            raw_issues = load_issues_file(issues_file)
        else:
            repo = config.repository
            with GitHubIssueSource(
                repo.owner, repo.name, token=token or os.environ.get("GITHUB_TOKEN")
            ) as source:
                raw_issues = source.fetch()

        click.echo(f"Building {config.repository.full_name} to {config.output_dir}...")
        result = SiteBuilder(config, theme_config).build(raw_issues)
    except IssueBlogError as exc:
        click.echo(f"Error building site: {exc}", err=True)
        raise click.Abort() from exc

    click.echo(
        "Site generated: "
        f"{result.issues} issues, "
        f"{result.label_pages} label pages, "
        f"{result.custom_pages} custom pages"
    )
    click.echo(
        "\nTo preview locally:\n"
        f"  python -m http.server -d {config.output_dir}"
    )


__all__ = ["build_command"]
