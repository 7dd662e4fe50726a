"""Root CLI group for issuelink with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from issuelink import __version__
from issuelink.commands import register_commands
from issuelink.commands._context import AppContext
from issuelink.config.settings import IssueLinkSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="issuelink")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the link, ID or text.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-C",
    "--repo",
    "repo_root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run git lookups in this directory instead of the current one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    repo_root: Path | None,
) -> None:
    """issuelink — turn issue IDs and branch names into tracker URLs."""
    settings = IssueLinkSettings.from_cli(
        config_path=config_path,
        repo_root=repo_root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
