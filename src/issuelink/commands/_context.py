"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the git reader, plugin manager and link
service on demand, and centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from issuelink.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from issuelink.config.models import IssueRule
    from issuelink.config.settings import IssueLinkSettings
    from issuelink.plugins.manager import PluginManager
    from issuelink.services.link import LinkService
    from issuelink.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Nothing touches git
    until a command asks for a service, so ``--help`` and ``--version``
    stay side-effect free.
    """

    def __init__(self, settings: IssueLinkSettings) -> None:
        self.settings = settings

        from issuelink.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def plugins(
        self,
        *,
        open_link: bool | None = None,
        copy_link: bool | None = None,
    ) -> PluginManager:
        """Plugin manager with entry-point plugins and the built-ins.

        *open_link* / *copy_link* override the ``[link]`` toggles when given.
        """
        from issuelink.plugins.builtins.browser import BrowserPlugin
        from issuelink.plugins.builtins.clipboard import ClipboardPlugin
        from issuelink.plugins.manager import PluginManager

        link = self.settings.link
        manager = PluginManager()
        manager.discover_and_load()
        manager.register_plugin(
            ClipboardPlugin(enabled=link.copy_link if copy_link is None else copy_link),
            name="clipboard",
        )
        manager.register_plugin(
            BrowserPlugin(enabled=link.open_link if open_link is None else open_link),
            name="browser",
        )
        return manager

    def link_service(
        self,
        *,
        extra_rules: tuple[IssueRule, ...] = (),
        plugins: PluginManager | None = None,
    ) -> LinkService:
        """LinkService over the repo root, with *extra_rules* appended."""
        from issuelink.infrastructure.git import SubprocessGitReader
        from issuelink.services.link import LinkService

        config = self.settings.link.with_rules(extra_rules)
        return LinkService(config, SubprocessGitReader(self.settings.repo_root), plugins)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
