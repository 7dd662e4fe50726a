"""Subcommand modules for issuelink.

Provides register_commands() which uses deferred imports to keep
``issuelink --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from issuelink.commands.link import branch, link
    from issuelink.commands.linkify import linkify
    from issuelink.commands.rules import rules

    cli.add_command(link)
    cli.add_command(branch)
    cli.add_command(linkify)
    cli.add_command(rules)
