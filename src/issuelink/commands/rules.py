"""Command: list the effective issue rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from issuelink.commands._base import IssueLinkCommand

if TYPE_CHECKING:
    from issuelink.commands._context import AppContext


@click.command(
    cls=IssueLinkCommand,
    examples="""\
  issuelink rules
  issuelink --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List configured rules in match order and the default pattern."""
    app.emit(app.link_service().list_rules())
