"""Commands: resolve an issue link, or find the issue in the branch name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from issuelink.commands._base import IssueLinkCommand
from issuelink.config.models import IssueRule

if TYPE_CHECKING:
    from issuelink.commands._context import AppContext


def _parse_rules(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> tuple[IssueRule, ...]:
    rules: list[IssueRule] = []
    for value in values:
        try:
            rules.append(IssueRule.parse(value))
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
    return tuple(rules)


@click.command(
    cls=IssueLinkCommand,
    examples="""\
  issuelink link
  issuelink link '#42'
  issuelink link JIRA-1234 --rule 'JIRA-[0-9]+=https://jira.example.com/browse/%s'
  issuelink link '#42' --open
  issuelink -q link | pbcopy""",
)
@click.argument("issue_id", required=False)
@click.option(
    "--rule",
    "rules",
    multiple=True,
    callback=_parse_rules,
    metavar="PATTERN=TEMPLATE",
    help="Extra rule tried after the configured ones. Repeatable.",
)
@click.option(
    "--open/--no-open",
    "open_link",
    default=None,
    help="Open the link in the browser (default from [link] open).",
)
@click.option(
    "--copy/--no-copy",
    "copy_link",
    default=None,
    help="Copy the link to the clipboard (default from [link] copy).",
)
@click.pass_obj
def link(
    app: AppContext,
    issue_id: str | None,
    rules: tuple[IssueRule, ...],
    open_link: bool | None,
    copy_link: bool | None,
) -> None:
    """Print the tracker URL for ISSUE_ID.

    Without ISSUE_ID the issue is taken from the current branch name.
    """
    plugins = app.plugins(open_link=open_link, copy_link=copy_link)
    svc = app.link_service(extra_rules=rules, plugins=plugins)
    app.emit(svc.get_link(issue_id))


@click.command(
    cls=IssueLinkCommand,
    examples="""\
  issuelink branch
  issuelink -q branch""",
)
@click.pass_obj
def branch(app: AppContext) -> None:
    """Show the issue ID found in the current branch name."""
    app.emit(app.link_service().get_branch_issue())
