"""Command: rewrite issue references in a document as links."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from issuelink.commands._base import IssueLinkCommand
from issuelink.domain.markup import STYLES

if TYPE_CHECKING:
    from issuelink.commands._context import AppContext


@click.command(
    cls=IssueLinkCommand,
    examples="""\
  issuelink linkify CHANGELOG.md
  issuelink linkify notes.org --style org
  git log -1 --format=%B | issuelink linkify""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--style",
    type=click.Choice(STYLES),
    default="markdown",
    show_default=True,
    help="Link markup to produce.",
)
@click.pass_obj
def linkify(app: AppContext, source: TextIO, style: str) -> None:
    """Turn issue references in SOURCE (default: stdin) into links.

    References that cannot be resolved and text already inside a link
    are left unchanged.
    """
    text = source.read()
    app.emit(app.link_service().linkify_text(text, style=style))
