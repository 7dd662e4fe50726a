"""Built-in plugin that opens resolved links in the default browser."""

from __future__ import annotations

import logging

import click

from issuelink.plugins.hookspecs import hookimpl

logger = logging.getLogger(__name__)


class BrowserPlugin:
    """Open each resolved URL via the system URI handler when enabled."""

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled

    @hookimpl
    def post_resolve(self, issue_id: str, url: str) -> None:
        if not self._enabled:
            return
        code = click.launch(url)
        if code != 0:
            logger.warning("Opening %s for %s exited with %d", url, issue_id, code)
        else:
            logger.debug("Opened %s", url)
