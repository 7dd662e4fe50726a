"""Pluggy hook specifications for issuelink.

Plugins receive every resolved link; the built-in browser and clipboard
plugins are implemented on the same hook.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("issuelink")
hookimpl = pluggy.HookimplMarker("issuelink")


class IssueLinkHookSpec:
    """Hook specifications for the issuelink plugin system."""

    @hookspec
    def post_resolve(self, issue_id: str, url: str) -> None:
        """Called after an issue ID resolves to a URL."""
