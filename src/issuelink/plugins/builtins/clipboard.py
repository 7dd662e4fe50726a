"""Built-in plugin that copies resolved links to the system clipboard.

Pipes the URL into the first clipboard program found on PATH. A missing
program or a failing copy is logged and never interrupts resolution.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from issuelink.plugins.hookspecs import hookimpl

logger = logging.getLogger(__name__)

# Tried in order; the first one on PATH wins.
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip.exe",),
)


class ClipboardPlugin:
    """Copy each resolved URL to the clipboard when enabled."""

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled

    @hookimpl
    def post_resolve(self, issue_id: str, url: str) -> None:
        if not self._enabled:
            return
        command = self._find_command()
        if command is None:
            logger.warning("No clipboard program found; %s not copied", url)
            return
        try:
            subprocess.run(
                list(command),
                input=url,
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.warning("%s failed: %s", command[0], exc)
            return
        logger.debug("Copied %s for %s with %s", url, issue_id, command[0])

    @staticmethod
    def _find_command() -> tuple[str, ...] | None:
        for command in CLIPBOARD_COMMANDS:
            if shutil.which(command[0]):
                return command
        return None
