"""Read-only git metadata via the git command line.

All git subprocess calls are wrapped in try/except so a missing git binary,
a non-repo directory or an unset key never interrupts link resolution:
every failure comes back as None.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class GitReader(Protocol):
    """The git facts link resolution needs."""

    def current_branch(self) -> str | None: ...

    def config_value(self, key: str) -> str | None: ...

    def remote_url_for_current_branch(self) -> str | None: ...


class SubprocessGitReader:
    """GitReader backed by ``git`` subprocesses run in *repo_root*."""

    def __init__(self, repo_root: Path | None = None) -> None:
        self._repo_root = repo_root

    def current_branch(self) -> str | None:
        """Short name of the checked-out branch; None when detached."""
        return self._read("symbolic-ref", "--quiet", "--short", "HEAD")

    def config_value(self, key: str) -> str | None:
        """Single value of *key* from git config, or None if unset."""
        return self._read("config", "--get", key)

    def remote_url_for_current_branch(self) -> str | None:
        """URL of the remote the current branch tracks.

        Follows ``branch.<name>.remote`` to ``remote.<remote>.url``.
        """
        branch = self.current_branch()
        if branch is None:
            return None
        remote = self.config_value(f"branch.{branch}.remote")
        if remote is None:
            logger.debug("Branch %s has no upstream remote", branch)
            return None
        return self.config_value(f"remote.{remote}.url")

    # ------------------------------------------------------------------
    # Git subprocess helpers
    # ------------------------------------------------------------------

    def _run_git(self, *args: str) -> subprocess.CompletedProcess[str]:
        """Run a git command in the repo root. Raises on failure."""
        return subprocess.run(
            ["git", *args],
            cwd=self._repo_root,
            capture_output=True,
            text=True,
            check=True,
        )

    def _read(self, *args: str) -> str | None:
        """Stripped stdout of a git command, or None on any failure."""
        try:
            result = self._run_git(*args)
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.debug("git %s failed: %s", " ".join(args), exc)
            return None
        value = result.stdout.strip()
        return value or None
