"""Test helpers shared across modules: real git repos and a fake reader."""

from __future__ import annotations

import subprocess
from pathlib import Path


def git(cwd: Path, *args: str) -> str:
    """Run git in *cwd*, asserting success; returns stripped stdout."""
    result = subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test",
            "-c",
            "user.email=test@test.com",
            *args,
        ],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def init_repo(
    path: Path,
    *,
    branch: str = "main",
    remote_url: str | None = None,
    track: bool = True,
) -> Path:
    """Initialize a repo on *branch*, optionally tracking an ``origin`` remote."""
    path.mkdir(parents=True, exist_ok=True)
    git(path, "init", "--quiet")
    git(path, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
    if remote_url is not None:
        git(path, "config", "remote.origin.url", remote_url)
        if track:
            git(path, "config", f"branch.{branch}.remote", "origin")
    return path


class FakeGitReader:
    """In-memory GitReader; counts remote lookups for short-circuit tests."""

    def __init__(
        self,
        *,
        branch: str | None = None,
        remote_url: str | None = None,
        config: dict[str, str] | None = None,
    ) -> None:
        self.branch = branch
        self.remote_url = remote_url
        self.config = dict(config or {})
        self.remote_lookups = 0

    def current_branch(self) -> str | None:
        return self.branch

    def config_value(self, key: str) -> str | None:
        return self.config.get(key)

    def remote_url_for_current_branch(self) -> str | None:
        self.remote_lookups += 1
        return self.remote_url
