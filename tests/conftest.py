"""Shared pytest fixtures for issuelink tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from issuelink.config.models import IssueRule, LinkConfig
from tests.helpers import init_repo


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own issuelink and git settings out of tests."""
    for key in list(os.environ):
        if key.startswith("ISSUELINK_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)


@pytest.fixture
def github_repo(tmp_path: Path) -> Path:
    """Repo on ``feature/ABC-42-fix-login`` tracking a GitHub SCP remote."""
    return init_repo(
        tmp_path / "repo",
        branch="feature/ABC-42-fix-login",
        remote_url="git@github.com:acme/widgets.git",
    )


@pytest.fixture
def jira_rule() -> IssueRule:
    return IssueRule(pattern="ABC-[0-9]+", template="https://jira.example.com/browse/%s")


@pytest.fixture
def link_config(jira_rule: IssueRule) -> LinkConfig:
    return LinkConfig(rules=(jira_rule,))
