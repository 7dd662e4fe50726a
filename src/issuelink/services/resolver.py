"""Issue URL resolution — configured rules first, git remote second.

The resolver is a pure function of its inputs: the issue ID, the ordered
rules and whatever the :class:`GitReader` reports about the remote.
Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal

from issuelink.domain.remote import RemoteURL, owner_and_repo, parse_remote
from issuelink.domain.rules import match_rule

if TYPE_CHECKING:
    from issuelink.config.models import IssueRule
    from issuelink.infrastructure.git import GitReader

logger = logging.getLogger(__name__)

Source = Literal["rule", "remote"]


def issue_url_for_remote(remote: RemoteURL, issue_id: str) -> str | None:
    """Build ``https://host/owner/repo/issues/<id>`` from a parsed remote.

    A leading ``#`` on the ID is dropped so ``#123`` lands on the issue
    page rather than a fragment. The port is kept for web remotes only;
    an ssh port says nothing about where the web UI lives.
    """
    located = owner_and_repo(remote.path)
    if located is None:
        return None
    owner, repo = located
    host = remote.netloc if remote.is_web else remote.host
    number = issue_id[1:] if issue_id.startswith("#") else issue_id
    if not number:
        return None
    return f"https://{host}/{owner}/{repo}/issues/{number}"


def resolve_with_source(
    issue_id: str | None,
    rules: Sequence[IssueRule],
    git: GitReader,
) -> tuple[str, Source] | None:
    """Resolve *issue_id* and report whether a rule or the remote produced it."""
    if not issue_id:
        return None

    rule = match_rule(issue_id, rules)
    if rule is not None:
        logger.debug("Issue %s matched rule %s", issue_id, rule.pattern)
        return rule.render(issue_id), "rule"

    raw_remote = git.remote_url_for_current_branch()
    remote = parse_remote(raw_remote)
    if remote is None:
        logger.debug("No usable remote for issue %s (remote=%r)", issue_id, raw_remote)
        return None

    url = issue_url_for_remote(remote, issue_id)
    if url is None:
        logger.debug("Remote path %r has no owner/repo", remote.path)
        return None
    return url, "remote"


def resolve_issue_url(
    issue_id: str | None,
    rules: Sequence[IssueRule],
    git: GitReader,
) -> str | None:
    """Return the tracker URL for *issue_id*, or None when unresolvable."""
    resolved = resolve_with_source(issue_id, rules, git)
    if resolved is None:
        return None
    return resolved[0]
