"""Issue rule matching — pick a rule for an ID and find IDs in branch names.

Pure functions over :class:`~issuelink.config.models.IssueRule` and plain
regex strings. No git access here; callers hand in the branch name.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from issuelink.config.models import IssueRule


def match_rule(issue_id: str, rules: Sequence[IssueRule]) -> IssueRule | None:
    """Return the first rule whose pattern occurs anywhere in *issue_id*."""
    for rule in rules:
        if rule.regex.search(issue_id):
            return rule
    return None


def _match_at_start(regex: re.Pattern[str], branch: str) -> str | None:
    m = regex.match(branch)
    if m and m.group(0):
        return m.group(0)
    # feature/ABC-42-fix: the last segment counts as a start too
    slash = branch.rfind("/")
    if slash != -1:
        m = regex.match(branch, slash + 1)
        if m and m.group(0):
            return m.group(0)
    return None


def _match_at_end(regex: re.Pattern[str], branch: str) -> str | None:
    # Earliest start wins so the longest suffix match is returned.
    for start in range(len(branch)):
        m = regex.fullmatch(branch, start)
        if m:
            return m.group(0)
    return None


def extract_from_branch(branch: str | None, patterns: Iterable[str]) -> str | None:
    """Guess an issue ID from *branch* using *patterns* in order.

    A pattern only counts when its match sits at an edge of the branch
    name: at the very start (or the start of the last ``/`` segment), or
    ending exactly at the end. ``ABC-42-fix`` and ``fix/ABC-42`` yield
    ``ABC-42``; ``x-ABC-42-y`` yields None.
    """
    if not branch:
        return None
    for pattern in patterns:
        regex = re.compile(pattern)
        found = _match_at_start(regex, branch) or _match_at_end(regex, branch)
        if found:
            return found
    return None
