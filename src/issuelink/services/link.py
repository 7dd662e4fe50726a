"""LinkService — issue link operations for the CLI and plugins."""

from __future__ import annotations

import logging

from issuelink.domain.markup import linkify
from issuelink.domain.rules import extract_from_branch
from issuelink.services.base import BaseService
from issuelink.services.resolver import resolve_issue_url, resolve_with_source
from issuelink.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class LinkService(BaseService):
    """Resolve issue links against the configured rules and git remote."""

    def branch_issue(self) -> str | None:
        """Issue ID guessed from the current branch name, if any."""
        branch = self._git.current_branch()
        return extract_from_branch(branch, self._config.patterns)

    def get_branch_issue(self) -> ServiceResult:
        """Report the current branch and the issue ID found in it."""
        op = "branch_issue"
        branch = self._git.current_branch()
        if branch is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="NO_BRANCH", message="not on a branch"),
            )
        issue_id = extract_from_branch(branch, self._config.patterns)
        if issue_id is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="NO_ISSUE",
                    message=f"no issue ID found in branch '{branch}'",
                    detail={"branch": branch},
                ),
            )
        return ServiceResult(ok=True, op=op, data={"branch": branch, "issue": issue_id})

    def resolve(self, issue_id: str | None) -> str | None:
        """URL for *issue_id*, or None. No plugin hooks fire."""
        return resolve_issue_url(issue_id, self._config.rules, self._git)

    def get_link(self, issue_id: str | None = None) -> ServiceResult:
        """Resolve *issue_id* (or the branch's issue) and notify plugins.

        Unresolvable IDs are reported here, once, as a failed result.
        """
        op = "get_link"
        source_of_id = "argument"
        if not issue_id:
            issue_id = self.branch_issue()
            source_of_id = "branch"
        if not issue_id:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="NO_ISSUE",
                    message="no issue ID given and none found in the current branch",
                    detail={"branch": self._git.current_branch()},
                ),
            )

        resolved = resolve_with_source(issue_id, self._config.rules, self._git)
        if resolved is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNRESOLVED",
                    message=f"cannot build a link for issue '{issue_id}'",
                    detail={"issue": issue_id},
                ),
            )

        url, source = resolved
        logger.debug("Resolved %s to %s via %s", issue_id, url, source)
        warnings: list[str] = []
        self._dispatch_event("post_resolve", {"issue_id": issue_id, "url": url}, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "issue": issue_id,
                "url": url,
                "source": source,
                "issue_from": source_of_id,
            },
            warnings=warnings,
        )

    def linkify_text(self, text: str, *, style: str = "markdown") -> ServiceResult:
        """Rewrite issue references in *text* as *style* links."""
        op = "linkify"
        try:
            rendered, linked = linkify(text, self._config.patterns, self.resolve, style=style)
        except ValueError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="INVALID_STYLE", message=str(exc)),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": rendered,
                "links": [{"issue": issue, "url": url} for issue, url in linked],
                "count": len(linked),
            },
        )

    def list_rules(self) -> ServiceResult:
        """Effective rules in match order, plus the default pattern."""
        return ServiceResult(
            ok=True,
            op="list_rules",
            data={
                "default_pattern": self._config.default_pattern,
                "items": [
                    {"index": i, "pattern": rule.pattern, "template": rule.template}
                    for i, rule in enumerate(self._config.rules, start=1)
                ],
                "count": len(self._config.rules),
            },
        )
