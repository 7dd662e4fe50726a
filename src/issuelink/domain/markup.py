"""Issue reference spans and link markup.

Finds issue references in free text and rewrites them as Markdown or Org
links. Spans already inside a link are left alone. Resolution is injected
as a callable so this module stays free of git and config access.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

# [text](url), ![alt](url), <https://...>, [[url][text]] and [[url]]
_PROTECTED_PATTERNS = (
    re.compile(r"!?\[[^\]]*\]\([^)]*\)"),
    re.compile(r"\[\[[^\]]+\](?:\[[^\]]*\])?\]"),
    re.compile(r"<[a-zA-Z][a-zA-Z0-9+.-]*:[^>\s]*>"),
    re.compile(r"https?://\S+"),
)

STYLES = ("markdown", "org")


@dataclass(frozen=True)
class IssueSpan:
    """An activatable issue reference inside a text."""

    start: int
    end: int
    text: str


def _protected_spans(text: str) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    for pattern in _PROTECTED_PATTERNS:
        spans.extend((m.start(), m.end()) for m in pattern.finditer(text))
    return spans


def find_issue_spans(text: str, patterns: Iterable[str]) -> list[IssueSpan]:
    """Return non-overlapping issue references in *text*, ordered by position.

    Patterns are tried in order; on overlap the earlier pattern keeps its
    span. Empty matches and matches inside existing links are skipped.
    """
    protected = _protected_spans(text)

    def _overlaps(start: int, end: int, taken: Iterable[tuple[int, int]]) -> bool:
        return any(start < te and ts < end for ts, te in taken)

    found: list[IssueSpan] = []
    for pattern in patterns:
        for m in re.finditer(pattern, text):
            start, end = m.span()
            if start == end:
                continue
            if _overlaps(start, end, protected):
                continue
            if _overlaps(start, end, ((s.start, s.end) for s in found)):
                continue
            found.append(IssueSpan(start=start, end=end, text=m.group(0)))
    found.sort(key=lambda span: span.start)
    return found


def format_link(text: str, url: str, style: str = "markdown") -> str:
    """Render a single link in the given markup *style*."""
    if style == "markdown":
        return f"[{text}]({url})"
    if style == "org":
        return f"[[{url}][{text}]]"
    msg = f"unknown link style {style!r}, expected one of {', '.join(STYLES)}"
    raise ValueError(msg)


def linkify(
    text: str,
    patterns: Iterable[str],
    resolve: Callable[[str], str | None],
    *,
    style: str = "markdown",
) -> tuple[str, list[tuple[str, str]]]:
    """Rewrite issue references in *text* as links.

    Each span found by :func:`find_issue_spans` is passed to *resolve*;
    references it cannot resolve stay as plain text.

    Returns the rewritten text and the ``(issue_id, url)`` pairs linked.
    """
    if style not in STYLES:
        msg = f"unknown link style {style!r}, expected one of {', '.join(STYLES)}"
        raise ValueError(msg)
    if not text:
        return text, []

    parts: list[str] = []
    linked: list[tuple[str, str]] = []
    last = 0
    for span in find_issue_spans(text, patterns):
        url = resolve(span.text)
        if url is None:
            continue
        parts.append(text[last : span.start])
        parts.append(format_link(span.text, url, style))
        linked.append((span.text, url))
        last = span.end
    parts.append(text[last:])
    return "".join(parts), linked
