"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, issuelink.toml only contains
overrides. A repository with no config file still resolves links through
the git remote fallback.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

PLACEHOLDER = "%s"


class IssueRule(BaseModel):
    """One ``(pattern, template)`` pair from ``[[link.rules]]``.

    The first rule whose pattern matches an issue ID wins; the ID is
    substituted verbatim into the template's single ``%s``.
    """

    model_config = {"frozen": True}

    pattern: str
    template: str

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            msg = f"invalid pattern {value!r}: {exc}"
            raise ValueError(msg) from exc
        return value

    @field_validator("template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        count = value.count(PLACEHOLDER)
        if count != 1:
            msg = f"template {value!r} must contain exactly one {PLACEHOLDER!r}, found {count}"
            raise ValueError(msg)
        return value

    @property
    def regex(self) -> re.Pattern[str]:
        return re.compile(self.pattern)

    def render(self, issue_id: str) -> str:
        """Substitute *issue_id* into the template."""
        return self.template.replace(PLACEHOLDER, issue_id, 1)

    @classmethod
    def parse(cls, value: str) -> IssueRule:
        """Build a rule from a ``PATTERN=TEMPLATE`` string.

        Splits on the first ``=`` so templates may carry query strings.
        """
        pattern, sep, template = value.partition("=")
        if not sep or not pattern:
            msg = f"expected PATTERN=TEMPLATE, got {value!r}"
            raise ValueError(msg)
        return cls(pattern=pattern, template=template)


# --- issuelink.toml sections ---


class LinkConfig(BaseModel):
    """[link] section.

    ``copy`` and ``open`` are the TOML keys; the attributes carry a
    ``_link`` suffix so they do not shadow :meth:`BaseModel.copy`.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    default_pattern: str = "#[0-9]+"
    rules: tuple[IssueRule, ...] = ()
    copy_link: bool = Field(default=False, alias="copy")
    open_link: bool = Field(default=False, alias="open")

    @field_validator("default_pattern")
    @classmethod
    def _check_default_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            msg = f"invalid default_pattern {value!r}: {exc}"
            raise ValueError(msg) from exc
        return value

    @property
    def patterns(self) -> list[str]:
        """Rule patterns in order, followed by the default pattern."""
        result = [rule.pattern for rule in self.rules]
        if self.default_pattern not in result:
            result.append(self.default_pattern)
        return result

    def with_rules(self, extra: list[IssueRule] | tuple[IssueRule, ...]) -> LinkConfig:
        """Return a copy with *extra* rules appended after the configured ones."""
        if not extra:
            return self
        return self.model_copy(update={"rules": (*self.rules, *extra)})
