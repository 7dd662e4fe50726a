"""Tests for the format_result dispatcher and the per-op renderers."""

import json

from issuelink.output.formatters import OutputSettings, format_result
from issuelink.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg, detail={"issue": "#1"}),
    )


def _link() -> ServiceResult:
    return _ok(
        "get_link",
        issue="#12",
        url="https://github.com/acme/widgets/issues/12",
        source="remote",
        issue_from="argument",
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_link(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "get_link"
        assert data["data"]["url"] == "https://github.com/acme/widgets/issues/12"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_link(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["ok"] is True

    def test_json_mode_error(self) -> None:
        output = format_result(_err("get_link", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"


class TestFormatResultQuiet:
    def test_quiet_link_is_url_only(self) -> None:
        output = format_result(_link(), settings=OutputSettings(quiet=True))
        assert output == "https://github.com/acme/widgets/issues/12"

    def test_quiet_branch_issue(self) -> None:
        result = _ok("branch_issue", branch="ABC-1-x", issue="ABC-1")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "ABC-1"

    def test_quiet_linkify_is_text(self) -> None:
        result = _ok("linkify", text="[#1](u)", links=[], count=1)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "[#1](u)"

    def test_quiet_rules(self) -> None:
        result = _ok(
            "list_rules",
            default_pattern="#[0-9]+",
            items=[{"index": 1, "pattern": "A-[0-9]+", "template": "https://a/%s"}],
            count=1,
        )
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output == "A-[0-9]+\thttps://a/%s"

    def test_quiet_error(self) -> None:
        output = format_result(_err("get_link", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultHuman:
    def test_link(self) -> None:
        output = format_result(_link())
        assert "OK" in output
        assert "get_link" in output
        assert "https://github.com/acme/widgets/issues/12" in output
        assert "source" not in output

    def test_status_and_field_layout(self) -> None:
        lines = format_result(_link()).splitlines()
        assert lines[0] == "OK  get_link"
        assert lines[1] == "  issue: #12"
        assert lines[2] == "  url: https://github.com/acme/widgets/issues/12"

    def test_error_layout(self) -> None:
        lines = format_result(_err("get_link", "Bad")).splitlines()
        assert lines == ["ERROR  get_link", "  Bad"]

    def test_link_verbose_shows_source(self) -> None:
        output = format_result(_link(), settings=OutputSettings(verbose=True))
        assert "source: remote" in output

    def test_long_url_not_wrapped(self) -> None:
        url = "https://tracker.example.com/" + "x" * 200
        output = format_result(_ok("get_link", issue="#1", url=url))
        assert url in output

    def test_linkify_text_verbatim(self) -> None:
        text = "a\t[#1](https://t/1)\n" + "y" * 300
        output = format_result(_ok("linkify", text=text, links=[], count=1))
        assert output == text

    def test_rules_table_keeps_brackets(self) -> None:
        result = _ok(
            "list_rules",
            default_pattern="#[0-9]+",
            items=[{"index": 1, "pattern": "[A-Z]+-[0-9]+", "template": "https://a/%s"}],
            count=1,
        )
        output = format_result(result)
        assert "[A-Z]+-[0-9]+" in output
        assert "#[0-9]+" in output

    def test_rules_empty(self) -> None:
        result = _ok("list_rules", default_pattern="#[0-9]+", items=[], count=0)
        assert "no rules configured" in format_result(result)

    def test_error(self) -> None:
        output = format_result(_err("get_link", "cannot build a link for issue '#1'"))
        assert "ERROR" in output
        assert "cannot build a link for issue '#1'" in output

    def test_generic_op(self) -> None:
        output = format_result(_ok("other", key="val"))
        assert "key: val" in output
