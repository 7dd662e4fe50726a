"""Tests for config discovery and reading."""

from pathlib import Path

import click
import pytest

from issuelink.config.discovery import (
    CONFIG_FILENAME,
    config_candidates,
    find_config,
    read_config,
)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[link]\ndefault_pattern = "#[0-9]+"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_nearest_file_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        child = tmp_path / "repo"
        child.mkdir()
        (child / CONFIG_FILENAME).write_text("")
        assert find_config(child) == child / CONFIG_FILENAME

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv("ISSUELINK_CONFIG", str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_explicit_beats_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        from_env = tmp_path / "env.toml"
        from_env.write_text("")
        explicit = tmp_path / "flag.toml"
        explicit.write_text("")
        monkeypatch.setenv("ISSUELINK_CONFIG", str(from_env))
        assert find_config(tmp_path, explicit=str(explicit)) == explicit

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("ISSUELINK_CONFIG", str(tmp_path / "nope.toml"))
        with pytest.raises(click.ClickException, match="Config file not found"):
            find_config(tmp_path)

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            find_config(tmp_path, explicit=str(tmp_path / "nope.toml"))


class TestConfigCandidates:
    def test_nearest_first_up_to_root(self, tmp_path: Path) -> None:
        candidates = list(config_candidates(tmp_path))
        assert candidates[0] == tmp_path.resolve() / CONFIG_FILENAME
        assert candidates[-1] == Path(tmp_path.resolve().anchor) / CONFIG_FILENAME


class TestReadConfig:
    def test_reads_rules(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            "[link]\n"
            "open = true\n"
            "[[link.rules]]\n"
            'pattern = "ABC-[0-9]+"\n'
            'template = "https://jira.example.com/browse/%s"\n'
        )
        data = read_config(config_file)
        assert data["link"]["open"] is True
        assert data["link"]["rules"][0]["pattern"] == "ABC-[0-9]+"

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert read_config(config_file) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[link\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            read_config(config_file)

    def test_unreadable_path(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Cannot read"):
            read_config(tmp_path)
