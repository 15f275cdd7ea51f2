"""Tests for the Typer command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from validstring_utils import cli
from validstring_utils.cli import _default_args, app

runner = CliRunner()


class TestDefaultArgs:
    def test_empty_argv_runs_clean(self) -> None:
        assert _default_args([]) == ["clean"]

    def test_options_only_runs_clean(self) -> None:
        assert _default_args(["--suffix", ".tmp"]) == ["clean", "--suffix", ".tmp"]

    def test_explicit_subcommand_kept(self) -> None:
        assert _default_args(["check", "qq", "12345"]) == ["check", "qq", "12345"]


class TestCleanCommand:
    def test_clean_tree(self, maven_tree: Path) -> None:
        result = runner.invoke(app, ["clean", str(maven_tree)])

        assert result.exit_code == 0
        assert f"Cleaning {maven_tree} (suffix '.lastUpdated')" in result.output
        assert "Deleted matching file: " in result.output
        assert "Deleted empty directory: " in result.output
        assert "Deleted 2 files and 3 directories, 0 failures." in result.output
        assert not (maven_tree / "empty").exists()

    def test_custom_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "keep.lastUpdated").write_text("")
        (tmp_path / "drop.part").write_text("")

        result = runner.invoke(app, ["clean", str(tmp_path), "--suffix", ".part"])

        assert result.exit_code == 0
        assert (tmp_path / "keep.lastUpdated").exists()
        assert not (tmp_path / "drop.part").exists()

    def test_root_from_environment(self, maven_tree: Path, monkeypatch) -> None:
        monkeypatch.setenv("VALIDSTRING_CLEAN_ROOT", str(maven_tree))

        result = runner.invoke(app, ["clean"])

        assert result.exit_code == 0
        assert not (maven_tree / "b").exists()

    def test_suffix_from_environment(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "drop.tmp").write_text("")
        (tmp_path / "keep.jar").write_text("")
        monkeypatch.setenv("VALIDSTRING_CLEAN_SUFFIX", ".tmp")

        result = runner.invoke(app, ["clean", str(tmp_path)])

        assert result.exit_code == 0
        assert not (tmp_path / "drop.tmp").exists()

    def test_empty_suffix(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["clean", str(tmp_path), "--suffix", ""])

        assert result.exit_code == 2
        assert "Suffix must not be empty." in result.output

    def test_missing_root_exits_1(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["clean", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Failed to delete directory" in result.output
        assert "1 failures." in result.output


class TestCheckCommand:
    @pytest.mark.parametrize(
        ("kind", "value"),
        [
            ("phone", "13800138000"),
            ("qq", "12345"),
            ("email", "a@b.com"),
            ("chinese", "中文"),
            ("ipv4", "192.168.1.1"),
            ("ipv6", "0:0:0:0:0:0:0:1"),
            ("id_card", "11010519491231002X"),
        ],
    )
    def test_true(self, kind: str, value: str) -> None:
        result = runner.invoke(app, ["check", kind, value])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_false(self) -> None:
        result = runner.invoke(app, ["check", "ipv4", "255.256.255.255"])
        assert result.exit_code == 1
        assert result.output.strip() == "false"

    def test_length_bounds(self) -> None:
        ok = runner.invoke(app, ["check", "length", "abc", "--min", "1", "--max", "5"])
        too_short = runner.invoke(app, ["check", "length", "abc", "--min", "4"])

        assert ok.exit_code == 0
        assert too_short.exit_code == 1

    def test_length_inverted_bounds(self) -> None:
        result = runner.invoke(app, ["check", "length", "abc", "--min", "5", "--max", "1"])
        assert result.exit_code == 2

    def test_unknown_kind(self) -> None:
        result = runner.invoke(app, ["check", "zipcode", "78749"])
        assert result.exit_code == 2
        assert "Unknown kind 'zipcode'" in result.output


class TestEntrypoint:
    def test_bare_options_route_to_clean(self, maven_tree: Path, monkeypatch) -> None:
        monkeypatch.setattr("sys.argv", ["validstring-utils", "--suffix", ".lastUpdated"])
        monkeypatch.setenv("VALIDSTRING_CLEAN_ROOT", str(maven_tree))

        with pytest.raises(SystemExit) as exc_info:
            cli.cli_entrypoint()

        assert exc_info.value.code == 0
        assert not (maven_tree / "empty").exists()

    def test_main_routes_bare_options_to_clean(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "drop.x").write_text("")
        (tmp_path / "keep.jar").write_text("")
        monkeypatch.setattr("sys.argv", ["validstring-utils", "--suffix", ".x"])
        monkeypatch.setenv("VALIDSTRING_CLEAN_ROOT", str(tmp_path))

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 0
        assert not (tmp_path / "drop.x").exists()
