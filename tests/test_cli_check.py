"""Tests for check and rules CLI commands."""

import json
from pathlib import Path

from codescopes.__main__ import cli


def test_check_valid_file(repo_root: Path, write_codescopes, cli_runner) -> None:
    write_codescopes()
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "check"])
    assert result.exit_code == 0
    assert "Rules" in result.output
    assert "5" in result.output


def test_check_docs_file(repo_root: Path, write_codescopes, cli_runner) -> None:
    write_codescopes("* core\n", directory="docs")
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "check"])
    assert result.exit_code == 0
    assert "docs/CODESCOPES" in result.output


def test_check_empty_file_warns(repo_root: Path, write_codescopes, cli_runner) -> None:
    write_codescopes("# nothing yet\n")
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "check"])
    assert result.exit_code == 0
    assert "unscoped" in result.output


def test_check_malformed_line(repo_root: Path, write_codescopes, cli_runner) -> None:
    write_codescopes("* core\n\n*.yaml\n")
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "check"])
    assert result.exit_code == 1
    assert "CODESCOPES:3" in result.output
    assert "*.yaml" in result.output


def test_check_missing_file(repo_root: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "check"])
    assert result.exit_code == 1
    assert "No CODESCOPES file found" in result.output


def test_check_invalid_settings(
    repo_root: Path, write_codescopes, settings_path: Path, cli_runner
) -> None:
    write_codescopes()
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(json.dumps({"filename": 1}), encoding="utf-8")
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "check"])
    assert result.exit_code != 0
    assert "Invalid settings" in result.output


def test_check_uses_config_option(repo_root: Path, tmp_path: Path, cli_runner) -> None:
    (repo_root / "SCOPES").write_text("* core\n", encoding="utf-8")
    config = tmp_path / "scopes.json"
    config.write_text(json.dumps({"filename": "SCOPES"}), encoding="utf-8")
    result = cli_runner.invoke(
        cli, ["--root", str(repo_root), "--config", str(config), "check"]
    )
    assert result.exit_code == 0


def test_rules_list(repo_root: Path, write_codescopes, cli_runner) -> None:
    write_codescopes()
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "rules"])
    assert result.exit_code == 0
    assert "/pages/login" in result.output
    assert "onboarding" in result.output


def test_rules_empty(repo_root: Path, write_codescopes, cli_runner) -> None:
    write_codescopes("")
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "rules"])
    assert result.exit_code == 0
    assert "No rules" in result.output


def test_rules_malformed_is_click_error(
    repo_root: Path, write_codescopes, cli_runner
) -> None:
    write_codescopes("/docs/\n")
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "rules"])
    assert result.exit_code == 1
    assert "Malformed rule" in result.output


def test_check_invalid_utf8(repo_root: Path, cli_runner) -> None:
    (repo_root / "CODESCOPES").write_bytes(b"* core\n\xff\xfe bad\n")
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "check"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Cannot read CODESCOPES file" in result.output


def test_rules_invalid_utf8_is_click_error(repo_root: Path, cli_runner) -> None:
    (repo_root / "CODESCOPES").write_bytes(b"\xff* core\n")
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "rules"])
    assert result.exit_code == 1
    assert "not valid UTF-8" in result.output


def test_check_byte_order_mark(repo_root: Path, cli_runner) -> None:
    (repo_root / "CODESCOPES").write_bytes("# scopes\n* core\n".encode("utf-8-sig"))
    result = cli_runner.invoke(cli, ["--root", str(repo_root), "check"])
    assert result.exit_code == 0
