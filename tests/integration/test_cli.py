from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from zipit.cli import cli
from zipit.utils.archive import read_archive


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


def test_cli_create_and_list(fixtures_dir, tmp_path):
    out = tmp_path / "bundle.zip"
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["create", "directory", "file.js", "--inline", "notes.txt=hello", "--cwd", str(fixtures_dir), "-o", str(out)],
    )

    assert result.exit_code == 0, result.output
    assert "Wrote" in result.output
    members = read_archive(out.read_bytes())
    assert members[0].name == "directory/"
    assert [m.name for m in members][-2:] == ["file.js", "notes.txt"]
    assert members[-1].contents == b"hello"

    listing = runner.invoke(cli, ["list", str(out)])
    assert listing.exit_code == 0, listing.output
    lines = listing.output.splitlines()
    assert "directory/" in lines
    assert "notes.txt\t5" in lines


def test_cli_create_reports_missing_input(tmp_path):
    result = CliRunner().invoke(cli, ["create", "missing.txt", "--cwd", str(tmp_path), "-o", str(tmp_path / "o.zip")])

    assert result.exit_code == 1
    assert "Failed to build archive" in result.output
    assert not (tmp_path / "o.zip").exists()


def test_cli_create_requires_an_input(tmp_path):
    result = CliRunner().invoke(cli, ["create", "-o", str(tmp_path / "o.zip")])

    assert result.exit_code != 0
    assert "at least one INPUT" in result.output


def test_cli_rejects_malformed_inline(tmp_path):
    result = CliRunner().invoke(cli, ["create", "--inline", "no-separator", "-o", str(tmp_path / "o.zip")])

    assert result.exit_code != 0
    assert "NAME=DATA" in result.output


def test_cli_env_info_reflects_environment(monkeypatch):
    monkeypatch.setenv("ZIPIT_COMPRESSION", "STORE")
    monkeypatch.setenv("ZIPIT_MAX_WORKERS", "3")

    result = CliRunner().invoke(cli, ["env-info"])

    assert result.exit_code == 0, result.output
    assert "COMPRESSION:    STORE" in result.output
    assert "MAX_WORKERS:    3" in result.output
