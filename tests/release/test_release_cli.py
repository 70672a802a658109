"""Tests for the apizza-release CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from apizza.release.cli import release
from apizza.release.errors import ReleaseExistsError, ReleaseNotFoundError


@pytest.fixture
def gh() -> MagicMock:
    with patch("apizza.release.cli.GitHubClient") as client_cls:
        yield client_cls.return_value


class TestBuild:
    def test_build_writes_archives(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            release, ["--release-dir", str(tmp_path), "build", "--version", "1.0.0"]
        )
        assert result.exit_code == 0, result.output
        assert "apizza-1.0.0-linux.pyz" in result.output
        assert len(list(tmp_path.glob("*.pyz"))) == 3


class TestNew:
    def test_publishes(self, cli_runner: CliRunner, gh: MagicMock, tmp_path: Path) -> None:
        gh.tags.return_value = ["v0.1.0"]
        gh.create_release.return_value = {"id": 1, "html_url": "https://example.com/r/1"}
        result = cli_runner.invoke(
            release,
            ["--token", "t", "--release-dir", str(tmp_path), "new", "v0.2.0", "-d", "notes"],
        )
        assert result.exit_code == 0, result.output
        gh.create_release.assert_called_once_with(
            "v0.2.0", title=None, body="notes", draft=False, prerelease=False
        )
        assert gh.upload_asset.call_count == 3
        assert "https://example.com/r/1" in result.output
        gh.close.assert_called_once()

    def test_existing_tag(self, cli_runner: CliRunner, gh: MagicMock, tmp_path: Path) -> None:
        gh.tags.return_value = ["v0.2.0"]
        result = cli_runner.invoke(
            release, ["--token", "t", "--release-dir", str(tmp_path), "new", "v0.2.0"]
        )
        assert result.exit_code == 1
        assert "already exists" in result.output
        gh.create_release.assert_not_called()

    def test_release_exists(self, cli_runner: CliRunner, gh: MagicMock, tmp_path: Path) -> None:
        gh.tags.return_value = []
        gh.create_release.side_effect = ReleaseExistsError("v0.2.0")
        result = cli_runner.invoke(
            release, ["--token", "t", "--release-dir", str(tmp_path), "new", "v0.2.0"]
        )
        assert result.exit_code == 1
        assert "release 'v0.2.0' already exists" in result.output
        gh.upload_asset.assert_not_called()

    def test_requires_token(
        self, cli_runner: CliRunner, gh: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        result = cli_runner.invoke(release, ["new", "v0.2.0"])
        assert result.exit_code == 2
        assert "token" in result.output

    def test_token_from_env(
        self, cli_runner: CliRunner, gh: MagicMock, tmp_path: Path
    ) -> None:
        gh.tags.return_value = []
        gh.create_release.return_value = {"id": 1}
        result = cli_runner.invoke(
            release,
            ["--release-dir", str(tmp_path), "new", "v0.3.0"],
            env={"GITHUB_TOKEN": "from-env"},
        )
        assert result.exit_code == 0, result.output


class TestRemove:
    def test_removes(self, cli_runner: CliRunner, gh: MagicMock) -> None:
        result = cli_runner.invoke(release, ["--token", "t", "remove", "v0.1.0"])
        assert result.exit_code == 0
        gh.delete_release.assert_called_once_with("v0.1.0")
        assert "removed v0.1.0" in result.output

    def test_not_found(self, cli_runner: CliRunner, gh: MagicMock) -> None:
        gh.delete_release.side_effect = ReleaseNotFoundError("v9.9.9")
        result = cli_runner.invoke(release, ["--token", "t", "remove", "v9.9.9"])
        assert result.exit_code == 1
        assert "could not find release" in result.output
