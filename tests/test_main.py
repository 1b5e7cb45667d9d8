"""
Tests for the command line entry point.
"""

import re
from datetime import datetime
from unittest.mock import MagicMock, patch

from git_heatmap.git_client import GitClientError
from git_heatmap.main import main

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _client_with(times):
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    client.author_commit_times.return_value = iter(times)
    return client


class TestUsage:
    """Tests for argument handling."""

    def test_missing_arguments(self, capsys):
        assert main([]) == 1

        captured = capsys.readouterr()
        assert "Usage:" in captured.err
        assert captured.out == ""

    def test_missing_email(self, capsys):
        with patch("git_heatmap.main.GitClient") as mock_client:
            assert main(["/some/repo"]) == 1
            mock_client.assert_not_called()

        assert "Usage:" in capsys.readouterr().err

    def test_email_is_not_read_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("HEATMAP_AUTHOR_EMAIL", "me@example.com")
        with patch("git_heatmap.main.GitClient") as mock_client:
            assert main(["/some/repo"]) == 1
            mock_client.assert_not_called()

        assert "Usage:" in capsys.readouterr().err

    def test_non_positive_width(self, capsys):
        assert main(["/some/repo", "me@example.com", "--width", "0"]) == 1
        assert "--width" in capsys.readouterr().err


class TestRun:
    """Tests for running the report."""

    def test_no_commits_exits_zero(self, capsys):
        with patch("git_heatmap.main.GitClient", return_value=_client_with([])):
            assert main(["/some/repo", "me@example.com"]) == 0

        assert capsys.readouterr().out == "No commits were found!\n"

    def test_repository_error(self, capsys):
        with patch(
            "git_heatmap.main.GitClient",
            side_effect=GitClientError("'/x' is not a git repository."),
        ):
            assert main(["/x", "me@example.com"]) == 1

        captured = capsys.readouterr()
        assert "not a git repository" in captured.err
        assert captured.out == ""

    def test_invalid_configuration(self, capsys):
        with patch("git_heatmap.config.HEATMAP_FALLBACK_WIDTH", "abc"):
            assert main(["/some/repo", "me@example.com"]) == 1

        assert "Configuration Error" in capsys.readouterr().err

    def test_renders_heatmap_with_explicit_width(self, capsys):
        times = [datetime(2023, 1, 15, 10, 0), datetime(2023, 3, 2, 11, 0)]
        with patch("git_heatmap.main.GitClient", return_value=_client_with(times)):
            assert main(["/some/repo", "me@example.com", "--width", "19"]) == 0

        plain = ANSI.sub("", capsys.readouterr().out)
        assert "2023" in plain
        assert "       Jan |  Feb |" in plain
        assert "       Mar |" in plain
        assert "commits count guide:" in plain

    def test_detected_width_uses_configured_fallback(self, capsys):
        times = [datetime(2023, 1, 15, 10, 0)]
        with patch("git_heatmap.main.GitClient", return_value=_client_with(times)):
            with patch("git_heatmap.config.HEATMAP_FALLBACK_WIDTH", "40"):
                with patch("git_heatmap.main.terminal_width", return_value=40) as mock_width:
                    assert main(["/some/repo", "me@example.com"]) == 0

        mock_width.assert_called_once_with(40)

    def test_repository_closed_after_reading(self, capsys):
        client = _client_with([datetime(2023, 1, 15, 10, 0)])
        with patch("git_heatmap.main.GitClient", return_value=client):
            assert main(["/some/repo", "me@example.com", "--width", "80"]) == 0

        client.__exit__.assert_called_once()
