"""
Unit tests for the gh/git wrappers.

The subprocess layer is replaced with a recorder so no external tool runs.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from repodig.core import github
from repodig.core.github import GitHubClient
from repodig.exceptions import CloneError, ProcessError, SearchError
from repodig.utils.process import ProcessResult


class RecordingRunner:
    def __init__(self, stdout: str = "", error: ProcessError | None = None):
        self.stdout = stdout
        self.error = error
        self.calls: list[tuple[list[str], float | None]] = []

    def __call__(
        self, command: list[str], *, timeout: float | None = None, **_: object
    ) -> ProcessResult:
        self.calls.append((command, timeout))
        if self.error is not None:
            raise self.error
        return ProcessResult(command=command, stdout=self.stdout, stderr="")


SEARCH_OUTPUT = json.dumps(
    [
        {
            "name": "dotfiles",
            "owner": {"login": "alice"},
            "url": "https://github.com/alice/dotfiles",
            "description": "zsh setup",
            "stargazersCount": 10,
            "language": "Shell",
        },
        {
            "name": "dots",
            "owner": "bob",
            "url": "https://github.com/bob/dots",
            "description": None,
            "stargazersCount": 3,
            "language": None,
        },
    ]
)


class TestSearch:
    def test_builds_gh_command_and_parses(self, monkeypatch: pytest.MonkeyPatch) -> None:
        runner = RecordingRunner(stdout=SEARCH_OUTPUT)
        monkeypatch.setattr(github, "run_tool", runner)

        repos = GitHubClient().search("dotfiles", 2)

        command, _ = runner.calls[0]
        assert command == [
            "gh",
            "search",
            "repos",
            "dotfiles",
            "--limit",
            "2",
            "--json",
            "name,owner,url,description,stargazersCount,language",
        ]
        assert [r.full_name for r in repos] == ["alice/dotfiles", "bob/dots"]
        assert repos[1].language == "Unknown"

    def test_empty_output_is_no_results(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(github, "run_tool", RecordingRunner(stdout="\n"))

        assert GitHubClient().search("nothing", 5) == []

    def test_process_failure_is_search_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        error = ProcessError(["gh"], 1, "HTTP 401: authentication required")
        monkeypatch.setattr(github, "run_tool", RecordingRunner(error=error))

        with pytest.raises(SearchError, match="401"):
            GitHubClient().search("dotfiles", 2)

    @pytest.mark.parametrize("stdout", ["not json", '{"name": "x"}', '[{"owner": "x"}]'])
    def test_malformed_output_is_search_error(
        self, monkeypatch: pytest.MonkeyPatch, stdout: str
    ) -> None:
        monkeypatch.setattr(github, "run_tool", RecordingRunner(stdout=stdout))

        with pytest.raises(SearchError):
            GitHubClient().search("dotfiles", 2)


class TestClone:
    def test_shallow_clone_with_timeout(
        self, monkeypatch: pytest.MonkeyPatch, descriptor, tmp_path: Path
    ) -> None:
        runner = RecordingRunner()
        monkeypatch.setattr(github, "run_tool", runner)
        destination = tmp_path / "alice-dotfiles"

        client = GitHubClient(clone_timeout=12)
        path = client.clone(descriptor("alice", "dotfiles"), destination)

        assert path == destination
        assert runner.calls == [
            (
                [
                    "git",
                    "clone",
                    "--depth",
                    "1",
                    "https://github.com/alice/dotfiles",
                    str(destination),
                ],
                12,
            )
        ]

    def test_timeout_is_clone_error(
        self, monkeypatch: pytest.MonkeyPatch, descriptor, tmp_path: Path
    ) -> None:
        error = ProcessError(["git"], -1, "Command timed out after 30s")
        monkeypatch.setattr(github, "run_tool", RecordingRunner(error=error))

        with pytest.raises(CloneError) as exc_info:
            GitHubClient().clone(descriptor("alice", "dotfiles"), tmp_path / "x")

        assert exc_info.value.full_name == "alice/dotfiles"
        assert "timed out" in str(exc_info.value)
