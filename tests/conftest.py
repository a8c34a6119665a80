"""
Pytest configuration and fixtures.

Provides a fake GitHub collaborator so no test touches the network, gh or git.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from repodig.core.github import GitHubClient
from repodig.exceptions import CloneError
from repodig.models.repository import RepositoryDescriptor
from repodig.utils import config

RepoLayout = dict[str, str]


def write_tree(root: Path, layout: RepoLayout) -> Path:
    """Create files under root from a {relative path: content} mapping."""
    for relative, content in layout.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    return root


def make_descriptor(owner: str, name: str, **extra: object) -> RepositoryDescriptor:
    return RepositoryDescriptor(
        owner=owner,
        name=name,
        url=f"https://github.com/{owner}/{name}",
        **extra,
    )


class FakeGitHubClient(GitHubClient):
    """GitHubClient that serves canned search results and writes files on clone."""

    def __init__(
        self,
        repos: list[RepositoryDescriptor],
        layouts: dict[str, RepoLayout] | None = None,
        failing: set[str] | None = None,
    ):
        super().__init__(clone_timeout=1)
        self.repos = repos
        self.layouts = layouts or {}
        self.failing = failing or set()
        self.searches: list[tuple[str, int]] = []
        self.cloned: list[str] = []

    def search(self, query: str, limit: int) -> list[RepositoryDescriptor]:
        self.searches.append((query, limit))
        return self.repos[:limit]

    def clone(self, repo: RepositoryDescriptor, destination: Path) -> Path:
        if repo.full_name in self.failing:
            raise CloneError(repo.full_name, "fatal: repository not found")
        self.cloned.append(repo.full_name)
        destination.mkdir(parents=True)
        return write_tree(destination, self.layouts.get(repo.full_name, {}))


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Point the config loader at an empty location and clear its cache."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.json")
    monkeypatch.delenv(config.WORK_DIR_ENV_VAR, raising=False)
    config.reload_config()
    yield
    config.reload_config()


@pytest.fixture
def repo_tree(tmp_path: Path) -> Callable[[RepoLayout], Path]:
    """Factory building a repository-like directory tree under tmp_path."""

    def _build(layout: RepoLayout) -> Path:
        root = tmp_path / "repo"
        root.mkdir(exist_ok=True)
        return write_tree(root, layout)

    return _build


@pytest.fixture
def dotfiles_layouts() -> dict[str, RepoLayout]:
    return {
        "alice/dotfiles": {
            "README.md": "# dotfiles",
            "zsh/aliases.zsh": "alias ll='ls -l'",
            "zsh/prompt.zsh": "PROMPT='%~ '",
            "bash/profile.bash": "export PATH",
            "vim/vimrc": "set number",
            ".git/config": "[core]",
        },
        "bob/dotfiles": {
            "readme.txt": "dotfiles",
            "install.sh": "#!/bin/sh",
            "shell/functions.bash": "f() { :; }",
            "node_modules/pkg/setup.zsh": "",
        },
    }


@pytest.fixture
def descriptor() -> Callable[..., RepositoryDescriptor]:
    """Factory for RepositoryDescriptor instances."""
    return make_descriptor


@pytest.fixture
def fake_client() -> type[FakeGitHubClient]:
    """The FakeGitHubClient class, for tests that need a canned collaborator."""
    return FakeGitHubClient
