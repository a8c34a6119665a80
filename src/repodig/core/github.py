"""GitHub CLI and git wrappers for repository search and cloning."""

import json
from pathlib import Path

from pydantic import ValidationError

from repodig.exceptions import CloneError, ProcessError, SearchError
from repodig.models.repository import RepositoryDescriptor
from repodig.utils.config import DEFAULT_CLONE_TIMEOUT
from repodig.utils.process import run_tool


class GitHubClient:
    """Wrapper for `gh search repos` and shallow `git clone`."""

    SEARCH_FIELDS = ("name", "owner", "url", "description", "stargazersCount", "language")

    def __init__(self, clone_timeout: float = DEFAULT_CLONE_TIMEOUT):
        """Initialize GitHub client.

        Args:
            clone_timeout: Seconds allowed for each clone.
        """
        self.clone_timeout = clone_timeout

    def search(self, query: str, limit: int) -> list[RepositoryDescriptor]:
        """Search GitHub for repositories.

        Args:
            query: Free-text search query.
            limit: Maximum number of repositories to return.

        Returns:
            Repositories in the order GitHub ranked them.

        Raises:
            SearchError: If gh fails or returns output that cannot be parsed.
        """
        cmd = [
            "gh",
            "search",
            "repos",
            query,
            "--limit",
            str(limit),
            "--json",
            ",".join(self.SEARCH_FIELDS),
        ]

        try:
            result = run_tool(cmd)
        except ProcessError as e:
            raise SearchError(f"Repository search failed: {e}") from e

        try:
            records = json.loads(result.output or "[]")
        except ValueError as e:
            raise SearchError(f"Malformed search output: {e}") from e

        if not isinstance(records, list):
            raise SearchError("Malformed search output: expected a JSON array")

        try:
            return [RepositoryDescriptor.model_validate(record) for record in records]
        except ValidationError as e:
            raise SearchError(f"Malformed search record: {e}") from e

    def clone(self, repo: RepositoryDescriptor, destination: Path) -> Path:
        """Shallow-clone a repository.

        Args:
            repo: Repository to clone.
            destination: Directory to clone into; must not already exist.

        Returns:
            Path to the clone.

        Raises:
            CloneError: On a non-zero git exit or timeout.
        """
        # git clone --depth 1 <url> <dest>
        cmd = ["git", "clone", "--depth", "1", repo.url, str(destination)]

        try:
            run_tool(cmd, timeout=self.clone_timeout)
        except ProcessError as e:
            raise CloneError(repo.full_name, e.stderr.strip() or str(e)) from e

        return destination
