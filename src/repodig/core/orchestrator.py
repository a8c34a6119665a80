"""Search → clone → walk → match → probe pipeline over many repositories."""

import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

from repodig.core.github import GitHubClient
from repodig.core.matcher import find_matching_files
from repodig.core.prober import RepositoryProber
from repodig.core.walker import list_files
from repodig.exceptions import CloneError
from repodig.models.analysis import AnalysisFailure, AnalysisResult
from repodig.models.repository import RepositoryDescriptor
from repodig.utils.output import console

WORK_DIR_PREFIX = "repodig-"


class RepositoryAnalyzer:
    """Clone and scan search results one repository at a time."""

    def __init__(
        self,
        client: GitHubClient | None = None,
        work_base: Path | None = None,
    ):
        """Initialize the analyzer and create its per-run clone root.

        Args:
            client: GitHub collaborator. Defaults to a GitHubClient.
            work_base: Parent of the clone root. Defaults to the system temp dir.
        """
        self.client = client or GitHubClient()
        if work_base is not None:
            work_base.mkdir(parents=True, exist_ok=True)
        self.work_dir = Path(tempfile.mkdtemp(prefix=WORK_DIR_PREFIX, dir=work_base))

    def _relative_paths(self, root: Path, files: Sequence[str]) -> list[str]:
        return [Path(f).relative_to(root).as_posix() for f in files]

    def process_repository(
        self, repo: RepositoryDescriptor, patterns: Sequence[str]
    ) -> AnalysisResult:
        """Clone, walk, match and probe a single repository.

        Raises:
            CloneError: If the clone fails. Nothing is recorded for the repo.
        """
        with console.status(f"Cloning {repo.full_name}..."):
            local_path = self.client.clone(repo, self.work_dir / repo.clone_dirname)
        root = local_path.resolve()

        try:
            all_files = list_files(root)
        except OSError as e:
            console.print_error(f"Error walking {repo.full_name}: {e}")
            return AnalysisResult(
                repo=repo,
                local_path=local_path,
                files=[],
                matching_files=[],
                analysis=AnalysisFailure(error=str(e)),
            )

        matching = find_matching_files(all_files, patterns)
        analysis = RepositoryProber(root).probe(all_files, matching)
        if isinstance(analysis, AnalysisFailure):
            console.print_error(f"Error analyzing {repo.full_name}: {analysis.error}")

        return AnalysisResult(
            repo=repo,
            local_path=local_path,
            files=self._relative_paths(root, all_files),
            matching_files=self._relative_paths(root, matching),
            analysis=analysis,
        )

    def analyze(
        self, query: str, patterns: Sequence[str] = (), limit: int = 10
    ) -> list[AnalysisResult]:
        """Search for repositories and analyze each one in search order.

        A failing repository is reported and skipped; it never stops the run.

        Args:
            query: Search query.
            patterns: File patterns to look for.
            limit: Maximum number of repositories to analyze.

        Returns:
            One AnalysisResult per repository that cloned successfully.

        Raises:
            SearchError: If the search itself fails.
        """
        console.print_info(f'Searching for repositories with query: "{query}"')
        with console.status("Searching GitHub..."):
            repos = self.client.search(query, limit)
        console.print_info(f"Found {len(repos)} repositories")

        results: list[AnalysisResult] = []
        for repo in repos:
            try:
                result = self.process_repository(repo, patterns)
            except CloneError as e:
                console.print_error(str(e))
                continue
            except Exception as e:
                console.print_error(f"Failed to analyze {repo.full_name}: {e}")
                continue

            results.append(result)
            console.print_success(
                f"Analyzed {repo.full_name} ({len(result.matching_files)} matching files)"
            )

        return results

    def cleanup(self) -> None:
        """Remove the clone root and everything in it."""
        if not self.work_dir.exists():
            return
        try:
            shutil.rmtree(self.work_dir)
        except OSError as e:
            console.print_warning(f"Error cleaning up {self.work_dir}: {e}")
            return
        console.print_success("Cleaned up temporary files")
