"""Pydantic models for per-repository analysis results."""

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from repodig.exceptions import RepodigError
from repodig.models.repository import RepositoryDescriptor

NO_EXTENSION = "no-extension"


class SpecialFile(BaseModel):
    """A file that matched one of the user patterns."""

    path: str
    """Path relative to the clone root."""

    size: int
    """File size in bytes."""


class AnalysisRecord(BaseModel):
    """Successful probe of a cloned repository."""

    status: Literal["ok"] = "ok"

    total_files: int = 0
    """Number of files found by the tree walk."""

    file_types: dict[str, int] = Field(default_factory=dict)
    """Lowercased extension (or `no-extension`) to file count, in first-seen order."""

    structure: dict[str, Literal["file", "directory"]] = Field(default_factory=dict)
    """Top-level entries of the clone root."""

    readme: str | None = None
    """Relative path of the first readme-like file."""

    manifest: str | None = None
    """Relative path of the first recognized manifest (e.g. package.json)."""

    manifest_data: dict[str, Any] | None = None
    """Parsed manifest contents, unset when the manifest could not be parsed."""

    special_files: list[SpecialFile] = Field(default_factory=list)
    """Matching files with their sizes."""

    def top_file_types(self, count: int = 5) -> list[tuple[str, int]]:
        """Most common extensions, ties kept in first-seen order."""
        # sorted() is stable, reverse=True included
        ranked = sorted(self.file_types.items(), key=lambda item: item[1], reverse=True)
        return ranked[:count]


class AnalysisFailure(BaseModel):
    """Probe or walk that failed; only the error message is known."""

    status: Literal["error"] = "error"

    error: str
    """Human-readable failure reason."""


Analysis = Annotated[AnalysisRecord | AnalysisFailure, Field(discriminator="status")]


class AnalysisResult(BaseModel):
    """Everything collected for one repository during a run."""

    model_config = ConfigDict(frozen=True)

    repo: RepositoryDescriptor
    local_path: Path
    files: tuple[str, ...]
    """All files, relative to `local_path`, using `/` separators."""

    matching_files: tuple[str, ...]
    """Subset of `files` matching the user patterns."""

    analysis: Analysis

    @model_validator(mode="after")
    def _matching_subset_of_files(self) -> "AnalysisResult":
        known = set(self.files)
        stray = [path for path in self.matching_files if path not in known]
        if stray:
            raise ValueError(f"matching_files not present in files: {stray[:3]}")
        return self

    @property
    def failed(self) -> bool:
        """Check if the analysis of this repository failed."""
        return isinstance(self.analysis, AnalysisFailure)

    def read_file(self, relative_path: str) -> str:
        """Read a file from this repository's clone.

        Args:
            relative_path: Path relative to the clone root.

        Returns:
            File contents decoded as UTF-8.

        Raises:
            RepodigError: If the file does not exist or lies outside the clone.
        """
        root = self.local_path.resolve()
        full_path = (root / relative_path).resolve()

        if not full_path.is_relative_to(root):
            raise RepodigError(f"Path escapes repository clone: {relative_path}")

        if not full_path.is_file():
            raise RepodigError(f"File not found: {relative_path}")

        try:
            return full_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RepodigError(f"Failed to read {relative_path}: {e}") from e
