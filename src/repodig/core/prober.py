"""Repository probing: file type histogram, layout, readme and manifest."""

import json
import tomllib
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from repodig.models.analysis import (
    NO_EXTENSION,
    AnalysisFailure,
    AnalysisRecord,
    SpecialFile,
)

ManifestParser = Callable[[str], Any]


class RepositoryProber:
    """Inspect a cloned repository's well-known files and top-level layout."""

    README_MARKER = "readme"

    # Checked in order; the first manifest name with any hit wins
    MANIFEST_PARSERS: dict[str, ManifestParser] = {
        "package.json": json.loads,
        "pyproject.toml": tomllib.loads,
        "Cargo.toml": tomllib.loads,
        "composer.json": json.loads,
    }

    def __init__(self, repo_path: Path):
        """Initialize repository prober.

        Args:
            repo_path: Root directory of the clone.
        """
        self.repo_path = repo_path.resolve()

    def _relative(self, file_path: str) -> str:
        return Path(file_path).relative_to(self.repo_path).as_posix()

    def _file_types(self, all_files: Sequence[str]) -> dict[str, int]:
        histogram: dict[str, int] = {}
        for file_path in all_files:
            key = Path(file_path).suffix.lower() or NO_EXTENSION
            histogram[key] = histogram.get(key, 0) + 1
        return histogram

    def _find_readme(self, all_files: Sequence[str]) -> str | None:
        for file_path in all_files:
            if self.README_MARKER in Path(file_path).name.lower():
                return self._relative(file_path)
        return None

    def _find_manifest(self, all_files: Sequence[str]) -> tuple[str, str] | None:
        """Return (manifest name, absolute path) of the preferred manifest."""
        for manifest_name in self.MANIFEST_PARSERS:
            for file_path in all_files:
                if Path(file_path).name == manifest_name:
                    return manifest_name, file_path
        return None

    def _parse_manifest(self, manifest_name: str, file_path: str) -> dict[str, Any] | None:
        """Parse a manifest, returning None on any read or syntax problem."""
        parser = self.MANIFEST_PARSERS[manifest_name]
        try:
            data = parser(Path(file_path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError):
            # tomllib.TOMLDecodeError and json.JSONDecodeError are ValueErrors
            return None
        return data if isinstance(data, dict) else None

    def _structure(self) -> dict[str, str]:
        return {
            entry.name: "directory" if entry.is_dir() else "file"
            for entry in sorted(self.repo_path.iterdir(), key=lambda p: p.name)
        }

    def probe(
        self,
        all_files: Sequence[str],
        matching_files: Sequence[str] = (),
    ) -> AnalysisRecord | AnalysisFailure:
        """Build the analysis record for the repository.

        Args:
            all_files: Absolute paths of every file in the clone.
            matching_files: Absolute paths of files that matched user patterns.

        Returns:
            AnalysisRecord on success, AnalysisFailure if anything went wrong.
        """
        try:
            manifest = self._find_manifest(all_files)
            manifest_path = None
            manifest_data = None
            if manifest is not None:
                manifest_name, manifest_file = manifest
                manifest_path = self._relative(manifest_file)
                manifest_data = self._parse_manifest(manifest_name, manifest_file)

            return AnalysisRecord(
                total_files=len(all_files),
                file_types=self._file_types(all_files),
                structure=self._structure(),
                readme=self._find_readme(all_files),
                manifest=manifest_path,
                manifest_data=manifest_data,
                special_files=[
                    SpecialFile(path=self._relative(f), size=Path(f).stat().st_size)
                    for f in matching_files
                ],
            )
        except Exception as e:
            return AnalysisFailure(error=str(e) or type(e).__name__)
