"""Recursive file listing for cloned repositories."""

from pathlib import Path

VCS_DIR_PREFIX = ".git"
DEPENDENCY_DIR = "node_modules"


def is_excluded_dir(name: str) -> bool:
    """Check if a directory should not be descended into."""
    return name.startswith(VCS_DIR_PREFIX) or name == DEPENDENCY_DIR


def list_files(root_dir: Path | str) -> list[str]:
    """List every regular file under a directory.

    Directories named `node_modules` or starting with `.git` are skipped
    along with everything inside them. Entries come back in directory
    listing order, which is not sorted. Symlinked directories are followed
    and there is no protection against symlink loops.

    Args:
        root_dir: Directory to walk.

    Returns:
        Absolute paths of all files found.

    Raises:
        OSError: If the root (or a subdirectory) cannot be listed.
    """
    files: list[str] = []
    _collect(Path(root_dir).resolve(), files)
    return files


def _collect(directory: Path, files: list[str]) -> None:
    for entry in directory.iterdir():
        if entry.is_dir():
            if not is_excluded_dir(entry.name):
                _collect(entry, files)
        elif entry.is_file():
            files.append(str(entry))
