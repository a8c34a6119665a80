"""File name pattern matching.

A pattern is either a glob containing `*` or a literal substring. Globs are
translated to regular expressions by replacing each `*` with `.*`. Other
regex metacharacters are passed through unescaped, so a `.` in a glob matches
any character and the expression is searched anywhere in the key rather than
anchored. Both kinds of pattern compare case-insensitively against two keys
derived from a file path: its base name and its last three path segments.
"""

import os
import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from repodig.exceptions import InvalidPatternError

WILDCARD = "*"


@lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern.replace(WILDCARD, ".*"), re.IGNORECASE)


def validate_patterns(patterns: Iterable[str]) -> None:
    """Compile every glob pattern once so bad input fails before any work.

    Raises:
        InvalidPatternError: If a glob does not translate to a valid regex.
    """
    for pattern in patterns:
        if WILDCARD not in pattern:
            continue
        try:
            _compile_glob(pattern)
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e


def comparison_keys(file_path: str) -> tuple[str, str]:
    """Return the base name and the trailing three-segment fragment of a path."""
    segments = file_path.split(os.sep)
    return segments[-1], "/".join(segments[-3:])


def _pattern_matches(pattern: str, basename: str, fragment: str) -> bool:
    if WILDCARD in pattern:
        regex = _compile_glob(pattern)
        return bool(regex.search(basename) or regex.search(fragment))

    needle = pattern.lower()
    return needle in basename.lower() or needle in fragment.lower()


def matches(file_path: str, patterns: Sequence[str]) -> bool:
    """Check whether a file matches any of the patterns.

    Args:
        file_path: Absolute path of the file.
        patterns: User patterns. An empty sequence matches nothing.

    Returns:
        True if at least one pattern matches.
    """
    if not patterns:
        return False

    basename, fragment = comparison_keys(file_path)
    return any(_pattern_matches(p, basename, fragment) for p in patterns)


def find_matching_files(files: Iterable[str], patterns: Sequence[str]) -> list[str]:
    """Filter files down to those matching any pattern, preserving order."""
    return [path for path in files if matches(path, patterns)]
