"""External tool dependency checker."""

from __future__ import annotations

import shutil

from repodig.exceptions import ToolNotFoundError

# Install hints for required tools
TOOL_INSTALL_HINTS: dict[str, str] = {
    "gh": "https://cli.github.com/ (then run `gh auth login`)",
    "git": "https://git-scm.com/downloads",
}


def check_tool(tool: str) -> bool:
    """Check if a tool is available on PATH."""

    return shutil.which(tool) is not None


def require(*tools: str) -> None:
    """Require that all specified tools are available.

    Args:
        *tools: Names of tools that must be available.

    Raises:
        ToolNotFoundError: If any tool is not found.
    """
    for tool in tools:
        if not check_tool(tool):
            raise ToolNotFoundError(tool, TOOL_INSTALL_HINTS.get(tool))
