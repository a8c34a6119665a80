"""Typed exception hierarchy for repodig."""


class RepodigError(Exception):
    """Base exception for all repodig errors."""

    pass


class ToolNotFoundError(RepodigError):
    """Raised when a required external tool is not installed."""

    def __init__(self, tool: str, install_hint: str | None = None):
        self.tool = tool
        self.install_hint = install_hint
        message = f"Required tool not found: {tool}"
        if install_hint:
            message += f"\nInstall: {install_hint}"
        super().__init__(message)


class ProcessError(RepodigError):
    """Raised when a subprocess command fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        cmd_str = " ".join(command)
        super().__init__(f"Command failed (exit {returncode}): {cmd_str}\n{stderr}")


class SearchError(RepodigError):
    """Raised when the repository search fails. Aborts the run."""

    pass


class CloneError(RepodigError):
    """Raised when cloning a single repository fails."""

    def __init__(self, full_name: str, reason: str):
        self.full_name = full_name
        self.reason = reason
        super().__init__(f"Failed to clone {full_name}: {reason}")


class InvalidPatternError(RepodigError):
    """Raised when a glob pattern cannot be turned into a regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid file pattern '{pattern}': {reason}")
