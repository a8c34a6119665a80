"""Command-line interface for repodig."""
