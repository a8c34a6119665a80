"""repodig - search, clone and scan GitHub repositories."""

__version__ = "0.1.0"
