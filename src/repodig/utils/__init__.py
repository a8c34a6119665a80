"""Helpers shared across the CLI and core modules."""
