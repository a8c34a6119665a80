"""Pydantic models shared by the core pipeline and the CLI."""

from repodig.models.analysis import (
    AnalysisFailure,
    AnalysisRecord,
    AnalysisResult,
    SpecialFile,
)
from repodig.models.repository import RepositoryDescriptor

__all__ = [
    "AnalysisFailure",
    "AnalysisRecord",
    "AnalysisResult",
    "RepositoryDescriptor",
    "SpecialFile",
]
