"""Pydantic models for repositories returned by search."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class RepositoryDescriptor(BaseModel):
    """A repository as reported by `gh search repos --json`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    owner: str
    """Account that owns the repository."""

    name: str
    """Repository name without the owner prefix."""

    url: str
    """Clone/browse URL (https://github.com/<owner>/<name>)."""

    description: str = ""
    """Short repository description, empty when unset."""

    stars: int = Field(default=0, alias="stargazersCount")
    """Star count."""

    language: str = "Unknown"
    """Primary language as detected by GitHub."""

    @field_validator("owner", mode="before")
    @classmethod
    def _unwrap_owner(cls, value: Any) -> Any:
        # gh returns {"login": "...", ...}; older versions return a plain string
        if isinstance(value, dict):
            return value.get("login")
        return value

    @field_validator("description", "language", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or value == "":
            return "" if info.field_name == "description" else "Unknown"
        return value

    @field_validator("stars", mode="before")
    @classmethod
    def _null_stars(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def full_name(self) -> str:
        """Owner and name joined as `owner/name`."""
        return f"{self.owner}/{self.name}"

    @property
    def clone_dirname(self) -> str:
        """Local directory name used for this repository's clone."""
        return f"{self.owner}-{self.name}"
