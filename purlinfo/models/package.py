"""Package metadata Pydantic models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class PackageInfo(BaseModel):
    """Normalized package metadata produced by a resolver.

    Optional fields are ``None`` when the registry does not report them;
    an empty string is kept as reported and is not treated as absent.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Canonical package name")
    version: str = Field(description="Latest release identifier")
    licenses: tuple[str, ...] = Field(
        default=(),
        description="License identifiers in registry order",
    )
    homepage: Optional[str] = Field(default=None, description="Homepage URL")
    repository_url: Optional[str] = Field(
        default=None, description="Source repository URL"
    )
    description: Optional[str] = Field(
        default=None, description="Short package description"
    )
    ecosystem: str = Field(description="Package type from the purl (e.g. npm)")
    documentation_url: Optional[str] = Field(
        default=None, description="Documentation URL"
    )

    @field_validator("licenses", mode="before")
    @classmethod
    def _licenses_never_none(cls, value: Any) -> Any:
        return () if value is None else value


class LookupEntry(BaseModel):
    """One element of the ecosyste.ms packages lookup response array."""

    model_config = {"extra": "ignore"}

    name: str = ""
    latest_release_number: str = ""
    normalized_licenses: list[str] = Field(default_factory=list)
    homepage: Optional[str] = None
    repository_url: Optional[str] = None
    description: Optional[str] = None
    documentation_url: Optional[str] = None

    @field_validator("name", "latest_release_number", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("normalized_licenses", mode="before")
    @classmethod
    def _null_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_package_info(self, ecosystem: str) -> PackageInfo:
        """Map this lookup entry onto a PackageInfo.

        Args:
            ecosystem: Package type taken from the requested purl.

        Returns:
            PackageInfo carrying this entry's fields.
        """
        return PackageInfo(
            name=self.name,
            version=self.latest_release_number,
            licenses=tuple(self.normalized_licenses),
            homepage=self.homepage,
            repository_url=self.repository_url,
            description=self.description,
            ecosystem=ecosystem,
            documentation_url=self.documentation_url,
        )
