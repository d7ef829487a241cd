"""Configuration Pydantic models for purlinfo."""
from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator

from purlinfo.constants import DEFAULT_TIMEOUT_SECONDS


class PurlInfoConfig(BaseModel):
    """Partial configuration from one source (config file or flags).

    Unset fields are None so sources can be layered.
    """

    model_config = {"extra": "forbid"}

    base_url: Optional[str] = Field(
        default=None,
        description="Base URL of the ecosyste.ms packages API.",
    )
    email: Optional[str] = Field(
        default=None,
        description="Contact email sent in the User-Agent for the polite pool.",
    )
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="HTTP request timeout in seconds.",
    )

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: Optional[str]) -> Optional[str]:
        """Require an absolute http(s) URL and drop any trailing slash."""
        if v is None:
            return None
        parts = urlsplit(v.strip())
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError("must be an http or https URL")
        return parts.geturl().rstrip("/")

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or None
        return v


class Settings(BaseModel):
    """Effective settings for one lookup."""

    model_config = {"frozen": True, "extra": "forbid"}

    base_url: Optional[str] = None
    email: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
