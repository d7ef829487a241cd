"""Pydantic data models for purlinfo."""

from purlinfo.models.config import PurlInfoConfig, Settings
from purlinfo.models.package import LookupEntry, PackageInfo

__all__ = [
    "LookupEntry",
    "PackageInfo",
    "PurlInfoConfig",
    "Settings",
]
