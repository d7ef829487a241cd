"""Package resolvers package."""

from purlinfo.resolvers.base import BaseResolver
from purlinfo.resolvers.ecosystems import EcosystemsResolver

__all__ = [
    "BaseResolver",
    "EcosystemsResolver",
]
