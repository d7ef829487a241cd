"""Base resolver interface."""

from abc import ABC, abstractmethod

from packageurl import PackageURL

from purlinfo.models.package import PackageInfo
from purlinfo.scope import DeadlineScope


class BaseResolver(ABC):
    """Abstract base class for package resolvers.

    All package resolvers must inherit from this class and implement
    the async resolve() method.
    """

    @abstractmethod
    async def resolve(self, scope: DeadlineScope, purl: PackageURL) -> PackageInfo:
        """Resolve metadata for a package.

        Implementations perform a single lookup, honor the scope's
        cancellation and deadline, and never return partial results.

        Args:
            scope: Deadline scope bounding any I/O.
            purl: An already validated package URL.

        Returns:
            Normalized package metadata.

        Raises:
            ResolutionError: If the package cannot be resolved.
        """
