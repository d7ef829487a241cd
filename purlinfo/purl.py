"""Package URL parsing."""
from __future__ import annotations

from packageurl import PackageURL

from purlinfo.exceptions import PurlParseError


def parse_purl(purl_string: str) -> PackageURL:
    """Parse a purl string into a PackageURL.

    Args:
        purl_string: Package URL such as ``pkg:npm/lodash@4.17.21``.

    Returns:
        The parsed PackageURL.

    Raises:
        PurlParseError: If the string is not a valid purl.
    """
    try:
        return PackageURL.from_string(purl_string)
    except ValueError as e:
        raise PurlParseError(str(e)) from e
