"""JSON output formatter for package info."""
import json
from typing import Any

from purlinfo.exceptions import OutputError
from purlinfo.models.package import PackageInfo

# Key order of the JSON document
JSON_FIELDS = (
    "name",
    "version",
    "licenses",
    "homepage",
    "repository_url",
    "description",
    "ecosystem",
    "documentation_url",
)


class PackageJsonFormatter:
    """Format package info as a JSON document.

    Absent optional fields are written as ``null`` so that they read back
    as absent rather than as empty strings.
    """

    def format_package_info(self, info: PackageInfo) -> str:
        """Format package info as a pretty-printed JSON string.

        Args:
            info: The package info to format.

        Returns:
            JSON string with two-space indentation.

        Raises:
            OutputError: If the package info cannot be serialized.
        """
        try:
            return json.dumps(self._build_output(info), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise OutputError(f"failed to encode JSON: {e}") from e

    def _build_output(self, info: PackageInfo) -> dict[str, Any]:
        data = info.model_dump()
        return {field: data[field] for field in JSON_FIELDS}
