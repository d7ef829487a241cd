"""Human-readable output formatter for package info."""
from typing import Optional

from purlinfo.models.package import PackageInfo

# Width of the longest label, "DocumentationURL:"
LABEL_WIDTH = 17

NONE_TEXT = "(none)"


class TerminalFormatter:
    """Format package info as aligned ``Label: value`` lines."""

    def format_package_info(self, info: PackageInfo) -> str:
        """Format package info for display in a terminal.

        Args:
            info: The package info to format.

        Returns:
            Multi-line string, one field per line.
        """
        lines = [
            self._line("Name:", info.name),
            self._line("Version:", info.version),
            self._line("Ecosystem:", info.ecosystem),
            self._line("Licenses:", ", ".join(info.licenses) or NONE_TEXT),
            self._optional_line("Description:", info.description),
            self._optional_line("Homepage:", info.homepage),
            self._optional_line("RepositoryURL:", info.repository_url),
            self._optional_line("DocumentationURL:", info.documentation_url),
        ]
        return "\n".join(lines)

    def _line(self, label: str, value: str) -> str:
        return f"{label:<{LABEL_WIDTH}} {value}"

    def _optional_line(self, label: str, value: Optional[str]) -> str:
        # Empty strings display the same as missing values
        return self._line(label, value if value else NONE_TEXT)
