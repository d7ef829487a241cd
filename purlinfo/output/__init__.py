"""Output formatters for purlinfo."""

from purlinfo.models.package import PackageInfo
from purlinfo.output.package_json import PackageJsonFormatter
from purlinfo.output.terminal import TerminalFormatter


def render_package_info(info: PackageInfo, json_output: bool) -> str:
    """Render package info in the selected format.

    Args:
        info: The package info to render.
        json_output: True for JSON, False for human-readable text.

    Returns:
        The rendered document.
    """
    if json_output:
        return PackageJsonFormatter().format_package_info(info)
    return TerminalFormatter().format_package_info(info)


__all__ = [
    "PackageJsonFormatter",
    "TerminalFormatter",
    "render_package_info",
]
