"""CLI behavior tests for purlinfo."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from purlinfo import __version__
from purlinfo.cli import create_resolver, main
from purlinfo.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    EXIT_INVALID_ARGS,
    EXIT_INVALID_PURL,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
)
from purlinfo.exceptions import NotFoundError
from purlinfo.models.package import PackageInfo
from purlinfo.resolvers.base import BaseResolver
from purlinfo.resolvers.ecosystems import EcosystemsResolver


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test that --help outputs usage information."""
    result = cli_runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    assert "Get package information from a package URL" in result.output
    assert "--json" in result.output
    assert "--timeout" in result.output
    assert "--email" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test that --version prints the tool name and version."""
    result = cli_runner.invoke(main, ["--version"])

    assert result.exit_code == EXIT_SUCCESS
    assert f"purlinfo version {__version__}" in result.output


def test_no_arguments(cli_runner: CliRunner) -> None:
    """Test that a missing purl is an argument error."""
    result = cli_runner.invoke(main, [])

    assert result.exit_code == EXIT_INVALID_ARGS
    assert "purl argument is required" in result.output
    assert "Usage:" in result.output


def test_too_many_arguments(cli_runner: CliRunner) -> None:
    """Test that more than one purl is an argument error."""
    result = cli_runner.invoke(main, ["pkg:npm/test@1.0.0", "extra-arg"])

    assert result.exit_code == EXIT_INVALID_ARGS
    assert "Too many arguments. Expected 1 purl, got 2" in result.output


def test_unknown_option(cli_runner: CliRunner) -> None:
    """Test that click usage errors use the argument error exit code."""
    result = cli_runner.invoke(main, ["--bogus", "pkg:npm/test@1.0.0"])

    assert result.exit_code == EXIT_INVALID_ARGS


def test_invalid_timeout(cli_runner: CliRunner) -> None:
    """Test that a non-positive timeout is rejected."""
    result = cli_runner.invoke(main, ["--timeout", "0", "pkg:npm/test@1.0.0"])

    assert result.exit_code == EXIT_INVALID_ARGS


def test_invalid_purl(cli_runner: CliRunner) -> None:
    """Test that an unparsable purl exits with the invalid purl code."""
    with cli_runner.isolated_filesystem():
        result = cli_runner.invoke(main, ["not-a-valid-purl"])

    assert result.exit_code == EXIT_INVALID_PURL
    assert "Invalid purl format" in result.output


def test_success_text_output(
    cli_runner: CliRunner,
    make_resolver: Callable[..., BaseResolver],
    lodash_info: PackageInfo,
) -> None:
    """Test a successful lookup printed as text."""
    with cli_runner.isolated_filesystem(), patch(
        "purlinfo.cli.create_resolver", return_value=make_resolver(info=lodash_info)
    ):
        result = cli_runner.invoke(main, ["pkg:npm/lodash@4.17.21"])

    assert result.exit_code == EXIT_SUCCESS
    assert "Name:" in result.output
    assert "lodash" in result.output
    assert "Version:" in result.output
    assert "4.17.21" in result.output
    assert "Licenses:" in result.output
    assert "MIT" in result.output


def test_success_json_output(
    cli_runner: CliRunner,
    make_resolver: Callable[..., BaseResolver],
    lodash_info: PackageInfo,
) -> None:
    """Test a successful lookup printed as JSON."""
    with cli_runner.isolated_filesystem(), patch(
        "purlinfo.cli.create_resolver", return_value=make_resolver(info=lodash_info)
    ):
        result = cli_runner.invoke(main, ["--json", "pkg:npm/lodash@4.17.21"])

    assert result.exit_code == EXIT_SUCCESS
    assert json.loads(result.output)["name"] == "lodash"


def test_lookup_failure(
    cli_runner: CliRunner, make_resolver: Callable[..., BaseResolver]
) -> None:
    """Test that a failed lookup exits with the runtime error code."""
    resolver = make_resolver(error=NotFoundError("package not found: HTTP 404"))
    with cli_runner.isolated_filesystem(), patch(
        "purlinfo.cli.create_resolver", return_value=resolver
    ):
        result = cli_runner.invoke(main, ["pkg:npm/missing@1.0.0"])

    assert result.exit_code == EXIT_RUNTIME_ERROR
    assert "Failed to get package info" in result.output
    assert "Use -v flag for more details" in result.output
    assert "HTTP 404" not in result.output


def test_lookup_failure_verbose(
    cli_runner: CliRunner, make_resolver: Callable[..., BaseResolver]
) -> None:
    """Test that verbose mode prints the error detail."""
    resolver = make_resolver(error=NotFoundError("package not found: HTTP 404"))
    with cli_runner.isolated_filesystem(), patch(
        "purlinfo.cli.create_resolver", return_value=resolver
    ):
        result = cli_runner.invoke(main, ["-v", "pkg:npm/missing@1.0.0"])

    assert result.exit_code == EXIT_RUNTIME_ERROR
    assert "package not found: HTTP 404" in result.output


class TestSettings:
    """Tests for how flags, config file and defaults combine."""

    def test_defaults(self, cli_runner: CliRunner) -> None:
        """Test that built-in defaults are used without flags or config."""
        runner = MagicMock(return_value=EXIT_SUCCESS)
        with cli_runner.isolated_filesystem(), patch(
            "purlinfo.cli.run_with_resolver", runner
        ), patch("purlinfo.cli.create_resolver") as factory:
            result = cli_runner.invoke(main, ["pkg:npm/lodash@4.17.21"])

        assert result.exit_code == EXIT_SUCCESS
        factory.assert_called_once_with(None, None)
        args = runner.call_args.args
        assert args[3] == "pkg:npm/lodash@4.17.21"
        assert args[4] is False
        assert args[5] is False
        assert args[6] == DEFAULT_TIMEOUT_SECONDS

    def test_config_file_values(self, cli_runner: CliRunner) -> None:
        """Test that config file values are used when flags are absent."""
        runner = MagicMock(return_value=EXIT_SUCCESS)
        with cli_runner.isolated_filesystem(), patch(
            "purlinfo.cli.run_with_resolver", runner
        ), patch("purlinfo.cli.create_resolver") as factory:
            Path(".purlinfo.yaml").write_text(
                "base_url: http://localhost:3000\nemail: cfg@example.com\ntimeout: 4\n"
            )
            result = cli_runner.invoke(main, ["pkg:npm/lodash@4.17.21"])

        assert result.exit_code == EXIT_SUCCESS
        factory.assert_called_once_with("http://localhost:3000", "cfg@example.com")
        assert runner.call_args.args[6] == 4.0

    def test_flags_override_config(self, cli_runner: CliRunner) -> None:
        """Test that command line flags win over config file values."""
        runner = MagicMock(return_value=EXIT_SUCCESS)
        with cli_runner.isolated_filesystem(), patch(
            "purlinfo.cli.run_with_resolver", runner
        ), patch("purlinfo.cli.create_resolver") as factory:
            Path(".purlinfo.yaml").write_text("email: cfg@example.com\ntimeout: 4\n")
            result = cli_runner.invoke(
                main,
                [
                    "--email",
                    "flag@example.com",
                    "--timeout",
                    "9",
                    "--json",
                    "-v",
                    "pkg:npm/lodash@4.17.21",
                ],
            )

        assert result.exit_code == EXIT_SUCCESS
        factory.assert_called_once_with(None, "flag@example.com")
        args = runner.call_args.args
        assert args[4] is True
        assert args[5] is True
        assert args[6] == 9.0

    def test_invalid_config_file(self, cli_runner: CliRunner) -> None:
        """Test that a bad config file is reported as an argument error."""
        with cli_runner.isolated_filesystem():
            Path(".purlinfo.yaml").write_text("retries: 3\n")
            result = cli_runner.invoke(main, ["pkg:npm/lodash@4.17.21"])

        assert result.exit_code == EXIT_INVALID_ARGS
        assert "ConfigurationError" in result.output

    def test_invalid_base_url_flag(self, cli_runner: CliRunner) -> None:
        """Test that a --base-url that is not an http(s) URL is rejected."""
        with cli_runner.isolated_filesystem():
            result = cli_runner.invoke(
                main, ["--base-url", "packages.ecosyste.ms", "pkg:npm/lodash@4.17.21"]
            )

        assert result.exit_code == EXIT_INVALID_ARGS
        assert "base_url" in result.output

    def test_missing_config_path(self, cli_runner: CliRunner) -> None:
        """Test that a --config path that does not exist is rejected."""
        with cli_runner.isolated_filesystem():
            result = cli_runner.invoke(
                main, ["--config", "nope.yaml", "pkg:npm/lodash@4.17.21"]
            )

        assert result.exit_code == EXIT_INVALID_ARGS


def test_create_resolver() -> None:
    """Test that the CLI builds an ecosyste.ms resolver."""
    resolver = create_resolver("http://localhost:3000", "me@example.com")

    assert isinstance(resolver, EcosystemsResolver)
    assert resolver.base_url == "http://localhost:3000"
