"""Shared fixtures for purlinfo tests."""
from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

import pytest
from click.testing import CliRunner
from packageurl import PackageURL

from purlinfo.log import LOGGER_NAME
from purlinfo.models.package import PackageInfo
from purlinfo.resolvers.base import BaseResolver
from purlinfo.scope import DeadlineScope


class FixedResolver(BaseResolver):
    """Resolver double returning a fixed result or raising a fixed error."""

    def __init__(
        self,
        info: Optional[PackageInfo] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.info = info
        self.error = error
        self.calls: list[tuple[DeadlineScope, PackageURL]] = []

    async def resolve(self, scope: DeadlineScope, purl: PackageURL) -> PackageInfo:
        self.calls.append((scope, purl))
        if self.error is not None:
            raise self.error
        assert self.info is not None
        return self.info


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo logging setup done by a test."""
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
    logger.propagate = propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def lodash_purl() -> PackageURL:
    """Provide the purl for lodash 4.17.21."""
    return PackageURL.from_string("pkg:npm/lodash@4.17.21")


@pytest.fixture
def lodash_info() -> PackageInfo:
    """Provide package info for lodash with every field populated."""
    return PackageInfo(
        name="lodash",
        version="4.17.21",
        licenses=["MIT"],
        homepage="https://lodash.com/",
        repository_url="https://github.com/lodash/lodash",
        description="Lodash modular utilities.",
        ecosystem="npm",
        documentation_url="https://lodash.com/docs",
    )


@pytest.fixture
def make_resolver() -> Callable[..., FixedResolver]:
    """Provide a factory for resolver doubles."""
    return FixedResolver
