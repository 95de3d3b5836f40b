"""Shared pytest fixtures for the subcmd test suite.

Guidelines
----------
* Never touch the real stdout/stderr; streams are injected through the
  environment snapshot.
* Commands are small stubs defined per test module.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from types import MappingProxyType

import pytest

from subcmd.core.models import Environment


def make_environment(**environ: str) -> Environment:
    return Environment(
        working_dir="/work",
        args=(),
        environ=MappingProxyType(dict(environ)),
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )


@pytest.fixture
def environment() -> Environment:
    """A snapshot with in-memory streams and no variables."""
    return make_environment()


@pytest.fixture
def environment_factory() -> Callable[..., Environment]:
    """Build snapshots carrying the given environment variables."""
    return make_environment
