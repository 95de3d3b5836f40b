"""Smoke tests — package wiring, exception hierarchy, environment snapshot.

These tests prove that:
* The public API is importable from the package root.
* Every error derives from SubcmdError and carries its context.
* Exit codes are distinct and conventional.
* The environment snapshot is immutable.
"""

from __future__ import annotations

import io
import os

import pytest

import subcmd
from subcmd import __version__
from subcmd.cli import exit_codes
from subcmd.core.models import DefaultContext, Environment
from subcmd.exceptions import (
    CommandFailedError,
    EnvironmentCaptureError,
    FlagError,
    NoDefaultCommandError,
    NoSuchCommandError,
    ParseError,
    RegistryError,
    SubcmdError,
    UsageRequested,
)


# ---------------------------------------------------------------------------
# Version and exports
# ---------------------------------------------------------------------------

class TestPackage:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_all_exports_resolve(self) -> None:
        for name in subcmd.__all__:
            assert hasattr(subcmd, name), name


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            CommandFailedError,
            EnvironmentCaptureError,
            FlagError,
            NoDefaultCommandError,
            NoSuchCommandError,
            ParseError,
            RegistryError,
            UsageRequested,
        ],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[SubcmdError]) -> None:
        assert issubclass(exc_class, SubcmdError)

    def test_hint_is_stored(self) -> None:
        err = SubcmdError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert SubcmdError("boom").hint is None

    def test_parse_error_is_opaque(self) -> None:
        err = ParseError("build", detail="unrecognized arguments: -x")
        assert str(err) == "build: could not parse arguments"
        assert err.detail == "unrecognized arguments: -x"

    def test_command_failed_message(self) -> None:
        err = CommandFailedError("prog", "build", OSError("no space"))
        assert str(err) == "prog: no space"
        assert err.command_name == "build"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_usage_error_matches_argparse(self) -> None:
        assert exit_codes.USAGE_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_codes_are_distinct(self) -> None:
        codes = [
            exit_codes.SUCCESS,
            exit_codes.COMMAND_FAILED,
            exit_codes.USAGE_ERROR,
            exit_codes.UNEXPECTED_ERROR,
            exit_codes.KEYBOARD_INTERRUPT,
        ]
        assert len(set(codes)) == len(codes)


# ---------------------------------------------------------------------------
# Environment snapshot
# ---------------------------------------------------------------------------

class TestEnvironment:
    def test_capture(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUBCMD_TEST_VAR", "1")
        stdout = io.StringIO()
        env = Environment.capture(["prog", "x"], stdout=stdout)
        assert env.working_dir == os.getcwd()
        assert env.args == ("prog", "x")
        assert env.environ["SUBCMD_TEST_VAR"] == "1"
        assert env.stdout is stdout

    def test_capture_is_a_copy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        env = Environment.capture()
        monkeypatch.setenv("SUBCMD_LATE_VAR", "1")
        assert "SUBCMD_LATE_VAR" not in env.environ

    def test_environ_read_only(self) -> None:
        env = Environment.capture()
        with pytest.raises(TypeError):
            env.environ["X"] = "1"  # type: ignore[index]

    def test_capture_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def gone() -> str:
            raise FileNotFoundError("cwd removed")

        monkeypatch.setattr(os, "getcwd", gone)
        with pytest.raises(EnvironmentCaptureError, match="unable to get working directory"):
            Environment.capture()

    def test_with_args_leaves_original(self, environment: Environment) -> None:
        updated = environment.with_args(["prog", "a"])
        assert updated.args == ("prog", "a")
        assert environment.args == ()
        assert updated.stdout is environment.stdout

    def test_frozen(self, environment: Environment) -> None:
        with pytest.raises(AttributeError):
            environment.working_dir = "/elsewhere"  # type: ignore[misc]

    def test_default_context(self, environment: Environment) -> None:
        context = environment.default_context()
        assert context == DefaultContext(
            working_dir="/work",
            stdout=environment.stdout,
            stderr=environment.stderr,
        )
        assert environment.stdio() == (environment.stdout, environment.stderr)
