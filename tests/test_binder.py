"""Tests for flag binding (core/binder.py)."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from subcmd.core.binder import bind, declare_flags
from subcmd.core.flags import FlagSet
from subcmd.core.protocols import Context
from subcmd.exceptions import FlagError, ParseError


class _CountingCommand:
    """Counts how often its flags are registered."""

    def __init__(self) -> None:
        self.registrations = 0
        self.name_flag = ""

    def name(self) -> str:
        return "hello"

    def args_signature(self) -> str:
        return ""

    def description(self) -> str:
        return ""

    def help(self) -> str:
        return ""

    def register_flags(self, flags: FlagSet) -> None:
        self.registrations += 1
        flags.string_flag("name", "who to greet", default="there", dest="name_flag")

    def run(self, context: Context, args: Sequence[str]) -> None:
        pass


class TestDeclareFlags:
    def test_fresh_set_each_time(self) -> None:
        cmd = _CountingCommand()
        first = declare_flags(cmd)
        second = declare_flags(cmd)
        assert first is not second
        assert cmd.registrations == 2
        assert first.name == "hello"

    def test_unbound_parse_leaves_command_alone(self) -> None:
        cmd = _CountingCommand()
        declare_flags(cmd).parse(["-name", "Sam"])
        assert cmd.name_flag == ""


class TestBind:
    def test_returns_positionals_and_sets_fields(self) -> None:
        cmd = _CountingCommand()
        assert bind(cmd, ["-name=Sam", "a", "b"]) == ["a", "b"]
        assert cmd.name_flag == "Sam"

    def test_defaults_applied(self) -> None:
        cmd = _CountingCommand()
        cmd.name_flag = "stale"
        assert bind(cmd, []) == []
        assert cmd.name_flag == "there"

    def test_parse_failure_is_tagged(self) -> None:
        cmd = _CountingCommand()
        with pytest.raises(ParseError) as exc_info:
            bind(cmd, ["-name"], hint="see help")
        err = exc_info.value
        assert err.command_name == "hello"
        assert err.hint == "see help"
        assert isinstance(err.__cause__, FlagError)
        assert cmd.name_flag == ""
