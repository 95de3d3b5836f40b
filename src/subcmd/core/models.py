"""Domain models for subcmd.

All models are **frozen** dataclasses — immutable value objects.  A
dispatch never mutates any of them; it builds new ones instead.
"""

from __future__ import annotations

import dataclasses
import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, TextIO

from subcmd.exceptions import EnvironmentCaptureError

if TYPE_CHECKING:
    from subcmd.core.protocols import Command


# ---------------------------------------------------------------------------
# Process environment
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DefaultContext:
    """The :class:`~subcmd.core.protocols.Context` handed to commands."""

    working_dir: str
    stdout: TextIO
    stderr: TextIO


@dataclass(frozen=True, slots=True)
class Environment:
    """Snapshot of the process a program runs in.

    Captured once when the program is built.  :meth:`with_args` returns a
    copy carrying one invocation's argument vector; the snapshot itself is
    never modified.
    """

    working_dir: str
    """Working directory at capture time."""

    args: tuple[str, ...]
    """Raw argument vector, program path first."""

    environ: Mapping[str, str]
    """Read-only view of the environment variables."""

    stdout: TextIO
    """Stream for usage text and regular command output."""

    stderr: TextIO
    """Stream for diagnostics."""

    @classmethod
    def capture(
        cls,
        args: Sequence[str] = (),
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> Environment:
        """Snapshot the live working directory, variables and streams.

        Raises
        ------
        EnvironmentCaptureError
            If the working directory cannot be determined.
        """
        try:
            working_dir = os.getcwd()
        except OSError as exc:
            raise EnvironmentCaptureError(
                f"unable to get working directory: {exc}",
            ) from exc
        return cls(
            working_dir=working_dir,
            args=tuple(args),
            environ=MappingProxyType(dict(os.environ)),
            stdout=stdout if stdout is not None else sys.stdout,
            stderr=stderr if stderr is not None else sys.stderr,
        )

    def with_args(self, args: Sequence[str]) -> Environment:
        return dataclasses.replace(self, args=tuple(args))

    def stdio(self) -> tuple[TextIO, TextIO]:
        return self.stdout, self.stderr

    def default_context(self) -> DefaultContext:
        return DefaultContext(
            working_dir=self.working_dir,
            stdout=self.stdout,
            stderr=self.stderr,
        )


# ---------------------------------------------------------------------------
# Classification outcome
# ---------------------------------------------------------------------------

class SelectionKind(Enum):
    """What an argument vector asked for."""

    DEFAULT = "default"
    NAMED = "named"
    HELP_PROGRAM = "help-program"
    HELP_COMMAND = "help-command"


@dataclass(frozen=True, slots=True)
class Selection:
    """Result of classifying one argument vector.

    ``command_name`` is set for :attr:`SelectionKind.NAMED` and
    :attr:`SelectionKind.HELP_COMMAND`, and ``None`` otherwise.
    """

    kind: SelectionKind
    command_name: str | None = None

    @classmethod
    def default(cls) -> Selection:
        return cls(SelectionKind.DEFAULT)

    @classmethod
    def named(cls, command_name: str) -> Selection:
        return cls(SelectionKind.NAMED, command_name)

    @classmethod
    def help_program(cls) -> Selection:
        return cls(SelectionKind.HELP_PROGRAM)

    @classmethod
    def help_command(cls, command_name: str) -> Selection:
        return cls(SelectionKind.HELP_COMMAND, command_name)

    @property
    def is_help(self) -> bool:
        return self.kind in (SelectionKind.HELP_PROGRAM, SelectionKind.HELP_COMMAND)


# ---------------------------------------------------------------------------
# Flags and bound invocations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagDeclaration:
    """A flag as declared by a command, in display form."""

    name: str
    """Flag name without the leading dash."""

    usage: str
    """Help text.  Declarations with identical text are shown as aliases."""

    default: str
    """Default value rendered as text; empty when there is nothing to show."""


@dataclass(frozen=True, slots=True)
class Invocation:
    """A fully resolved command call, ready to hand to the caller."""

    environment: Environment
    command: Command
    args: tuple[str, ...]
