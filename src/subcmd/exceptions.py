"""Custom exception hierarchy for subcmd.

Every failure the dispatcher can report inherits from
:class:`SubcmdError`, so a command-line boundary can catch one type and
render a clean message instead of a stack trace.  Errors raised by the
caller's own command logic are never leaked raw — they arrive wrapped in
:class:`CommandFailedError` with the original chained as ``__cause__``.

Hierarchy
---------
SubcmdError
├── RegistryError
├── EnvironmentCaptureError
├── FlagError
├── UsageRequested
├── NoSuchCommandError
├── ParseError
├── NoDefaultCommandError
└── CommandFailedError
"""

from __future__ import annotations


class SubcmdError(Exception):
    """Base exception for all subcmd errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Construction ----------------------------------------------------------

class RegistryError(SubcmdError):
    """Raised when a program is built from an invalid set of commands."""


class EnvironmentCaptureError(SubcmdError):
    """Raised when the process environment cannot be snapshotted."""


# --- Flags -----------------------------------------------------------------

class FlagError(SubcmdError):
    """Raised by a flag set for a bad declaration or unparseable input."""

    def __init__(
        self,
        message: str,
        *,
        flag_set: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.flag_set: str | None = flag_set


# --- Dispatch --------------------------------------------------------------

class UsageRequested(SubcmdError):
    """Signals that help was asked for instead of a command.

    Not a failure: :meth:`subcmd.program.Program.run` catches it, prints
    :attr:`usage` and returns normally.
    """

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage: str = usage


class NoSuchCommandError(SubcmdError):
    """Raised when the first token names no command and there is no default."""

    def __init__(self, program: str, command_name: str) -> None:
        super().__init__(
            f"{program}: {command_name}: no such command",
            hint=f'Use "{program} help" to list the available commands.',
        )
        self.program: str = program
        self.command_name: str = command_name


class ParseError(SubcmdError):
    """Raised when a command's flags could not be parsed.

    The parser's own wording is kept on :attr:`detail` for display but is
    not part of the contract.
    """

    def __init__(
        self,
        command_name: str,
        *,
        detail: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(f"{command_name}: could not parse arguments", hint=hint)
        self.command_name: str = command_name
        self.detail: str = detail


class NoDefaultCommandError(SubcmdError):
    """Raised when the default command was selected but none is registered.

    The message is the program usage text.
    """

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage: str = usage


class CommandFailedError(SubcmdError):
    """Wraps an exception raised by the caller's command logic."""

    def __init__(self, program: str, command_name: str, cause: BaseException) -> None:
        super().__init__(f"{program}: {cause}")
        self.program: str = program
        self.command_name: str = command_name
