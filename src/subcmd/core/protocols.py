"""Protocols (interfaces) consumed by the core layer.

Commands are supplied by the caller.  The dispatcher depends ONLY on
these protocols — any object with the right methods can be registered,
no explicit inheritance required.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from subcmd.core.flags import FlagSet


class Context(Protocol):
    """What a running command may see of the process it runs in."""

    @property
    def working_dir(self) -> str:
        """Directory the process was started from."""
        ...  # pragma: no cover

    @property
    def stdout(self) -> TextIO:
        ...  # pragma: no cover

    @property
    def stderr(self) -> TextIO:
        ...  # pragma: no cover


class Command(Protocol):
    """Contract for a registrable command.

    The dispatcher calls :meth:`register_flags` on a fresh
    :class:`~subcmd.core.flags.FlagSet` for every invocation (and whenever
    usage text is rendered), so registration must only declare flags.
    Parsed values are written back onto the attributes named by each
    declaration's ``dest`` before :meth:`run` is called.
    """

    def name(self) -> str:
        """Unique name used to select the command on the command line."""
        ...  # pragma: no cover

    def args_signature(self) -> str:
        """Positional-argument synopsis shown in usage, e.g. ``"[name]"``."""
        ...  # pragma: no cover

    def description(self) -> str:
        """One-line summary shown in the program's command table."""
        ...  # pragma: no cover

    def help(self) -> str:
        """Multi-line help text; surrounding whitespace is ignored."""
        ...  # pragma: no cover

    def register_flags(self, flags: FlagSet) -> None:
        ...  # pragma: no cover

    def run(self, context: Context, args: Sequence[str]) -> None:
        """Execute the command with its positional arguments.

        Raise any exception to signal failure; the dispatcher wraps it in
        :class:`~subcmd.exceptions.CommandFailedError`.
        """
        ...  # pragma: no cover
