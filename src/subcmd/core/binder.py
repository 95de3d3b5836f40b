"""Flag binding for a selected command.

Builds a fresh :class:`~subcmd.core.flags.FlagSet`, lets the command
declare its flags, and parses the residual arguments.  A parse failure
stops the dispatch before any command code runs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from subcmd.core.flags import FlagSet
from subcmd.core.protocols import Command
from subcmd.exceptions import FlagError, ParseError

logger = logging.getLogger(__name__)


def declare_flags(command: Command, *, bind: bool = False) -> FlagSet:
    """Return a new flag set with *command*'s flags declared on it.

    With ``bind=True`` parsed values are written onto *command*.
    """
    flags = FlagSet(command.name(), target=command if bind else None)
    command.register_flags(flags)
    return flags


def bind(
    command: Command,
    residual: Sequence[str],
    *,
    hint: str | None = None,
) -> list[str]:
    """Parse *residual* against *command*'s flags.

    Returns the positional arguments, order preserved.

    Raises
    ------
    ParseError
        If any flag is unknown, missing its value, or malformed.
    FlagError
        If the command declares a flag that would overwrite one of its
        methods.
    """
    flags = declare_flags(command, bind=True)
    try:
        args = flags.parse(residual)
    except FlagError as exc:
        logger.debug("flag parsing failed for %s: %s", command.name(), exc)
        raise ParseError(command.name(), detail=str(exc), hint=hint) from exc

    logger.debug("bound %s with positionals %r", command.name(), args)
    return args
