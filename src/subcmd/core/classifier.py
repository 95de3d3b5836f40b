"""Pure argument classification.

Maps a raw argument vector onto a :class:`~subcmd.core.models.Selection`.
No I/O, no side effects, and nothing is remembered between calls.

Precedence (enforced by :func:`classify`):

1. **Help** — a help-like first token always wins, so a command named
   ``help`` can never be selected by name.
2. **Name** — an exact command name beats the default command.
3. **Default** — anything else is handed to the default command, if any.
"""

from __future__ import annotations

import os
from collections.abc import Collection, Sequence

from subcmd.core.models import Selection
from subcmd.exceptions import NoSuchCommandError


def is_help(arg: str) -> bool:
    """Return ``True`` for ``-h`` or any token containing ``help``."""
    lowered = arg.lower()
    return "help" in lowered or lowered == "-h"


def is_command(arg: str, names: Collection[str]) -> bool:
    return arg in names


def classify(
    argv: Sequence[str],
    names: Collection[str],
    has_default: bool,
    *,
    program: str | None = None,
) -> Selection:
    """Decide what *argv* asks for.

    Parameters
    ----------
    argv:
        Full argument vector; ``argv[0]`` is the program path.
    names:
        Names of the registered (non-default) commands.
    has_default:
        Whether a default command is registered.
    program:
        Program name used in error messages.  Defaults to the base name
        of ``argv[0]``.

    Raises
    ------
    NoSuchCommandError
        When the first token is neither help, a command name, nor
        absorbable by a default command.
    """
    if len(argv) <= 1:
        return Selection.default()

    first = argv[1]
    if is_help(first):
        if len(argv) == 2:
            return Selection.help_program()
        return Selection.help_command(argv[2])
    if is_command(first, names):
        return Selection.named(first)
    if has_default:
        return Selection.default()

    if program is None:
        program = os.path.basename(argv[0])
    raise NoSuchCommandError(program, first)
