"""``greet`` — the bundled example command.

Says hello, optionally like a pirate.  Used as the default command of the
``greet`` program (``python -m subcmd``).
"""

from __future__ import annotations

from collections.abc import Sequence

from subcmd.console import console_for
from subcmd.core.flags import FlagSet
from subcmd.core.protocols import Context

GREET_HELP = """
a friendly greeting in the terminal.
"""

PIRATE_USAGE = "say hello like a pirate"


class GreetCommand:
    """Print ``Hello, <name>!`` (or ``Ahoy, <name>!`` with ``-pirate``)."""

    def __init__(self) -> None:
        self.pirate: bool = False

    def name(self) -> str:
        return "greet"

    def args_signature(self) -> str:
        return "[name]"

    def description(self) -> str:
        return "says hello"

    def help(self) -> str:
        return GREET_HELP.strip()

    def register_flags(self, flags: FlagSet) -> None:
        flags.bool_flag("p", PIRATE_USAGE, dest="pirate")
        flags.bool_flag("pirate", PIRATE_USAGE)

    def run(self, context: Context, args: Sequence[str]) -> None:
        greeting = "Ahoy, {}!" if self.pirate else "Hello, {}!"
        who = args[0] if args else "there"
        console_for(context.stdout).print(greeting.format(who))
