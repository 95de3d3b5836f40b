"""subcmd — default-command and subcommand dispatch for command-line tools.

Classifies an argument vector into a default command, a named command or
a help request, parses the selected command's flags and hands the result
to caller-supplied logic.
"""

from subcmd.core.flags import FlagSet
from subcmd.core.models import DefaultContext, Environment, Selection, SelectionKind
from subcmd.core.protocols import Command, Context
from subcmd.exceptions import (
    CommandFailedError,
    FlagError,
    NoDefaultCommandError,
    NoSuchCommandError,
    ParseError,
    RegistryError,
    SubcmdError,
    UsageRequested,
)
from subcmd.program import Program, run_command
from subcmd.version import __version__

__all__: list[str] = [
    "Command",
    "CommandFailedError",
    "Context",
    "DefaultContext",
    "Environment",
    "FlagError",
    "FlagSet",
    "NoDefaultCommandError",
    "NoSuchCommandError",
    "ParseError",
    "Program",
    "RegistryError",
    "Selection",
    "SelectionKind",
    "SubcmdError",
    "UsageRequested",
    "__version__",
    "run_command",
]
