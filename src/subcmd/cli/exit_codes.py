"""Process exit codes returned by :func:`subcmd.cli.app.run_program`.

The core never exits; these are the only values the boundary maps
outcomes onto.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command completed, or help was shown."""

COMMAND_FAILED: int = 1
"""The selected command ran and raised."""

USAGE_ERROR: int = 2
"""The command line could not be resolved: unknown command, bad flags,
or no default command.  Same value argparse uses for usage errors."""

UNEXPECTED_ERROR: int = 70
"""Something other than a SubcmdError escaped (``EX_SOFTWARE``)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C (128 + SIGINT)."""
