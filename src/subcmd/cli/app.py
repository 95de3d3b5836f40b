"""CLI entry point and error boundary.

:func:`run_program` is the **sole error boundary**: it dispatches a
:class:`~subcmd.program.Program`, catches every
:class:`~subcmd.exceptions.SubcmdError`, ``KeyboardInterrupt`` and any
unexpected ``Exception``, renders a message on the snapshot's stderr via
Rich and returns an exit code.  It never calls ``sys.exit`` itself; only
:func:`cli` does.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from rich.logging import RichHandler
from rich.text import Text

from subcmd.cli import exit_codes
from subcmd.cli.greet import GreetCommand
from subcmd.console import console_for
from subcmd.core.models import Environment
from subcmd.exceptions import (
    CommandFailedError,
    NoDefaultCommandError,
    SubcmdError,
)
from subcmd.program import OnSelected, Program, run_command

LOG_LEVEL_VAR = "SUBCMD_LOG_LEVEL"
"""Environment variable that turns on diagnostic logging."""


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(environment: Environment) -> bool:
    """Attach a Rich log handler to the ``subcmd`` logger if requested.

    Reads :data:`LOG_LEVEL_VAR` from the snapshot, not from the live
    process.  Unknown level names fall back to ``INFO``.  Returns whether
    logging was enabled.  Calling it again does not add a second handler.
    """
    level_name = environment.environ.get(LOG_LEVEL_VAR, "").strip().upper()
    if not level_name:
        return False

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    package_logger = logging.getLogger("subcmd")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(
                console=console_for(environment.stderr),
                show_time=False,
                show_path=False,
            )
        )
    return True


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

def _print_error(environment: Environment, exc: SubcmdError) -> None:
    console = console_for(environment.stderr)
    console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
    if isinstance(exc, CommandFailedError) and exc.__cause__ is not None:
        console.print(Text(f"  {type(exc.__cause__).__name__}", style="dim"))
    if exc.hint:
        console.print(Text.assemble(("Hint: ", "yellow"), exc.hint))


def run_program(
    program: Program,
    argv: Sequence[str] | None = None,
    on_selected: OnSelected = run_command,
) -> int:
    """Dispatch *program* and translate the outcome into an exit code.

    Parameters
    ----------
    argv:
        Full argument vector, program path first.  When ``None``,
        ``sys.argv`` is used.
    on_selected:
        Business logic forwarded to :meth:`Program.run`.
    """
    if argv is None:
        argv = sys.argv
    environment = program.environment

    try:
        program.run(argv, on_selected)
    except NoDefaultCommandError as exc:
        console_for(environment.stderr).print(exc.usage, end="")
        return exit_codes.USAGE_ERROR
    except CommandFailedError as exc:
        _print_error(environment, exc)
        return exit_codes.COMMAND_FAILED
    except SubcmdError as exc:
        _print_error(environment, exc)
        return exit_codes.USAGE_ERROR
    except KeyboardInterrupt:
        console_for(environment.stderr).print(Text("\nAborted by user.", style="yellow"))
        return exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        console_for(environment.stderr).print(
            Text.assemble(
                ("Unexpected error. ", "bold red"),
                "Please report this issue.\n",
                f"  {type(exc).__name__}: {exc}",
            )
        )
        return exit_codes.UNEXPECTED_ERROR
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# The greet program
# ---------------------------------------------------------------------------

def build_greet_program(environment: Environment | None = None) -> Program:
    return Program("greet", root=GreetCommand(), environment=environment)


def main(argv: list[str] | None = None, environment: Environment | None = None) -> int:
    """Run the ``greet`` example program and return its exit code."""
    program = build_greet_program(environment)
    configure_logging(program.environment)
    return run_program(program, argv)


def cli() -> None:
    """Console-script entry point."""
    sys.exit(main())
