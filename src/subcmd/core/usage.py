"""Usage text rendering.

Every function here returns plain text; printing is the caller's job.

Program usage lists the commands in registration order.  Command usage
shows the invocation line, the command's help text and a flags table in
which two flags with the same help text are merged into one row.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from subcmd.core.binder import declare_flags
from subcmd.core.models import FlagDeclaration
from subcmd.core.protocols import Command

NONE_TOKEN = "<none>"

_INDENT = "  "
_PADDING = "  "


# ---------------------------------------------------------------------------
# Flag rows
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagRow:
    """One line of the flags table."""

    names: tuple[str, ...]
    usage: str
    default: str

    @property
    def label(self) -> str:
        return " ".join(f"-{name}" for name in self.names)

    @property
    def text(self) -> str:
        return f"{self.usage} (default: {pretty_default(self.default)})"


def pretty_default(value: str) -> str:
    """Render an empty default as ``<none>``, anything else verbatim."""
    return value if value else NONE_TOKEN


def coalesce_flags(declarations: Sequence[FlagDeclaration]) -> list[FlagRow]:
    """Group declarations into table rows.

    The first two declarations sharing a usage text become one row, at
    the position of the first.  Any further declaration with that text
    gets a row of its own.
    """
    rows: list[FlagRow] = []
    waiting: dict[str, int] = {}
    merged: set[str] = set()

    for decl in declarations:
        index = waiting.pop(decl.usage, None)
        if index is not None:
            first = rows[index]
            rows[index] = FlagRow(first.names + (decl.name,), first.usage, first.default)
            merged.add(decl.usage)
            continue
        if decl.usage not in merged:
            waiting[decl.usage] = len(rows)
        rows.append(FlagRow((decl.name,), decl.usage, decl.default))
    return rows


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def _columns(rows: Sequence[tuple[str, str]]) -> list[str]:
    """Align two-column rows the way a tab writer would."""
    width = max((len(left) for left, _ in rows), default=0)
    return [f"{_INDENT}{left:<{width}}{_PADDING}{right}".rstrip() for left, right in rows]


def render_flag_table(declarations: Sequence[FlagDeclaration]) -> list[str]:
    return _columns([(row.label, row.text) for row in coalesce_flags(declarations)])


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

def render_command_usage(program: str, command: Command, *, is_default: bool) -> str:
    """Build the help page for a single command."""
    if is_default:
        invocation = f"Usage: {program} {command.args_signature()}"
    else:
        invocation = f"Usage: {program} {command.name()} {command.args_signature()}"

    lines = [invocation.rstrip(), "", command.help().strip(), ""]

    declarations = declare_flags(command).declarations()
    if declarations:
        lines += ["Flags:", ""]
        lines += render_flag_table(declarations)
        lines.append("")

    return "\n".join(lines) + "\n"


def render_program_usage(
    program: str,
    description: str,
    root: Command | None,
    commands: Sequence[Command],
) -> str:
    """Build the program-level help page.

    With no named commands the page is the default command's own usage.
    """
    if not commands:
        if root is None:
            return f"Usage: {program}\n"
        return render_command_usage(program, root, is_default=True).strip() + "\n"

    lines = [f"Usage: {program} <command>", ""]
    if description.strip():
        lines += [description.strip(), ""]

    rows: list[tuple[str, str]] = []
    if root is not None:
        rows.append(("[default]", root.name()))
    rows += [(cmd.name(), cmd.description()) for cmd in commands]

    lines += ["Commands:", ""]
    lines += _columns(rows)
    lines += ["", f'Use "{program} help [command]" for more information about a command.']
    return "\n".join(lines) + "\n"
