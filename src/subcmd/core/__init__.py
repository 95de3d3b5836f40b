"""Core layer — classification, flag binding and usage rendering.

Rules
-----
* No printing; text is returned, never written.
* No imports from ``cli``.
* Nothing is cached between dispatches.
"""

from subcmd.core.binder import bind, declare_flags
from subcmd.core.classifier import classify, is_help
from subcmd.core.flags import FlagSet
from subcmd.core.models import (
    DefaultContext,
    Environment,
    FlagDeclaration,
    Invocation,
    Selection,
    SelectionKind,
)
from subcmd.core.protocols import Command, Context
from subcmd.core.usage import coalesce_flags, render_command_usage, render_program_usage

__all__: list[str] = [
    "Command",
    "Context",
    "DefaultContext",
    "Environment",
    "FlagDeclaration",
    "FlagSet",
    "Invocation",
    "Selection",
    "SelectionKind",
    "bind",
    "classify",
    "coalesce_flags",
    "declare_flags",
    "is_help",
    "render_command_usage",
    "render_program_usage",
]
