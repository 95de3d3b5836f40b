"""Per-invocation flag sets built on :mod:`argparse`.

A :class:`FlagSet` is created fresh for every dispatch.  A command
declares its flags against it, the dispatcher parses the residual
arguments, and the parsed values are written onto the command's
attributes.  Nothing survives past the invocation that built the set.

Flags use single-dash long names (``-pirate``); ``--pirate`` is accepted
as well.  Values may be given as ``-name value`` or ``-name=value``, and
boolean flags also accept ``-name=true`` / ``-name=false``.

Flag parsing stops at the first token that is not a flag (a lone ``-``
counts as one) or right after a ``--`` terminator.  That token and
everything after it are returned untouched as positionals.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any, NoReturn

from subcmd.core.models import FlagDeclaration
from subcmd.exceptions import FlagError

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def boolean(text: str) -> bool:
    """Convert a boolean flag value, e.g. ``true``, ``F`` or ``0``."""
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean value: {text!r}")


class _FlagParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise FlagError(message, flag_set=self.prog)


class FlagSet:
    """Ordered set of flag declarations for one command invocation.

    Parameters
    ----------
    name:
        Name of the owning command; used in error messages.
    target:
        Object whose attributes receive the parsed values, usually the
        command itself.  ``None`` keeps the values on the set only.
    """

    def __init__(self, name: str, *, target: object | None = None) -> None:
        self._name: str = name
        self._target: object | None = target
        self._declarations: list[FlagDeclaration] = []
        self._dests: dict[str, str] = {}
        self._switches: set[str] = set()
        self._values: dict[str, Any] | None = None
        self._parser = _FlagParser(prog=name, add_help=False, allow_abbrev=False)

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def bool_flag(
        self,
        name: str,
        usage: str,
        *,
        default: bool = False,
        dest: str | None = None,
    ) -> None:
        """Declare a switch that is set to ``True`` when present."""
        self._declare(
            name,
            usage,
            dest,
            display_default="true" if default else "",
            nargs="?",
            const=True,
            type=boolean,
            default=default,
        )
        self._switches.add(name)

    def string_flag(
        self,
        name: str,
        usage: str,
        *,
        default: str = "",
        dest: str | None = None,
    ) -> None:
        self._declare(name, usage, dest, display_default=default, default=default)

    def int_flag(
        self,
        name: str,
        usage: str,
        *,
        default: int = 0,
        dest: str | None = None,
    ) -> None:
        self._declare(
            name,
            usage,
            dest,
            display_default=str(default),
            type=int,
            default=default,
        )

    def _declare(
        self,
        name: str,
        usage: str,
        dest: str | None,
        *,
        display_default: str,
        **kwargs: Any,
    ) -> None:
        if not name or name.startswith("-") or "=" in name:
            raise FlagError(f"invalid flag name: {name!r}", flag_set=self._name)
        if name in self._dests:
            raise FlagError(f"flag redefined: {name}", flag_set=self._name)

        dest = dest or name.replace("-", "_")
        if self._target is not None and callable(getattr(self._target, dest, None)):
            raise FlagError(
                f"flag -{name} would overwrite {type(self._target).__name__}.{dest}()",
                flag_set=self._name,
                hint="Pass dest= to store the value under another attribute.",
            )
        try:
            self._parser.add_argument(f"--{name}", dest=dest, **kwargs)
        except (argparse.ArgumentError, ValueError) as exc:
            raise FlagError(str(exc), flag_set=self._name) from exc

        self._dests[name] = dest
        self._declarations.append(
            FlagDeclaration(name=name, usage=usage, default=display_default),
        )

    def declarations(self) -> tuple[FlagDeclaration, ...]:
        """All declarations, in the order they were made."""
        return tuple(self._declarations)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _split(self, args: Sequence[str]) -> tuple[list[str], list[str]]:
        """Separate the leading flags from the positional tail.

        Every flag is rewritten as ``--name`` or ``--name=value`` so the
        parser never has to guess whether a value that starts with ``-``
        is another option.
        """
        pending = list(args)
        flags: list[str] = []
        while pending:
            token = pending[0]
            if len(token) < 2 or not token.startswith("-"):
                break
            pending.pop(0)
            if token == "--":
                break

            body = token[2:] if token.startswith("--") else token[1:]
            if not body or body[0] in "-=":
                raise FlagError(f"bad flag syntax: {token}", flag_set=self._name)
            name, has_value, value = body.partition("=")
            if name not in self._dests:
                raise FlagError(
                    f"flag provided but not defined: -{name}",
                    flag_set=self._name,
                )

            if not has_value and name not in self._switches:
                if not pending:
                    raise FlagError(
                        f"flag needs an argument: -{name}",
                        flag_set=self._name,
                    )
                value = pending.pop(0)
                has_value = "="
            flags.append(f"--{name}={value}" if has_value else f"--{name}")
        return flags, pending

    def parse(self, args: Sequence[str]) -> list[str]:
        """Parse the leading flags of *args* and return the rest in order.

        Raises
        ------
        FlagError
            On an unknown flag, a missing value, or a malformed value.
        """
        flag_args, positionals = self._split(args)
        namespace = self._parser.parse_args(flag_args)

        values = {dest: getattr(namespace, dest) for dest in self._dests.values()}
        self._values = values
        if self._target is not None:
            for dest, value in values.items():
                setattr(self._target, dest, value)
        return positionals

    def value(self, name: str) -> Any:
        """Return the parsed value of flag *name*."""
        if self._values is None:
            raise FlagError("flags have not been parsed yet", flag_set=self._name)
        try:
            return self._values[self._dests[name]]
        except KeyError:
            raise FlagError(f"flag not defined: {name}", flag_set=self._name) from None
