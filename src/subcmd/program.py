"""The dispatcher: one program, a default command and named subcommands.

:class:`Program` ties the core together::

    argv -> classify -> Selection -> lookup -> bind -> on_selected(...)

Help short-circuits before any flag parsing and an unknown command
short-circuits before any command code runs.

A program holds only what it was constructed with.  Each call to
:meth:`Program.run` computes its own selection and flag set, so the same
instance can be dispatched repeatedly or re-entrantly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from subcmd.console import console_for
from subcmd.core.binder import bind
from subcmd.core.classifier import classify
from subcmd.core.models import Environment, Invocation, SelectionKind
from subcmd.core.protocols import Command
from subcmd.core.usage import render_command_usage, render_program_usage
from subcmd.exceptions import (
    CommandFailedError,
    NoDefaultCommandError,
    NoSuchCommandError,
    RegistryError,
    UsageRequested,
)

logger = logging.getLogger(__name__)

OnSelected = Callable[[Environment, Command, list[str]], None]
"""Caller-supplied business logic: ``(environment, command, args)``."""


def run_command(environment: Environment, command: Command, args: list[str]) -> None:
    """Default ``on_selected``: run the command in the default context."""
    command.run(environment.default_context(), args)


class Program:
    """A command-line program with an optional default command.

    Parameters
    ----------
    name:
        Program name shown in usage and error messages.
    description:
        Optional paragraph shown on the program usage page.
    root:
        The default command, run when no command name is given.
    commands:
        Named commands, in display order.
    environment:
        Process snapshot.  Captured from the live process when omitted.

    Raises
    ------
    RegistryError
        If there are no commands at all, or two commands share a name.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        root: Command | None = None,
        commands: Sequence[Command] = (),
        *,
        environment: Environment | None = None,
    ) -> None:
        self._name: str = name
        self._description: str = description
        self._root: Command | None = root
        self._commands: tuple[Command, ...] = tuple(commands)
        self._validate()
        self._environment: Environment = (
            environment if environment is not None else Environment.capture()
        )

    def _validate(self) -> None:
        if self._root is None and not self._commands:
            raise RegistryError(
                f"{self._name}: no commands registered",
                hint="Pass a default command, named commands, or both.",
            )
        seen: set[str] = set()
        everything = self._commands if self._root is None else (self._root, *self._commands)
        for cmd in everything:
            command_name = cmd.name()
            if command_name in seen:
                raise RegistryError(f"{self._name}: duplicate command name: {command_name}")
            seen.add(command_name)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def root(self) -> Command | None:
        return self._root

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    @property
    def environment(self) -> Environment:
        return self._environment

    def find(self, command_name: str) -> Command | None:
        """Return the named command called *command_name*, if any."""
        return next((cmd for cmd in self._commands if cmd.name() == command_name), None)

    # ------------------------------------------------------------------
    # Usage
    # ------------------------------------------------------------------

    def usage(self) -> str:
        return render_program_usage(self._name, self._description, self._root, self._commands)

    def command_usage(self, command: Command) -> str:
        return render_command_usage(self._name, command, is_default=command is self._root)

    def _help_for(self, command_name: str) -> str:
        command = self.find(command_name)
        if command is None and self._root is not None and self._root.name() == command_name:
            command = self._root
        if command is None:
            return self.usage()
        return self.command_usage(command)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def resolve(self, argv: Sequence[str]) -> Invocation:
        """Classify *argv*, pick the command and parse its flags.

        Raises
        ------
        UsageRequested
            For the help paths; carries the text to show.
        NoSuchCommandError
            If no command matches and there is no default.
        NoDefaultCommandError
            If the default was selected but none is registered.
        ParseError
            If the command's flags could not be parsed.
        """
        selection = classify(
            argv,
            [cmd.name() for cmd in self._commands],
            self._root is not None,
            program=self._name,
        )
        logger.debug(
            "%s: selected %s %s",
            self._name,
            selection.kind.value,
            selection.command_name or "",
        )

        if selection.kind is SelectionKind.HELP_PROGRAM:
            raise UsageRequested(self.usage())
        if selection.kind is SelectionKind.HELP_COMMAND:
            raise UsageRequested(self._help_for(selection.command_name or ""))

        if selection.kind is SelectionKind.NAMED:
            command = self.find(selection.command_name or "")
            residual = argv[2:]
            hint = f'Use "{self._name} help {selection.command_name}" for the list of flags.'
        else:
            if self._root is None:
                raise NoDefaultCommandError(self.usage())
            command = self._root
            residual = argv[1:]
            hint = f'Use "{self._name} help" for the list of flags.'

        if command is None:
            raise NoSuchCommandError(self._name, selection.command_name or "")

        args = bind(command, residual, hint=hint)
        return Invocation(
            environment=self._environment.with_args(argv),
            command=command,
            args=tuple(args),
        )

    def run(self, argv: Sequence[str], on_selected: OnSelected = run_command) -> None:
        """Dispatch one invocation.

        Help is written to the snapshot's stdout and the call returns
        normally.  Failures are raised as
        :class:`~subcmd.exceptions.SubcmdError` subclasses; exceptions from
        *on_selected* arrive wrapped in
        :class:`~subcmd.exceptions.CommandFailedError`.
        """
        try:
            invocation = self.resolve(argv)
        except UsageRequested as request:
            console_for(self._environment.stdout).print(request.usage, end="")
            return

        try:
            on_selected(invocation.environment, invocation.command, list(invocation.args))
        except Exception as exc:
            raise CommandFailedError(self._name, invocation.command.name(), exc) from exc
