# file: undoredo/core/commands/macro.py

import logging
from typing import Callable, List, Tuple

from undoredo.core.commands.base_command import Command
from undoredo.core.exceptions import InvalidCommandError

CommandFactory = Callable[[], Command]

class Macro(Command):
    """
    A command that stores command factories instead of commands.

    Each factory is called only while the macro executes, right before its
    command runs, so a command can be built from the state left behind by
    the commands before it. A factory that raises stops the macro; the
    commands already executed stay executed.
    """
    def __init__(self, description: str = ""):
        super().__init__(description)
        self._command_factories: List[CommandFactory] = []
        self._commands: List[Command] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def count(self) -> int:
        """Number of factories in the macro."""
        return len(self._command_factories)

    @property
    def commands(self) -> Tuple[Command, ...]:
        """The commands built and kept by the last execution."""
        return tuple(self._commands)

    def __len__(self):
        return len(self._command_factories)

    def add(self, command_factory: CommandFactory):
        """
        Adds a command factory to the macro without calling it.

        Raises:
            InvalidCommandError: If command_factory is None or not callable.
        """
        if command_factory is None:
            raise InvalidCommandError("command factory is None")
        if not callable(command_factory):
            raise InvalidCommandError(f"command factory {command_factory!r} is not callable")

        self._command_factories.append(command_factory)

    def execute(self):
        for command_factory in self._command_factories:
            command = command_factory()
            if command.discard:
                self.logger.debug(f"Macro '{self.description}' skipped discarded command '{command.description}'")
                continue

            command.execute()
            if command.discard:
                continue
            self._commands.append(command)

        self.logger.debug(f"Macro '{self.description}' kept {len(self._commands)} of {len(self._command_factories)} commands")
        return None

    def undo(self):
        for command in reversed(self._commands):
            command.undo()

        # A redo calls the factories again, so the undone commands are not reused
        self._commands = []
        return None
