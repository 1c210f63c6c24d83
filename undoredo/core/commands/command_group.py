# file: undoredo/core/commands/command_group.py

import logging
from typing import List, Tuple

from undoredo.core.commands.base_command import Command
from undoredo.core.exceptions import InvalidCommandError

class CommandGroup(Command):
    """
    A command made of already-executed sub-commands that is undone and
    redone as a single history entry.

    The CommandManager builds one between begin_group() and end_group().
    """
    def __init__(self, description: str = ""):
        super().__init__(description)
        self._commands: List[Command] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def count(self) -> int:
        """Number of sub-commands in the group."""
        return len(self._commands)

    @property
    def commands(self) -> Tuple[Command, ...]:
        return tuple(self._commands)

    def __len__(self):
        return len(self._commands)

    def add(self, command: Command):
        """
        Adds a command to the group. Discarded commands are ignored.

        Raises:
            InvalidCommandError: If command is None.
        """
        if command is None:
            raise InvalidCommandError("command is None")

        if not command.discard:
            self._commands.append(command)
        else:
            self.logger.debug(f"Skipped discarded command '{command.description}'")

    def execute(self):
        for command in self._commands:
            command.execute()

        # Drop sub-commands that discarded themselves; nothing to undo for them
        self._commands = [command for command in self._commands if not command.discard]
        return None

    def undo(self):
        for command in reversed(self._commands):
            command.undo()
        return None
