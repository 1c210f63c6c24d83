# file: undoredo/core/commands/command_history.py

import logging
from typing import List, Optional, Tuple
from undoredo.core.commands.base_command import Command

class CommandHistory:
    """
    A LIFO stack of commands. The CommandManager keeps one for the undo
    history and one for the redo history.
    """
    def __init__(self, max_size: int = 0, name: str = "history"):
        # max_size <= 0 means unlimited
        self.history: List[Command] = []
        self.max_size = max_size
        self.name = name
        self.logger = logging.getLogger(self.__class__.__name__)

    def __len__(self) -> int:
        return len(self.history)

    def push(self, command: Command):
        """Puts a command on top of the stack, dropping the oldest beyond max_size."""
        self.history.append(command)
        if self.max_size > 0 and len(self.history) > self.max_size:
            dropped = self.history[:-self.max_size]
            del self.history[:-self.max_size]
            self.logger.debug(f"Dropped {len(dropped)} oldest command(s) from {self.name}")
        self.logger.debug(f"Pushed '{command.description}' to {self.name}. Size: {len(self.history)}")

    def pop(self) -> Optional[Command]:
        """Removes and returns the top command."""
        if not self.history:
            return None
        command = self.history.pop()
        self.logger.debug(f"Popped '{command.description}' from {self.name}. Size: {len(self.history)}")
        return command

    def peek(self) -> Optional[Command]:
        """Returns the top command without removing it."""
        if not self.history:
            return None
        return self.history[-1]

    def snapshot(self) -> Tuple[Command, ...]:
        """Returns the commands, most recent first."""
        return tuple(reversed(self.history))

    def clear(self):
        self.history = []
