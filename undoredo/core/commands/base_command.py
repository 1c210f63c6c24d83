# file: undoredo/core/commands/base_command.py

from abc import ABC, abstractmethod
from typing import Any

from undoredo.core.event_args import NotifyEventArgs
from undoredo.core.event_dispatcher import EventDispatcher

class Command(ABC):
    """
    Abstract base class for a command in the Command Pattern.

    Subclass it, store everything needed to reverse the action in the
    constructor, and implement execute() and undo(). Always run commands
    through a CommandManager; calling execute() directly bypasses the
    history.
    """

    # Event published on self.events after the manager commits, undoes or
    # redoes this command. Listeners receive (sender, NotifyEventArgs).
    EXECUTED = "COMMAND.EXECUTED"

    def __init__(self, description: str = ""):
        self.description: str = description
        # Set to True to keep the command out of the history
        self.discard: bool = False
        self.can_be_undone: bool = True
        self.cannot_be_undone_message: str = ""
        self.requires_user_confirmation: bool = False
        self.events = EventDispatcher()

    @abstractmethod
    def execute(self) -> Any:
        """
        Execute the command.
        Called on the first run and again on every redo.
        """
        pass

    @abstractmethod
    def undo(self) -> Any:
        """
        Reverse the effects of the execute method.
        """
        pass

    def on_executed(self, sender: Any, args: NotifyEventArgs):
        """Called by the CommandManager once this command was committed, undone or redone."""
        self.events.publish(self.EXECUTED, sender, args)

    def __str__(self):
        return self.description

    def __repr__(self):
        return f"<{self.__class__.__name__} description={self.description!r}>"
