# file: undoredo/__init__.py
"""
Undo/redo history for applications built on the Command pattern.

Wrap every reversible action in a Command subclass and run it through a
CommandManager:

    manager = CommandManager()
    manager.execute(RenameCommand(doc, "new name"))
    manager.undo()
    manager.redo()
"""

from undoredo.core.command_manager import CommandManager
from undoredo.core.commands.base_command import Command
from undoredo.core.commands.command_group import CommandGroup
from undoredo.core.commands.macro import Macro
from undoredo.core.event_args import ExecutingEventArgs, NotifyEventArgs
from undoredo.core.event_dispatcher import EventDispatcher
from undoredo.core.exceptions import (
    CommandManagerError,
    CommandValidationError,
    ConfigurationError,
    GroupStateError,
    HistoryUnderflowError,
    InvalidCommandError,
    ReentrantOperationError,
)

__version__ = "1.0.0"

__all__ = [
    "Command",
    "CommandGroup",
    "CommandManager",
    "CommandManagerError",
    "CommandValidationError",
    "ConfigurationError",
    "EventDispatcher",
    "ExecutingEventArgs",
    "GroupStateError",
    "HistoryUnderflowError",
    "InvalidCommandError",
    "Macro",
    "NotifyEventArgs",
    "ReentrantOperationError",
]
