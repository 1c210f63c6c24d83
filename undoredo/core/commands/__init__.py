# file: undoredo/core/commands/__init__.py

from undoredo.core.commands.base_command import Command
from undoredo.core.commands.command_group import CommandGroup
from undoredo.core.commands.command_history import CommandHistory
from undoredo.core.commands.macro import Macro

__all__ = ["Command", "CommandGroup", "CommandHistory", "Macro"]
