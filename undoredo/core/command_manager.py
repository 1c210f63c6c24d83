# file: undoredo/core/command_manager.py

import logging
from contextlib import contextmanager
from typing import Any, Callable, Optional, Protocol, Tuple

from undoredo.core.commands.base_command import Command
from undoredo.core.commands.command_group import CommandGroup
from undoredo.core.commands.command_history import CommandHistory
from undoredo.core.event_args import ExecutingEventArgs, NotifyEventArgs
from undoredo.core.event_dispatcher import EventDispatcher
from undoredo.core.exceptions import (
    ConfigurationError,
    GroupStateError,
    HistoryUnderflowError,
    ReentrantOperationError,
)

# Type hint for the config_loader dependency
class ConfigLoader(Protocol):
    def get_config(self, filename: str) -> dict: ...


class CommandManager:
    """
    Implements the Command Pattern's "Invoker" with undo/redo history.

    Every command that should take part in the history must be run through
    execute(). To record several commands as one history entry:

        manager.begin_group("Move shapes")
        manager.execute(MoveCommand(a, dx, dy))
        manager.execute(MoveCommand(b, dx, dy))
        manager.end_group()

    The manager is not thread-safe and not reentrant: listeners and commands
    must not call execute/undo/redo on the manager that notified them.
    """

    # Manager-level event types published on self.events
    EXECUTING = "COMMAND.EXECUTING"         # (command, ExecutingEventArgs)
    EXECUTED = "COMMAND.EXECUTED"           # (command, NotifyEventArgs)
    DISCARDED = "COMMAND.DISCARDED"         # (command, NotifyEventArgs)
    HISTORY_CHANGED = "HISTORY.CHANGED"     # (manager)
    FUTURE_CHANGED = "FUTURE.CHANGED"       # (manager)

    def __init__(self, config_loader: Optional[ConfigLoader] = None, max_history: Optional[int] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.events = EventDispatcher()

        if max_history is None:
            max_history = 0
            if config_loader is not None:
                cmd_config = config_loader.get_config("commands_config.json")
                max_history = cmd_config.get("max_history", 0)
            try:
                max_history = int(max_history)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid max_history value {max_history!r}: {e}") from e

        self._undo_stack = CommandHistory(max_size=max_history, name="undo history")
        self._redo_stack = CommandHistory(name="redo history")
        self._current_group: Optional[CommandGroup] = None
        self._marker: Optional[Command] = None
        self._running: Optional[str] = None

        limit = max_history if max_history > 0 else "unlimited"
        self.logger.info(f"CommandManager initialized with history size {limit}")

    # --- Subscriptions ---

    def subscribe(self, event_type: str, listener: Callable[..., Any]):
        self.events.subscribe(event_type, listener)

    def unsubscribe(self, event_type: str, listener: Callable[..., Any]):
        self.events.unsubscribe(event_type, listener)

    # --- State ---

    @property
    def is_group(self) -> bool:
        """True while a group is being built between begin_group() and end_group()."""
        return self._current_group is not None

    @property
    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    @property
    def undo_description(self) -> Optional[str]:
        """Description of the command the next undo() would revert."""
        command = self._undo_stack.peek()
        return command.description if command is not None else None

    @property
    def redo_description(self) -> Optional[str]:
        """Description of the command the next redo() would repeat."""
        command = self._redo_stack.peek()
        return command.description if command is not None else None

    def get_undo_commands(self) -> Tuple[Command, ...]:
        """Returns the commands that can be undone, most recent first."""
        return self._undo_stack.snapshot()

    def get_redo_commands(self) -> Tuple[Command, ...]:
        """Returns the commands that can be redone, most recent first."""
        return self._redo_stack.snapshot()

    # --- Groups ---

    def begin_group(self, description: str):
        """
        Starts collecting executed commands into one CommandGroup.

        Raises:
            GroupStateError: If a group is already open.
        """
        if self._current_group is not None:
            raise GroupStateError(
                f"Cannot begin group '{description}': group '{self._current_group.description}' is still open."
            )
        self._current_group = CommandGroup(description)
        self.logger.info(f"Began group '{description}'")

    def end_group(self):
        """
        Closes the open group and puts it on the undo history as one entry.
        An empty group is dropped.

        Raises:
            GroupStateError: If no group is open.
        """
        if self._current_group is None:
            raise GroupStateError("Cannot end group: no group is open.")

        group = self._current_group
        self._current_group = None

        if group.count == 0:
            self.logger.info(f"Group '{group.description}' is empty and was not added to the history")
            return

        self._undo_stack.push(group)
        self._on_history_changed()
        self.logger.info(f"Ended group '{group.description}' with {group.count} command(s)")

    # --- Execution ---

    def execute(self, command: Command) -> Any:
        """
        Executes a command and records it in the history.

        Args:
            command (Command): The command to execute.

        Returns:
            Any: The result of command.execute(), or None if the command
            was discarded or is an empty group.
        """
        with self._operation("execute"):
            # Discarded before we even started, e.g. in the constructor
            if command.discard:
                self._on_discarded(command, "Command discarded")
                return None

            if isinstance(command, CommandGroup) and command.count == 0:
                self.logger.debug("Ignored empty command group")
                return None

            executing = ExecutingEventArgs(command, command.requires_user_confirmation)
            # A failing listener stops the command; the error reaches the caller
            self.events.publish(self.EXECUTING, command, executing, raise_errors=True)
            if executing.cancel:
                command.discard = True
                self._on_discarded(command, "Command discarded by user")
                return None

            try:
                result = command.execute()
            except Exception as e:
                self.logger.error(f"Command '{command.description}' failed: {e}", exc_info=True)
                raise

            # Discarded by its own execute method
            if command.discard:
                self._on_discarded(command, "Command discarded during execution")
                return None

            self._on_executed(command, NotifyEventArgs(command.description))

            if self._current_group is None:
                self._undo_stack.push(command)
                self._on_history_changed()
            else:
                self._current_group.add(command)

            self._redo_stack.clear()
            self._on_future_changed()

            if not command.can_be_undone:
                self.logger.info(
                    f"'{command.description}' cannot be undone ({command.cannot_be_undone_message}). Clearing undo history."
                )
                self._undo_stack.clear()
                self._on_history_changed()

            self.logger.info(f"Executed '{command.description}'")
            return result

    def undo(self) -> Any:
        """
        Undoes the most recent command.

        Raises:
            HistoryUnderflowError: If there is nothing to undo.
        """
        with self._operation("undo"):
            if not self._undo_stack:
                raise HistoryUnderflowError("Nothing to undo.")

            command = self._undo_stack.pop()
            self._on_history_changed()

            try:
                result = command.undo()
            except Exception as e:
                self.logger.error(f"Undo of '{command.description}' failed: {e}", exc_info=True)
                raise

            self._on_executed(command, NotifyEventArgs(f"{command.description} - undone"))

            self._redo_stack.push(command)
            self._on_future_changed()

            self.logger.info(f"Undone '{command.description}'")
            return result

    def undo_everything(self):
        """Undoes every command in the undo history."""
        while self._undo_stack:
            self.undo()

    def redo(self) -> Any:
        """
        Executes the most recently undone command again.

        Raises:
            HistoryUnderflowError: If there is nothing to redo.
        """
        with self._operation("redo"):
            if not self._redo_stack:
                raise HistoryUnderflowError("Nothing to redo.")

            command = self._redo_stack.pop()
            self._on_future_changed()

            try:
                result = command.execute()
            except Exception as e:
                self.logger.error(f"Redo of '{command.description}' failed: {e}", exc_info=True)
                raise

            self._on_executed(command, NotifyEventArgs(f"{command.description} - redone"))

            self._undo_stack.push(command)
            self._on_history_changed()

            self.logger.info(f"Redone '{command.description}'")
            return result

    # --- Marker ---

    def set_marker(self):
        """Marks the current top of the undo history, e.g. after saving."""
        self._marker = self._undo_stack.peek()

    def is_at_marker(self) -> bool:
        """True if the undo history top is still the command marked by set_marker()."""
        if self._marker is None:
            return len(self._undo_stack) == 0
        return self._undo_stack.peek() is self._marker

    def clear(self):
        """Forgets all history, the open group and the marker. No events are published."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        self._current_group = None
        self._marker = None
        self.logger.debug("Command history cleared")

    # --- Internals ---

    @contextmanager
    def _operation(self, name: str):
        if self._running is not None:
            raise ReentrantOperationError(
                f"Cannot {name} while {self._running} is running on the same CommandManager."
            )
        self._running = name
        try:
            yield
        finally:
            self._running = None

    def _on_executed(self, command: Command, args: NotifyEventArgs):
        self.events.publish(self.EXECUTED, command, args)
        command.on_executed(command, args)

    def _on_discarded(self, command: Command, message: str):
        self.logger.warning(f"{message}: '{command.description}'")
        args = NotifyEventArgs(message, discarded=True)
        self.events.publish(self.DISCARDED, command, args)
        self.events.publish(self.EXECUTED, command, args)

    def _on_history_changed(self):
        self.events.publish(self.HISTORY_CHANGED, self)

    def _on_future_changed(self):
        self.events.publish(self.FUTURE_CHANGED, self)
