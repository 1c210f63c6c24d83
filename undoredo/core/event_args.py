# file: undoredo/core/event_args.py

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from undoredo.core.commands.base_command import Command

class NotifyEventArgs:
    """Payload for the 'executed' and 'discarded' notifications."""
    def __init__(self, message: str, discarded: bool = False):
        self._message = message
        self._discarded = discarded

    @property
    def message(self) -> str:
        return self._message

    @property
    def discarded(self) -> bool:
        """True if the command was discarded instead of committed."""
        return self._discarded

    def __repr__(self):
        return f"NotifyEventArgs(message={self._message!r}, discarded={self._discarded})"


class ExecutingEventArgs:
    """
    Payload for the 'executing' notification.

    Listeners set `cancel` to True to block the command, or to False to
    confirm a command that asked for user confirmation.
    """
    def __init__(self, command: "Command", cancel: bool = False):
        self._command = command
        self.cancel: bool = cancel

    @property
    def command(self) -> "Command":
        """The command that is about to be executed."""
        return self._command

    def __repr__(self):
        return f"ExecutingEventArgs(command={self._command!r}, cancel={self.cancel})"
