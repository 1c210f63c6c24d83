# file: undoredo/core/exceptions.py
"""
Defines the custom exception hierarchy for the command manager.
"""

class CommandManagerError(Exception):
    """Base exception for all command-manager errors."""
    pass

# --- Configuration Errors ---
class ConfigurationError(CommandManagerError):
    """Error related to loading, parsing, or saving configuration."""
    pass

# --- Composite Errors ---
class InvalidCommandError(CommandManagerError, ValueError):
    """Raised when a missing command or factory is added to a composite."""
    pass

# --- History Errors ---
class HistoryUnderflowError(CommandManagerError, IndexError):
    """Raised by undo()/redo() when there is nothing to undo or redo."""
    pass

class GroupStateError(CommandManagerError):
    """Raised when begin_group/end_group are called out of order."""
    pass

class ReentrantOperationError(CommandManagerError):
    """
    Raised when execute/undo/redo is called on a manager that is
    already in the middle of one of those operations.
    """
    pass

# --- Command Errors ---
class CommandValidationError(Exception):
    """
    Wraps an error raised while a command validates its input.

    The message of the wrapped exception is kept unchanged. This error is
    never handled by the CommandManager; it always reaches the caller.
    """
    def __init__(self, inner_exception: BaseException):
        super().__init__(str(inner_exception))
        self.inner_exception = inner_exception
        self.__cause__ = inner_exception
