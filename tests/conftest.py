# file: tests/conftest.py

import pytest
from unittest.mock import MagicMock, patch

from undoredo.core.command_manager import CommandManager
from undoredo.core.commands.base_command import Command

# --- Test Commands ---

class RecordingCommand(Command):
    """
    A command that appends ("execute"|"undo", description) to a shared log
    and counts its own calls.
    """
    def __init__(self, description: str = "", log=None, result=None, discard_on_execute: bool = False):
        super().__init__(description)
        self.log = log if log is not None else []
        self.result = result
        self.discard_on_execute = discard_on_execute
        self.executed_count = 0
        self.undone_count = 0

    def execute(self):
        self.executed_count += 1
        self.log.append(("execute", self.description))
        if self.discard_on_execute:
            self.discard = True
        return self.result

    def undo(self):
        self.undone_count += 1
        self.log.append(("undo", self.description))
        return self.result


class IrreversibleCommand(RecordingCommand):
    """A command that cannot be undone and asks for confirmation first."""
    def __init__(self, description: str = "Irreversible", **kwargs):
        super().__init__(description, **kwargs)
        self.can_be_undone = False
        self.cannot_be_undone_message = "Too complicated"
        self.requires_user_confirmation = True


class FailingCommand(Command):
    """A command whose execute and undo raise the given error."""
    def __init__(self, error: Exception, description: str = "Failing"):
        super().__init__(description)
        self.error = error

    def execute(self):
        raise self.error

    def undo(self):
        raise self.error


@pytest.fixture
def command_cls():
    return RecordingCommand

@pytest.fixture
def irreversible_cls():
    return IrreversibleCommand

@pytest.fixture
def failing_cls():
    return FailingCommand

@pytest.fixture
def manager():
    """Returns a fresh CommandManager with unlimited history."""
    return CommandManager()

@pytest.fixture
def log():
    """A shared call log for RecordingCommands."""
    return []

# --- Mocks for Ambient Components ---

@pytest.fixture
def mock_config_loader(tmp_path):
    """A MagicMock standing in for ConfigLoader."""
    loader = MagicMock()
    loader.get_config.return_value = {}
    loader.get.return_value = None
    loader.get_data_dir.return_value = tmp_path
    return loader

@pytest.fixture
def temp_config_dir(tmp_path):
    """Creates a temporary directory for config files."""
    return tmp_path

# --- Global Mock for psutil.Process ---
# Ensures MemoryLogFilter uses a mock process during tests instead of
# making real system calls.
class MockProcess:
    def memory_info(self):
        return MagicMock(rss=100 * 1024 * 1024) # Default 100MB RSS

mock_psutil_process = MockProcess()

@pytest.fixture(scope="session", autouse=True)
def mock_psutil_process_globally():
    """Globally patches psutil.Process for all tests."""
    with patch('psutil.Process', return_value=mock_psutil_process):
        yield
