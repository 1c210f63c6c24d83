# file: tests/test_command_group.py

import pytest

from undoredo.core.commands.command_group import CommandGroup
from undoredo.core.exceptions import InvalidCommandError

def test_new_group_is_empty():
    group = CommandGroup()
    assert group.count == 0
    assert len(group) == 0
    assert group.description == ""

def test_add_appends_command(command_cls):
    group = CommandGroup("group")
    command = command_cls("A")

    group.add(command)

    assert group.count == 1
    assert group.commands == (command,)

def test_add_none_raises():
    group = CommandGroup()

    with pytest.raises(InvalidCommandError):
        group.add(None)

    # Also a ValueError for callers that don't know the package errors
    with pytest.raises(ValueError):
        group.add(None)
    assert group.count == 0

def test_add_ignores_discarded_command(command_cls):
    group = CommandGroup()
    command = command_cls("A")
    command.discard = True

    group.add(command)

    assert group.count == 0

def test_execute_runs_in_order_and_undo_in_reverse(command_cls, log):
    group = CommandGroup()
    for name in ("A", "B", "C"):
        group.add(command_cls(name, log=log))

    assert group.execute() is None
    assert group.undo() is None

    assert log == [
        ("execute", "A"), ("execute", "B"), ("execute", "C"),
        ("undo", "C"), ("undo", "B"), ("undo", "A"),
    ]

def test_execute_purges_commands_discarded_during_execution(command_cls, log):
    group = CommandGroup()
    keep = command_cls("keep", log=log)
    group.add(keep)
    group.add(command_cls("drop", log=log, discard_on_execute=True))

    group.execute()
    log.clear()
    group.undo()

    assert group.commands == (keep,)
    assert log == [("undo", "keep")]
