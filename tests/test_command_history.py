# file: tests/test_command_history.py

from undoredo.core.commands.command_history import CommandHistory

def test_push_and_pop_are_lifo(command_cls):
    history = CommandHistory()
    a, b = command_cls("A"), command_cls("B")
    history.push(a)
    history.push(b)

    assert history.peek() is b
    assert history.pop() is b
    assert history.pop() is a
    assert len(history) == 0

def test_pop_and_peek_on_empty_history_return_none():
    history = CommandHistory()
    assert history.pop() is None
    assert history.peek() is None

def test_snapshot_is_most_recent_first(command_cls):
    history = CommandHistory()
    commands = [command_cls(name) for name in "ABC"]
    for command in commands:
        history.push(command)

    assert history.snapshot() == tuple(reversed(commands))

def test_max_size_drops_oldest(command_cls):
    history = CommandHistory(max_size=2)
    a, b, c = command_cls("A"), command_cls("B"), command_cls("C")
    for command in (a, b, c):
        history.push(command)

    assert history.snapshot() == (c, b)

def test_zero_max_size_is_unlimited(command_cls):
    history = CommandHistory(max_size=0)
    for i in range(100):
        history.push(command_cls(str(i)))
    assert len(history) == 100

def test_clear(command_cls):
    history = CommandHistory()
    history.push(command_cls("A"))
    history.clear()
    assert len(history) == 0
