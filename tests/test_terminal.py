from datetime import datetime, timezone

import pytest

from gokustudio.terminal import LogMessage, MessageType, Terminal


def test_log_message_format():
    stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    message = LogMessage(MessageType.INFO, "hello", stamp)
    assert str(message) == "2024-01-02 03:04:05 - [INFO] hello"


def test_error_message_uses_error_tag():
    stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert str(LogMessage(MessageType.ERROR, "boom", stamp)).endswith("[ERROR] boom")


def test_oldest_message_dropped_when_full():
    terminal = Terminal(2)
    for text in ("a", "b", "c"):
        terminal.log(text)
    assert [m.content for m in terminal.content] == ["b", "c"]
    assert len(terminal) == terminal.max_lines


def test_zero_max_lines_keeps_everything():
    terminal = Terminal(0)
    for number in range(100):
        terminal.log(number)
    assert len(terminal) == 100
    assert terminal.content[0].content == "0"


def test_messages_can_filter_errors():
    terminal = Terminal(10)
    terminal.log("fine")
    terminal.log_error("broken")
    terminal.log("also fine")
    errors = list(terminal.messages(only_errors=True))
    assert [m.content for m in errors] == ["broken"]
    assert all(m.message_type is MessageType.ERROR for m in errors)
    assert len(list(terminal.messages())) == 3


def test_lines_render_each_message():
    terminal = Terminal(5)
    terminal.log("saved")
    terminal.log_error("failed")
    lines = terminal.lines()
    assert lines[0].endswith("[INFO] saved")
    assert terminal.lines(only_errors=True) == [lines[1]]


def test_negative_max_lines_rejected():
    with pytest.raises(ValueError):
        Terminal(-1)