import io

import pytest

from czivalidate.consoleio import ConsoleColor, ConsoleLog, Log, ansi_sequence


class _TerminalStream(io.StringIO):
    def isatty(self):
        return True


def test_ansi_sequence_dark_green_on_default():
    assert ansi_sequence(ConsoleColor.DARK_GREEN, ConsoleColor.DEFAULT) == "\033[32m\033[49m"


def test_ansi_sequence_default_on_default():
    assert ansi_sequence(ConsoleColor.DEFAULT, ConsoleColor.DEFAULT) == "\033[39m\033[49m"


def test_ansi_sequence_light_yellow_on_white():
    assert ansi_sequence(ConsoleColor.LIGHT_YELLOW, ConsoleColor.WHITE) == "\033[93m\033[107m"


@pytest.mark.parametrize("color", list(ConsoleColor))
def test_every_color_has_distinct_sequences(color):
    sequence = ansi_sequence(color, color)
    assert sequence.count("\033[") == 2
    others = {ansi_sequence(c, c) for c in ConsoleColor if c is not color}
    assert sequence not in others


def test_unknown_color_contributes_nothing():
    assert ansi_sequence(99, ConsoleColor.DEFAULT) == "\033[49m"


def test_log_is_abstract():
    with pytest.raises(TypeError):
        Log()


def test_write_line_stdout_appends_newline():
    out = io.StringIO()
    log = ConsoleLog(out)
    log.write_line_stdout("hello")
    log.write_stdout("world")
    assert out.getvalue() == "hello\nworld"


def test_stderr_goes_to_main_stream_by_default():
    out = io.StringIO()
    log = ConsoleLog(out)
    log.write_stderr("a")
    log.write_line_stderr("b")
    assert out.getvalue() == "ab\n"


def test_stderr_goes_to_separate_stream_when_given():
    out = io.StringIO()
    err = io.StringIO()
    log = ConsoleLog(out, err)
    log.write_line_stderr("problem")
    log.write_stdout("fine")
    assert err.getvalue() == "problem\n"
    assert out.getvalue() == "fine"


def test_set_color_ignored_when_not_terminal():
    out = io.StringIO()
    log = ConsoleLog(out)
    log.set_color(ConsoleColor.DARK_RED, ConsoleColor.DEFAULT)
    log.write_stdout("x")
    assert log.use_color is False
    assert out.getvalue() == "x"


def test_set_color_emits_sequence_on_terminal():
    out = _TerminalStream()
    log = ConsoleLog(out)
    log.set_color(ConsoleColor.DARK_RED, ConsoleColor.DEFAULT)
    log.write_stdout("x")
    assert log.use_color is True
    assert out.getvalue() == ansi_sequence(ConsoleColor.DARK_RED, ConsoleColor.DEFAULT) + "x"


def test_use_color_can_be_forced():
    out = io.StringIO()
    log = ConsoleLog(out, use_color=True)
    log.set_color(ConsoleColor.LIGHT_RED, ConsoleColor.BLACK)
    assert out.getvalue() == ansi_sequence(ConsoleColor.LIGHT_RED, ConsoleColor.BLACK)


def test_use_color_can_be_disabled_on_terminal():
    out = _TerminalStream()
    log = ConsoleLog(out, use_color=False)
    log.set_color(ConsoleColor.LIGHT_RED, ConsoleColor.BLACK)
    assert out.getvalue() == ""