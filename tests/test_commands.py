"""Tests for the demo command table and the read loop."""

import io

import pytest

from linecmd import dispatcher
from linecmd.__main__ import run
from linecmd.commands import COMMANDS, SET_COMMANDS, quit_demo
from linecmd.commands.values import value_a, value_b
from linecmd.dispatcher import Console, Dispatcher
from linecmd.main import main


def _help_lines(table):
    return [f"{c.name:<12} {c.help_text}" for c in table if c.name]


@pytest.mark.parametrize("line, output", [
    ("A", "0.000000"),
    ("A 3.5", "3.500000"),
    ("B -2", "-2.000000"),
    ("list", "0.000000 0.000000"),
    ("list 1.2", "1.200000 0.000000"),
    ("list 1.2 77.5", "1.200000 77.500000"),
    ("list 1.2 77.5 99", "1.200000 77.500000"),
])
def test_value_commands(capsys, line, output):
    dispatcher.process(COMMANDS, line)
    assert capsys.readouterr().out == output + "\n"


def test_value_is_kept_between_lines(capsys):
    dispatcher.process(COMMANDS, "A 3.5")
    dispatcher.process(COMMANDS, "A")
    assert capsys.readouterr().out == "3.500000\n3.500000\n"
    assert value_a.value == 3.5
    assert value_b.value == 0.0


def test_invalid_value_leaves_setting_alone(capsys):
    dispatcher.process(COMMANDS, "A 1")
    dispatcher.process(COMMANDS, "A abc")
    assert capsys.readouterr().out == "1.000000\nInvalid value: abc\n"
    assert value_a.value == 1.0


def test_list_stops_at_invalid_value(capsys):
    dispatcher.process(COMMANDS, "list 4 x")
    assert capsys.readouterr().out == "Invalid value: x\n4.000000 0.000000\n"


def test_help(capsys):
    dispatcher.process(COMMANDS, "help")
    assert capsys.readouterr().out.splitlines() == _help_lines(COMMANDS)


def test_help_with_topic(capsys):
    dispatcher.process(COMMANDS, "help list")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "No help for list"
    assert lines[1:] == _help_lines(COMMANDS)


def test_testhelp_prints_its_own_table(capsys):
    dispatcher.process(COMMANDS, "testhelp")
    assert capsys.readouterr().out.splitlines() == _help_lines(COMMANDS)


def test_set_submenu(capsys):
    dispatcher.process(COMMANDS, "set B 2")
    assert capsys.readouterr().out == "2.000000\n"
    assert value_b.value == 2.0


def test_set_without_arguments_lists_submenu(capsys):
    dispatcher.process(COMMANDS, "set  ")
    assert capsys.readouterr().out.splitlines() == _help_lines(SET_COMMANDS)


def test_set_unknown_entry(capsys):
    dispatcher.process(COMMANDS, "set C 1")
    assert capsys.readouterr().out == "Unknown command: C\n"


def test_exit():
    assert dispatcher.process(COMMANDS, "exit") == "Goodbye!"
    assert quit_demo.quit_requested


def test_unknown_and_blank(capsys):
    dispatcher.process(COMMANDS, "frobnicate 3")
    dispatcher.process(COMMANDS, "\n")
    assert capsys.readouterr().out == "Unknown command: frobnicate\nUnknown error:\n\n\n"


# --- Read loop ---

def test_main_stops_on_exit(capsys):
    main(io.StringIO("A 1\nexit\nA 2\n"))
    out = capsys.readouterr().out
    assert out == "? 1.000000\n? Goodbye!\n"
    assert value_a.value == 1.0


def test_main_stops_at_end_of_input(capsys):
    main(io.StringIO("list 5\n"))
    out = capsys.readouterr().out
    assert out == "? 5.000000 0.000000\n? \n"
    assert not quit_demo.quit_requested


def test_main_with_prefix_console(capsys):
    from linecmd.dispatcher import PrefixConsole
    main(io.StringIO("B 7\n"), console=PrefixConsole("# "))
    assert capsys.readouterr().out == "# ? 7.000000\n# ? \n"


def test_run_once(capsys):
    run(["-c", "list", "1", "2"])
    assert capsys.readouterr().out == "1.000000 2.000000\n"


def test_run_once_with_prefix(capsys):
    run(["-prefix", ">>> ", "-c", "exit"])
    assert capsys.readouterr().out == ">>> Goodbye!\n"


def test_commands_through_own_dispatcher(capsys):
    out = io.StringIO()
    d = Dispatcher(console=Console(stream=out))
    d.process(COMMANDS, "A 3.5")
    d.process(COMMANDS, "set B 2")
    d.process(COMMANDS, "list 1 x")
    assert value_a.value == 3.5
    assert value_b.value == 2.0
    assert out.getvalue() == "3.500000\n2.000000\nInvalid value: x\n1.000000 0.000000\n"
    assert capsys.readouterr().out == ""
