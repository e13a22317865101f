"""Command dispatcher: looks up the first word of a line in a command table.

A table is a list of Command rows, optionally closed by END:

    COMMANDS = [
        Command(1, "help", "Get help", cmd_help),
        Command(4, "A", "View/set valueA", cmd_val, value_a),
        END,
    ]

Each handler is called as handler(id, arg, rest), where rest is whatever
followed the command word. Handlers read further arguments with
get_token/get_int/get_uint/get_float, which continue from where the
dispatcher stopped on the same line.

Output (help text, unknown commands, blank lines) goes through a Console,
which can be swapped out to change how messages are presented.
"""

import re
import sys
from dataclasses import dataclass
from datetime import datetime

from linecmd.tokenizer import SEPARATORS, LineParser

# Split after each newline, keeping it
_LINE_END = re.compile(r"(?<=\n)")


@dataclass(frozen=True)
class Command:
    id: int
    name: str             # exact, case-sensitive match
    help_text: str
    handler: object       # handler(id, arg, rest)
    arg: object = None    # passed to the handler untouched


# End-of-table marker; scanning stops at the first row with an empty name
END = Command(0, "", "", None)


class Console:
    """Where the dispatcher sends its messages. Override methods to customize."""

    def __init__(self, stream=None):
        self.stream = stream

    def write(self, text):
        print(text, end="", file=self.stream or sys.stdout, flush=True)

    def print_line(self, msg):
        self.write(msg + "\n")

    def not_found(self, line, command):
        """Called when the command word matches nothing in the table."""
        self.print_line(f"Unknown command: {command}")

    def blank_line(self, line):
        """Called when the line has no command word at all."""
        self.print_line("Unknown error:")
        self.print_line(line)


class PrefixConsole(Console):
    """Console that starts every output line with a prefix, e.g. '>>> '."""

    def __init__(self, prefix=">>> ", stream=None):
        super().__init__(stream)
        self.prefix = prefix
        self._newline = True

    def write(self, text):
        if not text:
            return
        lines = [chunk for chunk in _LINE_END.split(text) if chunk]
        out = []
        for i, chunk in enumerate(lines):
            if i > 0 or self._newline:
                out.append(self.prefix)
            out.append(chunk)
        self._newline = text.endswith("\n")
        super().write("".join(out))


class Dispatcher:
    """Runs lines against command tables.

    Not thread-safe: one top-level line is in flight at a time. A handler may
    call process() again (e.g. for a sub-menu); the nested line gets its own
    parser, and the handler's own parser is back in place when it returns.

    While a line is being dispatched, the module-level get_*, process, help
    and print_line functions act on this dispatcher.
    """

    def __init__(self, console=None, separators=SEPARATORS, trace_path=None):
        self.console = console or Console()
        self.separators = separators
        self.trace_path = trace_path
        self.parser = LineParser("", separators)
        self._saved = []  # parsers of the lines this one is nested in

    def process(self, table, line):
        """Dispatch one line. Returns the handler's result, or None if nothing ran."""
        global _active
        self._saved.append(self.parser)
        self.parser = LineParser(line, self.separators)
        previous, _active = _active, self
        try:
            return self._dispatch(table, line)
        finally:
            _active = previous
            outer = self._saved.pop()
            if self._saved:
                self.parser = outer

    def set_separators(self, separators):
        """Use a new separator set for this line, the lines it is nested in, and later lines."""
        self.separators = separators
        self.parser.separators = separators
        for parser in self._saved:
            parser.separators = separators

    def _dispatch(self, table, line):
        command, valid = self.parser.get_token()
        if not valid:
            self._trace(line, "blank")
            self.console.blank_line(line)
            return None

        cmd = self.find(table, command)
        if cmd is None:
            self._trace(line, f"none ({command})")
            self.console.not_found(line, command)
            return None

        self._trace(line, f"{cmd.name} id={cmd.id}")
        return cmd.handler(cmd.id, cmd.arg, self.parser.remainder)

    def find(self, table, name):
        """Return the first row named `name`, or None. Stops at the first empty name."""
        for cmd in table:
            if not cmd.name:
                break
            if cmd.name == name:
                return cmd
        return None

    def help(self, table):
        """Print one line of help per command in the table."""
        for cmd in table:
            if not cmd.name:
                break
            self.console.print_line(f"{cmd.name:<12} {cmd.help_text}")

    def get_token(self):
        return self.parser.get_token()

    def get_int(self):
        return self.parser.get_int()

    def get_uint(self):
        return self.parser.get_uint()

    def get_float(self):
        return self.parser.get_float()

    def _trace(self, line, outcome):
        """Append a compact 2-line entry to the trace file, if one is set."""
        if not self.trace_path:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        indent = "  " * (len(self._saved) - 1)  # nested lines are indented
        try:
            with open(self.trace_path, "a") as f:
                f.write(f"{ts} {indent}{line.rstrip()}\n{indent}  -> {outcome}\n")
        except OSError:
            pass


# --- Process-wide default dispatcher, for handlers written as plain functions ---

_default = Dispatcher()
_active = None  # dispatcher whose line is being handled right now


def default():
    return _default


def current():
    """The dispatcher running the current line, or the default one."""
    return _active or _default


def set_console(console):
    """Replace the default dispatcher's output hooks."""
    _default.console = console


def set_separators(separators):
    """Change the separator set of the current dispatcher."""
    current().set_separators(separators)


def process(table, line):
    return current().process(table, line)


def find(table, name):
    return current().find(table, name)


def help(table):
    current().help(table)


def get_token():
    return current().get_token()


def get_int():
    return current().get_int()


def get_uint():
    return current().get_uint()


def get_float():
    return current().get_float()


def print_line(msg):
    """Print through the current dispatcher's console."""
    current().console.print_line(msg)
