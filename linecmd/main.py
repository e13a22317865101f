"""linecmd demo read loop.

Reads lines, dispatches each against the demo command table, and stops on
"exit", end of input, or Ctrl-C.

Usage:
    python -m linecmd
"""

import sys

from linecmd import dispatcher
from linecmd.commands import COMMANDS, quit_demo

_PROMPT = "? "


def log(msg):
    print(msg, flush=True)


def main(stream=None, console=None):
    stream = stream or sys.stdin
    if console is not None:
        dispatcher.set_console(console)
    quit_demo.quit_requested = False
    out = dispatcher.default().console

    try:
        while not quit_demo.quit_requested:
            out.write(_PROMPT)
            line = stream.readline()
            if not line:
                out.write("\n")
                break
            response = dispatcher.process(COMMANDS, line)
            if isinstance(response, str):
                out.print_line(response)
    except KeyboardInterrupt:
        log("\nShutting down.")


if __name__ == "__main__":
    main()
