"""Entry point for `python -m linecmd`.

    python -m linecmd                  interactive loop
    python -m linecmd -c list 1 2      run one line and exit
    python -m linecmd -prefix '>>> '   prefix every output line
"""

import sys


def _run_once(text):
    """Dispatch a single line against the demo table and print any response."""
    from linecmd import dispatcher
    from linecmd.commands import COMMANDS

    response = dispatcher.process(COMMANDS, text)
    if isinstance(response, str):
        dispatcher.print_line(response)


def run(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) >= 2 and args[0] == "-prefix":
        from linecmd import dispatcher
        from linecmd.dispatcher import PrefixConsole
        dispatcher.set_console(PrefixConsole(args[1]))
        args = args[2:]

    if len(args) >= 2 and args[0] == "-c":
        _run_once(" ".join(args[1:]))
    else:
        from linecmd.main import main
        main()


if __name__ == "__main__" or not sys.argv[0]:
    run()
