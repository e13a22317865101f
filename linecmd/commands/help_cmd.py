"""Help commands.

"help" goes through the main table; "testhelp" prints whatever table it was
bound to, showing that a handler can get its table through arg.
"""

from linecmd import dispatcher


def cmd_help(id, arg, rest):
    from linecmd.commands import COMMANDS
    token, valid = dispatcher.get_token()
    if valid:
        dispatcher.print_line(f"No help for {token}")
    dispatcher.help(COMMANDS)


def cmd_testhelp(id, arg, rest):
    dispatcher.help(arg)
