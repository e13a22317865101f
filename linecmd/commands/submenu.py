"""Sub-menu command: runs the rest of the line against a nested table.

    "set A 2.5"   -> dispatches "A 2.5" against the table bound as arg
    "set"         -> lists the nested table
"""

from linecmd import dispatcher


def cmd_submenu(id, arg, rest):
    if not rest.strip():
        dispatcher.help(arg)
        return None
    return dispatcher.process(arg, rest)
