"""Exit command: asks the read loop to stop."""

quit_requested = False


def cmd_exit(id, arg, rest):
    global quit_requested
    quit_requested = True
    return "Goodbye!"
