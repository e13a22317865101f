from dataclasses import replace

from linecmd.dispatcher import END, Command
from linecmd.commands.help_cmd import cmd_help, cmd_testhelp
from linecmd.commands.quit_demo import cmd_exit
from linecmd.commands.submenu import cmd_submenu
from linecmd.commands.values import cmd_list, cmd_val, value_a, value_b

SET_COMMANDS = [
    Command(1, "A", "Set valueA", cmd_val, value_a),
    Command(2, "B", "Set valueB", cmd_val, value_b),
    END,
]

COMMANDS = [
    Command(1, "help", "Get help", cmd_help),
    Command(2, "list", "Dummy list", cmd_list),
    Command(3, "exit", "Quit the program", cmd_exit),
    Command(4, "A", "View/set valueA", cmd_val, value_a),
    Command(5, "B", "View/set valueB", cmd_val, value_b),
    Command(6, "testhelp", "Test direct help function", cmd_testhelp),
    Command(7, "set", "Set a value (set A 1.5)", cmd_submenu, SET_COMMANDS),
    END,
]

# testhelp prints the table it belongs to
COMMANDS[5] = replace(COMMANDS[5], arg=COMMANDS)
