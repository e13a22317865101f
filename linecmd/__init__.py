from linecmd.tokenizer import SEPARATORS, ArgumentError, LineParser, to_int, to_uint, to_float
from linecmd.dispatcher import (
    END, Command, Console, Dispatcher, PrefixConsole,
    default, current, set_console, set_separators,
    process, find, help, print_line, get_token, get_int, get_uint, get_float,
)
