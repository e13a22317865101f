"""Value commands: view or set stored floats.

Handles:
    "A"             show valueA
    "A 3.5"         set valueA to 3.5
    "list"          show both list values
    "list 1.2"      set the first list value
    "list 1.2 77.5" set both list values
"""

from dataclasses import dataclass

from linecmd import dispatcher
from linecmd.tokenizer import ArgumentError


@dataclass
class Setting:
    name: str
    value: float = 0.0


value_a = Setting("valueA")
value_b = Setting("valueB")

# Values shown and set by "list"
_list_values = [0.0, 0.0]


def cmd_val(id, arg, rest):
    """Show or set the Setting passed as arg. One handler serves A and B."""
    try:
        v, valid = dispatcher.get_float()
    except ArgumentError as e:
        dispatcher.print_line(f"Invalid value: {e.token}")
        return arg.value
    if valid:
        arg.value = v
    dispatcher.print_line(f"{arg.value:f}")
    return arg.value


def cmd_list(id, arg, rest):
    for i in range(len(_list_values)):
        try:
            v, valid = dispatcher.get_float()
        except ArgumentError as e:
            dispatcher.print_line(f"Invalid value: {e.token}")
            break
        if not valid:
            break
        _list_values[i] = v
    dispatcher.print_line(" ".join(f"{v:f}" for v in _list_values))
    return tuple(_list_values)


def reset():
    """Put every stored value back to zero."""
    value_a.value = 0.0
    value_b.value = 0.0
    _list_values[:] = [0.0, 0.0]
