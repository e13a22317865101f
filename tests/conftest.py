import pytest

from linecmd import dispatcher
from linecmd.commands import quit_demo, values
from linecmd.dispatcher import Console
from linecmd.tokenizer import SEPARATORS


@pytest.fixture(autouse=True)
def _fresh_state():
    """Reset the process-wide dispatcher and demo values between tests."""
    dispatcher.set_console(Console())
    dispatcher.set_separators(SEPARATORS)
    values.reset()
    quit_demo.quit_requested = False
    yield
    dispatcher.set_console(Console())
    dispatcher.set_separators(SEPARATORS)
