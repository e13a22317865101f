"""Line tokenizer: pulls whitespace-delimited tokens off a command line.

A LineParser holds one line and a cursor into it. Each get_* call skips
separators, consumes the next token and moves the cursor past it:

    >>> p = LineParser("list 1.2 0x10")
    >>> p.get_token()
    ('list', True)
    >>> p.get_float()
    (1.2, True)
    >>> p.get_int()
    (16, True)
    >>> p.get_int()
    (0, False)

The second item of every result says whether a token was there at all.
A token that is present but not a number raises ArgumentError.
"""

import re

SEPARATORS = " \t\r\n"

# C-style integer literal: 0x hex, leading-zero octal, or decimal
_INT_RE = re.compile(r"([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))")


class ArgumentError(ValueError):
    """A token was present but could not be converted to the requested type."""

    def __init__(self, token, kind):
        super().__init__(f"invalid {kind}: {token!r}")
        self.token = token
        self.kind = kind


def to_int(text):
    """Convert text to int, auto-detecting the base from its prefix."""
    m = _INT_RE.fullmatch(text)
    if m is None:
        raise ArgumentError(text, "integer")
    sign, hex_digits, oct_digits, dec_digits = m.groups()
    if hex_digits is not None:
        value = int(hex_digits, 16)
    elif oct_digits is not None:
        value = int(oct_digits, 8)
    else:
        value = int(dec_digits)
    return -value if sign == "-" else value


def to_uint(text):
    """Like to_int, but negative values are rejected."""
    try:
        value = to_int(text)
    except ArgumentError:
        raise ArgumentError(text, "unsigned integer") from None
    if value < 0:
        raise ArgumentError(text, "unsigned integer")
    return value


def to_float(text):
    try:
        return float(text)
    except ValueError:
        raise ArgumentError(text, "number") from None


def _token_pattern(separators):
    if not separators:
        return re.compile(r"[\s\S]+")
    return re.compile("[^" + re.escape(separators) + "]+")


class LineParser:
    """Parse state for one line: the text, a cursor, and the separator set.

    The cursor never moves backwards; reset() is the only way to start over.
    """

    def __init__(self, line="", separators=SEPARATORS):
        self.line = line
        self.cursor = 0
        self.separators = separators

    @property
    def separators(self):
        return self._separators

    @separators.setter
    def separators(self, value):
        self._separators = value
        self._token_re = _token_pattern(value)

    def reset(self, line):
        """Start parsing a new line from the beginning."""
        self.line = line
        self.cursor = 0

    @property
    def remainder(self):
        """Unconsumed text, including any separators in front of the next token."""
        return self.line[self.cursor:]

    def get_token(self):
        """Consume the next token. Returns (token, valid).

        When only separators (or nothing) are left, returns ("", False)
        and leaves the cursor where it was.
        """
        m = self._token_re.search(self.line, self.cursor)
        if m is None:
            return "", False
        self.cursor = m.end()
        return m.group(), True

    def get_int(self):
        token, valid = self.get_token()
        if not valid:
            return 0, False
        return to_int(token), True

    def get_uint(self):
        token, valid = self.get_token()
        if not valid:
            return 0, False
        return to_uint(token), True

    def get_float(self):
        token, valid = self.get_token()
        if not valid:
            return 0.0, False
        return to_float(token), True

    def __repr__(self):
        return f"LineParser({self.line!r}, cursor={self.cursor})"
