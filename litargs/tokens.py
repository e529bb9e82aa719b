"""
Litargs tokenizer.

The raw argument line is split on runs of whitespace (leading, trailing and
repeated whitespace collapse). The first token is the command name candidate;
every other token is classified as an option marker (starts with "-") or a
plain value. No quoting or escaping is interpreted: a value containing spaces
arrives as several tokens.

    >>> tokenize("move  a.txt --cp")
    ('move', (Token(text='a.txt', marker=False), Token(text='--cp', marker=True)))
"""
from collections import namedtuple

from .specs import MARKER

Token = namedtuple("Token", ("text", "marker"))
Token.__doc__ = """
One argument token: its raw text and whether it is an option marker.
"""


def classify(text, /):
    """Wrap a raw token string into a Token."""
    if not isinstance(text, str):
        raise TypeError("classify() argument must be a string")
    return Token(text, text.startswith(MARKER))


def tokenize(raw, /):
    """
    Split `raw` into (command_name, tokens).

    Returns
    - command_name: the first whitespace-delimited word, or "" for blank input.
    - tokens: tuple[Token, ...] for the remaining words, in order.

    Raises
    - TypeError when raw is not a string.
    """
    if not isinstance(raw, str):
        raise TypeError("tokenize() argument must be a string")
    words = raw.split()
    if not words:
        return "", ()
    name, *rest = words
    return name, tuple(map(classify, rest))


__all__ = (
    "Token",
    "classify",
    "tokenize",
)
