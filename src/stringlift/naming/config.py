"""
Configuration for constant-name synthesis.
"""

import re

from stringlift.exceptions import ConfigError

DEFAULT_PREFIX = "k"
DEFAULT_MAX_LENGTH = 40

# Appended to names cut down to the maximum length
OVERFLOW_MARKER = "_EXCEEDS"

# Stem for names of literals with nothing spellable in them (kSymbol1, ...)
PLACEHOLDER_STEM = "Symbol"

# Symbol -> mnemonic. The empty string maps too, so '' gets a canonical name.
SYMBOL_MNEMONICS = {
    "₹": "Rupees",
    "€": "Euro",
    "£": "Pound",
    "¥": "Yen",
    "/": "Slash",
    "%": "Percent",
    " ": "Space",
    "-": "Dash",
    "_": "Underscore",
    "+": "Plus",
    "@": "At",
    "#": "Hash",
    "&": "Ampersand",
    "*": "Asterisk",
    ",": "Comma",
    ".": "Dot",
    ":": "Colon",
    ";": "Semicolon",
    "?": "QuestionMark",
    "!": "Exclamation",
    "~": "Tilde",
    "^": "Caret",
    "$": "Dollar",
    "=": "Equals",
    "<": "LessThan",
    ">": "GreaterThan",
    "|": "Pipe",
    "\\": "Backslash",
    '"': "Quote",
    "'": "Apostrophe",
    "(": "OpenParen",
    ")": "CloseParen",
    "[": "OpenBracket",
    "]": "CloseBracket",
    "{": "OpenBrace",
    "}": "CloseBrace",
    "": "EmptyString",
}

_PREFIX_PATTERN = re.compile(r"^[A-Za-z0-9_]*$")


def validate_prefix(prefix: str) -> None:
    """
    Raises:
        ConfigError: If the prefix cannot start a Python identifier body.
    """
    if not isinstance(prefix, str) or not _PREFIX_PATTERN.match(prefix):
        raise ConfigError(f"Name prefix {prefix!r} may only contain ASCII letters, digits and '_'")


def validate_max_length(max_length: int, prefix: str = DEFAULT_PREFIX) -> None:
    """
    The bound must leave room for the prefix, the overflow marker and a
    collision suffix.

    Raises:
        ConfigError: If max_length is not a large enough integer.
    """
    if not isinstance(max_length, int) or isinstance(max_length, bool):
        raise ConfigError(f"max_length must be an integer, got {type(max_length).__name__}")
    minimum = len(prefix) + len(OVERFLOW_MARKER) + 8
    if max_length < minimum:
        raise ConfigError(f"max_length must be at least {minimum}, got {max_length}")
