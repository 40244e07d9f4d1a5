from typing import Iterable

from stringlift.exceptions import ConfigError

# Calls whose arguments are diagnostic text and stay inline.
# Matched against the last component of the callee (``logger.info`` -> ``info``).
DEFAULT_IGNORED_FUNCTIONS = frozenset({
    "print",
    "log",
    "debug",
    "info",
    "warning",
    "warn",
    "error",
    "exception",
    "critical",
    "fatal",
})

# Exception constructors whose messages stay readable at the raise site
DEFAULT_IGNORED_CONSTRUCTORS = frozenset({
    "Exception",
    "BaseException",
    "ValueError",
    "TypeError",
    "KeyError",
    "IndexError",
    "LookupError",
    "RuntimeError",
    "AttributeError",
    "NotImplementedError",
    "AssertionError",
    "OSError",
    "IOError",
    "FileNotFoundError",
    "PermissionError",
    "ArgumentError",
    "FormatException",
})

# Dynamic imports: their string argument names a module, not user-facing text
DEFAULT_IMPORT_FUNCTIONS = frozenset({
    "import_module",
    "__import__",
})


def validate_name_set(names: Iterable[str], label: str) -> None:
    """
    Validate a set of callee names.

    Raises:
        ConfigError: If an entry is not a plain identifier.
    """
    for name in names:
        if not isinstance(name, str) or not name.isidentifier():
            raise ConfigError(f"Invalid {label} entry: {name!r} (must be an identifier)")
