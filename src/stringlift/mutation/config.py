"""
Configuration for source rewriting and import injection.
"""

from stringlift.exceptions import ConfigError

# Import statement added to rewritten files
IMPORT_TEMPLATE = "from {module} import *"

# A directory holding this file is a regular package
PACKAGE_MARKER = "__init__.py"

# "always": every processed file imports the constants module (the
# behaviour of a classic one-shot extraction pass).
# "when-used": only files that had at least one literal replaced.
INJECT_MODES = ("always", "when-used")
DEFAULT_INJECT_MODE = "always"

SOURCE_ENCODING = "utf-8"


def validate_inject_mode(mode: str) -> None:
    """
    Raises:
        ConfigError: If mode is not one of INJECT_MODES.
    """
    if mode not in INJECT_MODES:
        raise ConfigError(
            f"Import injection mode '{mode}' is not supported. Supported modes: {', '.join(INJECT_MODES)}"
        )
