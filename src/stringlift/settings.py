"""
Run settings.

Defaults live in each subsystem's ``config`` module. ``load_settings``
layers an optional JSON settings file and explicit overrides (from the
CLI) on top of them:

{
  "prefix": "k",
  "max_length": 40,
  "ignored_functions": ["print", "info"],
  "ignored_constructors": ["ValueError"],
  "extensions": [".py"],
  "inject_import": "always"
}
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field, ValidationError

from stringlift.exceptions import ConfigError
from stringlift.extraction.config import (
    DEFAULT_IGNORED_CONSTRUCTORS,
    DEFAULT_IGNORED_FUNCTIONS,
    DEFAULT_IMPORT_FUNCTIONS,
    validate_name_set,
)
from stringlift.logging_config import logger
from stringlift.mutation.config import DEFAULT_INJECT_MODE, validate_inject_mode
from stringlift.naming.config import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_PREFIX,
    validate_max_length,
    validate_prefix,
)
from stringlift.parser.config import validate_extension
from stringlift.scanner.config import (
    DEFAULT_EXTENSIONS,
    validate_extensions,
    validate_ignore_patterns,
)


class RefactorSettings(BaseModel):
    """
    Everything configurable about a refactoring run.
    """
    prefix: str = DEFAULT_PREFIX
    max_length: int = DEFAULT_MAX_LENGTH
    ignored_functions: Set[str] = Field(default_factory=lambda: set(DEFAULT_IGNORED_FUNCTIONS))
    ignored_constructors: Set[str] = Field(default_factory=lambda: set(DEFAULT_IGNORED_CONSTRUCTORS))
    import_functions: Set[str] = Field(default_factory=lambda: set(DEFAULT_IMPORT_FUNCTIONS))
    extensions: List[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    ignore_patterns: List[str] = Field(default_factory=list)
    respect_gitignore: bool = True
    inject_import: str = DEFAULT_INJECT_MODE


def validate_settings(settings: RefactorSettings) -> None:
    """
    Run every subsystem validator over ``settings``.

    Raises:
        ConfigError: On the first invalid value.
    """
    validate_prefix(settings.prefix)
    validate_max_length(settings.max_length, settings.prefix)
    validate_name_set(settings.ignored_functions, "ignored function")
    validate_name_set(settings.ignored_constructors, "ignored constructor")
    validate_name_set(settings.import_functions, "import function")
    validate_extensions(settings.extensions)
    for extension in settings.extensions:
        validate_extension(extension)
    if settings.ignore_patterns:
        validate_ignore_patterns(settings.ignore_patterns)
    validate_inject_mode(settings.inject_import)


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not load settings from {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {config_file} must contain a JSON object")
    logger.debug(f"Loaded settings from {config_file}")
    return data


def load_settings(
    config_file: Optional[Path] = None,
    extra_ignored_functions: Optional[List[str]] = None,
    extra_ignored_constructors: Optional[List[str]] = None,
    **overrides: Any,
) -> RefactorSettings:
    """
    Build validated settings: defaults <- settings file <- overrides.

    Overrides whose value is None are ignored. The ``extra_*`` lists are
    added to the ignore sets instead of replacing them.

    Raises:
        ConfigError: If the file is unreadable or any value is invalid.
    """
    data: Dict[str, Any] = {}
    if config_file is not None:
        data.update(_read_config_file(config_file))
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        settings = RefactorSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e

    if extra_ignored_functions:
        settings.ignored_functions |= set(extra_ignored_functions)
    if extra_ignored_constructors:
        settings.ignored_constructors |= set(extra_ignored_constructors)

    validate_settings(settings)
    return settings
