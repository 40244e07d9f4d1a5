"""
Extraction package: find and classify string literals in parsed source.
"""

from .collector import LiteralCollector, LiteralKind, collect_literals
from .config import (
    DEFAULT_IGNORED_CONSTRUCTORS,
    DEFAULT_IGNORED_FUNCTIONS,
    DEFAULT_IMPORT_FUNCTIONS,
)

__all__ = [
    "LiteralCollector",
    "LiteralKind",
    "collect_literals",
    "DEFAULT_IGNORED_CONSTRUCTORS",
    "DEFAULT_IGNORED_FUNCTIONS",
    "DEFAULT_IMPORT_FUNCTIONS",
]
