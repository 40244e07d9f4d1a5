"""
Naming package: constant-name synthesis and the run-wide symbol table.
"""

from .synthesizer import NameSynthesizer, NamingContext
from .symbol_table import SymbolTable, build_symbol_table
from .config import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_PREFIX,
    OVERFLOW_MARKER,
    SYMBOL_MNEMONICS,
)

__all__ = [
    "NameSynthesizer",
    "NamingContext",
    "SymbolTable",
    "build_symbol_table",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_PREFIX",
    "OVERFLOW_MARKER",
    "SYMBOL_MNEMONICS",
]
