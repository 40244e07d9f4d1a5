"""
stringlift - lift string literals into a generated constants module.

Extracts the string literals of a Python code base, names each one, writes
the names to a constants module and rewrites the sources to use them.
"""

__version__ = "0.1.0"

# Core exports
from stringlift.pipeline import refactor_strings
from stringlift.scanner import discover_files
from stringlift.parser import module_directives, parse_source
from stringlift.extraction import LiteralCollector, collect_literals
from stringlift.naming import NameSynthesizer, NamingContext, SymbolTable, build_symbol_table
from stringlift.emitter import render_constants, write_constants
from stringlift.mutation import constants_module, ensure_import, rewrite_source
from stringlift.settings import RefactorSettings, load_settings
from stringlift.schemas import Binding, LiteralCategory, LiteralOccurrence, RefactorResult

__all__ = [
    "__version__",
    "refactor_strings",
    "discover_files",
    "module_directives",
    "parse_source",
    "LiteralCollector",
    "collect_literals",
    "NameSynthesizer",
    "NamingContext",
    "SymbolTable",
    "build_symbol_table",
    "render_constants",
    "write_constants",
    "ensure_import",
    "constants_module",
    "rewrite_source",
    "RefactorSettings",
    "load_settings",
    "Binding",
    "LiteralCategory",
    "LiteralOccurrence",
    "RefactorResult",
]
