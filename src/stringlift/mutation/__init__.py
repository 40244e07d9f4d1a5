"""
Mutation package: rewrite source files to reference generated constants.

Provides literal substitution, import injection and atomic file writes.
"""

from .editor import CodeEditor
from .rewriter import rewrite_source
from .import_manager import ImportManager, constants_module, ensure_import
from .config import DEFAULT_INJECT_MODE, IMPORT_TEMPLATE, INJECT_MODES

__all__ = [
    # Components
    "CodeEditor",
    "ImportManager",

    # Functions
    "constants_module",
    "ensure_import",
    "rewrite_source",

    # Configuration
    "DEFAULT_INJECT_MODE",
    "IMPORT_TEMPLATE",
    "INJECT_MODES",
]
