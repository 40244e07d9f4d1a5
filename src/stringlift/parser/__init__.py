"""
This facade exposes the public API for the parser module.
"""
from .facade import get_parser, is_docstring, module_directives, parse_source

__all__ = ["get_parser", "is_docstring", "module_directives", "parse_source"]
