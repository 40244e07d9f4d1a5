"""
Constants emitter: render the symbol table as a Python module.
"""

from pathlib import Path
from typing import List, Optional, Union

from stringlift.logging_config import logger
from stringlift.mutation.editor import CodeEditor
from stringlift.naming.symbol_table import SymbolTable

HEADER = "# GENERATED STRING CONSTANTS"
AUTO_SECTION = "# ✅ Automatically replaceable"
MANUAL_SECTION = "# ⚠️ Manual replacements required"
PROVENANCE = "# Found in: {file_path}"

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_for_const(text: str) -> str:
    """
    Escape ``text`` for embedding in a single-quoted Python literal.

    Quote, backslash, newline and carriage return are escaped, as is any
    other non-printable character. The emitted literals are never
    f-strings, so braces are left alone.
    """
    out = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            code = ord(ch)
            if code < 0x100:
                out.append(f"\\x{code:02x}")
            elif code < 0x10000:
                out.append(f"\\u{code:04x}")
            else:
                out.append(f"\\U{code:08x}")
    return "".join(out)


def _declaration(name: str, text: str) -> str:
    return f"{name} = '{escape_for_const(text)}'"


def _export_list(names: List[str]) -> List[str]:
    if not names:
        return ["__all__ = []"]
    return ["__all__ = ["] + [f"    '{name}'," for name in names] + ["]"]


def render_constants(table: SymbolTable) -> str:
    """
    Render the constants module.

    Safe bindings go in the automatically replaceable block. Manual
    bindings follow in their own block, each preceded by one provenance
    comment per file it was found in; that block is omitted when empty. An
    ``__all__`` list naming every constant closes the module.
    """
    lines: List[str] = [HEADER, AUTO_SECTION]
    for binding in table.safe_bindings():
        lines.append(_declaration(binding.identifier_name, binding.literal_text))

    manual = table.manual_bindings()
    if manual:
        lines.append("")
        lines.append(MANUAL_SECTION)
        for binding in manual:
            for file_path in binding.sources:
                lines.append(PROVENANCE.format(file_path=file_path))
            lines.append(_declaration(binding.identifier_name, binding.literal_text))
            lines.append("")

    # Underscore-led names are only star-exported when listed
    exports = _export_list([b.identifier_name for b in table.safe_bindings() + manual])
    return "\n".join(lines).rstrip("\n") + "\n\n" + "\n".join(exports) + "\n"


def write_constants(table: SymbolTable, output_path: Union[str, Path], editor: Optional[CodeEditor] = None) -> Path:
    """
    Render ``table`` and write it to ``output_path``.

    Returns:
        The path written
    """
    path = Path(output_path)
    (editor or CodeEditor()).write_source(path, render_constants(table))
    logger.info(f"Wrote {len(table)} constants to {path}")
    return path
