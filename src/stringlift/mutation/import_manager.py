"""
ImportManager: make every rewritten file import the constants module once.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from stringlift.logging_config import logger
from stringlift.parser import module_directives, parse_source
from stringlift.schemas import Directive
from .config import IMPORT_TEMPLATE, PACKAGE_MARKER

PathLike = Union[str, Path]


def package_root(directory: Path) -> Path:
    """
    The first directory above ``directory`` (or itself) that is not a
    package, i.e. the directory Python must have on sys.path to import it.
    """
    while (directory / PACKAGE_MARKER).is_file():
        directory = directory.parent
    return directory


def _dotted_parts(path: Path, root: Path) -> List[str]:
    return list(path.relative_to(root).with_suffix("").parts)


def constants_module(constants_file: PathLike, source_file: PathLike) -> str:
    """
    Module path under which ``source_file`` imports ``constants_file``.

    A relative path is used only when both files sit in the same top-level
    package (an ``__init__.py`` chain connects them). Otherwise the module
    is imported absolutely, named from its own package root.

    Examples:
        app/strings.py from app/views.py        -> ".strings"
        app/strings.py from app/sub/views.py    -> "..strings"
        app/gen/strings.py from app/views.py    -> ".gen.strings"
        strings.py (no package) from app/x.py   -> "strings"
    """
    constants_path = Path(constants_file).resolve()
    source_dir = Path(source_file).resolve().parent

    target_root = package_root(constants_path.parent)
    target = _dotted_parts(constants_path, target_root)

    source_root = package_root(source_dir)
    if source_root == source_dir or source_root != target_root or len(target) < 2:
        # Source is a top-level script, or the packages differ
        return ".".join(target)

    package = list(source_dir.relative_to(source_root).parts)
    if package[0] != target[0]:
        return ".".join(target)

    common = 0
    for ours, theirs in zip(package, target[:-1]):
        if ours != theirs:
            break
        common += 1

    levels = len(package) - common + 1
    return "." * levels + ".".join(target[common:])


class ImportManager:
    """
    Inject the star import of the constants module into source text.

    Insertion point, in order of preference: right after the last import
    of the leading import block, right after the module docstring, or at
    the very top of the file (below a shebang line). Imports that follow
    other code are never used as an anchor, since the constants may be
    referenced before them.
    """

    def __init__(self, template: str = IMPORT_TEMPLATE):
        self.template = template

    def import_statement(self, module: str) -> str:
        return self.template.format(module=module)

    def has_import(self, directives: List[Directive], module: str) -> bool:
        return any(
            d.kind == "from_import" and d.module == module
            for d in directives
        )

    def ensure_import(self, source: str, module: str) -> str:
        """
        Return ``source`` importing ``module``, unchanged if it already does.

        Idempotent: a second call on the result returns it unchanged.
        """
        data = source.encode("utf-8")
        directives = module_directives(parse_source(data))

        if self.has_import(directives, module):
            logger.debug(f"Import of '{module}' already present")
            return source

        statement = self.import_statement(module).encode("utf-8")
        offset, after_import = self._find_insertion_point(directives)

        if offset is None:
            insertion = statement + b"\n"
            offset = self._after_shebang(data)
            if offset and not data[:offset].endswith(b"\n"):
                insertion = b"\n" + insertion
        elif after_import:
            insertion = b"\n" + statement
        else:
            insertion = b"\n\n" + statement

        modified = data[:offset] + insertion + data[offset:]
        return modified.decode("utf-8")

    def _find_insertion_point(self, directives: List[Directive]) -> Tuple[Optional[int], bool]:
        """Return (byte offset or None for the top of file, whether it follows an import)."""
        imports = [d for d in directives if d.kind != "docstring" and d.leading]
        if imports:
            return max(d.end_byte for d in imports), True

        for directive in directives:
            if directive.kind == "docstring":
                return directive.end_byte, False

        return None, False

    def _after_shebang(self, data: bytes) -> int:
        if not data.startswith(b"#!"):
            return 0
        newline = data.find(b"\n")
        return len(data) if newline == -1 else newline + 1


def ensure_import(source: str, constants_file: PathLike, source_file: PathLike) -> str:
    """
    Make ``source`` (the content of ``source_file``) import the constants
    module at ``constants_file``.
    """
    module = constants_module(constants_file, source_file)
    return ImportManager().ensure_import(source, module)
