from pathlib import Path
from typing import Dict, List, Optional, Union

import tree_sitter_python as tspython
from tree_sitter import Language, Node, Parser, Tree

from stringlift.logging_config import logger
from stringlift.schemas import Directive
from .config import IMPORT_NODE_TYPES, STRING_NODE_TYPES

# Parsers are cheap to reuse and expensive to build
_parser_cache: Dict[str, Parser] = {}


def get_parser(language: str = "python") -> Parser:
    """
    Return a cached tree-sitter parser for ``language``.
    """
    if language in _parser_cache:
        return _parser_cache[language]

    if language != "python":
        raise ValueError(f"No grammar bundled for language '{language}'")

    parser = Parser()
    parser.language = Language(tspython.language())
    _parser_cache[language] = parser
    logger.debug(f"Initialized tree-sitter parser for '{language}'")
    return parser


def parse_source(source: Union[str, bytes], file_path: Optional[Path] = None) -> Tree:
    """
    Parse source text into a syntax tree.

    tree-sitter never aborts on malformed input: syntax errors become ERROR
    nodes and the rest of the tree is still usable, so callers always get a
    best-effort tree back.

    Args:
        source: Source text (str is encoded as UTF-8)
        file_path: Optional path, used for diagnostics only

    Returns:
        The parsed tree
    """
    data = source.encode("utf-8") if isinstance(source, str) else source
    tree = get_parser().parse(data)

    if tree.root_node.has_error:
        label = file_path if file_path is not None else "<source>"
        logger.debug(f"{label} has syntax errors; walking best-effort tree")

    return tree


def _module_name(node: Node) -> Optional[str]:
    if node.type == "import_from_statement":
        module = node.child_by_field_name("module_name")
        if module is not None:
            return "".join(module.text.decode("utf-8").split())
        return None
    if node.type == "future_import_statement":
        return "__future__"

    # import a.b, c -> first imported module
    name = node.child_by_field_name("name")
    if name is None:
        return None
    if name.type == "aliased_import":
        name = name.child_by_field_name("name") or name
    return name.text.decode("utf-8")


def is_docstring(node: Node) -> bool:
    """True for a bare string expression statement."""
    return (
        node.type == "expression_statement"
        and node.named_child_count == 1
        and node.named_children[0].type in STRING_NODE_TYPES
    )


def module_directives(tree: Tree) -> List[Directive]:
    """
    List the module-level directives of a parsed file in source order.

    Import statements are reported with the module they target; those that
    follow any other statement are marked as not ``leading``. A module
    docstring (the first statement, when it is a bare string) is reported
    as a ``docstring`` directive.
    """
    directives: List[Directive] = []
    first_statement = True
    leading = True

    for child in tree.root_node.named_children:
        if child.type == "comment":
            continue

        kind = IMPORT_NODE_TYPES.get(child.type)
        if kind is not None:
            directives.append(Directive(
                kind=kind,
                module=_module_name(child),
                start_byte=child.start_byte,
                end_byte=child.end_byte,
                leading=leading,
            ))
        elif first_statement and is_docstring(child):
            directives.append(Directive(
                kind="docstring",
                start_byte=child.start_byte,
                end_byte=child.end_byte,
            ))
        else:
            leading = False

        first_statement = False

    return directives
