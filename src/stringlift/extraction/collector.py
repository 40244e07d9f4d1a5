"""
LiteralCollector: classify string literals as Safe or Manual.

Walks one file's syntax tree and records every literal that can be lifted
into a constant. Contexts where a literal is structural or diagnostic
(dictionary keys, subscripts, logging calls, exception messages, dynamic
imports, docstrings) are skipped and reported as protected byte ranges.
The byte span of every replaceable literal token is recorded with its
decoded value, so the rewriter only ever edits whole tokens.
"""

import ast
import warnings
from enum import Enum
from typing import Iterable, List, Optional

from tree_sitter import Node, Tree

from stringlift.logging_config import logger
from stringlift.parser.config import STRING_NODE_TYPES
from stringlift.parser.facade import is_docstring
from stringlift.schemas import (
    FileLiterals,
    LiteralCategory,
    LiteralOccurrence,
    LiteralSpan,
    SourceLocation,
)
from .config import (
    DEFAULT_IGNORED_CONSTRUCTORS,
    DEFAULT_IGNORED_FUNCTIONS,
    DEFAULT_IMPORT_FUNCTIONS,
)

_INTERPOLATING_PREFIXES = set("fFtT")


class LiteralKind(Enum):
    """The closed set of node variants the collector reacts to."""
    SIMPLE = "simple"
    CONCATENATED = "concatenated"
    INTERPOLATED = "interpolated"
    BYTES = "bytes"
    DIRECTIVE_URI = "directive_uri"
    MAP_KEY = "map_key"
    INDEX_KEY = "index_key"
    DOCSTRING = "docstring"
    IGNORED_CALL = "ignored_call"
    IGNORED_CONSTRUCTOR = "ignored_constructor"


def _split_start(node: Node):
    """Return (prefix, quote) from a string node's opening token."""
    start = node.children[0].text.decode("utf-8") if node.children else ""
    quote = start.lstrip("rRuUbBfFtT")
    return start[:len(start) - len(quote)], quote


def _decode(literal: str) -> Optional[str]:
    """Evaluate a literal token to its runtime value, or None if malformed."""
    with warnings.catch_warnings():
        # Invalid escapes like "\d" only warn; the value is still correct
        warnings.simplefilter("ignore")
        try:
            value = ast.literal_eval(literal)
        except (SyntaxError, ValueError, MemoryError, RecursionError):
            return None
    return value if isinstance(value, str) else None


def _callee_name(call: Node) -> Optional[str]:
    function = call.child_by_field_name("function")
    if function is None:
        return None
    if function.type == "identifier":
        return function.text.decode("utf-8")
    if function.type == "attribute":
        attribute = function.child_by_field_name("attribute")
        return attribute.text.decode("utf-8") if attribute is not None else None
    return None


class LiteralCollector:
    """
    Collect Safe and Manual literal occurrences from one file.

    Traversal is iterative (deeply nested expressions would otherwise hit
    the recursion limit) and visits nodes in source order.
    """

    def __init__(
        self,
        file_path: str,
        ignored_functions: Iterable[str] = DEFAULT_IGNORED_FUNCTIONS,
        ignored_constructors: Iterable[str] = DEFAULT_IGNORED_CONSTRUCTORS,
        import_functions: Iterable[str] = DEFAULT_IMPORT_FUNCTIONS,
    ):
        self.file_path = file_path
        self.ignored_functions = frozenset(ignored_functions)
        self.ignored_constructors = frozenset(ignored_constructors)
        self.import_functions = frozenset(import_functions)
        self.result = FileLiterals(file_path=file_path)

    def collect(self, tree: Tree) -> FileLiterals:
        """
        Walk ``tree`` and return the classified literals.

        Args:
            tree: Parsed syntax tree of the file

        Returns:
            FileLiterals with safe and manual occurrences and protected ranges
        """
        root = tree.root_node
        self.result.has_errors = root.has_error
        stack: List[Node] = [root]

        while stack:
            node = stack.pop()
            pending = self._visit(node)
            # Reverse so children pop off in source order
            stack.extend(reversed(pending))

        logger.debug(
            f"Collected {len(self.result.safe)} safe and {len(self.result.manual)} "
            f"manual literals from {self.file_path}"
        )
        return self.result

    def classify(self, node: Node) -> Optional[LiteralKind]:
        """Map a node onto a literal variant, or None for plain structure."""
        node_type = node.type

        if node_type == "string":
            prefix, _ = _split_start(node)
            if "b" in prefix.lower():
                return LiteralKind.BYTES
            if _INTERPOLATING_PREFIXES & set(prefix) or any(
                child.type == "interpolation" for child in node.children
            ):
                return LiteralKind.INTERPOLATED
            return LiteralKind.SIMPLE

        if node_type == "concatenated_string":
            for part in node.named_children:
                if part.type == "string" and self.classify(part) is LiteralKind.BYTES:
                    return LiteralKind.BYTES
            return LiteralKind.CONCATENATED

        if node_type == "expression_statement" and is_docstring(node):
            return LiteralKind.DOCSTRING

        if node_type == "pair":
            key = node.child_by_field_name("key")
            if key is not None and key.type in STRING_NODE_TYPES:
                return LiteralKind.MAP_KEY
            return None

        if node_type == "subscript":
            if any(sub.type in STRING_NODE_TYPES for sub in node.children_by_field_name("subscript")):
                return LiteralKind.INDEX_KEY
            return None

        if node_type == "call":
            name = _callee_name(node)
            if name in self.import_functions:
                return LiteralKind.DIRECTIVE_URI
            if name in self.ignored_functions:
                return LiteralKind.IGNORED_CALL
            if name in self.ignored_constructors:
                return LiteralKind.IGNORED_CONSTRUCTOR
            return None

        # Python 2 style ``print "x"``, which tree-sitter still recognizes
        if node_type == "print_statement" and "print" in self.ignored_functions:
            return LiteralKind.IGNORED_CALL

        return None

    def _visit(self, node: Node) -> List[Node]:
        """Handle one node; return the children still to be walked."""
        kind = self.classify(node)

        if kind is None:
            return node.children

        if kind is LiteralKind.SIMPLE:
            value = _decode(node.text.decode("utf-8"))
            if value is None:
                logger.debug(f"Skipping undecodable literal at {self.file_path}:{node.start_point[0] + 1}")
            else:
                self._add(value, node, LiteralCategory.SAFE)
                self.result.literal_spans.append(
                    LiteralSpan(start_byte=node.start_byte, end_byte=node.end_byte, text=value)
                )
            return []

        if kind is LiteralKind.CONCATENATED:
            self._collect_concatenated(node)
            return []

        if kind is LiteralKind.INTERPOLATED:
            self._collect_fragments(node)
            return []

        if kind is LiteralKind.MAP_KEY:
            self._protect(node.child_by_field_name("key"))
            value = node.child_by_field_name("value")
            return [value] if value is not None else []

        if kind is LiteralKind.INDEX_KEY:
            value = node.child_by_field_name("value")
            pending = [value] if value is not None else []
            for sub in node.children_by_field_name("subscript"):
                if sub.type in STRING_NODE_TYPES:
                    self._protect(sub)
                else:
                    pending.append(sub)
            return pending

        if kind in (
            LiteralKind.DOCSTRING,
            LiteralKind.DIRECTIVE_URI,
            LiteralKind.IGNORED_CALL,
            LiteralKind.IGNORED_CONSTRUCTOR,
        ):
            self._protect(node)
            return []

        # BYTES: not text
        return []

    def _collect_concatenated(self, node: Node) -> None:
        combined = []
        for part in node.named_children:
            if part.type != "string":
                continue
            if self.classify(part) is LiteralKind.INTERPOLATED:
                self._collect_fragments(part, owner=node)
                continue
            value = _decode(part.text.decode("utf-8"))
            if value is not None:
                combined.append(value)

        text = "".join(combined)
        if text:
            self._add(text, node, LiteralCategory.SAFE)

    def _collect_fragments(self, node: Node, owner: Optional[Node] = None) -> None:
        """Record each static run of an interpolated literal as Manual."""
        prefix, quote = _split_start(node)
        plain_prefix = "".join(c for c in prefix if c not in _INTERPOLATING_PREFIXES)

        runs: List[str] = []
        current: List[str] = []
        for child in node.children[1:]:
            if child.type in ("interpolation", "string_end"):
                runs.append("".join(current))
                current = []
            else:
                current.append(child.text.decode("utf-8"))
        if current:
            runs.append("".join(current))

        for raw in runs:
            if not raw:
                continue
            unescaped = raw.replace("{{", "{").replace("}}", "}")
            value = _decode(f"{plain_prefix}{quote}{unescaped}{quote}")
            self._add(value if value is not None else unescaped, owner or node, LiteralCategory.MANUAL)

    def _add(self, text: str, node: Node, category: LiteralCategory) -> None:
        occurrence = LiteralOccurrence(
            text=text,
            location=SourceLocation(
                file_path=self.file_path,
                offset=node.start_byte,
                line=node.start_point[0] + 1,
            ),
            category=category,
        )
        if category is LiteralCategory.SAFE:
            self.result.safe.append(occurrence)
        else:
            self.result.manual.append(occurrence)

    def _protect(self, node: Optional[Node]) -> None:
        if node is not None:
            self.result.protected_ranges.append((node.start_byte, node.end_byte))


def collect_literals(
    tree: Tree,
    file_path: str,
    ignored_functions: Iterable[str] = DEFAULT_IGNORED_FUNCTIONS,
    ignored_constructors: Iterable[str] = DEFAULT_IGNORED_CONSTRUCTORS,
    import_functions: Iterable[str] = DEFAULT_IMPORT_FUNCTIONS,
) -> FileLiterals:
    """Convenience wrapper: collect literals from one parsed file."""
    collector = LiteralCollector(
        file_path,
        ignored_functions=ignored_functions,
        ignored_constructors=ignored_constructors,
        import_functions=import_functions,
    )
    return collector.collect(tree)
