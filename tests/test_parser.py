"""Unit tests for parsing and module directive detection."""

import pytest

pytestmark = pytest.mark.fast

from stringlift.parser import get_parser, module_directives, parse_source


def directives(source):
    return [(d.kind, d.module) for d in module_directives(parse_source(source))]


def test_parser_is_cached():
    assert get_parser() is get_parser()


def test_unknown_language_is_rejected():
    with pytest.raises(ValueError):
        get_parser("cobol")


def test_parse_accepts_str_and_bytes():
    assert parse_source("x = 1\n").root_node.type == "module"
    assert parse_source(b"x = 1\n").root_node.type == "module"


def test_malformed_source_still_yields_a_tree():
    tree = parse_source("def broken(:\n")
    assert tree.root_node.has_error


def test_import_kinds():
    source = (
        "from __future__ import annotations\n"
        "import os.path\n"
        "import numpy as np\n"
        "from .strings import *\n"
        "from ..gen import names\n"
    )
    assert directives(source) == [
        ("future_import", "__future__"),
        ("import", "os.path"),
        ("import", "numpy"),
        ("from_import", ".strings"),
        ("from_import", "..gen"),
    ]


def test_module_docstring():
    assert directives('"""Doc."""\nimport os\n') == [("docstring", None), ("import", "os")]


def test_docstring_after_comment():
    assert directives('# header\n"""Doc."""\n') == [("docstring", None)]


def test_late_string_is_not_a_docstring():
    assert directives('x = 1\n"""Not a docstring."""\n') == []


def test_nested_imports_are_not_module_directives():
    source = "def f():\n    import os\n"
    assert directives(source) == []


def test_directive_offsets():
    source = "import os\n"
    (directive,) = module_directives(parse_source(source))
    assert (directive.start_byte, directive.end_byte) == (0, 9)


def test_only_the_opening_import_block_is_leading():
    source = '"""Doc."""\nimport os\n# note\nfrom a import b\n\nx = 1\nimport sys\n'
    leading = [(d.kind, d.leading) for d in module_directives(parse_source(source))]
    assert leading == [
        ("docstring", True),
        ("import", True),
        ("from_import", True),
        ("import", False),
    ]
