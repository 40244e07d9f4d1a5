"""Unit tests for literal collection and classification."""

import pytest

pytestmark = pytest.mark.fast

from stringlift.extraction import LiteralCollector, collect_literals
from stringlift.parser import parse_source
from stringlift.schemas import LiteralCategory


def collect(source, **kwargs):
    return collect_literals(parse_source(source), "sample.py", **kwargs)


def safe_texts(result):
    return [o.text for o in result.safe]


def manual_texts(result):
    return [o.text for o in result.manual]


class TestSafeLiterals:

    def test_simple_literals_in_source_order(self):
        result = collect('x = "Hello"\ny = \'World\'\n')
        assert safe_texts(result) == ["Hello", "World"]
        assert all(o.category is LiteralCategory.SAFE for o in result.safe)

    def test_duplicates_are_kept(self):
        result = collect('a = "same"\nb = "same"\n')
        assert safe_texts(result) == ["same", "same"]

    def test_literal_spans_cover_whole_tokens(self):
        source = "x = r'\\d+'\ny = ('a', 'b')\n"
        result = collect(source)
        spans = [(s.start_byte, s.end_byte, s.text) for s in result.literal_spans]
        assert spans == [
            (4, 10, "\\d+"),
            (16, 19, "a"),
            (21, 24, "b"),
        ]

    def test_skipped_literals_have_no_span(self):
        source = 'd = {"key": 1}\nx = ("a" "b")\nlog.info("msg")\n'
        assert collect(source).literal_spans == []

    def test_values_are_decoded(self):
        result = collect('x = "tab\\there"\ny = r"\\d+"\nz = u"unicode"\n')
        assert safe_texts(result) == ["tab\there", "\\d+", "unicode"]

    def test_empty_string_is_collected(self):
        result = collect('x = ""\n')
        assert safe_texts(result) == [""]

    def test_location(self):
        result = collect('x = 1\ny = "two"\n')
        location = result.safe[0].location
        assert location.file_path == "sample.py"
        assert location.line == 2
        assert location.offset == 10

    def test_concatenated_literal_is_combined(self):
        result = collect('msg = ("Hello, "\n       "World")\n')
        assert safe_texts(result) == ["Hello, World"]

    def test_dictionary_value_is_collected(self):
        result = collect('d = {"key": "Value"}\n')
        assert safe_texts(result) == ["Value"]

    def test_subscript_assignment_value_is_collected(self):
        result = collect('d["key"] = "Value"\n')
        assert safe_texts(result) == ["Value"]

    def test_keyword_argument_is_collected(self):
        result = collect('button(label="Save")\n')
        assert safe_texts(result) == ["Save"]


class TestSkipRules:

    def test_dictionary_keys_are_skipped(self):
        source = 'd = {"key": 1, "other": 2}\n'
        result = collect(source)
        assert safe_texts(result) == []
        data = source.encode("utf-8")
        protected = [data[start:end] for start, end in result.protected_ranges]
        assert b'"key"' in protected
        assert b'"other"' in protected

    def test_subscript_keys_are_skipped(self):
        result = collect('value = config["timeout"]\n')
        assert safe_texts(result) == []

    def test_logging_calls_are_skipped(self):
        source = (
            'print("debug output")\n'
            'logger.info("started")\n'
            'logging.warning("careful")\n'
            'log("plain")\n'
        )
        result = collect(source)
        assert safe_texts(result) == []
        assert len(result.protected_ranges) == 4

    def test_nested_arguments_of_ignored_call_are_skipped(self):
        result = collect('print("a", describe("b"))\n')
        assert safe_texts(result) == []

    def test_exception_messages_are_skipped(self):
        result = collect('raise ValueError("value is required")\n')
        assert safe_texts(result) == []

    def test_dynamic_import_target_is_skipped(self):
        result = collect('mod = importlib.import_module("pkg.plugins")\n')
        assert safe_texts(result) == []

    def test_docstrings_are_skipped(self):
        source = (
            '"""Module docstring."""\n'
            "\n"
            "def f():\n"
            '    """Function docstring."""\n'
            '    return "result"\n'
        )
        result = collect(source)
        assert safe_texts(result) == ["result"]

    def test_byte_strings_are_skipped(self):
        result = collect('data = b"raw bytes"\n')
        assert safe_texts(result) == []
        assert manual_texts(result) == []

    def test_custom_ignore_sets(self):
        source = 'translate("Hi")\nprint("shown")\n'
        result = collect(source, ignored_functions={"translate"})
        assert safe_texts(result) == ["shown"]

    def test_custom_constructor_set(self):
        source = 'raise AppError("custom")\nraise ValueError("builtin")\n'
        result = collect(source, ignored_constructors={"AppError"})
        assert safe_texts(result) == ["builtin"]


class TestManualLiterals:

    def test_interpolated_fragments_are_manual(self):
        source = 'msg = f"Hello {name}!"\n'
        result = collect(source)
        assert safe_texts(result) == []
        assert manual_texts(result) == ["Hello ", "!"]
        assert all(o.category is LiteralCategory.MANUAL for o in result.manual)

    def test_fragments_carry_owner_offset(self):
        source = 'x = 1\nmsg = f"Total: {count} items"\n'
        result = collect(source)
        offsets = {o.location.offset for o in result.manual}
        assert offsets == {source.index('f"')}
        assert {o.location.line for o in result.manual} == {2}

    def test_manual_fragments_are_not_deduplicated(self):
        source = 'a = f"Hi {x}"\nb = f"Hi {y}"\n'
        result = collect(source)
        assert manual_texts(result) == ["Hi ", "Hi "]

    def test_interpolation_only_literal_has_no_fragments(self):
        result = collect('x = f"{value}"\n')
        assert manual_texts(result) == []


class TestMalformedSource:

    def test_partial_extraction_from_broken_file(self):
        source = 'x = "before"\ndef broken(:\n    pass\n'
        result = collect(source)
        assert result.has_errors
        assert "before" in safe_texts(result)

    def test_collector_is_reusable_per_file(self):
        collector = LiteralCollector("a.py")
        result = collector.collect(parse_source('x = "one"\n'))
        assert result.file_path == "a.py"
        assert safe_texts(result) == ["one"]
