from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class LiteralCategory(str, Enum):
    """Whether an occurrence can be replaced automatically."""
    SAFE = "safe"
    MANUAL = "manual"


class SourceLocation(BaseModel):
    """
    Where a literal was found. ``offset`` is the byte offset of the owning
    literal node, ``line`` is 1-based.
    """
    model_config = ConfigDict(frozen=True)

    file_path: str
    offset: int
    line: int


class LiteralOccurrence(BaseModel):
    """
    A single classified literal occurrence produced by the collector.
    """
    model_config = ConfigDict(frozen=True)

    text: str
    location: SourceLocation
    category: LiteralCategory


class LiteralSpan(BaseModel):
    """
    Byte span of one replaceable literal token, with its decoded value.
    """
    model_config = ConfigDict(frozen=True)

    start_byte: int
    end_byte: int
    text: str


class FileLiterals(BaseModel):
    """
    Everything the collector learned about one file.

    ``protected_ranges`` are byte ranges of skipped contexts (ignored calls,
    dictionary and subscript keys, docstrings) that the rewriter must leave
    untouched. ``literal_spans`` are the tokens the rewriter may replace.
    """
    file_path: str
    safe: List[LiteralOccurrence] = Field(default_factory=list)
    manual: List[LiteralOccurrence] = Field(default_factory=list)
    protected_ranges: List[Tuple[int, int]] = Field(default_factory=list)
    literal_spans: List[LiteralSpan] = Field(default_factory=list)
    has_errors: bool = False


class Binding(BaseModel):
    """
    The literal text <-> identifier pair recorded for one run.
    """
    literal_text: str
    identifier_name: str
    category: LiteralCategory
    first_seen: SourceLocation
    sources: List[str] = Field(default_factory=list)  # Provenance of manual occurrences


class Directive(BaseModel):
    """
    A module-level directive relevant to import injection.
    """
    kind: str  # "import", "from_import", "future_import" or "docstring"
    module: Optional[str] = None
    start_byte: int
    end_byte: int
    leading: bool = True  # Part of the import block at the top of the module


class RefactorResult(BaseModel):
    """
    Summary of a refactoring run.
    """
    files: List[str]
    output_const_file: str
    safe_count: int = 0
    manual_count: int = 0
    replacements: int = 0
    modified_files: List[str] = Field(default_factory=list)
    dry_run: bool = False
