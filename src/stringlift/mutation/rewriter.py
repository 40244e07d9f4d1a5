"""
Literal substitution: replace quoted literals with constant references.

Matching is exact-text, not context-aware: every replaceable literal token
whose value equals a bound text is replaced, whatever the quote style,
prefix (``r``, ``u``) or escaping it was written with. Two plain
occurrences of the same text in different contexts are therefore both
replaced. Only whole tokens found by the literal collector are edited, so
a replacement can never straddle the delimiters of neighbouring literals,
and protected ranges (ignored calls, keys, docstrings) are never touched.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from stringlift.extraction import collect_literals
from stringlift.logging_config import logger
from stringlift.parser import parse_source
from stringlift.schemas import FileLiterals, LiteralSpan

Range = Tuple[int, int]
Edit = Tuple[int, int, bytes]


def _overlaps(start: int, end: int, ranges: Iterable[Range]) -> bool:
    return any(start < r_end and r_start < end for r_start, r_end in ranges)


def plan_edits(
    spans: Sequence[LiteralSpan],
    replacements: Mapping[str, str],
    protected_ranges: Sequence[Range] = (),
) -> List[Edit]:
    """
    Find every replacement to make.

    Bindings are applied in mapping order. Each literal token is replaced
    at most once; identifiers are never quoted, so an inserted name cannot
    be matched again by a later binding.

    Returns:
        Non-overlapping (start, end, replacement) edits sorted by position
    """
    by_text: Dict[str, List[LiteralSpan]] = {}
    for span in spans:
        by_text.setdefault(span.text, []).append(span)

    accepted: List[Edit] = []
    taken: List[Range] = []

    for text, name in replacements.items():
        replacement = name.encode("utf-8")
        for span in by_text.get(text, ()):
            start, end = span.start_byte, span.end_byte
            if _overlaps(start, end, protected_ranges) or _overlaps(start, end, taken):
                continue
            accepted.append((start, end, replacement))
            taken.append((start, end))

    accepted.sort(key=lambda edit: edit[0])
    return accepted


def apply_edits(data: bytes, edits: Sequence[Edit]) -> bytes:
    out = []
    cursor = 0
    for start, end, replacement in edits:
        out.append(data[cursor:start])
        out.append(replacement)
        cursor = end
    out.append(data[cursor:])
    return b"".join(out)


def rewrite_source(
    source: str,
    replacements: Mapping[str, str],
    collected: Optional[FileLiterals] = None,
) -> Tuple[str, int]:
    """
    Replace quoted literals in ``source`` with their identifiers.

    Args:
        source: File content
        replacements: Literal text -> identifier name
        collected: Collector output for exactly this content. When omitted,
            the source is parsed and collected with the default ignore sets.

    Returns:
        (rewritten source, number of replacements)
    """
    data = source.encode("utf-8")
    if collected is None:
        collected = collect_literals(parse_source(data), "<source>")

    edits = plan_edits(collected.literal_spans, replacements, collected.protected_ranges)
    if not edits:
        return source, 0

    logger.debug(f"Applying {len(edits)} literal replacements")
    return apply_edits(data, edits).decode("utf-8"), len(edits)
