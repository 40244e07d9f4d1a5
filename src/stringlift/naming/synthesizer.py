"""
NameSynthesizer: turn arbitrary literal text into constant names.

Synthesis is total: every input, including the empty string, whitespace
and pure symbol runs, yields a valid identifier that is unique within the
run's NamingContext.
"""

import keyword
from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Tuple

import regex

from .config import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_PREFIX,
    OVERFLOW_MARKER,
    PLACEHOLDER_STEM,
    SYMBOL_MNEMONICS,
    validate_max_length,
    validate_prefix,
)

# One user-perceived character (extended grapheme cluster)
_GRAPHEME = regex.compile(r"\X")


@dataclass
class NamingContext:
    """
    Run-scoped naming state: every issued name plus the placeholder counter.

    Create one per run and thread it through synthesis; nothing is shared
    between runs.
    """
    used_names: Set[str] = field(default_factory=set)
    symbol_counter: int = 1

    def reserve(self, name: str) -> None:
        self.used_names.add(name)

    def __contains__(self, name: str) -> bool:
        return name in self.used_names


class NameSynthesizer:
    """
    Synthesize unique, bounded-length constant names from literal text.
    """

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        max_length: int = DEFAULT_MAX_LENGTH,
        mnemonics: Optional[Dict[str, str]] = None,
    ):
        validate_prefix(prefix)
        validate_max_length(max_length, prefix)
        self.prefix = prefix
        self.max_length = max_length
        self.mnemonics = dict(SYMBOL_MNEMONICS if mnemonics is None else mnemonics)

    def spell(self, text: str) -> str:
        """
        Spell out ``text`` one grapheme at a time: symbols become mnemonics,
        ASCII letters and digits are kept, anything else is dropped.
        Whitespace is significant and is never trimmed.
        """
        parts = []
        for cluster in _GRAPHEME.findall(text):
            mnemonic = self.mnemonics.get(cluster)
            if mnemonic is not None:
                parts.append(mnemonic)
            elif cluster.isascii() and cluster.isalnum():
                parts.append(cluster)
        return "".join(parts)

    def _compose(self, text: str, counter: int) -> Tuple[str, bool]:
        """Return (unbounded name, whether the placeholder counter was used)."""
        used_placeholder = False

        if text in self.mnemonics:
            # A literal that is exactly one symbol gets the canonical name
            name = self.prefix + self.mnemonics[text]
        else:
            body = self.spell(text)
            if body:
                name = self.prefix + body
            else:
                name = f"{self.prefix}{PLACEHOLDER_STEM}{counter}"
                used_placeholder = True

        if name[:1].isdigit():
            name = "_" + name
        if keyword.iskeyword(name):
            name += "_"
        return name, used_placeholder

    def _bounded(self, name: str, suffix: str = "") -> str:
        if len(name) + len(suffix) <= self.max_length:
            return name + suffix
        keep = max(self.max_length - len(OVERFLOW_MARKER) - len(suffix), 1)
        return name[:keep] + OVERFLOW_MARKER + suffix

    def base_name(self, text: str, context: NamingContext) -> str:
        """
        First candidate name for ``text``, without reserving anything.

        Calling this repeatedly against an unchanged context always returns
        the same value.
        """
        name, _ = self._compose(text, context.symbol_counter)
        return self._bounded(name)

    def synthesize(self, text: str, context: NamingContext) -> str:
        """
        Issue a unique name for ``text`` and reserve it in ``context``.

        Collisions get ``_1``, ``_2``, ... appended (re-bounded to the
        maximum length) until an unused name is found.
        """
        name, used_placeholder = self._compose(text, context.symbol_counter)
        if used_placeholder:
            context.symbol_counter += 1

        candidate = self._bounded(name)
        suffix = 0
        while candidate in context:
            suffix += 1
            candidate = self._bounded(name, f"_{suffix}")

        context.reserve(candidate)
        return candidate
