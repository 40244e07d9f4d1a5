"""
SymbolTable: the run-wide literal text -> Binding mapping.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from stringlift.logging_config import logger
from stringlift.schemas import Binding, FileLiterals, LiteralCategory, LiteralOccurrence
from .synthesizer import NameSynthesizer, NamingContext


class SymbolTable:
    """
    One binding per distinct literal text, kept in first-seen order.

    Safe bindings win over Manual ones: a text that is Safe anywhere in the
    run is bound as Safe, and Manual occurrences of an already bound text
    only add provenance.
    """

    def __init__(self, context: Optional[NamingContext] = None):
        self.context = context or NamingContext()
        self._bindings: Dict[str, Binding] = {}

    def __contains__(self, text: str) -> bool:
        return text in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._bindings.values())

    def get(self, text: str) -> Optional[Binding]:
        return self._bindings.get(text)

    def bind(self, occurrence: LiteralOccurrence, synthesizer: NameSynthesizer) -> Binding:
        """
        Bind ``occurrence.text`` unless it is already bound.

        Returns:
            The (new or existing) binding for the text
        """
        existing = self._bindings.get(occurrence.text)
        if existing is not None:
            if (
                existing.category is LiteralCategory.MANUAL
                and occurrence.category is LiteralCategory.MANUAL
                and occurrence.location.file_path not in existing.sources
            ):
                existing.sources.append(occurrence.location.file_path)
            return existing

        binding = Binding(
            literal_text=occurrence.text,
            identifier_name=synthesizer.synthesize(occurrence.text, self.context),
            category=occurrence.category,
            first_seen=occurrence.location,
        )
        if occurrence.category is LiteralCategory.MANUAL:
            binding.sources.append(occurrence.location.file_path)
        self._bindings[occurrence.text] = binding
        return binding

    def safe_bindings(self) -> List[Binding]:
        return [b for b in self if b.category is LiteralCategory.SAFE]

    def manual_bindings(self) -> List[Binding]:
        return [b for b in self if b.category is LiteralCategory.MANUAL]

    def replacements(self) -> Dict[str, str]:
        """Literal text -> identifier for every binding, Safe and Manual."""
        return {text: b.identifier_name for text, b in self._bindings.items()}


def build_symbol_table(
    collected: Iterable[FileLiterals],
    synthesizer: NameSynthesizer,
    context: Optional[NamingContext] = None,
) -> SymbolTable:
    """
    Deduplicate the literals of a whole run and assign names.

    All Safe occurrences are bound first, in file order, then the Manual
    ones. Names therefore depend only on the processing order.

    Args:
        collected: Per-file collector output, in processing order
        synthesizer: Name synthesizer
        context: Naming context for the run (a fresh one if omitted)

    Returns:
        The populated SymbolTable
    """
    collected = list(collected)
    table = SymbolTable(context)

    for file_literals in collected:
        for occurrence in file_literals.safe:
            table.bind(occurrence, synthesizer)

    for file_literals in collected:
        for occurrence in file_literals.manual:
            table.bind(occurrence, synthesizer)

    logger.info(
        f"Symbol table holds {len(table.safe_bindings())} safe and "
        f"{len(table.manual_bindings())} manual bindings"
    )
    return table
