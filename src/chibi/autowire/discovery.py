"""
Implementation discovery for abstract types that have no binding.

This is a heuristic: among the concrete subtypes of an abstraction the one
whose class name looks most like the abstraction's name wins. It does not
promise a unique or stable answer when several candidates score alike.
"""

from __future__ import annotations

import logging
from difflib import SequenceMatcher

from .catalog import ClassCatalog
from .introspection import is_abstract
from .keys import short_name

logger = logging.getLogger(__name__)


def name_similarity(first: str, second: str) -> int:
    """
    Count the characters two names have in common.

    Sums the sizes of the matching blocks found by recursively taking the
    longest common substring, so ``name_similarity("BarInterface", "BarImpl")``
    is 4 (``"BarI"``). Case sensitive.
    """
    matcher = SequenceMatcher(None, first, second, autojunk=False)
    return sum(block.size for block in matcher.get_matching_blocks())


class ImplementationDiscovery:
    """Finds the best concrete subtype of an abstraction in a ClassCatalog."""

    def __init__(self, catalog: ClassCatalog):
        self._catalog = catalog

    def find(self, abstraction: type) -> type | None:
        """
        Get the best-matching concrete subtype of ``abstraction``.

        If nothing matches and the catalog has not been expanded yet, the
        catalog is expanded once and the search is repeated.
        """
        implementation = self._best_candidate(abstraction)
        if implementation is None and not self._catalog.expanded:
            logger.debug("No implementation of %s loaded, expanding the class catalog", abstraction.__qualname__)
            self._catalog.expand()
            implementation = self._best_candidate(abstraction)

        if implementation is not None:
            logger.debug("Discovered %s as implementation of %s", implementation.__qualname__, abstraction.__qualname__)
        return implementation

    def _best_candidate(self, abstraction: type) -> type | None:
        target_name = short_name(abstraction)
        best: type | None = None
        best_score = -1
        for candidate in self._catalog.subtypes_of(abstraction):
            if is_abstract(candidate):
                continue
            score = name_similarity(target_name, short_name(candidate))
            if score > best_score:
                best, best_score = candidate, score
        return best
