"""Cognate scoring service.

Implements LingPy-based edit distance over normalized spellings.
Scores how closely a concept's source-language words agree.
"""

from collections.abc import Sequence
from typing import Optional
from itertools import combinations
from lingpy.align.pairwise import edit_dist
from nordum.core.contracts import ICleaner, ICognateScorer
from nordum.storage.cleaners import ComparisonNormalizer


class CognateService(ICognateScorer):
    """Scores cross-language similarity of candidate spellings."""

    def __init__(self, normalizer: Optional[ICleaner] = None):
        self._normalizer = normalizer or ComparisonNormalizer()

    def pair_similarity(self, word_a: str, word_b: str) -> float:
        """Normalized edit similarity of one pair.

        Distance is measured on comparison keys, but scaled by the longer
        of the original spellings.
        """
        max_len = max(len(word_a), len(word_b))
        if max_len == 0:
            return 1.0

        key_a = self._normalizer.clean(word_a)
        key_b = self._normalizer.clean(word_b)
        if key_a == key_b:
            return 1.0
        if not key_a or not key_b:
            distance = len(key_a) + len(key_b)
        else:
            distance = edit_dist(key_a, key_b)

        return 1.0 - (distance / max_len)

    def cognate_score(self, words: Sequence[str]) -> float:
        """Mean pairwise similarity; 0 for fewer than two words."""
        if not words or len(words) < 2:
            return 0.0

        scores = [self.pair_similarity(a, b) for a, b in combinations(words, 2)]
        return sum(scores) / len(scores)


_default_service = CognateService()


def cognate_score(words: Sequence[str]) -> float:
    """Score a candidate set with the default normalizer."""
    return _default_service.cognate_score(words)
