"""Canonical source selection.

Selection is a priority cascade of rules evaluated in order; the first rule
that returns a selection wins. The cascade itself is data (SELECTION_RULES),
so each step can be tested on its own.
"""

import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional

from nordum.core.contracts import ISelectionRule
from nordum.core.tables import is_loanword, numeral_for
from nordum.core.types import Candidate, Language, Selection
from nordum.observ import get_logger

logger = get_logger(__name__)


# Bokmål/Danish form the preferred foundation
LANGUAGE_WEIGHTS: dict[Language, float] = {
    Language.NORWEGIAN: 3.0,
    Language.DANISH: 3.0,
    Language.SWEDISH: 1.0,
}

_STANDARD_LETTERS = re.compile(r"^[a-zäöå]+$")
_QUESTION_FORM = re.compile(r"^v(ad|ar|em|arför|ilken)")


def language_weight(language: Language) -> float:
    return LANGUAGE_WEIGHTS.get(Language(language), 0.0)


def regularity_score(word: str) -> float:
    """Reward regular spellings, penalize irregular clusters."""
    score = 1.0

    if "ck" in word:
        score -= 0.1
    if "ph" in word:
        score -= 0.1
    if word.endswith("dt"):
        score -= 0.2

    if _STANDARD_LETTERS.match(word):
        score += 0.1
    if len(word) <= 8:
        score += 0.05

    return max(0.0, score)


def candidate_score(language: Language, candidate: Candidate) -> float:
    """Language preference + damped frequency + regularity."""
    return (
        language_weight(language)
        + math.log10(candidate.frequency + 1) * 0.5
        + regularity_score(candidate.word)
    )


# ═════════════════════════════════════════════════════════════════════════════
# Selection Rules
# ═════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class LoanwordRule:
    """English loanwords are kept as the English term."""

    name: str = "loanword"

    def __call__(
        self,
        candidates: Mapping[Language, Candidate],
        concept: str
    ) -> Optional[Selection]:
        if not is_loanword(concept):
            return None
        return Selection(word=concept.lower(), source_language="loanword")


@dataclass(frozen=True)
class NumeralRule:
    """Numerals follow the Norwegian system."""

    name: str = "numeral"

    def __call__(
        self,
        candidates: Mapping[Language, Candidate],
        concept: str
    ) -> Optional[Selection]:
        numeral = numeral_for(concept)
        if numeral is None:
            return None
        return Selection(word=numeral, source_language="numeral")


@dataclass(frozen=True)
class ScoredRule:
    """Highest-scoring candidate; ties keep the first encountered."""

    name: str = "scored"

    def __call__(
        self,
        candidates: Mapping[Language, Candidate],
        concept: str
    ) -> Optional[Selection]:
        best: Optional[Selection] = None
        best_score = -1.0

        for language, candidate in candidates.items():
            if not candidate.has_word:
                continue
            score = candidate_score(language, candidate)
            if score > best_score:
                best_score = score
                best = Selection(
                    word=candidate.word,
                    source_language=Language(language).value
                )

        return best


SELECTION_RULES: tuple[ISelectionRule, ...] = (
    LoanwordRule(),
    NumeralRule(),
    ScoredRule(),
)


class CandidateSelector:
    """Runs the selection cascade for one concept."""

    def __init__(self, rules: Sequence[ISelectionRule] = SELECTION_RULES):
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[ISelectionRule, ...]:
        return self._rules

    def select(
        self,
        candidates: Mapping[Language, Candidate],
        concept: str
    ) -> Optional[Selection]:
        """Pick the canonical source word, None without usable candidates."""
        if not any(c.has_word for c in candidates.values()):
            return None

        for rule in self._rules:
            selection = rule(candidates, concept)
            if selection is not None:
                logger.debug(
                    "candidate_selected",
                    concept=concept,
                    rule=rule.name,
                    word=selection.word,
                    source=selection.source_language
                )
                return selection

        return None


_default_selector = CandidateSelector()


def select(
    candidates: Mapping[Language, Candidate],
    concept: str
) -> Optional[Selection]:
    return _default_selector.select(candidates, concept)


def selection_rationale(
    canonical_form: str,
    candidates: Mapping[Language, Candidate],
    concept: str
) -> str:
    """Human-readable reason for a canonical choice."""
    if is_loanword(concept):
        return "English loanword preserved (Danish practice)"

    if numeral_for(concept) is not None:
        return "Norwegian number system (most regular)"

    if _QUESTION_FORM.match(canonical_form):
        return "Question word with v- (Swedish pattern, no silent H)"

    def contributes(language: Language) -> bool:
        candidate = candidates.get(language)
        return candidate is not None and candidate.has_word

    has_norwegian = contributes(Language.NORWEGIAN)
    has_danish = contributes(Language.DANISH)

    if has_norwegian and has_danish:
        return "Bokmål/Danish agreement (preferred foundation)"
    if has_norwegian:
        return "Norwegian Bokmål form (preferred over Swedish)"
    if has_danish:
        return "Danish form (preferred over Swedish)"

    return "Selected based on regularity and frequency"
