"""Lexicon assembly.

Drives selection, transformation, inflection and alternative spelling over
the concept table and commits the results in one ordered pass. Insertion is
first-writer-wins: canonical entries are committed in concept order before
any alternative, and a key that is already taken is never overwritten.
"""

from collections.abc import Iterable, Mapping
from typing import Optional, TypeVar

from nordum.config import Settings, get_settings
from nordum.core.types import (
    BuildReport,
    Candidate,
    ConceptEntry,
    Gender,
    Language,
    LexicalEntry,
    Lexicon,
    PartOfSpeech,
)
from nordum.errors import MalformedInputError, MissingCandidateError
from nordum.observ import get_logger, timed
from nordum.services.alternatives import alternatives
from nordum.services.cognate import CognateService
from nordum.services.inflection import InflectionGenerator
from nordum.services.selection import CandidateSelector, selection_rationale
from nordum.services.transform import WordTransformer

logger = get_logger(__name__)

T = TypeVar("T")


# Votes for POS and gender
VOTE_WEIGHTS: dict[Language, int] = {
    Language.NORWEGIAN: 2,
    Language.DANISH: 2,
    Language.SWEDISH: 1,
}

# Frequency averaging
FREQUENCY_WEIGHTS: dict[Language, float] = {
    Language.NORWEGIAN: 1.5,
    Language.DANISH: 1.5,
    Language.SWEDISH: 1.0,
}


def round_half_up(value: float) -> int:
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def weighted_vote(votes: Iterable[tuple[Language, Optional[T]]]) -> Optional[T]:
    """Value with the highest language-weighted count.

    Ties go to the value encountered first.
    """
    totals: dict[T, int] = {}
    for language, value in votes:
        if value is None:
            continue
        totals[value] = totals.get(value, 0) + VOTE_WEIGHTS.get(Language(language), 1)

    best: Optional[T] = None
    best_total = 0
    for value, total in totals.items():
        if total > best_total:
            best, best_total = value, total
    return best


def select_pos(candidates: Mapping[Language, Candidate]) -> str:
    pos = weighted_vote((lang, c.pos) for lang, c in candidates.items())
    return pos or PartOfSpeech.NOUN.value


def select_gender(candidates: Mapping[Language, Candidate]) -> Gender:
    gender = weighted_vote((lang, c.gender) for lang, c in candidates.items())
    return gender or Gender.COMMON


def weighted_frequency(
    candidates: Mapping[Language, Candidate],
    default: int = 1000
) -> int:
    """Mean of language-weighted frequencies over candidates that have one."""
    weighted = [
        c.frequency * FREQUENCY_WEIGHTS.get(Language(lang), 1.0)
        for lang, c in candidates.items()
        if c.frequency > 0
    ]
    if not weighted:
        return default
    return round_half_up(sum(weighted) / len(weighted))


class LexiconAssembler:
    """Builds a lexicon from a concept table in a single pass."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        selector: Optional[CandidateSelector] = None,
        transformer: Optional[WordTransformer] = None,
        inflector: Optional[InflectionGenerator] = None,
        cognates: Optional[CognateService] = None
    ):
        self._settings = settings or get_settings()
        self._selector = selector or CandidateSelector()
        self._transformer = transformer or WordTransformer()
        self._inflector = inflector or InflectionGenerator(
            irregular_verbs=self._settings.irregular_verbs
        )
        self._cognates = cognates or CognateService()

    def assemble(self, concepts: Mapping[str, ConceptEntry]) -> Lexicon:
        counts = dict.fromkeys(BuildReport.model_fields, 0)
        entries: dict[str, LexicalEntry] = {}
        taken: set[str] = set()

        canonical_attempts = []
        for key, concept_entry in concepts.items():
            counts["concepts_seen"] += 1
            entry = self._build_canonical(key, concept_entry, counts)
            if entry is not None:
                canonical_attempts.append(entry)

        committed, collisions = self._commit(canonical_attempts, entries, taken)
        counts["canonical_entries"] = committed
        counts["canonical_collisions"] = collisions

        alternative_attempts = [
            alternative
            for parent in list(entries.values())
            for alternative in self._build_alternatives(parent)
        ]
        committed, collisions = self._commit(alternative_attempts, entries, taken)
        counts["alternative_entries"] = committed
        counts["alternative_collisions"] = collisions

        report = BuildReport(**counts)
        logger.info("lexicon_assembled", **report.model_dump())
        return Lexicon(entries, report)

    def _usable_candidates(
        self,
        concept: str,
        candidates: Mapping[Language, Candidate],
        counts: dict[str, int]
    ) -> dict[Language, Candidate]:
        usable = {}
        for language, candidate in candidates.items():
            if candidate.has_word:
                usable[language] = candidate
                continue
            counts["malformed_candidates"] += 1
            error = MalformedInputError(concept, Language(language).value)
            logger.warning("candidate_excluded", **error.to_detail().context)
        return usable

    def _build_canonical(
        self,
        key: str,
        concept_entry: ConceptEntry,
        counts: dict[str, int]
    ) -> Optional[LexicalEntry]:
        concept = concept_entry.concept or key
        candidates = self._usable_candidates(concept, concept_entry.candidates, counts)

        selection = self._selector.select(candidates, concept) if candidates else None
        if selection is None:
            counts["concepts_skipped"] += 1
            error = MissingCandidateError(concept)
            logger.warning("concept_skipped", **error.to_detail().context)
            return None

        pos = select_pos(candidates)
        canonical_form = self._transformer.transform(
            selection.word, selection.source_language, concept, pos
        )
        gender = select_gender(candidates) if pos == PartOfSpeech.NOUN else None

        if not PartOfSpeech.is_known(pos):
            counts["unknown_pos"] += 1

        score = self._cognates.cognate_score(concept_entry.words)

        return LexicalEntry(
            canonical_form=canonical_form,
            concept=concept,
            pos=pos,
            gender=gender,
            cognate_score=max(score, self._settings.cognate_score_floor),
            source_language_count=len(candidates),
            frequency=weighted_frequency(candidates, self._settings.default_frequency),
            sources=candidates,
            inflections=self._inflector.inflect(canonical_form, pos, gender),
            selection_rationale=selection_rationale(canonical_form, candidates, concept),
        )

    def _build_alternatives(self, parent: LexicalEntry) -> list[LexicalEntry]:
        factor = self._settings.alternative_frequency_factor
        return [
            parent.model_copy(update={
                "canonical_form": alternative.spelling,
                "inflections": self._inflector.inflect(
                    alternative.spelling, parent.pos, parent.gender
                ),
                "is_alternative_of": parent.canonical_form,
                "alternative_rationale": alternative.rationale,
                "frequency": round_half_up(parent.frequency * factor),
            })
            for alternative in alternatives(parent.canonical_form, parent.concept)
            if alternative.spelling != parent.canonical_form
        ]

    def _commit(
        self,
        attempts: Iterable[LexicalEntry],
        entries: dict[str, LexicalEntry],
        taken: set[str]
    ) -> tuple[int, int]:
        """Insert attempts in order against the taken keys."""
        committed = collisions = 0
        for entry in attempts:
            if entry.canonical_form in taken:
                collisions += 1
                logger.debug(
                    "key_collision_skipped",
                    key=entry.canonical_form,
                    concept=entry.concept,
                    alternative=entry.is_alternative
                )
                continue
            taken.add(entry.canonical_form)
            entries[entry.canonical_form] = entry
            committed += 1
        return committed, collisions


@timed(logger)
def assemble(
    concepts: Mapping[str, ConceptEntry],
    settings: Optional[Settings] = None
) -> Lexicon:
    """Build a fresh lexicon from a concept table."""
    return LexiconAssembler(settings=settings).assemble(concepts)
