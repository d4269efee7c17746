"""Inflection generator.

Builds paradigms by plain suffixation from per-part-of-speech suffix tables.
Each inflecting part of speech has one generator function; parts of speech
without a generator get an empty paradigm.
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Optional

from nordum.config import get_settings
from nordum.core.contracts import IParadigmGenerator
from nordum.core.tables import IRREGULAR_VERBS
from nordum.core.types import (
    AdjectiveParadigm,
    AdjectivePositive,
    EmptyParadigm,
    Gender,
    NounForms,
    NounParadigm,
    Paradigm,
    PartOfSpeech,
    VerbParadigm,
)
from nordum.errors import UnknownPartOfSpeechError
from nordum.observ import get_logger

logger = get_logger(__name__)


# Both genders share the -ar/-arna plural
NOUN_SUFFIXES = {
    Gender.COMMON: {"definite": "en", "plural": "ar", "plural_definite": "arna"},
    Gender.NEUTER: {"definite": "et", "plural": "ar", "plural_definite": "arna"},
}

ADJECTIVE_SUFFIXES = {
    "neuter": "t",
    "plural": "e",
    "definite": "e",
    "comparative": "ere",
    "superlative": "est",
}

VERB_SUFFIXES = {
    "infinitive": "a",
    "present": "er",
    "past": "ede",
    "supine": "et",
    "past_participle": "et",
    "present_participle": "ende",
    "imperative": "",
}


def verb_root(stem: str) -> str:
    """Bare root of a verb given in its infinitive or present form."""
    if stem.endswith("er") and len(stem) > 3:
        return stem[:-2]
    if stem.endswith("a") and len(stem) > 1:
        return stem[:-1]
    return stem


def noun_paradigm(stem: str, gender: Optional[Gender] = None) -> NounParadigm:
    suffixes = NOUN_SUFFIXES[Gender.NEUTER if gender == Gender.NEUTER else Gender.COMMON]
    return NounParadigm(
        singular=NounForms(
            indefinite=stem,
            definite=stem + suffixes["definite"]
        ),
        plural=NounForms(
            indefinite=stem + suffixes["plural"],
            definite=stem + suffixes["plural_definite"]
        ),
    )


def adjective_paradigm(stem: str, gender: Optional[Gender] = None) -> AdjectiveParadigm:
    return AdjectiveParadigm(
        positive=AdjectivePositive(
            common=stem,
            neuter=stem + ADJECTIVE_SUFFIXES["neuter"],
            plural=stem + ADJECTIVE_SUFFIXES["plural"],
            definite=stem + ADJECTIVE_SUFFIXES["definite"],
        ),
        comparative=stem + ADJECTIVE_SUFFIXES["comparative"],
        superlative=stem + ADJECTIVE_SUFFIXES["superlative"],
    )


def verb_paradigm(stem: str, gender: Optional[Gender] = None) -> VerbParadigm:
    root = verb_root(stem)
    return VerbParadigm(**{form: root + suffix for form, suffix in VERB_SUFFIXES.items()})


PARADIGM_GENERATORS: Mapping[PartOfSpeech, IParadigmGenerator] = {
    PartOfSpeech.NOUN: noun_paradigm,
    PartOfSpeech.ADJECTIVE: adjective_paradigm,
    PartOfSpeech.VERB: verb_paradigm,
}


def _irregular_paradigms() -> dict[str, VerbParadigm]:
    forms = (
        "infinitive", "present", "past", "supine",
        "past_participle", "present_participle", "imperative",
    )
    return {
        verb: VerbParadigm(**dict(zip(forms, inflected)))
        for verb, inflected in IRREGULAR_VERBS.items()
    }


class InflectionGenerator:
    """Dispatches a stem to the generator for its part of speech."""

    def __init__(
        self,
        generators: Mapping[PartOfSpeech, IParadigmGenerator] = PARADIGM_GENERATORS,
        irregular_verbs: Optional[bool] = None
    ):
        if irregular_verbs is None:
            irregular_verbs = get_settings().irregular_verbs
        self._generators = dict(generators)
        self._irregulars = _irregular_paradigms() if irregular_verbs else {}

    def inflect(
        self,
        stem: str,
        pos: Optional[str],
        gender: Optional[Gender] = None
    ) -> Paradigm:
        """Full paradigm for a stem; empty for non-inflecting or unknown POS."""
        if not PartOfSpeech.is_known(pos):
            error = UnknownPartOfSpeechError(pos, stem)
            logger.warning("unknown_part_of_speech", **error.to_detail().context)
            return EmptyParadigm()

        pos = PartOfSpeech(pos)
        if pos == PartOfSpeech.VERB and stem in self._irregulars:
            return self._irregulars[stem]

        generator = self._generators.get(pos)
        if generator is None:
            return EmptyParadigm()
        return generator(stem, gender)


@lru_cache(maxsize=1)
def _default_generator() -> InflectionGenerator:
    return InflectionGenerator()


def inflect(stem: str, pos: Optional[str], gender: Optional[Gender] = None) -> Paradigm:
    """Inflect with the configured irregular-verb policy."""
    return _default_generator().inflect(stem, pos, gender)
