"""Core type definitions for the Nordum lexicon builder.

Provides immutable domain models with strict typing.
All entities are Pydantic models for validation and serialization.
"""

import math
from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    """Source languages contributing candidates."""
    NORWEGIAN = "norwegian"
    DANISH = "danish"
    SWEDISH = "swedish"


class PartOfSpeech(str, Enum):
    """Recognized parts of speech."""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    NUMERAL = "numeral"
    ARTICLE = "article"

    @classmethod
    def is_known(cls, value: Optional[str]) -> bool:
        return value in cls._value2member_map_


class Gender(str, Enum):
    """Grammatical gender of nouns."""
    COMMON = "common"
    NEUTER = "neuter"


# Source notations for gender, as found in the per-language CSV files
GENDER_NOTATIONS: dict[str, Gender] = {
    "common": Gender.COMMON,
    "neuter": Gender.NEUTER,
    "en": Gender.COMMON,
    "ett": Gender.NEUTER,
    "et": Gender.NEUTER,
    "masculine": Gender.COMMON,
    "feminine": Gender.COMMON,
    "m": Gender.COMMON,
    "f": Gender.COMMON,
    "n": Gender.NEUTER,
    "c": Gender.COMMON,
}


class Candidate(BaseModel):
    """One source language's word for a concept."""
    model_config = ConfigDict(frozen=True)

    word: Optional[str] = None
    pos: Optional[str] = None
    gender: Optional[Gender] = None
    frequency: float = Field(default=0, ge=0)

    @field_validator("word", "pos", mode="before")
    @classmethod
    def _clean_text(cls, value):
        if value is None:
            return None
        value = str(value).strip().lower()
        return value or None

    @field_validator("gender", mode="before")
    @classmethod
    def _normalize_gender(cls, value):
        if value is None or isinstance(value, Gender):
            return value
        return GENDER_NOTATIONS.get(str(value).strip().lower())

    @field_validator("frequency", mode="before")
    @classmethod
    def _parse_frequency(cls, value):
        if value is None or value == "":
            return 0
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                return 0
            if not math.isfinite(value):
                return 0
            value = int(value)
        elif isinstance(value, float) and not math.isfinite(value):
            return 0
        return max(value, 0)

    @property
    def has_word(self) -> bool:
        return bool(self.word)


class ConceptEntry(BaseModel):
    """An English gloss with its per-language candidates."""
    model_config = ConfigDict(frozen=True)

    concept: str
    candidates: dict[Language, Candidate] = Field(default_factory=dict)

    @property
    def words(self) -> list[str]:
        return [c.word for c in self.candidates.values() if c.has_word]


class Selection(BaseModel):
    """Canonical source chosen for a concept."""
    model_config = ConfigDict(frozen=True)

    word: str
    source_language: str  # A Language value, "loanword" or "numeral"


class Alternative(BaseModel):
    """Secondary spelling derived from a canonical form."""
    model_config = ConfigDict(frozen=True)

    spelling: str
    rationale: str


# ═════════════════════════════════════════════════════════════════════════════
# Paradigms
# ═════════════════════════════════════════════════════════════════════════════

class NounForms(BaseModel):
    model_config = ConfigDict(frozen=True)

    indefinite: str
    definite: str


class NounParadigm(BaseModel):
    """Singular and plural, indefinite and definite."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["noun"] = "noun"
    singular: NounForms
    plural: NounForms

    def surface_forms(self) -> list[str]:
        return [
            self.singular.indefinite,
            self.singular.definite,
            self.plural.indefinite,
            self.plural.definite,
        ]


class AdjectivePositive(BaseModel):
    model_config = ConfigDict(frozen=True)

    common: str
    neuter: str
    plural: str
    definite: str


class AdjectiveParadigm(BaseModel):
    """Positive agreement forms plus comparison degrees."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["adjective"] = "adjective"
    positive: AdjectivePositive
    comparative: str
    superlative: str

    def surface_forms(self) -> list[str]:
        return [
            self.positive.common,
            self.positive.neuter,
            self.positive.plural,
            self.positive.definite,
            self.comparative,
            self.superlative,
        ]


class VerbParadigm(BaseModel):
    """Finite and non-finite verb forms."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["verb"] = "verb"
    infinitive: str
    present: str
    past: str
    supine: str
    past_participle: str
    present_participle: str
    imperative: str

    def surface_forms(self) -> list[str]:
        return [
            self.infinitive,
            self.present,
            self.past,
            self.supine,
            self.past_participle,
            self.present_participle,
            self.imperative,
        ]


class EmptyParadigm(BaseModel):
    """Parts of speech without inflection."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"

    def surface_forms(self) -> list[str]:
        return []


Paradigm = Annotated[
    Union[NounParadigm, AdjectiveParadigm, VerbParadigm, EmptyParadigm],
    Field(discriminator="kind"),
]


# ═════════════════════════════════════════════════════════════════════════════
# Output
# ═════════════════════════════════════════════════════════════════════════════

class LexicalEntry(BaseModel):
    """One canonical or alternative spelling in the output lexicon."""
    model_config = ConfigDict(frozen=True)

    canonical_form: str
    concept: str
    pos: str
    gender: Optional[Gender] = None
    cognate_score: float = Field(ge=0.0, le=1.0)
    source_language_count: int = Field(ge=0, le=3)
    frequency: int = Field(ge=0)
    sources: dict[Language, Candidate]
    inflections: Paradigm = Field(default_factory=EmptyParadigm)
    selection_rationale: str
    is_alternative_of: Optional[str] = None
    alternative_rationale: Optional[str] = None

    @property
    def is_alternative(self) -> bool:
        return self.is_alternative_of is not None

    @property
    def ranking(self) -> float:
        """Export ranking weight."""
        return self.cognate_score * self.source_language_count


class BuildReport(BaseModel):
    """Counters collected during one assembly pass."""
    model_config = ConfigDict(frozen=True)

    concepts_seen: int = 0
    concepts_skipped: int = 0
    malformed_candidates: int = 0
    unknown_pos: int = 0
    canonical_entries: int = 0
    canonical_collisions: int = 0
    alternative_entries: int = 0
    alternative_collisions: int = 0


class Lexicon(Mapping):
    """Read-only mapping from canonical form to entry, in insertion order."""

    def __init__(
        self,
        entries: Mapping[str, LexicalEntry],
        report: Optional[BuildReport] = None
    ):
        self._entries = MappingProxyType(dict(entries))
        self.report = report or BuildReport()

    def __getitem__(self, key: str) -> LexicalEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon({len(self)} entries)"

    def canonical(self) -> list[LexicalEntry]:
        return [e for e in self._entries.values() if not e.is_alternative]

    def alternatives(self) -> list[LexicalEntry]:
        return [e for e in self._entries.values() if e.is_alternative]

    def ordered(self) -> list[LexicalEntry]:
        """Export order: canonical entries first, then by descending ranking."""
        return sorted(
            self._entries.values(),
            key=lambda e: (e.is_alternative, -e.ranking)
        )
