"""Shared fixtures: concept tables modeled on real source rows."""

import pytest

from nordum.config import Settings
from nordum.core.types import ConceptEntry
from nordum.services.lexicon import LexiconAssembler


def concept(name: str, **candidates) -> ConceptEntry:
    """Build a concept entry from per-language candidate dicts."""
    return ConceptEntry(concept=name, candidates=candidates)


def table(*entries: ConceptEntry) -> dict[str, ConceptEntry]:
    return {entry.concept: entry for entry in entries}


WORK = concept(
    "work",
    norwegian={"word": "arbeider", "pos": "verb", "frequency": 1500},
    danish={"word": "arbejder", "pos": "verb", "frequency": 1400},
    swedish={"word": "arbetar", "pos": "verb", "frequency": 1600},
)

FIFTY = concept(
    "fifty",
    norwegian={"word": "femti", "pos": "numeral"},
    danish={"word": "halvtreds", "pos": "numeral"},
    swedish={"word": "femtio", "pos": "numeral"},
)

COMPUTER = concept(
    "computer",
    danish={"word": "computer", "pos": "noun", "frequency": 10},
    swedish={"word": "dator", "pos": "noun", "frequency": 900000},
)

BREAD = concept(
    "bread",
    norwegian={"word": "brød", "pos": "noun", "gender": "n", "frequency": 900},
    danish={"word": "brød", "pos": "noun", "gender": "n", "frequency": 800},
    swedish={"word": "bröd", "pos": "noun", "gender": "ett", "frequency": 1000},
)

WHERE = concept(
    "where",
    norwegian={"word": "hvor", "pos": "adverb", "frequency": 1800},
    danish={"word": "hvor", "pos": "adverb", "frequency": 1800},
    swedish={"word": "var", "pos": "adverb", "frequency": 1800},
)

WHAT = concept(
    "what",
    norwegian={"word": "hva", "pos": "pronoun", "frequency": 2000},
    danish={"word": "hvad", "pos": "pronoun", "frequency": 2000},
    swedish={"word": "vad", "pos": "pronoun", "frequency": 2000},
)

GIRLS = concept(
    "girls",
    norwegian={"word": "jenter", "pos": "noun", "gender": "f", "frequency": 1200},
    danish={"word": "piger", "pos": "noun", "gender": "c", "frequency": 1200},
    swedish={"word": "flickor", "pos": "noun", "gender": "en", "frequency": 1200},
)

SMALL = concept(
    "small",
    norwegian={"word": "liten", "pos": "adjective", "frequency": 1200},
    danish={"word": "lille", "pos": "adjective", "frequency": 1100},
    swedish={"word": "liten", "pos": "adjective", "frequency": 1300},
)

NO = concept(
    "no",
    norwegian={"word": "nei", "pos": "interjection", "frequency": 2500},
    danish={"word": "nej", "pos": "interjection", "frequency": 2400},
    swedish={"word": "nej", "pos": "interjection", "frequency": 2600},
)

HIGH = concept(
    "high",
    danish={"word": "høj", "pos": "adjective", "frequency": 700},
    swedish={"word": "hög", "pos": "adjective", "frequency": 650},
)

BOY = concept(
    "boy",
    danish={"word": "dreng", "pos": "noun", "gender": "c", "frequency": 1200},
)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def assembler(settings):
    return LexiconAssembler(settings=settings)


@pytest.fixture
def sample_table():
    return table(WORK, FIFTY, COMPUTER, BREAD, WHERE, WHAT, GIRLS, SMALL, NO, HIGH, BOY)


@pytest.fixture
def sample_lexicon(assembler, sample_table):
    return assembler.assemble(sample_table)
