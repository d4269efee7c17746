"""Composable data cleaning transformations.

Pure functions implementing ICleaner protocol.
Each cleaner is single-purpose, testable, and composable.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Optional

from nordum.core.types import Language


_TRAILING_DT = re.compile(r"dt$")
_NON_LETTER = re.compile(r"[^a-zäöå]")
_COMPARABLE = re.compile(r"^[a-zäöå]+$")


def normalize(word: str) -> str:
    """Fold a word into its comparison key.

    Never written to output: æ/ø fold to ä/ö, ck collapses to k, a final dt
    becomes t and anything outside a-z, ä, ö, å is dropped.
    """
    folded = word.lower().replace("æ", "ä").replace("ø", "ö").replace("ck", "k")
    folded = _TRAILING_DT.sub("t", folded)
    return _NON_LETTER.sub("", folded)


@dataclass(frozen=True)
class ComparisonNormalizer:
    """Canonicalize words for fuzzy cross-language comparison."""

    name: str = "comparison_normalizer"
    version: str = "1.0.0"

    def clean(self, word: str, **params) -> str:
        return normalize(word)

    def validate(self, word: str) -> bool:
        return bool(word and _COMPARABLE.match(word))


@dataclass(frozen=True)
class SourceWordCleaner:
    """Clean raw source-language headwords."""

    name: str = "source_word_cleaner"
    version: str = "1.0.0"

    def clean(self, word: str, **params) -> str:
        """Remove dictionary markers and parentheticals, lowercase."""
        cleaned = re.sub(r'[*†‡§¶]', '', word)
        cleaned = re.sub(r'\([^)]*\)', '', cleaned)
        cleaned = unicodedata.normalize('NFC', cleaned)
        cleaned = re.sub(r'\s+', ' ', cleaned.strip())
        return cleaned.lower()

    def validate(self, word: str) -> bool:
        return bool(word and word.strip())


@dataclass(frozen=True)
class LanguageNameCleaner:
    """Map language names and ISO codes to source languages."""

    name: str = "language_name_cleaner"
    version: str = "1.0.0"

    # Common mappings to source languages
    _mappings: dict[str, Language] = None

    def __post_init__(self):
        mappings = {
            'norwegian': Language.NORWEGIAN,
            'bokmål': Language.NORWEGIAN,
            'bokmal': Language.NORWEGIAN,
            'norsk': Language.NORWEGIAN,
            'no': Language.NORWEGIAN,
            'nb': Language.NORWEGIAN,
            'nob': Language.NORWEGIAN,
            'danish': Language.DANISH,
            'dansk': Language.DANISH,
            'da': Language.DANISH,
            'dan': Language.DANISH,
            'swedish': Language.SWEDISH,
            'svenska': Language.SWEDISH,
            'sv': Language.SWEDISH,
            'swe': Language.SWEDISH,
        }
        object.__setattr__(self, '_mappings', mappings)

    def clean(self, code: str, **params) -> Optional[Language]:
        """Resolve a language name or code, None when unsupported."""
        return self._mappings.get(code.lower().strip())

    def validate(self, code: str) -> bool:
        return bool(code) and code.lower().strip() in self._mappings
