"""Source dictionary loaders.

Reads the per-language CSV exports and groups their rows into the concept
table consumed by the assembler.
"""

import csv
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from nordum.core.types import Candidate, ConceptEntry, Language
from nordum.errors import (
    InvalidLanguageError,
    ResourceNotFoundError,
    SourceFormatError,
)
from nordum.observ import get_logger
from nordum.storage.cleaners import LanguageNameCleaner, SourceWordCleaner

logger = get_logger(__name__)


REQUIRED_COLUMNS = frozenset({"word", "english"})

DEFAULT_LANGUAGES: tuple[Language, ...] = (
    Language.NORWEGIAN,
    Language.DANISH,
    Language.SWEDISH,
)


@dataclass
class SourceRow:
    """One CSV row with its location."""
    language: Language
    concept: str
    candidate: Candidate
    file_path: str
    line_number: int


class CSVSourceLoader:
    """Load one language's source CSV."""

    def __init__(self):
        self._word_cleaner = SourceWordCleaner()

    def load(self, csv_path: Path, language: Language) -> Iterator[SourceRow]:
        try:
            with open(csv_path, 'r', encoding='utf-8', newline='') as f:
                reader = csv.DictReader(f)
                missing = REQUIRED_COLUMNS - set(reader.fieldnames or ())
                if missing:
                    raise SourceFormatError(
                        str(csv_path),
                        f"missing columns: {', '.join(sorted(missing))}"
                    )

                for line_num, row in enumerate(reader, start=2):
                    concept = (row.get('english') or '').strip().lower()
                    if not concept:
                        continue

                    word = row.get('word') or ''
                    yield SourceRow(
                        language=language,
                        concept=concept,
                        candidate=Candidate(
                            word=self._word_cleaner.clean(word) if word else None,
                            pos=row.get('pos'),
                            gender=row.get('gender'),
                            frequency=row.get('frequency'),
                        ),
                        file_path=str(csv_path),
                        line_number=line_num
                    )
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise SourceFormatError(str(csv_path), str(e)) from e


def resolve_language(name: str) -> Language:
    language = LanguageNameCleaner().clean(name)
    if language is None:
        raise InvalidLanguageError(name)
    return language


def load_concept_table(
    source_dir: Path,
    languages: Optional[Sequence[str]] = None
) -> dict[str, ConceptEntry]:
    """Group per-language rows by English gloss, in first-seen order.

    A later row for the same concept and language replaces the earlier one.
    A language without a source file contributes nothing; a missing source
    directory is an error.
    """
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        raise ResourceNotFoundError("source directory", str(source_dir))

    selected = (
        tuple(resolve_language(name) for name in languages)
        if languages is not None
        else DEFAULT_LANGUAGES
    )
    loader = CSVSourceLoader()
    grouped: dict[str, dict[Language, Candidate]] = {}

    for language in selected:
        csv_path = source_dir / f"{language.value}.csv"
        if not csv_path.exists():
            logger.warning("source_missing", language=language.value, path=str(csv_path))
            continue

        rows = 0
        for row in loader.load(csv_path, language):
            grouped.setdefault(row.concept, {})[row.language] = row.candidate
            rows += 1
        logger.info("source_loaded", language=language.value, rows=rows, path=str(csv_path))

    return {
        concept: ConceptEntry(concept=concept, candidates=candidates)
        for concept, candidates in grouped.items()
    }
