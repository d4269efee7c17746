"""Lexicon exporters.

Serializes an assembled lexicon into the build artifacts: the full JSON
dictionary, a flat spell-check wordlist and aggregate statistics.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import orjson
from pydantic import BaseModel, ConfigDict

import nordum
from nordum.core.types import Language, Lexicon
from nordum.errors import ExportError
from nordum.observ import get_logger
from nordum.services.orthography import rule_summary

logger = get_logger(__name__)


DICTIONARY_FILE = "dictionary.json"
WORDLIST_FILE = "wordlist.txt"
STATISTICS_FILE = "statistics.json"

MORPHOLOGY_SUMMARY = ["verbs:-er", "plurals:-ar", "comparative:-ere"]
ALTERNATIVES_SUMMARY = ["æ/ø↔ä/ö", "question-variants", "pronunciation-forms"]


class LexiconStatistics(BaseModel):
    """Aggregate figures for a built lexicon."""
    model_config = ConfigDict(frozen=True)

    total_entries: int
    alternative_spellings: int
    by_part_of_speech: dict[str, int]
    coverage_by_language: dict[str, int]
    average_cognate_score: float


def build_metadata(lexicon: Lexicon, generated: Optional[datetime] = None) -> dict:
    generated = generated or datetime.now(timezone.utc)
    return {
        "version": nordum.__version__,
        "generated": generated.isoformat(),
        "entry_count": len(lexicon),
        "languages": ["nordum", "english"] + [lang.value for lang in Language],
        "rules": {
            "orthography": rule_summary(),
            "morphology": MORPHOLOGY_SUMMARY,
            "alternatives": ALTERNATIVES_SUMMARY,
        },
    }


def build_document(lexicon: Lexicon, generated: Optional[datetime] = None) -> dict:
    """JSON document: metadata block plus entries keyed in export order."""
    return {
        "metadata": build_metadata(lexicon, generated),
        "entries": {
            entry.canonical_form: entry.model_dump(mode="json")
            for entry in lexicon.ordered()
        },
    }


def build_wordlist(lexicon: Lexicon) -> list[str]:
    """Every canonical form and inflected surface form, first occurrence wins."""
    seen: dict[str, None] = {}
    for entry in lexicon.ordered():
        seen.setdefault(entry.canonical_form, None)
        for form in entry.inflections.surface_forms():
            seen.setdefault(form, None)
    return list(seen)


def compute_statistics(lexicon: Lexicon) -> LexiconStatistics:
    entries = lexicon.ordered()

    by_pos: dict[str, int] = {}
    coverage = {lang.value: 0 for lang in Language}
    for entry in entries:
        by_pos[entry.pos] = by_pos.get(entry.pos, 0) + 1
        if entry.is_alternative:
            continue
        for language in entry.sources:
            coverage[Language(language).value] += 1

    average = (
        sum(e.cognate_score for e in entries) / len(entries)
        if entries else 0.0
    )

    return LexiconStatistics(
        total_entries=len(entries),
        alternative_spellings=sum(1 for e in entries if e.is_alternative),
        by_part_of_speech=by_pos,
        coverage_by_language=coverage,
        average_cognate_score=average,
    )


def _write(path: Path, payload: bytes, artifact: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as e:
        raise ExportError(artifact, str(e)) from e
    logger.info("artifact_written", artifact=artifact, path=str(path), bytes=len(payload))
    return path


def export_json(lexicon: Lexicon, path: Path) -> Path:
    payload = orjson.dumps(build_document(lexicon), option=orjson.OPT_INDENT_2)
    return _write(Path(path), payload, "dictionary")


def export_wordlist(lexicon: Lexicon, path: Path) -> Path:
    payload = "\n".join(build_wordlist(lexicon)).encode("utf-8")
    return _write(Path(path), payload, "wordlist")


def export_statistics(lexicon: Lexicon, path: Path) -> Path:
    stats = compute_statistics(lexicon)
    payload = orjson.dumps(stats.model_dump(), option=orjson.OPT_INDENT_2)
    return _write(Path(path), payload, "statistics")


def export_all(lexicon: Lexicon, build_dir: Path) -> dict[str, Path]:
    """Write all three artifacts into a build directory."""
    build_dir = Path(build_dir)
    return {
        "dictionary": export_json(lexicon, build_dir / DICTIONARY_FILE),
        "wordlist": export_wordlist(lexicon, build_dir / WORDLIST_FILE),
        "statistics": export_statistics(lexicon, build_dir / STATISTICS_FILE),
    }
