"""Lexicon build runner.

Loads the source CSVs, assembles the lexicon and writes the build artifacts.
Paths come from settings (NORDUM_SOURCE_DIR, NORDUM_BUILD_DIR).

Usage:
    python -m nordum.build
"""

import uuid
from typing import Optional

import structlog

from nordum.config import Settings, get_settings
from nordum.core.types import Lexicon
from nordum.observ import get_logger, timer
from nordum.services.lexicon import LexiconAssembler
from nordum.storage.exporters import export_all
from nordum.storage.loaders import load_concept_table

logger = get_logger(__name__)


def build(settings: Optional[Settings] = None) -> Lexicon:
    """Run one full build and return the assembled lexicon."""
    settings = settings or get_settings()
    structlog.contextvars.bind_contextvars(build_id=uuid.uuid4().hex[:12])

    try:
        with timer(logger, "load_sources", source_dir=str(settings.source_dir)):
            concepts = load_concept_table(settings.source_dir)

        with timer(logger, "assemble_lexicon", concepts=len(concepts)):
            lexicon = LexiconAssembler(settings=settings).assemble(concepts)

        with timer(logger, "export_artifacts", build_dir=str(settings.build_dir)):
            export_all(lexicon, settings.build_dir)

        logger.info(
            "build_completed",
            entries=len(lexicon),
            alternatives=lexicon.report.alternative_entries,
            skipped=lexicon.report.concepts_skipped
        )
        return lexicon
    finally:
        structlog.contextvars.clear_contextvars()


if __name__ == "__main__":
    build()
