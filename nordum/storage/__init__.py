"""Storage layer for source loading and artifact export.

Barrel export for cleaners, loaders, and exporters.
"""

from .cleaners import (
    ComparisonNormalizer,
    SourceWordCleaner,
    LanguageNameCleaner,
    normalize,
)
from .loaders import CSVSourceLoader, load_concept_table
from .exporters import (
    LexiconStatistics,
    build_wordlist,
    compute_statistics,
    export_all,
    export_json,
    export_statistics,
    export_wordlist,
)

__all__ = [
    # Cleaners
    "ComparisonNormalizer",
    "SourceWordCleaner",
    "LanguageNameCleaner",
    "normalize",
    # Loaders
    "CSVSourceLoader",
    "load_concept_table",
    # Exporters
    "LexiconStatistics",
    "build_wordlist",
    "compute_statistics",
    "export_all",
    "export_json",
    "export_statistics",
    "export_wordlist",
]
