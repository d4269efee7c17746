"""Nordum - pan-Scandinavian lexicon builder.

Merges Norwegian, Danish and Swedish dictionary entries into a single
normalized Nordum lexicon with paradigms and alternative spellings.
"""

__version__ = "0.1.0"

# Observability exports for convenience
from nordum.observ import get_logger, timer, timed
from nordum.errors import (
    NordumError,
    ErrorCode,
    MissingCandidateError,
    MalformedInputError,
    UnknownPartOfSpeechError,
    InvalidLanguageError,
    ResourceNotFoundError,
    SourceFormatError,
    ExportError,
)

__all__ = [
    # Version
    "__version__",
    # Logging
    "get_logger",
    "timer",
    "timed",
    # Errors
    "NordumError",
    "ErrorCode",
    "MissingCandidateError",
    "MalformedInputError",
    "UnknownPartOfSpeechError",
    "InvalidLanguageError",
    "ResourceNotFoundError",
    "SourceFormatError",
    "ExportError",
]
