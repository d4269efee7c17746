"""Core domain models and types.

Barrel export for clean imports across the application.
"""

from .types import (
    Language,
    PartOfSpeech,
    Gender,
    Candidate,
    ConceptEntry,
    Selection,
    Alternative,
    NounForms,
    NounParadigm,
    AdjectivePositive,
    AdjectiveParadigm,
    VerbParadigm,
    EmptyParadigm,
    Paradigm,
    LexicalEntry,
    BuildReport,
    Lexicon,
)

__all__ = [
    "Language",
    "PartOfSpeech",
    "Gender",
    "Candidate",
    "ConceptEntry",
    "Selection",
    "Alternative",
    "NounForms",
    "NounParadigm",
    "AdjectivePositive",
    "AdjectiveParadigm",
    "VerbParadigm",
    "EmptyParadigm",
    "Paradigm",
    "LexicalEntry",
    "BuildReport",
    "Lexicon",
]
