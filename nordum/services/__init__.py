"""Service layer implementations.

Barrel export for the lexicon building services.
"""

from .cognate import CognateService, cognate_score
from .orthography import OrthographicRule, ORTHOGRAPHIC_RULES, apply_rules
from .selection import CandidateSelector, select, selection_rationale
from .transform import WordTransformer, transform
from .inflection import InflectionGenerator, inflect
from .alternatives import alternatives
from .lexicon import LexiconAssembler, assemble

__all__ = [
    "CognateService",
    "cognate_score",
    "OrthographicRule",
    "ORTHOGRAPHIC_RULES",
    "apply_rules",
    "CandidateSelector",
    "select",
    "selection_rationale",
    "WordTransformer",
    "transform",
    "InflectionGenerator",
    "inflect",
    "alternatives",
    "LexiconAssembler",
    "assemble",
]
