"""Service contracts and interfaces.

Defines protocols for the pluggable pieces of the build pipeline.
"""

from collections.abc import Mapping, Sequence
from typing import Optional, Protocol, TypeVar
from .types import Candidate, Gender, Language, Selection


T = TypeVar('T')


class ICleaner(Protocol):
    """Contract for data cleaning operations.

    Cleaners are pure, composable transformation functions.
    """

    @property
    def name(self) -> str:
        """Cleaner identifier."""
        ...

    @property
    def version(self) -> str:
        """Cleaner version."""
        ...

    def clean(self, value: T, **params) -> T:
        """Apply cleaning transformation.

        Must be idempotent and side-effect free.
        """
        ...

    def validate(self, value: T) -> bool:
        """Check if value passes validation."""
        ...


class ICognateScorer(Protocol):
    """Contract for cross-language similarity scoring."""

    def cognate_score(self, words: Sequence[str]) -> float:
        """Mean pairwise similarity of a candidate set."""
        ...


class ISelectionRule(Protocol):
    """One step of the canonical-source priority cascade.

    Returns a selection to stop the cascade, None to defer to the next rule.
    """

    @property
    def name(self) -> str:
        ...

    def __call__(
        self,
        candidates: Mapping[Language, Candidate],
        concept: str
    ) -> Optional[Selection]:
        ...


class IParadigmGenerator(Protocol):
    """Builds the inflectional paradigm of one part of speech."""

    def __call__(self, stem: str, gender: Optional[Gender]):
        ...
