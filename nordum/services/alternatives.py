"""Alternative spelling generator.

Derives secondary spellings for a canonical form: question-word pronunciation
variants, sound-pattern variants and vowel-system variants. Checks are
independent, so one word can yield several alternatives. Collisions with the
lexicon are resolved by the assembler, not here.
"""

from nordum.core.tables import QUESTION_ALTERNATIVES
from nordum.core.types import Alternative


# Each pair is checked in both directions
SOUND_PATTERN_PAIRS: tuple[tuple[str, str], ...] = (
    ("ej", "ei"),
    ("øj", "øy"),
    ("aj", "ai"),
)

VOWEL_VARIANTS: tuple[tuple[dict[str, str], str], ...] = (
    ({"æ": "ä", "ø": "ö"}, "Swedish/German vowel variant (ä/ö)"),
    ({"ä": "æ", "ö": "ø"}, "Norwegian/Danish vowel variant (æ/ø)"),
)


def _question_variants(word: str) -> list[Alternative]:
    return [
        Alternative(spelling=spelling, rationale=rationale)
        for spelling, rationale in QUESTION_ALTERNATIVES.get(word, ())
    ]


def _sound_pattern_variants(word: str) -> list[Alternative]:
    variants = []
    for left, right in SOUND_PATTERN_PAIRS:
        for source, target in ((left, right), (right, left)):
            if source in word:
                variants.append(Alternative(
                    spelling=word.replace(source, target),
                    rationale=f"Sound pattern variant ({source}→{target})"
                ))
    return variants


def _vowel_variants(word: str) -> list[Alternative]:
    variants = []
    for mapping, rationale in VOWEL_VARIANTS:
        spelling = word
        for source, target in mapping.items():
            spelling = spelling.replace(source, target)
        if spelling != word:
            variants.append(Alternative(spelling=spelling, rationale=rationale))
    return variants


def alternatives(canonical_form: str, concept: str) -> list[Alternative]:
    """All alternative spellings of a canonical form, in check order."""
    return (
        _question_variants(canonical_form)
        + _sound_pattern_variants(canonical_form)
        + _vowel_variants(canonical_form)
    )
