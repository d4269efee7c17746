"""Word transformation pipeline.

Derives the Nordum spelling of a selected source word. Stages run in a fixed
order; a stage either hands its output to the next stage or finishes the
transformation.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from nordum.core.tables import (
    QUESTION_WORD_FORMS,
    QUESTION_WORDS,
    is_loanword,
    numeral_for,
)
from nordum.core.types import PartOfSpeech
from nordum.observ import get_logger
from nordum.services.orthography import (
    RuleGroup,
    apply_rules,
    rules_excluding,
    rules_in,
)

logger = get_logger(__name__)


SOUND_PATTERN_RULES = rules_in(RuleGroup.SOUND_PATTERN)
RESIDUAL_RULES = rules_excluding(RuleGroup.SOUND_PATTERN)

# Question-word targets the residual rules would respell (varför)
PROTECTED_QUESTION_FORMS: frozenset[str] = frozenset(
    form for form in QUESTION_WORD_FORMS
    if apply_rules(form, RESIDUAL_RULES) != form
)


@dataclass(frozen=True)
class TransformContext:
    source_language: str
    concept: str
    pos: Optional[str]


@dataclass(frozen=True)
class StageOutcome:
    word: str
    final: bool = False

    @classmethod
    def done(cls, word: str) -> "StageOutcome":
        return cls(word, final=True)

    @classmethod
    def proceed(cls, word: str) -> "StageOutcome":
        return cls(word, final=False)


Stage = Callable[[str, TransformContext], StageOutcome]


def loanword_passthrough(word: str, context: TransformContext) -> StageOutcome:
    if is_loanword(context.concept):
        return StageOutcome.done(context.concept.lower())
    return StageOutcome.proceed(word)


def numeral_passthrough(word: str, context: TransformContext) -> StageOutcome:
    numeral = numeral_for(context.concept)
    if numeral is not None:
        return StageOutcome.done(numeral)
    return StageOutcome.proceed(word)


def question_words(word: str, context: TransformContext) -> StageOutcome:
    """hv- question words take the Swedish v- pattern."""
    if word in PROTECTED_QUESTION_FORMS:
        return StageOutcome.done(word)
    if not word.startswith("hv"):
        return StageOutcome.proceed(word)
    if word in QUESTION_WORDS:
        return StageOutcome.done(QUESTION_WORDS[word])
    return StageOutcome.proceed("v" + word[2:])


def morphological_stem(word: str, context: TransformContext) -> StageOutcome:
    """Verbs take -er in the present, noun plurals take -ar."""
    if context.pos == PartOfSpeech.VERB:
        if word == "arbetar":
            return StageOutcome.proceed("arbeider")
        if word.endswith("ar"):
            return StageOutcome.proceed(word[:-2] + "er")
    elif context.pos == PartOfSpeech.NOUN:
        if word.endswith("er"):
            return StageOutcome.proceed(word[:-2] + "ar")
    return StageOutcome.proceed(word)


def sound_patterns(word: str, context: TransformContext) -> StageOutcome:
    return StageOutcome.proceed(apply_rules(word, SOUND_PATTERN_RULES))


def residual_orthography(word: str, context: TransformContext) -> StageOutcome:
    return StageOutcome.done(apply_rules(word, RESIDUAL_RULES))


TRANSFORM_STAGES: tuple[tuple[str, Stage], ...] = (
    ("loanword", loanword_passthrough),
    ("numeral", numeral_passthrough),
    ("question_word", question_words),
    ("morphology", morphological_stem),
    ("sound_pattern", sound_patterns),
    ("orthography", residual_orthography),
)


class WordTransformer:
    """Applies the transformation stages to one word."""

    def __init__(self, stages: Sequence[tuple[str, Stage]] = TRANSFORM_STAGES):
        self._stages = tuple(stages)

    def transform(
        self,
        word: str,
        source_language: str,
        concept: str,
        pos: Optional[str]
    ) -> str:
        """Derive the canonical Nordum spelling of a source word."""
        context = TransformContext(
            source_language=source_language,
            concept=concept,
            pos=pos
        )
        current = word.lower()

        for name, stage in self._stages:
            outcome = stage(current, context)
            current = outcome.word
            if outcome.final:
                logger.debug(
                    "word_transformed",
                    source=word,
                    result=current,
                    concept=concept,
                    final_stage=name
                )
                break

        return current


_default_transformer = WordTransformer()


def transform(
    word: str,
    source_language: str,
    concept: str,
    pos: Optional[str]
) -> str:
    return _default_transformer.transform(word, source_language, concept, pos)
