"""Orthographic rule table.

The table is an explicit ordered tuple: later rules see the output of earlier
ones, so reordering it changes results.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Iterable, Optional


class RuleScope(str, Enum):
    """Where in the word a rule may match."""
    START = "start"
    END = "end"
    ANYWHERE = "anywhere"


class RuleGroup(str, Enum):
    """Linguistic family of a rule."""
    VOWEL = "vowel"
    SOUND_PATTERN = "sound_pattern"
    SILENT_LETTER = "silent_letter"
    CONSONANT = "consonant"
    CLUSTER = "cluster"
    QUESTION = "question"
    ENDING = "ending"


@dataclass(frozen=True)
class OrthographicRule:
    """Literal pattern rewrite with a scope."""

    pattern: str
    replacement: str
    group: RuleGroup
    scope: RuleScope = RuleScope.ANYWHERE

    def __post_init__(self):
        literal = re.escape(self.pattern)
        if self.scope is RuleScope.START:
            literal = "^" + literal
        elif self.scope is RuleScope.END:
            literal = literal + "$"
        object.__setattr__(self, '_regex', re.compile(literal))

    def apply(self, word: str) -> str:
        count = 0 if self.scope is RuleScope.ANYWHERE else 1
        return self._regex.sub(self.replacement, word, count=count)

    def matches(self, word: str) -> bool:
        return self._regex.search(word) is not None

    def __str__(self) -> str:
        prefix = "^" if self.scope is RuleScope.START else ""
        suffix = "$" if self.scope is RuleScope.END else ""
        return f"{prefix}{self.pattern}{suffix}→{self.replacement}"


ORTHOGRAPHIC_RULES: tuple[OrthographicRule, ...] = (
    # Primary vowel system is Norwegian/Danish æ/ø
    OrthographicRule("æ", "æ", RuleGroup.VOWEL),
    OrthographicRule("ø", "ø", RuleGroup.VOWEL),
    OrthographicRule("ä", "æ", RuleGroup.VOWEL),
    OrthographicRule("ö", "ø", RuleGroup.VOWEL),
    OrthographicRule("ej", "ei", RuleGroup.SOUND_PATTERN),
    OrthographicRule("øj", "øy", RuleGroup.SOUND_PATTERN),
    OrthographicRule("aj", "ai", RuleGroup.SOUND_PATTERN),
    OrthographicRule("dt", "t", RuleGroup.SILENT_LETTER, RuleScope.END),
    OrthographicRule("ld", "l", RuleGroup.SILENT_LETTER, RuleScope.END),
    OrthographicRule("ck", "k", RuleGroup.CONSONANT),
    OrthographicRule("ph", "f", RuleGroup.CONSONANT),
    OrthographicRule("kj", "kj", RuleGroup.CLUSTER),
    OrthographicRule("skj", "skj", RuleGroup.CLUSTER),
    OrthographicRule("hv", "v", RuleGroup.QUESTION, RuleScope.START),
    OrthographicRule("tion", "tion", RuleGroup.ENDING, RuleScope.END),
    OrthographicRule("sion", "sion", RuleGroup.ENDING, RuleScope.END),
)


def rules_in(*groups: RuleGroup) -> tuple[OrthographicRule, ...]:
    """Table rules of the given groups, in table order."""
    return tuple(r for r in ORTHOGRAPHIC_RULES if r.group in groups)


def rules_excluding(*groups: RuleGroup) -> tuple[OrthographicRule, ...]:
    """Table rules outside the given groups, in table order."""
    return tuple(r for r in ORTHOGRAPHIC_RULES if r.group not in groups)


def apply_rules(
    word: str,
    rules: Optional[Iterable[OrthographicRule]] = None
) -> str:
    """Fold rules over a word in order."""
    if rules is None:
        rules = ORTHOGRAPHIC_RULES
    return reduce(lambda current, rule: rule.apply(current), rules, word)


def rule_summary() -> dict[str, list[str]]:
    """Rule table grouped for build metadata."""
    summary: dict[str, list[str]] = {}
    for rule in ORTHOGRAPHIC_RULES:
        if rule.pattern == rule.replacement:
            continue
        summary.setdefault(rule.group.value, []).append(str(rule))
    return summary
