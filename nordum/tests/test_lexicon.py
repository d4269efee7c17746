"""Tests for lexicon assembly.

Covers the end-to-end scenarios plus the structural invariants of the
assembled lexicon: non-collision, first-writer-wins and export order.
"""

import pytest
from conftest import BOY, WHAT, WHERE, WORK, concept, table
from nordum.config import Settings
from nordum.core.types import (
    Candidate,
    EmptyParadigm,
    Gender,
    Language,
    NounParadigm,
)
from nordum.services.lexicon import (
    LexiconAssembler,
    assemble,
    round_half_up,
    select_gender,
    select_pos,
    weighted_frequency,
    weighted_vote,
)
from nordum.services.transform import transform


class TestScenarios:
    """Worked examples."""

    def test_verb_agreement(self, sample_lexicon):
        entry = sample_lexicon["arbeider"]
        assert entry.concept == "work"
        assert entry.pos == "verb"
        assert entry.selection_rationale == "Bokmål/Danish agreement (preferred foundation)"
        assert entry.inflections.present == "arbeider"
        assert entry.source_language_count == 3
        assert entry.frequency == 1983

    def test_verb_alternative(self, sample_lexicon):
        alternative = sample_lexicon["arbejder"]
        assert alternative.is_alternative_of == "arbeider"
        assert alternative.alternative_rationale == "Sound pattern variant (ei→ej)"
        assert alternative.frequency == 1388
        assert alternative.inflections.infinitive == "arbejda"

    def test_numeral(self, sample_lexicon):
        entry = sample_lexicon["femti"]
        assert entry.concept == "fifty"
        assert entry.selection_rationale == "Norwegian number system (most regular)"
        assert entry.inflections == EmptyParadigm()
        assert entry.frequency == 1000

    def test_loanword(self, sample_lexicon):
        entry = sample_lexicon["computer"]
        assert entry.selection_rationale == "English loanword preserved (Danish practice)"
        assert entry.source_language_count == 2
        assert "dator" not in sample_lexicon

    def test_vowel_alternative(self, sample_lexicon):
        entry = sample_lexicon["brød"]
        assert entry.gender == Gender.NEUTER
        assert entry.inflections.singular.definite == "brødet"

        alternative = sample_lexicon["bröd"]
        assert alternative.is_alternative_of == "brød"
        assert alternative.alternative_rationale == "Swedish/German vowel variant (ä/ö)"
        assert alternative.inflections.plural.indefinite == "brödar"

    def test_question_words(self, sample_lexicon):
        assert sample_lexicon["var"].concept == "where"
        assert sample_lexicon["vor"].is_alternative_of == "var"
        assert sample_lexicon["vad"].concept == "what"
        assert sample_lexicon["va"].is_alternative_of == "vad"
        assert sample_lexicon["var"].selection_rationale.startswith("Question word")

    def test_sound_patterns(self, sample_lexicon):
        assert sample_lexicon["nei"].is_alternative is False
        assert sample_lexicon["nej"].is_alternative_of == "nei"
        assert sample_lexicon["høy"].selection_rationale == "Danish form (preferred over Swedish)"
        assert sample_lexicon["høj"].is_alternative_of == "høy"

    def test_noun_plural(self, sample_lexicon):
        entry = sample_lexicon["jentar"]
        assert entry.gender == Gender.COMMON
        assert entry.inflections.plural.indefinite == "jentarar"


class TestInvariants:
    """Structural properties of any assembled lexicon."""

    def test_cognate_score_bounds(self, sample_lexicon):
        for entry in sample_lexicon.values():
            assert 0.5 <= entry.cognate_score <= 1.0

    def test_keys_match_forms(self, sample_lexicon):
        for key, entry in sample_lexicon.items():
            assert key == entry.canonical_form

    def test_noun_plurals_end_in_ar(self, sample_lexicon):
        for entry in sample_lexicon.values():
            if isinstance(entry.inflections, NounParadigm):
                assert entry.inflections.plural.indefinite.endswith("ar")

    def test_canonical_forms_are_stable(self, sample_lexicon):
        for entry in sample_lexicon.canonical():
            again = transform(entry.canonical_form, "norwegian", entry.concept, entry.pos)
            assert again == entry.canonical_form

    def test_alternatives_point_to_canonical(self, sample_lexicon):
        for entry in sample_lexicon.alternatives():
            parent = sample_lexicon[entry.is_alternative_of]
            assert parent.is_alternative is False
            assert parent.concept == entry.concept

    def test_read_only(self, sample_lexicon):
        with pytest.raises(TypeError):
            sample_lexicon["hus"] = sample_lexicon["brød"]

    def test_export_order(self, sample_lexicon):
        ordered = sample_lexicon.ordered()
        flags = [entry.is_alternative for entry in ordered]
        assert flags == sorted(flags)

        canonical = [e.ranking for e in ordered if not e.is_alternative]
        assert canonical == sorted(canonical, reverse=True)

    def test_deterministic(self, assembler, sample_table):
        first = assembler.assemble(sample_table)
        second = assembler.assemble(sample_table)
        assert list(first) == list(second)
        assert [e.model_dump() for e in first.values()] == [e.model_dump() for e in second.values()]


class TestCollisions:
    """First writer wins, canonical entries before alternatives."""

    def test_canonical_collision(self, assembler):
        lexicon = assembler.assemble(table(
            concept("small", norwegian={"word": "liten", "pos": "adjective"}),
            concept("little", swedish={"word": "liten", "pos": "adjective"}),
        ))
        assert lexicon["liten"].concept == "small"
        assert lexicon.report.canonical_entries == 1
        assert lexicon.report.canonical_collisions == 1

    def test_alternative_never_displaces_canonical(self, assembler):
        lexicon = assembler.assemble(table(
            WHAT,
            concept("wade", norwegian={"word": "va", "pos": "verb"}),
        ))
        assert lexicon["va"].concept == "wade"
        assert lexicon["va"].is_alternative is False
        assert lexicon.report.alternative_collisions == 1

    def test_alternative_collision_between_alternatives(self, assembler):
        lexicon = assembler.assemble(table(
            concept("when", danish={"word": "hvornår", "pos": "adverb"}),
            concept("near", norwegian={"word": "nær", "pos": "adverb"}),
        ))
        assert lexicon["när"].is_alternative_of == "ven"
        assert lexicon["när"].concept == "when"
        assert lexicon.report.alternative_entries == 3
        assert lexicon.report.alternative_collisions == 1

    def test_question_form_verb_keeps_own_key(self, assembler):
        lexicon = assembler.assemble(table(
            WHERE,
            concept("was", swedish={"word": "var", "pos": "verb"}),
        ))
        assert lexicon["var"].concept == "where"
        assert lexicon["ver"].concept == "was"
        assert lexicon.report.canonical_collisions == 0


class TestDegradedInput:
    """Bad records are counted and skipped, never raised."""

    def test_concept_without_candidates(self, assembler):
        lexicon = assembler.assemble(table(concept("nothing"), BOY))
        assert len(lexicon.canonical()) == 1
        assert lexicon.report.concepts_seen == 2
        assert lexicon.report.concepts_skipped == 1

    def test_candidate_without_word(self, assembler):
        lexicon = assembler.assemble(table(concept(
            "boy",
            norwegian={"word": "  ", "pos": "noun"},
            danish={"word": "dreng", "pos": "noun"},
        )))
        entry = lexicon["dreng"]
        assert entry.source_language_count == 1
        assert list(entry.sources) == [Language.DANISH]
        assert entry.selection_rationale == "Danish form (preferred over Swedish)"
        assert lexicon.report.malformed_candidates == 1

    def test_all_words_missing(self, assembler):
        lexicon = assembler.assemble(table(concept("ghost", swedish={"pos": "noun"})))
        assert len(lexicon) == 0
        assert lexicon.report.concepts_skipped == 1
        assert lexicon.report.malformed_candidates == 1

    def test_unknown_pos(self, assembler):
        lexicon = assembler.assemble(table(
            concept("running", norwegian={"word": "løpende", "pos": "gerund"}),
        ))
        entry = lexicon["løpende"]
        assert entry.pos == "gerund"
        assert entry.inflections == EmptyParadigm()
        assert lexicon.report.unknown_pos == 1

    def test_missing_pos_defaults_to_noun(self, assembler):
        lexicon = assembler.assemble(table(concept("house", norwegian={"word": "hus"})))
        assert lexicon["hus"].pos == "noun"
        assert lexicon["hus"].gender == Gender.COMMON

    def test_cognate_score_ignores_empty_candidates(self, assembler):
        lexicon = assembler.assemble(table(concept(
            "bread",
            norwegian={"word": "brød"},
            danish={"word": "brød"},
            swedish={"pos": "noun"},
        )))
        assert lexicon["brød"].cognate_score == 1.0

    def test_single_candidate_gets_score_floor(self, assembler):
        lexicon = assembler.assemble(table(BOY))
        assert lexicon["dreng"].cognate_score == 0.5

    def test_empty_table(self, assembler):
        lexicon = assembler.assemble({})
        assert len(lexicon) == 0
        assert lexicon.report.concepts_seen == 0


class TestVotes:
    """Language-weighted votes for POS, gender and frequency."""

    def test_weighted_vote(self):
        votes = [(Language.NORWEGIAN, "verb"), (Language.DANISH, "noun"), (Language.SWEDISH, "noun")]
        assert weighted_vote(votes) == "noun"

    def test_vote_tie_keeps_first(self):
        assert weighted_vote([(Language.NORWEGIAN, "verb"), (Language.DANISH, "noun")]) == "verb"
        assert weighted_vote([(Language.DANISH, "noun"), (Language.NORWEGIAN, "verb")]) == "noun"

    def test_vote_ignores_missing(self):
        assert weighted_vote([(Language.NORWEGIAN, None)]) is None

    def test_select_pos(self):
        assert select_pos({}) == "noun"
        assert select_pos(WORK.candidates) == "verb"

    def test_select_gender(self):
        candidates = {
            Language.NORWEGIAN: Candidate(word="a", gender="n"),
            Language.DANISH: Candidate(word="b", gender="c"),
            Language.SWEDISH: Candidate(word="c", gender="ett"),
        }
        assert select_gender(candidates) == Gender.NEUTER
        assert select_gender({Language.DANISH: Candidate(word="b")}) == Gender.COMMON

    def test_weighted_frequency(self):
        assert weighted_frequency(WORK.candidates) == 1983
        assert weighted_frequency({}, default=1000) == 1000

    def test_zero_frequencies_ignored(self):
        candidates = {
            Language.NORWEGIAN: Candidate(word="a", frequency=0),
            Language.SWEDISH: Candidate(word="b", frequency=300),
        }
        assert weighted_frequency(candidates) == 300

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(1388.1) == 1388


class TestSettings:
    """Assembly honors configuration."""

    def test_alternative_frequency_factor(self):
        settings = Settings(_env_file=None, alternative_frequency_factor=0.5)
        lexicon = LexiconAssembler(settings=settings).assemble(table(WORK))
        assert lexicon["arbejder"].frequency == 992

    def test_cognate_floor(self):
        settings = Settings(_env_file=None, cognate_score_floor=0.0)
        lexicon = LexiconAssembler(settings=settings).assemble(table(BOY))
        assert lexicon["dreng"].cognate_score == 0.0

    def test_default_frequency(self):
        settings = Settings(_env_file=None, default_frequency=10)
        lexicon = LexiconAssembler(settings=settings).assemble(
            table(concept("house", norwegian={"word": "hus"}))
        )
        assert lexicon["hus"].frequency == 10

    def test_module_function(self):
        lexicon = assemble(table(BOY), settings=Settings(_env_file=None))
        assert "dreng" in lexicon
