"""
Unit tests for distractor generation and choice drills.
"""

import pytest
from memoria.content.randomness import SeededRandom
from memoria.content.verse import Verse
from memoria.drills.distractors import ChoiceField, build_choice_drill, pick_distractors


class TestPickDistractors:
    """Test sampling of wrong options."""

    def test_returns_k_distractors(self, sample_pool, juan_3_16):
        distractors = pick_distractors(sample_pool, juan_3_16, 2, SeededRandom(7))

        assert len(distractors) == 2
        assert juan_3_16 not in distractors

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_never_returns_excluded_reference(self, sample_pool, size):
        """The excluded verse never comes back, whatever the seed."""
        pool = sample_pool[:size]
        for exclude in pool:
            for seed in range(10):
                distractors = pick_distractors(pool, exclude, 2, SeededRandom(seed))
                assert exclude.reference not in {d.reference for d in distractors}

    def test_same_text_other_reference_excluded(self, juan_3_16, salmo_23):
        """A distractor must not repeat the correct text under another citation."""
        twin = Verse(reference="Juan 3:16 (dup)", text=juan_3_16.text)
        distractors = pick_distractors([juan_3_16, twin, salmo_23], juan_3_16, 2, SeededRandom(0))

        assert distractors == [salmo_23]

    def test_short_pool_returns_what_exists(self, juan_3_16, salmo_23):
        """A pool smaller than k is not an error."""
        assert pick_distractors([juan_3_16, salmo_23], juan_3_16, 2, SeededRandom(0)) == [salmo_23]

    def test_pool_of_only_the_verse(self, juan_3_16):
        assert pick_distractors([juan_3_16], juan_3_16, 2, SeededRandom(0)) == []

    def test_duplicate_references_counted_once(self, juan_3_16, salmo_23):
        distractors = pick_distractors([salmo_23, salmo_23, juan_3_16], juan_3_16, 2, SeededRandom(0))
        assert distractors == [salmo_23]


class TestChoiceDrill:
    """Test option building for multiple choice and reference matching."""

    def test_correct_text_appears_once(self, sample_pool, juan_3_16):
        for seed in range(10):
            drill = build_choice_drill(juan_3_16, sample_pool, ChoiceField.TEXT, 2, SeededRandom(seed))

            assert len(drill.options) == 3
            assert drill.options.count(juan_3_16.text) == 1
            assert len(set(drill.options)) == 3

    def test_reference_matching_options(self, sample_pool, salmo_23):
        drill = build_choice_drill(salmo_23, sample_pool, "reference", 2, SeededRandom(1))

        assert drill.answer == "Salmos 23:1"
        assert salmo_23.reference in drill.options
        assert all(option in {v.reference for v in sample_pool} for option in drill.options)

    def test_check_by_text_and_index(self, sample_pool, juan_3_16):
        drill = build_choice_drill(juan_3_16, sample_pool, ChoiceField.TEXT, 2, SeededRandom(4))
        wrong = (drill.correct_index + 1) % len(drill.options)

        assert drill.check(juan_3_16.text) is True
        assert drill.check(drill.correct_index) is True
        assert drill.check(wrong) is False
        assert drill.check(99) is False

    def test_unplayable_without_distractors(self, juan_3_16):
        """The host should skip a drill with a single option."""
        drill = build_choice_drill(juan_3_16, [juan_3_16], ChoiceField.TEXT, 2, SeededRandom(0))

        assert drill.options == (juan_3_16.text,)
        assert drill.is_playable is False
