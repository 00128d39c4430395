"""
Tests for the tokenizer and syllable estimator.
"""

from text_analyzer.text import words, sentences, count_syllables, count_text_syllables


class TestWords:
    """Word tokenization."""

    def test_lowercases_and_splits_on_punctuation(self):
        assert words("Hello, World! It's fine.") == ["hello", "world", "it", "s", "fine"]

    def test_keeps_digits_and_underscores(self):
        assert words("version_2 has 10 fixes") == ["version_2", "has", "10", "fixes"]

    def test_non_ascii_letters_break_words(self):
        assert words("café") == ["caf"]

    def test_empty_and_punctuation_only(self):
        assert words("") == []
        assert words("... !!! ???") == []


class TestSentences:
    """Sentence splitting."""

    def test_splits_on_terminator_runs(self):
        assert sentences("Hi there. How are you?! Great.") == ["Hi there.", "How are you?!", "Great."]

    def test_trailing_fragment_is_dropped(self):
        assert sentences("First one. Second one! and a tail") == ["First one.", "Second one!"]

    def test_no_terminator_returns_whole_text(self):
        assert sentences("  no terminator here  ") == ["no terminator here"]

    def test_leading_terminators_are_skipped(self):
        assert sentences("!!Hi. ") == ["Hi."]

    def test_terminators_only_fall_back_to_text(self):
        assert sentences("...") == ["..."]

    def test_internal_spacing_is_preserved(self):
        assert sentences("One  two.   Three   four!") == ["One  two.", "Three   four!"]


class TestSyllables:
    """Heuristic syllable counting."""

    def test_silent_e_word(self):
        assert count_syllables("the") == 1
        assert count_syllables("love") == 1

    def test_beautiful(self):
        assert count_syllables("beautiful") == 4

    def test_ed_suffix_is_stripped(self):
        assert count_syllables("liked") == 1
        assert count_syllables("ed") == 1

    def test_l_before_es_is_not_stripped(self):
        assert count_syllables("tables") == 2

    def test_leading_y_is_dropped(self):
        assert count_syllables("yellow") == 2

    def test_vowel_runs_count_in_pairs(self):
        assert count_syllables("queue") == 2

    def test_every_word_has_at_least_one(self):
        assert count_syllables("rhythm") == 1
        assert count_syllables("txt") == 1

    def test_text_total(self):
        assert count_text_syllables("The beautiful tables.") == 7
        assert count_text_syllables("") == 0
