"""Tests for the chirp content filter."""
import pytest

from backend.chirpy.services.moderation.content_filter import MASK, PROFANE_WORDS, clean_body


class TestCleanBody:
    """Test cases for clean_body."""

    def test_example_sentence(self):
        assert (
            clean_body("This is a kerfuffle opinion I need to share with the world")
            == "this is a **** opinion i need to share with the world"
        )

    @pytest.mark.parametrize("word", ["Kerfuffle", "SHARBERT", "fOrNaX"])
    def test_masks_any_case(self, word):
        assert clean_body(f"I hear {word} is great") == "i hear **** is great"

    def test_masks_every_word_and_occurrence(self):
        text = "Sharbert! kerfuffle, Fornax and kerfuffle again"
        assert clean_body(text) == "****! ****, **** and **** again"

    def test_clean_text_is_only_lowercased(self):
        assert clean_body("Hello World") == "hello world"

    def test_matches_inside_words(self):
        assert clean_body("Kerfuffles everywhere") == "****s everywhere"

    def test_result_is_lowercase(self):
        result = clean_body("LOUD Sharbert NOISES")
        assert result == result.lower()
        assert result == "loud **** noises"

    def test_empty_body(self):
        assert clean_body("") == ""

    def test_custom_words(self):
        assert clean_body("Drat and Darn", words=("drat",)) == f"{MASK} and darn"

    def test_denylist(self):
        assert PROFANE_WORDS == ("kerfuffle", "sharbert", "fornax")
