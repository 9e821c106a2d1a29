"""Tests for sentence segmentation and token cleaning."""

import pytest

from kannada_summarizer.errors import EmptySegmentation, SummarizationError
from kannada_summarizer.preprocessing import (
    clean_text,
    clean_token,
    segment,
    split_sentences,
    tokenize,
    word_count,
)


class TestCleanText:
    def test_collapses_whitespace(self):
        """Whitespace runs become single spaces and the ends are trimmed."""
        assert clean_text("  one \n two\t\tthree  ") == "one two three"

    def test_none_is_empty(self):
        assert clean_text(None) == ""


class TestSplitSentences:
    def test_ascii_terminals(self):
        """Split on ., ! and ?."""
        assert split_sentences("One. Two! Three?") == ["One.", "Two!", "Three?"]

    def test_danda(self):
        """The Kannada danda ends a sentence."""
        text = "ಇದು ಒಂದು। ಅದು ಎರಡು।"
        assert split_sentences(text) == ["ಇದು ಒಂದು।", "ಅದು ಎರಡು।"]

    def test_terminal_runs_stay_together(self):
        assert split_sentences("Wait... What?!") == ["Wait...", "What?!"]

    def test_no_terminal_returns_whole_text(self):
        """Without any boundary the whole text is one sentence."""
        assert split_sentences("no punctuation here") == ["no punctuation here"]

    def test_trailing_fragment_is_dropped(self):
        assert split_sentences("One. Two. tail") == ["One.", "Two."]

    def test_empty(self):
        assert split_sentences("") == []


class TestSegment:
    def test_indices_are_contiguous(self, english_text):
        """Sentence indices run 0..n-1 in input order."""
        sentences = segment(english_text)
        assert [s.idx for s in sentences] == list(range(len(sentences)))
        assert len(sentences) == 8

    def test_word_count(self):
        sentences = segment("Alpha beta gamma.   Delta!")
        assert [s.word_count for s in sentences] == [3, 1]
        assert [s.text for s in sentences] == ["Alpha beta gamma.", "Delta!"]

    def test_single_sentence_fallback(self):
        sentences = segment("  just   words  ")
        assert len(sentences) == 1
        assert sentences[0].text == "just words"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_text_raises(self, text):
        """Nothing to summarize is reported, not an empty list."""
        with pytest.raises(EmptySegmentation):
            segment(text)

    def test_empty_segmentation_is_summarization_error(self):
        with pytest.raises(SummarizationError):
            segment("")

    def test_sentences_are_immutable(self):
        sentence = segment("One.")[0]
        with pytest.raises(AttributeError):
            sentence.text = "changed"


class TestTokens:
    def test_tokenize_filters_short_and_punctuation(self):
        """Lowercased, stripped of punctuation, tokens under 3 characters dropped."""
        assert tokenize("The quick, brown fox's a OK.") == ["the", "quick", "brown", "foxs"]

    def test_kannada_characters_are_kept(self):
        assert clean_token("ಕನ್ನಡ,") == "ಕನ್ನಡ"
        assert tokenize("ಕನ್ನಡ ಭಾಷೆ।") == ["ಕನ್ನಡ", "ಭಾಷೆ"]

    def test_word_characters_are_ascii(self):
        assert clean_token("Café") == "caf"

    def test_word_count_ignores_cleaning(self):
        assert word_count("a b , c") == 4
        assert word_count("") == 0
