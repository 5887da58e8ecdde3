"""
Unit tests for the token classifier.

Covers:
- Filtering of non-words, stop words and blanks
- Dedup keys with and without part of speech
- Lemma fallback, including tokens without a lemma
- Penn Treebank tag mapping
"""
from unittest.mock import patch

import pytest

from cefr_analyzer.classifier import POS_MAPPING, TokenClassifier, map_part_of_speech
from cefr_analyzer.tokenizer import Token


class TestPartOfSpeechMapping:

    @pytest.mark.parametrize("tag,expected", [
        ("NN", "noun"),
        ("NNPS", "noun"),
        ("VBG", "verb"),
        ("JJR", "adjective"),
        ("RBS", "adverb"),
        ("DT", "determiner"),
        ("PRP$", "pronoun"),
        ("WP", "pronoun"),
        ("IN", "preposition"),
        ("CC", "conjunction"),
        ("UH", "interjection"),
    ])
    def test_known_tags(self, tag, expected):
        assert map_part_of_speech(tag) == expected

    @pytest.mark.parametrize("tag", ["CD", "SYM", ".", "", "XX", "MD"])
    def test_unmapped_tags_return_none(self, tag):
        assert map_part_of_speech(tag) is None

    def test_mapping_targets_are_vocabulary_parts_of_speech(self):
        from cefr_analyzer.levels import PARTS_OF_SPEECH
        assert set(POS_MAPPING.values()) <= set(PARTS_OF_SPEECH)


class TestTokenClassifier:

    @pytest.fixture(autouse=True)
    def setup_classifier(self, vocabulary):
        self.vocabulary = vocabulary
        self.classifier = TokenClassifier(vocabulary)

    def classify(self, tokens, **options):
        return list(self.classifier.classify(tokens, **options))

    def test_skips_non_words_stop_words_and_blanks(self):
        tokens = [
            Token("hello", "UH"),
            Token(",", ",", is_word=False),
            Token("123", "CD", is_word=False),
            Token("the", "DT", lemma="the", is_stop=True),
            Token("   ", "NN"),
            Token("", "NN"),
            Token("world", "NN"),
        ]
        words = self.classify(tokens)
        assert [w.normalized for w in words] == ["hello", "world"]

    def test_case_insensitive_dedup_keeps_first_occurrence(self):
        tokens = [Token("Hello"), Token("hello"), Token("World"), Token("world")]
        words = self.classify(tokens)
        assert [w.key for w in words] == ["hello", "world"]
        assert words[0].original == "Hello"

    def test_case_sensitive_keeps_surface_forms_apart(self):
        tokens = [Token("Book"), Token("BOOK"), Token("book")]
        words = self.classify(tokens, case_sensitive=True)
        assert [w.normalized for w in words] == ["Book", "BOOK", "book"]
        # vocabulary lookups ignore case
        assert all(w.cefr_level == "a1" for w in words)

    def test_part_of_speech_keys_split_senses(self):
        tokens = [
            Token("book", "VB", lemma="book"),
            Token("hotel", "NN", lemma="hotel"),
            Token("book", "NN", lemma="book"),
            Token("books", "NNS", lemma="book"),
            Token("book", "VBP", lemma="book"),
        ]
        words = self.classify(tokens, analyze_by_part_of_speech=True)
        assert [w.key for w in words] == ["book-verb", "hotel-noun", "book-noun", "books-noun"]
        assert words[0].cefr_level == "a2"
        assert words[2].cefr_level == "a1"

    def test_without_part_of_speech_lowest_level_wins(self):
        words = self.classify([Token("book", "VB")])
        assert words[0].cefr_level == "a1"

    def test_unmapped_tag_uses_raw_tag_in_key_and_stays_unknown(self):
        words = self.classify([Token("hello", "MD")], analyze_by_part_of_speech=True)
        assert words[0].key == "hello-MD"
        assert words[0].mapped_pos is None
        assert words[0].cefr_level is None

    def test_unmapped_tag_skips_lemma_fallback(self):
        with patch.object(self.vocabulary, "get_cefr_level", wraps=self.vocabulary.get_cefr_level) as lookup:
            words = self.classify([Token("reading", "XX", lemma="read")], analyze_by_part_of_speech=True)
        assert words[0].cefr_level is None
        assert words[0].via_lemma is False
        lookup.assert_not_called()

    def test_unmapped_tag_still_resolves_without_part_of_speech_mode(self):
        words = self.classify([Token("hello", "MD")])
        assert words[0].cefr_level == "a1"

    def test_part_of_speech_mismatch_is_unknown(self):
        words = self.classify([Token("paradigm", "VB")], analyze_by_part_of_speech=True)
        assert words[0].cefr_level is None

    def test_lemma_fallback(self):
        words = self.classify([Token("reading", "VBG", lemma="read")])
        assert words[0].cefr_level == "a1"
        assert words[0].via_lemma is True
        assert words[0].normalized == "reading"

    def test_lemma_fallback_respects_part_of_speech(self):
        tokens = [Token("stories", "NNS", lemma="story"), Token("reading", "NN", lemma="read")]
        words = self.classify(tokens, analyze_by_part_of_speech=True)
        assert words[0].cefr_level == "a1"
        # "read" is only listed as a verb
        assert words[1].cefr_level is None

    def test_lemma_is_lowercased_when_case_insensitive(self):
        words = self.classify([Token("Stories", "NNS", lemma="Story")])
        assert words[0].cefr_level == "a1"

    def test_missing_lemma_is_unknown_not_an_error(self):
        with patch.object(self.vocabulary, "get_cefr_level", wraps=self.vocabulary.get_cefr_level) as lookup:
            words = self.classify([Token("xyzzy", "NN", lemma=None)])
        assert words[0].cefr_level is None
        assert words[0].lemma is None
        assert lookup.call_count == 1

    def test_lemma_equal_to_surface_skips_second_lookup(self):
        with patch.object(self.vocabulary, "get_cefr_level", wraps=self.vocabulary.get_cefr_level) as lookup:
            words = self.classify([Token("xyzzy", "NN", lemma="XYZZY")])
        assert words[0].cefr_level is None
        assert lookup.call_count == 1

    def test_recognized_word_skips_lemma_lookup(self):
        with patch.object(self.vocabulary, "get_cefr_level", wraps=self.vocabulary.get_cefr_level) as lookup:
            self.classify([Token("world", "NN", lemma="worlds")])
        lookup.assert_called_once_with("world", None)

    def test_classify_calls_are_independent(self):
        tokens = [Token("hello"), Token("world")]
        assert self.classify(tokens) == self.classify(tokens)
        assert len(self.classify(tokens)) == 2
