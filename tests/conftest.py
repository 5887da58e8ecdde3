"""
Shared fixtures: a small in-memory vocabulary and a regex-tokenized analyzer.
"""
import json

import pytest

from cefr_analyzer.analyzer import CEFRTextAnalyzer
from cefr_analyzer.tokenizer import RegexTokenizer
from cefr_analyzer.vocabulary import VocabularyIndex, reset_vocabulary

TEST_VOCABULARY = [
    {"word": "hello", "cefr": "a1", "pos": "interjection"},
    {"word": "world", "cefr": "a1", "pos": "noun"},
    {"word": "computer", "cefr": "a2", "pos": "noun"},
    {"word": "analyze", "cefr": "b1", "pos": "verb"},
    {"word": "vocabulary", "cefr": "b2", "pos": "noun"},
    {"word": "sophisticated", "cefr": "c1", "pos": "adjective"},
    {"word": "paradigm", "cefr": "c2", "pos": "noun"},
    {"word": "book", "cefr": "a2", "pos": "verb"},
    {"word": "book", "cefr": "a1", "pos": "noun"},
    {"word": "hotel", "cefr": "a1", "pos": "noun"},
    {"word": "read", "cefr": "a1", "pos": "verb"},
    {"word": "story", "cefr": "a1", "pos": "noun"},
]


@pytest.fixture
def vocabulary():
    index = VocabularyIndex(entries=TEST_VOCABULARY)
    index.initialize()
    return index


@pytest.fixture
def analyzer(vocabulary):
    return CEFRTextAnalyzer(vocabulary=vocabulary, tokenizer=RegexTokenizer())


@pytest.fixture(autouse=True)
def clean_vocabulary_singleton():
    yield
    reset_vocabulary()


@pytest.fixture
def vocabulary_file(tmp_path):
    path = tmp_path / "vocabulary.json"
    path.write_text(json.dumps(TEST_VOCABULARY), encoding="utf-8")
    return str(path)
