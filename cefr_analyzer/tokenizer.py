"""
Tokenizers that turn raw English text into the token stream the analyzer
consumes.

Two implementations:
1. SpacyTokenizer: spaCy pipeline with Penn Treebank tags, lemmas and
   stop-word flags (primary)
2. RegexTokenizer: plain word splitting, no tags, lemmas or stop words
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_SPACY_MODEL = os.environ.get("CEFR_ANALYZER_SPACY_MODEL", "en_core_web_sm")

WORD_RE = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)?")


@dataclass(frozen=True)
class Token:
    text: str                     # surface form as it appears in the text
    tag: str = ""                 # Penn Treebank tag, "" when untagged
    lemma: Optional[str] = None   # base form, None when the tagger gave none
    is_word: bool = True          # False for punctuation, numbers, symbols
    is_stop: bool = False


class SpacyTokenizer:
    """
    Tokenizer backed by a spaCy English pipeline.

    The pipeline is loaded on first use so that constructing an analyzer
    stays cheap.
    """

    def __init__(self, model_name: str = None, nlp=None):
        """
        Args:
            model_name: spaCy package to load (default: en_core_web_sm, or
                        the CEFR_ANALYZER_SPACY_MODEL override)
            nlp: Already loaded spaCy Language object to use instead
        """
        self.model_name = model_name or DEFAULT_SPACY_MODEL
        self._nlp = nlp

    @property
    def nlp(self):
        if self._nlp is None:
            import spacy

            try:
                self._nlp = spacy.load(self.model_name, disable=["ner", "parser"])
            except OSError as e:
                raise OSError(
                    f"spaCy model {self.model_name} is missing. "
                    f"Install with: python -m spacy download {self.model_name}"
                ) from e
            logger.info(f"Loaded spaCy model {self.model_name}")
        return self._nlp

    def tokenize(self, text: str) -> List[Token]:
        if not text or not text.strip():
            return []

        tokens = []
        for tok in self.nlp(text):
            if tok.is_space:
                continue
            tokens.append(Token(
                text=tok.text,
                tag=tok.tag_,
                lemma=tok.lemma_ or None,
                is_word=tok.is_alpha,
                is_stop=tok.is_stop,
            ))
        return tokens

    def describe(self) -> str:
        return f"spacy ({self.model_name})"


class RegexTokenizer:
    """Split text into alphabetic words. Every token is an untagged word."""

    def tokenize(self, text: str) -> List[Token]:
        return [Token(text=match.group()) for match in WORD_RE.finditer(text or "")]

    def describe(self) -> str:
        return "regex"


def make_tokenizer(name: str = "spacy", model_name: str = None):
    """
    Build a tokenizer by name ('spacy' or 'regex').

    Raises:
        ValueError: For an unknown tokenizer name
    """
    if name == "spacy":
        return SpacyTokenizer(model_name=model_name)
    if name == "regex":
        return RegexTokenizer()
    raise ValueError(f"Unknown tokenizer: {name!r}. Expected 'spacy' or 'regex'.")

