from __future__ import annotations

from typing import Callable
import logging

from nltk.stem import WordNetLemmatizer

from .config import LemmatizerConfig
from .errors import LemmatizationError, ModelLoadError

logger = logging.getLogger(__name__)

Lemmatizer = Callable[[str, str], str]

# First letter of a Penn Treebank tag -> WordNet part of speech
_WORDNET_POS = {"J": "a", "N": "n", "V": "v", "R": "r"}
_PROPER_NOUN_TAGS = frozenset({"NNP", "NNPS"})


def identity_lemmatizer(word: str, tag: str) -> str:
    return word


class PennWordNetLemmatizer:
    """Lemmatize a word given its Penn Treebank tag, using WordNet.

    Only open-class words (adjectives, nouns, verbs, adverbs) are looked up.
    Anything else, and proper nouns, is its own lemma and keeps its case:
    ``lowercase`` only applies to words that go through a WordNet lookup.
    """

    def __init__(self, lowercase: bool = True):
        self.lowercase = lowercase
        self._lemmatizer = WordNetLemmatizer()
        try:
            self._lemmatizer.lemmatize("probes", "n")
        except LookupError as exc:
            logger.error("wordnet_load_failed")
            raise ModelLoadError(f"WordNet data is missing: {exc}") from exc

    def __call__(self, word: str, tag: str) -> str:
        wn_pos = _WORDNET_POS.get(tag[:1])
        if wn_pos is None or tag in _PROPER_NOUN_TAGS:
            return word
        form = word.lower() if self.lowercase else word
        try:
            return self._lemmatizer.lemmatize(form, wn_pos)
        except LookupError as exc:
            raise LemmatizationError(word, tag, str(exc)) from exc


def load_lemmatizer(cfg: LemmatizerConfig) -> Lemmatizer:
    if cfg.backend == "identity":
        return identity_lemmatizer
    return PennWordNetLemmatizer(lowercase=cfg.lowercase)


__all__ = ["Lemmatizer", "identity_lemmatizer", "PennWordNetLemmatizer", "load_lemmatizer"]
