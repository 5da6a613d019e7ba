from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from pathlib import Path
from typing import Any, Protocol, Sequence
import logging

import nltk
from nltk.tag.perceptron import PerceptronTagger
from nltk.tokenize import sent_tokenize, word_tokenize

from .config import TaggerConfig
from .errors import ModelLoadError, TaggingError

logger = logging.getLogger(__name__)

DEFAULT_SPACY_MODEL = "en_core_web_sm"


@dataclass(frozen=True)
class TaggedWord:
    surface: str
    tag: str


class TaggingAdapter(Protocol):
    def tokenize(self, text: str) -> list[list[str]]:
        ...

    def tag_sentences(self, sentences: Sequence[Sequence[str]]) -> list[list[tuple[str, str]]]:
        ...


def tag_text(adapter: TaggingAdapter, text: str) -> list[TaggedWord]:
    """Tokenize and tag ``text`` in one pass, flattening sentence boundaries."""
    if not text.strip():
        return []
    try:
        sentences = adapter.tokenize(text)
        tagged = adapter.tag_sentences(sentences)
        return [TaggedWord(word, tag) for word, tag in chain.from_iterable(tagged)]
    except TaggingError:
        raise
    except Exception as exc:
        logger.error(
            "tagging_failed",
            extra={"adapter": type(adapter).__name__, "text_length": len(text)},
        )
        raise TaggingError(f"{type(adapter).__name__} failed to tag input: {exc}") from exc


class NltkTaggingAdapter:
    """Penn Treebank tagging with NLTK's Punkt splitter and perceptron tagger.

    ``data_path`` names an extra NLTK data directory holding the serialized
    models. It is searched before the default locations. Both the tokenizer
    and the tagger models are probed once here so that a missing model is
    reported at construction instead of on the first document.
    """

    def __init__(self, data_path: str | Path | None = None):
        self.data_path = Path(data_path) if data_path else None
        if self.data_path is not None:
            if not self.data_path.is_dir():
                raise ModelLoadError(f"NLTK data directory not found: {self.data_path}")
            if str(self.data_path) not in nltk.data.path:
                nltk.data.path.insert(0, str(self.data_path))

        try:
            self._tagger = PerceptronTagger()
            self.tokenize("Models loaded.")
        except LookupError as exc:
            logger.error("nltk_model_load_failed", extra={"data_path": str(self.data_path or "")})
            raise ModelLoadError(f"NLTK tagger or tokenizer model is missing: {exc}") from exc
        logger.info("nltk_tagger_loaded", extra={"data_path": str(self.data_path or "")})

    def tokenize(self, text: str) -> list[list[str]]:
        return [word_tokenize(sentence, preserve_line=True) for sentence in sent_tokenize(text)]

    def tag_sentences(self, sentences: Sequence[Sequence[str]]) -> list[list[tuple[str, str]]]:
        return [list(tagged) for tagged in self._tagger.tag_sents([list(s) for s in sentences])]


class SpacyTaggingAdapter:
    """Fine-grained (``tag_``) tagging with a spaCy pipeline.

    ``model`` is an installed package name, a model directory, or an
    already loaded ``Language`` object.
    """

    def __init__(self, model: Any = DEFAULT_SPACY_MODEL):
        # spaCy is an optional extra; import only when this backend is chosen.
        import spacy
        from spacy.tokens import Doc

        self._doc_cls = Doc
        if isinstance(model, (str, Path)):
            self.model_name = str(model)
            try:
                self._nlp = spacy.load(model, exclude=["ner"])
            except (OSError, ValueError) as exc:
                logger.error("spacy_model_load_failed", extra={"model": self.model_name})
                raise ModelLoadError(f"cannot load spaCy model {self.model_name!r}: {exc}") from exc
        else:
            self._nlp = model
            self.model_name = str(getattr(model, "meta", {}).get("name", type(model).__name__))
        logger.info("spacy_tagger_loaded", extra={"model": self.model_name})

    def tokenize(self, text: str) -> list[list[str]]:
        doc = self._nlp(text)
        sentences = doc.sents if doc.has_annotation("SENT_START") else [doc]
        out: list[list[str]] = []
        for sentence in sentences:
            words = [token.text for token in sentence if not token.is_space]
            if words:
                out.append(words)
        return out

    def tag_sentences(self, sentences: Sequence[Sequence[str]]) -> list[list[tuple[str, str]]]:
        out: list[list[tuple[str, str]]] = []
        for words in sentences:
            # Build the Doc from the given words so every word gets exactly one tag.
            doc = self._doc_cls(self._nlp.vocab, words=list(words))
            for _name, component in self._nlp.pipeline:
                doc = component(doc)
            out.append([(token.text, token.tag_) for token in doc])
        return out


def load_tagging_adapter(cfg: TaggerConfig) -> TaggingAdapter:
    if cfg.backend == "spacy":
        return SpacyTaggingAdapter(cfg.model or DEFAULT_SPACY_MODEL)
    return NltkTaggingAdapter(cfg.model or None)


__all__ = [
    "TaggedWord",
    "TaggingAdapter",
    "tag_text",
    "NltkTaggingAdapter",
    "SpacyTaggingAdapter",
    "load_tagging_adapter",
]
