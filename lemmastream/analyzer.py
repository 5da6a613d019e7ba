from __future__ import annotations

from typing import TextIO
import logging

from .config import AnalyzerConfig
from .filters import TagFilter, is_unwanted_pos, make_tag_filter
from .lemmatize import Lemmatizer, PennWordNetLemmatizer, load_lemmatizer
from .stream import LemmaTokenStream, OutputToken
from .tagging import NltkTaggingAdapter, TaggingAdapter, load_tagging_adapter


class EnglishLemmaAnalyzer:
    """Holds the shared tagger and lemmatizer and hands out one stream per text.

    Loading a tagger is expensive; build one analyzer per process and call
    :meth:`token_stream` for every document.
    """

    def __init__(
        self,
        tagger: TaggingAdapter | None = None,
        lemmatizer: Lemmatizer | None = None,
        is_unwanted: TagFilter | None = None,
    ):
        self.tagger = tagger if tagger is not None else NltkTaggingAdapter()
        self.lemmatizer = lemmatizer if lemmatizer is not None else PennWordNetLemmatizer()
        self.is_unwanted = is_unwanted if is_unwanted is not None else is_unwanted_pos

    @classmethod
    def from_config(cls, cfg: AnalyzerConfig) -> "EnglishLemmaAnalyzer":
        logging.getLogger("lemmastream").setLevel(cfg.log_level)
        return cls(
            tagger=load_tagging_adapter(cfg.tagger),
            lemmatizer=load_lemmatizer(cfg.lemmatizer),
            is_unwanted=make_tag_filter(cfg.filter.unwanted_tags),
        )

    def token_stream(self, text: str | TextIO) -> LemmaTokenStream:
        return LemmaTokenStream(text, self.tagger, self.lemmatizer, self.is_unwanted)

    def analyze(self, text: str | TextIO) -> list[OutputToken]:
        with self.token_stream(text) as stream:
            return list(stream)

    def terms(self, text: str | TextIO) -> list[str]:
        return [token.text for token in self.analyze(text)]


__all__ = ["EnglishLemmaAnalyzer"]
