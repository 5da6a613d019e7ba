from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, TextIO
import logging

from .errors import LemmatizationError
from .filters import TagFilter, is_unwanted_pos
from .lemmatize import Lemmatizer
from .tagging import TaggedWord, TaggingAdapter, tag_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputToken:
    text: str
    position_increment: int


class Phase(Enum):
    AWAITING_FORM = "form"
    AWAITING_LEMMA = "lemma"


class LemmaTokenStream:
    """Token stream that emits each word followed by its lemma.

    Output is interleaved as ``form1, lemma1, form2, lemma2, ...``. A lemma
    always has a position increment of 0 so it sits at the same position as
    its inflected form. A form's increment is one plus the number of filtered
    words skipped since the previous form, which keeps phrase queries aligned
    across dropped function words and punctuation.

    The whole input is tokenized and tagged when the stream is built; tokens
    are then produced on demand. A stream is single use and not thread-safe.
    Build one per input text, sharing the tagger between streams.
    """

    def __init__(
        self,
        text: str | TextIO,
        tagger: TaggingAdapter,
        lemmatizer: Lemmatizer,
        is_unwanted: TagFilter = is_unwanted_pos,
    ):
        if not isinstance(text, str):
            text = text.read()
        self._lemmatizer = lemmatizer
        self._is_unwanted = is_unwanted
        self._words: list[TaggedWord] = tag_text(tagger, text)
        self._index = 0
        self._current: TaggedWord | None = None
        self._phase = Phase.AWAITING_FORM
        self._exhausted = False

        self.term: str | None = None
        self.position_increment = 0
        logger.debug("lemma_stream_tagged", extra={"tagged_words": len(self._words)})

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def next_token(self) -> OutputToken | None:
        """Advance the stream; return the next token, or None once exhausted."""
        if self._phase is Phase.AWAITING_LEMMA:
            token = OutputToken(self._lemma_of(self._current), 0)
            self._phase = Phase.AWAITING_FORM
            return self._set_current(token)

        if self._exhausted:
            return None

        skipped = 0
        while self._index < len(self._words):
            word = self._words[self._index]
            self._index += 1
            if self._is_unwanted(word.tag):
                skipped += 1
                continue
            self._current = word
            self._phase = Phase.AWAITING_LEMMA
            return self._set_current(OutputToken(word.surface, skipped + 1))

        self._exhausted = True
        self._current = None
        self.term = None
        self.position_increment = 0
        return None

    def increment_token(self) -> bool:
        """Host-pipeline style advance; read ``term`` and ``position_increment`` after it."""
        return self.next_token() is not None

    def close(self) -> None:
        self._words = []
        self._index = 0
        self._current = None
        self._phase = Phase.AWAITING_FORM
        self._exhausted = True
        self.term = None
        self.position_increment = 0

    # Tagging is one bulk operation, so there is nothing to rewind to.
    reset = close

    def _lemma_of(self, word: TaggedWord) -> str:
        try:
            return self._lemmatizer(word.surface, word.tag)
        except LemmatizationError:
            raise
        except Exception as exc:
            raise LemmatizationError(word.surface, word.tag, str(exc)) from exc

    def _set_current(self, token: OutputToken) -> OutputToken:
        self.term = token.text
        self.position_increment = token.position_increment
        return token

    def __iter__(self) -> Iterator[OutputToken]:
        return self

    def __next__(self) -> OutputToken:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def __enter__(self) -> "LemmaTokenStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["OutputToken", "Phase", "LemmaTokenStream"]
