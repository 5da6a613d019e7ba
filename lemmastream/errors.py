from __future__ import annotations


class LemmaStreamError(Exception):
    """Base class for every error raised by lemmastream."""


class ModelLoadError(LemmaStreamError):
    """A tagger or lemmatizer model could not be located or parsed."""


class TaggingError(LemmaStreamError):
    """Tokenization or tagging of an input text failed."""


class LemmatizationError(LemmaStreamError):
    def __init__(self, word: str, tag: str, reason: str | None = None):
        self.word = word
        self.tag = tag
        message = f"cannot lemmatize {word!r} tagged {tag!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigError(LemmaStreamError, ValueError):
    pass


__all__ = [
    "LemmaStreamError",
    "ModelLoadError",
    "TaggingError",
    "LemmatizationError",
    "ConfigError",
]
