from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import json
import logging

import yaml

from .errors import ConfigError
from .filters import DEFAULT_UNWANTED_TAGS

TAGGER_BACKENDS = ("nltk", "spacy")
LEMMATIZER_BACKENDS = ("wordnet", "identity")


@dataclass
class TaggerConfig:
    backend: str = "nltk"  # "nltk" | "spacy"
    # nltk: extra NLTK data directory; spacy: package name or model directory
    model: str = ""

    def __post_init__(self) -> None:
        if self.backend not in TAGGER_BACKENDS:
            raise ConfigError(f"unknown tagger backend {self.backend!r}, expected one of {TAGGER_BACKENDS}")


@dataclass
class LemmatizerConfig:
    backend: str = "wordnet"  # "wordnet" | "identity"
    lowercase: bool = True

    def __post_init__(self) -> None:
        if self.backend not in LEMMATIZER_BACKENDS:
            raise ConfigError(
                f"unknown lemmatizer backend {self.backend!r}, expected one of {LEMMATIZER_BACKENDS}"
            )


@dataclass
class FilterConfig:
    unwanted_tags: tuple[str, ...] = DEFAULT_UNWANTED_TAGS

    def __post_init__(self) -> None:
        # YAML and JSON hand us lists, or a bare string for a single tag
        if isinstance(self.unwanted_tags, str):
            self.unwanted_tags = (self.unwanted_tags,)
        self.unwanted_tags = tuple(self.unwanted_tags)


@dataclass
class AnalyzerConfig:
    tagger: TaggerConfig = field(default_factory=TaggerConfig)
    lemmatizer: LemmatizerConfig = field(default_factory=LemmatizerConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()
            if self.log_level not in logging.getLevelNamesMapping():
                raise ConfigError(f"unknown log level {self.log_level!r}")
        elif not isinstance(self.log_level, int):
            raise ConfigError(f"log level must be a name or a number, got {self.log_level!r}")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "AnalyzerConfig":
        try:
            return cls(
                tagger=TaggerConfig(**data.get("tagger", {})),
                lemmatizer=LemmatizerConfig(**data.get("lemmatizer", {})),
                filter=FilterConfig(**data.get("filter", {})),
                log_level=data.get("log_level", "WARNING"),
            )
        except TypeError as exc:
            raise ConfigError(f"invalid analyzer config: {exc}") from exc

    @classmethod
    def load(cls, path: str | Path) -> "AnalyzerConfig":
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        try:
            if path.suffix.lower() in {".yaml", ".yml"}:
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigError(f"cannot parse config file {path}: {exc}") from exc
        if data is not None and not isinstance(data, dict):
            raise ConfigError(f"config file {path} must contain a mapping")
        return cls.from_mapping(data or {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "tagger": dict(self.tagger.__dict__),
            "lemmatizer": dict(self.lemmatizer.__dict__),
            "filter": {"unwanted_tags": list(self.filter.unwanted_tags)},
            "log_level": self.log_level,
        }


__all__ = [
    "TaggerConfig",
    "LemmatizerConfig",
    "FilterConfig",
    "AnalyzerConfig",
]
