from .analyzer import EnglishLemmaAnalyzer
from .config import AnalyzerConfig, FilterConfig, LemmatizerConfig, TaggerConfig
from .errors import ConfigError, LemmaStreamError, LemmatizationError, ModelLoadError, TaggingError
from .filters import DEFAULT_UNWANTED_TAGS, is_unwanted_pos, make_tag_filter
from .lemmatize import PennWordNetLemmatizer, identity_lemmatizer, load_lemmatizer
from .logging_utils import configure_logging
from .stream import LemmaTokenStream, OutputToken, Phase
from .tagging import (
    NltkTaggingAdapter,
    SpacyTaggingAdapter,
    TaggedWord,
    TaggingAdapter,
    load_tagging_adapter,
    tag_text,
)

__all__ = [
    "EnglishLemmaAnalyzer",
    "AnalyzerConfig",
    "FilterConfig",
    "LemmatizerConfig",
    "TaggerConfig",
    "ConfigError",
    "LemmaStreamError",
    "LemmatizationError",
    "ModelLoadError",
    "TaggingError",
    "DEFAULT_UNWANTED_TAGS",
    "is_unwanted_pos",
    "make_tag_filter",
    "PennWordNetLemmatizer",
    "identity_lemmatizer",
    "load_lemmatizer",
    "configure_logging",
    "LemmaTokenStream",
    "OutputToken",
    "Phase",
    "NltkTaggingAdapter",
    "SpacyTaggingAdapter",
    "TaggedWord",
    "TaggingAdapter",
    "load_tagging_adapter",
    "tag_text",
]
