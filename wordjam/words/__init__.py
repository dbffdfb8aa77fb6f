"""Dictionary, word sources and word validation for WordJam."""

from .dictionary import Dictionary
from .models import ValidationError, WordCheck
from .source import (
    WordSource,
    StaticWordSource,
    DailyWordFile,
    fallback_words,
    normalize_words,
    today_key,
)
from .validate import validate_word
from .data import FALLBACK_VOCABULARY, FALLBACK_LEVEL_WORDS

__all__ = [
    # Dictionary
    "Dictionary",
    # Models
    "ValidationError",
    "WordCheck",
    # Word sources
    "WordSource",
    "StaticWordSource",
    "DailyWordFile",
    "fallback_words",
    "normalize_words",
    "today_key",
    # Validation
    "validate_word",
    # Built-in data
    "FALLBACK_VOCABULARY",
    "FALLBACK_LEVEL_WORDS",
]
