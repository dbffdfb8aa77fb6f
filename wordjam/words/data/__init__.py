from .fallback import FALLBACK_VOCABULARY, FALLBACK_LEVEL_WORDS

__all__ = ["FALLBACK_VOCABULARY", "FALLBACK_LEVEL_WORDS"]
