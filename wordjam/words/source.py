"""
Word sources supplying the target words for a level.

A source answers with the words for a date, or None when it has nothing for
that date. Callers fall back to fallback_words() in that case.
"""

import logging
import random
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

import yaml

from .data import FALLBACK_LEVEL_WORDS
from .dictionary import Dictionary

logger = logging.getLogger(__name__)


def today_key() -> str:
    """Today's date in YYYY-MM-DD format."""
    return date.today().isoformat()


def normalize_words(words: Iterable[str]) -> List[str]:
    """Strip and uppercase each word, dropping empties."""
    normalized = [str(word).strip().upper() for word in words]
    return [word for word in normalized if word]


class WordSource(ABC):
    """Base class for daily word providers."""

    @abstractmethod
    def fetch_words_for_date(self, date_key: str) -> Optional[List[str]]:
        ...

    def fetch_words_for_today(self) -> Optional[List[str]]:
        return self.fetch_words_for_date(today_key())


class StaticWordSource(WordSource):
    """Returns the same words for every date."""

    def __init__(self, words: Iterable[str]):
        self.words = normalize_words(words)

    def fetch_words_for_date(self, date_key: str) -> Optional[List[str]]:
        return list(self.words) or None


class DailyWordFile(WordSource):
    """
    Daily word lists stored in a YAML file.

    The file maps date keys to documents holding a ``words`` list:

        2026-10-18:
          words: [CRANE, PLATE, GRAPE, STONE, FLAME]
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            logger.warning("Daily word file not found: %s", self.path)
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error("Error reading daily word file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def fetch_words_for_date(self, date_key: str) -> Optional[List[str]]:
        data = self._load()
        # YAML parses unquoted dates into date objects
        doc = data.get(date_key)
        if doc is None:
            doc = next((v for k, v in data.items() if str(k) == date_key), None)

        if not isinstance(doc, dict) or not isinstance(doc.get("words"), list):
            logger.warning("No words found for date: %s", date_key)
            return None

        words = normalize_words(doc["words"])
        if not words:
            logger.warning("No words found for date: %s", date_key)
            return None

        logger.info("Fetched %d words for %s", len(words), date_key)
        return words


def fallback_words(
    dictionary: Dictionary,
    rng: Optional[random.Random] = None,
    count: int = 5,
    length: int = 5,
) -> List[str]:
    """
    Generate a level's words when no source has any for today.

    Draws ``count`` distinct words of ``length`` from the dictionary, or returns
    the hard-coded level when the dictionary has too few.
    """
    rng = rng or random.Random()
    available = dictionary.words_of_length(length)

    if len(available) < count:
        logger.warning(
            "Only %d words of length %d, using fallback level", len(available), length
        )
        return list(FALLBACK_LEVEL_WORDS)

    selected = rng.sample(available, count)
    logger.info("Generated %d words of length %d: %s", count, length, ", ".join(selected))
    return selected
