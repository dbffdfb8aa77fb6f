"""
Dictionary loader and word lookup.

Loads a newline-delimited word list once and indexes it by word length so the
game can ask for every word of a given length or check membership cheaply.
"""

import logging
import random
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Set
from pydantic import BaseModel, ConfigDict, Field

from .data import FALLBACK_VOCABULARY

logger = logging.getLogger(__name__)


class Dictionary(BaseModel):
    """
    Word list indexed by length.

    Attributes:
        words_by_length: Mapping from word length to the set of words
        loaded: Whether load() has completed (with real or fallback data)
        fetch_word_list: Callable returning the raw newline-separated word list
        seed: Optional random seed for random_word()
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    words_by_length: Dict[int, Set[str]] = Field(default_factory=dict)
    loaded: bool = False
    fetch_word_list: Optional[Callable[[], str]] = None
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def from_file(cls, path: str | Path, seed: Optional[int] = None) -> "Dictionary":
        """
        Create a dictionary that reads its word list from a text file.

        The file is not read until load() is called.
        """
        path = Path(path)
        return cls(fetch_word_list=lambda: path.read_text(encoding="utf-8"), seed=seed)

    def load(self) -> None:
        """
        Fetch and index the word list.

        Any failure to fetch falls back to the built-in vocabulary; this method
        never raises. Calling it again once loaded does nothing.
        """
        if self.loaded:
            return

        if self.fetch_word_list is None:
            logger.warning("No word list configured, using fallback words")
            self._index(FALLBACK_VOCABULARY)
            self.loaded = True
            return

        try:
            text = self.fetch_word_list()
            if not isinstance(text, str):
                raise TypeError(f"word list is {type(text).__name__}, not text")
        except Exception as e:
            logger.warning("Error loading dictionary, using fallback words: %s", e)
            self._index(FALLBACK_VOCABULARY)
            self.loaded = True
            return

        words = [word.strip().upper() for word in text.split("\n")]
        words = [word for word in words if word]

        if not words:
            logger.warning("Dictionary is empty, using fallback words")
            words = FALLBACK_VOCABULARY

        self._index(words)
        self.loaded = True
        logger.info("Dictionary loaded: %d words", len(words))

    def _index(self, words: Iterable[str]) -> None:
        for word in words:
            self.words_by_length.setdefault(len(word), set()).add(word)

    @property
    def total_words(self) -> int:
        return sum(len(words) for words in self.words_by_length.values())

    def words_of_length(self, length: int) -> List[str]:
        """Get all words of a specific length, sorted for stable ordering."""
        return sorted(self.words_by_length.get(length, ()))

    def is_valid_word(self, word: str) -> bool:
        """Case-insensitive membership test."""
        if not word:
            return False
        word = word.upper()
        return word in self.words_by_length.get(len(word), ())

    def random_word(self, length: int) -> Optional[str]:
        """Pick a word of the given length uniformly, or None if there are none."""
        words = self.words_of_length(length)
        if not words:
            return None
        return self._rng.choice(words)

    def word_counts(self) -> Dict[int, int]:
        """Number of words per length."""
        return {length: len(words) for length, words in sorted(self.words_by_length.items())}
