"""
Pydantic models for the game layer.

This module contains the data models (configuration, found-word records,
grid snapshots, action results) used throughout the game layer. The main logic
classes (LetterGrid, WordJam, ProgressStore) live in their respective files.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field, model_validator


# Type aliases
Phase = Literal["LOADING", "PLAYING", "LEVEL_COMPLETE", "GAME_OVER"]
Outcome = Literal[
    "ACCEPTED",
    "REJECTED",
    "NO_SELECTION",
    "LEVEL_COMPLETE",
    "LEVEL_ADVANCED",
    "GAME_OVER",
    "PROGRESS_REFUSED",
    "NOT_PLAYING",
    "INSUFFICIENT_COINS",
    "UNAVAILABLE",
    "PURCHASED",
    "RESET",
    "RESTARTED",
]
WordKind = Literal["level", "other"]


class GameConfig(BaseModel):
    """Configuration for a game session."""
    seed: Optional[int] = None
    lives_enabled: bool = False
    starting_lives: int = Field(default=3, ge=1)
    coins_per_word: int = Field(default=10, ge=0)
    add_word_cost: int = Field(default=30, ge=0)
    add_life_cost: int = Field(default=60, ge=0)
    fallback_word_count: int = Field(default=5, ge=1)
    fallback_word_length: int = Field(default=5, ge=1)
    storage_prefix: str = "wordjam_"
    dictionary_path: Optional[str] = None
    daily_words_path: Optional[str] = None
    store_path: Optional[str] = None
    share_url: str = "https://chipdoes.app/playwordjam/"


class FoundWords(BaseModel):
    """
    Words found for one level.

    Level words match the level's word set; other words are valid dictionary
    words formed along the way. Both lists keep insertion order, hold uppercase
    words only once, and never share a word.
    """
    level_words: List[str] = Field(default_factory=list)
    other_words: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def normalize(self) -> "FoundWords":
        level = _dedupe(self.level_words)
        self.level_words = level
        self.other_words = [w for w in _dedupe(self.other_words) if w not in level]
        return self

    def __contains__(self, word: str) -> bool:
        word = word.upper()
        return word in self.level_words or word in self.other_words

    @property
    def total(self) -> int:
        return len(self.level_words) + len(self.other_words)

    def record(self, word: str, kind: WordKind) -> bool:
        """
        Add a word to the list for its kind.

        Returns:
            True if the word was new, False if it was already recorded
        """
        word = word.upper()
        if word in self:
            return False
        if kind == "level":
            self.level_words.append(word)
        else:
            self.other_words.append(word)
        return True


def _dedupe(words: List[str]) -> List[str]:
    seen: List[str] = []
    for word in words:
        word = word.strip().upper()
        if word and word not in seen:
            seen.append(word)
    return seen


class CellView(BaseModel):
    """A single cell of a grid snapshot."""
    letter: Optional[str] = None  # None for an empty cell
    selected: bool = False


class GridSnapshot(BaseModel):
    """Read-only view of the grid for rendering."""
    rows: List[List[CellView]] = Field(default_factory=list)
    selection: List[int] = Field(default_factory=list)
    candidate: str = ""


class ActionResult(BaseModel):
    """Outcome of a player action."""
    outcome: Outcome
    message: str = ""
    word: Optional[str] = None
    kind: Optional[WordKind] = None
    new_word: bool = False
    code: Optional[str] = None  # Validation error code for rejected words
    coins: int = 0
    lives: Optional[int] = None
    level_number: int = 1


class SessionStatus(BaseModel):
    """Queryable session counters."""
    phase: Phase
    level_number: int
    word_length: int
    words_needed: int
    level_words_found: int
    other_words_found: int
    coins: int
    lives: Optional[int] = None
    score: int
    highscore: int
    tries: int


class CompletionSummary(BaseModel):
    """Data shown once every level word has been found."""
    tries: int = 1
    score: int = 0
    level_words: List[str] = Field(default_factory=list)
    share_text: str = ""
