"""WordJam: slide rows of letters to spell words."""

from .game import WordJam, GameConfig, LetterGrid, ProgressStore
from .words import Dictionary

__all__ = ["WordJam", "GameConfig", "LetterGrid", "ProgressStore", "Dictionary"]
