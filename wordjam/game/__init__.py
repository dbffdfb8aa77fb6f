"""Grid engine, session state machine and persistence for WordJam."""

from .models import (
    Phase,
    Outcome,
    WordKind,
    GameConfig,
    FoundWords,
    CellView,
    GridSnapshot,
    ActionResult,
    SessionStatus,
    CompletionSummary,
)
from .grid import LetterGrid, EMPTY, shuffle_row, build_rows
from .store import (
    KeyValueStore,
    MemoryStore,
    JsonFileStore,
    ProgressStore,
    level_identity,
)
from .completion import share_text, build_summary, reset_progress
from .session import WordJam

__all__ = [
    "Phase",
    "Outcome",
    "WordKind",
    "GameConfig",
    "FoundWords",
    "CellView",
    "GridSnapshot",
    "ActionResult",
    "SessionStatus",
    "CompletionSummary",
    "LetterGrid",
    "EMPTY",
    "shuffle_row",
    "build_rows",
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "ProgressStore",
    "level_identity",
    "share_text",
    "build_summary",
    "reset_progress",
    "WordJam",
]
