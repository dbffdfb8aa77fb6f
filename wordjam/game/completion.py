"""Completion summary and share text for a finished daily puzzle."""

from typing import List

from .models import CompletionSummary
from .store import ProgressStore


def format_tries(tries: int) -> str:
    return f"{tries} {'try' if tries == 1 else 'tries'}"


def share_text(tries: int, url: str = "") -> str:
    """Text players share after completing the puzzle."""
    text = f"I have completed today's WordJam puzzle in {format_tries(tries)}"
    return f"{text} {url}" if url else text


def build_summary(tries: int, score: int, level_words: List[str], url: str = "") -> CompletionSummary:
    return CompletionSummary(
        tries=tries,
        score=score,
        level_words=list(level_words),
        share_text=share_text(tries, url),
    )


def reset_progress(store: ProgressStore) -> None:
    """Forget every level's found words and the tries count."""
    store.clear_progress()
