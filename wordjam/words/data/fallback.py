"""Built-in word lists used when no word list can be loaded."""

from typing import List

# Small vocabulary so the game stays playable without a dictionary file
FALLBACK_VOCABULARY: List[str] = [
    "ANT", "BAT", "BEE", "CAN", "CAT", "COG", "COW", "DOG", "FLY", "FOX",
    "BEAR", "FROG", "LION", "WOLF",
    "EAGLE", "MOUSE", "SNAKE", "TIGER",
    "CRANE", "PLATE", "GRAPE", "STONE", "FLAME",
    "BASKET", "FRIEND", "LAPTOP", "MEMBER",
    "ELEPHANT", "GIRAFFE", "PENGUIN", "DOLPHIN",
]

# Level used when the dictionary cannot supply enough words
FALLBACK_LEVEL_WORDS: List[str] = ["CRANE", "PLATE", "GRAPE", "STONE", "FLAME"]
