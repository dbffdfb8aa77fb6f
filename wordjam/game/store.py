"""
Persistence for found words, high score and tries.

Values are kept as JSON strings in a key-value backend, the way a browser's
local storage holds them. Anything unreadable is treated as missing.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from .models import FoundWords

logger = logging.getLogger(__name__)


def level_identity(words: Iterable[str]) -> str:
    """Canonical key for a level: its words, normalized and sorted."""
    return ",".join(sorted(word.strip().upper() for word in words))


class KeyValueStore(ABC):
    """Minimal string key-value storage interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        ...


class MemoryStore(KeyValueStore):
    """In-memory store, lost when the process exits."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self.data)


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object on disk.

    The file is re-read on every access and rewritten on every change. An
    unreadable file behaves like an empty one.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # The store file is only ever replaced whole
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, 'w', encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(self.path)

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def keys(self) -> List[str]:
        return list(self._read())


class ProgressStore:
    """
    Reads and writes player progress.

    Found words are keyed by level identity so that replaying or resetting the
    same level restores them. The high score and tries count are global.
    """

    def __init__(self, backend: Optional[KeyValueStore] = None, prefix: str = "wordjam_"):
        self.backend = backend if backend is not None else MemoryStore()
        self.prefix = prefix

    @property
    def found_words_prefix(self) -> str:
        return f"{self.prefix}foundWords_"

    def _found_words_key(self, identity: str) -> str:
        return f"{self.found_words_prefix}{identity}"

    def _load_json(self, key: str):
        raw = self.backend.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed value for %s", key)
            return None

    def load_found_words(self, identity: str) -> FoundWords:
        """
        Load the found words for a level.

        A bare list (older record format) is read as level words. Missing or
        malformed records give an empty result.
        """
        data = self._load_json(self._found_words_key(identity))
        if data is None:
            return FoundWords()

        if isinstance(data, list):
            data = {"level_words": data, "other_words": []}
        elif isinstance(data, dict):
            # Accept the camelCase keys written by the web client
            data = {
                "level_words": data.get("level_words", data.get("levelWords", [])),
                "other_words": data.get("other_words", data.get("otherWords", [])),
            }
        else:
            logger.warning("Unexpected found words record for %s", identity)
            return FoundWords()

        try:
            return FoundWords.model_validate(data)
        except ValidationError as e:
            logger.warning("Ignoring invalid found words record for %s: %s", identity, e)
            return FoundWords()

    def save_found_words(self, identity: str, record: FoundWords) -> None:
        self.backend.set(self._found_words_key(identity), json.dumps(record.model_dump()))

    def clear_found_words(self) -> None:
        """Delete the found words of every level."""
        for key in self.backend.keys():
            if key.startswith(self.found_words_prefix):
                self.backend.delete(key)

    def _load_int(self, key: str, default: int) -> int:
        data = self._load_json(key)
        if isinstance(data, bool) or not isinstance(data, int):
            return default
        return data

    def load_highscore(self) -> int:
        return self._load_int(f"{self.prefix}highscore", 0)

    def update_highscore(self, total: int) -> int:
        """
        Store a session total if it beats the stored high score.

        Returns:
            The high score after the update
        """
        current = self.load_highscore()
        if total > current:
            self.backend.set(f"{self.prefix}highscore", json.dumps(total))
            return total
        return current

    def load_tries(self) -> int:
        return max(1, self._load_int(f"{self.prefix}tries", 1))

    def save_tries(self, tries: int) -> None:
        self.backend.set(f"{self.prefix}tries", json.dumps(tries))

    def clear_progress(self) -> None:
        """Delete found words and the tries count, keeping the high score."""
        self.clear_found_words()
        self.backend.delete(f"{self.prefix}tries")
