import logging
import random
from typing import List, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

from .grid import LetterGrid
from .models import (
    ActionResult,
    CompletionSummary,
    FoundWords,
    GameConfig,
    GridSnapshot,
    Outcome,
    Phase,
    SessionStatus,
)
from .store import ProgressStore, MemoryStore, JsonFileStore, level_identity
from .completion import build_summary
from ..words import (
    Dictionary,
    WordSource,
    DailyWordFile,
    WordCheck,
    fallback_words,
    normalize_words,
    validate_word,
)

logger = logging.getLogger(__name__)


class WordJam(BaseModel):
    """
    Level and session state machine.

    Coordinates the dictionary, word source, grid and progress store: checks
    submitted words, awards coins, tracks found words and moves between
    levels. The dictionary, word source and store are injected so tests can
    pass fakes.

    Rules: every accepted word earns a flat ``coins_per_word``; wrong words
    cost nothing unless ``lives_enabled`` is set, in which case each costs a
    life and running out ends the game.

    Attributes:
        dictionary: Word list used to validate submissions
        word_source: Provider of today's level words (None to always generate)
        store: Persistence for found words, high score and tries
        config: Game configuration
        grid: The current level's letter grid
        level_words: Target words of the current level
        found: Words found for the current level
        phase: LOADING, PLAYING, LEVEL_COMPLETE or GAME_OVER
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dictionary: Dictionary = Field(default_factory=Dictionary)
    word_source: Optional[WordSource] = None
    store: ProgressStore = Field(default_factory=ProgressStore)
    config: GameConfig = Field(default_factory=GameConfig)
    grid: LetterGrid = Field(default_factory=LetterGrid)
    level_words: List[str] = Field(default_factory=list)
    found: FoundWords = Field(default_factory=FoundWords)
    phase: Phase = "LOADING"
    lives: int = 0
    coins: int = 0
    level_number: int = 1
    words_needed: int = 0
    total_words_found: int = 0
    highscore: int = 0
    tries: int = 1
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
        word_source: Optional[WordSource] = None,
        store: Optional[ProgressStore] = None,
        **config_kwargs: Any
    ) -> "WordJam":
        """
        Factory method to build a session and any collaborators not given.

        Args:
            config: Optional GameConfig instance
            dictionary: Dictionary to use instead of config.dictionary_path
            word_source: Word source to use instead of config.daily_words_path
            store: Progress store to use instead of config.store_path
            **config_kwargs: Config parameters if config not provided

        Returns:
            A session in the LOADING phase; call start() to play
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if dictionary is None:
            if config.dictionary_path:
                dictionary = Dictionary.from_file(config.dictionary_path, seed=config.seed)
            else:
                dictionary = Dictionary(seed=config.seed)

        if word_source is None and config.daily_words_path:
            word_source = DailyWordFile(config.daily_words_path)

        if store is None:
            backend = JsonFileStore(config.store_path) if config.store_path else MemoryStore()
            store = ProgressStore(backend, prefix=config.storage_prefix)

        return cls(dictionary=dictionary, word_source=word_source, store=store, config=config)

    # ------------------------------------------------------------------
    # Queries

    @property
    def word_length(self) -> int:
        """Length a submitted word must have."""
        return max((len(word) for word in self.level_words), default=0)

    @property
    def identity(self) -> str:
        return level_identity(self.level_words)

    @property
    def score(self) -> int:
        return self.total_words_found

    @property
    def all_level_words_found(self) -> bool:
        return self.words_needed > 0 and len(self.found.level_words) >= self.words_needed

    def candidate_word(self) -> str:
        return self.grid.candidate_word()

    def snapshot(self) -> GridSnapshot:
        return self.grid.snapshot()

    def status(self) -> SessionStatus:
        return SessionStatus(
            phase=self.phase,
            level_number=self.level_number,
            word_length=self.word_length,
            words_needed=self.words_needed,
            level_words_found=len(self.found.level_words),
            other_words_found=len(self.found.other_words),
            coins=self.coins,
            lives=self.lives if self.config.lives_enabled else None,
            score=self.score,
            highscore=self.highscore,
            tries=self.tries,
        )

    def completion_summary(self) -> CompletionSummary:
        return build_summary(self.tries, self.score, self.found.level_words, self.config.share_url)

    # ------------------------------------------------------------------
    # Level setup

    def start(self) -> None:
        """
        Load the dictionary and generate the first level.

        Counters are reset; the high score and tries count are read from the
        store.
        """
        self.dictionary.load()
        self.highscore = self.store.load_highscore()
        self.tries = self.store.load_tries()
        self.lives = self.config.starting_lives
        self.coins = 0
        self.level_number = 1
        self.total_words_found = 0
        self._start_level(self._fetch_level_words())

    def _fetch_level_words(self) -> List[str]:
        """Today's words from the word source, or generated ones."""
        words = None
        if self.word_source is not None:
            try:
                words = self.word_source.fetch_words_for_today()
            except Exception as e:
                logger.warning("Error fetching today's words: %s", e)
                words = None

        words = normalize_words(words or [])
        if not words:
            logger.info("No words for today, generating level %d", self.level_number)
            words = fallback_words(
                self.dictionary,
                self._rng,
                count=self.config.fallback_word_count,
                length=self.config.fallback_word_length,
            )
        return words

    def _start_level(self, words: List[str]) -> None:
        self.level_words = list(words)
        self.words_needed = len(set(self.level_words))
        self.grid = LetterGrid.from_words(self.level_words, rng=self._rng)
        self.found = self.store.load_found_words(self.identity)
        self.phase = "LEVEL_COMPLETE" if self.all_level_words_found else "PLAYING"
        logger.info(
            "Level %d: %d words of length %d (%d already found)",
            self.level_number,
            self.words_needed,
            self.word_length,
            len(self.found.level_words),
        )

    # ------------------------------------------------------------------
    # Results

    def _result(self, outcome: Outcome, message: str = "", **kwargs: Any) -> ActionResult:
        return ActionResult(
            outcome=outcome,
            message=message,
            coins=self.coins,
            lives=self.lives if self.config.lives_enabled else None,
            level_number=self.level_number,
            **kwargs
        )

    def _not_playing(self) -> ActionResult:
        messages = {
            "LOADING": "Game is still loading",
            "LEVEL_COMPLETE": "All words found, start the next level",
            "GAME_OVER": "Game over, restart to play again",
        }
        return self._result("NOT_PLAYING", messages.get(self.phase, ""))

    # ------------------------------------------------------------------
    # Player actions

    def select(self, row: int, column: int) -> int:
        """Select a column in a row. Returns the column actually selected."""
        if self.phase != "PLAYING":
            return self.grid.selection[row] if 0 <= row < len(self.grid.selection) else 0
        return self.grid.select(row, column)

    def move_selection(self, row: int, offset: float, spacing: float = 1.0) -> bool:
        """Snap a dragged row to the nearest column. Returns True if it changed."""
        if self.phase != "PLAYING":
            return False
        return self.grid.move_selection(row, offset, spacing)

    def confirm_word(self) -> ActionResult:
        """
        Submit the word spelled by the current selection.

        Returns:
            ActionResult; outcome is one of ACCEPTED, REJECTED, NO_SELECTION,
            LEVEL_COMPLETE, LEVEL_ADVANCED, GAME_OVER or NOT_PLAYING
        """
        if self.phase != "PLAYING":
            return self._not_playing()

        word = self.grid.candidate_word()
        if not word:
            return self._result("NO_SELECTION", "No letters selected")

        check = validate_word(word, self.dictionary, self.word_length)
        if not check.valid:
            return self._reject(check)

        word = check.word
        kind = "level" if word in self.level_words else "other"
        new_word = self.found.record(word, kind)
        if new_word:
            self.store.save_found_words(self.identity, self.found)

        self.total_words_found += 1
        self.coins += self.config.coins_per_word
        self.grid.consume_selection()

        if self.all_level_words_found:
            self.store.save_found_words(self.identity, self.found)
            self.highscore = self.store.update_highscore(self.score)
            self.phase = "LEVEL_COMPLETE"
            logger.info("All %d level words found", self.words_needed)
            return self._result(
                "LEVEL_COMPLETE",
                f"All {self.words_needed} words found!",
                word=word, kind=kind, new_word=new_word,
            )

        if self.grid.is_empty():
            self.highscore = self.store.update_highscore(self.score)
            self.level_number += 1
            self._start_level(self._fetch_level_words())
            return self._result(
                "LEVEL_ADVANCED",
                f"Level {self.level_number} - Find {self.words_needed} words!",
                word=word, kind=kind, new_word=new_word,
            )

        message = f"Found {word}!" if new_word else f"{word} was already found"
        return self._result("ACCEPTED", message, word=word, kind=kind, new_word=new_word)

    def _reject(self, check: WordCheck) -> ActionResult:
        if self.config.lives_enabled:
            self.lives = max(0, self.lives - 1)
            if self.lives == 0:
                self.phase = "GAME_OVER"
                self.highscore = self.store.update_highscore(self.score)
                logger.info("Game over with score %d", self.score)
                return self._result(
                    "GAME_OVER",
                    f"No more lives.\nScore: {self.score}, Highscore: {self.highscore}",
                    word=check.word, code=check.code,
                )
        return self._result("REJECTED", check.message, word=check.word, code=check.code)

    def reset_level(self) -> ActionResult:
        """
        Reshuffle the current level's words and count another try.

        Found words for the level are kept.
        """
        if self.phase in ("LOADING", "GAME_OVER"):
            return self._not_playing()

        self.tries += 1
        self.store.save_tries(self.tries)
        self._start_level(self.level_words)
        return self._result("RESET", f"Level reset, try {self.tries}")

    def restart_game(self) -> ActionResult:
        """Start over: counters, coins, lives and all saved found words are reset."""
        self.store.clear_progress()
        self.start()
        return self._result("RESTARTED", f"Level {self.level_number} - Find {self.words_needed} words!")

    def advance_level(self) -> ActionResult:
        """Move to the next level once enough level words have been found."""
        if self.phase in ("LOADING", "GAME_OVER"):
            return self._not_playing()

        if len(self.found.level_words) < self.words_needed:
            return self._result(
                "PROGRESS_REFUSED",
                f"Find at least {self.words_needed} words to progress",
            )

        self.highscore = self.store.update_highscore(self.score)
        self.level_number += 1
        self._start_level(self._fetch_level_words())
        return self._result(
            "LEVEL_ADVANCED",
            f"Level {self.level_number} - Find {self.words_needed} words!",
        )

    def add_random_word(self) -> ActionResult:
        """Spend coins to add the letters of a random word to the grid."""
        if self.phase != "PLAYING":
            return self._not_playing()

        if self.coins < self.config.add_word_cost:
            return self._result("INSUFFICIENT_COINS", "Not enough coins")

        word = self.dictionary.random_word(self.word_length)
        if not word:
            return self._result("UNAVAILABLE", "Could not find a word")

        self.coins -= self.config.add_word_cost
        self.grid.add_word(word)
        return self._result("PURCHASED", "Added random letters")

    def add_life(self) -> ActionResult:
        """Spend coins on one extra life."""
        if not self.config.lives_enabled:
            return self._result("UNAVAILABLE", "Lives are not used in this game")

        if self.phase != "PLAYING":
            return self._not_playing()

        if self.coins < self.config.add_life_cost:
            return self._result("INSUFFICIENT_COINS", "Not enough coins")

        self.coins -= self.config.add_life_cost
        self.lives += 1
        return self._result("PURCHASED", "Received an extra heart")
