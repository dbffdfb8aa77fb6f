"""
Letter grid and per-row selection.

Row ``r`` of the grid holds the ``r``-th letter of every level word, shuffled
independently of the other rows. The player slides each row to pick one
letter; the picked letters read top to bottom form the candidate word.
"""

import math
import random
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .models import CellView, GridSnapshot


EMPTY = " "


def shuffle_row(row: List[str], rng: random.Random) -> List[str]:
    """Return a uniformly shuffled copy of a row (Fisher-Yates)."""
    shuffled = list(row)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def build_rows(words: List[str], rng: random.Random) -> List[List[str]]:
    """
    Distribute the letters of the words into rows and shuffle each row.

    Column ``c`` initially holds word ``c``; positions past the end of a
    shorter word are EMPTY.
    """
    if not words:
        return []

    max_length = max(len(word) for word in words)
    rows = [[EMPTY] * len(words) for _ in range(max_length)]

    for word_index, word in enumerate(words):
        for letter_index, letter in enumerate(word):
            rows[letter_index][word_index] = letter.upper()

    return [shuffle_row(row, rng) for row in rows]


class LetterGrid(BaseModel):
    """
    Owns the letter matrix and the selected column of each row.

    Every mutating method ends by clamping the selection, so callers can pass
    out-of-range rows or columns (e.g. mid-drag) without faults.

    Attributes:
        rows: Rows of cells, each an uppercase letter or EMPTY
        selection: Selected column index for each row
        seed: Optional random seed for shuffles
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    rows: List[List[str]] = Field(default_factory=list)
    selection: List[int] = Field(default_factory=list)
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and a centered selection."""
        self._rng = random.Random(self.seed)
        if len(self.selection) != len(self.rows):
            self.initialize_selection()

    @classmethod
    def from_words(
        cls,
        words: List[str],
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "LetterGrid":
        """
        Factory method to build a shuffled grid from a level's words.

        Args:
            words: The level words whose letters populate the grid
            rng: Random source to shuffle with (shared with the caller)
            seed: Seed for a new random source when rng is not given

        Returns:
            A compacted grid with every row's selection centered
        """
        grid = cls(seed=seed)
        if rng is not None:
            grid._rng = rng
        grid.rows = build_rows(words, grid._rng)
        grid.compact()
        grid.initialize_selection()
        return grid

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def letters_remaining(self) -> int:
        return sum(self._occupied(row) for row in range(len(self.rows)))

    def _occupied(self, row: int) -> int:
        """Number of letters in a row."""
        return sum(1 for cell in self.rows[row] if cell != EMPTY)

    def _clamp_row(self, row: int) -> int:
        return max(0, min(row, len(self.rows) - 1))

    def initialize_selection(self) -> None:
        """Select the middle letter of every row."""
        self.selection = [self._occupied(row) // 2 for row in range(len(self.rows))]

    def candidate_word(self) -> str:
        """Build the word spelled by the selected letters, skipping empty cells."""
        if not self.rows or not self.rows[0]:
            return ""

        letters = []
        for row, cells in enumerate(self.rows):
            col = self.selection[row] if row < len(self.selection) else 0
            if 0 <= col < len(cells) and cells[col] != EMPTY:
                letters.append(cells[col])
        return "".join(letters)

    def select(self, row: int, column: int) -> int:
        """
        Select a column in a row, clamping both indices.

        Returns:
            The column index now selected (0 on an empty grid)
        """
        if not self.rows:
            return 0
        row = self._clamp_row(row)
        last = max(0, self._occupied(row) - 1)
        self.selection[row] = max(0, min(column, last))
        return self.selection[row]

    def move_selection(self, row: int, offset: float, spacing: float = 1.0) -> bool:
        """
        Snap a row's selection to the column nearest a continuous position.

        Args:
            row: Row being dragged
            offset: Distance from the first column's center to the viewport
                center, in the same units as spacing
            spacing: Distance between adjacent column centers

        Returns:
            True if the selected column changed
        """
        if not self.rows:
            return False
        if spacing <= 0:
            spacing = 1.0

        row = self._clamp_row(row)
        last = max(0, self._occupied(row) - 1)
        # Round half up so a drag exactly between two letters moves forward
        index = max(0, min(math.floor(offset / spacing + 0.5), last))

        if index == self.selection[row]:
            return False
        self.selection[row] = index
        return True

    def consume_selection(self) -> str:
        """
        Remove the selected letters from the grid.

        Marks each selected cell empty, compacts the grid, then moves any
        selection that fell off the end of its row back onto a letter.

        Returns:
            The letters that were removed, top to bottom
        """
        consumed = []
        for row, col in enumerate(self.selection):
            if row < len(self.rows) and 0 <= col < len(self.rows[row]):
                if self.rows[row][col] != EMPTY:
                    consumed.append(self.rows[row][col])
                self.rows[row][col] = EMPTY

        self.compact()
        self.auto_advance()
        return "".join(consumed)

    def compact(self) -> None:
        """Remove empty cells and rows, then pad rows back to equal length."""
        kept_rows = []
        kept_selection = []
        for row, cells in enumerate(self.rows):
            letters = [cell for cell in cells if cell != EMPTY]
            if letters:
                kept_rows.append(letters)
                kept_selection.append(self.selection[row] if row < len(self.selection) else 0)

        max_length = max((len(row) for row in kept_rows), default=0)
        for row in kept_rows:
            row.extend([EMPTY] * (max_length - len(row)))

        self.rows = kept_rows
        self.selection = kept_selection
        self.validate_selection()

    def auto_advance(self) -> None:
        """Step selections past the last letter of their row one column left."""
        for row in range(len(self.rows)):
            current = self.selection[row]
            if current >= self._occupied(row):
                self.selection[row] = max(0, current - 1)
        self.validate_selection()

    def validate_selection(self) -> None:
        """Clamp every selection to the letters of its row."""
        while len(self.selection) < len(self.rows):
            self.selection.append(0)
        del self.selection[len(self.rows):]

        for row in range(len(self.rows)):
            last = max(0, self._occupied(row) - 1)
            self.selection[row] = max(0, min(self.selection[row], last))

    def add_word(self, word: str) -> None:
        """
        Add a word's letters to the grid, one per row, and reshuffle.

        Rows are added when the word is longer than the grid is tall.
        """
        word = word.strip().upper()
        while len(self.rows) < len(word):
            self.rows.append([])
            self.selection.append(0)

        for row in range(len(self.rows)):
            letters = [cell for cell in self.rows[row] if cell != EMPTY]
            if row < len(word):
                letters.append(word[row])
            self.rows[row] = shuffle_row(letters, self._rng)

        self.compact()

    def is_empty(self) -> bool:
        """True when no letters are left."""
        return not self.rows or all(cell == EMPTY for row in self.rows for cell in row)

    def snapshot(self) -> GridSnapshot:
        """Immutable view of the cells and selection for rendering."""
        rows = []
        for row, cells in enumerate(self.rows):
            selected_col = self.selection[row] if row < len(self.selection) else 0
            rows.append([
                CellView(
                    letter=None if cell == EMPTY else cell,
                    selected=col == selected_col and cell != EMPTY,
                )
                for col, cell in enumerate(cells)
            ])
        return GridSnapshot(
            rows=rows,
            selection=list(self.selection),
            candidate=self.candidate_word(),
        )
