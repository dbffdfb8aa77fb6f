from typing import List

from ..game.models import GridSnapshot, SessionStatus


def render_row(cells) -> str:
    """Render one row; the selected letter is bracketed, empty cells are dots."""
    parts = []
    for cell in cells:
        if cell.letter is None:
            parts.append(' . ')
        elif cell.selected:
            parts.append(f'[{cell.letter}]')
        else:
            parts.append(f' {cell.letter} ')
    return ''.join(parts)


def render_snapshot(snapshot: GridSnapshot) -> str:
    """Render the grid to a string, one numbered line per row."""
    if not snapshot.rows:
        return '(empty grid)'

    lines = [f'{i}: {render_row(cells)}' for i, cells in enumerate(snapshot.rows)]
    lines.append(f'Word: {snapshot.candidate or "-"}')
    return '\n'.join(lines)


def render_status(status: SessionStatus) -> str:
    """Render the session counters on one line."""
    parts: List[str] = [
        f'Level {status.level_number}',
        f'Words {status.level_words_found}/{status.words_needed}',
        f'Coins {status.coins}',
        f'Score {status.score}',
        f'Best {status.highscore}',
    ]
    if status.lives is not None:
        parts.append(f'Lives {status.lives}')
    return ' | '.join(parts)
