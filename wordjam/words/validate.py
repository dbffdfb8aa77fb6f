"""
Word validation for submitted candidates.

A candidate is accepted only when it is a dictionary word AND has the length
of the current level's words.
"""

from typing import List

from .dictionary import Dictionary
from .models import ValidationError, WordCheck


def validate_word(word: str, dictionary: Dictionary, required_length: int) -> WordCheck:
    """
    Check a candidate word against the dictionary and the required length.

    Returns a WordCheck with:
    - valid: True if the word passes all checks
    - errors: EMPTY_WORD, INVALID_WORD or WRONG_LENGTH
    """
    word = (word or "").upper()
    errors: List[ValidationError] = []

    if not word:
        errors.append(ValidationError(
            code="EMPTY_WORD",
            message="No letters selected",
        ))
    elif not dictionary.is_valid_word(word):
        errors.append(ValidationError(
            code="INVALID_WORD",
            message=f"'{word}' is not a valid dictionary word",
            word=word,
        ))
    elif len(word) != required_length:
        errors.append(ValidationError(
            code="WRONG_LENGTH",
            message=f"'{word}' has {len(word)} letters, words in this level have {required_length}",
            word=word,
        ))

    return WordCheck(word=word, valid=not errors, errors=errors)
