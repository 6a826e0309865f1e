"""
Position-based OCR correction for 9-character grid coordinate candidates.

Each field of a candidate has a fixed character class, so a glyph in the
wrong class can be mapped back to its usual look-alike:

    position 0    sector     left unchanged
    positions 1-4 zone       letters -> digits
    positions 5-6 block      digits  -> letters
    positions 7-8 precision  letters -> digits
"""

from typing import Dict

CANDIDATE_LENGTH = 9

LETTER_TO_DIGIT: Dict[str, str] = {
    "O": "0",
    "I": "1",
    "Z": "2",
    "S": "5",
    "G": "6",
    "B": "8",
    "Q": "0",
}

DIGIT_TO_LETTER: Dict[str, str] = {
    "0": "O",
    "1": "I",
    "2": "Z",
    "5": "S",
    "6": "G",
    "8": "B",
}

DIGIT_POSITIONS = (1, 2, 3, 4, 7, 8)
LETTER_POSITIONS = (5, 6)


def apply_corrections(candidate: str) -> str:
    """
    Replace look-alike glyphs according to their position.

    Candidates that are not exactly 9 characters are returned unchanged.
    Unmapped characters are left as they are, so applying the correction
    twice gives the same result as applying it once.
    """
    if len(candidate) != CANDIDATE_LENGTH:
        return candidate

    corrected = list(candidate)

    for i in DIGIT_POSITIONS:
        char = corrected[i]
        if char.isalpha():
            corrected[i] = LETTER_TO_DIGIT.get(char, char)

    for i in LETTER_POSITIONS:
        char = corrected[i]
        if char.isdigit():
            corrected[i] = DIGIT_TO_LETTER.get(char, char)

    return "".join(corrected)
