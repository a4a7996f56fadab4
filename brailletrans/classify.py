from __future__ import annotations

from enum import Enum

from brailletrans.base import BRAILLE_CHARS, EmptyInputError


class Kind(Enum):
    BRAILLE = "braille"
    ENGLISH = "english"


def classify(text: str) -> Kind:
    """Return whether the text is written in Braille cell notation or in English.

    Text is taken to be Braille when it consists only of `O`, `.` and spaces.
    English made up solely of those characters is therefore read as Braille.

    Raises:
        EmptyInputError: If the text is empty or only whitespace.

    Examples:
        >>> classify("O..... O.O...")
        <Kind.BRAILLE: 'braille'>

        >>> classify("Hello")
        <Kind.ENGLISH: 'english'>
    """
    if not text.strip():
        raise EmptyInputError("Nothing to translate")
    return Kind.BRAILLE if set(text) <= BRAILLE_CHARS else Kind.ENGLISH


__all__ = ("Kind", "classify")
