from typing import Final

RAISED: Final[str] = "O"
FLAT: Final[str] = "."

CELL_DOTS: Final[int] = 6
CELL_COLS: Final[int] = 2

# Out-of-band control cells, never part of the letter table
CAPITAL_MARKER: Final[str] = "....."
NUMBER_MARKER: Final[str] = ".O.OOO"

PLACEHOLDER: Final[str] = "?"

BRAILLE_CHARS: Final[frozenset[str]] = frozenset({RAISED, FLAT, " "})


class EmptyInputError(ValueError):
    pass


class InvalidCellError(ValueError):
    pass
