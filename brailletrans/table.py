from __future__ import annotations

from types import MappingProxyType
from typing import Final, Iterator, Mapping

from brailletrans.base import CELL_DOTS, InvalidCellError
from brailletrans.cell import Cell

braille_alphabet: Final[dict[str, str]] = {
    "O.....": "a",
    "O.O...": "b",
    "OO....": "c",
    "OO.O..": "d",
    "O..O..": "e",
    "OOO...": "f",
    "OOOO..": "g",
    "O.O.O.": "h",
    ".OO...": "i",
    ".OOO..": "j",
    "O...O.": "k",
    "O.OO..": "l",
    "OO..O.": "m",
    "OO.OO.": "n",
    "O..OO.": "o",
    "OOO.O.": "p",
    "OOOOO.": "q",
    "O.OOO.": "r",
    ".OO.O.": "s",
    ".OOOO.": "t",
    "O...OO": "u",
    "O.O.OO": "v",
    ".OOO.O": "w",
    "OO..OO": "x",
    "OO.OOO": "y",
    "O..OOO": "z",
}

digit_letters: Final[dict[str, str]] = {
    "1": "a",
    "2": "b",
    "3": "c",
    "4": "d",
    "5": "e",
    "6": "f",
    "7": "g",
    "8": "h",
    "9": "i",
    "0": "j",
}


class SymbolTable:
    """Read-only, two-way mapping between letters, digits and Braille cells.

    The cell to letter direction is the canonical one; the letter to cell map
    is built from it by inversion. Digits go through a fixed digit to letter
    table and share their cells with the letters a-j.

    Lookups return None for anything not in the table, including malformed
    cell strings.
    """

    def __init__(
        self,
        alphabet: Mapping[str, str] = braille_alphabet,
        digits: Mapping[str, str] = digit_letters,
    ) -> None:
        cells = {Cell.from_str(cell): letter for cell, letter in alphabet.items()}
        letters = {letter: cell for cell, letter in cells.items()}
        if len(letters) != len(cells):
            raise ValueError("Braille alphabet maps more than one cell to the same letter")
        if any(len(cell) != CELL_DOTS for cell in cells):
            raise InvalidCellError(f"Braille alphabet cells must have {CELL_DOTS} dots")
        if not set(digits.values()) <= set(letters):
            raise ValueError("Digit table refers to letters missing from the alphabet")

        self._letters: Mapping[Cell, str] = MappingProxyType(cells)
        self._cells: Mapping[str, Cell] = MappingProxyType(dict(sorted(letters.items())))
        self._digit_letters: Mapping[str, str] = MappingProxyType(dict(digits))
        self._letter_digits: Mapping[str, str] = MappingProxyType(
            {letter: digit for digit, letter in digits.items()}
        )

    def cell_for_letter(self, letter: str) -> Cell | None:
        return self._cells.get(letter)

    def letter_for_cell(self, cell: Cell | str) -> str | None:
        if isinstance(cell, str):
            try:
                cell = Cell.from_str(cell)
            except InvalidCellError:
                return None
        return self._letters.get(cell)

    def cell_for_digit(self, digit: str) -> Cell | None:
        letter = self._digit_letters.get(digit)
        return self._cells.get(letter) if letter is not None else None

    def digit_for_letter(self, letter: str) -> str | None:
        return self._letter_digits.get(letter)

    def __iter__(self) -> Iterator[tuple[str, Cell]]:
        return iter(self._cells.items())

    def __len__(self) -> int:
        return len(self._cells)


DEFAULT_TABLE: Final[SymbolTable] = SymbolTable()
