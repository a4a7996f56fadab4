from __future__ import annotations

from typing import NamedTuple

from brailletrans.base import CAPITAL_MARKER, NUMBER_MARKER, PLACEHOLDER
from brailletrans.table import DEFAULT_TABLE, SymbolTable


class EncoderState(NamedTuple):
    number_mode: bool = False


def encode_char(
    state: EncoderState,
    char: str,
    table: SymbolTable = DEFAULT_TABLE,
) -> tuple[EncoderState, tuple[str, ...]]:
    """Encode one character into zero or more tokens.

    A space becomes an empty token, which turns into a double space once the
    tokens are joined.
    """
    if char == " ":
        return EncoderState(number_mode=False), ("",)

    digit_cell = table.cell_for_digit(char)
    if digit_cell is not None:
        if state.number_mode:
            return state, (str(digit_cell),)
        return EncoderState(number_mode=True), (NUMBER_MARKER, str(digit_cell))

    tokens = []
    if char.isupper():
        tokens.append(CAPITAL_MARKER)
        char = char.lower()
    cell = table.cell_for_letter(char)
    tokens.append(str(cell) if cell is not None else PLACEHOLDER)
    return EncoderState(number_mode=False), tuple(tokens)


def encode(text: str, table: SymbolTable = DEFAULT_TABLE) -> str:
    """Translate English text to Braille cell notation.

    Examples:
        >>> encode("Ab3")
        '..... O..... O.O... .O.OOO OO....'

        >>> encode("a b")
        'O.....  O.O...'
    """
    state = EncoderState()
    tokens: list[str] = []
    for char in text:
        state, emitted = encode_char(state, char, table)
        tokens.extend(emitted)
    return " ".join(tokens).strip()


__all__ = ("EncoderState", "encode_char", "encode")
