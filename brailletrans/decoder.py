from __future__ import annotations

from typing import NamedTuple

from brailletrans.base import CAPITAL_MARKER, NUMBER_MARKER, PLACEHOLDER
from brailletrans.table import DEFAULT_TABLE, SymbolTable


class DecoderState(NamedTuple):
    capital_pending: bool = False
    number_mode: bool = False


def decode_token(
    state: DecoderState,
    token: str,
    table: SymbolTable = DEFAULT_TABLE,
    strict: bool = False,
    word_spaces: bool = False,
) -> tuple[DecoderState, str]:
    """Decode a single space-delimited token.

    Args:
        state: The state left by the previous token.
        token: A cell, a marker cell, or an empty string for a gap between words.
        table: The symbol table to look cells up in.
        strict: End number mode at word gaps and at letters without a digit
            counterpart, instead of keeping it until the end of the input.
        word_spaces: Decode each word gap as a space instead of dropping it.

    Returns:
        The new state and the text emitted for the token, which may be empty.
    """
    if token == CAPITAL_MARKER:
        return state._replace(capital_pending=True), ""
    if token == NUMBER_MARKER:
        return state._replace(number_mode=True), ""

    if not token:
        if strict:
            state = state._replace(number_mode=False)
        return state, " " if word_spaces else ""

    letter = table.letter_for_cell(token)
    if letter is None:
        return state, PLACEHOLDER

    char = letter
    if state.capital_pending:
        char = char.upper()
        state = state._replace(capital_pending=False)

    if state.number_mode:
        digit = table.digit_for_letter(letter)
        if digit is not None:
            char = digit
        elif strict:
            state = state._replace(number_mode=False)
        else:
            char = PLACEHOLDER

    return state, char


def decode(
    text: str,
    table: SymbolTable = DEFAULT_TABLE,
    strict: bool = False,
    word_spaces: bool = False,
) -> str:
    """Translate Braille cell notation to English.

    Cells are separated by single spaces. By default the gaps between words
    are dropped and number mode lasts until the end of the input, so
    ``decode(encode("a 1 b"))`` gives ``"a12"``; see `decode_token` for the
    `strict` and `word_spaces` switches.

    Examples:
        >>> decode("..... O..... O.O...")
        'Ab'

        >>> decode(".O.OOO O..... O.O...")
        '12'
    """
    state = DecoderState()
    chars = []
    for token in text.split(" "):
        state, emitted = decode_token(state, token.strip(), table, strict, word_spaces)
        chars.append(emitted)
    return "".join(chars)


__all__ = ("DecoderState", "decode_token", "decode")
