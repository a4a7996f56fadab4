from __future__ import annotations

from dataclasses import dataclass

from brailletrans.classify import Kind, classify
from brailletrans.decoder import decode
from brailletrans.encoder import encode
from brailletrans.table import DEFAULT_TABLE, SymbolTable


@dataclass(frozen=True)
class TranslationOptions:
    """Switches for the Braille to English direction.

    Attributes:
        strict: End number mode at word gaps and at letters that have no digit.
        word_spaces: Turn the double space between Braille words into an English space.
    """

    strict: bool = False
    word_spaces: bool = False


def translate(
    text: str,
    options: TranslationOptions | None = None,
    table: SymbolTable = DEFAULT_TABLE,
) -> str:
    """Detect which notation the text is in and translate it to the other one.

    Raises:
        EmptyInputError: If the text is empty or only whitespace.
    """
    options = options if options is not None else TranslationOptions()
    if classify(text) is Kind.BRAILLE:
        return decode(text, table=table, strict=options.strict, word_spaces=options.word_spaces)
    return encode(text, table=table)


__all__ = ("TranslationOptions", "translate")
