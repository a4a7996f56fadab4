from brailletrans.base import (
    CAPITAL_MARKER,
    CELL_DOTS,
    FLAT,
    NUMBER_MARKER,
    PLACEHOLDER,
    RAISED,
    EmptyInputError,
    InvalidCellError,
)
from brailletrans.cell import Cell
from brailletrans.table import DEFAULT_TABLE, SymbolTable
from brailletrans.classify import Kind, classify
from brailletrans.decoder import decode
from brailletrans.encoder import encode
from brailletrans.translator import TranslationOptions, translate

__all__ = (
    "CAPITAL_MARKER",
    "CELL_DOTS",
    "FLAT",
    "NUMBER_MARKER",
    "PLACEHOLDER",
    "RAISED",
    "EmptyInputError",
    "InvalidCellError",
    "Cell",
    "DEFAULT_TABLE",
    "SymbolTable",
    "Kind",
    "classify",
    "decode",
    "encode",
    "TranslationOptions",
    "translate",
)
