from __future__ import annotations

from typing import Iterator

from bitarray import frozenbitarray

from brailletrans.base import CELL_COLS, FLAT, RAISED, InvalidCellError


class Cell:
    """A Braille cell as an immutable sequence of raised/flat dots.

    Dots are stored in reading order of the ASCII notation, i.e. row by row
    through a grid two dots wide. For a six-dot cell that order is dots
    1, 4, 2, 5, 3, 6.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: frozenbitarray) -> None:
        self.bits = bits

    @classmethod
    def from_str(cls, text: str) -> Cell:
        """Parse a cell written with `O` for raised and `.` for flat dots.

        Args:
            text: The cell notation, e.g. ``"O.O..."``.

        Returns:
            The parsed cell.

        Raises:
            InvalidCellError: If the text is empty or holds any other symbol.

        Examples:
            >>> Cell.from_str("OO.O..").dots
            (1, 4, 5)
        """
        if not text or any(ch not in (RAISED, FLAT) for ch in text):
            raise InvalidCellError(f"Not a Braille cell: {text!r}")
        return cls(frozenbitarray("".join("1" if ch == RAISED else "0" for ch in text)))

    @property
    def raised(self) -> int:
        return self.bits.count(1)

    @property
    def dots(self) -> tuple[int, ...]:
        """Standard dot numbers of the raised dots, in ascending order."""
        rows = len(self.bits) // CELL_COLS
        return tuple(
            sorted(
                i // CELL_COLS + 1 + rows * (i % CELL_COLS)
                for i, bit in enumerate(self.bits)
                if bit
            )
        )

    def __iter__(self) -> Iterator[bool]:
        return (bool(bit) for bit in self.bits)

    def __len__(self) -> int:
        return len(self.bits)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cell):
            return self.bits == other.bits
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.bits)

    def __str__(self) -> str:
        return "".join(RAISED if bit else FLAT for bit in self.bits)

    def __repr__(self) -> str:
        return f"Cell({str(self)!r})"
