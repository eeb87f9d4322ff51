"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. The renderer takes its size from the config (max_coord), so keep this as the default only
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' (or 'A1' - 'H8') get converted to (1,1) - (8,8)"""
        file = ord(sq[0].lower()) - ord("a") + 1
        rank = int(sq[1:])
        return cls(file, rank)

    @classmethod
    def from_indices(cls, row: int, col: int, max_coord: int) -> Square:
        """Diagram indices: row counts files from the left (0 = a-file), col counts ranks from the top (0 = last rank)"""
        return cls(row + 1, max_coord + 1 - col)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def to_indices(self, max_coord: int) -> tuple[int, int]:
        """reverse of `from_indices`"""
        return self.file - 1, max_coord + 1 - self.rank

    def is_within_bounds(self, dimensions: tuple[int, int] = BOARD_DIMENSIONS) -> bool:
        return (1 <= self.file <= dimensions[0]) and (1 <= self.rank <= dimensions[1])
