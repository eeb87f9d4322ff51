"""
Occupant lookup for the diagram: which piece (and so which color) sits on a square.

The renderer only needs `color_of`, so any callable with the same signature can stand in for a Board.
"""

from dataclasses import dataclass
from typing import Callable, Self

from src.chess.pieces import FEN_TO_PIECE, Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import DataError

# What the renderer asks of the board state
OccupantLookup = Callable[[Square], Color]


@dataclass
class Board:
    position: dict[Square, Piece]

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        A full FEN string is accepted too, only the first (space separated) field is read.
        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        * black pieces are on the 8th rank, read from the a-file to the h-file
        * ranks 6 through 3 have 8 consecutive empty squares
        * 1st rank are the white pieces (capital letters)
        """
        placement = fen_str.strip().split(" ")[0]
        fen_by_ranks = placement.split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[1]:
            raise DataError(
                f"FEN placement {placement!r} should describe {BOARD_DIMENSIONS[1]} ranks."
            )

        position: dict[Square, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - rank_idx
            file = 1
            for character in fen_one_rank:
                if character.isdigit():
                    # A number denotes the amount of empty squares after each other
                    for _ in range(int(character)):
                        position[Square(file, rank)] = Piece.empty()
                        file += 1
                elif character.lower() in FEN_TO_PIECE:
                    position[Square(file, rank)] = Piece.from_fen(character)
                    file += 1
                else:
                    raise DataError(
                        f"Unknown piece {character!r} in FEN placement {placement!r}."
                    )
            if file != BOARD_DIMENSIONS[0] + 1:
                raise DataError(
                    f"Rank {rank} of FEN placement {placement!r} does not cover {BOARD_DIMENSIONS[0]} files."
                )
        return cls(position)

    def piece(self, square: Square) -> Piece:
        return self.position.get(square, Piece.empty())

    def color_of(self, square: Square) -> Color:
        """Color of the occupant. Empty (or off-board) squares give Color.NONE"""
        return self.piece(square).color
