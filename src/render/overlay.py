"""
Overlay of a single square: protection and threat rings, move boxes.

The i-th entry of a relation gets the i-th ring/box, so the more pieces are involved, the more nested shapes are drawn:
* protectors: rings of radius 1, 3, 5, ...
* threateners: rings of radius 2, 4, 6, ... (in between the protection rings)
* white moves: boxes inset by 0, 2, 4, ... pixels
* black moves: boxes inset by 1, 3, 5, ... pixels (in between the white boxes)
Nothing limits the ring radius or box inset to the square size, so a heavily contested square overflows its cell.
"""

from typing import Callable, Sequence

from src.chess.board import OccupantLookup
from src.chess.coverage import SquareAnnotation
from src.chess.pieces import Color
from src.chess.square import Square
from src.core.config import DiagramConfig
from src.core.exceptions import DataError
from src.render.instructions import Box, Circle, DrawInstruction, Point, Rectangle

# (index in the relation) -> ring radius / box inset
SizeFn = Callable[[int], int]


def protect_radius(i: int) -> int:
    return 2 * i + 1


def threat_radius(i: int) -> int:
    return 2 * i + 2


def white_move_inset(i: int) -> int:
    return 2 * i


def black_move_inset(i: int) -> int:
    return 2 * i + 1


def encode_overlay(
    annotation: SquareAnnotation,
    box: Box,
    center: Point,
    color_of: OccupantLookup,
    config: DiagramConfig,
) -> list[DrawInstruction]:
    """Draw instructions for one square, in painting order: protection, threats, white moves, black moves."""
    board_dimensions = (config.board_size, config.board_size)
    for source in _all_sources(annotation):
        if not source.is_within_bounds(board_dimensions):
            raise DataError(
                f"Annotation refers to square {source.to_algebraic()!r}, which is not on the board."
            )

    instructions: list[DrawInstruction] = []
    instructions.extend(
        _rings(
            annotation.protectors,
            center,
            protect_radius,
            color_of,
            {
                Color.WHITE: config.white_protect_color,
                Color.BLACK: config.black_protect_color,
            },
        )
    )
    instructions.extend(
        _rings(
            annotation.threateners,
            center,
            threat_radius,
            color_of,
            {
                Color.WHITE: config.white_threat_color,
                Color.BLACK: config.black_threat_color,
            },
        )
    )
    instructions.extend(
        _boxes(annotation.white_moves, box, white_move_inset, config.white_move_color)
    )
    instructions.extend(
        _boxes(annotation.black_moves, box, black_move_inset, config.black_move_color)
    )
    return instructions


def _rings(
    sources: Sequence[Square],
    center: Point,
    radius: SizeFn,
    color_of: OccupantLookup,
    palette: dict[Color, str],
) -> list[Circle]:
    """Rings are colored after the piece standing on the source square"""
    rings: list[Circle] = []
    for i, source in enumerate(sources):
        occupant = color_of(source)
        if occupant not in palette:
            raise DataError(
                f"No piece found on {source.to_algebraic()!r}, cannot pick a color for its ring."
            )
        rings.append(Circle(center, radius(i), palette[occupant]))
    return rings


def _boxes(
    sources: Sequence[Square], box: Box, inset: SizeFn, color: str
) -> list[Rectangle]:
    return [Rectangle(box.inset(inset(i)), color) for i in range(len(sources))]


def _all_sources(annotation: SquareAnnotation) -> list[Square]:
    return [
        *annotation.protectors,
        *annotation.threateners,
        *annotation.white_moves,
        *annotation.black_moves,
    ]
