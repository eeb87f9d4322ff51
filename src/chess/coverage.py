"""
Coverage data: for each square, which other squares protect it, threaten it, or can move onto it.

Computing coverage is someone else's job. This module only defines the shape the renderer reads,
plus a converter for the nested dictionary format coverage providers hand out.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Self

from src.chess.square import Square
from src.core.exceptions import DataError

# Keys used by the nested coverage dictionaries
PROTECTED_BY = "is_protected_by"
THREATENED_BY = "is_threatened_by"
WHITE_CAN_MOVE_HERE = "white_can_move_here"
BLACK_CAN_MOVE_HERE = "black_can_move_here"
RELATIONS = (PROTECTED_BY, THREATENED_BY, WHITE_CAN_MOVE_HERE, BLACK_CAN_MOVE_HERE)


@dataclass(frozen=True)
class SquareAnnotation:
    """
    The four relations of one square. Each is a sequence of source squares.
    ---
    NOTE: order matters. The index of a source square in its sequence decides the size of its overlay,
    so never sort these.
    """

    protectors: tuple[Square, ...] = ()
    threateners: tuple[Square, ...] = ()
    white_moves: tuple[Square, ...] = ()
    black_moves: tuple[Square, ...] = ()

    @classmethod
    def from_dict(cls, relations: Any, owner: str = "?") -> Self:
        """Build from e.g. {"is_protected_by": ["D1", "F1"], "white_can_move_here": ["E2"]}. Missing keys are empty.

        `owner` is the name of the annotated square, only used in error messages.
        """
        if not isinstance(relations, Mapping):
            raise DataError(
                f"Coverage of square {owner!r} should map relation names to squares, got {relations!r}."
            )
        unknown = [key for key in relations.keys() if key not in RELATIONS]
        if unknown:
            raise DataError(
                f"Unknown relation(s) {unknown!r} in coverage of square {owner!r}. Pick from {', '.join(RELATIONS)}."
            )
        return cls(
            protectors=_parse_squares(relations.get(PROTECTED_BY, ()), owner),
            threateners=_parse_squares(relations.get(THREATENED_BY, ()), owner),
            white_moves=_parse_squares(relations.get(WHITE_CAN_MOVE_HERE, ()), owner),
            black_moves=_parse_squares(relations.get(BLACK_CAN_MOVE_HERE, ()), owner),
        )


# Coverage for the whole board. Squares without an entry carry no annotation.
CoverageMap = Mapping[Square, SquareAnnotation]


def coverage_from_dict(raw: Mapping[str, Any]) -> dict[Square, SquareAnnotation]:
    """Convert {"E4": {"is_threatened_by": ["D5"], ...}, ...} (square names in algebraic notation) into a CoverageMap"""
    return {
        _parse_square(name): SquareAnnotation.from_dict(relations, str(name))
        for name, relations in raw.items()
    }


def _parse_squares(names: Any, owner: str) -> tuple[Square, ...]:
    # a bare string would otherwise be split into characters
    if not isinstance(names, (list, tuple)):
        raise DataError(
            f"Coverage of square {owner!r} should list source squares, got {names!r}."
        )
    return tuple(_parse_square(name) for name in names)


def _parse_square(name: Any) -> Square:
    if isinstance(name, Square):
        return name
    if not (
        isinstance(name, str)
        and len(name) >= 2
        and name[0].isalpha()
        and name[1:].isdigit()
    ):
        raise DataError(f"Cannot interpret {name!r} as a square name.")
    return Square.from_algebraic(name)
