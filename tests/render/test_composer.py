"""Unit tests for /src/render/composer.py"""

import pytest

from src.chess.board import Board
from src.chess.coverage import SquareAnnotation
from src.chess.square import Square
from src.core.config import resolve_config
from src.core.exceptions import ConfigError, DataError
from src.render.canvas import InstructionRecorder
from src.render.composer import compose_frame, draw_frame
from src.render.instructions import Box, Circle, Line, Rectangle, Text

sq = Square.from_algebraic
NUM_STATIC = 2 + 2 * 7 + 2 * 8  # background + border, grid lines, labels


def test_bare_board(starting_board: Board) -> None:
    """No coverage at all: only the static parts of the board"""
    instructions = compose_frame({}, starting_board.color_of)
    assert len(instructions) == NUM_STATIC
    assert instructions[0] == Rectangle(Box(0, 0, 295, 295), "#FFFFFF", filled=True)
    assert instructions[1] == Rectangle(Box(21, 21, 293, 293), "#808080")


def test_static_parts_order(starting_board: Board) -> None:
    instructions = compose_frame({}, starting_board.color_of)
    grid = instructions[2:16]
    labels = instructions[16:]
    assert all(isinstance(instruction, Line) for instruction in grid)
    # vertical, then horizontal line per separator
    assert grid[0] == Line((55, 22), (55, 292), "#C0C0C0")
    assert grid[1] == Line((22, 55), (292, 55), "#C0C0C0")

    assert all(isinstance(instruction, Text) for instruction in labels)
    assert [label.glyph for label in labels[:4]] == ["A", "8", "B", "7"]
    assert labels[-2].glyph == "H"
    assert labels[-1].glyph == "1"


def test_toggles(starting_board: Board) -> None:
    instructions = compose_frame(
        {}, starting_board.color_of, {"grid": False, "letters": False}
    )
    assert len(instructions) == 2


def test_labels_skipped_without_glyphs(starting_board: Board) -> None:
    """Missing glyph source is not an error"""
    instructions = compose_frame({}, starting_board.color_of, glyphs=False)
    assert len(instructions) == NUM_STATIC - 16
    assert not any(isinstance(instruction, Text) for instruction in instructions)


def test_overlays_follow_static_parts(
    starting_board: Board, e3_coverage: dict[Square, SquareAnnotation]
) -> None:
    instructions = compose_frame(e3_coverage, starting_board.color_of)
    overlays = instructions[NUM_STATIC:]
    assert len(overlays) == 3 + 4

    # squares are drawn file by file: e3 completely before f3
    e3_box = Box(158, 192, 190, 224)
    f3_box = Box(192, 192, 224, 224)
    e3_center = (174.5, 208.5)
    f3_center = (208.5, 208.5)
    assert overlays == [
        Circle(e3_center, 1, "#00FF00"),
        Circle(e3_center, 3, "#00FF00"),
        Rectangle(e3_box, "#00FF00"),
        Circle(f3_center, 1, "#00FF00"),
        Circle(f3_center, 3, "#00FF00"),
        Rectangle(f3_box, "#00FF00"),
        Rectangle(f3_box.inset(2), "#00FF00"),
    ]


def test_rendering_is_idempotent(
    starting_board: Board, e3_coverage: dict[Square, SquareAnnotation]
) -> None:
    config = resolve_config({"square_width": 40})
    first = compose_frame(e3_coverage, starting_board.color_of, config)
    second = compose_frame(e3_coverage, starting_board.color_of, config)
    assert first == second


def test_invalid_config_fails_before_drawing(starting_board: Board) -> None:
    canvas = InstructionRecorder()
    with pytest.raises(ConfigError):
        draw_frame(canvas, {}, starting_board.color_of, {"margni": 3})
    assert canvas.instructions == []


def test_invalid_coverage_leaves_canvas_untouched(starting_board: Board) -> None:
    """A square 'protected' by an empty square: nothing reaches the canvas"""
    canvas = InstructionRecorder()
    coverage = {sq("h1"): SquareAnnotation(protectors=(sq("e4"),))}
    with pytest.raises(DataError, match="e4"):
        draw_frame(canvas, coverage, starting_board.color_of)
    assert canvas.instructions == []


def test_draw_frame_submits_in_order(
    starting_board: Board, e3_coverage: dict[Square, SquareAnnotation]
) -> None:
    canvas = InstructionRecorder(has_glyphs=False)
    draw_frame(canvas, e3_coverage, starting_board.color_of)
    assert canvas.instructions == compose_frame(
        e3_coverage, starting_board.color_of, glyphs=False
    )


def test_smaller_board(starting_board: Board) -> None:
    """A 4x4 diagram only visits 16 squares, and coverage outside it is never looked at"""
    coverage = {
        sq("a4"): SquareAnnotation(white_moves=(sq("a2"),)),
        sq("h1"): SquareAnnotation(white_moves=(sq("a2"),)),
    }
    instructions = compose_frame(
        coverage, starting_board.color_of, {"max_coord": 3, "letters": False}
    )
    assert instructions[-1] == Rectangle(Box(22, 22, 54, 54), "#00FF00")
    assert len(instructions) == 2 + 2 * 3 + 1
