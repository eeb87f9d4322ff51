"""
Entry point of the renderer: compose the full frame for a board and its coverage.

Painting order (later instructions paint over earlier ones):
1. background
2. border
3. grid lines (if `grid`)
4. file letters and rank numbers (if `letters` and a glyph source is available)
5. the squares, row by row: all of a square's overlay is drawn before the next square starts
"""

import logging
from typing import Any, Mapping, Optional

from src.chess.board import OccupantLookup
from src.chess.coverage import CoverageMap, SquareAnnotation
from src.core.config import DiagramConfig, resolve_config
from src.render.canvas import Canvas
from src.render.geometry import BoardGeometry
from src.render.instructions import Box, DrawInstruction, Line, Rectangle, Text
from src.render.overlay import encode_overlay

logger = logging.getLogger(__name__)

NO_ANNOTATION = SquareAnnotation()


def compose_frame(
    coverage: CoverageMap,
    color_of: OccupantLookup,
    config: Optional[DiagramConfig | Mapping[str, Any]] = None,
    glyphs: bool = True,
) -> list[DrawInstruction]:
    """Every draw instruction of the diagram, in painting order.

    `config` is either a resolved DiagramConfig or a mapping of overrides on top of the defaults.

    `glyphs` tells whether whoever paints the instructions can render text. Without it the labels are skipped.
    """
    if not isinstance(config, DiagramConfig):
        config = resolve_config(config)
    geometry = BoardGeometry.from_config(config)
    logger.debug(
        "Composing %dx%d diagram (%d squares with coverage)",
        geometry.image_width,
        geometry.image_height,
        len(coverage),
    )

    instructions: list[DrawInstruction] = []
    instructions.extend(_background(geometry, config))
    if config.grid:
        instructions.extend(_grid(geometry, config))
    if config.letters and glyphs:
        instructions.extend(_labels(geometry, config))
    elif config.letters:
        logger.debug("No glyph source available, skipping the board labels")

    for row in range(geometry.board_size):
        for col in range(geometry.board_size):
            square = geometry.square_at(row, col)
            box = geometry.square_box(row, col)
            annotation = coverage.get(square, NO_ANNOTATION)
            instructions.extend(
                encode_overlay(
                    annotation, box, geometry.square_center(box), color_of, config
                )
            )

    logger.debug("Composed %d draw instructions", len(instructions))
    return instructions


def draw_frame(
    canvas: Canvas,
    coverage: CoverageMap,
    color_of: OccupantLookup,
    config: Optional[DiagramConfig | Mapping[str, Any]] = None,
) -> None:
    """Compose the frame, then hand it to the canvas.

    The whole frame is composed first: if the coverage data turns out to be invalid, the canvas has not been touched.
    """
    for instruction in compose_frame(coverage, color_of, config, canvas.has_glyphs):
        canvas.draw(instruction)


# --- static parts of the board ---
def _background(geometry: BoardGeometry, config: DiagramConfig) -> list[DrawInstruction]:
    x0, y0 = geometry.top_left
    x1, y1 = geometry.bottom_right
    return [
        Rectangle(
            Box(0, 0, geometry.image_width, geometry.image_height),
            config.board_color,
            filled=True,
        ),
        Rectangle(Box(x0, y0, x1, y1).inset(1), config.border_color),
    ]


def _grid(geometry: BoardGeometry, config: DiagramConfig) -> list[DrawInstruction]:
    (xstart, xend), (ystart, yend) = geometry.grid_line_span()
    lines: list[DrawInstruction] = []
    for n in geometry.separators():
        x = geometry.grid_x(n)
        y = geometry.grid_y(n)
        lines.append(Line((x, ystart), (x, yend), config.grid_color))
        lines.append(Line((xstart, y), (xend, y), config.grid_color))
    return lines


def _labels(geometry: BoardGeometry, config: DiagramConfig) -> list[DrawInstruction]:
    """File letters along the top, rank numbers along the left"""
    labels: list[DrawInstruction] = []
    for n in range(geometry.board_size):
        labels.append(
            Text(
                geometry.file_label_position(n),
                geometry.file_letter(n),
                config.letter_color,
                config.font_size,
            )
        )
        labels.append(
            Text(
                geometry.rank_label_position(n),
                geometry.rank_number(n),
                config.letter_color,
                config.font_size,
            )
        )
    return labels
