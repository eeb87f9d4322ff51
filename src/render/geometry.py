"""
Pixel geometry of the diagram: image size, square bounds, grid lines and label positions.

Board indices used here:
* row: the file, counted from the left (0 = A)
* col: the rank, counted from the top (0 = the last rank, 8 on a normal board)

Between two neighbouring squares sits a 1px seam (hence the `+ 1` per square and the extra `max_coord` pixels in the image size).
NOTE: square bounds and grid lines are computed with separate formulas. With the default 2px border the grid line lands
exactly in the seam between two squares, for other border widths it can shift into a square by a pixel or so.
That is a cosmetic difference only.
"""

from dataclasses import dataclass
from typing import Self

from src.chess.square import Square
from src.core.config import DiagramConfig
from src.core.exceptions import DataError
from src.render.instructions import Box, Point


@dataclass(frozen=True)
class BoardGeometry:
    border: int
    margin: int
    max_coord: int
    square_width: int
    square_height: int
    font_size: int

    @classmethod
    def from_config(cls, config: DiagramConfig) -> Self:
        return cls(
            border=config.border,
            margin=config.margin,
            max_coord=config.max_coord,
            square_width=config.square_width,
            square_height=config.square_height,
            font_size=config.font_size,
        )

    # --- image dimensions ---
    @property
    def board_size(self) -> int:
        return self.max_coord + 1

    @property
    def image_width(self) -> int:
        return (
            self.board_size * self.square_width
            + self.margin
            + 2 * self.border
            + self.max_coord
        )

    @property
    def image_height(self) -> int:
        return (
            self.board_size * self.square_height
            + self.margin
            + 2 * self.border
            + self.max_coord
        )

    @property
    def top_left(self) -> tuple[int, int]:
        """(x0, y0): top-left corner of the playing area"""
        return self.margin, self.margin

    @property
    def bottom_right(self) -> tuple[int, int]:
        """(x1, y1): bottom-right corner of the playing area"""
        return self.image_width - 1, self.image_height - 1

    # --- squares ---
    def square_box(self, row: int, col: int) -> Box:
        self._check_indices(row, col)
        return Box(
            xmin=self.margin + self.border + row * (self.square_width + 1),
            ymin=self.margin + self.border + col * (self.square_height + 1),
            xmax=self.margin + (row + 1) * (self.square_width + 1),
            ymax=self.margin + (col + 1) * (self.square_height + 1),
        )

    def square_center(self, box: Box) -> Point:
        return (
            box.xmin + self.square_width / 2,
            box.ymin + self.square_height / 2,
        )

    def square_name(self, row: int, col: int) -> str:
        """Algebraic name as printed on the diagram: (0, 0) is 'A8' on a normal board"""
        self._check_indices(row, col)
        return f"{self.file_letter(row)}{self.rank_number(col)}"

    def square_at(self, row: int, col: int) -> Square:
        self._check_indices(row, col)
        return Square.from_indices(row, col, self.max_coord)

    def indices_of(self, square: Square) -> tuple[int, int]:
        if not square.is_within_bounds((self.board_size, self.board_size)):
            raise DataError(
                f"Square {square.to_algebraic()!r} is not on a {self.board_size}x{self.board_size} board."
            )
        return square.to_indices(self.max_coord)

    def file_letter(self, row: int) -> str:
        return chr(ord("A") + row)

    def rank_number(self, col: int) -> str:
        return str(self.max_coord + 1 - col)

    # --- grid ---
    def separators(self) -> range:
        """Grid lines are drawn between squares: separator n sits before row/col n"""
        return range(1, self.max_coord + 1)

    def grid_x(self, n: int) -> int:
        """x of the vertical grid line with separator index n"""
        x0, _ = self.top_left
        return x0 + self.border + n * self.square_width + n - 1

    def grid_y(self, n: int) -> int:
        """y of the horizontal grid line with separator index n"""
        _, y0 = self.top_left
        return y0 + self.border + n * self.square_height + n - 1

    def grid_line_span(self) -> tuple[Point, Point]:
        """((xstart, xend), (ystart, yend)): the extent of the grid lines inside the border"""
        x0, y0 = self.top_left
        x1, y1 = self.bottom_right
        return (
            (x0 + self.border, x1 - self.border),
            (y0 + self.border, y1 - self.border),
        )

    # --- labels ---
    def file_label_position(self, n: int) -> Point:
        """Baseline of the file letter above row n. Tuned to roughly center the glyph over the square."""
        x0, _ = self.top_left
        x = (
            x0
            + self.border
            + n
            + n * self.square_width
            + self.square_width / 2
            + self._label_nudge(self.square_width)
            - self.font_size / 2
        )
        return x - 1, self.font_size

    def rank_label_position(self, n: int) -> Point:
        """Baseline of the rank number left of col n"""
        _, y0 = self.top_left
        y = (
            y0
            + self.border
            + n
            + n * self.square_height
            + self.square_height / 2
            + self._label_nudge(self.square_height)
        )
        return self.max_coord, y

    def _label_nudge(self, square_size: int) -> float:
        # a one-square board has no separators to spread over
        return square_size / self.max_coord if self.max_coord else 0

    def _check_indices(self, row: int, col: int) -> None:
        if not (0 <= row <= self.max_coord and 0 <= col <= self.max_coord):
            raise DataError(
                f"Board index ({row}, {col}) is outside [0, {self.max_coord}]."
            )
