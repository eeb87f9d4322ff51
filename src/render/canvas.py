"""
Canvases: whatever paints the draw instructions.

The renderer only needs the `Canvas` protocol. Two implementations live here:
* InstructionRecorder: keeps the instructions (handy for tests, or to hand them to another drawing library)
* PillowCanvas: paints onto a Pillow image. Saving/encoding the image is up to the caller.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Protocol

from PIL import Image, ImageDraw, ImageFont

from src.core.config import DiagramConfig
from src.render.geometry import BoardGeometry
from src.render.instructions import Box, Circle, DrawInstruction, Line, Rectangle, Text

logger = logging.getLogger(__name__)

IMAGE_MODES: dict[int, str] = {3: "RGB", 4: "RGBA"}


class Canvas(Protocol):
    """Just the parts the renderer needs"""

    @property
    def has_glyphs(self) -> bool:
        """Can this canvas render text?"""
        ...

    def draw(self, instruction: DrawInstruction) -> None:
        """Paint one instruction on top of everything painted so far."""
        ...


class InstructionRecorder:
    """Canvas that only records what it is asked to draw, in order"""

    def __init__(self, has_glyphs: bool = True) -> None:
        self._has_glyphs = has_glyphs
        self.instructions: list[DrawInstruction] = []

    @property
    def has_glyphs(self) -> bool:
        return self._has_glyphs

    def draw(self, instruction: DrawInstruction) -> None:
        self.instructions.append(instruction)


class PillowCanvas:
    """Raster canvas sized (and colored) after the diagram configuration"""

    def __init__(self, config: DiagramConfig) -> None:
        geometry = BoardGeometry.from_config(config)
        self.image = Image.new(
            IMAGE_MODES[config.channels], (geometry.image_width, geometry.image_height)
        )
        self._draw = ImageDraw.Draw(self.image)
        self._font = _load_font(config.font_file, config.font_size)

    @property
    def has_glyphs(self) -> bool:
        return self._font is not None

    def draw(self, instruction: DrawInstruction) -> None:
        painter: Callable[[PillowCanvas, DrawInstruction], None] = _PAINTERS[
            type(instruction)
        ]
        painter(self, instruction)

    # --- one painter per instruction type ---
    def _paint_rectangle(self, rectangle: Rectangle) -> None:
        if rectangle.filled:
            self._draw.rectangle(_corners(rectangle.box), fill=rectangle.color)
        else:
            self._draw.rectangle(_corners(rectangle.box), outline=rectangle.color)

    def _paint_line(self, line: Line) -> None:
        self._draw.line([line.start, line.end], fill=line.color)

    def _paint_circle(self, circle: Circle) -> None:
        x, y = circle.center
        r = circle.radius
        bounds = [x - r, y - r, x + r, y + r]
        if circle.filled:
            self._draw.ellipse(bounds, fill=circle.color)
        else:
            self._draw.ellipse(bounds, outline=circle.color)

    def _paint_text(self, text: Text) -> None:
        if self._font is None:
            logger.debug("No font loaded, dropping glyph %r", text.glyph)
            return
        self._draw.text(
            text.position, text.glyph, fill=text.color, font=self._font, anchor="ls"
        )


_PAINTERS: dict[type, Callable] = {
    Rectangle: PillowCanvas._paint_rectangle,
    Line: PillowCanvas._paint_line,
    Circle: PillowCanvas._paint_circle,
    Text: PillowCanvas._paint_text,
}


def _corners(box: Box) -> list[float]:
    """Pillow wants (left, top, right, bottom). Heavily inset move boxes can come out inverted, so sort the edges."""
    return [
        min(box.xmin, box.xmax),
        min(box.ymin, box.ymax),
        max(box.xmin, box.xmax),
        max(box.ymin, box.ymax),
    ]


def _load_font(
    font_file: Optional[str], font_size: int
) -> Optional[ImageFont.FreeTypeFont]:
    """Labels are optional: without a (readable) font file the diagram is drawn without them"""
    if font_file is None:
        return None
    if not Path(font_file).is_file():
        logger.warning("Font file %s not found, labels will not be drawn", font_file)
        return None
    return ImageFont.truetype(font_file, font_size)
