"""
Primitive draw instructions: the output of the diagram engine.

A canvas consumes them in the order they were produced (later shapes paint over earlier ones).
"""

from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True)
class Box:
    """Pixel bounds, both corners inclusive"""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def inset(self, amount: float) -> "Box":
        """Shrink by `amount` pixels on all four sides"""
        return Box(
            self.xmin + amount,
            self.ymin + amount,
            self.xmax - amount,
            self.ymax - amount,
        )


@dataclass(frozen=True)
class Rectangle:
    box: Box
    color: str
    filled: bool = False


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: str


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    color: str
    filled: bool = False


@dataclass(frozen=True)
class Text:
    """`position` is the left end of the baseline"""

    position: Point
    glyph: str
    color: str
    size: int


DrawInstruction = Rectangle | Line | Circle | Text
