from dataclasses import dataclass
from enum import Enum
from typing import Hashable


@dataclass
class Book:
    """A notebook on the shelf, as supplied by the book collection store."""

    id: str
    title: str
    color: str
    accent_color: str
    notes: str = ""


@dataclass
class DragSession:
    """An item being dragged and the index it currently occupies."""

    id: Hashable
    origin_index: int


class Axis(Enum):
    """Primary layout axis of a reorderable list."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class TargetBounds:
    """Extent of a hovered item along the primary axis."""

    start: float
    end: float

    @property
    def midpoint(self) -> float:
        return self.start + (self.end - self.start) / 2

    @classmethod
    def from_rect(cls, rect, axis: Axis = Axis.HORIZONTAL) -> "TargetBounds":
        """
        Build bounds from a QRect or QRectF.
        
        Args:
            rect: Geometry of the hovered item
            axis: Axis the list is laid out along
        """
        if axis is Axis.HORIZONTAL:
            return cls(float(rect.x()), float(rect.x() + rect.width()))
        return cls(float(rect.y()), float(rect.y() + rect.height()))


@dataclass(frozen=True)
class SpineStyle:
    """Per-book spine geometry and idle animation parameters."""

    height: int             # px
    tilt: float             # degrees
    float_duration: float   # seconds
    float_delay: float      # seconds
    float_distance: int     # px
    glow_intensity: float


@dataclass(frozen=True)
class Particle:
    """A decorative sparkle, positioned in percent of its container."""

    left: float
    top: float
    size: float
    delay: float
    duration: float
