"""
Draw primitives - the opaque draw target only ever sees these records
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .state import HitBox


Color = Tuple[int, int, int]


@dataclass(frozen=True)
class FillRect:
    left: float
    top: float
    right: float
    bottom: float
    color: Color


@dataclass(frozen=True)
class DrawImage:
    """Pre-scaled background; ``grayscale`` selects the ambient variant."""
    x: float
    y: float
    grayscale: bool = False


@dataclass(frozen=True)
class DrawText:
    text: str
    x: float          # left edge
    y: float          # baseline
    size: int
    color: Color
    alpha: int = 255
    font: str = 'regular'
    anti_alias: bool = True


@dataclass(frozen=True)
class DrawLine:
    x0: float
    y0: float
    x1: float
    y1: float
    color: Color
    width: float = 3.0
    anti_alias: bool = True


@dataclass
class Frame:
    primitives: List[object] = field(default_factory=list)
    time_box: Optional[HitBox] = None

    def add(self, primitive) -> None:
        self.primitives.append(primitive)

    def of_type(self, kind) -> list:
        return [p for p in self.primitives if isinstance(p, kind)]
