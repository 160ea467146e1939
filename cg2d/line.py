from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .geom import Pt, sub, norm
from .predicates import Side, orient2d, side_of


@dataclass(frozen=True)
class Line:
    """
    Орієнтована пряма через a -> b.
    Ідентичність ребра — саме пара кінців (a, b), а не геометричне місце точок.
    """
    a: Pt
    b: Pt

    def __post_init__(self):
        if self.a == self.b:
            raise ValueError(f"Line needs two distinct points, got {self.a!r} twice")

    @classmethod
    def from_slope_intercept(cls, slope: float, intercept: float) -> "Line":
        """y = slope * x + intercept, напрямок — у бік зростання x."""
        return cls(Pt(0.0, intercept), Pt(1.0, slope + intercept))

    @property
    def is_vertical(self) -> bool:
        return self.a.x == self.b.x

    def slope_intercept(self) -> Tuple[float, float]:
        if self.is_vertical:
            raise ValueError(f"vertical line x = {self.a.x} has no slope/intercept form")
        dx = self.b.x - self.a.x
        slope = (self.b.y - self.a.y) / dx
        intercept = (self.b.x * self.a.y - self.a.x * self.b.y) / dx
        return slope, intercept

    def reversed(self) -> "Line":
        return Line(self.b, self.a)

    def classify(self, p: Pt, eps: float = 0.0) -> Side:
        return side_of(self.a, self.b, p, eps)

    def signed_area(self, p: Pt) -> float:
        """Подвоєна орієнтована площа трикутника (a, b, p)."""
        return orient2d(self.a, self.b, p)

    def area_distance(self, p: Pt) -> float:
        """Пропорційна відстані величина — лише для порівнянь."""
        return abs(orient2d(self.a, self.b, p))

    def perpendicular_distance(self, p: Pt) -> float:
        return self.area_distance(p) / norm(sub(self.b, self.a))

    def __str__(self) -> str:
        return f"{self.a.label}{self.b.label}: ({self.a.x}, {self.a.y}) -> ({self.b.x}, {self.b.y})"
