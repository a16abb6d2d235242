"""Selection shapes: closed polygons in a 2D plane and polynomial curves."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

Point = Tuple[float, float]


def _as_points(points: Iterable[Iterable[float]]) -> tuple[Point, ...]:
    result = []
    for point in points:
        x, y = point
        result.append((float(x), float(y)))
    return tuple(result)


@dataclass(frozen=True)
class GraphicalCut:
    """A polygon drawn on a two-variable plot, used to select a region."""

    name: str
    points: tuple[Point, ...]
    var_x: str = ""
    var_y: str = ""
    title: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _as_points(self.points))

    def is_inside(self, x: float, y: float) -> bool:
        """Return True when (x, y) lies inside the polygon (even-odd rule)."""
        inside = False
        if not self.points:
            return inside
        xj, yj = self.points[-1]
        for xi, yi in self.points:
            if (yi < y <= yj) or (yj < y <= yi):
                if xi + (y - yi) / (yj - yi) * (xj - xi) < x:
                    inside = not inside
            xj, yj = xi, yi
        return inside


@dataclass(frozen=True)
class PolynomialCut:
    """A polynomial curve; coefficients run from the highest power down."""

    name: str
    coefficients: tuple[float, ...]
    x_min: float
    x_max: float
    formula: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        coefficients = tuple(float(c) for c in self.coefficients)
        if not coefficients:
            raise ValueError("a polynomial needs at least one coefficient")
        if self.x_min > self.x_max:
            raise ValueError("x_min must not exceed x_max")
        object.__setattr__(self, "coefficients", coefficients)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __call__(self, x: float) -> float:
        value = 0.0
        for coefficient in self.coefficients:
            value = value * x + coefficient
        return value

    def in_range(self, x: float) -> bool:
        """Return True when x lies within the curve's defined range."""
        return self.x_min <= x <= self.x_max