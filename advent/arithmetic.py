"""Floating-point points, vectors and particles moving along straight lines."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero divisors give infinities or NaN."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True, order=True)
class Point2D:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, order=True)
class Vector2D:
    dx: float = 0.0
    dy: float = 0.0

    def slope(self) -> float:
        """Rise over run."""
        return _divide(self.dy, self.dx)


@dataclass(frozen=True, order=True)
class Particle2D:
    p0: Point2D = Point2D()
    v: Vector2D = Vector2D()

    def y_intercept(self) -> float:
        """The y value of the particle's line where x is zero."""
        return self.p0.y - self.v.slope() * self.p0.x

    def intersection(self, them: Particle2D) -> tuple[tuple[float, float], Point2D] | None:
        """Where two paths cross, with each particle's time to reach it; None if parallel."""
        m_a = self.v.slope()
        m_b = them.v.slope()
        if abs(m_a - m_b) < 0.001:
            return None
        x_i = _divide(self.p0.y - them.p0.y, m_a - m_b)
        y_ia = m_a * x_i + self.p0.y
        y_ib = m_b * x_i + them.p0.y
        diff = abs(y_ia - y_ib)
        if diff > max(min(y_ia, y_ib) * 0.001, 0.001):
            logger.warning(
                "divergent intersection calculations: y_ia=%s y_ib=%s diff=%s", y_ia, y_ib, diff
            )
        point = Point2D(x_i, y_ia)
        t_a = _divide(x_i - self.p0.x, self.v.dx)
        t_b = _divide(x_i - them.p0.x, them.v.dx)
        return (t_a, t_b), point

    def project(self, time: float) -> Point2D:
        """The particle's position after the given time."""
        return Point2D(self.p0.x + self.v.dx * time, self.p0.y + self.v.dy * time)


@dataclass(frozen=True, order=True)
class Vector3D:
    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0

    def slope_xy(self) -> float:
        return Vector2D(self.dx, self.dy).slope()

    def slope_xz(self) -> float:
        return Vector2D(self.dx, self.dz).slope()

    def slope_yz(self) -> float:
        return Vector2D(self.dy, self.dz).slope()


@dataclass(frozen=True, order=True)
class Point3D:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __sub__(self, them: Point3D) -> Vector3D:
        if not isinstance(them, Point3D):
            return NotImplemented
        return Vector3D(self.x - them.x, self.y - them.y, self.z - them.z)


@dataclass(frozen=True, order=True)
class Particle3D:
    p0: Point3D = Point3D()
    v: Vector3D = Vector3D()

    def project(self, time: float) -> Point3D:
        """The particle's position after the given time."""
        return Point3D(
            self.p0.x + self.v.dx * time,
            self.p0.y + self.v.dy * time,
            self.p0.z + self.v.dz * time,
        )