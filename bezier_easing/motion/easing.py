from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

from ..config import SolverConfig

log = logging.getLogger(__name__)


class BezierEasingError(ValueError):
    """Base error for invalid curve definitions."""


class InvalidControlPointError(BezierEasingError):
    pass


class OutOfRangeError(BezierEasingError):
    pass


# CSS keyword timing functions, (x1, y1, x2, y2)
EASE = (0.25, 0.1, 0.25, 1.0)
EASE_IN = (0.42, 0.0, 1.0, 1.0)
EASE_OUT = (0.0, 0.0, 0.58, 1.0)
EASE_IN_OUT = (0.42, 0.0, 0.58, 1.0)

PRESETS: Dict[str, Tuple[float, float, float, float]] = {
    "ease": EASE,
    "ease-in": EASE_IN,
    "ease-out": EASE_OUT,
    "ease-in-out": EASE_IN_OUT,
}


def linear(u: float) -> float:
    if u <= 0.0:
        return 0.0
    if u >= 1.0:
        return 1.0
    return u


def _a(a1: float, a2: float) -> float:
    return 1.0 - 3.0 * a2 + 3.0 * a1


def _b(a1: float, a2: float) -> float:
    return 3.0 * a2 - 6.0 * a1


def _c(a1: float) -> float:
    return 3.0 * a1


def calc_bezier(t: float, a1: float, a2: float) -> float:
    """Return x(t) given x1, x2 or y(t) given y1, y2."""
    return ((_a(a1, a2) * t + _b(a1, a2)) * t + _c(a1)) * t


def get_slope(t: float, a1: float, a2: float) -> float:
    """Return dx/dt given x1, x2 or dy/dt given y1, y2."""
    return 3.0 * _a(a1, a2) * t * t + 2.0 * _b(a1, a2) * t + _c(a1)


def _to_coordinate(value: object) -> float:
    if isinstance(value, bool):
        raise InvalidControlPointError("points should be finite numbers")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidControlPointError("points should be finite numbers") from None
    if not math.isfinite(v):
        raise InvalidControlPointError("points should be finite numbers")
    return v


@dataclass(frozen=True)
class CubicBezier:
    """Cubic Bezier easing curve from (0,0) to (1,1)."""

    # Control points (x1, y1, x2, y2); start is (0,0) end is (1,1)
    x1: float
    y1: float
    x2: float
    y2: float
    config: SolverConfig = field(default=SolverConfig(), repr=False)

    _samples: Tuple[float, ...] = field(init=False, default=(), compare=False, repr=False)

    def __post_init__(self):
        points = [_to_coordinate(p) for p in (self.x1, self.y1, self.x2, self.y2)]
        x1, y1, x2, y2 = points
        if not (0.0 <= x1 <= 1.0) or not (0.0 <= x2 <= 1.0):
            raise OutOfRangeError("x values must be in [0,1] range")

        object.__setattr__(self, "x1", x1)
        object.__setattr__(self, "y1", y1)
        object.__setattr__(self, "x2", x2)
        object.__setattr__(self, "y2", y2)

        if not self.is_linear:
            step = self.config.sample_step_size
            samples = tuple(
                calc_bezier(i * step, x1, x2) for i in range(self.config.spline_table_size)
            )
            object.__setattr__(self, "_samples", samples)
        log.debug(f"CubicBezier({x1}, {y1}, {x2}, {y2}) built, linear={self.is_linear}")

    @classmethod
    def from_points(cls, points: Sequence[float], config: SolverConfig | None = None) -> "CubicBezier":
        if len(points) != 4:
            raise ValueError("cubic-bezier requires [x1,y1,x2,y2]")
        x1, y1, x2, y2 = points
        return cls(x1, y1, x2, y2, config=config or SolverConfig())

    @property
    def is_linear(self) -> bool:
        return self.x1 == self.y1 and self.x2 == self.y2

    @property
    def control_points(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    @property
    def samples(self) -> Tuple[float, ...]:
        """x(t) at uniform t steps; empty for a linear curve."""
        return self._samples

    def _newton_raphson_iterate(self, x: float, guess_t: float) -> float:
        for _ in range(self.config.newton_iterations):
            slope = get_slope(guess_t, self.x1, self.x2)
            if slope == 0.0:
                return guess_t
            current_x = calc_bezier(guess_t, self.x1, self.x2) - x
            guess_t -= current_x / slope
        return guess_t

    def _binary_subdivide(self, x: float, a: float, b: float) -> float:
        precision = self.config.subdivision_precision
        max_iterations = self.config.subdivision_max_iterations
        i = 0
        while True:
            current_t = a + (b - a) / 2.0
            current_x = calc_bezier(current_t, self.x1, self.x2) - x
            if current_x > 0.0:
                b = current_t
            else:
                a = current_t
            i += 1
            if abs(current_x) <= precision or i >= max_iterations:
                return current_t

    def solve_t_for_x(self, x: float) -> float:
        """Return t such that x(t) == x, for a non-linear curve."""
        samples = self._samples
        step = self.config.sample_step_size
        last_sample = len(samples) - 1

        # Find the table interval holding x
        current = 1
        while current != last_sample and samples[current] <= x:
            current += 1
        current -= 1
        interval_start = current / (len(samples) - 1)

        # Interpolate to provide an initial guess for t
        dist = (x - samples[current]) / (samples[current + 1] - samples[current])
        guess_t = interval_start + dist * step

        initial_slope = get_slope(guess_t, self.x1, self.x2)
        if initial_slope >= self.config.newton_min_slope:
            return self._newton_raphson_iterate(x, guess_t)
        if initial_slope == 0.0:
            log.debug(f"Zero slope at t={guess_t}; using interpolated guess")
            return guess_t
        log.debug(f"Slope {initial_slope} too flat at t={guess_t}; using subdivision")
        return self._binary_subdivide(x, interval_start, interval_start + step)

    def evaluate(self, x: float) -> float:
        """Return y for a given x in [0,1], solving x(t) = x, then y(t)."""
        x = float(x)
        if self.config.clamp_input:
            x = 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)
        if self.is_linear:
            return x
        # Guarantee the extremes are exact
        if x == 0.0:
            return 0.0
        if x == 1.0:
            return 1.0
        return calc_bezier(self.solve_t_for_x(x), self.y1, self.y2)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)
