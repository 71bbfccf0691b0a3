from __future__ import annotations

import re
from typing import Callable, Literal, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from ..config import SolverConfig
from .easing import PRESETS, CubicBezier, linear

_CSS_CUBIC_BEZIER = re.compile(r"^cubic-bezier\(\s*([^,]+),([^,]+),([^,]+),([^,)]+)\)$", re.IGNORECASE)


class Ease(BaseModel):
    type: Literal["linear", "ease", "ease-in", "ease-out", "ease-in-out", "cubic-bezier"] = "linear"
    p: Optional[list[float]] = Field(default=None, description="Bezier control points [x1,y1,x2,y2]")

    @model_validator(mode="after")
    def validate_bezier(self):
        if self.type == "cubic-bezier":
            if not self.p or len(self.p) != 4:
                raise ValueError("cubic-bezier requires p=[x1,y1,x2,y2]")
            # Raises InvalidControlPointError / OutOfRangeError (both ValueError)
            CubicBezier.from_points(self.p, config=SolverConfig())
        return self

    def control_points(self) -> Optional[Tuple[float, float, float, float]]:
        if self.type == "linear":
            return None
        if self.type == "cubic-bezier":
            x1, y1, x2, y2 = self.p  # type: ignore
            return (x1, y1, x2, y2)
        return PRESETS[self.type]

    def build(self, config: Optional[SolverConfig] = None) -> Callable[[float], float]:
        points = self.control_points()
        if points is None:
            return linear
        return CubicBezier.from_points(points, config=config)

    @classmethod
    def from_css(cls, text: str) -> "Ease":
        """Parse a CSS timing function such as ``ease-in`` or ``cubic-bezier(0, 0, 1, 0.5)``."""
        value = text.strip()
        keyword = value.lower()
        if keyword == "linear" or keyword in PRESETS:
            return cls(type=keyword)
        m = _CSS_CUBIC_BEZIER.match(value)
        if not m:
            raise ValueError(f"Unsupported timing function: {text!r}")
        try:
            p = [float(g.strip()) for g in m.groups()]
        except ValueError:
            raise ValueError(f"Unsupported timing function: {text!r}") from None
        return cls(type="cubic-bezier", p=p)
