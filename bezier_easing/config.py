from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    # These values are established empirically (tradeoff: speed vs precision)
    newton_iterations: int = 4
    newton_min_slope: float = 0.001
    subdivision_precision: float = 1e-7
    subdivision_max_iterations: int = 10

    # Sample table
    spline_table_size: int = 11

    # Clamp evaluate() input to [0, 1]
    clamp_input: bool = True

    def __post_init__(self):
        if self.spline_table_size < 2:
            raise ValueError("spline_table_size must be >= 2")
        if self.newton_iterations < 0:
            raise ValueError("newton_iterations must be >= 0")
        if self.subdivision_max_iterations < 1:
            raise ValueError("subdivision_max_iterations must be >= 1")
        if self.subdivision_precision <= 0:
            raise ValueError("subdivision_precision must be > 0")
        if self.newton_min_slope < 0:
            raise ValueError("newton_min_slope must be >= 0")

    @property
    def sample_step_size(self) -> float:
        return 1.0 / (self.spline_table_size - 1.0)


def load_config() -> SolverConfig:
    # Defaults unless overridden from the environment
    cfg = SolverConfig()
    return SolverConfig(
        newton_iterations=int(os.getenv("EASING_NEWTON_ITERATIONS", cfg.newton_iterations)),
        newton_min_slope=float(os.getenv("EASING_NEWTON_MIN_SLOPE", cfg.newton_min_slope)),
        subdivision_precision=float(os.getenv("EASING_SUBDIVISION_PRECISION", cfg.subdivision_precision)),
        subdivision_max_iterations=int(
            os.getenv("EASING_SUBDIVISION_MAX_ITERATIONS", cfg.subdivision_max_iterations)
        ),
        spline_table_size=int(os.getenv("EASING_SPLINE_TABLE_SIZE", cfg.spline_table_size)),
        clamp_input=os.getenv("EASING_CLAMP_INPUT", "true").lower() in ("1", "true", "yes"),
    )
