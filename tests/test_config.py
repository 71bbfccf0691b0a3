import pytest

from bezier_easing.config import SolverConfig, load_config
from bezier_easing.motion.easing import CubicBezier
from bezier_easing.motion.models import Ease


def test_defaults():
    cfg = SolverConfig()
    assert cfg.newton_iterations == 4
    assert cfg.newton_min_slope == 0.001
    assert cfg.subdivision_precision == 1e-7
    assert cfg.subdivision_max_iterations == 10
    assert cfg.spline_table_size == 11
    assert cfg.sample_step_size == pytest.approx(0.1)
    assert cfg.clamp_input is True


def test_load_config_without_env(monkeypatch):
    for name in (
        "EASING_NEWTON_ITERATIONS",
        "EASING_NEWTON_MIN_SLOPE",
        "EASING_SUBDIVISION_PRECISION",
        "EASING_SUBDIVISION_MAX_ITERATIONS",
        "EASING_SPLINE_TABLE_SIZE",
        "EASING_CLAMP_INPUT",
    ):
        monkeypatch.delenv(name, raising=False)
    assert load_config() == SolverConfig()


def test_load_config_env_overrides(monkeypatch):
    monkeypatch.setenv("EASING_NEWTON_ITERATIONS", "8")
    monkeypatch.setenv("EASING_NEWTON_MIN_SLOPE", "0.01")
    monkeypatch.setenv("EASING_SUBDIVISION_PRECISION", "1e-9")
    monkeypatch.setenv("EASING_SUBDIVISION_MAX_ITERATIONS", "20")
    monkeypatch.setenv("EASING_SPLINE_TABLE_SIZE", "21")
    monkeypatch.setenv("EASING_CLAMP_INPUT", "no")
    cfg = load_config()
    assert cfg == SolverConfig(
        newton_iterations=8,
        newton_min_slope=0.01,
        subdivision_precision=1e-9,
        subdivision_max_iterations=20,
        spline_table_size=21,
        clamp_input=False,
    )


def test_default_curve_ignores_env(monkeypatch):
    monkeypatch.setenv("EASING_NEWTON_ITERATIONS", "0")
    monkeypatch.setenv("EASING_SPLINE_TABLE_SIZE", "3")
    curve = CubicBezier(0.25, 0.1, 0.25, 1.0)
    assert curve.config == SolverConfig()
    assert len(curve.samples) == 11
    assert curve.evaluate(0.3) == pytest.approx(0.51332, abs=1e-4)


def test_malformed_env_does_not_break_construction(monkeypatch):
    monkeypatch.setenv("EASING_NEWTON_ITERATIONS", "four")
    monkeypatch.setenv("EASING_SPLINE_TABLE_SIZE", "1")
    curve = CubicBezier(0.25, 0.1, 0.25, 1.0)
    assert curve.config == SolverConfig()
    fn = Ease(type="cubic-bezier", p=[0.25, 0.1, 0.25, 1.0]).build()
    assert fn == curve


def test_env_config_is_opt_in(monkeypatch):
    monkeypatch.setenv("EASING_SPLINE_TABLE_SIZE", "6")
    curve = CubicBezier(0.25, 0.1, 0.25, 1.0, config=load_config())
    assert curve.config.spline_table_size == 6
    assert len(curve.samples) == 6


def test_config_takes_part_in_equality():
    default = CubicBezier(0.25, 0.1, 0.25, 1.0)
    retuned = CubicBezier(0.25, 0.1, 0.25, 1.0, config=SolverConfig(newton_iterations=0, spline_table_size=3))
    assert default != retuned
    assert default == CubicBezier(0.25, 0.1, 0.25, 1.0, config=SolverConfig())
    assert hash(default) == hash(CubicBezier(0.25, 0.1, 0.25, 1.0))


def test_bad_env_value(monkeypatch):
    monkeypatch.setenv("EASING_NEWTON_ITERATIONS", "four")
    with pytest.raises(ValueError):
        load_config()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"spline_table_size": 1},
        {"newton_iterations": -1},
        {"subdivision_max_iterations": 0},
        {"subdivision_precision": 0.0},
        {"newton_min_slope": -0.1},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)
