import math

import pytest

from satcom_sim.core.config import SimulationConfig, parse_float, parse_float_or


def test_defaults():
    config = SimulationConfig()
    assert config.time_step_s == 0.1
    assert config.total_duration_s == 1000.0
    assert config.log_path == "communication_log.txt"
    assert config.trajectory_limit is None
    assert config.step_count == 10000


@pytest.mark.parametrize("kwargs, message", [
    (dict(time_step_s=0.0), "Time step must be positive"),
    (dict(time_step_s=math.inf), "Time step must be positive"),
    (dict(total_duration_s=-1.0), "Total duration must be non-negative"),
    (dict(tick_interval_s=-0.5), "Tick interval must be non-negative"),
    (dict(trajectory_limit=0), "Trajectory limit must be positive"),
    (dict(log_path="  "), "Log path cannot be empty"),
])
def test_validation(kwargs, message):
    with pytest.raises(ValueError, match=message):
        SimulationConfig(**kwargs)


def test_from_inputs():
    base = SimulationConfig(log_path="other.txt")
    config = SimulationConfig.from_inputs(" 600 ", "0.5", base=base)
    assert config.total_duration_s == 600.0
    assert config.time_step_s == 0.5
    assert config.log_path == "other.txt"
    assert config.step_count == 1200


def test_from_inputs_rejects_bad_text():
    with pytest.raises(ValueError, match="Please enter valid numbers"):
        SimulationConfig.from_inputs("ten", "0.1")
    with pytest.raises(ValueError, match="Please enter valid numbers"):
        SimulationConfig.from_inputs("10", "")


def test_step_count_rounds_up_partial_step():
    assert SimulationConfig(time_step_s=0.3, total_duration_s=1.0).step_count == 4


def test_parse_helpers():
    assert parse_float(" 1.5 ") == 1.5
    assert parse_float("1e3") == 1000.0
    assert parse_float("abc") is None
    assert parse_float("nan") is None
    assert parse_float(None) is None
    assert parse_float_or("bad", 7.0) == 7.0
    assert parse_float_or("-2", 7.0) == -2.0
