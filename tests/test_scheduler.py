import pytest

from satcom_sim.core.config import SimulationConfig
from satcom_sim.errors import EventSinkError
from satcom_sim.io.event_sink import MemoryEventSink
from satcom_sim.objects import GroundStation, Satellite, SatelliteCategory
from satcom_sim.simulation.engine import Engine
from satcom_sim.simulation.scenario import Scenario
from satcom_sim.simulation.scheduler import FixedStepScheduler


class FailingSink:
    def append(self, events):
        raise EventSinkError("storage unavailable", events)


@pytest.fixture
def scenario():
    scenario = Scenario()
    scenario.add_satellite(Satellite("Sat", 1.0, 10.0, 1.0, 0.0, 0.0, SatelliteCategory.RECEIVER, 0.1))
    scenario.add_ground_station(GroundStation("GS", 1.0, 0.0, 0.0, 100.0))
    return scenario


def test_runs_until_duration(scenario):
    engine = Engine(scenario=scenario, sink=MemoryEventSink())
    summary = FixedStepScheduler(engine, SimulationConfig(time_step_s=0.1, total_duration_s=1.0)).run()

    assert summary.steps == 10
    assert summary.events == 10
    assert summary.elapsed_s == pytest.approx(1.0)
    assert summary.stopped is False
    assert len(engine.sink.batches) == 10


def test_stop_from_tick_callback(scenario):
    engine = Engine(scenario=scenario)
    ticks = []

    def on_tick(eng):
        ticks.append(eng.steps)
        if len(ticks) == 3:
            scheduler.stop()

    scheduler = FixedStepScheduler(engine, SimulationConfig(time_step_s=1.0, total_duration_s=10.0), on_tick=on_tick)
    summary = scheduler.run()

    assert ticks == [1, 2, 3]
    assert summary.steps == 3
    assert summary.stopped is True


def test_sink_failures_do_not_stop_the_run(scenario):
    engine = Engine(scenario=scenario, sink=FailingSink())
    summary = FixedStepScheduler(engine, SimulationConfig(time_step_s=1.0, total_duration_s=5.0)).run()

    assert summary.steps == 5
    assert summary.sink_failures == 5
    assert len(scenario.satellites[0].trajectory) == 6


def test_wall_clock_pacing_between_steps(scenario):
    pauses = []
    engine = Engine(scenario=scenario)
    config = SimulationConfig(time_step_s=1.0, total_duration_s=4.0, tick_interval_s=0.1)
    FixedStepScheduler(engine, config, sleep=pauses.append).run()

    assert pauses == [0.1, 0.1, 0.1]


def test_zero_duration_runs_nothing(scenario):
    engine = Engine(scenario=scenario)
    summary = FixedStepScheduler(engine, SimulationConfig(total_duration_s=0.0)).run()
    assert summary.steps == 0
    assert len(scenario.satellites[0].trajectory) == 1


def test_stop_on_final_step_is_reported(scenario):
    engine = Engine(scenario=scenario)
    config = SimulationConfig(time_step_s=1.0, total_duration_s=3.0)

    def on_tick(eng):
        if eng.steps == 3:
            scheduler.stop()

    scheduler = FixedStepScheduler(engine, config, on_tick=on_tick)
    summary = scheduler.run()

    assert summary.steps == 3
    assert summary.stopped is True
