import pytest

from satcom_sim.simulation.editing import apply_edit, editable_fields
from satcom_sim.simulation.samples import sample_scenario


@pytest.fixture
def scenario():
    return sample_scenario()


def test_editable_fields_satellite(scenario):
    fields = editable_fields(scenario, ("satellite", 0))
    assert list(fields) == ["name", "mass", "x", "y", "velocity_x", "velocity_y"]
    assert fields["name"] == "Satellite1"
    assert fields["mass"] == "1000"


def test_editable_fields_station(scenario):
    fields = editable_fields(scenario, ("ground_station", 1))
    assert list(fields) == ["name", "mass", "x", "y", "detection_range"]
    assert fields["detection_range"] == "45"


def test_invalid_numbers_are_skipped_per_field(scenario):
    sat = scenario.satellites[0]
    applied = apply_edit(scenario, ("satellite", 0), {
        "name": "Renamed",
        "mass": "heavy",
        "velocity_x": "12.5",
        "velocity_y": "",
    })
    assert applied == ["name", "velocity_x"]
    assert sat.name == "Renamed"
    assert sat.mass == 1000
    assert sat.velocity_x == 12.5
    assert sat.velocity_y == pytest.approx(0.0, abs=1e-9)


def test_non_finite_number_is_skipped(scenario):
    gs = scenario.ground_stations[0]
    assert apply_edit(scenario, ("ground_station", 0), {"x": "nan", "y": "inf"}) == []
    assert gs.position == (0, 0)


def test_station_range_edit(scenario):
    gs = scenario.ground_stations[0]
    assert apply_edit(scenario, ("ground_station", 0), {"detection_range": "-5"}) == []
    assert gs.detection_range == 10000
    assert apply_edit(scenario, ("ground_station", 0), {"detection_range": " 8000000 "}) == ["detection_range"]
    assert gs.can_detect(scenario.satellites[0]) is True


def test_moving_a_satellite_changes_its_next_angle(scenario):
    sat = scenario.satellites[0]
    sat.angular_velocity = 0.0
    apply_edit(scenario, ("satellite", 0), {"x": "5", "y": "0"})
    sat.advance(1.0)
    assert sat.x == pytest.approx(7000000.0)
    assert sat.y == pytest.approx(0.0, abs=1e-6)


def test_edit_does_not_touch_trajectory(scenario):
    sat = scenario.satellites[0]
    apply_edit(scenario, ("satellite", 0), {"x": "1", "y": "2"})
    assert len(sat.trajectory) == 1
    assert sat.trajectory[0] != (1.0, 2.0)


def test_unknown_field(scenario):
    with pytest.raises(KeyError, match="detection_range"):
        apply_edit(scenario, ("satellite", 0), {"detection_range": "1"})


def test_unknown_body(scenario):
    with pytest.raises(LookupError):
        apply_edit(scenario, ("satellite", 9), {"name": "x"})
