import json

from satcom_sim.io.event_sink import MemoryEventSink
from satcom_sim.simulation.engine import Engine
from satcom_sim.simulation.samples import sample_scenario
from satcom_sim.visualization.export_log import export_playback_bundle, playback_bundle
from satcom_sim.visualization.plotly_viewer import build_figure, render_trajectories


def ran_sample(steps=5):
    scenario = sample_scenario()
    scenario.ground_stations[0].detection_range = 9000000.0
    engine = Engine(scenario=scenario, sink=MemoryEventSink())
    engine.run(duration_s=float(steps), dt_s=1.0)
    return scenario, engine


def test_figure_has_track_marker_and_station_traces():
    scenario, _engine = ran_sample()
    fig = build_figure(scenario)

    names = [trace.name for trace in fig.data]
    assert len(fig.data) == 2 * 2 + 3
    assert "Satellite1" in names and "Station3" in names
    track = fig.data[0]
    assert len(track.x) == 6


def test_render_writes_html(tmp_path):
    scenario, _engine = ran_sample()
    out = render_trajectories(scenario, out_html=str(tmp_path / "plots" / "scene.html"))
    assert (tmp_path / "plots" / "scene.html").exists()
    assert out.endswith("scene.html")


def test_playback_bundle(tmp_path):
    scenario, engine = ran_sample(steps=3)
    data = playback_bundle(scenario, engine.log)

    assert set(data["satellites"]) == {"Satellite1", "Satellite2"}
    assert len(data["satellites"]["Satellite1"]["trajectory"]) == 4
    assert data["ground_stations"]["Station2"]["detection_range"] == 45
    # Both satellites within Station1's widened range on every step
    assert len(data["events"]) == 6
    assert data["events"][0]["station"] == "Station1"

    path = export_playback_bundle(scenario, engine.log, out_path=str(tmp_path / "bundle.json"))
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == json.loads(json.dumps(data))
