from __future__ import annotations

from pathlib import Path

import plotly.graph_objects as go

from satcom_sim.simulation.scenario import Scenario


def build_figure(scenario: Scenario, title: str = "Satellite Trajectories") -> go.Figure:
    """
    Planar scene:
      - recorded trajectory line for each satellite
      - current position marker for each satellite
      - one marker per ground station
    """
    fig = go.Figure()

    for sat in scenario.satellite_list():
        xs = [p[0] for p in sat.trajectory]
        ys = [p[1] for p in sat.trajectory]
        fig.add_trace(go.Scatter(x=xs, y=ys, mode="lines", name=sat.name))
        fig.add_trace(go.Scatter(
            x=[sat.x], y=[sat.y],
            mode="markers",
            name=f"{sat.name} now",
            marker=dict(size=7),
            showlegend=False,
        ))

    for gs in scenario.ground_station_list():
        fig.add_trace(go.Scatter(
            x=[gs.x], y=[gs.y],
            mode="markers",
            name=gs.name,
            marker=dict(symbol="circle", size=8),
        ))

    fig.update_layout(
        title=title,
        xaxis_title="X",
        yaxis_title="Y",
        yaxis=dict(scaleanchor="x", scaleratio=1),
        margin=dict(l=40, r=20, t=50, b=40),
        legend=dict(orientation="h"),
    )
    return fig


def render_trajectories(scenario: Scenario, out_html: str = "out/trajectories.html") -> str:
    fig = build_figure(scenario)
    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
