"""
satcom-sim - circular-orbit satellite / ground station contact simulator.

Usage:
    satcom-sim                                  # sample data, 1000 s at 0.1 s steps
    satcom-sim --load scenario.txt --duration 600 --step 1
    satcom-sim --save out/scenario.txt --plot out/trajectories.html
    satcom-sim --help
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from satcom_sim.analysis.contacts import contact_counts_from_log
from satcom_sim.core.config import SimulationConfig
from satcom_sim.core.constants import (
    DEFAULT_DURATION_S,
    DEFAULT_LOG_PATH,
    DEFAULT_TICK_INTERVAL_S,
    DEFAULT_TIME_STEP_S,
)
from satcom_sim.errors import SatcomSimError
from satcom_sim.io.event_sink import FileEventSink
from satcom_sim.io.snapshot import load_snapshot, save_snapshot
from satcom_sim.physics.orbit import orbital_period_s
from satcom_sim.simulation.engine import Engine
from satcom_sim.simulation.samples import sample_scenario
from satcom_sim.simulation.scheduler import FixedStepScheduler

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="satcom-sim",
        description="Satellite / ground station communication simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Sample data, default run
  %(prog)s --load data.txt --duration 600    # Saved scenario, 10 minutes
  %(prog)s --interval 0.1                    # Pace steps at 100 ms wall clock
  %(prog)s --plot out/scene.html             # Write trajectory plot
        """,
    )
    parser.add_argument("--load", type=str, default=None,
                        help="Snapshot file to load (default: built-in sample data)")
    parser.add_argument("--save", type=str, default=None,
                        help="Write the scenario snapshot here after the run")
    parser.add_argument("--duration", "-d", type=float, default=DEFAULT_DURATION_S,
                        help=f"Total simulated duration in seconds (default: {DEFAULT_DURATION_S:g})")
    parser.add_argument("--step", "-s", type=float, default=DEFAULT_TIME_STEP_S,
                        help=f"Simulated time step in seconds (default: {DEFAULT_TIME_STEP_S:g})")
    parser.add_argument("--interval", type=float, default=DEFAULT_TICK_INTERVAL_S,
                        help="Wall-clock pause between steps in seconds (default: 0)")
    parser.add_argument("--log", type=str, default=DEFAULT_LOG_PATH,
                        help=f"Communication log file (default: {DEFAULT_LOG_PATH})")
    parser.add_argument("--trajectory-limit", type=int, default=None,
                        help="Keep at most this many positions per satellite (default: all)")
    parser.add_argument("--plot", type=str, default=None,
                        help="Write an HTML trajectory plot here after the run")
    parser.add_argument("--export", type=str, default=None,
                        help="Write a JSON bundle of trajectories and events here")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = SimulationConfig(
            time_step_s=args.step,
            total_duration_s=args.duration,
            tick_interval_s=args.interval,
            log_path=args.log,
            trajectory_limit=args.trajectory_limit,
        )
    except ValueError as e:
        logger.error("%s", e)
        return 2

    try:
        if args.load:
            scenario = load_snapshot(args.load, trajectory_limit=config.trajectory_limit)
        else:
            scenario = sample_scenario(trajectory_limit=config.trajectory_limit)

        engine = Engine(scenario=scenario, sink=FileEventSink(config.log_path))
        summary = FixedStepScheduler(engine, config).run()

        print(f"Steps run:        {summary.steps}")
        print(f"Simulated time:   {summary.elapsed_s:g}s")
        print(f"Events:           {summary.events}")
        if summary.sink_failures:
            print(f"Failed log writes: {summary.sink_failures}")
        for sat in scenario.satellites:
            print(f"  {sat.name}: orbit period {orbital_period_s(sat.angular_velocity):g}s")
        for (sat, gs), n in sorted(contact_counts_from_log(engine.log).items()):
            print(f"  {sat} -> {gs}: {n}")

        if args.save:
            save_snapshot(scenario, args.save)
        if args.plot:
            from satcom_sim.visualization.plotly_viewer import render_trajectories
            print("Wrote:", render_trajectories(scenario, out_html=args.plot))
        if args.export:
            from satcom_sim.visualization.export_log import export_playback_bundle
            print("Exported bundle:", export_playback_bundle(scenario, engine.log, out_path=args.export))
    except (SatcomSimError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
