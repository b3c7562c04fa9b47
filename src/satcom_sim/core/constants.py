from __future__ import annotations

# Default simulated time step (s)
DEFAULT_TIME_STEP_S: float = 0.1

# Default total simulated duration (s)
DEFAULT_DURATION_S: float = 1000.0

# Wall-clock pause between scheduler ticks (s); 0 runs as fast as possible
DEFAULT_TICK_INTERVAL_S: float = 0.0

# Append-only communication log written by the default file sink
DEFAULT_LOG_PATH: str = "communication_log.txt"

# Section headers of the snapshot text format
SATELLITE_SECTION: str = "Satellite"
GROUND_STATION_SECTION: str = "Ground Station"
