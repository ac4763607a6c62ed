"""This is the init module for tcxkit"""

from .appconfig import configure_logging, load_config
from .formats import TcxParseError, parse, parse_file
from .metrics import (
    METERS_TO_MILES,
    Pace,
    average_heartbeat,
    average_pace,
    pace_from_speed,
    start_time,
    summarize_activity,
    total_distance,
    total_distance_in_miles,
    total_duration,
)
from .models import Activity, Creator, Lap, Tcx, Trackpoint, new_tcx

__version__ = "0.0.1"
__all__ = [
    "METERS_TO_MILES",
    "Activity",
    "Creator",
    "Lap",
    "Pace",
    "Tcx",
    "TcxParseError",
    "Trackpoint",
    "average_heartbeat",
    "average_pace",
    "configure_logging",
    "load_config",
    "new_tcx",
    "pace_from_speed",
    "parse",
    "parse_file",
    "start_time",
    "summarize_activity",
    "total_distance",
    "total_distance_in_miles",
    "total_duration",
]
