"""Document model for TCX (Training Center XML) data.

Records mirror the TCX schema: a ``Tcx`` root owns its activities, each
``Activity`` owns its laps and each ``Lap`` owns its trackpoints. Every field
has a zero-value default, so a path missing from the source simply leaves the
default in place.

Timestamps default to ``None`` rather than a "zero instant".
"""

from __future__ import annotations

from datetime import datetime
from typing import NamedTuple


class Trackpoint(NamedTuple):
    """A single timestamped sample within a lap."""

    time: datetime | None = None
    latitude_degrees: float = 0.0
    longitude_degrees: float = 0.0
    altitude_meters: float = 0.0
    heart_rate_bpm: int = 0
    cadence: int = 0
    speed: float = 0.0  # meters/second, from the TPX extension


class Lap(NamedTuple):
    start_time: datetime | None = None
    total_time_seconds: float = 0.0
    distance_meters: float = 0.0
    maximum_speed: float = 0.0  # meters/second
    calories: float = 0.0
    intensity: str = ""
    trigger_method: str = ""
    track: tuple[Trackpoint, ...] = ()


class Creator(NamedTuple):
    name: str = ""
    unit_id: int = 0
    product_id: int = 0


class Activity(NamedTuple):
    """One recorded session.

    ``id`` is a timestamp, as in the TCX schema; compare and render it with
    the usual ``datetime`` rules (ISO-8601 via ``isoformat()``).
    """

    sport: str = ""
    id: datetime | None = None
    creator: Creator = Creator()
    laps: tuple[Lap, ...] = ()


class Tcx(NamedTuple):
    """Root of a TCX document."""

    xmlns: str = ""
    xmlns_xsi: str = ""
    xmlns_xsd: str = ""
    schema_location: str = ""
    activities: tuple[Activity, ...] = ()


def new_tcx() -> Tcx:
    """Return an empty, unpopulated document."""
    return Tcx()


# Field ↔ source path mapping, consumed by ``tcxkit.formats.tcx``.
#
# Paths are relative to the record's element and use local names only;
# ``@name`` selects an attribute of the final element. When several paths are
# listed the first one present in the source wins; within a path a repeated
# element overwrites earlier ones (nested records are overlaid field by
# field). The kind is a scalar type, a record type (nested element) or a
# one-item list of a record type (repeated elements, in source order).
SCHEMA: dict[type, tuple[tuple[str, tuple[str, ...], object], ...]] = {
    Tcx: (
        ("schema_location", ("@schemaLocation",), str),
        ("activities", ("Activities/Activity",), [Activity]),
    ),
    Activity: (
        ("sport", ("@Sport",), str),
        ("id", ("Id",), datetime),
        ("creator", ("Creator",), Creator),
        ("laps", ("Lap",), [Lap]),
    ),
    Creator: (
        ("name", ("Name",), str),
        ("unit_id", ("UnitId",), int),
        ("product_id", ("ProductID",), int),
    ),
    Lap: (
        ("start_time", ("@StartTime",), datetime),
        ("total_time_seconds", ("TotalTimeSeconds",), float),
        ("distance_meters", ("DistanceMeters",), float),
        ("maximum_speed", ("MaximumSpeed",), float),
        ("calories", ("Calories",), float),
        ("intensity", ("Intensity",), str),
        ("trigger_method", ("TriggerMethod",), str),
        ("track", ("Track/Trackpoint",), [Trackpoint]),
    ),
    Trackpoint: (
        ("time", ("Time",), datetime),
        ("latitude_degrees", ("Position/LatitudeDegrees", "LatitudeDegrees"), float),
        ("longitude_degrees", ("Position/LongitudeDegrees", "LongitudeDegrees"), float),
        ("altitude_meters", ("AltitudeMeters",), float),
        ("heart_rate_bpm", ("HeartRateBpm/Value",), int),
        ("cadence", ("Cadence",), int),
        ("speed", ("Extensions/TPX/Speed",), float),
    ),
}
