"""Summary metrics for decoded TCX activities.

All functions are pure reductions over an already decoded ``Activity``.
Aggregates over empty collections are not errors: totals come back as zero,
and averages come back as NaN, following IEEE float division rather than
Python's ``ZeroDivisionError``.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, tzinfo
from typing import Any, NamedTuple

import pytz

from tcxkit.models import Activity, Trackpoint

METERS_TO_MILES = 0.00062137

_MIN_SECONDS = timedelta.min.days * 86400
_MAX_SECONDS = timedelta.max.days * 86400 + timedelta.max.seconds


def _ieee_div(numerator: float, denominator: float) -> float:
    """Divide like IEEE 754 does: x/0 is ±inf and 0/0 (or nan/0) is nan."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _trackpoints(activity: Activity) -> list[Trackpoint]:
    return [point for lap in activity.laps for point in lap.track]


class Pace(NamedTuple):
    """Minutes per distance unit, rendered as ``"<minutes>:<seconds>"``.

    Both parts are formatted with zero decimals (``.0f``), which rounds half
    to even on the exact binary value. The seconds part is ``frac * 60`` and
    is not clamped. An infinite pace has a NaN seconds part.
    """

    minutes: float

    def __str__(self) -> str:
        fracpart, intpart = math.modf(self.minutes)
        if math.isinf(intpart):
            fracpart = math.nan
        return f"{intpart:.0f}:{fracpart * 60:.0f}"


def pace_from_speed(speed: float) -> Pace:
    """Convert a speed in meters/second to a ``Pace`` using ``50 / (speed * 3)``."""
    return Pace(_ieee_div(50, speed * 3))


def start_time(activity: Activity, tz: tzinfo | str | None = None) -> datetime | None:
    """Return the activity's identifier timestamp in local time.

    Without *tz* the process's local time zone is used; *tz* may be a tzinfo
    or an IANA name such as ``"US/Eastern"``.
    """
    if activity.id is None:
        return None
    if isinstance(tz, str):
        tz = pytz.timezone(tz)
    return activity.id.astimezone(tz)


def total_duration(activity: Activity) -> timedelta:
    """Sum of lap times, each truncated to whole seconds.

    Laps with a NaN or infinite time are skipped and the sum saturates at the
    ``timedelta`` range.
    """
    seconds = 0
    for lap in activity.laps:
        if math.isfinite(lap.total_time_seconds):
            seconds += math.trunc(lap.total_time_seconds)
    seconds = min(max(seconds, _MIN_SECONDS), _MAX_SECONDS)
    return timedelta(seconds=seconds)


def total_distance(activity: Activity) -> float:
    return sum((lap.distance_meters for lap in activity.laps), 0.0)


def total_distance_in_miles(activity: Activity) -> float:
    """Converts meters to miles."""
    return total_distance(activity) * METERS_TO_MILES


def average_heartbeat(activity: Activity) -> float:
    """Mean heart rate over every trackpoint; NaN when there are none."""
    points = _trackpoints(activity)
    return _ieee_div(float(sum(point.heart_rate_bpm for point in points)), float(len(points)))


def average_pace(activity: Activity) -> Pace:
    points = _trackpoints(activity)
    speed = _ieee_div(sum((point.speed for point in points), 0.0), float(len(points)))
    return pace_from_speed(speed)


def summarize_activity(activity: Activity, config: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return the headline metrics of *activity* as a plain dict.

    ``start_time`` is rendered in ``config["home_timezone"]`` when one is
    configured, otherwise in the process's local time zone.
    """
    config = config or {}
    return {
        "sport": activity.sport,
        "start_time": start_time(activity, config.get("home_timezone")),
        "duration": total_duration(activity),
        "distance": total_distance(activity),
        "distance_miles": total_distance_in_miles(activity),
        "average_heartbeat": average_heartbeat(activity),
        "average_pace": str(average_pace(activity)),
    }
