import pytest

from tcxkit.models import SCHEMA, Activity, Creator, Lap, Tcx, Trackpoint, new_tcx


def test_new_tcx_is_empty():
    tcx = new_tcx()

    assert tcx == Tcx()
    assert tcx.activities == ()
    assert tcx.xmlns == ""


def test_zero_values():
    assert Trackpoint() == Trackpoint(None, 0.0, 0.0, 0.0, 0, 0, 0.0)
    assert Lap().track == ()
    assert Lap().start_time is None
    assert Activity().creator == Creator("", 0, 0)
    assert Activity().id is None


def test_records_are_immutable():
    lap = Lap(distance_meters=10.0)

    with pytest.raises(AttributeError):
        lap.distance_meters = 20.0


def test_schema_covers_every_field():
    """Every record field except the root's namespace declarations has a source path."""
    for record_type in (Activity, Creator, Lap, Trackpoint):
        assert [name for name, _, _ in SCHEMA[record_type]] == list(record_type._fields)
    assert {name for name, _, _ in SCHEMA[Tcx]} == {"schema_location", "activities"}
