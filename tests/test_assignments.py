import pytest

from wildfire_sim.assignments import (
    FireApparatusAssignments,
    FirefighterAssignments,
    FireStationAssignments,
    IncidentAssignments,
)


class Actor:
    def __init__(self, name):
        self.name = name


def test_firefighter_equal_by_firefighter():
    ff = Actor("ff")
    a = FirefighterAssignments(ff, fire_apparatus=Actor("engine"))
    b = FirefighterAssignments(ff)
    assert a == b
    assert a != FirefighterAssignments(Actor("other"))


def test_compare_with_actor():
    ff = Actor("ff")
    assert FirefighterAssignments(ff) == ff
    assert not (FirefighterAssignments(ff) == Actor("x"))


def test_empty_record_never_equals_actor():
    assert not (FirefighterAssignments() == Actor("x"))
    assert not (FirefighterAssignments(Actor("x")) == None)  # noqa: E711


def test_empty_records_equal_each_other():
    empty = FireStationAssignments()
    assert (empty == FireStationAssignments(None)) is True
    assert (empty == FireStationAssignments(Actor("st"))) is False


@pytest.mark.parametrize(
    "cls",
    [FirefighterAssignments, FireStationAssignments, FireApparatusAssignments, IncidentAssignments],
)
def test_each_record_matches_its_key(cls):
    actor = Actor("k")
    record = cls(actor)
    assert record == actor
    assert record == cls(actor)
    assert record != cls(Actor("other"))
    assert hash(record) == hash(cls(actor))


def test_records_in_list_lookup():
    station = Actor("st")
    records = [FireStationAssignments(Actor("a")), FireStationAssignments(station)]
    assert records.index(FireStationAssignments(station)) == 1


def test_apparatus_fields_kept():
    engine, station = Actor("engine"), Actor("station")
    record = FireApparatusAssignments(engine, fire_station=station)
    assert record.fire_station is station
    assert record.incident is None