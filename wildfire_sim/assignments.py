"""Assignment records tying firefighters, apparatus, stations and incidents together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


def _key_equal(mine: Any, other: Any, cls: type, key: str) -> bool:
    if isinstance(other, cls):
        return getattr(other, key) == mine
    if mine is not None and other is not None:
        return mine == other
    return False


@dataclass(eq=False)
class FirefighterAssignments:
    """Where a firefighter is assigned; equal by firefighter."""

    firefighter: Optional[Any] = None
    fire_apparatus: Optional[Any] = None
    home_fire_station: Optional[Any] = None
    incident: Optional[Any] = None

    def __eq__(self, other: object) -> bool:
        return _key_equal(self.firefighter, other, FirefighterAssignments, "firefighter")

    def __hash__(self) -> int:
        return hash(self.firefighter)


@dataclass(eq=False)
class FireStationAssignments:
    """A fire station's assignment record; equal by fire station."""

    fire_station: Optional[Any] = None

    def __eq__(self, other: object) -> bool:
        return _key_equal(self.fire_station, other, FireStationAssignments, "fire_station")

    def __hash__(self) -> int:
        return hash(self.fire_station)


@dataclass(eq=False)
class FireApparatusAssignments:
    """Where an apparatus is assigned; equal by apparatus."""

    fire_apparatus: Optional[Any] = None
    fire_station: Optional[Any] = None
    incident: Optional[Any] = None

    def __eq__(self, other: object) -> bool:
        return _key_equal(self.fire_apparatus, other, FireApparatusAssignments, "fire_apparatus")

    def __hash__(self) -> int:
        return hash(self.fire_apparatus)


@dataclass(eq=False)
class IncidentAssignments:
    """An incident's assignment record; equal by incident."""

    incident: Optional[Any] = None

    def __eq__(self, other: object) -> bool:
        return _key_equal(self.incident, other, IncidentAssignments, "incident")

    def __hash__(self) -> int:
        return hash(self.incident)