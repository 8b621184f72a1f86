"""World data records: addresses, vox sounds, shift schedules and fire stations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional

from wildfire_sim.events import Event

ERROR_NO_PARK_SPOTS = "There are no parking spots available"
ERROR_NOT_ENOUGH_MONEY = "Not Enough Money"

Vector = tuple[float, float, float]


@dataclass
class ResourceNeeds:
    """A unit a call needs; a required one must be present for the call to be accepted."""

    is_required: bool = False
    resource_type: Optional[Any] = None
    minimum_quantity: int = 0


@dataclass
class StreetAddress:
    block_number: int = 0
    house_number: int = 0
    suite_number: int = 0
    street_name: str = "Unnamed"
    street_type: str = "Street"


@dataclass
class VoxSounds:
    """A vox phrase: its primary sound, alternatives and the voice that speaks it."""

    vox_sound: Optional[Any] = None
    vox_alternatives: list[Any] = field(default_factory=list)
    vox_voice: int = 0


@dataclass
class ShiftSchedule:
    day_of_week: int = 0
    start_time: timedelta = timedelta(hours=6, minutes=30)
    duration: timedelta = timedelta(days=3)


@dataclass
class ParkingSpot:
    """A place in a station where one vehicle can be parked."""

    location: Vector = (0.0, 0.0, 0.0)
    rotation: Vector = (0.0, 0.0, 0.0)
    assigned_vehicle: Optional[Any] = None


@dataclass(eq=False)
class FireStation:
    """A fire station with a number, a spawn point and parking spots.

    Events: ``on_fire_station_number_changed(old, new)`` and
    ``on_fire_station_name_changed(old, new)``.
    """

    fire_station_number: int = 0
    spawn_point: Vector = (0.0, 0.0, 0.0)
    parking_spots: list[ParkingSpot] = field(default_factory=list)
    on_fire_station_number_changed: Event = field(default_factory=Event, repr=False)
    on_fire_station_name_changed: Event = field(default_factory=Event, repr=False)

    def free_parking_spot(self) -> Optional[ParkingSpot]:
        """The first parking spot with no vehicle assigned, or None if all are taken."""
        return next(
            (spot for spot in self.parking_spots if spot.assigned_vehicle is None), None
        )