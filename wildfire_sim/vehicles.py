"""Vehicles with seats, and fire apparatus with callsigns and crews."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from wildfire_sim.events import Event

log = logging.getLogger(__name__)


def format_callsign(apparatus_type: str, station_number: int, unique_number: int) -> str:
    """Callsign such as ``Engine 307``: type, station, then the unit number in two digits."""
    return f"{apparatus_type} {station_number}{unique_number:02d}"


def _name_of(character: Any) -> str:
    if character is None:
        return "(nobody)"
    return str(getattr(character, "name", character))


@dataclass
class VehicleSeat:
    seat_number: int = 0
    occupant: Optional[Any] = None

    def __post_init__(self) -> None:
        self.seat_number = abs(self.seat_number)


class Vehicle:
    """A drivable vehicle with numbered seats.

    ``on_seat_occupant_changed`` is broadcast with ``(old, new, seat_number)``.
    """

    def __init__(self, number_of_seats: int = 0, name: str = "Vehicle") -> None:
        self.name = name
        self.number_of_seats = number_of_seats
        self.seats = [VehicleSeat(i) for i in range(number_of_seats)]
        self.throttle = 0.0
        self.steering = 0.0
        self.handbrake = False
        self.on_seat_occupant_changed = Event()

    def _find_seat(self, seat_number: int) -> Optional[VehicleSeat]:
        return next((seat for seat in self.seats if seat.seat_number == seat_number), None)

    def set_seat_occupant(self, seat_number: int, character: Optional[Any]) -> None:
        """Seat ``character`` (or clear with None); raises ValueError if the seat is taken."""
        seat = self._find_seat(seat_number)
        if seat is None:
            return
        if seat.occupant is not None and character is not None:
            raise ValueError(
                f"{self.name}: seat #{seat_number} is already occupied by {_name_of(seat.occupant)}"
            )
        log.info("%s: seat #%d is now occupied by %s", self.name, seat_number, _name_of(character))
        seat.occupant = character

    def get_seat_occupant(self, seat_number: int) -> Optional[Any]:
        seat = self._find_seat(seat_number)
        return seat.occupant if seat is not None else None

    def move_forward(self, value: float) -> None:
        self.throttle = float(value)

    def move_right(self, value: float) -> None:
        self.steering = float(value)

    def press_handbrake(self) -> None:
        self.handbrake = True

    def release_handbrake(self) -> None:
        self.handbrake = False

    def seat_changes(self, old_seats: list[VehicleSeat]) -> list[tuple[Any, Any, int]]:
        """Compare with an earlier seat list; report and broadcast each changed seat."""
        changes = [
            (old.occupant, new.occupant, index)
            for index, (old, new) in enumerate(
                zip(old_seats[: self.number_of_seats], self.seats[: self.number_of_seats])
            )
            if old.occupant is not new.occupant
        ]
        if self.on_seat_occupant_changed.is_bound():
            for change in changes:
                self.on_seat_occupant_changed.broadcast(*change)
        return changes


class FireApparatus(Vehicle):
    """A fire vehicle with a callsign and an assigned crew.

    ``on_apparatus_identity_changed`` is broadcast with ``(old_callsign, new_callsign)``.
    """

    def __init__(
        self,
        number_of_seats: int = 0,
        fire_apparatus_type: str = "None",
        name: str = "FireApparatus",
    ) -> None:
        super().__init__(number_of_seats, name)
        self.identity_station = 1
        self.identity_type = "None"
        self.identity_unique = 1
        self._identity_override = ""
        self.fire_apparatus_type = fire_apparatus_type
        self.assigned_firefighters: list[Any] = []
        self.on_apparatus_identity_changed = Event()
        if fire_apparatus_type != "None":
            self.identity_type = fire_apparatus_type

    @property
    def apparatus_identity(self) -> str:
        """The override if one is set, else the callsign built from the identities."""
        if self._identity_override:
            return self._identity_override
        return format_callsign(self.identity_type, self.identity_station, self.identity_unique)

    @apparatus_identity.setter
    def apparatus_identity(self, new_identity: str) -> None:
        old = self.apparatus_identity
        self._identity_override = new_identity
        self._notify_identity(old)

    def _notify_identity(self, old: str) -> None:
        new = self.apparatus_identity
        if old != new and self.on_apparatus_identity_changed.is_bound():
            self.on_apparatus_identity_changed.broadcast(old, new)

    def set_identities(self, station_number: int, apparatus_type: str, unique_number: int) -> None:
        old = self.apparatus_identity
        self.identity_station = station_number
        self.identity_type = apparatus_type
        self.identity_unique = unique_number
        self._notify_identity(old)

    def set_firefighter_assigned(self, firefighter: Any, assign: bool) -> None:
        """Add ``firefighter`` to the crew, or remove them; no duplicates are kept."""
        if assign:
            if firefighter not in self.assigned_firefighters:
                self.assigned_firefighters.append(firefighter)
        elif firefighter in self.assigned_firefighters:
            self.assigned_firefighters.remove(firefighter)