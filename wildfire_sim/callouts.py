"""Callouts: incident definitions, their generation at a property, and dispatch."""

from __future__ import annotations

import copy
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Iterable, Optional

from wildfire_sim.events import Event

log = logging.getLogger(__name__)

_NEVER = datetime.min.replace(tzinfo=timezone.utc)

_DIGIT_WORDS = {
    "0": "zero",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
}


def digit_to_word(digit: str) -> str:
    """The spoken word for a decimal digit, or an empty string for anything else."""
    return _DIGIT_WORDS.get(digit, "")


def process_address_string(address: str) -> list[str]:
    """Split an address into vox words.

    Leading digits of each word are spoken one by one; at the first non-digit the
    whole word is added in lower case and the rest of it is skipped.
    """
    words: list[str] = []
    for component in address.split():
        for char in component:
            if char in _DIGIT_WORDS:
                words.append(_DIGIT_WORDS[char])
            else:
                words.append(component.lower())
                break
    return words


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    return value if value < high else high


class IncidentType(Enum):
    MEDICAL = "medical"
    FIRE = "fire"


class CalloutError(Exception):
    """A callout could not be set up."""


@dataclass
class CalloutEquipmentUse:
    no_consume: bool = False
    total_usage_value: float = 1.0


@dataclass
class CalloutDataFire:
    equipment_usage: list[CalloutEquipmentUse] = field(default_factory=list)
    task_progress: float = 0.25
    difficulty: float = 0.1
    water_usage: float = 0.833


@dataclass
class CalloutDataMedical:
    equipment_usage: list[CalloutEquipmentUse] = field(default_factory=list)
    task_progress: float = 0.0
    refusal_chance: float = 0.0
    difficulty: float = 0.0


@dataclass
class CalloutAssignment:
    assigned_vehicle: Optional[Any] = None
    assigned_character: Optional[Any] = None


@dataclass
class CalloutUnits:
    unit_type: Optional[Any] = None
    quantity_minimum: int = 0


@dataclass
class Callouts:
    """The definition of one kind of callout."""

    display_name: str = ""
    display_icon: Optional[Any] = None
    alert_level: int = 0
    payment: float = 0.0
    penalty: float = 0.0
    difficulty_min: float = 0.0
    difficulty_max: float = 1.0
    difficulty_variance: float = 0.2
    patients_min: int = 0
    patients_max: int = 0
    refusal_threshold: float = 0.0
    refusal_chance_max: float = 0.0
    min_fires: int = 0
    max_fires: int = 0
    deadline_days: int = 0
    deadline_hours: int = 0
    deadline_minutes: int = 0
    type_of_incident: IncidentType = IncidentType.MEDICAL
    vox_phrases: str = ""
    units: list[CalloutUnits] = field(default_factory=list)
    medical_equipment: list[CalloutEquipmentUse] = field(default_factory=list)
    fire_equipment: list[CalloutEquipmentUse] = field(default_factory=list)


@dataclass
class CalloutData:
    """A callout as generated for one incident."""

    callout: Callouts = field(default_factory=Callouts)
    seconds_to_start: float = 0.0
    property_actor: Optional[Any] = None
    resolution_deadline: datetime = _NEVER
    server_time_start: datetime = _NEVER
    patients: list[CalloutDataMedical] = field(default_factory=list)
    fires: list[CalloutDataFire] = field(default_factory=list)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CalloutActor:
    """One incident in the world: generated, dispatched, and expired at its deadline.

    Property actors must offer ``street_address_for_vox()`` returning a string.
    Events: ``on_incident_started(actor)``, ``on_dispatch_initial(actor)``,
    ``on_dispatch_full(actor)`` and ``on_radio(sentence)``.
    """

    def __init__(
        self,
        name: str = "CalloutActor",
        has_authority: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.name = name
        self.has_authority = has_authority
        self.incident_number = 0
        self.callout_data = CalloutData()
        self.assigned_units: list[CalloutAssignment] = []
        self.callout_ready = False
        self.expiration_timer_active = False
        self.callout_timer_active = False
        self.destroyed = False
        self._rng = rng if rng is not None else random.Random()
        self.on_incident_started = Event()
        self.on_dispatch_initial = Event()
        self.on_dispatch_full = Event()
        self.on_radio = Event()

    def _rand_int(self, low: int, high: int) -> int:
        return low if high <= low else self._rng.randint(low, high)

    def set_callout_data(
        self,
        callout: Callouts,
        seconds_to_start: float,
        properties: Iterable[Any],
        now: Optional[datetime] = None,
    ) -> CalloutData:
        """Generate this incident from ``callout`` at a random one of ``properties``.

        The stored data keeps ``callout`` as it was handed in; ``callout`` itself is
        brought into range and given default vox phrases. Raises CalloutError when the
        callout has already started, no property is available, or it has neither
        patients nor fires.
        """
        if self.callout_ready:
            raise CalloutError(f"{self.name}: callout has already initialized")

        data = CalloutData(callout=copy.deepcopy(callout), seconds_to_start=seconds_to_start)
        candidates = list(properties)
        if not candidates:
            raise CalloutError(f"{self.name}: no property (location) found")
        data.property_actor = candidates[self._rng.randint(0, len(candidates) - 1)]
        if data.property_actor is None:
            raise CalloutError(f"{self.name}: no property (location) found")

        callout.patients_min = max(callout.patients_min, 0)
        callout.patients_max = max(callout.patients_max, 0)
        callout.min_fires = max(callout.min_fires, 0)
        callout.max_fires = max(callout.max_fires, 0)

        if callout.patients_max == 0 and callout.max_fires == 0:
            raise CalloutError(
                f"{self.name}: call type {callout.display_name!r} has no fire or patient data"
            )

        callout.difficulty_min = _clamp(callout.difficulty_min, 0.0, 1.0)
        callout.difficulty_max = _clamp(callout.difficulty_max, callout.difficulty_min, 1.0)
        callout.difficulty_variance = _clamp(callout.difficulty_variance, 0.0, 1.0)
        difficulty = self._rng.uniform(callout.difficulty_min, callout.difficulty_max)
        variance = callout.difficulty_variance

        number_of_patients = callout.patients_max
        if callout.patients_max > 0:
            if callout.patients_min != callout.patients_max:
                number_of_patients = self._rand_int(callout.patients_min, callout.patients_max)
            for _ in range(number_of_patients):
                spread = self._rng.uniform(-variance, variance)
                patient = CalloutDataMedical(equipment_usage=list(callout.medical_equipment))
                patient.difficulty = _clamp(difficulty + spread, 0.0, 1.0)
                threshold = _clamp(patient.difficulty, 0.0, callout.refusal_threshold)
                if threshold > 0.0:
                    patient.refusal_chance = callout.refusal_chance_max * (
                        1.0 - threshold / callout.refusal_threshold
                    )
                else:
                    patient.refusal_chance = 0.0
                data.patients.append(patient)

        number_of_fires = callout.max_fires
        if callout.max_fires > 0:
            # The fire count is only drawn when the patient range is open.
            if callout.patients_min != callout.patients_max:
                number_of_fires = self._rand_int(callout.min_fires, callout.max_fires)
            for _ in range(number_of_fires):
                spread = self._rng.uniform(-variance, variance)
                fire = CalloutDataFire(equipment_usage=list(callout.fire_equipment))
                fire.difficulty = _clamp(difficulty + spread, 0.0, 1.0)
                fire.water_usage += fire.difficulty * fire.water_usage
                data.fires.append(fire)

        if not callout.vox_phrases:
            callout.vox_phrases = "structure_fire" if number_of_fires > 0 else "medical"

        current = now if now is not None else _utc_now()
        data.resolution_deadline = current + timedelta(
            days=callout.deadline_days,
            hours=callout.deadline_hours,
            minutes=callout.deadline_minutes,
        )
        data.server_time_start = current
        self.callout_data = data
        return data

    def start_callout(self, now: Optional[datetime] = None) -> bool:
        """Dispatch the callout if its deadline is still ahead; returns whether it started."""
        current = now if now is not None else _utc_now()
        if self.callout_data.resolution_deadline > current:
            self.dispatch_initial()
            self.expiration_timer_active = True
            return True
        log.error(
            "%s: callout resolution deadline (%s) was sooner than current game time (%s)",
            self.name,
            self.callout_data.resolution_deadline,
            current,
        )
        return False

    def assign_unit_to_callout(self, vehicle: Any, firefighter: Any) -> bool:
        """Assign a crew member in a vehicle; returns False for a repeat or a missing unit."""
        if vehicle is None or firefighter is None:
            return False
        for unit in self.assigned_units:
            if unit.assigned_vehicle == vehicle and unit.assigned_character == firefighter:
                return False
        self.assigned_units.append(
            CalloutAssignment(assigned_vehicle=vehicle, assigned_character=firefighter)
        )
        log.info("%s: %s (%s) has been assigned to this callout", self.name, firefighter, vehicle)
        return True

    def dispatch_initial(self) -> Optional[str]:
        """Ready the callout, send the pre-alert and return the radio sentence spoken."""
        if not self.has_authority:
            return None
        property_actor = self.callout_data.property_actor
        if property_actor is None:
            raise CalloutError(f"{self.name}: callout has no location to dispatch to")

        if self.on_incident_started.is_bound():
            self.on_incident_started.broadcast(self)
        self.callout_ready = True
        self.callout_timer_active = True
        if self.on_dispatch_initial.is_bound():
            self.on_dispatch_initial.broadcast(self)

        incident_type = "medical"
        if self.callout_data.callout.type_of_incident != IncidentType.MEDICAL:
            incident_type = "structure_fire"
        sentence = ". alert3 . stop_tx . . start_tx , golden_crest, " + incident_type + ", "
        sentence += property_actor.street_address_for_vox() + "."
        if self.on_radio.is_bound():
            self.on_radio.broadcast(sentence)
        return sentence

    def dispatch_callout(self) -> None:
        """Announce the full dispatch of the incident."""
        if not self.has_authority:
            return
        if self.on_dispatch_full.is_bound():
            self.on_dispatch_full.broadcast(self)

    def check_callout_expired(self, now: Optional[datetime] = None) -> bool:
        """Stop and destroy the callout once its deadline has passed; returns whether it did."""
        current = now if now is not None else _utc_now()
        if self.callout_data.resolution_deadline < current:
            self.expiration_timer_active = False
            self.callout_timer_active = False
            log.warning("%s: this callout has passed the deadline and has expired", self.name)
            self.destroyed = True
            return True
        return False