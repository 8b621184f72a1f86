"""Character attributes (health, fatigue, morale, thirst, hunger) kept within 0..100."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wildfire_sim.events import Event

MIN_VALUE = 0.0
MAX_VALUE = 100.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Attribute(Enum):
    HEALTH = "Health"
    FATIGUE = "Fatigue"
    MORALE = "Morale"
    THIRST = "Thirst"
    HUNGER = "Hunger"


@dataclass
class _AttributeData:
    base_value: float
    current_value: float


def _require(attribute: object) -> Attribute:
    if not isinstance(attribute, Attribute):
        raise ValueError(f"not a valid attribute: {attribute!r}")
    return attribute


class AttributeSet:
    """The attributes every character carries.

    ``on_attribute_updated`` is broadcast with ``(attribute, old_value, new_value)``
    whenever a value actually changes.
    """

    def __init__(self) -> None:
        self._data = {
            Attribute.HEALTH: _AttributeData(MAX_VALUE, 100.0),
            Attribute.FATIGUE: _AttributeData(MAX_VALUE, 0.0),
            Attribute.MORALE: _AttributeData(MAX_VALUE, 50.0),
            Attribute.THIRST: _AttributeData(MAX_VALUE, 0.0),
            Attribute.HUNGER: _AttributeData(MAX_VALUE, 0.0),
        }
        self.on_attribute_updated = Event()

    def get_attribute_value(self, attribute: Attribute) -> float:
        """Current value of ``attribute``; raises ValueError for anything else."""
        return self._data[_require(attribute)].current_value

    def base_value(self, attribute: Attribute) -> float:
        return self._data[_require(attribute)].base_value

    def set_attribute_value(self, attribute: Attribute, new_value: float) -> bool:
        """Set ``attribute`` to ``new_value`` clamped to 0..100.

        Returns False when the clamped value equals the current one.
        """
        attribute = _require(attribute)
        old_value = self.get_attribute_value(attribute)
        final_value = _clamp(float(new_value), MIN_VALUE, MAX_VALUE)
        if old_value == final_value:
            return False
        self._data[attribute].current_value = final_value
        if self.on_attribute_updated.is_bound():
            self.on_attribute_updated.broadcast(
                attribute, old_value, self.get_attribute_value(attribute)
            )
        return True

    def modify_attribute(self, attribute: Attribute, add_value: float) -> bool:
        """Add ``add_value`` to ``attribute``; returns whether it changed."""
        attribute = _require(attribute)
        return self.set_attribute_value(
            attribute, self.get_attribute_value(attribute) + add_value
        )

    def modify_attribute_percent(self, attribute: Attribute, percent_change: float) -> bool:
        """Scale ``attribute`` by ``1 + percent_change``; returns whether it changed."""
        attribute = _require(attribute)
        old_value = self.get_attribute_value(attribute)
        return self.set_attribute_value(
            attribute, _clamp(old_value + old_value * percent_change, MIN_VALUE, MAX_VALUE)
        )

    @property
    def health(self) -> float:
        return self.get_attribute_value(Attribute.HEALTH)

    @property
    def fatigue(self) -> float:
        return self.get_attribute_value(Attribute.FATIGUE)

    @property
    def morale(self) -> float:
        return self.get_attribute_value(Attribute.MORALE)

    @property
    def thirst(self) -> float:
        return self.get_attribute_value(Attribute.THIRST)

    @property
    def hunger(self) -> float:
        return self.get_attribute_value(Attribute.HUNGER)