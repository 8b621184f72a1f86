"""Ability component: drives a character's hunger and thirst over time."""

from __future__ import annotations

from typing import Optional

from wildfire_sim.attributes import Attribute, AttributeSet
from wildfire_sim.events import Event


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class AbilityComponent:
    """Owns a character's attribute set and ticks its needs on a repeating timer.

    ``on_attribute_changed`` is broadcast with ``(attribute, old_value, new_value)``
    whenever the attribute set reports a change.
    """

    def __init__(self, has_authority: bool = True) -> None:
        self.has_authority = has_authority
        self.stat_reduction = 0.1
        self.reduction_fatigue = 0.0
        self.reduction_morale = 0.0
        self.reduction_thirst = 0.07
        self.reduction_hunger = 0.0
        self.attribute_time_rate = 0.5
        self.on_attribute_changed = Event()
        self._attributes: Optional[AttributeSet] = None
        self._timer_active = False
        self._elapsed = 0.0

    @property
    def attributes(self) -> Optional[AttributeSet]:
        return self._attributes

    @property
    def timer_active(self) -> bool:
        return self._timer_active

    def initialize_attributes(self, attribute_set: Optional[AttributeSet]) -> None:
        """Take ownership of ``attribute_set`` and start the needs timer (authority only)."""
        if not self.has_authority or attribute_set is None:
            return
        self._attributes = attribute_set
        attribute_set.on_attribute_updated.subscribe(self.attribute_updated)
        self.set_new_timer_rate(self.attribute_time_rate)

    def timer_tick(self) -> None:
        """One tick of the needs timer: hunger and thirst grow."""
        if self._attributes is None:
            return
        self.add_hunger(self.stat_reduction + self.reduction_hunger)
        self.add_thirst(self.stat_reduction + self.reduction_thirst)

    def set_new_timer_rate(self, new_time_rate: float = 1.0) -> None:
        """Restart the repeating timer with ``new_time_rate`` seconds per tick.

        Nothing happens if the rate is unchanged and the timer is already running.
        A rate of zero or less leaves the timer stopped.
        """
        if new_time_rate == self.attribute_time_rate and self._timer_active:
            return
        self.attribute_time_rate = new_time_rate
        self._elapsed = 0.0
        self._timer_active = new_time_rate > 0.0

    def advance(self, seconds: float) -> int:
        """Let ``seconds`` of game time pass; returns the number of ticks fired."""
        if not self._timer_active or seconds <= 0.0:
            return 0
        self._elapsed += seconds
        ticks = 0
        while self._timer_active and self._elapsed >= self.attribute_time_rate:
            self._elapsed -= self.attribute_time_rate
            self.timer_tick()
            ticks += 1
        return ticks

    def _require_attributes(self) -> AttributeSet:
        if self._attributes is None:
            raise RuntimeError("attributes have not been initialized")
        return self._attributes

    def _set_value(self, attribute: Attribute, new_value: float) -> float:
        attributes = self._require_attributes()
        attributes.set_attribute_value(attribute, _clamp(new_value, 0.0, 100.0))
        return attributes.get_attribute_value(attribute)

    def _modify_percent(self, attribute: Attribute, percent_change: float) -> float:
        attributes = self._require_attributes()
        attributes.modify_attribute_percent(attribute, _clamp(percent_change, -1.0, 1.0))
        return attributes.get_attribute_value(attribute)

    def _add(self, attribute: Attribute, mod_value: float) -> float:
        attributes = self._require_attributes()
        return self._set_value(attribute, attributes.get_attribute_value(attribute) + mod_value)

    def set_hunger(self, new_value: float) -> float:
        return self._set_value(Attribute.HUNGER, new_value)

    def modify_hunger(self, percent_change: float) -> float:
        return self._modify_percent(Attribute.HUNGER, percent_change)

    def add_hunger(self, mod_value: float) -> float:
        return self._add(Attribute.HUNGER, mod_value)

    def remove_hunger(self, mod_value: float) -> float:
        return self._add(Attribute.HUNGER, -mod_value)

    def set_thirst(self, new_value: float) -> float:
        return self._set_value(Attribute.THIRST, new_value)

    def modify_thirst(self, percent_change: float) -> float:
        return self._modify_percent(Attribute.THIRST, percent_change)

    def add_thirst(self, mod_value: float) -> float:
        return self._add(Attribute.THIRST, mod_value)

    def remove_thirst(self, mod_value: float) -> float:
        return self._add(Attribute.THIRST, -mod_value)

    def attribute_updated(self, attribute: Attribute, old_value: float, new_value: float) -> None:
        """Forward an attribute set change to this component's listeners."""
        if self.on_attribute_changed.is_bound():
            self.on_attribute_changed.broadcast(attribute, old_value, new_value)