# wildfire_sim

This package holds the rules of a firefighting management simulation as plain
Python objects. It keeps the state of the game and makes its decisions. It has
no engine and it does not draw anything. Anything random takes an optional
`random.Random`, so results can be reproduced. Anything that depends on the
time takes an explicit `now` or clock.

## Modules

- `wildfire_sim.tags` provides `GameplayTag`, a frozen, dotted, hierarchical
  name.
  - `matches_tag(other)` is true for the tag itself and for any tag beneath it.
  - `matches_tag_exact(other)` is true only for the same tag.
  - The module also defines constants for resources, callout flags, real
    estate, tools and vehicles, for example `RESOURCE_MONEY`, `TOOL_FIRE_PULASKI`
    and `VEHICLE_FIRE_ENGINE`.
- `wildfire_sim.events` provides `Event`, a multicast notification.
  - `subscribe` and `unsubscribe` manage handlers. Subscribing the same handler
    twice has no effect.
  - `is_bound` and `is_already_bound` report on the handlers.
  - `broadcast(*args)` calls every handler in the order they subscribed.
- `wildfire_sim.enums` provides the enumerations `TimeOfDay`,
  `WeatherCondition`, `ClimateSeason`, `AtmosphericStability`,
  `MessageAlertType` and `ScheduleType`. `ScheduleType` has a `display_name`.
- `wildfire_sim.attributes` provides `AttributeSet`, which holds `Attribute.HEALTH`,
  `FATIGUE`, `MORALE`, `THIRST` and `HUNGER`.
  - Every value is clamped to 0–100.
  - `set_attribute_value`, `modify_attribute` and `modify_attribute_percent`
    return whether the value changed.
  - When a value changes, `on_attribute_updated` broadcasts
    `(attribute, old, new)`.
- `wildfire_sim.abilities` provides `AbilityComponent`, which drives hunger and
  thirst on a repeating timer.
  - Call `initialize_attributes(attribute_set)` first.
  - Then move time forward with `advance(seconds)`. It returns the number of
    ticks that fired.
  - The methods that set, add, remove or modify hunger and thirst return the new
    value. They raise `RuntimeError` if `initialize_attributes` has not been
    called.
- `wildfire_sim.assignments` provides the records `FirefighterAssignments`,
  `FireStationAssignments`, `FireApparatusAssignments` and
  `IncidentAssignments`. Each record compares equal by its key object.
- `wildfire_sim.vehicles` provides:
  - `Vehicle`, which has numbered `VehicleSeat`s.
    - `set_seat_occupant` raises `ValueError` if the seat is already taken.
    - `seat_changes(old_seats)` reports the seats that changed and broadcasts
      them.
    - It also holds throttle, steering and handbrake inputs.
  - `FireApparatus`, which has a callsign and a crew.
    - Its `apparatus_identity` is an override if one is set. Otherwise it is
      `format_callsign(type, station, unit)`, for example
      `format_callsign("Engine", 1, 1) == "Engine 101"`.
- `wildfire_sim.saves` provides:
  - `SaveGame`, `CharacterSaveGame`, `FirefighterSaveGame` and `PlayerSave`.
  - `JobContract.from_save(save)`. Contracts are equal by contract id.
  - `generate_guid()`, which returns 32 upper-case hex digits.
  - `SaveStore`, an in-memory store of copies keyed by `(slot_name, user_index)`.
- `wildfire_sim.callouts` provides:
  - `Callouts`, the definition of a kind of incident.
  - `CalloutActor`:
    - `set_callout_data` picks a property, generates patients and fires, and
      sets the deadline. It raises `CalloutError` if the callout cannot be set
      up.
    - It also has `start_callout`, `dispatch_initial` (which returns the radio
      sentence), `dispatch_callout`, `assign_unit_to_callout` and
      `check_callout_expired`.
  - `process_address_string("123 Main St")`, which returns
    `["one", "two", "three", "main", "st"]`.
- `wildfire_sim.game_mode` provides:
  - The tag groups `Role`, `Gender` and `Ethnicity`.
  - The random generators `generate_random_role`, `generate_random_age`,
    `generate_random_gender`, `generate_random_race`,
    `pick_random_ethnic_group`, `pick_random_father_ethnic_group`,
    `determine_mixed_race_outcome` and `generate_random_string`.
  - `calculate_hourly_rate`, which raises base pay 3.2% a year for up to 25
    years.
  - `next_fire_station_number`.
  - `GameMode`, which generates characters and keeps a transfer list of up to
    ten job offers, taken from `NameRow` tables.
- `wildfire_sim.world_data` provides `StreetAddress`, `VoxSounds`,
  `ShiftSchedule`, `ResourceNeeds`, `ParkingSpot` and `FireStation`.
  `FireStation.free_parking_spot()` returns the first free spot.
- `wildfire_sim.game_instance` provides `GameInstance`, which holds the
  minimum wage, the starting resources and the character meshes.
  `get_mesh_options_data(gender)` picks a mesh for the given gender.
- `wildfire_sim.game_state` provides `GameState`, which keeps the hiring list in
  step with the game mode's transfer list and broadcasts
  `on_transfer_list_updated`.
- `wildfire_sim.player_state` provides:
  - `PlayerState`, which manages resources (money, power, oxygen, water) and
    the owned station.
    - `purchase_fire_apparatus` raises `PurchaseError`.
    - `accept_job_contract` pays 80 hours up front and raises `HiringError`.
  - `LivePlayerState`, which reloads a player save or hires a starting team of
    twelve.
  - `TestPlayerState`.

## Example

```python
import random

from wildfire_sim.game_mode import Role, calculate_hourly_rate, generate_random_age

rng = random.Random(7)
age = generate_random_age(Role.FIRE_CPT, rng)
pay = calculate_hourly_rate(Role.FIRE_CPT, years_of_service=5)
print(age, round(pay, 2))
```

```python
from wildfire_sim.attributes import Attribute, AttributeSet

stats = AttributeSet()
stats.on_attribute_updated.subscribe(lambda attr, old, new: print(attr, old, new))
stats.set_attribute_value(Attribute.HUNGER, 40.0)
stats.modify_attribute_percent(Attribute.HUNGER, 0.5)   # hunger becomes 60.0
```

## What it does not do

- It has no command-line program, no graphics, no audio and no networking.
  - Flags such as `has_authority`, and the `server` that a client-side player
    state forwards requests to, only decide which object acts.
- Saves are kept only in memory by `SaveStore`. Nothing is written to disk.
- `LivePlayerState` does not record the personnel it generates in the new
  player save.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```