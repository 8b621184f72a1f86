"""Player state: resources, the owned fire station, fleet purchases and hiring."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from wildfire_sim.events import Event
from wildfire_sim.game_instance import GameInstance
from wildfire_sim.game_mode import GameMode, Role
from wildfire_sim.game_state import GameState
from wildfire_sim.saves import JobContract, PlayerSave, SaveStore
from wildfire_sim.tags import GameplayTag
from wildfire_sim.vehicles import FireApparatus
from wildfire_sim.world_data import (
    ERROR_NO_PARK_SPOTS,
    ERROR_NOT_ENOUGH_MONEY,
    FireStation,
)

log = logging.getLogger(__name__)

RESOURCE_MONEY = GameplayTag("Game.Resource.Money")
RESOURCE_WATER = GameplayTag("Game.Resource.Water")
RESOURCE_OXYGEN = GameplayTag("Game.Resource.Oxygen")
RESOURCE_POWER = GameplayTag("Game.Resource.Power")

# Hours of pay a new hire's first pay period costs.
PAY_PERIOD_HOURS = 80

_STARTING_PERSONNEL: tuple[GameplayTag, ...] = (
    Role.FIRE_CPT,
    Role.FIRE_CPT,
    Role.FIRE_CPT,
    Role.FIRE_ENG,
    Role.FIRE_ENG,
    Role.FIRE_ENG,
    Role.FIRE_ONE,
    Role.FIRE_ONE,
    Role.FIRE_ONE,
    Role.FIRE_ONE,
    Role.FIRE_TWO,
    Role.FIRE_TWO,
)


def _is_valid_tag(tag: Optional[GameplayTag]) -> bool:
    return tag is not None and tag != GameplayTag()


@dataclass
class FleetPurchaseData:
    """A fire apparatus that can be bought; ``fire_apparatus_type`` builds the vehicle."""

    display_icon: Optional[Any] = None
    display_name: str = ""
    apparatus_callsign: str = ""
    fire_apparatus_type: Optional[Callable[[], FireApparatus]] = None
    purchase_value: float = 0.0


class PurchaseError(Exception):
    """A fire apparatus could not be bought."""


class HiringError(Exception):
    """A job contract could not be accepted."""


class PlayerState:
    """Everything one player owns: resources, a fire station, a fleet and personnel.

    Events: ``on_resource_updated(tag, old, new)``,
    ``on_fire_station_changed(station, is_owned)`` and
    ``on_fire_apparatus_purchase_fail(reason)``.
    """

    def __init__(
        self,
        game_mode: Optional[GameMode] = None,
        game_state: Optional[GameState] = None,
        game_instance: Optional[GameInstance] = None,
        has_authority: bool = True,
        server: Optional[PlayerState] = None,
    ) -> None:
        self.game_mode = game_mode
        self.game_state = game_state
        self.game_instance = game_instance
        self.has_authority = has_authority
        self.server = server
        self.resources: dict[GameplayTag, float] = {}
        self.fire_station: Optional[FireStation] = None
        self.fleet: list[FireApparatus] = []
        self.personnel: list[JobContract] = []
        self.on_resource_updated = Event()
        self.on_fire_station_changed = Event()
        self.on_fire_apparatus_purchase_fail = Event()

    # Resources

    def set_resource_value(self, resource_tag: GameplayTag, new_value: float = 0.0) -> None:
        """Store a resource's value and announce the change."""
        if not _is_valid_tag(resource_tag):
            return
        old_value = self.resources.get(resource_tag, 0.0)
        self.resources[resource_tag] = new_value
        if self.on_resource_updated.is_bound():
            self.on_resource_updated.broadcast(resource_tag, old_value, new_value)
            log.info("Resource '%s' updated (%s -> %s)", resource_tag, old_value, new_value)

    def get_resource_value(self, resource_tag: GameplayTag) -> float:
        """A resource's value rounded to cents; 0.0 when it is not held."""
        if not _is_valid_tag(resource_tag) or resource_tag not in self.resources:
            return 0.0
        return math.floor(self.resources[resource_tag] * 100.0 + 0.5) / 100.0

    @property
    def all_resource_tags(self) -> frozenset[GameplayTag]:
        return frozenset(self.resources)

    def _add_resource(self, resource_tag: GameplayTag, add_value: float) -> float:
        new_value = self.get_resource_value(resource_tag) + add_value
        self.set_resource_value(resource_tag, new_value)
        return new_value

    def set_money(self, new_value: float = 0.0) -> None:
        self.set_resource_value(RESOURCE_MONEY, new_value)

    def set_kilowatt_usage(self, new_value: float = 0.0) -> None:
        self.set_resource_value(RESOURCE_POWER, new_value)

    def set_oxygen_reserve(self, new_value: float = 0.0) -> None:
        self.set_resource_value(RESOURCE_OXYGEN, new_value)

    def set_water_storage(self, new_value: float = 0.0) -> None:
        self.set_resource_value(RESOURCE_WATER, new_value)

    def add_money(self, add_value: float = 1.0) -> float:
        return self._add_resource(RESOURCE_MONEY, add_value)

    def add_kilowatt_usage(self, add_value: float = 1.0) -> float:
        return self._add_resource(RESOURCE_POWER, add_value)

    def add_oxygen_reserve(self, add_value: float = 1.0) -> float:
        return self._add_resource(RESOURCE_OXYGEN, add_value)

    def add_water_storage(self, add_value: float = 1.0) -> float:
        return self._add_resource(RESOURCE_WATER, add_value)

    def remove_money(self, remove_value: float = 1.0) -> float:
        return self.add_money(-remove_value)

    def remove_kilowatt_usage(self, remove_value: float = 1.0) -> float:
        return self.add_kilowatt_usage(-remove_value)

    def remove_oxygen_reserve(self, remove_value: float = 1.0) -> float:
        return self.add_oxygen_reserve(-remove_value)

    def remove_water_storage(self, remove_value: float = 1.0) -> float:
        return self.add_water_storage(-remove_value)

    @property
    def money(self) -> float:
        return self.get_resource_value(RESOURCE_MONEY)

    @property
    def kilowatt_usage(self) -> float:
        return self.get_resource_value(RESOURCE_POWER)

    @property
    def oxygen_reserve(self) -> float:
        return self.get_resource_value(RESOURCE_OXYGEN)

    @property
    def water_storage(self) -> float:
        return self.get_resource_value(RESOURCE_WATER)

    # Fire station

    def set_fire_station(self, fire_station: Optional[FireStation]) -> None:
        """Take ownership of a fire station (None gives it up)."""
        if not self.has_authority:
            if self.server is not None:
                self.server.set_fire_station(fire_station)
            return
        if self.fire_station is fire_station:
            log.info("No change in fire station; set_fire_station ignored")
            return
        old_station = self.fire_station
        self.fire_station = fire_station
        if self.on_fire_station_changed.is_bound():
            station = fire_station if fire_station is not None else old_station
            self.on_fire_station_changed.broadcast(station, fire_station is not None)

    # Purchases and hiring

    def _purchase_failed(self, reason: str) -> PurchaseError:
        if self.on_fire_apparatus_purchase_fail.is_bound():
            self.on_fire_apparatus_purchase_fail.broadcast(reason)
        return PurchaseError(reason)

    def purchase_fire_apparatus(
        self, purchase_data: FleetPurchaseData
    ) -> Optional[FireApparatus]:
        """Buy an apparatus and park it in the first free spot of the player's station.

        Returns None when the purchase names no apparatus type or is sent on to the
        server. Raises PurchaseError when there is no station, no free parking spot,
        or not enough money.
        """
        if purchase_data.fire_apparatus_type is None:
            return None
        if not self.has_authority:
            if self.server is not None:
                self.server.purchase_fire_apparatus(purchase_data)
            return None
        station = self.fire_station
        if station is None:
            raise PurchaseError("attempted to purchase an apparatus without a fire station")

        parking_spot = station.free_parking_spot()
        if parking_spot is None:
            log.error("No parking spots available")
            raise self._purchase_failed(ERROR_NO_PARK_SPOTS)

        if self.money < purchase_data.purchase_value:
            raise self._purchase_failed(ERROR_NOT_ENOUGH_MONEY)
        self.remove_money(purchase_data.purchase_value)

        apparatus = purchase_data.fire_apparatus_type()
        if not isinstance(apparatus, FireApparatus):
            raise PurchaseError(
                f"failed to spawn apparatus {purchase_data.display_name!r}"
            )
        parking_spot.assigned_vehicle = apparatus
        self.fleet.append(apparatus)
        return apparatus

    def accept_job_contract(self, job_contract: JobContract) -> JobContract:
        """Hire the firefighter behind a contract, paying their first pay period up front.

        Raises HiringError("Unauthorized") off the server (after passing the request on)
        and HiringError("Insufficient Funds") when the pay period cannot be afforded.
        """
        if not self.has_authority:
            if self.server is not None:
                self.server.accept_job_contract(job_contract)
            raise HiringError("Unauthorized")

        paycheck_cost = job_contract.hourly_rate * PAY_PERIOD_HOURS
        if self.money < paycheck_cost:
            log.warning(
                "Not enough money to hire '%s %s %s' - have %s, but costs %s",
                job_contract.character_name_first,
                job_contract.character_name_middle,
                job_contract.character_name_last,
                self.money,
                paycheck_cost,
            )
            raise HiringError("Insufficient Funds")

        self.personnel.append(job_contract)
        self.remove_money(paycheck_cost)
        if self.game_state is not None:
            self.game_state.job_contract_remove(job_contract, False)
        return job_contract

    # Start of play

    def setup_initial_resource_values(self, game_instance: Optional[GameInstance]) -> None:
        """Load the starting resources from the game instance."""
        if game_instance is None:
            return
        for tag, value in game_instance.starting_resources.items():
            self.resources[tag] = value
            if self.on_resource_updated.is_bound():
                self.on_resource_updated.broadcast(tag, 0.0, value)

    def begin_play(self) -> None:
        self.setup_initial_resource_values(self.game_instance)


class LivePlayerState(PlayerState):
    """Player state for live play: starts a new game or reloads the player's save."""

    def __init__(
        self,
        game_mode: Optional[GameMode] = None,
        game_state: Optional[GameState] = None,
        game_instance: Optional[GameInstance] = None,
        has_authority: bool = True,
        server: Optional[PlayerState] = None,
        player_id: str = "SaveSlot",
        store: Optional[SaveStore] = None,
    ) -> None:
        super().__init__(game_mode, game_state, game_instance, has_authority, server)
        self.save_slot_name = player_id
        self.save_user_index = 0
        if store is None:
            store = game_mode.store if game_mode is not None else SaveStore()
        self.store = store

    def _try_accept(self, job_contract: JobContract) -> None:
        try:
            self.accept_job_contract(job_contract)
        except HiringError as error:
            log.warning("Could not hire '%s': %s", job_contract.contract_id, error)

    def begin_play(self) -> None:
        """Reload personnel from an existing player save, or hire a full starting team."""
        super().begin_play()
        if not self.has_authority:
            return

        if self.store.exists(self.save_slot_name, self.save_user_index):
            log.info("Reloading existing player save (%s %d)", self.save_slot_name, self.save_user_index)
            player_save = self.store.load(self.save_slot_name, self.save_user_index)
            if isinstance(player_save, PlayerSave):
                for contract in player_save.saved_personnel:
                    self._try_accept(contract)
            return

        log.info("No player save found - starting a new game")
        if self.game_mode is not None:
            for role in _STARTING_PERSONNEL:
                new_save = self.game_mode.create_new_character(role)
                self._try_accept(JobContract.from_save(new_save))

        log.warning("Generated personnel are not stored in the new player save")
        self.store.save(PlayerSave(), self.save_slot_name, self.save_user_index)
        if self.store.exists(self.save_slot_name, self.save_user_index):
            log.info("New save game created: '%s %d'", self.save_slot_name, self.save_user_index)
        else:
            log.error("New save game creation failed: '%s %d'", self.save_slot_name, self.save_user_index)


class TestPlayerState(PlayerState):
    """Player state for development and test play."""