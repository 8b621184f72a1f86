"""Save games for characters and players, job contracts, and an in-memory slot store."""

from __future__ import annotations

import copy
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from wildfire_sim.tags import GameplayTag

log = logging.getLogger(__name__)

UNTITLED = "Untitled"
NEVER = datetime.min.replace(tzinfo=timezone.utc)


def generate_guid() -> str:
    """A new random identifier as 32 upper-case hexadecimal digits."""
    guid = uuid.uuid4().hex.upper()
    log.info("Generated GUID '%s'", guid)
    return guid


@dataclass
class SaveGame:
    """Anything that can be written to a save slot."""

    save_slot_name: str = UNTITLED
    save_slot_index: int = 0

    def assign_unique_slot(self, store: SaveStore) -> str:
        """Give this save a fresh slot name unless it already has one unused in ``store``."""
        while self.save_slot_name == UNTITLED or store.exists(
            self.save_slot_name, self.save_slot_index
        ):
            self.save_slot_name = generate_guid()
        return self.save_slot_name


@dataclass
class CharacterSaveGame(SaveGame):
    """A generated character; receives its own slot name when created untitled."""

    character_name_first: str = ""
    character_name_middle: str = ""
    character_name_last: str = ""
    character_gender: GameplayTag = field(default_factory=GameplayTag)
    character_age: int = 0
    character_role: GameplayTag = field(default_factory=GameplayTag)
    character_race: GameplayTag = field(default_factory=GameplayTag)
    offer_expiration: datetime = NEVER

    def __post_init__(self) -> None:
        if self.save_slot_name == UNTITLED:
            self.save_slot_name = generate_guid()
            log.info(
                "Character save generated: '%s' (user index #%d)",
                self.save_slot_name,
                self.save_slot_index,
            )


@dataclass
class FirefighterSaveGame(CharacterSaveGame):
    firefighter_class: Optional[Any] = None
    years_of_service: int = 0
    years_in_grade: int = 0
    hourly_rate: float = 0.0


@dataclass
class PlayerSave(SaveGame):
    saved_personnel: list[JobContract] = field(default_factory=list)


@dataclass(eq=False)
class JobContract:
    """An offer of employment made from a firefighter save; equal by contract id."""

    save_reference: Optional[FirefighterSaveGame] = field(default=None, repr=False)
    contract_id: str = "None"
    user_index: int = 0
    character_name_first: str = ""
    character_name_middle: str = ""
    character_name_last: str = ""
    character_gender: GameplayTag = field(default_factory=GameplayTag)
    character_age: int = 0
    character_role: GameplayTag = field(default_factory=GameplayTag)
    character_race: GameplayTag = field(default_factory=GameplayTag)
    offer_expiration: datetime = NEVER
    years_of_service: int = 0
    years_in_grade: int = 0
    hourly_rate: float = 0.0

    @classmethod
    def from_save(cls, save_game: Optional[FirefighterSaveGame]) -> JobContract:
        """Build a contract from ``save_game``; an empty contract when it is None."""
        if save_game is None:
            return cls()
        contract = cls(
            save_reference=save_game,
            contract_id=save_game.save_slot_name,
            user_index=save_game.save_slot_index,
            character_name_first=save_game.character_name_first,
            character_name_middle=save_game.character_name_middle,
            character_name_last=save_game.character_name_last,
            character_gender=save_game.character_gender,
            character_age=save_game.character_age,
            character_role=save_game.character_role,
            character_race=save_game.character_race,
            offer_expiration=save_game.offer_expiration,
            years_of_service=save_game.years_of_service,
            years_in_grade=save_game.years_in_grade,
            hourly_rate=save_game.hourly_rate,
        )
        log.info(
            "New job contract created: '%s %s %s' (%s)",
            contract.character_name_first,
            contract.character_name_middle,
            contract.character_name_last,
            contract.contract_id,
        )
        return contract

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JobContract):
            return NotImplemented
        return self.contract_id == other.contract_id

    def __hash__(self) -> int:
        return hash(self.contract_id)


class SaveStore:
    """Save slots addressed by ``(slot_name, user_index)``; stored and loaded as copies."""

    def __init__(self) -> None:
        self._slots: dict[tuple[str, int], SaveGame] = {}

    def save(self, save_game: SaveGame, slot_name: str, user_index: int) -> None:
        if not slot_name:
            raise ValueError("a save slot needs a name")
        self._slots[(slot_name, user_index)] = copy.deepcopy(save_game)

    def load(self, slot_name: str, user_index: int) -> SaveGame:
        try:
            stored = self._slots[(slot_name, user_index)]
        except KeyError:
            raise KeyError(f"no save game in slot {slot_name!r} (user {user_index})") from None
        return copy.deepcopy(stored)

    def exists(self, slot_name: str, user_index: int) -> bool:
        return (slot_name, user_index) in self._slots

    def delete(self, slot_name: str, user_index: int) -> bool:
        """Remove a slot; returns whether there was one."""
        return self._slots.pop((slot_name, user_index), None) is not None

    def __len__(self) -> int:
        return len(self._slots)