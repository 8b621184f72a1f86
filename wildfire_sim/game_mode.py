"""Game mode: character generation, pay rates and the firefighter transfer list."""

from __future__ import annotations

import logging
import random
import string
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterable, Optional

from wildfire_sim.enums import ClimateSeason
from wildfire_sim.events import Event
from wildfire_sim.saves import (
    CharacterSaveGame,
    FirefighterSaveGame,
    JobContract,
    SaveGame,
    SaveStore,
)
from wildfire_sim.tags import GameplayTag

log = logging.getLogger(__name__)

_RANDOM_STRING_CHARSET = string.ascii_uppercase + string.digits
_TRANSFER_LIST_SIZE = 10


class Role:
    """Character role tags."""

    FIRE = GameplayTag("Game.Role.Fire")
    FIRE_CHIEF = GameplayTag("Game.Role.Fire.Chief")
    FIRE_CPT = GameplayTag("Game.Role.Fire.Captain")
    FIRE_ENG = GameplayTag("Game.Role.Fire.Engineer")
    FIRE_TWO = GameplayTag("Game.Role.Fire.Two")
    FIRE_ONE = GameplayTag("Game.Role.Fire.One")
    FIRE_DIV = GameplayTag("Game.Role.Fire.Division")
    FIRE_PILOT = GameplayTag("Game.Role.Fire.Pilot")
    FIRE_ARSON = GameplayTag("Game.Role.Fire.Arson")
    FIRE_NEW = GameplayTag("Game.Role.Fire.New")
    POLICE = GameplayTag("Game.Role.Police")
    CIVILIAN = GameplayTag("Game.Role.Civilian")
    PLAYER = GameplayTag("Game.Role.Player")


class Gender:
    """Character gender tags."""

    MALE = GameplayTag("Game.Gender.Male")
    FEMALE = GameplayTag("Game.Gender.Female")
    NON_BINARY = GameplayTag("Game.Gender.NonBinary")


class Ethnicity:
    """Character ethnicity tags."""

    WHITE = GameplayTag("Game.Ethnicity.White")
    BLACK = GameplayTag("Game.Ethnicity.Black")
    HISPANIC = GameplayTag("Game.Ethnicity.Hispanic")
    ASIAN = GameplayTag("Game.Ethnicity.Asian")
    NATIVE_AMERICAN = GameplayTag("Game.Ethnicity.NativeAmerican")
    PACIFIC_ISLANDER = GameplayTag("Game.Ethnicity.PacificIslander")


_ETHNIC_GROUP_CHANCES: tuple[tuple[GameplayTag, float], ...] = (
    (Ethnicity.WHITE, 0.616),
    (Ethnicity.BLACK, 0.124),
    (Ethnicity.HISPANIC, 0.187),
    (Ethnicity.ASIAN, 0.06),
    (Ethnicity.NATIVE_AMERICAN, 0.029),
    (Ethnicity.PACIFIC_ISLANDER, 0.002),
)

_INTERRACIAL_CHANCE = 0.151

# (probability, role) in the order they are tested
_FIRE_SUB_ROLES: tuple[tuple[float, GameplayTag], ...] = (
    (0.02, Role.FIRE_CHIEF),
    (0.03, Role.FIRE_CPT),
    (0.12, Role.FIRE_ENG),
    (0.20, Role.FIRE_TWO),
)

# role -> (age range boundaries, probability of each range)
_AGE_TABLES: dict[GameplayTag, tuple[tuple[int, ...], tuple[float, ...]]] = {
    Role.FIRE_CHIEF: ((35, 50, 65, 70), (0.1, 0.7, 0.2)),
    Role.FIRE_CPT: ((30, 40, 55, 60), (0.2, 0.5, 0.3)),
    Role.FIRE_ENG: ((20, 30, 40, 50), (0.4, 0.4, 0.2)),
    Role.FIRE_TWO: ((18, 25, 35, 45), (0.5, 0.3, 0.2)),
    Role.FIRE_ONE: ((18, 22, 28, 35), (0.6, 0.3, 0.1)),
}

_BASE_HOURLY_PAY: dict[GameplayTag, float] = {
    Role.FIRE_ONE: 21.0,
    Role.FIRE_TWO: 23.0,
    Role.FIRE_ENG: 25.0,
    Role.FIRE_CPT: 31.0,
    Role.FIRE_CHIEF: 43.0,
    Role.FIRE_DIV: 52.0,
    Role.FIRE_PILOT: 32.0,
    Role.FIRE_ARSON: 28.0,
    Role.FIRE_NEW: 20.0,
}
_DEFAULT_HOURLY_PAY = 3.0
_YEARLY_RAISE = 1.032
_MAX_YEARS_OF_SERVICE = 25


@dataclass
class NameRow:
    """One row of a names table."""

    name_value: str
    ethnic_groups: frozenset[GameplayTag] = field(default_factory=frozenset)
    feminine: bool = False
    masculine: bool = False

    def has_ethnic_group(self, ethnicity: GameplayTag) -> bool:
        return any(group.matches_tag(ethnicity) for group in self.ethnic_groups)

    def suits_gender(self, gender: GameplayTag) -> bool:
        return (self.feminine and gender != Gender.MALE) or (
            self.masculine and gender != Gender.FEMALE
        )


def generate_random_string(length: int, rng: Optional[random.Random] = None) -> str:
    """``length`` random characters drawn from A-Z and 0-9."""
    rng = rng if rng is not None else random.Random()
    return "".join(rng.choice(_RANDOM_STRING_CHARSET) for _ in range(max(length, 0)))


def next_fire_station_number(taken: Iterable[int]) -> Optional[int]:
    """The lowest station number from 1 up to the count of taken numbers that is free.

    Returns None when every number in that range is taken (including when none are).
    """
    numbers = set(taken)
    return next((n for n in range(1, len(numbers) + 1) if n not in numbers), None)


def pick_random_ethnic_group(rng: Optional[random.Random] = None) -> GameplayTag:
    """An ethnic group drawn by population share."""
    rng = rng if rng is not None else random.Random()
    rand_value = rng.random()
    cumulative = 0.0
    for group, chance in _ETHNIC_GROUP_CHANCES:
        cumulative += chance
        if rand_value < cumulative:
            return group
    return _ETHNIC_GROUP_CHANCES[0][0]


def pick_random_father_ethnic_group(
    mother_ethnic_group: GameplayTag, rng: Optional[random.Random] = None
) -> GameplayTag:
    """Usually the mother's group; sometimes a freshly drawn one."""
    rng = rng if rng is not None else random.Random()
    if rng.random() < _INTERRACIAL_CHANCE:
        return pick_random_ethnic_group(rng)
    return mother_ethnic_group


def determine_mixed_race_outcome(
    mother_ethnic_group: GameplayTag,
    father_ethnic_group: GameplayTag,
    rng: Optional[random.Random] = None,
) -> GameplayTag:
    """One of the parents' groups, chosen evenly when they differ."""
    if mother_ethnic_group != father_ethnic_group:
        rng = rng if rng is not None else random.Random()
        return mother_ethnic_group if rng.randint(0, 1) == 0 else father_ethnic_group
    return mother_ethnic_group


def generate_random_gender(
    character_role: GameplayTag, rng: Optional[random.Random] = None
) -> GameplayTag:
    """A gender; firefighters are 31% non-male, everyone else 50%."""
    rng = rng if rng is not None else random.Random()
    gender_rate = 0.31 if character_role.matches_tag(Role.FIRE) else 0.50
    chance = rng.uniform(0.0, 1.0)
    if chance < gender_rate:
        if chance < 0.01:
            return Gender.NON_BINARY
        return Gender.FEMALE
    return Gender.MALE


def generate_random_role(
    primary_role: GameplayTag, rng: Optional[random.Random] = None
) -> GameplayTag:
    """A fire sub-role when given exactly the fire role; otherwise the role unchanged."""
    if not primary_role.matches_tag_exact(Role.FIRE):
        return primary_role
    rng = rng if rng is not None else random.Random()
    rand_value = rng.random()
    cumulative = 0.0
    for probability, role in _FIRE_SUB_ROLES:
        cumulative += probability
        if rand_value < cumulative:
            return role
    return Role.FIRE_ONE


def generate_random_race(rng: Optional[random.Random] = None) -> GameplayTag:
    """An ethnicity drawn from a mother, a father and the mix of the two."""
    rng = rng if rng is not None else random.Random()
    mother = pick_random_ethnic_group(rng)
    father = pick_random_father_ethnic_group(mother, rng)
    return determine_mixed_race_outcome(mother, father, rng)


def generate_random_age(
    character_role: GameplayTag, rng: Optional[random.Random] = None
) -> int:
    """An age suited to the role; firefighter ranks have their own age spreads."""
    rng = rng if rng is not None else random.Random()
    rand_value = rng.random()

    if not character_role.matches_tag(Role.FIRE):
        if rng.uniform(0.0, 1.0) < 0.25:
            return rng.randint(36, 99)
        return rng.randint(18, 65)

    min_age, max_age = 18, 99
    ranges, probabilities = _AGE_TABLES.get(character_role, ((), ()))
    cumulative = 0.0
    for index, probability in enumerate(probabilities):
        cumulative += probability
        if rand_value < cumulative:
            min_age = ranges[index]
            max_age = ranges[index + 1] - 1
            break
    return rng.randint(min_age, max_age)


def calculate_hourly_rate(character_role: GameplayTag, years_of_service: int) -> float:
    """Base pay for the role raised 3.2% for each year of service, up to 25 years."""
    years = max(0, min(years_of_service, _MAX_YEARS_OF_SERVICE))
    hourly_pay = _BASE_HOURLY_PAY.get(character_role, _DEFAULT_HOURLY_PAY)
    for _ in range(years):
        hourly_pay *= _YEARLY_RAISE
    return hourly_pay


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GameMode:
    """Server-side rules: generates characters and keeps the list of firefighters for hire.

    Events: ``on_job_contract_offer(contract)`` and ``on_job_contract_expired(contract)``.
    """

    def __init__(
        self,
        first_names_table: Optional[list[NameRow]] = None,
        last_names_table: Optional[list[NameRow]] = None,
        store: Optional[SaveStore] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.first_names_table = first_names_table
        self.last_names_table = last_names_table
        self.message_table: Optional[Any] = None
        self.vox_table: Optional[Any] = None
        self.callouts_table: Optional[Any] = None
        self.start_time_override: Optional[datetime] = None
        self.use_seasons = False
        self.use_metric_system = False
        self.seasonal_dates: dict[int, ClimateSeason] = {}
        self.seasonal_temp_averages: dict[ClimateSeason, float] = {}
        self.seasonal_temp_ranges: dict[ClimateSeason, float] = {}
        self.store = store if store is not None else SaveStore()
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.on_job_contract_offer = Event()
        self.on_job_contract_expired = Event()
        self._firefighters_unemployed: list[FirefighterSaveGame] = []
        self._transfer_lock = threading.RLock()

    @property
    def list_of_transfers(self) -> list[FirefighterSaveGame]:
        """A copy of the firefighters currently available for hire."""
        with self._transfer_lock:
            return list(self._firefighters_unemployed)

    def generate_random_name(
        self, gender: GameplayTag, ethnicity: GameplayTag
    ) -> tuple[str, str, str]:
        """First name, middle initial and last name suited to gender and ethnicity.

        Without name tables a placeholder name is returned. Raises ValueError when a
        table has no row that fits.
        """
        if self.first_names_table is None or self.last_names_table is None:
            log.error("Name tables are not set")
            return ("John" if gender == Gender.MALE else "Jane", "Q", "Public")

        first = self._pick_name(self.first_names_table, gender, ethnicity, "first")
        last = self._pick_name(self.last_names_table, gender, ethnicity, "last")
        middle = chr(self.rng.randint(65, 90))
        return (first, middle, last)

    def _pick_name(
        self, table: list[NameRow], gender: GameplayTag, ethnicity: GameplayTag, kind: str
    ) -> str:
        candidates = [
            row for row in table if row.has_ethnic_group(ethnicity) and row.suits_gender(gender)
        ]
        if not candidates:
            raise ValueError(f"no {kind} name fits gender {gender} and ethnicity {ethnicity}")
        return candidates[self.rng.randint(0, len(candidates) - 1)].name_value

    def create_new_character(self, role: GameplayTag) -> Optional[SaveGame]:
        """Generate and store a new character for ``role``; None for an unknown role.

        Given the primary fire role, a sub-role is drawn for the firefighter.
        """
        if role.matches_tag(Role.FIRE):
            save_game: SaveGame = FirefighterSaveGame()
        elif (
            role.matches_tag(Role.POLICE)
            or role.matches_tag(Role.CIVILIAN)
            or role.matches_tag(Role.PLAYER)
        ):
            save_game = SaveGame()
        else:
            return None

        if isinstance(save_game, CharacterSaveGame):
            save_game.assign_unique_slot(self.store)
            save_game.character_role = generate_random_role(role, self.rng)
            save_game.character_age = generate_random_age(save_game.character_role, self.rng)
            save_game.character_gender = generate_random_gender(
                save_game.character_role, self.rng
            )
            mother = pick_random_ethnic_group(self.rng)
            father = pick_random_father_ethnic_group(mother, self.rng)
            save_game.character_race = determine_mixed_race_outcome(mother, father, self.rng)
            first, middle, last = self.generate_random_name(
                save_game.character_gender, save_game.character_race
            )
            save_game.character_name_first = first
            save_game.character_name_middle = middle
            save_game.character_name_last = last

        if isinstance(save_game, FirefighterSaveGame):
            save_game.hourly_rate = calculate_hourly_rate(save_game.character_role, 0)
            save_game.offer_expiration = self.clock() + timedelta(
                days=self.rng.randint(0, 5), hours=self.rng.randint(4, 23)
            )

        self.store.save(save_game, save_game.save_slot_name, save_game.save_slot_index)
        return save_game

    def job_contract_offer(self, save_game: Any) -> Optional[JobContract]:
        """Put a firefighter on the transfer list and announce the offer."""
        if not isinstance(save_game, FirefighterSaveGame):
            return None
        with self._transfer_lock:
            self._firefighters_unemployed.append(save_game)
            contract = JobContract.from_save(save_game)
            if self.on_job_contract_offer.is_bound():
                self.on_job_contract_offer.broadcast(contract)
        return contract

    def generate_job_contracts(self) -> None:
        """Fill the transfer list up to ten offers, then withdraw those that have expired."""
        for _ in range(len(self._firefighters_unemployed), _TRANSFER_LIST_SIZE):
            new_save = self.create_new_character(Role.FIRE)
            if isinstance(new_save, FirefighterSaveGame):
                self.job_contract_offer(new_save)

        now = self.clock()
        for offer in self.list_of_transfers:
            if offer.offer_expiration < now:
                self.job_contract_expired(JobContract.from_save(offer))

    def job_contract_expired(self, job_contract: JobContract, delete_save: bool = True) -> bool:
        """Withdraw a contract from the transfer list; returns whether it was listed."""
        save_game = job_contract.save_reference
        if save_game is None:
            return False
        with self._transfer_lock:
            for index, firefighter in enumerate(self._firefighters_unemployed):
                if firefighter is not save_game:
                    continue
                log.info(
                    "Job contract #%s for '%s %s' expired or was deleted",
                    firefighter.save_slot_name,
                    firefighter.character_name_first,
                    firefighter.character_name_last,
                )
                del self._firefighters_unemployed[index]
                if self.on_job_contract_expired.is_bound():
                    self.on_job_contract_expired.broadcast(job_contract)
                if delete_save:
                    self.store.delete(job_contract.contract_id, job_contract.user_index)
                return True
        return False

    def begin_play(self) -> None:
        """Start of play: offer the first round of job contracts."""
        self.generate_job_contracts()