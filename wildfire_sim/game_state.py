"""Game state: the hiring list every player sees, mirrored from the game mode."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from wildfire_sim.events import Event
from wildfire_sim.game_mode import GameMode
from wildfire_sim.saves import FirefighterSaveGame, JobContract, SaveGame
from wildfire_sim.tags import GameplayTag

log = logging.getLogger(__name__)


class GameState:
    """Keeps the hiring list in step with the game mode's transfer list.

    ``on_transfer_list_updated`` is broadcast with ``(contract, is_available)``.
    """

    def __init__(self, game_mode: Optional[GameMode] = None, has_authority: bool = True) -> None:
        self.game_mode = game_mode
        self.has_authority = has_authority
        self.hiring_list: list[JobContract] = []
        self.on_transfer_list_updated = Event()

    @property
    def job_contracts(self) -> list[JobContract]:
        return self.hiring_list

    @property
    def transfer_list(self) -> list[FirefighterSaveGame]:
        if self.game_mode is None:
            return []
        return self.game_mode.list_of_transfers

    def job_contract_offered(self, job_contract: JobContract) -> bool:
        """Add an offered contract to the hiring list; returns whether it was added."""
        if not self.transfer_list or job_contract.save_reference is None:
            return False
        self.hiring_list.append(job_contract)
        log.info(
            "Added job contract #%s for '%s %s %s'",
            job_contract.contract_id,
            job_contract.character_name_first,
            job_contract.character_name_middle,
            job_contract.character_name_last,
        )
        if self.on_transfer_list_updated.is_bound():
            self.on_transfer_list_updated.broadcast(job_contract, True)
        return True

    def job_contract_expired(self, job_contract: JobContract) -> bool:
        """Drop the last listed contract with the same id; returns whether one was found."""
        for index in range(len(self.hiring_list) - 1, -1, -1):
            if self.hiring_list[index].contract_id == job_contract.contract_id:
                del self.hiring_list[index]
                if self.on_transfer_list_updated.is_bound():
                    self.on_transfer_list_updated.broadcast(job_contract, False)
                return True
        return False

    def job_contract_remove(self, job_contract: JobContract, delete_save: bool = True) -> bool:
        return self.job_contract_remove_by_id(job_contract.contract_id, delete_save)

    def job_contract_remove_by_id(self, contract_id: str, delete_save: bool = True) -> bool:
        """Ask the game mode to withdraw the listed contract with ``contract_id``."""
        contract = self.get_job_contract(contract_id)
        if contract is None or self.game_mode is None:
            return False
        return self.game_mode.job_contract_expired(contract, delete_save)

    def get_job_contract(self, contract_id: str) -> Optional[JobContract]:
        return next(
            (contract for contract in self.hiring_list if contract.contract_id == contract_id),
            None,
        )

    def create_new_character(self, role: GameplayTag) -> Optional[SaveGame]:
        if self.game_mode is None:
            return None
        return self.game_mode.create_new_character(role)

    def save_game_from_job_contract(
        self, job_contract: JobContract
    ) -> Optional[FirefighterSaveGame]:
        """Load the firefighter save behind a contract, or None if there is none."""
        if self.game_mode is None:
            return None
        store = self.game_mode.store
        if not store.exists(job_contract.contract_id, job_contract.user_index):
            return None
        loaded = store.load(job_contract.contract_id, job_contract.user_index)
        return loaded if isinstance(loaded, FirefighterSaveGame) else None

    def begin_play(self) -> None:
        """Listen to the game mode and take over any offers already on its transfer list."""
        game_mode = self.game_mode
        if game_mode is None:
            log.warning("Game mode invalid at the start of play")
            return

        if self.has_authority:
            if not game_mode.on_job_contract_offer.is_already_bound(self.job_contract_offered):
                game_mode.on_job_contract_offer.subscribe(self.job_contract_offered)
            if not game_mode.on_job_contract_expired.is_already_bound(self.job_contract_expired):
                game_mode.on_job_contract_expired.subscribe(self.job_contract_expired)
            transfers = self.transfer_list
            if len(transfers) > len(self.hiring_list) and transfers:
                for listing in transfers:
                    self.job_contract_offered(JobContract.from_save(listing))

        transfers = self.transfer_list
        if len(self.hiring_list) < len(transfers):
            log.info(
                "Hiring list does not match the transfer list (%d != %d)",
                len(self.hiring_list),
                len(transfers),
            )
            for listing in transfers[len(self.hiring_list):]:
                self.job_contract_offered(JobContract.from_save(listing))
        else:
            log.info(
                "Hiring list holds %d; transfer list holds %d",
                len(self.hiring_list),
                len(transfers),
            )

    def replicate_hiring_list(
        self, new_hiring_list: Iterable[JobContract]
    ) -> tuple[list[JobContract], list[JobContract]]:
        """Replace the hiring list and announce what was added and what was lost."""
        old_list = self.hiring_list
        self.hiring_list = list(new_hiring_list)
        old_ids = {contract.contract_id for contract in old_list}
        new_ids = {contract.contract_id for contract in self.hiring_list}
        added = [c for c in self.hiring_list if c.contract_id not in old_ids]
        lost = [c for c in old_list if c.contract_id not in new_ids]
        if self.on_transfer_list_updated.is_bound():
            for contract in added:
                self.on_transfer_list_updated.broadcast(contract, True)
            for contract in lost:
                self.on_transfer_list_updated.broadcast(contract, False)
        return added, lost

    def _handlers(self) -> list[Any]:
        return [self.job_contract_offered, self.job_contract_expired]