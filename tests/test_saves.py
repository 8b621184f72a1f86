import string
from datetime import datetime, timezone

import pytest

from wildfire_sim.saves import (
    CharacterSaveGame,
    FirefighterSaveGame,
    JobContract,
    PlayerSave,
    SaveGame,
    SaveStore,
    generate_guid,
)
from wildfire_sim.tags import GameplayTag


def _firefighter() -> FirefighterSaveGame:
    return FirefighterSaveGame(
        character_name_first="Jane",
        character_name_middle="Q",
        character_name_last="Public",
        character_gender=GameplayTag("Game.Gender.Female"),
        character_age=30,
        character_role=GameplayTag("Game.Role.Fire.Eng"),
        character_race=GameplayTag("Game.Ethnicity.White"),
        offer_expiration=datetime(2030, 1, 1, tzinfo=timezone.utc),
        years_of_service=4,
        years_in_grade=2,
        hourly_rate=25.0,
    )


def test_generate_guid_is_32_upper_hex_digits():
    guid = generate_guid()
    assert len(guid) == 32
    assert set(guid) <= set(string.hexdigits.upper())


def test_generate_guid_is_unique():
    assert len({generate_guid() for _ in range(50)}) == 50


def test_base_save_keeps_untitled():
    assert SaveGame().save_slot_name == "Untitled"
    assert SaveGame().save_slot_index == 0


def test_character_save_gets_generated_slot_name():
    save = CharacterSaveGame()
    assert save.save_slot_name != "Untitled"
    assert len(save.save_slot_name) == 32


def test_character_save_keeps_given_name():
    assert CharacterSaveGame(save_slot_name="slot-a").save_slot_name == "slot-a"


def test_assign_unique_slot_replaces_untitled():
    store = SaveStore()
    save = SaveGame()
    name = save.assign_unique_slot(store)
    assert name == save.save_slot_name
    assert len(name) == 32


def test_assign_unique_slot_avoids_existing_slot():
    store = SaveStore()
    store.save(SaveGame(), "taken", 0)
    save = SaveGame(save_slot_name="taken")
    name = save.assign_unique_slot(store)
    assert not store.exists(name, 0)
    assert len(name) == 32


def test_assign_unique_slot_keeps_free_name():
    store = SaveStore()
    save = SaveGame(save_slot_name="free")
    assert save.assign_unique_slot(store) == "free"


def test_job_contract_from_save_copies_fields():
    save = _firefighter()
    contract = JobContract.from_save(save)
    assert contract.save_reference is save
    assert contract.contract_id == save.save_slot_name
    assert contract.user_index == save.save_slot_index
    assert contract.character_name_first == "Jane"
    assert contract.character_name_last == "Public"
    assert contract.character_role == save.character_role
    assert contract.offer_expiration == save.offer_expiration
    assert contract.years_of_service == 4
    assert contract.hourly_rate == 25.0


def test_job_contract_from_none_is_empty():
    contract = JobContract.from_save(None)
    assert contract.contract_id == "None"
    assert contract.save_reference is None
    assert contract.hourly_rate == 0.0


def test_job_contract_equality_by_id():
    a = JobContract(contract_id="abc", hourly_rate=1.0)
    b = JobContract(contract_id="abc", hourly_rate=2.0)
    c = JobContract(contract_id="xyz")
    assert a == b
    assert not (a == c)
    assert len({a, b, c}) == 2


def test_store_round_trip_returns_copy():
    store = SaveStore()
    save = _firefighter()
    store.save(save, save.save_slot_name, 0)
    loaded = store.load(save.save_slot_name, 0)
    assert loaded is not save
    assert loaded == save
    loaded.hourly_rate = 99.0
    assert store.load(save.save_slot_name, 0).hourly_rate == 25.0


def test_store_player_save_round_trip():
    store = SaveStore()
    player = PlayerSave(save_slot_name="player")
    player.saved_personnel.append(JobContract.from_save(_firefighter()))
    store.save(player, "player", 0)
    loaded = store.load("player", 0)
    assert loaded.saved_personnel == player.saved_personnel


def test_store_load_missing_raises():
    with pytest.raises(KeyError):
        SaveStore().load("missing", 0)


def test_store_save_requires_name():
    with pytest.raises(ValueError):
        SaveStore().save(SaveGame(), "", 0)


def test_store_delete_and_exists():
    store = SaveStore()
    store.save(SaveGame(), "slot", 1)
    assert store.exists("slot", 1)
    assert not store.exists("slot", 0)
    assert store.delete("slot", 1) is True
    assert store.delete("slot", 1) is False
    assert len(store) == 0