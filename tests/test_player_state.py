import random

import pytest

from wildfire_sim import player_state as ps
from wildfire_sim.game_instance import GameInstance
from wildfire_sim.game_mode import GameMode, Role
from wildfire_sim.game_state import GameState
from wildfire_sim.saves import FirefighterSaveGame, JobContract, PlayerSave
from wildfire_sim.vehicles import FireApparatus
from wildfire_sim.world_data import (
    ERROR_NO_PARK_SPOTS,
    ERROR_NOT_ENOUGH_MONEY,
    FireStation,
    ParkingSpot,
)


def _contract(rate=10.0, slot="contract-a"):
    save = FirefighterSaveGame(save_slot_name=slot, hourly_rate=rate)
    return JobContract.from_save(save)


def _purchase(value=100.0):
    return ps.FleetPurchaseData(
        display_name="Engine",
        fire_apparatus_type=lambda: FireApparatus(fire_apparatus_type="Engine"),
        purchase_value=value,
    )


def test_set_money_round_trip_and_event():
    state = ps.PlayerState()
    seen = []
    state.on_resource_updated.subscribe(lambda *a: seen.append(a))
    state.set_money(250.0)
    state.set_money(300.0)
    assert state.money == 300.0
    assert seen == [(ps.RESOURCE_MONEY, 0.0, 250.0), (ps.RESOURCE_MONEY, 250.0, 300.0)]


def test_unknown_resource_is_zero():
    state = ps.PlayerState()
    assert state.get_resource_value(ps.RESOURCE_OXYGEN) == 0.0


def test_resource_value_rounded_to_cents():
    state = ps.PlayerState()
    state.set_water_storage(1.234)
    assert state.water_storage == pytest.approx(1.23)


def test_add_and_remove_return_new_value():
    state = ps.PlayerState()
    assert state.add_money(50.0) == 50.0
    assert state.remove_money(20.0) == 30.0
    assert state.money == 30.0
    assert state.add_oxygen_reserve(5.0) == state.oxygen_reserve
    assert state.add_kilowatt_usage(2.0) == state.kilowatt_usage


def test_setters_write_their_own_resource():
    state = ps.PlayerState()
    state.set_kilowatt_usage(7.0)
    state.set_oxygen_reserve(8.0)
    assert state.kilowatt_usage == 7.0
    assert state.oxygen_reserve == 8.0
    assert state.money == 0.0
    assert state.all_resource_tags == frozenset({ps.RESOURCE_POWER, ps.RESOURCE_OXYGEN})


def test_set_fire_station_broadcasts_once():
    state = ps.PlayerState()
    station = FireStation(fire_station_number=3)
    seen = []
    state.on_fire_station_changed.subscribe(lambda *a: seen.append(a))
    state.set_fire_station(station)
    state.set_fire_station(station)
    assert state.fire_station is station
    assert seen == [(station, True)]


def test_non_authority_forwards_fire_station_to_server():
    server = ps.PlayerState()
    client = ps.PlayerState(has_authority=False, server=server)
    station = FireStation()
    client.set_fire_station(station)
    assert server.fire_station is station
    assert client.fire_station is None


def test_purchase_without_station_raises():
    state = ps.PlayerState()
    state.set_money(1000.0)
    with pytest.raises(ps.PurchaseError):
        state.purchase_fire_apparatus(_purchase())


def test_purchase_without_type_does_nothing():
    state = ps.PlayerState()
    state.set_money(1000.0)
    assert state.purchase_fire_apparatus(ps.FleetPurchaseData(purchase_value=5.0)) is None
    assert state.money == 1000.0


def test_purchase_without_parking_spot_fails():
    state = ps.PlayerState()
    state.set_money(1000.0)
    state.set_fire_station(FireStation(parking_spots=[ParkingSpot(assigned_vehicle="taken")]))
    reasons = []
    state.on_fire_apparatus_purchase_fail.subscribe(reasons.append)
    with pytest.raises(ps.PurchaseError, match=ERROR_NO_PARK_SPOTS):
        state.purchase_fire_apparatus(_purchase())
    assert reasons == [ERROR_NO_PARK_SPOTS]
    assert state.money == 1000.0


def test_purchase_without_enough_money_fails():
    state = ps.PlayerState()
    state.set_money(50.0)
    state.set_fire_station(FireStation(parking_spots=[ParkingSpot()]))
    with pytest.raises(ps.PurchaseError, match=ERROR_NOT_ENOUGH_MONEY):
        state.purchase_fire_apparatus(_purchase(100.0))
    assert state.money == 50.0
    assert state.fleet == []


def test_purchase_parks_apparatus_and_charges():
    state = ps.PlayerState()
    state.set_money(1000.0)
    spot = ParkingSpot()
    state.set_fire_station(FireStation(parking_spots=[ParkingSpot(assigned_vehicle="x"), spot]))
    apparatus = state.purchase_fire_apparatus(_purchase(100.0))
    assert isinstance(apparatus, FireApparatus)
    assert spot.assigned_vehicle is apparatus
    assert state.fleet == [apparatus]
    assert state.money == 900.0


def test_accept_contract_insufficient_funds():
    state = ps.PlayerState()
    state.set_money(10.0)
    with pytest.raises(ps.HiringError, match="Insufficient Funds"):
        state.accept_job_contract(_contract(rate=10.0))
    assert state.personnel == []


def test_accept_contract_pays_first_period():
    state = ps.PlayerState()
    state.set_money(5000.0)
    contract = _contract(rate=10.0)
    assert state.accept_job_contract(contract) is contract
    assert state.personnel == [contract]
    assert state.money == 5000.0 - 10.0 * ps.PAY_PERIOD_HOURS


def test_accept_contract_unauthorized_forwards():
    server = ps.PlayerState()
    server.set_money(5000.0)
    client = ps.PlayerState(has_authority=False, server=server)
    contract = _contract()
    with pytest.raises(ps.HiringError, match="Unauthorized"):
        client.accept_job_contract(contract)
    assert server.personnel == [contract]


def test_accept_contract_removes_from_hiring_list():
    game_mode = GameMode(rng=random.Random(1))
    game_state = GameState(game_mode)
    game_state.begin_play()
    game_mode.begin_play()
    contract = game_state.hiring_list[0]
    state = ps.PlayerState(game_mode=game_mode, game_state=game_state)
    state.set_money(100000.0)
    state.accept_job_contract(contract)
    assert contract.contract_id not in [c.contract_id for c in game_state.hiring_list]
    assert game_mode.store.exists(contract.contract_id, contract.user_index)


def test_initial_resources_from_game_instance():
    instance = GameInstance(starting_resources={ps.RESOURCE_MONEY: 500.0})
    state = ps.TestPlayerState(game_instance=instance)
    seen = []
    state.on_resource_updated.subscribe(lambda *a: seen.append(a))
    state.begin_play()
    assert state.money == 500.0
    assert seen == [(ps.RESOURCE_MONEY, 0.0, 500.0)]


def test_live_player_state_new_game_hires_team_and_saves():
    game_mode = GameMode(rng=random.Random(2))
    instance = GameInstance(starting_resources={ps.RESOURCE_MONEY: 1_000_000.0})
    state = ps.LivePlayerState(game_mode=game_mode, game_instance=instance, player_id="player-1")
    state.begin_play()
    assert len(state.personnel) == 12
    roles = [c.character_role for c in state.personnel]
    assert roles.count(Role.FIRE_CPT) == 3
    assert roles.count(Role.FIRE_ONE) == 4
    assert isinstance(game_mode.store.load("player-1", 0), PlayerSave)
    assert state.money < 1_000_000.0


def test_live_player_state_reloads_existing_save():
    game_mode = GameMode(rng=random.Random(3))
    contract = _contract(rate=1.0, slot="saved-hire")
    game_mode.store.save(PlayerSave(saved_personnel=[contract]), "player-2", 0)
    instance = GameInstance(starting_resources={ps.RESOURCE_MONEY: 1000.0})
    state = ps.LivePlayerState(game_mode=game_mode, game_instance=instance, player_id="player-2")
    state.begin_play()
    assert [c.contract_id for c in state.personnel] == ["saved-hire"]
    assert state.money == 1000.0 - 1.0 * ps.PAY_PERIOD_HOURS


def test_live_player_state_without_money_hires_nobody():
    game_mode = GameMode(rng=random.Random(4))
    state = ps.LivePlayerState(game_mode=game_mode, player_id="player-3")
    state.begin_play()
    assert state.personnel == []
    assert game_mode.store.exists("player-3", 0)