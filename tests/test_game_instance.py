import random

from wildfire_sim.game_instance import GameInstance, MeshOptions
from wildfire_sim.game_mode import Gender


def _instance():
    masc = [MeshOptions(using_mesh="m1"), MeshOptions(using_mesh="m2")]
    fem = [MeshOptions(using_mesh="f1"), MeshOptions(using_mesh="f2")]
    return GameInstance(meshes_masculine=masc, meshes_feminine=fem, rng=random.Random(3))


def test_mesh_options_default_offset():
    options = MeshOptions()
    assert options.offset_location == (0.0, 0.0, -90.0)
    assert options.offset_rotation == (0.0, -90.0, 0.0)
    assert options.using_mesh is None


def test_female_gets_feminine_mesh():
    instance = _instance()
    for _ in range(20):
        assert instance.get_mesh_options_data(Gender.FEMALE) in instance.meshes_feminine


def test_male_gets_masculine_mesh():
    instance = _instance()
    for _ in range(20):
        assert instance.get_mesh_options_data(Gender.MALE) in instance.meshes_masculine


def test_non_binary_draws_from_both():
    instance = _instance()
    seen = {instance.get_mesh_options_data(Gender.NON_BINARY).using_mesh for _ in range(200)}
    assert seen == {"m1", "m2", "f1", "f2"}


def test_no_meshes_gives_default():
    instance = GameInstance()
    assert instance.get_mesh_options_data(Gender.FEMALE) == MeshOptions()
    assert instance.get_mesh_options_data(Gender.NON_BINARY) == MeshOptions()


def test_female_without_feminine_falls_back_to_masculine():
    instance = GameInstance(meshes_masculine=[MeshOptions(using_mesh="m")])
    assert instance.get_mesh_options_data(Gender.FEMALE).using_mesh == "m"


def test_minimum_wage_clamped_to_non_negative():
    assert GameInstance(minimum_wage=-5.0).clamped_minimum_wage == 0.0
    assert GameInstance(minimum_wage=12.5).clamped_minimum_wage == 12.5