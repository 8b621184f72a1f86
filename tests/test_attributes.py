import pytest

from wildfire_sim.attributes import Attribute, AttributeSet


@pytest.fixture
def attrs():
    return AttributeSet()


def test_defaults(attrs):
    assert attrs.health == 100.0
    assert attrs.morale == 50.0
    assert attrs.fatigue == 0.0
    assert attrs.thirst == 0.0
    assert attrs.hunger == 0.0
    assert all(attrs.base_value(a) == 100.0 for a in Attribute)


def test_set_round_trip(attrs):
    assert attrs.set_attribute_value(Attribute.THIRST, 42.5) is True
    assert attrs.get_attribute_value(Attribute.THIRST) == 42.5


def test_set_clamps_to_range(attrs):
    attrs.set_attribute_value(Attribute.HUNGER, 150)
    assert attrs.hunger == 100.0
    attrs.set_attribute_value(Attribute.HUNGER, -20)
    assert attrs.hunger == 0.0


def test_unchanged_value_returns_false_and_is_silent(attrs):
    seen = []
    attrs.on_attribute_updated.subscribe(lambda *a: seen.append(a))
    assert attrs.set_attribute_value(Attribute.HEALTH, 100.0) is False
    assert attrs.set_attribute_value(Attribute.HEALTH, 250.0) is False
    assert seen == []


def test_update_event_carries_old_and_new(attrs):
    seen = []
    attrs.on_attribute_updated.subscribe(lambda *a: seen.append(a))
    attrs.set_attribute_value(Attribute.MORALE, 80)
    assert seen == [(Attribute.MORALE, 50.0, 80.0)]


def test_modify_attribute_adds(attrs):
    attrs.set_attribute_value(Attribute.FATIGUE, 30)
    assert attrs.modify_attribute(Attribute.FATIGUE, 10) is True
    assert attrs.fatigue == 40.0
    assert attrs.modify_attribute(Attribute.FATIGUE, -1000) is True
    assert attrs.fatigue == 0.0


def test_modify_percent(attrs):
    attrs.set_attribute_value(Attribute.THIRST, 40)
    attrs.modify_attribute_percent(Attribute.THIRST, 0.5)
    assert attrs.thirst == 60.0
    attrs.modify_attribute_percent(Attribute.THIRST, -1.0)
    assert attrs.thirst == 0.0


def test_modify_percent_of_zero_changes_nothing(attrs):
    assert attrs.modify_attribute_percent(Attribute.HUNGER, 0.9) is False
    assert attrs.hunger == 0.0


def test_percent_growth_is_capped(attrs):
    attrs.modify_attribute_percent(Attribute.MORALE, 5.0)
    assert attrs.morale == 100.0


@pytest.mark.parametrize("bad", [None, "Health", 3])
def test_invalid_attribute_raises(attrs, bad):
    with pytest.raises(ValueError):
        attrs.get_attribute_value(bad)
    with pytest.raises(ValueError):
        attrs.set_attribute_value(bad, 10)
    with pytest.raises(ValueError):
        attrs.modify_attribute(bad, 1)
    with pytest.raises(ValueError):
        attrs.modify_attribute_percent(bad, 0.1)