import pytest

from arraydeque.config.dequeoption import get_deque_config


def test_defaults():
    config = get_deque_config()
    assert config.capacity.minimum == 8
    assert config.capacity.growth == 2
    assert config.capacity.shrink == 4

def test_overrides():
    config = get_deque_config({'capacity.minimum': 32,
                               'capacity.shrink': 8})
    assert config.capacity.minimum == 32
    assert config.capacity.growth == 2
    assert config.capacity.shrink == 8

def test_fresh_config_each_time():
    c1 = get_deque_config()
    c1.capacity.minimum = 64
    assert get_deque_config().capacity.minimum == 8

def test_invalid_values():
    with pytest.raises(ValueError):
        get_deque_config({'capacity.minimum': 0})
    with pytest.raises(ValueError):
        get_deque_config({'capacity.growth': 1})
    with pytest.raises(ValueError):
        get_deque_config({'capacity.bogus': 1})
