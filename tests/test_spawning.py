import pytest

from eco2d.spawning import SpawnRegistry, StreamInfo, StreamThrottle


def test_spawn_returns_spawner_result():
    reg = SpawnRegistry()
    reg.add(5, lambda: 42)
    assert reg.spawn(5) == 42
    assert reg.provides(5) is True


def test_unknown_asset():
    reg = SpawnRegistry()
    assert reg.spawn(9) is None
    assert reg.spawn_with_data(9, object()) is None
    assert reg.provides(9) is False


def test_spawn_with_data_passes_udata():
    reg = SpawnRegistry()
    reg.add_with_data(7, lambda data: data["id"])
    assert reg.spawn_with_data(7, {"id": 9}) == 9


def test_wrong_spawn_style_raises():
    reg = SpawnRegistry()
    reg.add_with_data(7, lambda data: 1)
    reg.add(8, lambda: 1)
    with pytest.raises(TypeError):
        reg.spawn(7)
    with pytest.raises(TypeError):
        reg.spawn_with_data(8, None)


def test_first_registration_wins():
    reg = SpawnRegistry()
    reg.add(1, lambda: 100)
    reg.add(1, lambda: 200)
    assert reg.spawn(1) == 100
    assert len(reg) == 2


def test_wake_resets_info():
    throttle = StreamThrottle()
    throttle.wake(1)
    assert throttle[1] == StreamInfo(0.0, 0.0)
    assert throttle.can_stream(1, 0.5) is True


def test_update_blocks_until_next_tick():
    throttle = StreamThrottle()
    throttle.wake(1)
    throttle.update(10.0)
    assert throttle.can_stream(1, 10.0) is False
    assert throttle.can_stream(1, 10.1) is True


def test_delay_grows_while_idle_and_wake_resets():
    throttle = StreamThrottle()
    throttle.wake(1)
    throttle.update(10.0)
    throttle.update(12.0)
    assert throttle[1].tick_delay == pytest.approx(1.0)
    throttle.update(13.0)
    assert throttle[1].last_update == pytest.approx(14.0)
    assert throttle.can_stream(1, 13.5) is False
    throttle.wake(1)
    assert throttle[1].tick_delay == 0.0
    assert throttle.can_stream(1, 13.5) is True


def test_forget_and_implicit_entry():
    throttle = StreamThrottle()
    throttle.wake(1)
    throttle.forget(1)
    assert 1 not in throttle
    assert throttle.can_stream(2, 1.0) is True
    assert 2 in throttle
    assert len(throttle) == 1