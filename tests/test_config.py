import pytest

from railboard.config import Settings, TimerSpeed


def test_from_dialog_sets_every_field():
    settings = Settings.from_dialog(3, True, False, True, False, True)
    assert settings.timer_speed is TimerSpeed.FAST
    assert settings.delay_enable is True
    assert settings.loco_refuel is False
    assert settings.save_on_exit is True
    assert settings.start_optimised is False
    assert settings.sound_enable is True


def test_from_dialog_rejects_unknown_speed():
    with pytest.raises(ValueError):
        Settings.from_dialog(4, False, False, False, False, False)


def test_constructor_coerces_speed():
    assert Settings(timer_speed=1).timer_speed is TimerSpeed.SLOW
    with pytest.raises(ValueError):
        Settings(timer_speed=0)


def test_describe_enabled():
    settings = Settings.from_dialog(TimerSpeed.SLOW, True, True, True, True, True)
    lines = settings.describe()
    assert lines[0] == "Timer speed is:1"
    assert lines[1] == "Delay is Enabled"
    assert lines[5] == "SoundEnable is Enabled"


def test_describe_disabled():
    lines = Settings.from_dialog(2, False, False, False, False, False).describe()
    assert all(line.endswith("Disabled") for line in lines[1:])
    assert len(lines) == 6


def test_round_trip_through_dialog():
    original = Settings(TimerSpeed.NORMAL, True, False, True, True, False)
    copy = Settings.from_dialog(
        original.timer_speed,
        original.delay_enable,
        original.loco_refuel,
        original.save_on_exit,
        original.start_optimised,
        original.sound_enable,
    )
    assert copy == original