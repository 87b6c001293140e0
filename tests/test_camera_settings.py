import pytest

from dropflow.camera_settings import CameraSettings


@pytest.fixture
def settings():
    return CameraSettings()


def test_defaults_collapsed_on_creation(settings):
    assert settings.flat["Overlap"] == "0"
    assert settings.flat["SensorCooling"] == "1"
    assert settings.flat["FrameRate"] == "40"
    assert settings.flat["ExposureTime"] == "0.004"
    assert settings.flat["PixelReadoutRate"] == "280 MHz"
    assert settings.flat["PixelEncoding"] == "Mono16"


def test_flat_holds_every_typed_key(settings):
    expected = (
        set(settings.bools) | set(settings.ints) | set(settings.floats) | set(settings.enums)
    )
    assert set(settings.flat) == expected


def test_flat_is_sorted_by_key(settings):
    keys = list(settings.flat)
    assert keys == sorted(keys)


def test_collapse_returns_flat(settings):
    settings.ints["FrameCount"] = 7
    result = settings.collapse()
    assert result is settings.flat
    assert result["FrameCount"] == "7"


def test_expand_round_trip(settings):
    settings.flat["Overlap"] = "1"
    settings.flat["FrameCount"] = "12"
    settings.flat["FrameRate"] = "25.5"
    settings.flat["TriggerMode"] = "Software"
    settings.expand()
    assert settings.bools["Overlap"] is True
    assert settings.ints["FrameCount"] == 12
    assert settings.floats["FrameRate"] == 25.5
    assert settings.enums["TriggerMode"] == "Software"
    again = dict(settings.flat)
    settings.collapse()
    assert settings.flat == again


def test_expand_unparsable_numbers_become_zero(settings):
    settings.flat["FrameCount"] = "abc"
    settings.flat["ExposureTime"] = "fast"
    settings.flat["SensorCooling"] = "yes"
    settings.expand()
    assert settings.ints["FrameCount"] == 0
    assert settings.floats["ExposureTime"] == 0.0
    assert settings.bools["SensorCooling"] is False


def test_expand_integer_rejects_fraction(settings):
    settings.flat["Accumulatecount"] = "1.5"
    settings.expand()
    assert settings.ints["Accumulatecount"] == 0


def test_expand_ignores_unknown_keys(settings):
    before = (dict(settings.bools), dict(settings.ints), dict(settings.floats), dict(settings.enums))
    settings.flat["NotAFeature"] = "42"
    settings.expand()
    after = (settings.bools, settings.ints, settings.floats, settings.enums)
    assert after == before


def test_expand_keeps_values_missing_from_flat(settings):
    del settings.flat["FrameRate"]
    settings.floats["FrameRate"] = 10.0
    settings.expand()
    assert settings.floats["FrameRate"] == 10.0


def test_describe_lists_every_feature(settings):
    text = settings.describe()
    assert "Overlap = 0\n" in text
    assert "FrameRate = 40\n" in text
    assert "BitDepth = 16 Bit\n" in text
    for key in settings.flat:
        assert f"{key} = " in text


def test_describe_separates_sections(settings):
    text = settings.describe()
    assert text.endswith("\n\n")
    assert text.count("\n\n") == 4


def test_instances_do_not_share_tables():
    first = CameraSettings()
    second = CameraSettings()
    first.enums["CycleMode"] = "Fixed"
    assert second.enums["CycleMode"] == "Continuous"