import sys

import pytest

from oxengine.defines import Platform, detect_platform


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, Platform.WINDOWS32),
        (1, Platform.WINDOWS64),
        (2, Platform.LINUX),
        (3, Platform.UNIX),
        (4, Platform.MAC),
    ],
)
def test_platform_values_match_engine_enum(value, expected):
    assert Platform(value) is expected


def test_platform_rejects_unknown_value():
    with pytest.raises(ValueError):
        Platform(5)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("win32", Platform.WINDOWS32),
        ("darwin", Platform.MAC),
        ("linux", Platform.UNIX),
        ("freebsd13", Platform.UNIX),
    ],
)
def test_detect_platform(monkeypatch, name, expected):
    monkeypatch.setattr(sys, "platform", name)
    assert detect_platform() is expected


def test_detect_unknown_platform(monkeypatch):
    monkeypatch.setattr(sys, "platform", "unknownos")
    assert detect_platform() is None