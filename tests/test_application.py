import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from oxengine.application import (
    DEFAULT_CONFIG,
    AppConfig,
    main,
    main_loop,
    shutdown_program,
    startup_program,
)
from oxengine.defines import detect_platform
from oxengine.keys import Key


@pytest.fixture
def state(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    app_state = startup_program(AppConfig("demo", False, 160, 120))
    yield app_state
    shutdown_program(app_state)


def test_default_config_matches_entry():
    assert DEFAULT_CONFIG == AppConfig("test window", False, 1080, 720)


def test_startup_fills_state(state):
    assert state.name == "demo"
    assert state.is_running is True
    assert state.time_running == 0.0
    assert state.platform == detect_platform()
    assert state.window.instance.get_size() == (160, 120)


def test_startup_writes_log(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    app_state = startup_program(AppConfig("logged", False, 100, 100))
    try:
        assert app_state.name == "logged"
        text = (tmp_path / "log.log").read_text(encoding="utf-8")
        assert "[INFO]: starting the application . . . \n" in text
        assert "[INFO]: application opened succesfully! \n" in text
    finally:
        shutdown_program(app_state)


def test_main_loop_stops_on_quit(state):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    main_loop(state)
    assert state.is_running is False


def test_main_loop_tracks_held_keys(state):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w, scancode=26, mod=0))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    main_loop(state)
    assert state.input.held_keys == (int(Key.W),)
    assert state.input.pressed_keys == ()


def test_shutdown_closes_display_and_log(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    app_state = startup_program(AppConfig("demo", False, 100, 100))
    assert shutdown_program(app_state) is None
    assert pygame.display.get_init() is False
    text = (tmp_path / "log.log").read_text(encoding="utf-8")
    assert text.endswith("[INFO]: closing the app \n")


def test_main_rejects_unknown_option(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2