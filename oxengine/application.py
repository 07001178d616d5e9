"""Application lifecycle: startup, main loop and shutdown."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

import pygame

from oxengine.assertions import ox_assert
from oxengine.defines import Platform, detect_platform
from oxengine.input import Input
from oxengine.log import info, initialize_logger, shutdown_logger
from oxengine.window import Window


@dataclass
class AppConfig:
    name: str
    fullscreen: bool
    width: int
    height: int


@dataclass
class AppState:
    name: str
    is_running: bool
    time_running: float
    platform: Optional[Platform]
    window: Window
    input: Input


DEFAULT_CONFIG = AppConfig(name="test window", fullscreen=False, width=1080, height=720)


def startup_program(config: AppConfig) -> AppState:
    """Start the logger, the display and the window; return the running state."""
    try:
        initialize_logger()
        logger_opened = True
    except OSError:
        logger_opened = False
    ox_assert(logger_opened, "initializeLogger()")
    info("starting the application . . . ")
    info("initialising subsystems . . . ")
    info("initialising succesfull")

    try:
        pygame.display.init()
        display_ready = True
    except pygame.error:
        display_ready = False
    ox_assert(display_ready, "glfwInit()")

    window = Window(config.name, config.fullscreen, config.width, config.height)
    state = AppState(
        name=config.name,
        is_running=True,
        time_running=0.0,
        platform=detect_platform(),
        window=window,
        input=Input(window),
    )
    info("application opened succesfully!")
    return state


def main_loop(state: AppState) -> None:
    """Run frames until the window is asked to close."""
    while state.is_running:
        state.window.swap_buffers()
        state.input.update()
        if state.window.should_close():
            state.is_running = False


def shutdown_program(state: AppState) -> None:
    info("closing the app")
    state.input.shutdown()
    state.window.close()
    shutdown_logger()


def _parse_args(argv: Optional[Sequence[str]]) -> AppConfig:
    parser = argparse.ArgumentParser(prog="oxengine", description="Open the application window.")
    parser.add_argument("--name", default=DEFAULT_CONFIG.name)
    parser.add_argument("--fullscreen", action="store_true", default=DEFAULT_CONFIG.fullscreen)
    parser.add_argument("--width", type=int, default=DEFAULT_CONFIG.width)
    parser.add_argument("--height", type=int, default=DEFAULT_CONFIG.height)
    args = parser.parse_args(argv)
    return AppConfig(args.name, args.fullscreen, args.width, args.height)


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = _parse_args(argv)
    state = startup_program(config)
    main_loop(state)
    shutdown_program(state)
    return 0