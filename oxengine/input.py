"""Keyboard state tracking fed by window key events."""

from __future__ import annotations

from typing import Any

from oxengine.keys import KeyAction
from oxengine.log import debug, info


class Input:
    """Collects pressed, released and held keys between frames."""

    def __init__(self, window: Any = None) -> None:
        self._window = window
        self._pressed: list[int] = []
        self._released: list[int] = []
        self._held: list[int] = []
        if window is not None:
            window.set_key_callback(self.key_callback)

    def shutdown(self) -> None:
        """Release input resources; nothing is held beyond key lists."""

    def update(self) -> None:
        """Poll window events, then clear this frame's pressed and released keys."""
        if self._window is not None:
            self._window.poll_events()
        self.reset_keys()

    def reset_keys(self) -> None:
        self._pressed.clear()
        self._released.clear()

    def key_callback(self, key: int, scancode: int, action: int, mods: int) -> None:
        """Record a key event; only presses are tracked."""
        if action != KeyAction.PRESSED:
            return
        key = int(key)
        info(key, "pressed")
        if key in self._pressed:
            debug(key, "is already pressed")
        else:
            self._pressed.append(key)
            self._held.append(key)

    @property
    def pressed_keys(self) -> tuple[int, ...]:
        return tuple(self._pressed)

    @property
    def released_keys(self) -> tuple[int, ...]:
        return tuple(self._released)

    @property
    def held_keys(self) -> tuple[int, ...]:
        return tuple(self._held)