"""Application window backed by a pygame display surface."""

from __future__ import annotations

import string
from typing import Callable, Optional

import pygame

from oxengine.assertions import ox_assert
from oxengine.keys import Key, KeyAction

KeyCallback = Callable[[int, int, int, int], None]

UNKNOWN_KEY = -1

_NAMED_KEYS = (
    ("K_SPACE", Key.SPACE),
    ("K_QUOTE", Key.APOSTROPHE),
    ("K_COMMA", Key.COMMA),
    ("K_MINUS", Key.MINUS),
    ("K_PERIOD", Key.PERIOD),
    ("K_SLASH", Key.SLASH),
    ("K_SEMICOLON", Key.SEMICOLON),
    ("K_EQUALS", Key.EQUAL),
    ("K_LEFTBRACKET", Key.LEFT_BRACKET),
    ("K_BACKSLASH", Key.BACKSLASH),
    ("K_RIGHTBRACKET", Key.RIGHT_BRACKET),
    ("K_BACKQUOTE", Key.GRAVE_ACCENT),
    ("K_ESCAPE", Key.ESCAPE),
    ("K_RETURN", Key.ENTER),
    ("K_TAB", Key.TAB),
    ("K_BACKSPACE", Key.BACKSPACE),
    ("K_INSERT", Key.INSERT),
    ("K_DELETE", Key.DELETE),
    ("K_RIGHT", Key.RIGHT),
    ("K_LEFT", Key.LEFT),
    ("K_DOWN", Key.DOWN),
    ("K_UP", Key.UP),
    ("K_PAGEUP", Key.PAGE_UP),
    ("K_PAGEDOWN", Key.PAGE_DOWN),
    ("K_HOME", Key.HOME),
    ("K_END", Key.END),
    ("K_CAPSLOCK", Key.CAPS_LOCK),
    ("K_SCROLLOCK K_SCROLLLOCK", Key.SCROLL_LOCK),
    ("K_NUMLOCK K_NUMLOCKCLEAR", Key.NUM_LOCK),
    ("K_PRINT K_PRINTSCREEN", Key.PRINT_SCREEN),
    ("K_PAUSE", Key.PAUSE),
    ("K_KP_PERIOD", Key.KP_DECIMAL),
    ("K_KP_DIVIDE", Key.KP_DIVIDE),
    ("K_KP_MULTIPLY", Key.KP_MULTIPLY),
    ("K_KP_MINUS", Key.KP_SUBTRACT),
    ("K_KP_PLUS", Key.KP_ADD),
    ("K_KP_ENTER", Key.KP_ENTER),
    ("K_KP_EQUALS", Key.KP_EQUAL),
    ("K_LSHIFT", Key.LEFT_SHIFT),
    ("K_LCTRL", Key.LEFT_CONTROL),
    ("K_LALT", Key.LEFT_ALT),
    ("K_LSUPER K_LGUI K_LMETA", Key.LEFT_SUPER),
    ("K_RSHIFT", Key.RIGHT_SHIFT),
    ("K_RCTRL", Key.RIGHT_CONTROL),
    ("K_RALT", Key.RIGHT_ALT),
    ("K_RSUPER K_RGUI K_RMETA", Key.RIGHT_SUPER),
    ("K_MENU", Key.MENU),
)


def _build_key_map() -> dict[int, Key]:
    names: list[tuple[str, Key]] = []
    for group, key in _NAMED_KEYS:
        names.extend((name, key) for name in group.split())
    names.extend((f"K_{letter}", Key[letter.upper()]) for letter in string.ascii_lowercase)
    names.extend((f"K_{digit}", Key[f"DIGIT_{digit}"]) for digit in string.digits)
    names.extend((f"K_F{n}", Key[f"F{n}"]) for n in range(1, 26))
    for digit in string.digits:
        kp = Key[f"KP_{digit}"]
        names.extend(((f"K_KP{digit}", kp), (f"K_KP_{digit}", kp)))

    mapping: dict[int, Key] = {}
    for name, key in names:
        code = getattr(pygame, name, None)
        if code is not None:
            mapping.setdefault(code, key)
    return mapping


_KEY_MAP = _build_key_map()


def _translate_key(code: int) -> int:
    return int(_KEY_MAP.get(code, UNKNOWN_KEY))


class Window:
    """A titled window, windowed or fullscreen on the primary display."""

    def __init__(self, name: str, fullscreen: bool, width: int, height: int) -> None:
        self.name = name
        self.fullscreen = fullscreen
        self.width = width
        self.height = height
        self.screen_width = 0
        self.screen_height = 0
        self.instance: Optional[pygame.Surface] = None
        self._key_callback: Optional[KeyCallback] = None
        self._should_close = False
        ox_assert(self._create(), "m_create()")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def _create(self) -> bool:
        if not pygame.display.get_init():
            pygame.display.init()
        self.screen_width, self.screen_height = pygame.display.get_desktop_sizes()[0]

        try:
            if self.fullscreen:
                surface = pygame.display.set_mode(
                    (self.screen_width, self.screen_height), pygame.FULLSCREEN
                )
            else:
                surface = pygame.display.set_mode((self.width, self.height))
        except pygame.error:
            surface = None
        ox_assert(surface is not None, "instance")
        self.instance = surface
        pygame.display.set_caption(self.name)
        return True

    def set_key_callback(self, callback: Optional[KeyCallback]) -> None:
        """Register the function called as callback(key, scancode, action, mods)."""
        self._key_callback = callback

    def poll_events(self) -> None:
        """Process pending events, dispatching key events and close requests."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._should_close = True
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if self._key_callback is None:
                    continue
                action = KeyAction.PRESSED if event.type == pygame.KEYDOWN else KeyAction.RELEASED
                self._key_callback(
                    _translate_key(event.key),
                    getattr(event, "scancode", 0),
                    int(action),
                    getattr(event, "mod", 0),
                )

    def swap_buffers(self) -> None:
        pygame.display.flip()

    def should_close(self) -> bool:
        return self._should_close

    def close(self) -> None:
        """Destroy the window and shut the display down."""
        self.instance = None
        pygame.display.quit()