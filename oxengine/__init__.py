"""A small game engine core: a pygame window, keyboard input, coloured logging and assertions."""

__version__ = "0.1.0"