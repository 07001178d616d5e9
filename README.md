# oxengine

A small game engine core built on pygame. It opens a window, records keyboard presses, and logs to the console and to a log file. It also has assertions that log the failure and stop the program.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Running the demo application

```
oxengine
```

By default this opens a 1080×720 window titled "test window". The program runs until the window is closed. Console messages are coloured. The same messages go, without colour, to `log.log` in the current directory, which is truncated at startup.

Options:

| Option | Default | Meaning |
|--------|---------|---------|
| `--name NAME` | `test window` | window title |
| `--fullscreen` | off | open fullscreen at the desktop size |
| `--width N` | `1080` | window width in pixels |
| `--height N` | `720` | window height in pixels |

## Using the engine

```python
from oxengine.application import AppConfig, startup_program, main_loop, shutdown_program

config = AppConfig(name="my game", fullscreen=False, width=800, height=600)
state = startup_program(config)
main_loop(state)
shutdown_program(state)
```

`startup_program(config)` does the following, in order:

- opens the log file
- initialises the pygame display
- creates a `Window`
- attaches an `Input` to the window

It returns an `AppState` holding `name`, `is_running`, `time_running`, `platform`, `window` and `input`. The `platform` field comes from `oxengine.defines.detect_platform()`, which returns a `Platform` member or `None`. Linux and the BSDs are reported as `Platform.UNIX`.

If the log file or the display cannot be opened, the assertion fails and the program is aborted.

`main_loop(state)` repeats three steps until the window has received a quit event:

1. flip the display
2. update input
3. check whether the window should close

`shutdown_program(state)` shuts input down, closes the window and closes the log file.

### Window

`oxengine.window.Window(name, fullscreen, width, height)` opens a pygame display with the given title. It stores `screen_width` and `screen_height` from the first desktop, and has an `aspect_ratio` property.

- `set_key_callback(callback)` registers a function called as `callback(key, scancode, action, mods)`.
- `poll_events()` reads pending events. Key down and key up events are passed to the callback with a `Key` code, or `-1` for keys without one, and with `KeyAction.PRESSED` or `KeyAction.RELEASED` as the action. A quit event marks the window as closing.
- `swap_buffers()` flips the display.
- `should_close()` reports whether a quit event has been seen.
- `close()` shuts the display down.

### Logging

```python
from oxengine import log

log.initialize_logger("log.log")
log.info("starting the application . . .")
log.debug("value is", 42)
log.warn("low memory")
log.error("something failed")
log.shutdown_logger()
```

Each message starts with a header: `[INFO]: `, `[DEBUG]: `, `[WARN]: ` or `[ERROR]: `. The arguments follow, each one followed by a space. Booleans are written as `1` or `0`. On standard output the line is coloured with ANSI codes:

| Level | Colour |
|-------|--------|
| info | green |
| debug | blue |
| warn | yellow |
| error | red |

The log file receives the same line without colour codes. It is flushed after every write. While no log file is open, messages go to standard output only.

- `initialize_logger(path)` raises `OSError` if the file cannot be opened.
- `log.format_message(log_type, message, colored)` returns the formatted line without writing it.
- `log.report_assertion(expression, message, file, line)` logs a failed assertion at error level.

### Assertions

```python
from oxengine.assertions import ox_assert

ox_assert(value is not None, "value is not None", "value must be set")
```

If the condition is false, `ox_assert(condition, expression="", message="")` logs an error. The error gives the message, if there is one, the expression, and the caller's file and line. It then calls `abort_program()`, which logs "aborting the application" and raises `SystemExit(0)`.

### Keys and input

`oxengine.keys.Key` lists the key codes, for example `Key.SPACE`, `Key.A`, `Key.DIGIT_1` and `Key.ESCAPE`. `oxengine.keys.KeyAction` has `RELEASED`, `PRESSED` and `HELD`.

`oxengine.input.Input(window=None)` registers its `key_callback` with the window, if one is given. Only `PRESSED` actions are recorded. A new press is added to `pressed_keys` and to `held_keys`. A key already in `pressed_keys` is logged at debug level and not added again.

`update()` polls the window's events, then clears `pressed_keys` and `released_keys`. `held_keys` is never cleared.

## Limitations

- Nothing is drawn. The window only presents an empty display each frame.
- Key releases are not tracked: `released_keys` stays empty, and keys stay in `held_keys` for good.
- `AppState.time_running` stays at `0.0`.