from oxengine.input import Input
from oxengine.keys import Key, KeyAction


class FakeWindow:
    def __init__(self):
        self.callback = None
        self.polls = 0

    def set_key_callback(self, callback):
        self.callback = callback

    def poll_events(self):
        self.polls += 1


def test_window_callback_registered():
    window = FakeWindow()
    keys = Input(window)
    window.callback(Key.A, 0, KeyAction.PRESSED, 0)
    assert keys.pressed_keys == (Key.A,)


def test_press_adds_to_pressed_and_held():
    keys = Input()
    keys.key_callback(Key.W, 17, KeyAction.PRESSED, 0)
    keys.key_callback(Key.S, 31, KeyAction.PRESSED, 0)
    assert keys.pressed_keys == (Key.W, Key.S)
    assert keys.held_keys == (Key.W, Key.S)
    assert keys.released_keys == ()


def test_non_press_actions_ignored():
    keys = Input()
    keys.key_callback(Key.A, 0, KeyAction.RELEASED, 0)
    keys.key_callback(Key.A, 0, KeyAction.HELD, 0)
    assert keys.pressed_keys == ()
    assert keys.held_keys == ()


def test_repeated_press_logged_once(capsys):
    keys = Input()
    keys.key_callback(Key.SPACE, 0, KeyAction.PRESSED, 0)
    keys.key_callback(Key.SPACE, 0, KeyAction.PRESSED, 0)
    assert keys.pressed_keys == (Key.SPACE,)
    assert keys.held_keys == (Key.SPACE,)
    assert "[DEBUG]: 32 is already pressed" in capsys.readouterr().out


def test_update_polls_and_clears_pressed_only():
    window = FakeWindow()
    keys = Input(window)
    keys.key_callback(Key.D, 0, KeyAction.PRESSED, 0)
    keys.update()
    assert window.polls == 1
    assert keys.pressed_keys == ()
    assert keys.held_keys == (Key.D,)


def test_reset_keys_keeps_held():
    keys = Input()
    keys.key_callback(Key.Q, 0, KeyAction.PRESSED, 0)
    keys.reset_keys()
    assert keys.pressed_keys == ()
    assert keys.held_keys == (Key.Q,)


def test_instances_do_not_share_state():
    first, second = Input(), Input()
    first.key_callback(Key.E, 0, KeyAction.PRESSED, 0)
    assert second.pressed_keys == ()
    assert first.pressed_keys == (Key.E,)