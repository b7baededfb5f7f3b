import math

from game.megabonk.controls import InputState, FrameInput


def test_no_keys_means_no_intent():
    inp = InputState()
    assert inp.movement_intent() == (0.0, 0.0)
    assert inp.sample() == FrameInput()


def test_diagonal_intent_is_unit_length():
    inp = InputState()
    inp.press("w")
    inp.press("ArrowRight")
    mx, my = inp.movement_intent()
    assert math.isclose(math.hypot(mx, my), 1.0)
    assert mx > 0 and my < 0


def test_opposite_keys_cancel():
    inp = InputState()
    inp.press("a")
    inp.press("d")
    assert inp.movement_intent() == (0.0, 0.0)


def test_release_stops_movement():
    inp = InputState()
    inp.press("S")
    assert inp.movement_intent() == (0.0, 1.0)
    inp.release("s")
    assert inp.movement_intent() == (0.0, 0.0)


def test_attack_fires_once_per_press_not_on_repeat():
    inp = InputState()
    inp.press("j")
    assert inp.sample().attack is True

    # Held key auto-repeat
    inp.press("j")
    inp.press("j")
    assert inp.sample().attack is False

    inp.release("j")
    inp.press("J")
    assert inp.sample().attack is True


def test_sample_consumes_edge():
    inp = InputState()
    inp.press("j")
    assert inp.attack_requested
    inp.sample()
    assert not inp.attack_requested
    assert inp.sample().attack is False


def test_custom_bindings():
    inp = InputState(bindings={
        "up": ("i",), "down": ("k",), "left": ("h",), "right": ("l",), "attack": ("space",),
    })
    inp.press("l")
    inp.press("space")
    frame = inp.sample()
    assert (frame.move_x, frame.move_y) == (1.0, 0.0)
    assert frame.attack is True


def test_reset_clears_keys_and_edge():
    inp = InputState()
    inp.press("w")
    inp.press("j")
    inp.reset()
    assert inp.sample() == FrameInput()
