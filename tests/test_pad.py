from dataclasses import fields, replace

import pytest

from flappygopher.pad import Button, PadState, decode_buttons, encode_buttons


def test_all_bits_set_means_nothing_pressed():
    assert decode_buttons(0xFFFF) == PadState()


def test_nothing_pressed_encodes_to_all_bits():
    assert encode_buttons(PadState()) == 0xFFFF


def test_cleared_start_bit_is_start_pressed():
    state = decode_buttons(0xFFFF & ~Button.START)
    assert state == PadState(start=True)


def test_cleared_cross_bit_is_cross_pressed():
    state = decode_buttons(0xFFFF & ~Button.CROSS)
    assert state.cross is True
    assert state.start is False


def test_zero_word_presses_everything():
    everything = PadState(**{f.name: True for f in fields(PadState)})
    assert decode_buttons(0) == everything


def test_stick_buttons_are_ignored():
    assert decode_buttons(0xFFFF & ~(Button.L3 | Button.R3)) == PadState()


@pytest.mark.parametrize("name", [f.name for f in fields(PadState)])
def test_each_button_round_trips(name):
    state = replace(PadState(), **{name: True})
    word = encode_buttons(state)
    assert word == 0xFFFF & ~Button[name.upper()]
    assert decode_buttons(word) == state


def test_combined_round_trip():
    state = PadState(up=True, cross=True, start=True, l2=True)
    assert decode_buttons(encode_buttons(state)) == state


@pytest.mark.parametrize("bad", [-1, 0x10000])
def test_out_of_range_word_rejected(bad):
    with pytest.raises(ValueError):
        decode_buttons(bad)


def test_non_int_word_rejected():
    with pytest.raises(TypeError):
        decode_buttons("0xFFFF")