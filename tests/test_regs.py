import pytest

from flappygopher.regs import gs_setreg_alpha, gs_setreg_rgbaq, unpack_rgbaq


def test_red_is_lowest_byte():
    assert gs_setreg_rgbaq(0xFF, 0, 0, 0, 0) == 0xFF


def test_black_is_zero():
    assert gs_setreg_rgbaq(0, 0, 0, 0, 0) == 0


def test_q_lives_above_32_bits():
    assert gs_setreg_rgbaq(0, 0, 0, 0, 1) >> 32 == 1
    assert gs_setreg_rgbaq(0, 0, 0, 0, 1) & 0xFFFFFFFF == 0


@pytest.mark.parametrize(
    "colour",
    [
        (0x80, 0x80, 0x80, 0x80, 0x00),
        (0xFF, 0xFF, 0xFF, 0x80, 0x00),
        (1, 2, 3, 4, 5),
        (0xFF, 0xFF, 0xFF, 0xFF, 0xFF),
    ],
)
def test_rgbaq_round_trip(colour):
    assert unpack_rgbaq(gs_setreg_rgbaq(*colour)) == colour


def test_rgbaq_fields_do_not_overlap():
    parts = [
        gs_setreg_rgbaq(0xFF, 0, 0, 0, 0),
        gs_setreg_rgbaq(0, 0xFF, 0, 0, 0),
        gs_setreg_rgbaq(0, 0, 0xFF, 0, 0),
        gs_setreg_rgbaq(0, 0, 0, 0xFF, 0),
        gs_setreg_rgbaq(0, 0, 0, 0, 0xFF),
    ]
    for i, left in enumerate(parts):
        for right in parts[i + 1:]:
            assert left & right == 0
    assert sum(parts) == gs_setreg_rgbaq(0xFF, 0xFF, 0xFF, 0xFF, 0xFF)


@pytest.mark.parametrize("bad", [-1, 256])
def test_rgbaq_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        gs_setreg_rgbaq(bad, 0, 0, 0, 0)


def test_rgbaq_rejects_non_int():
    with pytest.raises(TypeError):
        gs_setreg_rgbaq(1.5, 0, 0, 0, 0)


def test_alpha_first_selector_unshifted():
    assert gs_setreg_alpha(2, 0, 0, 0, 0) == 2


def test_alpha_fix_above_32_bits():
    value = gs_setreg_alpha(0, 0, 0, 0, 0x80)
    assert value >> 32 == 0x80
    assert value & 0xFFFFFFFF == 0


def test_alpha_selectors_are_two_bits_apart():
    assert gs_setreg_alpha(0, 1, 0, 0, 0) == gs_setreg_alpha(1, 0, 0, 0, 0) << 2
    assert gs_setreg_alpha(0, 0, 1, 0, 0) == gs_setreg_alpha(0, 1, 0, 0, 0) << 2
    assert gs_setreg_alpha(0, 0, 0, 1, 0) == gs_setreg_alpha(0, 0, 1, 0, 0) << 2


def test_alpha_rejects_large_fix():
    with pytest.raises(ValueError):
        gs_setreg_alpha(0, 0, 0, 0, 0x10000)


def test_unpack_rejects_too_wide_value():
    with pytest.raises(ValueError):
        unpack_rgbaq(1 << 40)