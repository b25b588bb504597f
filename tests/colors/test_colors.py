from chromaharmony.colors.rgb import ColorRGB
from chromaharmony.colors.hsl import ColorHSL
from chromaharmony.colors.color_base import ColorBase
import pytest
from ..samples import samples_rgb_hsl


def test_rgb_channels():
    color = ColorRGB((255, 128, 0))
    assert (color.r, color.g, color.b) == (255, 128, 0)
    assert color.value == (255, 128, 0)
    assert list(color) == [255, 128, 0]
    assert color[1] == 128
    assert len(color) == 3
    assert color.unit_values == (1.0, 128 / 255, 0.0)


def test_rgb_is_immutable():
    color = ColorRGB((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.r = 10
    assert color == (1, 2, 3)


def test_rgb_saturates_out_of_range():
    assert ColorRGB((300, -5, 12)) == (255, 0, 12)


def test_rgb_coerces_to_int():
    color = ColorRGB((12.0, 34.0, 56.0))
    assert all(isinstance(c, int) for c in color)


def test_channel_count_validated():
    with pytest.raises(ValueError):
        ColorRGB((1, 2))
    with pytest.raises(ValueError):
        ColorHSL((1.0, 2.0, 3.0, 4.0))
    with pytest.raises(TypeError):
        ColorRGB("#FFFFFF")
    with pytest.raises(TypeError):
        ColorRGB(5)


def test_hsl_hue_is_unbounded():
    hsl = ColorHSL((-90.0, 150.0, -1.0))
    assert hsl.h == -90.0
    assert hsl.s == 100.0
    assert hsl.l == 0.0
    assert hsl.has_hue
    assert not ColorRGB((0, 0, 0)).has_hue


def test_with_hue_returns_new_instance():
    hsl = ColorHSL((10.0, 50.0, 50.0))
    rotated = hsl.with_hue(200.0)
    assert rotated == (200.0, 50.0, 50.0)
    assert hsl == (10.0, 50.0, 50.0)


def test_value_equality_and_hash():
    assert ColorRGB((1, 2, 3)) == ColorRGB((1, 2, 3))
    assert ColorRGB((1, 2, 3)) != ColorRGB((3, 2, 1))
    assert ColorRGB((0, 0, 0)) != ColorHSL((0.0, 0.0, 0.0))
    assert len({ColorRGB((1, 2, 3)), ColorRGB((1, 2, 3))}) == 1


def test_hash_agrees_with_tuple_equality():
    assert ColorRGB((1, 2, 3)) == (1, 2, 3)
    assert hash(ColorRGB((1, 2, 3))) == hash((1, 2, 3))
    assert (1, 2, 3) in {ColorRGB((1, 2, 3))}
    assert ColorRGB((1, 2, 3)) in {(1, 2, 3)}


def test_copy_from_same_space():
    original = ColorRGB((9, 8, 7))
    assert ColorRGB(original) == original
    with pytest.raises(TypeError):
        ColorRGB(ColorHSL((0.0, 0.0, 0.0)))


def test_class_conversion_rgb_to_hsl():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        hsl = ColorRGB(rgb).to_hsl()
        assert isinstance(hsl, ColorHSL)
        h, s, l = hsl.value
        assert abs(h - h_exp) < 1e-2
        assert abs(s - s_exp) < 1e-2
        assert abs(l - l_exp) < 1e-2

        back = hsl.to_rgb()
        assert isinstance(back, ColorRGB)
        assert all(abs(a - b) <= 1 for a, b in zip(back, rgb))


def test_repr():
    assert repr(ColorRGB((1, 2, 3))) == "ColorRGB((1, 2, 3))"
    assert isinstance(ColorRGB((1, 2, 3)), ColorBase)
