from chromaharmony.conversions.to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
import numpy as np
from ..samples import samples_unit_rgb_hsl


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_unit_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-2
        assert abs(s_out - s_exp) < 1e-4
        assert abs(l_out - l_exp) < 1e-4


def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_unit_rgb_hsl.keys()))
    expected = np.array(list(samples_unit_rgb_hsl.values()))
    r, g, b = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]
    hsl = np_unit_rgb_to_hsl(r, g, b)

    assert hsl.shape == expected.shape
    assert np.allclose(hsl[..., 0], expected[..., 0], atol=1e-2)
    assert np.allclose(hsl[..., 1], expected[..., 1], atol=1e-4)
    assert np.allclose(hsl[..., 2], expected[..., 2], atol=1e-4)


def test_achromatic_has_zero_hue_and_saturation():
    for v in (0.0, 0.25, 128 / 255, 1.0):
        h, s, l = unit_rgb_to_hsl(v, v, v)
        assert h == 0.0
        assert s == 0.0
        assert l == v


def test_hue_is_not_wrapped():
    # red is the max with g < b: the 6-sector offset keeps hue positive, below 360
    h, _, _ = unit_rgb_to_hsl(1.0, 0.0, 0.01)
    assert 359.0 < h < 360.0


def test_max_ties_prefer_red_then_green():
    # yellow: red and green share the max, the red branch gives 60°
    h, _, _ = unit_rgb_to_hsl(1.0, 1.0, 0.0)
    assert h == 60.0
    # cyan: green and blue share the max, the green branch gives 180°
    h, _, _ = unit_rgb_to_hsl(0.0, 1.0, 1.0)
    assert h == 180.0

    hsl = np_unit_rgb_to_hsl(np.array([1.0, 0.0]), np.array([1.0, 1.0]), np.array([0.0, 1.0]))
    assert np.allclose(hsl[..., 0], [60.0, 180.0])


def test_numpy_broadcasts_scalars():
    hsl = np_unit_rgb_to_hsl(1.0, 0.0, 0.0)
    assert hsl.shape == (3,)
    assert np.allclose(hsl, (0.0, 1.0, 0.5))
