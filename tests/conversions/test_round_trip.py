from chromaharmony.colors.rgb import ColorRGB
from chromaharmony.conversions.wrapper import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
import numpy as np

rgb_tolerance = 1


def test_round_trip_rgb_hsl_grid():
    levels = range(0, 256, 15)
    for r in levels:
        for g in levels:
            for b in levels:
                rgb = ColorRGB((r, g, b))
                r_out, g_out, b_out = hsl_to_rgb(rgb_to_hsl(rgb))

                assert abs(r - r_out) <= rgb_tolerance
                assert abs(g - g_out) <= rgb_tolerance
                assert abs(b - b_out) <= rgb_tolerance


def test_round_trip_rgb_hsl_edges():
    for value in [(0, 0, 0), (255, 255, 255), (1, 0, 0), (254, 255, 255), (127, 128, 129), (0, 1, 255)]:
        rgb = ColorRGB(value)
        out = rgb.to_hsl().to_rgb()
        assert all(abs(a - b) <= rgb_tolerance for a, b in zip(rgb, out))


def test_round_trip_rgb_hsl_numpy():
    levels = np.arange(0, 256, 3)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    rgb = np.stack([r, g, b], axis=-1)

    out = np_hsl_to_rgb(np_rgb_to_hsl(rgb))

    assert out.shape == rgb.shape
    assert out.dtype == np.uint8
    assert np.abs(out.astype(int) - rgb).max() <= rgb_tolerance


def test_round_trip_rgb_hsl_full_cube():
    levels = np.arange(256)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    cube = np.stack([r, g, b], axis=-1).reshape(-1, 3)

    for chunk in np.array_split(cube, 64):
        out = np_hsl_to_rgb(np_rgb_to_hsl(chunk))
        assert out.dtype == np.uint8
        assert np.abs(out.astype(int) - chunk).max() <= rgb_tolerance
