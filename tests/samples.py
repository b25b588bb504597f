# 8-bit RGB -> HSL (hue in degrees, saturation %, lightness %)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (255, 255, 0): (60.0, 100.0, 50.0),
    (0, 255, 255): (180.0, 100.0, 50.0),
    (255, 0, 255): (300.0, 100.0, 50.0),
    (255, 87, 51): (10.588, 100.0, 60.0),
    (18, 52, 86): (210.0, 65.385, 20.392),
    (100, 81, 81): (0.0, 10.497, 35.490),
    (128, 128, 128): (0.0, 0.0, 50.196),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

# HSL -> 8-bit RGB
samples_hsl_rgb = {
    (0.0, 100.0, 50.0): (255, 0, 0),
    (120.0, 100.0, 50.0): (0, 255, 0),
    (240.0, 100.0, 50.0): (0, 0, 255),
    (180.0, 100.0, 50.0): (0, 255, 255),
    (210.0, 65.385, 20.392): (18, 52, 86),
    (137.0, 69.7, 61.5): (88, 225, 127),
    (130.0, 67.1, 49.1): (41, 209, 69),
    (283.0, 67.2, 23.0): (76, 19, 98),
    (0.0, 0.0, 50.196): (128, 128, 128),
}

# Unit RGB -> (hue degrees, unit saturation, unit lightness)
samples_unit_rgb_hsl = {
    (rgb[0] / 255, rgb[1] / 255, rgb[2] / 255): (h, s / 100, l / 100)
    for rgb, (h, s, l) in samples_rgb_hsl.items()
}
