# Unit RGB -> expected values in other spaces (hue in degrees)

samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.2, 0.4, 0.6): (210.0, 2 / 3, 0.6),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 0.5),
    (0.2, 0.4, 0.6): (210.0, 0.5, 0.4),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_rgb_cmyk = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0, 0.0),
    (0.0, 1.0, 1.0): (1.0, 0.0, 0.0, 0.0),
    (0.2, 0.4, 0.6): (2 / 3, 1 / 3, 0.0, 0.4),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0, 1.0),
}
