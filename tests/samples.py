# Unit RGB -> (hue, saturation, value)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.5, 0.25, 0.25): (0.0, 0.5, 0.5),
    (0.25, 0.5, 0.75): (210.0, 2 / 3, 0.75),
    (0.6, 0.2, 0.4): (330.0, 2 / 3, 0.6),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
}

# (hue, saturation, value) -> unit RGB
samples_hsv_rgb = {
    (0.0, 1.0, 1.0): (1.0, 0.0, 0.0),
    (120.0, 1.0, 1.0): (0.0, 1.0, 0.0),
    (240.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (60.0, 1.0, 1.0): (1.0, 1.0, 0.0),
    (30.0, 1.0, 1.0): (1.0, 0.5, 0.0),
    (210.0, 0.5, 0.8): (0.4, 0.6, 0.8),
    (352.0, 0.5, 0.5): (0.5, 0.25, 0.2833333333),
    (90.0, 0.0, 0.3): (0.3, 0.3, 0.3),
    (300.0, 1.0, 0.0): (0.0, 0.0, 0.0),
}
