# (r, g, b) 0-255  ->  (h degrees, s %, l %)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (255, 255, 0): (60.0, 100.0, 50.0),
    (0, 255, 255): (180.0, 100.0, 50.0),
    (255, 0, 255): (300.0, 100.0, 50.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255 * 100),
    (255, 128, 0): (128 / 255 * 60, 100.0, 50.0),
    (255, 0, 128): (360 - 128 / 255 * 60, 100.0, 50.0),
    (128, 0, 0): (0.0, 100.0, 64 / 255 * 100),
}

# (r, g, b) 0-255  ->  (h, s, v) all in [0, 1]
samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 1.0),
    (0, 255, 0): (1 / 3, 1.0, 1.0),
    (0, 0, 255): (2 / 3, 1.0, 1.0),
    (255, 255, 0): (1 / 6, 1.0, 1.0),
    (0, 255, 255): (0.5, 1.0, 1.0),
    (255, 0, 255): (5 / 6, 1.0, 1.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 128, 0): (128 / 255 / 6, 1.0, 1.0),
    (255, 0, 128): (1 - 128 / 255 / 6, 1.0, 1.0),
    (128, 0, 0): (0.0, 1.0, 128 / 255),
}

samples_rgb_hex = {
    (255, 0, 0): "#ff0000",
    (0, 255, 0): "#00ff00",
    (0, 0, 255): "#0000ff",
    (0, 0, 0): "#000000",
    (255, 255, 255): "#ffffff",
    (1, 2, 3): "#010203",
    (70, 130, 180): "#4682b4",
    (102, 51, 153): "#663399",
}

# sparse grid over the RGB cube, corners included
GRID_STEPS = list(range(0, 256, 17))
rgb_grid = [(r, g, b) for r in GRID_STEPS for g in GRID_STEPS for b in GRID_STEPS]
