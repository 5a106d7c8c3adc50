# =========================
# PARTICLES
# =========================
PARTICLE_COUNT = 15000
DISPERSE_EXTENT = 60.0          # side of the scatter cube, centred at the origin

# =========================
# MORPH FIELD (exponential smoothing per tick)
# =========================
MORPH_RATE = 0.06
EXPANSION_RATE = 0.08
TINT_RATE = 0.08
DEFAULT_TINT = "#00ffff"

# =========================
# GESTURES
# =========================
EXTENSION_TOLERANCE = 1.1       # tip must be 10% further from the wrist than the PIP
ROTATION_GAIN = 15.0            # pointing delta -> rotation velocity
ZOOM_HAND_OFFSET = 0.05         # wrist->middle MCP distance mapped to zoom 0
ZOOM_GAIN = 8.0
ZOOM_MIN = 0.2
ZOOM_MAX = 2.5

# =========================
# IDLE DISPERSAL
# =========================
IDLE_TIMEOUT_MS = 2500.0
AUTO_ROTATION_SPEED = 0.001     # per tick, used by the renderer when not pointing

# =========================
# TEXT RASTERIZER
# =========================
TEXT_CANVAS_WIDTH = 256
TEXT_CANVAS_HEIGHT = 128
TEXT_SAMPLE_STRIDE = 2
TEXT_BRIGHTNESS_THRESHOLD = 128
TEXT_WORLD_WIDTH = 30.0
TEXT_WORLD_HEIGHT = 15.0
