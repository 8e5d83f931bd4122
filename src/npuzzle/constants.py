# ============================================================================
# BOARD
# ============================================================================
GRID_WIDTH = 3
GRID_HEIGHT = 3
# Upper bound on rejected shuffles before the generator gives up.
GENERATOR_MAX_ATTEMPTS = 1000


# ============================================================================
# WINDOW
# ============================================================================
WINDOW_TITLE = "N-Puzzle"
UPDATE_RATE = 1 / 60
# Side length of the generated placeholder artwork.
PLACEHOLDER_ART_SIZE = 480


# ============================================================================
# SCENES
# ============================================================================
TRANSITION_SPEED = 0.25        # wipe progress per second
FINISH_FRAME_INTERVAL = 0.5    # seconds each celebration frame stays on screen
FRAME_THICKNESS = 10           # border drawn around every tile


# ============================================================================
# COLORS
# ============================================================================
BACKGROUND_COLOR = (255, 255, 255)
BLANK_COLOR = (0, 0, 0)
FRAME_COLOR = (0, 0, 0)


# ============================================================================
# KEYS
# ============================================================================
# Arcade/pyglet key symbols; kept numeric so the core does not import arcade.
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
