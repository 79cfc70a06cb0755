GRID_ROWS = 8
GRID_COLS = 8
BOTTOM_MARGIN = 20

# Number of pieces removed during the setup handshake before play starts.
SETUP_REMOVALS = 2

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.62
BOARD_MAX_HEIGHT_PCT = 0.90

# Status panel sits to the right of the board.
SIDE_GAP = 30
STATUS_PANEL_MIN_WIDTH = 220
STATUS_PANEL_TOP_MARGIN = 8
STATUS_HISTORY_LINES = 8

# "New Game" button inside the status panel.
RESET_BUTTON_WIDTH = 160
RESET_BUTTON_HEIGHT = 40
RESET_BUTTON_BOTTOM = 40

# Palette
SQUARE_LIGHT = (254, 243, 199)
SQUARE_DARK = (219, 234, 254)
SQUARE_DESTINATION = (167, 243, 208)
SELECTION_RING = (52, 211, 153)
PIECE_BLACK = (30, 41, 59)
PIECE_WHITE = (248, 250, 252)
PIECE_OUTLINE = (100, 116, 139)

LOG_LEVEL = "INFO"
