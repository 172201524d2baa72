# -----------------------------------------------------------------------------
# TEXTURES
# -----------------------------------------------------------------------------

CROSS_TEXTURE = "TicTacToe:cross"
CROSSED_CROSS_TEXTURE = "TicTacToe:crossedCross"
CIRCLE_TEXTURE = "TicTacToe:circle"
CROSSED_CIRCLE_TEXTURE = "TicTacToe:crossedCircle"

TEXTURE_SIZE = 96              # px, square
TEXTURE_FILE_SUFFIX = ".png"   # <assets_dir>/<name><suffix>

PLAYER_COLOR = "#8acaff"
OPPONENT_COLOR = "#ff8a8a"
STRIKE_COLOR = "#ffd700"       # line drawn over crossed markers

# -----------------------------------------------------------------------------
# SCREEN
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
PLAYER_SCORE_FORMAT = "Your Score: {}"
OPPONENT_SCORE_FORMAT = "CPU Score:   {}"
REMATCH_TEXT = "Rematch"
CELL_BUTTON_SIZE = 110

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
