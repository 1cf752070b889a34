"""
Named constants for the rating formula and the report layout.
"""

# Rating model
K_FACTOR = 32.0
RATING_SCALE = 400.0

# Ladder line: rank, name, rating, game count
RANK_WIDTH = 2
NAME_WIDTH = 30
RATING_WIDTH = 4

# Game line: date, player1 name (right-aligned), player2 name (left-aligned), result
GAME_NAME_WIDTH = 20
DATE_FORMAT = "%02d/%02d/%04d"

WIN = 1.0
DRAW = 0.5

RESULT_WIN = "  1 - 0"
RESULT_DRAW = "0.5 - 0.5"
RESULT_LOSS = "  0 - 1"

SECTION_INDENT = "    "
YAML_HEADER = "---\nlayout: default\n---"

LADDER_HEADING = "Ladder"
GAMES_HEADING = "Games"
