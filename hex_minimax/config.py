"""
Configuration constants and settings for the Hex minimax engine.

Per-search knobs live in hex_minimax.engine.minimax_search.SearchConfig; this
module only holds the project-wide defaults those knobs start from.
"""

from hex_minimax.enums import Player

# Global configuration settings

# Verbose logging levels (used by scripts/ to pick a logging level):
# 0: Critical issues and errors
# 1: Important info and warnings
# 2: Detailed info
# 3: Very detailed debug info
VERBOSE_LEVEL = 1

# Board
BOARD_SIZE = 5
# Columns are named by single letters a-z in TRMPH records and on the display
MAX_BOARD_SIZE = 26

# Turn order and sides
FIRST_PLAYER = Player.BLUE
DEFAULT_AUTOMATED_PLAYER = Player.RED

# Search defaults
DEFAULT_SEARCH_DEPTH = 1
DEFAULT_USE_PRUNING = False
# Depth 4 on a 5x5 board is already a few hundred thousand nodes without pruning
MAX_RECOMMENDED_DEPTH = 4

# Game record format
TRMPH_PREFIX_TEMPLATE = "#{board_size},"
