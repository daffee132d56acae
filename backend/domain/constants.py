"""
Game constants for the snake simulation.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Screen coordinates: row 0 is the top of the board
DIRECTION_DELTAS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Round start
START_HEAD = (10, 10)
START_FOOD = (5, 5)
START_DIRECTION = RIGHT

# Tick outcomes
MOVED = "moved"
ATE = "ate"
WALL = "wall"
SELF = "self"
BOARD_FULL = "board_full"
NOOP = "noop"

# Round results
WON = "won"
LOST = "lost"
