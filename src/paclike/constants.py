"""Game constants and tunables."""

from __future__ import annotations

from typing import Final

GAME_TITLE: Final[str] = "paclike"

# Grid
GRID_W: Final[int] = 28
GRID_H: Final[int] = 31
TUNNEL_ROW: Final[int] = 14

# Tile kinds
WALL: Final[int] = 0
OPEN: Final[int] = 1
PICKUP: Final[int] = 2
POWER_PICKUP: Final[int] = 3
TELEPORTER: Final[int] = 4

TILE_SYMBOLS: Final[dict[str, int]] = {
    "#": WALL,
    " ": OPEN,
    ".": PICKUP,
    "*": POWER_PICKUP,
}

# Headings, in the order the AI enumerates them: up, down, left, right
UP: Final[tuple[int, int]] = (0, -1)
DOWN: Final[tuple[int, int]] = (0, 1)
LEFT: Final[tuple[int, int]] = (-1, 0)
RIGHT: Final[tuple[int, int]] = (1, 0)
STOP: Final[tuple[int, int]] = (0, 0)
DIRECTIONS: Final[tuple[tuple[int, int], ...]] = (UP, DOWN, LEFT, RIGHT)

# Player
PLAYER_START_X: Final[int] = 13
PLAYER_START_Y: Final[int] = 23
PLAYER_MOVE_SUBFRAMES: Final[int] = 5

# Ghosts
GHOST_SPAWNS: Final[tuple[tuple[int, int], ...]] = ((13, 13), (14, 13), (12, 13), (15, 13))
GHOST_START_HEADING: Final[tuple[int, int]] = UP
GHOST_MOVE_SUBFRAMES: Final[int] = 6
GHOST_THINK_INTERVAL: Final[int] = 8
MAX_GHOSTS: Final[int] = 4

# Flee weights
FLEE_AWAY_PRIORITY: Final[int] = 10
FLEE_OTHER_PRIORITY: Final[int] = 1

# Scoring
SCORE_PELLET: Final[int] = 10
SCORE_POWER_PELLET: Final[int] = 50
SCORE_GHOST: Final[tuple[int, ...]] = (200, 400, 800, 1600)

POWER_PELLET_DURATION: Final[int] = 900
POWER_PELLET_FLASH_START: Final[int] = 120

# Presentation cadences, in frames
POWER_PELLET_FLASH_SPEED: Final[int] = 15
GHOST_FLASH_SPEED: Final[int] = 10

# Sequence generator
RNG_SEED: Final[int] = 0xACE1
RNG_TAPS: Final[int] = 0xB400

# Loop
FPS: Final[int] = 60
DT: Final[float] = 1.0 / FPS
MAX_TIME_STEP: Final[float] = 0.25

# Display
TILE: Final[int] = 6
SCORE_AREA: Final[int] = 30
WINDOW_SCALE: Final[int] = 4
VIEW_W: Final[int] = GRID_W * TILE
VIEW_H: Final[int] = GRID_H * TILE

COLOR_BG: Final[tuple[int, int, int]] = (0, 0, 0)
COLOR_WALL: Final[tuple[int, int, int]] = (33, 33, 222)
COLOR_PELLET: Final[tuple[int, int, int]] = (255, 184, 151)
COLOR_TELEPORTER: Final[tuple[int, int, int]] = (0, 160, 80)
COLOR_PLAYER: Final[tuple[int, int, int]] = (255, 255, 0)
COLOR_GHOSTS: Final[tuple[tuple[int, int, int], ...]] = (
    (255, 0, 0),
    (255, 184, 255),
    (0, 255, 255),
    (255, 184, 82),
)
COLOR_GHOST_VULNERABLE: Final[tuple[int, int, int]] = (0, 100, 255)
COLOR_GHOST_FLASH: Final[tuple[int, int, int]] = (255, 255, 255)
COLOR_TEXT: Final[tuple[int, int, int]] = (255, 255, 255)
COLOR_DEAD: Final[tuple[int, int, int]] = (255, 0, 0)

# Maze 1: original layout
MAZE_1: Final[tuple[str, ...]] = (
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#*####.#####.##.#####.####*#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "#####..##### ## #####..#####",
    "#####.##            ##.#####",
    "#......# ### ## ### #......#",
    "######.# #        # #.######",
    "     #.# #  ####  # #.#     ",
    "######.# #        # #.######",
    "#......# ########## #......#",
    "#####.##            ##.#####",
    "#####..##### ## #####..#####",
    "######.##### ## #####.######",
    "#......##....##....##......#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#...##................##...#",
    "###.##.####.##.####.##.###.#",
    "#*..   ####.##.####   ..*..#",
    "###.##.####.##.####.##.###.#",
    "#...##................##...#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
)

# Maze 2: simpler layout with paired teleporters
MAZE_2: Final[tuple[str, ...]] = (
    "############1###############",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#*####.#####.##.#####.####*#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "#####..##### ## #####..#####",
    "#####.##            ##.#####",
    "#......#            #......#",
    "## ###.#            #.######",
    "2    #.#            #.#    2",
    "######.#            #.#### #",
    "#......#            #......#",
    "#####.##            ##.#####",
    "#####..##### ## #####..#####",
    "######.##### ## #####.######",
    "#......##....##....##......#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#...##................##...#",
    "###.##.####.##.####.######.#",
    "#*..   ####.##.####   ..*..#",
    "###.##.####.##.####.######.#",
    "#...##................##...#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############1###############",
)
