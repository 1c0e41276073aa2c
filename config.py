W, H = 800, 400

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (220, 30, 40)
BLUE = (30, 70, 220)
NAVY = (0, 48, 135)
NHL_RED = (200, 16, 46)
NET = (200, 200, 200, 77)
PANEL = (255, 255, 255, 204)

CORNER_RADIUS = 40
FACEOFF_CIRCLE_RADIUS = 30
BLUE_LINE_DISTANCE = 235
LINE_WIDTH = 2
CENTER_CIRCLE_RADIUS = 30
GAME_DURATION = 120.0

PLAYER_R = 20
PLAYER_SPEED = 5.0

PUCK_R = 10
FRICTION = 0.999
RESTITUTION_WALL = 0.8
HIT_SPEED = 10.0

GOAL_W = 15
GOAL_H = 80
LEFT_GOAL_POS = (10, H / 2 - GOAL_H / 2)
RIGHT_GOAL_POS = (W - 25, H / 2 - GOAL_H / 2)

RED_START = (200, H / 2)
BLUE_START = (600, H / 2)

# pygame key names, resolved in main.py
RED_KEYS = {"up": "w", "down": "s", "left": "a", "right": "d"}
BLUE_KEYS = {"up": "up", "down": "down", "left": "left", "right": "right"}

FPS = 60
