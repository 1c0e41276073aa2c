import math
import time
import logging
from dataclasses import dataclass
from config import (
    W, H, CORNER_RADIUS, PLAYER_R, PLAYER_SPEED, PUCK_R, FRICTION,
    RESTITUTION_WALL, GOAL_W, GOAL_H, GAME_DURATION, BLACK,
)

log = logging.getLogger(__name__)


class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __sub__(self, o): return Vec2(self.x - o.x, self.y - o.y)
    def __mul__(self, k): return Vec2(self.x * k, self.y * k)
    def __repr__(self): return f"Vec2({self.x}, {self.y})"
    def length(self): return math.hypot(self.x, self.y)
    def normalized(self):
        l = self.length()
        if l <= 1e-9:
            return Vec2(0, 0)
        return Vec2(self.x / l, self.y / l)
    def dot(self, o): return self.x * o.x + self.y * o.y


def clamp(v, a, b):
    return max(a, min(b, v))


def circles_overlap(a, b):
    return (a.pos - b.pos).length() < a.r + b.r


@dataclass(frozen=True)
class Controls:
    up: object
    down: object
    left: object
    right: object


class Player:
    def __init__(self, x, y, color, controls: Controls, radius=PLAYER_R, speed=PLAYER_SPEED, field=(W, H)):
        if radius <= 0:
            raise ValueError(f"player radius must be positive, got {radius}")
        if speed <= 0:
            raise ValueError(f"player speed must be positive, got {speed}")
        self.pos = Vec2(x, y)
        self.r = float(radius)
        self.speed = float(speed)
        self.color = color
        self.controls = controls
        self.field = field

    def move(self, keys):
        c = self.controls
        if keys.get(c.up, False):
            self.pos.y -= self.speed
        if keys.get(c.down, False):
            self.pos.y += self.speed
        if keys.get(c.left, False):
            self.pos.x -= self.speed
        if keys.get(c.right, False):
            self.pos.x += self.speed

        w, h = self.field
        self.pos.x = clamp(self.pos.x, self.r, w - self.r)
        self.pos.y = clamp(self.pos.y, self.r, h - self.r)


class Puck:
    color = BLACK

    def __init__(self, x, y, radius=PUCK_R, friction=FRICTION, restitution=RESTITUTION_WALL,
                 corner_radius=CORNER_RADIUS, field=(W, H)):
        if radius <= 0:
            raise ValueError(f"puck radius must be positive, got {radius}")
        if not 0.0 < friction < 1.0:
            raise ValueError(f"friction must be in (0, 1), got {friction}")
        if not 0.0 < restitution <= 1.0:
            raise ValueError(f"restitution must be in (0, 1], got {restitution}")
        if radius >= corner_radius:
            log.warning("puck radius %s >= corner radius %s, corner bounces are degenerate",
                        radius, corner_radius)
        self.pos = Vec2(x, y)
        self.vel = Vec2(0, 0)
        self.r = float(radius)
        self.friction = float(friction)
        self.restitution = float(restitution)
        self.corner_radius = float(corner_radius)
        self.field = field

    def reset(self, x, y):
        self.pos.x = float(x)
        self.pos.y = float(y)
        self.vel.x = 0.0
        self.vel.y = 0.0

    def move(self):
        self.pos.x += self.vel.x
        self.pos.y += self.vel.y
        self.vel.x *= self.friction
        self.vel.y *= self.friction

        self.collide_corners()
        self.collide_walls()

    def corners(self):
        w, h = self.field
        cr = self.corner_radius
        return [
            Vec2(cr, cr),
            Vec2(cr, h - cr),
            Vec2(w - cr, cr),
            Vec2(w - cr, h - cr),
        ]

    def in_corner_region(self, corner: Vec2):
        w, h = self.field
        cr = self.corner_radius
        in_x = (corner.x <= cr and self.pos.x <= cr) or (corner.x >= w - cr and self.pos.x >= w - cr)
        in_y = (corner.y <= cr and self.pos.y <= cr) or (corner.y >= h - cr and self.pos.y >= h - cr)
        return in_x and in_y

    def collide_corners(self):
        reach = self.corner_radius - self.r
        for corner in self.corners():
            if not self.in_corner_region(corner):
                continue
            delta = self.pos - corner
            dist = delta.length()
            if dist <= 1e-9 or dist >= reach:
                continue
            n = delta * (1.0 / dist)
            self.pos = corner + n * reach
            d = self.vel.dot(n)
            self.vel = (self.vel - n * (2.0 * d)) * self.restitution

    def collide_walls(self):
        w, h = self.field
        if self.pos.x - self.r < 0:
            self.pos.x = self.r
            self.vel.x *= -self.restitution
        elif self.pos.x + self.r > w:
            self.pos.x = w - self.r
            self.vel.x *= -self.restitution

        if self.pos.y - self.r < 0:
            self.pos.y = self.r
            self.vel.y *= -self.restitution
        elif self.pos.y + self.r > h:
            self.pos.y = h - self.r
            self.vel.y *= -self.restitution


class Goal:
    def __init__(self, x, y, is_left, width=GOAL_W, height=GOAL_H):
        if width <= 0 or height <= 0:
            raise ValueError(f"goal size must be positive, got {width}x{height}")
        self.x = float(x)
        self.y = float(y)
        self.w = float(width)
        self.h = float(height)
        self.is_left = is_left
        self.posts = {
            "top": self.y,
            "bottom": self.y + self.h,
            "front": self.x if is_left else self.x + self.w,
            "back": self.x + self.w if is_left else self.x,
        }

    @property
    def rect(self):
        return (self.x, self.y, self.w, self.h)

    def check_goal(self, puck) -> bool:
        return (self.x < puck.pos.x < self.x + self.w
                and self.y < puck.pos.y < self.y + self.h)


class Score:
    def __init__(self):
        self.red = 0
        self.blue = 0

    def red_scored(self):
        self.red += 1

    def blue_scored(self):
        self.blue += 1

    def winner(self):
        if self.red > self.blue:
            return "RED"
        if self.blue > self.red:
            return "BLUE"
        return "TIE"


class Timer:
    """Countdown driven by wall-clock deltas between successive update() calls."""

    def __init__(self, duration=GAME_DURATION, clock=time.monotonic):
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        self.duration = float(duration)
        self.time_left = float(duration)
        self.clock = clock
        self.last_time = clock()

    def update(self):
        now = self.clock()
        dt = now - self.last_time
        self.last_time = now
        if self.time_left > 0:
            self.time_left = max(0.0, self.time_left - dt)

    def is_expired(self):
        return self.time_left == 0


def format_clock(seconds):
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"
