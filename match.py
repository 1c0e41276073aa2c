import math
import time
import logging
from config import (
    W, H, RED, BLUE, HIT_SPEED, LEFT_GOAL_POS, RIGHT_GOAL_POS,
    RED_START, BLUE_START, GAME_DURATION,
)
from core import Player, Puck, Goal, Score, Timer, Controls, circles_overlap

log = logging.getLogger(__name__)

RESULT_TEXT = {
    "RED": "Red Wins!",
    "BLUE": "Blue Wins!",
    "TIE": "It's a Tie!",
}


def hit_puck(puck: Puck, player: Player, speed=HIT_SPEED):
    angle = math.atan2(puck.pos.y - player.pos.y, puck.pos.x - player.pos.x)
    puck.vel.x = math.cos(angle) * speed
    puck.vel.y = math.sin(angle) * speed


class Match:
    """One timed game between the red and the blue player.

    tick() is called once per rendered frame. While the clock runs it moves
    the players, resolves player-puck hits, checks both goals and advances
    the puck, in that order. Once the clock reaches zero the simulation is
    frozen and the outcome is held.
    """

    def __init__(self, red_controls: Controls, blue_controls: Controls, duration=GAME_DURATION, clock=time.monotonic):
        self.width, self.height = W, H
        self.red = Player(*RED_START, RED, red_controls)
        self.blue = Player(*BLUE_START, BLUE, blue_controls)
        self.players = (self.red, self.blue)
        self.puck = Puck(W / 2, H / 2)
        self.left_goal = Goal(*LEFT_GOAL_POS, True)
        self.right_goal = Goal(*RIGHT_GOAL_POS, False)
        self.score = Score()
        self.timer = Timer(duration, clock=clock)
        self.state = "PLAY"
        self.outcome = None
        self.ticks = 0

    def reset_puck(self):
        self.puck.reset(self.width / 2, self.height / 2)

    def tick(self, keys):
        self.timer.update()

        if self.timer.is_expired():
            if self.state != "OVER":
                self.state = "OVER"
                self.outcome = self.score.winner()
                log.info("match over after %d ticks: red %d - blue %d (%s)",
                         self.ticks, self.score.red, self.score.blue, self.outcome)
            return

        self.ticks += 1
        pressed = dict(keys)
        for p in self.players:
            p.move(pressed)

        for p in self.players:
            if circles_overlap(p, self.puck):
                hit_puck(self.puck, p)

        if self.left_goal.check_goal(self.puck):
            self.score.blue_scored()
            log.info("blue scores: red %d - blue %d", self.score.red, self.score.blue)
            self.reset_puck()
        if self.right_goal.check_goal(self.puck):
            self.score.red_scored()
            log.info("red scores: red %d - blue %d", self.score.red, self.score.blue)
            self.reset_puck()

        self.puck.move()

    def result_text(self):
        if self.outcome is None:
            return ""
        return RESULT_TEXT[self.outcome]
