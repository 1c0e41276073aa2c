import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core import Controls, Vec2
from match import Match, hit_puck


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def match(clock):
    return Match(Controls("w", "s", "a", "d"), Controls("up", "down", "left", "right"),
                 duration=120, clock=clock)


def step(match, clock, keys=None, dt=1 / 60):
    clock.now += dt
    match.tick(keys or {})


class TestSetup:
    def test_initial_layout(self, match):
        assert (match.red.pos.x, match.red.pos.y) == (200.0, 200.0)
        assert (match.blue.pos.x, match.blue.pos.y) == (600.0, 200.0)
        assert (match.puck.pos.x, match.puck.pos.y) == (400.0, 200.0)
        assert match.left_goal.rect == (10.0, 160.0, 15.0, 80.0)
        assert match.right_goal.rect == (775.0, 160.0, 15.0, 80.0)
        assert match.state == "PLAY"
        assert match.outcome is None
        assert match.result_text() == ""


class TestPlay:
    def test_players_follow_their_own_keys(self, match, clock):
        step(match, clock, {"d": True, "up": True})
        assert match.red.pos.x == pytest.approx(205.0)
        assert match.blue.pos.x == pytest.approx(600.0)
        assert match.blue.pos.y == pytest.approx(195.0)

    def test_hit_overrides_puck_velocity(self, match, clock):
        match.puck.pos = Vec2(225, 200)
        match.puck.vel = Vec2(-3, 7)
        step(match, clock)
        assert match.puck.vel.x == pytest.approx(10 * 0.999)
        assert match.puck.vel.y == pytest.approx(0.0)
        assert match.puck.pos.x == pytest.approx(235.0)

    def test_blue_hit_wins_when_both_touch(self, match, clock):
        match.red.pos = Vec2(380, 200)
        match.blue.pos = Vec2(420, 210)
        match.puck.pos = Vec2(400, 200)
        match.puck.vel = Vec2(0, 0)
        step(match, clock)
        away = Vec2(-20, -10).normalized()
        assert match.puck.vel.x == pytest.approx(10 * 0.999 * away.x)
        assert match.puck.vel.y == pytest.approx(10 * 0.999 * away.y)
        assert match.puck.pos.x == pytest.approx(400 + 10 * away.x)
        assert match.puck.pos.y == pytest.approx(200 + 10 * away.y)

    def test_hit_direction_points_away_from_player(self, match):
        match.puck.pos = Vec2(200, 180)
        hit_puck(match.puck, match.red)
        assert match.puck.vel.x == pytest.approx(0.0, abs=1e-9)
        assert match.puck.vel.y == pytest.approx(-10.0)

    def test_left_goal_scores_for_blue(self, match, clock):
        match.puck.pos = Vec2(17.5, 200)
        match.puck.vel = Vec2(-4, 1)
        step(match, clock)
        assert (match.score.red, match.score.blue) == (0, 1)
        assert (match.puck.pos.x, match.puck.pos.y) == (400.0, 200.0)
        assert (match.puck.vel.x, match.puck.vel.y) == (0.0, 0.0)

    def test_right_goal_scores_for_red(self, match, clock):
        match.puck.pos = Vec2(782.5, 200)
        step(match, clock)
        assert (match.score.red, match.score.blue) == (1, 0)
        assert (match.puck.pos.x, match.puck.pos.y) == (400.0, 200.0)

    def test_puck_shot_into_right_goal(self, match, clock):
        match.puck.pos = Vec2(700, 200)
        match.puck.vel = Vec2(10, 0)
        for _ in range(20):
            step(match, clock)
        assert match.score.red == 1
        assert match.score.blue == 0


class TestGameOver:
    def test_timer_advances_once_per_tick(self, clock):
        match = Match(Controls("w", "s", "a", "d"), Controls("up", "down", "left", "right"),
                      duration=3, clock=clock)
        step(match, clock, dt=1)
        step(match, clock, dt=1)
        assert match.state == "PLAY"
        assert match.timer.time_left == pytest.approx(1.0)
        step(match, clock, dt=1)
        assert match.state == "OVER"
        assert match.ticks == 2

    def test_frozen_after_expiry(self, match, clock):
        match.score.red_scored()
        match.score.red_scored()
        match.score.blue_scored()
        step(match, clock, dt=121)
        assert match.state == "OVER"
        assert match.outcome == "RED"
        assert match.result_text() == "Red Wins!"

        match.puck.pos = Vec2(17.5, 200)
        match.puck.vel = Vec2(5, 5)
        red_before = (match.red.pos.x, match.red.pos.y)
        for _ in range(10):
            step(match, clock, {"d": True, "s": True, "left": True})
        assert (match.red.pos.x, match.red.pos.y) == red_before
        assert (match.blue.pos.x, match.blue.pos.y) == (600.0, 200.0)
        assert (match.puck.pos.x, match.puck.pos.y) == (17.5, 200.0)
        assert (match.puck.vel.x, match.puck.vel.y) == (5.0, 5.0)
        assert (match.score.red, match.score.blue) == (2, 1)
        assert match.outcome == "RED"
        assert match.timer.time_left == 0

    @pytest.mark.parametrize("red, blue, outcome, text", [
        (0, 0, "TIE", "It's a Tie!"),
        (1, 3, "BLUE", "Blue Wins!"),
    ])
    def test_outcome(self, match, clock, red, blue, outcome, text):
        match.score.red, match.score.blue = red, blue
        step(match, clock, dt=500)
        assert match.outcome == outcome
        assert match.result_text() == text
