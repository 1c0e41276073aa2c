import pygame
from config import (
    W, H, WHITE, BLACK, RED, BLUE, NAVY, NHL_RED, NET, PANEL,
    CORNER_RADIUS, BLUE_LINE_DISTANCE, CENTER_CIRCLE_RADIUS, LINE_WIDTH,
)
from core import format_clock


def draw_goal(surf, goal, color=NHL_RED):
    x, y, w, h = goal.rect
    net = pygame.Surface((int(w), int(h)), pygame.SRCALPHA)
    net.fill(NET)
    surf.blit(net, (x, y))
    front = goal.posts["front"]
    pygame.draw.line(surf, color, (x, goal.posts["top"]), (x + w, goal.posts["top"]), 3)
    pygame.draw.line(surf, color, (x, goal.posts["bottom"]), (x + w, goal.posts["bottom"]), 3)
    pygame.draw.line(surf, color, (front, goal.posts["top"]), (front, goal.posts["bottom"]), 3)


def draw_rink(surf, goals=()):
    surf.fill(WHITE)
    cx, cy = W // 2, H // 2

    pygame.draw.line(surf, NAVY, (cx - BLUE_LINE_DISTANCE, 0), (cx - BLUE_LINE_DISTANCE, H), 4)
    pygame.draw.line(surf, NAVY, (cx + BLUE_LINE_DISTANCE, 0), (cx + BLUE_LINE_DISTANCE, H), 4)
    pygame.draw.line(surf, NHL_RED, (cx, 0), (cx, H), LINE_WIDTH)
    pygame.draw.circle(surf, NAVY, (cx, cy), CENTER_CIRCLE_RADIUS, 4)

    pygame.draw.rect(surf, NAVY, (0, 0, W, H), 4, border_radius=CORNER_RADIUS)

    for g in goals:
        draw_goal(surf, g)


def draw_body(surf, body):
    pygame.draw.circle(surf, body.color, (int(body.pos.x), int(body.pos.y)), int(body.r))


def draw_scoreboard(surf, font, score):
    panel = pygame.Surface((200, 40), pygame.SRCALPHA)
    panel.fill(PANEL)
    surf.blit(panel, (W // 2 - 100, 10))
    red_s = font.render(f"{score.red}", True, RED)
    dash = font.render("-", True, BLACK)
    blue_s = font.render(f"{score.blue}", True, BLUE)
    surf.blit(red_s, red_s.get_rect(center=(W // 2 - 40, 30)))
    surf.blit(dash, dash.get_rect(center=(W // 2, 30)))
    surf.blit(blue_s, blue_s.get_rect(center=(W // 2 + 40, 30)))


def draw_clock(surf, font, timer):
    t = font.render(format_clock(timer.time_left), True, BLACK)
    surf.blit(t, t.get_rect(center=(W // 2, 70)))


def draw_game_over(surf, big, font, text):
    t = big.render("Game Over!", True, BLACK)
    surf.blit(t, t.get_rect(center=(W // 2, H // 2)))
    r = font.render(text, True, BLACK)
    surf.blit(r, r.get_rect(center=(W // 2, H // 2 + 50)))


def draw_match(surf, fonts, match):
    font, big = fonts
    draw_rink(surf, (match.left_goal, match.right_goal))
    draw_scoreboard(surf, font, match.score)
    draw_clock(surf, font, match.timer)
    if match.state == "PLAY":
        for p in match.players:
            draw_body(surf, p)
        draw_body(surf, match.puck)
    else:
        draw_game_over(surf, big, font, match.result_text())
