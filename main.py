import os
import logging
import pygame
from config import W, H, FPS, RED_KEYS, BLUE_KEYS
from core import Controls
from match import Match
from ui import draw_match

log = logging.getLogger(__name__)


def controls_from_names(names):
    return Controls(**{k: pygame.key.key_code(v) for k, v in names.items()})


def main():
    logging.basicConfig(
        level=os.environ.get("RINK_DUEL_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()

    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption("Rink Duel")

    clock = pygame.time.Clock()
    font = pygame.font.SysFont("arial", 32)
    big = pygame.font.SysFont("arial", 48)

    match = Match(controls_from_names(RED_KEYS), controls_from_names(BLUE_KEYS))
    log.info("match started: %.0fs on the clock", match.timer.duration)

    keys = {}
    running = True
    while running:
        clock.tick(FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                keys[e.key] = True
            elif e.type == pygame.KEYUP:
                keys[e.key] = False

        match.tick(keys)
        draw_match(screen, (font, big), match)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
