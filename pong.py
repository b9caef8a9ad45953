"""
Pong: you (left paddle, mouse or arrow keys) against the computer.

Usage:
- python pong.py                       # play in a window
- python pong.py --headless --ticks 600 --seed 1 --snapshot frame.png

Keys: arrows move, P pauses, R resets the score, Esc quits.
"""
import argparse
import logging
import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame

from pong_config import DIM, FONT_NAME, SCORE_COLOR, GameConfig
from pong_loop import FrameDriver, ManualTimer
from pong_render import ArrayCanvas
from pong_state import new_game

logger = logging.getLogger("pong")


class PygameCanvas:
    def __init__(self, surface):
        self.surface = surface

    def clear(self):
        self.surface.fill((0, 0, 0))

    def fill_rect(self, x, y, w, h, color):
        pygame.draw.rect(self.surface, color, pygame.Rect(round(x), round(y), round(w), round(h)))

    def fill_circle(self, x, y, r, color):
        pygame.draw.circle(self.surface, color, (round(x), round(y)), round(r))

    def stroke_circle(self, x, y, r, color):
        pygame.draw.circle(self.surface, color, (round(x), round(y)), round(r), width=1)


class PygameTimer:
    def __init__(self, fps):
        self.clock = pygame.time.Clock()
        self.fps = fps

    def now(self):
        return pygame.time.get_ticks()

    def wait(self):
        self.clock.tick(self.fps)


class PygameScoreboard:
    """Score overlay; text is re-rendered only when the score changes."""

    def __init__(self):
        self.font = pygame.font.SysFont(FONT_NAME, 54, bold=True)
        self.font_small = pygame.font.SysFont(FONT_NAME, 20)
        self.player_text = None
        self.computer_text = None
        self.info_text = self.font_small.render("Arrows/mouse: move | P: pause | R: reset", True, DIM)

    def show(self, player, computer):
        self.player_text = self.font.render(str(player), True, SCORE_COLOR)
        self.computer_text = self.font.render(str(computer), True, SCORE_COLOR)

    def draw(self, screen, paused=False):
        w = screen.get_width()
        if self.player_text is not None:
            screen.blit(self.player_text, (w // 4 - self.player_text.get_width() // 2, 20))
            screen.blit(self.computer_text, (3 * w // 4 - self.computer_text.get_width() // 2, 20))
        screen.blit(self.info_text, (20, screen.get_height() - 28))
        if paused:
            text = self.font.render("PAUSED", True, SCORE_COLOR)
            screen.blit(text, (w // 2 - text.get_width() // 2, screen.get_height() // 2 - text.get_height() // 2))


class LogScoreboard:
    def show(self, player, computer):
        logger.info("score %d - %d", player, computer)


def present(window, surface, scoreboard, paused=False):
    """Scale the rendered frame into the window and draw the overlay on top.

    The overlay never touches ``surface``, which keeps the last rendered frame
    while paused.
    """
    if window.get_size() == surface.get_size():
        window.blit(surface, (0, 0))
    else:
        window.blit(pygame.transform.smoothscale(surface, window.get_size()), (0, 0))
    scoreboard.draw(window, paused)
    pygame.display.flip()


def game(cfg, seed=None):
    pygame.init()
    pygame.display.set_caption("Pong")
    window = pygame.display.set_mode((cfg.width, cfg.height), pygame.RESIZABLE)
    surface = pygame.Surface((cfg.width, cfg.height))

    state = new_game(cfg)
    scoreboard = PygameScoreboard()
    driver = FrameDriver(state, PygameCanvas(surface), np.random.default_rng(seed),
                         PygameTimer(cfg.fps), scoreboard)
    driver.start()
    logger.info("starting %dx%d at %d fps", cfg.width, cfg.height, cfg.fps)

    def pump(driver):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit(0)
                driver.key_down(pygame.key.name(event.key))
            elif event.type == pygame.KEYUP:
                driver.key_up(pygame.key.name(event.key))
            elif event.type == pygame.MOUSEMOTION:
                driver.pointer_move(event.pos[1], 0, window.get_height())

    driver.run(before_frame=pump, after_frame=lambda d: present(window, surface, scoreboard, d.paused))


def run_headless(cfg, ticks, seed=None, snapshot=None):
    state = new_game(cfg)
    canvas = ArrayCanvas(cfg.width, cfg.height)
    driver = FrameDriver(state, canvas, np.random.default_rng(seed), ManualTimer(cfg.frame_ms), LogScoreboard())
    driver.start()
    driver.run(frames=ticks)
    logger.info("%d ticks: player %d - %d computer", state.run.ticks, state.score.player, state.score.computer)
    if snapshot:
        # surfarray wants (W, H, 3)
        pygame.image.save(pygame.surfarray.make_surface(canvas.to_rgb().swapaxes(0, 1)), snapshot)
        logger.info("saved frame to %s", snapshot)
    return state


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pong against the computer")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--headless", action="store_true", help="simulate without a window")
    parser.add_argument("--ticks", type=int, default=3600, help="frames to simulate with --headless")
    parser.add_argument("--snapshot", default=None, help="save the last headless frame to this image file")
    parser.add_argument("--log-level", default="INFO", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        cfg = GameConfig(width=args.width, height=args.height, fps=args.fps)
    except ValueError as e:
        parser.error(str(e))

    if args.headless:
        run_headless(cfg, args.ticks, args.seed, args.snapshot)
    else:
        game(cfg, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
