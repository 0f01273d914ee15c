"""Window, drawing and main loop of Flappy Gopher."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Sequence
from typing import Any, Protocol

import pygame

from flappygopher.game import (
    BIRD_HEIGHT,
    BIRD_WIDTH,
    PIPE_BODY_WIDTH,
    PIPE_HEAD_OFFSET,
    PIPE_HEAD_WIDTH,
    PIPE_HEIGHT,
    Game,
    GameState,
    SegmentKind,
    game_over_lines,
    menu_lines,
    pipe_segments,
)
from flappygopher.pad import PadState
from flappygopher.regs import gs_setreg_rgbaq, unpack_rgbaq
from flappygopher.rng import Random

log = logging.getLogger(__name__)

CLOCKS_PER_SEC = 1_000_000
FRAME_RATE = 60
DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 448

LINE_SPACING = 14
SCORE_Y = 16
GOPHER_SIZE = (256, 256)
BANNER_SIZE = (400, 267)


def _color(register: int) -> pygame.Color:
    r, g, b, _a, _q = unpack_rgbaq(register)
    return pygame.Color(r, g, b)


BACKGROUND = _color(gs_setreg_rgbaq(0x00, 0x00, 0x00, 0x80, 0x00))
TEXT_COLOR = _color(gs_setreg_rgbaq(0xFF, 0xFF, 0xFF, 0x80, 0x00))
GOPHER_COLOR = pygame.Color(0x74, 0xC7, 0xE0)
BANNER_COLOR = pygame.Color(0xC0, 0x30, 0x30)
BIRD_COLOR = pygame.Color(0xF0, 0xC0, 0x20)
BIRD_UP_COLOR = pygame.Color(0xF0, 0x80, 0x20)
PIPE_BODY_COLOR = pygame.Color(0x40, 0xA0, 0x40)
PIPE_HEAD_COLOR = pygame.Color(0x30, 0x80, 0x30)

_KEYS = {
    "up": (pygame.K_UP,),
    "down": (pygame.K_DOWN,),
    "left": (pygame.K_LEFT,),
    "right": (pygame.K_RIGHT,),
    "l1": (pygame.K_q,),
    "l2": (pygame.K_1,),
    "r1": (pygame.K_e,),
    "r2": (pygame.K_3,),
    "triangle": (pygame.K_w,),
    "circle": (pygame.K_s,),
    "cross": (pygame.K_SPACE, pygame.K_x),
    "square": (pygame.K_a,),
    "select": (pygame.K_TAB,),
    "start": (pygame.K_RETURN, pygame.K_KP_ENTER),
}


class _Font(Protocol):
    def render(self, text: str, antialias: bool, color: Any) -> pygame.Surface: ...


def fps_from_frame_time(frame_time: int) -> int:
    """Frames per second for a frame that took frame_time clock ticks."""
    if frame_time <= 0:
        return 0
    return CLOCKS_PER_SEC // frame_time


def keys_to_pad(pressed: Any) -> PadState:
    """Map the keyboard's pressed keys onto the controller's buttons."""
    return PadState(
        **{name: any(pressed[key] for key in keys) for name, keys in _KEYS.items()}
    )


def _now() -> int:
    """Current time in clock ticks."""
    return time.perf_counter_ns() // (1_000_000_000 // CLOCKS_PER_SEC)


class Renderer:
    """Draws the game's screens onto a surface."""

    def __init__(self, surface: pygame.Surface, font: _Font) -> None:
        self.surface = surface
        self.font = font

    def draw(self, game: Game, fps: int) -> None:
        """Draw one whole frame for the game's current screen."""
        self.surface.fill(BACKGROUND)
        if game.state is GameState.MENU:
            self._draw_menu(game)
        elif game.state is GameState.IN_GAME:
            self._draw_in_game(game)
        else:
            self._draw_game_over(game)
        self._text(f"FPS: {fps}", 0, 0)

    def _text(self, line: str, x: int, y: int) -> None:
        self.surface.blit(self.font.render(line, True, TEXT_COLOR), (x, y))

    def _draw_logo(self, game: Game, size: tuple[int, int], color: pygame.Color) -> None:
        width, height = size
        center_x = (game.width - width) // 2
        pygame.draw.rect(self.surface, color, pygame.Rect(center_x, 0, width, height))

    def _draw_lines(self, lines: Sequence[str], top: int) -> None:
        for number, line in enumerate(lines, start=1):
            self._text(line, 0, top + number * LINE_SPACING)

    def _draw_menu(self, game: Game) -> None:
        self._draw_logo(game, GOPHER_SIZE, GOPHER_COLOR)
        self._draw_lines(menu_lines(game.high_score), GOPHER_SIZE[1])

    def _draw_game_over(self, game: Game) -> None:
        self._draw_logo(game, BANNER_SIZE, BANNER_COLOR)
        self._draw_lines(game_over_lines(game.score, game.high_score), BANNER_SIZE[1])

    def _draw_in_game(self, game: Game) -> None:
        bird_color = BIRD_UP_COLOR if game.is_going_up else BIRD_COLOR
        pygame.draw.rect(
            self.surface,
            bird_color,
            pygame.Rect(0, game.bird_y, BIRD_WIDTH // 2, BIRD_HEIGHT),
        )

        for pipe in game.pipes:
            if pipe.x < -PIPE_BODY_WIDTH or pipe.x > game.width:
                continue
            for section, kind in pipe_segments(pipe):
                top = section * PIPE_HEIGHT
                if kind is SegmentKind.BODY:
                    rect = pygame.Rect(pipe.x, top, PIPE_BODY_WIDTH, PIPE_HEIGHT)
                    color = PIPE_BODY_COLOR
                else:
                    rect = pygame.Rect(
                        pipe.x - PIPE_HEAD_OFFSET, top, PIPE_HEAD_WIDTH, PIPE_HEIGHT
                    )
                    color = PIPE_HEAD_COLOR
                pygame.draw.rect(self.surface, color, rect)

        self._text(f"Score: {game.score}", 0, SCORE_Y)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappygopher", description="Flappy Gopher.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    parser.add_argument("--verbose", action="store_true", help="log start-up steps")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the game until it is closed."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    log.debug("Initializing graphics")
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Flappy Gopher")

        log.debug("Loading fonts")
        renderer = Renderer(screen, pygame.font.Font(None, 18))

        log.debug("Initializing random seed")
        game = Game(args.width, args.height, Random(args.seed))
        clock = pygame.time.Clock()
        last_frame_time = 0
        frames = 0

        log.debug("Game start")
        while args.frames is None or frames < args.frames:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    return 0

            start = _now()
            game.handle_input(keys_to_pad(pygame.key.get_pressed()))
            game.update()
            renderer.draw(game, fps_from_frame_time(last_frame_time))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
            frames += 1

            # Holding a screen for a few frames also debounces the buttons.
            if game.hold():
                continue
            last_frame_time = _now() - start
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())