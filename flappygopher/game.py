"""Game rules of Flappy Gopher: bird physics, pipes, scoring and screens."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from flappygopher.pad import PadState
from flappygopher.rng import Random

# Game settings.
JUMP_TARGET_OFFSET = 50
JUMPING_SPEED = 5
FALLING_SPEED = 3
HORIZONTAL_SPEED = 5
WAIT_FRAMES_AFTER_GAME_OVER = 20
WAIT_FRAMES_ON_MENU = 20

# Pipe settings.
PIPE_BODY_X = 99
PIPE_BODY_WIDTH = 75
PIPE_HEAD_X = 0
PIPE_HEAD_WIDTH = 95
PIPE_HEAD_OFFSET = 10
PIPE_HEIGHT = 64
PIPE_SECTIONS = 448 // PIPE_HEIGHT
PIPE_PAST_SCREEN_OFFSET = 400
HOW_MANY_PIPES = 6

# Texture sizes the rules depend on.
BIRD_WIDTH = 128
BIRD_HEIGHT = 53
COLLISION_MARGIN = 10
START_BIRD_Y = 100


class GameState(enum.Enum):
    """The screen the game is on."""

    MENU = enum.auto()
    IN_GAME = enum.auto()
    GAME_OVER = enum.auto()


class SegmentKind(enum.Enum):
    """How one section of a pipe is drawn."""

    BODY = enum.auto()
    BOTTOM_HEAD = enum.auto()
    TOP_HEAD = enum.auto()


@dataclass
class Pipe:
    """A pipe column with a hole spanning sections hole_start..hole_end."""

    x: int
    hole_start: int
    hole_end: int


def pipe_segments(pipe: Pipe) -> Iterator[tuple[int, SegmentKind]]:
    """Yield (section, kind) for every drawn section of the pipe, top to bottom."""
    for section in range(PIPE_SECTIONS):
        if pipe.hole_start <= section <= pipe.hole_end:
            continue
        if section == pipe.hole_end + 1 and pipe.hole_end < PIPE_SECTIONS - 1:
            yield section, SegmentKind.BOTTOM_HEAD
        elif pipe.hole_start > 0 and section == pipe.hole_start - 1:
            yield section, SegmentKind.TOP_HEAD
        else:
            yield section, SegmentKind.BODY


def menu_lines(high_score: int) -> list[str]:
    """Text lines shown under the logo on the menu screen."""
    return [
        "Flappy Gopher",
        "",
        "",
        "Developed by Ricardo",
        "using TinyGo @ PlayStation 2",
        "",
        "",
        "Press [Start] to start",
        "",
        "",
        f"High score: {high_score}",
    ]


def game_over_lines(score: int, high_score: int) -> list[str]:
    """Text lines shown under the banner on the game over screen."""
    return [
        "Game over",
        "Thanks for playing!",
        "",
        "",
        "Press [Start] to restart",
        "",
        "",
        f"Your score: {score}, high score: {high_score}",
    ]


@dataclass
class Game:
    """State of one play session, advanced one frame at a time."""

    width: int
    height: int
    rng: Random = field(default_factory=Random)
    state: GameState = field(default=GameState.MENU, init=False)
    is_going_up: bool = field(default=False, init=False)
    target_y: int = field(default=0, init=False)
    bird_y: int = field(default=0, init=False)
    pipes: list[Pipe] = field(default_factory=list, init=False)
    score: int = field(default=0, init=False)
    high_score: int = field(default=0, init=False)
    _hold_count: int = field(default=0, init=False, repr=False)
    _hold_target: int = field(default=0, init=False, repr=False)

    def handle_input(self, pad: PadState) -> None:
        """React to one reading of the controller."""
        if self.state is GameState.MENU:
            if pad.start:
                self.start()
        elif self.state is GameState.IN_GAME:
            if pad.cross:
                self.is_going_up = True
                self.target_y = max(0, self.bird_y - JUMP_TARGET_OFFSET)
        elif pad.start:
            self.go_to_menu()

    def start(self) -> None:
        """Begin a new round with a fixed first pipe and random ones after it."""
        self.state = GameState.IN_GAME
        self.bird_y = START_BIRD_Y
        self.score = 0
        self.pipes = [Pipe(x=self.height - PIPE_HEAD_X, hole_start=3, hole_end=5)]
        self.pipes.extend(
            self.random_pipe(self.height + PIPE_PAST_SCREEN_OFFSET * i)
            for i in range(1, HOW_MANY_PIPES)
        )

    def update(self) -> None:
        """Advance the bird and the pipes by one frame and check for a crash."""
        if self.state is not GameState.IN_GAME:
            return

        if self.is_going_up:
            self.bird_y = max(0, self.bird_y - JUMPING_SPEED)
        else:
            self.bird_y += FALLING_SPEED
        if self.bird_y <= self.target_y:
            self.is_going_up = False

        respawn_x = self.height + PIPE_PAST_SCREEN_OFFSET * (HOW_MANY_PIPES - 1)
        for index, pipe in enumerate(self.pipes):
            if pipe.x < -PIPE_BODY_WIDTH:
                self.pipes[index] = self.random_pipe(respawn_x)
                self.score += 1
            else:
                pipe.x -= HORIZONTAL_SPEED

        if self.bird_y > self.height:
            self.end()
            return

        for pipe in self.pipes:
            if pipe.x > BIRD_WIDTH // 2:
                continue
            low = pipe.hole_start * PIPE_HEIGHT - COLLISION_MARGIN
            high = pipe.hole_end * PIPE_HEIGHT + COLLISION_MARGIN
            if low <= self.bird_y <= high:
                continue
            self.end()
            return

    def end(self) -> None:
        """Finish the round, keep the best score and hold the screen briefly."""
        self.state = GameState.GAME_OVER
        self._hold_count = 0
        self._hold_target = WAIT_FRAMES_AFTER_GAME_OVER
        self.high_score = max(self.high_score, self.score)

    def go_to_menu(self) -> None:
        """Return to the menu and hold the screen briefly."""
        self.state = GameState.MENU
        self._hold_count = 0
        self._hold_target = WAIT_FRAMES_ON_MENU

    def random_pipe(self, x: int) -> Pipe:
        """Make a pipe at x with a three-section hole at a random height."""
        hole = self.rng.between(1, PIPE_SECTIONS - 1)
        return Pipe(x=x, hole_start=hole - 1, hole_end=hole + 1)

    def hold(self) -> bool:
        """Count one frame of a pending hold; True while the hold lasts."""
        if self._hold_target > 0:
            if self._hold_count < self._hold_target:
                self._hold_count += 1
                return True
            self._hold_count = 0
            self._hold_target = 0
        return False