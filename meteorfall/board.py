"""The playing field: spawns asteroids, steps every entity and draws the HUD."""

from __future__ import annotations

import random
import time
from typing import Callable, Optional

from meteorfall.drawing import WHITE, Renderer
from meteorfall.entities import (
    ASTEROID_MAX_SEGMENTS,
    ASTEROID_MIN_SEGMENTS,
    Asteroid,
    Ship,
)
from meteorfall.utils import Vector2, int_to_string, random_between
from meteorfall.window import Text

ASTEROID_MIN_DELAY = 500
ASTEROID_MAX_DELAY = 5000

ASTEROID_MIN_R = 10
ASTEROID_MAX_R = 30

ASTEROID_MIN_SPEED_X = -15
ASTEROID_MAX_SPEED_X = 15

ASTEROID_MIN_SPEED_Y = 20
ASTEROID_MAX_SPEED_Y = 150


def _milliseconds() -> int:
    return int(time.monotonic() * 1000)


class Board:
    """A rectangular field holding the player, bullets and asteroids."""

    def __init__(
        self,
        x,
        y,
        w,
        h,
        window,
        clock: Optional[Callable[[], int]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.window = window
        self.clock = clock if clock is not None else _milliseconds
        self.rng = rng if rng is not None else random.Random()
        self.delta_time = 0.0
        self.last_asteroid = 0
        self.bullets: list = []
        self.asteroids: list[Asteroid] = []
        self.playing = True
        self.player: Optional[Ship] = Ship(400, 300, 50, 50, window.keys, self)
        self.asteroids.append(Asteroid(50, 50, 20, 5, Vector2(0, 4), Vector2(0, 50), self))
        self.asteroid_delay = ASTEROID_MAX_DELAY
        window.add_text(Text(150, 150, 20, 255, 0, 0))

    def draw(self, renderer: Renderer) -> None:
        """Draw the borders, entities, remaining health and score."""
        if self.player is None:
            return
        x, y, w, h = self.x, self.y, self.w, self.h
        renderer.draw_line(x, y, x + w, y, WHITE)
        renderer.draw_line(x, y + h, x + w, y + h, WHITE)
        renderer.draw_line(x, y, x, y + h, WHITE)
        renderer.draw_line(x + w, y, x + w, y + h, WHITE)

        for bullet in self.bullets:
            bullet.draw(renderer)
        for asteroid in self.asteroids:
            asteroid.draw(renderer)

        offset = 0
        for i in range(self.player.health):
            if i % 2 == 0:
                renderer.draw_heart_left(x + 20 + i * 20 + offset, y + 20, 20, 20)
            else:
                renderer.draw_heart_right(x + 18 + i * 20 + offset, y + 20, 20, 20)
                offset += 10

        renderer.draw_text(x + 20, 70, 25, int_to_string(self.player.score), WHITE)
        self.player.draw(renderer)

    def update(self) -> None:
        """Step the player, spawn asteroids, move everything and drop what is gone."""
        if self.player is None:
            return
        self.player.update()
        self.spawn_asteroids()
        for bullet in self.bullets:
            bullet.update()
        self.bullets = [bullet for bullet in self.bullets if not bullet.to_delete]
        for asteroid in self.asteroids:
            asteroid.update()
        self.asteroids = [a for a in self.asteroids if not a.to_delete]
        if self.player.health == 0:
            self.playing = False

    def spawn_asteroids(self) -> None:
        """Drop a random asteroid above the board once the spawn delay has passed."""
        if self.clock() < self.last_asteroid + self.asteroid_delay:
            return
        self.last_asteroid = self.clock()
        rng = self.rng
        r = random_between(ASTEROID_MIN_R, ASTEROID_MAX_R, rng)
        segments = random_between(ASTEROID_MIN_SEGMENTS, ASTEROID_MAX_SEGMENTS, rng)
        speed_x = random_between(ASTEROID_MIN_SPEED_X, ASTEROID_MAX_SPEED_X, rng)
        speed_y = random_between(ASTEROID_MIN_SPEED_Y, ASTEROID_MAX_SPEED_Y, rng)
        x = random_between(self.x, self.x + self.w, rng)
        y = self.y - r
        self.asteroids.append(
            Asteroid(x, y, r, segments, Vector2(speed_x, 0), Vector2(0, speed_y), self)
        )