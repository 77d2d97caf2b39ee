"""The moving pieces of the game: falling asteroids, bullets and the player's ship."""

from __future__ import annotations

import math

from meteorfall.drawing import CYAN, RED, WHITE, Renderer
from meteorfall.utils import Vector2
from meteorfall.window import MOUSE_BUTTON, KeyState

ASTEROID_MIN_SEGMENTS = 3
ASTEROID_MAX_SEGMENTS = 12

PLAYER_MAX_HEALTH = 10

BULLET_WIDTH = 5.0
BULLET_HEIGHT = 10.0

# Ship parts as (dx, dy, width, height) fractions of the ship's size.
_SHIP_PARTS = (
    (-0.5, 0.0, 0.1, 0.5),
    (-0.4, 0.15, 0.8, 0.1),
    (0.4, 0.0, 0.1, 0.5),
    (-0.2, -0.2, 0.4, 0.4),
    (-0.1, -0.5, 0.2, 0.3),
)


class Asteroid:
    """A falling polygon; more segments make it tougher and slower."""

    def __init__(self, x, y, r, segments, speed_x: Vector2, speed_y: Vector2, board):
        self.x = x
        self.y = y
        self.r = r
        self.segments = segments
        self.speed_x = speed_x
        self.speed_y = speed_y
        self.board = board
        self.to_delete = False

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_circle(self.x, self.y, self.r, self.segments, WHITE)

    def update(self) -> None:
        """Advance the asteroid and mark it for removal once it leaves the board."""
        if self.to_delete:
            return
        board = self.board
        dt = board.delta_time
        slowdown = self.segments - ASTEROID_MIN_SEGMENTS + 1
        self.x += self.speed_x.y * dt / slowdown
        self.x -= self.speed_x.x * dt
        self.y += self.speed_y.y * dt / slowdown
        self.y -= self.speed_y.x * dt

        if self.y > board.y + board.h:
            board.player.health -= 2 if self.segments > ASTEROID_MAX_SEGMENTS / 2 else 1
            self.to_delete = True
        if self.x - self.r > board.x + board.w or self.x + self.r < board.x:
            self.to_delete = True


class Bullet:
    """A shot fired by the ship that chips segments off asteroids."""

    def __init__(self, x, y, speed_x: Vector2, speed_y: Vector2, board):
        self.x = x
        self.y = y
        self.w = BULLET_WIDTH
        self.h = BULLET_HEIGHT
        self.speed_x = speed_x
        self.speed_y = speed_y
        self.board = board
        self.to_delete = False

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_rect(self.x - self.w / 2, self.y, self.w, self.h, RED)

    def update(self) -> None:
        dt = self.board.delta_time
        self.x += self.speed_x.y * dt
        self.x -= self.speed_x.x * dt
        self.y += self.speed_y.y * dt
        self.y -= self.speed_y.x * dt

        if self.y + self.h < self.board.y:
            self.to_delete = True
        self.collide_with_asteroids()

    def collide_with_asteroids(self) -> None:
        """Hit every overlapping asteroid, destroying those worn below three segments."""
        for asteroid in self.board.asteroids:
            overlaps = (
                self.x + self.w > asteroid.x - asteroid.r
                and self.x < asteroid.x + asteroid.r
                and self.y + self.h > asteroid.y - asteroid.r
                and self.y < asteroid.y + asteroid.r
            )
            if not overlaps:
                continue
            self.to_delete = True
            asteroid.segments -= 1
            if asteroid.segments < 3:
                self.board.player.score += 10
                asteroid.to_delete = True


class Ship:
    """The player's ship, steered with WASD and firing with the left mouse button."""

    def __init__(self, x, y, w, h, keys: KeyState, board):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.keys = keys
        self.board = board
        self.speed_max = 150.0
        self.speed_x = Vector2(0.0, 0.0)
        self.speed_y = Vector2(0.0, 0.0)
        self.player_border = board.y + board.h * 2.0 / 3.0
        self.shot_speed = 250.0
        self.shot_delay = 500.0
        self.last_shot = 0
        self.health = PLAYER_MAX_HEALTH
        self.score = 0

    def draw(self, renderer: Renderer) -> None:
        for dx, dy, fw, fh in _SHIP_PARTS:
            renderer.draw_rect(
                self.x + dx * self.w, self.y + dy * self.w, self.w * fw, self.h * fh, CYAN
            )

    def update(self) -> None:
        self.move()
        self.shoot()
        self.collide_with_asteroids()

    def move(self) -> None:
        """Apply held keys to the ship and keep it inside its part of the board."""
        keys = self.keys
        self.speed_x.x = self.speed_max if keys.is_pressed("A") else 0.0
        self.speed_y.y = self.speed_max if keys.is_pressed("S") else 0.0
        self.speed_y.x = self.speed_max if keys.is_pressed("W") else 0.0
        self.speed_x.y = self.speed_max if keys.is_pressed("D") else 0.0

        board = self.board
        dt = board.delta_time
        self.x += self.speed_x.y * dt
        self.x -= self.speed_x.x * dt
        self.y += self.speed_y.y * dt
        self.y -= self.speed_y.x * dt

        self.x = min(max(self.x, board.x), board.x + board.w)
        self.y = max(self.y, self.player_border)
        self.y = min(self.y, board.y + board.h)

    def shoot(self) -> None:
        """Fire a bullet while the mouse button is held, at most once per shot delay."""
        board = self.board
        if board.clock() < self.last_shot + self.shot_delay:
            return
        if self.keys.is_pressed(MOUSE_BUTTON):
            board.bullets.append(
                Bullet(
                    self.x,
                    self.y - self.h / 2,
                    Vector2(self.speed_x.x / 5, self.speed_x.y / 5),
                    Vector2(self.shot_speed, 0.0),
                    board,
                )
            )
            self.last_shot = board.clock()

    def collide_with_asteroids(self) -> None:
        """End the game if any asteroid touches the ship's circular hitbox."""
        player_r = min(self.w / 2, self.h / 2)
        for asteroid in self.board.asteroids:
            distance = math.hypot(self.x - asteroid.x, self.y - asteroid.y)
            if distance < player_r + asteroid.r:
                self.board.playing = False