from dataclasses import dataclass, field

import pygame
import pytest

from meteorfall.drawing import Renderer
from meteorfall.entities import (
    PLAYER_MAX_HEALTH,
    Asteroid,
    Bullet,
    Ship,
)
from meteorfall.utils import Vector2
from meteorfall.window import MOUSE_BUTTON, KeyState


@dataclass
class FakeBoard:
    x: float = 0.0
    y: float = 0.0
    w: float = 400.0
    h: float = 300.0
    delta_time: float = 0.0
    now: int = 0
    asteroids: list = field(default_factory=list)
    bullets: list = field(default_factory=list)
    playing: bool = True
    player: object = None

    def clock(self):
        return self.now


def make_board(**kwargs):
    board = FakeBoard(**kwargs)
    board.player = Ship(1000, 1000, 50, 50, KeyState(), board)
    return board


def make_ship(board, x=200.0, y=250.0):
    keys = KeyState()
    ship = Ship(x, y, 50, 50, keys, board)
    return ship, keys


def test_asteroid_below_board_costs_one_health_when_small():
    board = make_board()
    asteroid = Asteroid(100, board.h + 20, 10, 5, Vector2(0, 0), Vector2(0, 0), board)
    asteroid.update()
    assert asteroid.to_delete
    assert board.player.health == PLAYER_MAX_HEALTH - 1


def test_asteroid_below_board_costs_two_health_when_large():
    board = make_board()
    asteroid = Asteroid(100, board.h + 20, 10, 10, Vector2(0, 0), Vector2(0, 0), board)
    asteroid.update()
    assert asteroid.to_delete
    assert board.player.health == PLAYER_MAX_HEALTH - 2


def test_asteroid_leaving_side_is_deleted_without_damage():
    board = make_board()
    asteroid = Asteroid(board.w + 50, 100, 10, 5, Vector2(0, 0), Vector2(0, 0), board)
    asteroid.update()
    assert asteroid.to_delete
    assert board.player.health == PLAYER_MAX_HEALTH


def test_more_segments_fall_slower():
    board = make_board(h=1000.0, delta_time=0.1)
    fast = Asteroid(100, 50, 10, 3, Vector2(0, 0), Vector2(0, 50), board)
    slow = Asteroid(100, 50, 10, 8, Vector2(0, 0), Vector2(0, 50), board)
    fast.update()
    slow.update()
    assert fast.y > slow.y > 50
    assert not fast.to_delete and not slow.to_delete


def test_deleted_asteroid_does_not_move():
    board = make_board(delta_time=1.0)
    asteroid = Asteroid(100, 50, 10, 5, Vector2(0, 0), Vector2(0, 50), board)
    asteroid.to_delete = True
    asteroid.update()
    assert (asteroid.x, asteroid.y) == (100, 50)


def test_asteroid_horizontal_speed_moves_left():
    board = make_board(delta_time=0.1)
    asteroid = Asteroid(100, 50, 10, 5, Vector2(10, 0), Vector2(0, 0), board)
    asteroid.update()
    assert asteroid.x < 100


def test_bullet_moves_up():
    board = make_board(delta_time=0.1)
    bullet = Bullet(100, 100, Vector2(0, 0), Vector2(250, 0), board)
    bullet.update()
    assert bullet.y < 100
    assert bullet.x == 100
    assert not bullet.to_delete


def test_bullet_above_board_is_deleted():
    board = make_board()
    bullet = Bullet(100, -20, Vector2(0, 0), Vector2(0, 0), board)
    bullet.update()
    assert bullet.to_delete


def test_bullet_hit_removes_segment():
    board = make_board()
    asteroid = Asteroid(102, 105, 10, 5, Vector2(0, 0), Vector2(0, 0), board)
    board.asteroids.append(asteroid)
    bullet = Bullet(100, 100, Vector2(0, 0), Vector2(0, 0), board)
    bullet.collide_with_asteroids()
    assert bullet.to_delete
    assert asteroid.segments == 4
    assert not asteroid.to_delete
    assert board.player.score == 0


def test_bullet_destroys_worn_asteroid_and_scores():
    board = make_board()
    asteroid = Asteroid(102, 105, 10, 3, Vector2(0, 0), Vector2(0, 0), board)
    board.asteroids.append(asteroid)
    bullet = Bullet(100, 100, Vector2(0, 0), Vector2(0, 0), board)
    bullet.collide_with_asteroids()
    assert asteroid.to_delete
    assert board.player.score == 10


def test_bullet_miss_leaves_asteroid_alone():
    board = make_board()
    asteroid = Asteroid(300, 200, 10, 5, Vector2(0, 0), Vector2(0, 0), board)
    board.asteroids.append(asteroid)
    bullet = Bullet(100, 100, Vector2(0, 0), Vector2(0, 0), board)
    bullet.collide_with_asteroids()
    assert not bullet.to_delete
    assert asteroid.segments == 5


def test_ship_starts_with_full_health_and_border():
    board = FakeBoard()
    ship, _ = make_ship(board)
    assert ship.health == PLAYER_MAX_HEALTH
    assert ship.score == 0
    assert ship.player_border == pytest.approx(200)


def test_ship_moves_right_with_d():
    board = FakeBoard(delta_time=0.1)
    ship, keys = make_ship(board)
    keys.press("D")
    ship.move()
    assert ship.x > 200
    assert ship.y == 250


def test_opposite_keys_cancel():
    board = FakeBoard(delta_time=0.1)
    ship, keys = make_ship(board)
    keys.press("A")
    keys.press("D")
    ship.move()
    assert ship.x == pytest.approx(200)


def test_ship_clamped_to_left_edge():
    board = FakeBoard(delta_time=1.0)
    ship, keys = make_ship(board, x=5.0)
    keys.press("A")
    ship.move()
    assert ship.x == board.x


def test_ship_cannot_rise_above_border():
    board = FakeBoard(delta_time=1.0)
    ship, keys = make_ship(board)
    keys.press("W")
    ship.move()
    assert ship.y == ship.player_border


def test_ship_clamped_to_bottom():
    board = FakeBoard(delta_time=1.0)
    ship, keys = make_ship(board)
    keys.press("S")
    ship.move()
    assert ship.y == board.y + board.h


def test_released_key_stops_ship():
    board = FakeBoard(delta_time=0.1)
    ship, keys = make_ship(board)
    keys.press("D")
    ship.move()
    keys.release("D")
    x = ship.x
    ship.move()
    assert ship.x == x


def test_shoot_respects_delay():
    board = FakeBoard(now=1000)
    ship, keys = make_ship(board)
    keys.press(MOUSE_BUTTON)
    ship.shoot()
    assert len(board.bullets) == 1
    assert ship.last_shot == 1000
    board.now = 1200
    ship.shoot()
    assert len(board.bullets) == 1
    board.now = 1500
    ship.shoot()
    assert len(board.bullets) == 2


def test_shot_starts_above_ship_and_flies_up():
    board = FakeBoard(now=1000)
    ship, keys = make_ship(board)
    keys.press(MOUSE_BUTTON)
    ship.shoot()
    bullet = board.bullets[0]
    assert bullet.x == ship.x
    assert bullet.y == ship.y - ship.h / 2
    assert bullet.speed_y.x == ship.shot_speed


def test_no_shot_without_button():
    board = FakeBoard(now=1000)
    ship, _ = make_ship(board)
    ship.shoot()
    assert board.bullets == []


def test_collision_ends_game():
    board = FakeBoard()
    ship, _ = make_ship(board)
    board.asteroids.append(Asteroid(ship.x + 10, ship.y, 10, 5, Vector2(), Vector2(), board))
    ship.update()
    assert board.playing is False


def test_distant_asteroid_does_not_end_game():
    board = FakeBoard()
    ship, _ = make_ship(board)
    board.asteroids.append(Asteroid(20, 20, 10, 5, Vector2(), Vector2(), board))
    ship.collide_with_asteroids()
    assert board.playing is True


def test_bullet_draws_red():
    surface = pygame.Surface((100, 100))
    board = FakeBoard()
    Bullet(50, 50, Vector2(), Vector2(), board).draw(Renderer(surface))
    assert tuple(surface.get_at((50, 55))) == (255, 0, 0, 255)


def test_ship_draws_cyan_body():
    surface = pygame.Surface((100, 100))
    board = FakeBoard()
    ship, _ = make_ship(board, x=50, y=50)
    ship.draw(Renderer(surface))
    assert tuple(surface.get_at((50, 50))) == (0, 255, 255, 255)


def test_asteroid_draws_white_outline():
    surface = pygame.Surface((100, 100))
    board = FakeBoard()
    Asteroid(50, 50, 20, 5, Vector2(), Vector2(), board).draw(Renderer(surface))
    assert tuple(surface.get_at((70, 50))) == (255, 255, 255, 255)
    assert tuple(surface.get_at((50, 50))) == (0, 0, 0, 255)