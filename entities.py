# entities.py
from __future__ import annotations
from dataclasses import dataclass

from settings import PLAYER_X, PLAYER_SIZE, GROUND_Y, OBST, PARTICLE_GRAVITY


@dataclass
class Player:
    x: float = PLAYER_X
    y: float = GROUND_Y - PLAYER_SIZE
    width: float = PLAYER_SIZE
    height: float = PLAYER_SIZE
    vel_y: float = 0.0
    jumping: bool = False
    grounded: bool = True

    def reset(self, ground_y: float = GROUND_Y):
        self.x = PLAYER_X
        self.y = ground_y - self.height
        self.vel_y = 0.0
        self.jumping = False
        self.grounded = True


@dataclass
class Obstacle:
    x: float
    y: float
    width: float
    height: float
    color: tuple[int, int, int, int] = OBST


@dataclass
class Coin:
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    collected: bool = False

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class Particle:
    x: float
    y: float
    vel_x: float
    vel_y: float
    color: tuple[int, int, int, int]
    life: int           # remaining ticks
    start_life: int     # initial life (for fade)

    def update(self, gravity: float = PARTICLE_GRAVITY):
        self.x += self.vel_x
        self.y += self.vel_y
        self.vel_y += gravity
        self.life -= 1

    @property
    def alive(self) -> bool:
        return self.life > 0

    @property
    def alpha(self) -> float:
        return max(0.0, min(1.0, self.life / self.start_life))


@dataclass
class Cloud:
    x: float
    y: float
    width: float
    height: float
