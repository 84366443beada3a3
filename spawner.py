# spawner.py
from __future__ import annotations
import logging
import random

from difficulty import DifficultyProfile
from entities import Obstacle, Coin, Particle, Cloud
from settings import (
    OBSTACLE_WIDTH, SECOND_OBSTACLE_OFFSET, SECOND_OBSTACLE_SHRINK, SECOND_OBSTACLE_CHANCE,
    SPEED_FREQUENCY_FACTOR, COIN_SIZE, COIN_BAND_LOW, COIN_BAND_SPAN,
    BURST_COUNT, BURST_SPEED, PARTICLE_LIFE, CLOUD_COUNT,
)

logger = logging.getLogger(__name__)


class Spawner:
    """Timer-driven creation of obstacles and coins, plus clouds and bursts.

    Each kind has its own tick counter. Randomness comes from ``rng`` so a
    seeded ``random.Random`` gives repeatable runs.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.obstacle_timer = 0
        self.coin_timer = 0

    def reset(self):
        self.obstacle_timer = 0
        self.coin_timer = 0

    def spawn_obstacles(self, profile: DifficultyProfile, game_speed: float,
                        screen_width: float, ground_y: float) -> list[Obstacle]:
        self.obstacle_timer += 1
        threshold = profile.obstacle_frequency - game_speed * SPEED_FREQUENCY_FACTOR
        if self.obstacle_timer <= threshold:
            return []
        self.obstacle_timer = 0

        h = profile.obstacle_height
        spawned = [Obstacle(screen_width, ground_y - h, OBSTACLE_WIDTH, h)]
        if profile.allow_multiple_obstacles and self.rng.random() < SECOND_OBSTACLE_CHANCE:
            h2 = h - SECOND_OBSTACLE_SHRINK
            spawned.append(Obstacle(screen_width + SECOND_OBSTACLE_OFFSET, ground_y - h2, OBSTACLE_WIDTH, h2))
        logger.debug("Spawned %d obstacle(s)", len(spawned))
        return spawned

    def spawn_coins(self, profile: DifficultyProfile, screen_width: float, ground_y: float) -> list[Coin]:
        self.coin_timer += 1
        if self.coin_timer <= profile.coin_frequency:
            return []
        self.coin_timer = 0
        y = ground_y - COIN_BAND_LOW - self.rng.random() * COIN_BAND_SPAN
        return [Coin(screen_width, y, COIN_SIZE, COIN_SIZE)]

    def make_clouds(self, screen_width: float, count: int = CLOUD_COUNT) -> list[Cloud]:
        r = self.rng.random
        return [
            Cloud(x=r() * screen_width, y=50 + r() * 100, width=60 + r() * 40, height=30 + r() * 20)
            for _ in range(count)
        ]

    def burst(self, x: float, y: float, color: tuple[int, int, int, int]) -> list[Particle]:
        particles = []
        for _ in range(BURST_COUNT):
            vx = (self.rng.random() - 0.5) * 2 * BURST_SPEED
            vy = (self.rng.random() - 0.5) * 2 * BURST_SPEED
            particles.append(Particle(x, y, vx, vy, color, PARTICLE_LIFE, PARTICLE_LIFE))
        return particles
