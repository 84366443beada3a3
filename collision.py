# collision.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from entities import Player, Obstacle, Coin, Particle
from geometry import is_colliding
from settings import COIN_BONUS, GOLD
from spawner import Spawner

logger = logging.getLogger(__name__)


@dataclass
class CollisionResult:
    hit_obstacle: bool = False
    bonus: int = 0
    coins: list[Coin] = field(default_factory=list)          # coins still in play
    particles: list[Particle] = field(default_factory=list)  # new sparkle bursts


def check_collisions(player: Player, obstacles: list[Obstacle], coins: list[Coin],
                     spawner: Spawner) -> CollisionResult:
    """Test the player against every obstacle and every uncollected coin.

    Both passes always run; a tick that ends the game can still pick up a coin.
    """
    result = CollisionResult()

    for ob in obstacles:
        if is_colliding(player, ob):
            result.hit_obstacle = True
            break

    for coin in coins:
        if not coin.collected and is_colliding(player, coin):
            coin.collected = True
            result.bonus += COIN_BONUS
            cx, cy = coin.center
            result.particles.extend(spawner.burst(cx, cy, GOLD))
            logger.debug("Coin collected at (%.0f, %.0f)", cx, cy)
        if not coin.collected:
            result.coins.append(coin)

    return result
