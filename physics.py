# physics.py
"""Per-tick motion for the player and everything that scrolls past it.

All functions work in screen coordinates (y grows downward) and in units of
pixels per tick.
"""
from __future__ import annotations

from difficulty import DifficultyProfile
from entities import Player, Obstacle, Coin, Particle, Cloud
from settings import COIN_SPIN, CLOUD_SPEED


def update_player(player: Player, profile: DifficultyProfile, floating: bool, ground_y: float):
    if floating:
        # Constant upward velocity; holding the input sustains the climb.
        player.vel_y = profile.float_impulse
        player.jumping = True
        player.grounded = False
    else:
        player.vel_y += profile.gravity

    player.y += player.vel_y

    # Ceiling
    if player.y < 0:
        player.y = 0
        player.vel_y = 0.0

    # Ground (clamp)
    floor = ground_y - player.height
    if player.y >= floor:
        player.y = floor
        player.vel_y = 0.0
        player.jumping = False
        player.grounded = True
    else:
        player.grounded = False


def scroll_obstacles(obstacles: list[Obstacle], speed: float) -> list[Obstacle]:
    for ob in obstacles:
        ob.x -= speed
    return [ob for ob in obstacles if ob.x + ob.width > 0]


def scroll_coins(coins: list[Coin], speed: float) -> list[Coin]:
    for c in coins:
        c.x -= speed
        c.rotation += COIN_SPIN
    return [c for c in coins if c.x + c.width > 0]


def update_particles(particles: list[Particle]) -> list[Particle]:
    for p in particles:
        p.update()
    return [p for p in particles if p.alive]


def drift_clouds(clouds: list[Cloud], screen_width: float):
    """Move clouds left at a fixed pace and wrap them when fully off-screen."""
    for cloud in clouds:
        cloud.x -= CLOUD_SPEED
        if cloud.x + cloud.width < 0:
            cloud.x = screen_width
