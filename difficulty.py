# difficulty.py
from __future__ import annotations
from dataclasses import dataclass

from settings import MAX_SPEED_BONUS


class UnknownDifficultyError(ValueError):
    """Raised for a preset name that is not in the table."""

    def __init__(self, name: str):
        super().__init__(f"Unknown difficulty {name!r} (expected one of {', '.join(DIFFICULTIES)})")
        self.name = name


@dataclass(frozen=True)
class DifficultyProfile:
    name: str
    game_speed: float
    obstacle_frequency: int   # ticks between obstacle spawns at base speed
    coin_frequency: int       # ticks between coin spawns
    gravity: float
    float_impulse: float      # negative: upward
    obstacle_height: int
    allow_multiple_obstacles: bool

    @property
    def max_speed(self) -> float:
        return self.game_speed + MAX_SPEED_BONUS


PROFILES: dict[str, DifficultyProfile] = {
    "easy": DifficultyProfile("easy", 2, 120, 180, 0.8, -4.0, 40, False),
    "medium": DifficultyProfile("medium", 3, 90, 200, 1.0, -3.5, 50, True),
    "hard": DifficultyProfile("hard", 4, 70, 220, 1.2, -3.0, 60, True),
}
DIFFICULTIES = tuple(PROFILES)
DEFAULT_DIFFICULTY = "easy"


def get_profile(name: str) -> DifficultyProfile:
    try:
        return PROFILES[name.strip().lower()]
    except (KeyError, AttributeError):
        raise UnknownDifficultyError(name) from None
