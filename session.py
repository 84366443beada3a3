# session.py
"""Game state machine.

``Game`` owns one ``GameSession`` and advances it a tick at a time. It knows
nothing about arcade: views latch input into ``Game.input``, call ``tick()``
once per update and draw whatever ``scene()`` returns.
"""
from __future__ import annotations
import enum
import logging
import random
from dataclasses import dataclass, field, replace

from collision import check_collisions
from difficulty import DifficultyProfile, DEFAULT_DIFFICULTY, get_profile
from entities import Player, Obstacle, Coin, Particle, Cloud
from physics import update_player, scroll_obstacles, scroll_coins, update_particles, drift_clouds
from score_store import ScoreStore
from settings import WIDTH, GROUND_Y, SCORE_PER_SPEED
from spawner import Spawner

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


@dataclass
class InputState:
    """Float inputs latched by event handlers and sampled once per tick."""
    float_primary: bool = False
    float_secondary: bool = False

    @property
    def floating(self) -> bool:
        return self.float_primary or self.float_secondary

    def clear(self):
        self.float_primary = False
        self.float_secondary = False


@dataclass
class GameSession:
    profile: DifficultyProfile
    state: GameState = GameState.MENU
    score: int = 0
    game_speed: float = 0.0
    player: Player = field(default_factory=Player)
    obstacles: list[Obstacle] = field(default_factory=list)
    coins: list[Coin] = field(default_factory=list)
    particles: list[Particle] = field(default_factory=list)
    clouds: list[Cloud] = field(default_factory=list)
    final_score: int = 0
    new_best: bool = False

    def __post_init__(self):
        if not self.game_speed:
            self.game_speed = self.profile.game_speed


@dataclass(frozen=True)
class ViewState:
    """Which screens and controls the presentation layer should show."""
    screen: str
    show_start: bool
    show_restart: bool
    show_pause: bool
    pause_label: str
    show_difficulty_selector: bool
    show_game_over: bool


@dataclass(frozen=True)
class Scene:
    """Read-only snapshot handed to the renderer."""
    state: GameState
    player: Player
    obstacles: tuple[Obstacle, ...]
    coins: tuple[Coin, ...]
    particles: tuple[Particle, ...]
    clouds: tuple[Cloud, ...]
    score: int
    best_score: int
    difficulty: str
    final_score: int
    new_best: bool


class Game:
    def __init__(self, score_store: ScoreStore, difficulty: str = DEFAULT_DIFFICULTY,
                 rng: random.Random | None = None, width: float = WIDTH, ground_y: float = GROUND_Y):
        self.score_store = score_store
        self.width = width
        self.ground_y = ground_y
        self.spawner = Spawner(rng)
        self.input = InputState()
        self.session = GameSession(profile=get_profile(difficulty))
        self.session.player.reset(ground_y)
        self.session.clouds = self.spawner.make_clouds(width)

    # ---------- Queries ----------
    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def profile(self) -> DifficultyProfile:
        return self.session.profile

    @property
    def difficulty(self) -> str:
        return self.session.profile.name

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def best_score(self) -> int:
        return self.score_store.get(self.difficulty)

    def scene(self) -> Scene:
        s = self.session
        return Scene(
            state=s.state,
            player=replace(s.player),
            obstacles=tuple(replace(ob) for ob in s.obstacles),
            coins=tuple(replace(c) for c in s.coins),
            particles=tuple(replace(p) for p in s.particles),
            clouds=tuple(replace(c) for c in s.clouds),
            score=s.score,
            best_score=self.best_score,
            difficulty=self.difficulty,
            final_score=s.final_score,
            new_best=s.new_best,
        )

    def view_state(self) -> ViewState:
        state = self.session.state
        in_run = state in (GameState.PLAYING, GameState.PAUSED)
        return ViewState(
            screen=state.value,
            show_start=state is GameState.MENU,
            show_restart=in_run,
            show_pause=in_run,
            pause_label="Resume" if state is GameState.PAUSED else "Pause",
            show_difficulty_selector=not in_run,
            show_game_over=state is GameState.GAME_OVER,
        )

    # ---------- Commands ----------
    def start(self) -> bool:
        if self.session.state not in (GameState.MENU, GameState.GAME_OVER):
            logger.debug("Ignoring start while %s", self.session.state.value)
            return False
        self._begin()
        return True

    def restart(self) -> bool:
        if self.session.state is GameState.MENU:
            return self.start()
        self._begin()
        return True

    def toggle_pause(self) -> bool:
        s = self.session
        if s.state is GameState.PLAYING:
            s.state = GameState.PAUSED
        elif s.state is GameState.PAUSED:
            s.state = GameState.PLAYING
        else:
            return False
        # releases during the pause never reach the running view
        self.input.clear()
        logger.info("Game %s", "paused" if s.state is GameState.PAUSED else "resumed")
        return True

    def select_difficulty(self, name: str) -> bool:
        """Switch preset. Only allowed from the menu or game-over screen.

        Returns False when the request is ignored because a run is in
        progress; raises UnknownDifficultyError for an unknown name, keeping
        the current preset.
        """
        if self.session.state not in (GameState.MENU, GameState.GAME_OVER):
            logger.debug("Ignoring difficulty change to %r while %s", name, self.session.state.value)
            return False
        profile = get_profile(name)
        self.session.profile = profile
        self.session.game_speed = profile.game_speed
        logger.info("Difficulty set to %s", profile.name)
        return True

    def reset(self):
        s = self.session
        s.score = 0
        s.game_speed = s.profile.game_speed
        s.player.reset(self.ground_y)
        s.obstacles = []
        s.coins = []
        s.particles = []
        s.final_score = 0
        s.new_best = False
        self.spawner.reset()
        self.input.clear()

    def _begin(self):
        self.reset()
        self.session.state = GameState.PLAYING
        logger.info("Run started on %s", self.difficulty)

    # ---------- Update ----------
    def tick(self):
        s = self.session
        if s.state is not GameState.PLAYING:
            return

        # Player physics
        update_player(s.player, s.profile, self.input.floating, self.ground_y)

        # Movement
        s.obstacles = scroll_obstacles(s.obstacles, s.game_speed)
        s.coins = scroll_coins(s.coins, s.game_speed)
        s.particles = update_particles(s.particles)
        drift_clouds(s.clouds, self.width)

        # Spawning
        s.obstacles.extend(self.spawner.spawn_obstacles(s.profile, s.game_speed, self.width, self.ground_y))
        s.coins.extend(self.spawner.spawn_coins(s.profile, self.width, self.ground_y))

        # Collisions
        result = check_collisions(s.player, s.obstacles, s.coins, self.spawner)
        s.coins = result.coins
        s.particles.extend(result.particles)
        s.score += result.bonus

        # Survival score & speed ramp
        s.score += 1
        base = s.profile.game_speed
        s.game_speed = min(s.profile.max_speed, base + s.score / SCORE_PER_SPEED)

        if result.hit_obstacle:
            self._game_over()

    def _game_over(self):
        s = self.session
        s.state = GameState.GAME_OVER
        s.final_score = s.score
        previous = self.score_store.get(self.difficulty)
        s.new_best = s.score > previous
        if s.new_best:
            self.score_store.set(self.difficulty, s.score)
        logger.info("Game over on %s: score %d (best %d%s)", self.difficulty, s.score,
                    max(previous, s.score), ", new best" if s.new_best else "")
