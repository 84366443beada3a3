# game_view.py
from __future__ import annotations
from pathlib import Path
import logging
import math
import time
import arcade

from settings import (
    WIDTH, HEIGHT, GROUND_Y, GROUND_HEIGHT, PARTICLE_SIZE,
    SKY_TOP, SKY_BOTTOM, CLOUD_COLOR, GROUND, GRASS, PLAYER_COLOR, SPIKE,
    GOLD, COIN_SHINE, WHITE, GRAY,
)
from session import Game, GameState, Scene

ASSETS_DIR = Path(__file__).parent / "assets"
SKY_BANDS = 24

logger = logging.getLogger(__name__)

_player_texture: arcade.Texture | None = None
_player_texture_loaded = False


def player_texture() -> arcade.Texture | None:
    """Load the player sprite once; None means draw the procedural fallback."""
    global _player_texture, _player_texture_loaded
    if not _player_texture_loaded:
        _player_texture_loaded = True
        try:
            _player_texture = arcade.load_texture(str(ASSETS_DIR / "player.png"))
        except FileNotFoundError:
            logger.warning("Could not load player sprite, using fallback graphics")
    return _player_texture


def _bottom(y: float, h: float) -> float:
    """Screen y (top-left origin) to arcade bottom edge."""
    return HEIGHT - y - h


def _mix(a, b, t):
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(4))


# -------------------------------
# Scene drawing
# -------------------------------
def draw_background():
    band_h = HEIGHT / SKY_BANDS
    for i in range(SKY_BANDS):
        # band 0 is the top of the screen
        col = _mix(SKY_TOP, SKY_BOTTOM, i / (SKY_BANDS - 1))
        arcade.draw_lbwh_rectangle_filled(0, HEIGHT - (i + 1) * band_h, WIDTH, band_h + 1, col)


def draw_clouds(scene: Scene):
    for c in scene.clouds:
        cy = HEIGHT - c.y
        arcade.draw_circle_filled(c.x, cy, c.width / 3, CLOUD_COLOR)
        arcade.draw_circle_filled(c.x + c.width / 3, cy, c.width / 2.5, CLOUD_COLOR)
        arcade.draw_circle_filled(c.x + c.width / 1.5, cy, c.width / 3, CLOUD_COLOR)


def draw_ground():
    arcade.draw_lbwh_rectangle_filled(0, 0, WIDTH, GROUND_HEIGHT, GROUND)
    top = _bottom(GROUND_Y, 10)
    for x in range(0, WIDTH, 20):
        arcade.draw_lbwh_rectangle_filled(x, top, 15, 10, GRASS)


def draw_player(scene: Scene):
    p = scene.player
    left, bottom = p.x, _bottom(p.y, p.height)
    tex = player_texture()
    if tex is not None:
        # wobble while airborne
        angle = math.degrees(math.sin(time.monotonic() * 10) * 0.3) if p.jumping else 0.0
        arcade.draw_texture_rect(tex, arcade.LBWH(left, bottom, p.width, p.height), angle=angle)
        return

    # Fallback: a little face
    arcade.draw_lbwh_rectangle_filled(left, bottom, p.width, p.height, PLAYER_COLOR)
    top = bottom + p.height
    eye = p.width * 0.25
    for ex in (left + p.width * 0.15, left + p.width * 0.6):
        arcade.draw_lbwh_rectangle_filled(ex, top - p.height * 0.15 - eye, eye, eye, (255, 255, 255, 255))
        arcade.draw_lbwh_rectangle_filled(ex + eye * 0.35, top - p.height * 0.15 - eye * 0.7,
                                          eye * 0.35, eye * 0.35, (0, 0, 0, 255))
    arcade.draw_lbwh_rectangle_filled(left + p.width * 0.3, bottom + p.height * 0.15,
                                      p.width * 0.4, p.height * 0.1, (255, 20, 147, 255))


def draw_obstacles(scene: Scene):
    for ob in scene.obstacles:
        bottom = _bottom(ob.y, ob.height)
        arcade.draw_lbwh_rectangle_filled(ob.x, bottom, ob.width, ob.height, ob.color)
        # side spikes
        for i in range(0, int(ob.height), 10):
            sy = bottom + ob.height - i - 3
            arcade.draw_lbwh_rectangle_filled(ob.x - 5, sy, 5, 3, SPIKE)
            arcade.draw_lbwh_rectangle_filled(ob.x + ob.width, sy, 5, 3, SPIKE)


def draw_coins(scene: Scene):
    for c in scene.coins:
        cx = c.x + c.width / 2
        cy = HEIGHT - (c.y + c.height / 2)
        r = c.width / 2
        arcade.draw_circle_filled(cx, cy, r, GOLD)
        # shine orbits with the coin's rotation
        off = r / 3 * math.sqrt(2)
        ang = c.rotation + math.radians(135)
        arcade.draw_circle_filled(cx + math.cos(ang) * off, cy + math.sin(ang) * off, r / 3, COIN_SHINE)


def draw_particles(scene: Scene):
    for p in scene.particles:
        r, g, b, a = p.color
        arcade.draw_lbwh_rectangle_filled(p.x, _bottom(p.y, PARTICLE_SIZE), PARTICLE_SIZE, PARTICLE_SIZE,
                                          (r, g, b, int(a * p.alpha)))


def draw_scene(scene: Scene):
    draw_background()
    draw_clouds(scene)
    draw_ground()
    draw_player(scene)
    draw_obstacles(scene)
    draw_coins(scene)
    draw_particles(scene)


class Hud:
    def __init__(self):
        self.score_text = arcade.Text("", 16, HEIGHT - 36, WHITE, 18)
        self.best_text = arcade.Text("", 16, HEIGHT - 62, GRAY, 14)
        self.diff_text = arcade.Text("", WIDTH - 16, HEIGHT - 36, WHITE, 16, anchor_x="right")

    def draw(self, scene: Scene):
        self.score_text.text = f"Score: {scene.score}"
        self.best_text.text = f"Best: {scene.best_score}"
        self.diff_text.text = scene.difficulty.capitalize()
        self.score_text.draw()
        self.best_text.draw()
        self.diff_text.draw()


class GameView(arcade.View):
    def __init__(self, game: Game):
        super().__init__()
        self.game = game
        self.hud = Hud()

    def on_show_view(self):
        # all state lives in the Game; nothing to set up
        pass

    # ---------- Input ----------
    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.SPACE, arcade.key.W):
            self.game.input.float_primary = True
        elif symbol == arcade.key.UP:
            self.game.input.float_secondary = True
        elif symbol == arcade.key.R:
            self.game.restart()
        elif symbol in (arcade.key.ESCAPE, arcade.key.P):
            if self.game.toggle_pause():
                self._follow_state()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.SPACE, arcade.key.W):
            self.game.input.float_primary = False
        elif symbol == arcade.key.UP:
            self.game.input.float_secondary = False

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if self.game.state is GameState.PLAYING:
            self.game.input.float_primary = True

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.game.input.float_primary = False

    # ---------- Update ----------
    def on_update(self, dt: float):
        self.game.tick()
        self._follow_state()

    def _follow_state(self):
        state = self.game.state
        if state is GameState.PAUSED:
            from pause_view import PauseView
            self.window.show_view(PauseView(self))
        elif state is GameState.GAME_OVER:
            from game_over_view import GameOverView
            self.window.show_view(GameOverView(self))

    # ---------- Draw ----------
    def on_draw(self):
        self.clear()
        scene = self.game.scene()
        draw_scene(scene)
        self.hud.draw(scene)
