# pause_view.py
import arcade
from settings import WIDTH, HEIGHT, WHITE, GRAY, OVERLAY
from session import GameState


class PauseView(arcade.View):
    def __init__(self, game_view: arcade.View):
        super().__init__()
        self.game_view = game_view
        self.title = arcade.Text("PAUSED", WIDTH/2, HEIGHT/2 + 30, WHITE, 48, anchor_x="center", bold=True)
        self.hint = arcade.Text("ESC = Resume    R = Restart", WIDTH/2, HEIGHT/2 - 20, GRAY, 20, anchor_x="center")

    def on_draw(self):
        # Draw game behind dim overlay
        self.game_view.on_draw()
        arcade.draw_lbwh_rectangle_filled(0, 0, WIDTH, HEIGHT, OVERLAY)
        self.title.draw()
        self.hint.draw()

    def on_key_release(self, symbol: int, modifiers: int):
        self.game_view.on_key_release(symbol, modifiers)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.game_view.on_mouse_release(x, y, button, modifiers)

    def on_key_press(self, symbol: int, modifiers: int):
        game = self.game_view.game
        if symbol in (arcade.key.ESCAPE, arcade.key.P):
            game.toggle_pause()
        elif symbol == arcade.key.R:
            game.restart()
        if game.state is GameState.PLAYING:
            self.window.show_view(self.game_view)
