# menu_view.py
import arcade
from settings import WIDTH, HEIGHT, TITLE, WHITE, GRAY, GOLD
from difficulty import DIFFICULTIES
from game_view import GameView, draw_background, draw_clouds, draw_ground
from physics import drift_clouds
from session import Game


class MenuView(arcade.View):
    def __init__(self, game: Game):
        super().__init__()
        self.game = game

        # Title text
        self.title_text = arcade.Text(TITLE, WIDTH/2, HEIGHT*0.68, WHITE, 36, anchor_x="center")
        self.diff_text = arcade.Text("", WIDTH/2, HEIGHT*0.54, GOLD, 22, anchor_x="center")
        self.best_text = arcade.Text("", WIDTH/2, HEIGHT*0.47, WHITE, 18, anchor_x="center")
        self.sub_text = arcade.Text("Press ENTER to Play", WIDTH/2, HEIGHT*0.38, WHITE, 20, anchor_x="center")
        self.help_text = arcade.Text("LEFT/RIGHT or 1-3 = Difficulty    SPACE/UP = Float    ESC = Pause",
                                     WIDTH/2, HEIGHT*0.30, GRAY, 16, anchor_x="center")

    def on_update(self, dt: float):
        # Clouds keep drifting behind the menu
        drift_clouds(self.game.session.clouds, WIDTH)

    def on_draw(self):
        self.clear()
        scene = self.game.scene()
        draw_background()
        draw_clouds(scene)
        draw_ground()
        self.diff_text.text = f"< {scene.difficulty.capitalize()} >"
        self.best_text.text = f"Best: {scene.best_score}"
        self.title_text.draw()
        self.diff_text.draw()
        self.best_text.draw()
        self.sub_text.draw()
        self.help_text.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.LEFT, arcade.key.RIGHT):
            step = 1 if symbol == arcade.key.RIGHT else -1
            i = DIFFICULTIES.index(self.game.difficulty)
            self.game.select_difficulty(DIFFICULTIES[(i + step) % len(DIFFICULTIES)])
        elif symbol in (arcade.key.KEY_1, arcade.key.KEY_2, arcade.key.KEY_3):
            self.game.select_difficulty(DIFFICULTIES[symbol - arcade.key.KEY_1])
        elif symbol in (arcade.key.ENTER, arcade.key.RETURN):
            if self.game.start():
                self.window.show_view(GameView(self.game))
