# game_over_view.py
import arcade
from settings import WIDTH, HEIGHT, WHITE, PINK, GRAY, GOLD, OVERLAY
from difficulty import DIFFICULTIES
from session import GameState


class GameOverView(arcade.View):
    def __init__(self, game_view: arcade.View):
        super().__init__()
        self.game_view = game_view
        self.title = arcade.Text("Game Over", WIDTH/2, HEIGHT/2 + 70, PINK, 36, anchor_x="center")
        self.score_text = arcade.Text("", WIDTH/2, HEIGHT/2 + 20, WHITE, 22, anchor_x="center")
        self.best_text = arcade.Text("New High Score!", WIDTH/2, HEIGHT/2 - 14, GOLD, 20, anchor_x="center")
        self.diff_text = arcade.Text("", WIDTH/2, HEIGHT/2 - 56, WHITE, 18, anchor_x="center")
        self.hint = arcade.Text("ENTER/R = Play Again    LEFT/RIGHT = Difficulty",
                                WIDTH/2, HEIGHT/2 - 96, GRAY, 16, anchor_x="center")

    def on_draw(self):
        self.game_view.on_draw()
        arcade.draw_lbwh_rectangle_filled(0, 0, WIDTH, HEIGHT, OVERLAY)
        game = self.game_view.game
        scene = game.scene()
        self.score_text.text = f"Final Score: {scene.final_score}"
        self.diff_text.text = f"Difficulty: {scene.difficulty.capitalize()}   Best: {scene.best_score}"
        self.title.draw()
        self.score_text.draw()
        if scene.new_best:
            self.best_text.draw()
        self.diff_text.draw()
        self.hint.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        game = self.game_view.game
        if symbol in (arcade.key.LEFT, arcade.key.RIGHT):
            step = 1 if symbol == arcade.key.RIGHT else -1
            i = DIFFICULTIES.index(game.difficulty)
            game.select_difficulty(DIFFICULTIES[(i + step) % len(DIFFICULTIES)])
        elif symbol in (arcade.key.ENTER, arcade.key.RETURN, arcade.key.R):
            game.restart()
        if game.state is GameState.PLAYING:
            self.window.show_view(self.game_view)
