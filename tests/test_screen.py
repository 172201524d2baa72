import os
import tempfile
import unittest
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from tictactoe_screen import config
from tictactoe_screen.board import Mover
from tictactoe_screen.errors import AssetMissing
from tictactoe_screen.opponent import RandomOpponent
from tictactoe_screen.ui import MarkerTextures, TextureLibrary, TicTacToeScreen, TicTacToeWindow

from fakes import ScriptedRandom, picks


class QtTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])


class TextureLibraryTests(QtTestCase):
    def test_builtin_textures_resolve(self):
        library = TextureLibrary(size=32)
        for name in (config.CROSS_TEXTURE, config.CROSSED_CROSS_TEXTURE,
                     config.CIRCLE_TEXTURE, config.CROSSED_CIRCLE_TEXTURE):
            pixmap = library.get(name)
            self.assertFalse(pixmap.isNull())
            self.assertEqual(pixmap.width(), 32)
        # cached
        self.assertIs(library.get(config.CROSS_TEXTURE), library.get(config.CROSS_TEXTURE))

    def test_unknown_name_is_missing(self):
        library = TextureLibrary()
        for name in ("TicTacToe:triangle", "cross", "Other:cross", "TicTacToe:"):
            with self.assertRaises(AssetMissing):
                library.get(name)

    def test_assets_dir_without_files_is_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            library = TextureLibrary(assets_dir=tmp)
            with self.assertRaises(AssetMissing) as ctx:
                library.get(config.CROSS_TEXTURE)
            self.assertEqual(ctx.exception.name, config.CROSS_TEXTURE)

    def test_assets_dir_loads_png(self):
        with tempfile.TemporaryDirectory() as tmp:
            painted = TextureLibrary(size=16).get(config.CIRCLE_TEXTURE)
            self.assertTrue(painted.save(str(Path(tmp) / "circle.png"), "PNG"))
            pixmap = TextureLibrary(assets_dir=tmp).get(config.CIRCLE_TEXTURE)
            self.assertEqual(pixmap.width(), 16)

    def test_undecodable_file_is_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "cross.png").write_bytes(b"not an image")
            with self.assertRaises(AssetMissing):
                TextureLibrary(assets_dir=tmp).get(config.CROSS_TEXTURE)

    def test_marker_textures(self):
        library = TextureLibrary(size=16)
        textures = MarkerTextures(library)
        self.assertIs(textures.marker(Mover.PLAYER), library.get(config.CROSS_TEXTURE))
        self.assertIs(textures.crossed(Mover.OPPONENT), library.get(config.CROSSED_CIRCLE_TEXTURE))


class ScreenTests(QtTestCase):
    def make_screen(self, rng_values):
        self.library = TextureLibrary(size=16)
        screen = TicTacToeScreen(self.library, RandomOpponent(ScriptedRandom(rng_values)))
        screen.on_opened()
        return screen

    def test_missing_texture_aborts_construction(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(AssetMissing):
                TicTacToeScreen(TextureLibrary(assets_dir=tmp))

    def test_open_shows_zero_scores_and_blank_cells(self):
        screen = self.make_screen([])
        self.assertEqual(screen.your_score_label.text(), "Your Score: 0")
        self.assertEqual(screen.cpu_score_label.text(), "CPU Score:   0")
        self.assertEqual(len(screen.cell_buttons), 9)
        self.assertTrue(all(b.image() is None for b in screen.cell_buttons))
        self.assertEqual(screen.cell_buttons[4].objectName(), "button5")

    def test_clicking_buttons_plays_and_highlights_win(self):
        screen = self.make_screen(picks(1, 5))
        buttons = screen.cell_buttons
        buttons[0].click()
        self.assertIs(buttons[0].image(), self.library.get(config.CROSS_TEXTURE))
        self.assertIs(buttons[1].image(), self.library.get(config.CIRCLE_TEXTURE))
        buttons[4].click()
        buttons[8].click()
        crossed = self.library.get(config.CROSSED_CROSS_TEXTURE)
        for index in (0, 4, 8):
            self.assertIs(buttons[index].image(), crossed)
        self.assertIs(buttons[5].image(), self.library.get(config.CIRCLE_TEXTURE))
        self.assertEqual(screen.your_score_label.text(), "Your Score: 1")
        # frozen until rematch
        buttons[2].click()
        self.assertIsNone(buttons[2].image())

    def test_rematch_button_restarts_with_cpu_opening(self):
        screen = self.make_screen(picks(1, 5, 3))
        for index in (0, 4, 8):
            screen.cell_buttons[index].click()
        screen.rematch_button.click()
        images = [b.image() for b in screen.cell_buttons]
        self.assertEqual(sum(image is not None for image in images), 1)
        self.assertIs(images[3], self.library.get(config.CIRCLE_TEXTURE))
        self.assertEqual(screen.your_score_label.text(), "Your Score: 1")

    def test_window_hosts_screen(self):
        window = TicTacToeWindow(TextureLibrary(size=16), RandomOpponent(ScriptedRandom([])))
        self.assertIsInstance(window.centralWidget(), TicTacToeScreen)
        self.assertEqual(window.windowTitle(), config.WINDOW_TITLE)
        window.close()


class ScreenLifecycleTests(QtTestCase):
    def test_showing_window_opens_a_fresh_session(self):
        library = TextureLibrary(size=16)
        window = TicTacToeWindow(library, RandomOpponent(ScriptedRandom(picks(1, 5, 3))))
        screen = window.screen
        try:
            window.show()
            self.assertEqual(screen.your_score_label.text(), "Your Score: 0")
            self.assertEqual(screen.cpu_score_label.text(), "CPU Score:   0")
            for index in (0, 4, 8):
                screen.cell_buttons[index].click()
            self.assertEqual(screen.your_score_label.text(), "Your Score: 1")

            window.hide()
            window.show()
            self.assertEqual(screen.your_score_label.text(), "Your Score: 0")
            # human closed the last match, so the cpu opens at (1, 0)
            images = [b.image() for b in screen.cell_buttons]
            self.assertEqual(sum(image is not None for image in images), 1)
            self.assertIs(images[3], library.get(config.CIRCLE_TEXTURE))
        finally:
            window.close()


if __name__ == "__main__":
    unittest.main()
