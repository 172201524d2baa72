from PySide6.QtWidgets import QMainWindow, QMenuBar, QMenu
from PySide6.QtGui import QAction

from .. import config
from .screen import TicTacToeScreen


class TicTacToeWindow(QMainWindow):
    """
    host window: game menu + the tic-tac-toe screen
    """
    def __init__(self, texture_library=None, opponent=None):
        """
        builds the screen; AssetMissing from it propagates
        """
        super().__init__()
        self.screen = TicTacToeScreen(texture_library, opponent, parent=self)
        self._setup_ui()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.setCentralWidget(self.screen)
        self._create_menu_bar()

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        rematch_action = QAction("Rematch", self)
        rematch_action.triggered.connect(self.screen.rematch)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(rematch_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)
