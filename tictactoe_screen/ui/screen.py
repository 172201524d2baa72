import logging

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QPushButton, QLabel
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, Slot

from .. import config
from ..board import BOARD_SIZE
from ..match import MatchController, MatchView
from .cell_button import CellButton
from .textures import MarkerTextures, TextureLibrary

logger = logging.getLogger(__name__)


class TicTacToeScreen(QWidget, MatchView):
    """
    the game screen: nine cell buttons, two score labels, a rematch button

    builds its widgets, then initialise() resolves textures and wires
    the controller. every show (not a restore from minimise) starts a
    fresh session via on_opened().
    """
    def __init__(self, texture_library=None, opponent=None, parent=None):
        super().__init__(parent)
        self.texture_library = texture_library or TextureLibrary()
        self.opponent = opponent
        self.textures = None
        self.controller = None
        self._setup_ui()
        self.initialise()

    def _setup_ui(self):
        '''board grid + score row + rematch'''
        self.setObjectName("ticTacToeScreen")
        self.setStyleSheet("""
            QPushButton { background-color: #333; border: 2px solid #555; }
            QPushButton:hover { border-color: #8acaff; }
            QPushButton#rematchButton { padding: 6px 18px; color: #eee; }
            QLabel { color: #eee; }
        """)
        layout = QVBoxLayout(self)

        f = QFont(); f.setPointSize(12)
        score_row = QHBoxLayout()
        self.your_score_label = QLabel("")
        self.your_score_label.setObjectName("yourScore")
        self.cpu_score_label = QLabel("")
        self.cpu_score_label.setObjectName("cpuScore")
        for label in (self.your_score_label, self.cpu_score_label):
            label.setFont(f)
        score_row.addWidget(self.your_score_label)
        score_row.addStretch(1)
        score_row.addWidget(self.cpu_score_label)
        layout.addLayout(score_row)

        grid = QGridLayout()
        grid.setSpacing(4)
        self.cell_buttons = []
        for index in range(BOARD_SIZE * BOARD_SIZE):
            button = CellButton(index, parent=self)
            row, col = divmod(index, BOARD_SIZE)
            grid.addWidget(button, row, col)
            self.cell_buttons.append(button)
        layout.addLayout(grid, 1)

        self.rematch_button = QPushButton(config.REMATCH_TEXT)
        self.rematch_button.setObjectName("rematchButton")
        layout.addWidget(self.rematch_button, alignment=Qt.AlignCenter)

    def initialise(self):
        """
        resolve the four textures and hook up clicks
        raises AssetMissing if any texture is unavailable
        """
        self.textures = MarkerTextures(self.texture_library)
        self.controller = MatchController(view=self, opponent=self.opponent)
        self.rematch_button.clicked.connect(self.rematch)
        logger.debug("screen initialised")

    def showEvent(self, event):
        super().showEvent(event)
        if not event.spontaneous():
            self.on_opened()

    def on_opened(self):
        self.controller.on_open()

    @Slot()
    def rematch(self):
        self.controller.start_match()

    # --- MatchView -----------------------------------------------------------

    def _button(self, row, col):
        return self.cell_buttons[row * BOARD_SIZE + col]

    def render_cell(self, row, col, marker):
        image = self.textures.marker(marker) if marker is not None else None
        self._button(row, col).set_image(image)

    def render_winning_line(self, line, winner):
        image = self.textures.crossed(winner)
        for row, col in line.cells():
            self._button(row, col).set_image(image)

    def render_scores(self, player_score, opponent_score):
        self.your_score_label.setText(config.PLAYER_SCORE_FORMAT.format(player_score))
        self.cpu_score_label.setText(config.OPPONENT_SCORE_FORMAT.format(opponent_score))

    def bind_clicks(self, handler):
        for button in self.cell_buttons:
            button.cell_clicked.connect(handler)
