from PySide6.QtWidgets import QPushButton, QSizePolicy
from PySide6.QtCore import QSize, Signal, Slot
from PySide6.QtGui import QIcon

from .. import config


class CellButton(QPushButton):
    """
    one board cell; knows its own index so clicks need no id parsing
    """
    cell_clicked = Signal(int)  # emits row-major index on click

    def __init__(self, index, parent=None):
        super().__init__(parent)
        self.index = index
        self.setObjectName(f"button{index + 1}")
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(config.CELL_BUTTON_SIZE, config.CELL_BUTTON_SIZE))
        self.setIconSize(QSize(config.CELL_BUTTON_SIZE - 14, config.CELL_BUTTON_SIZE - 14))
        self.clicked.connect(self._emit_cell)
        self._image = None

    @Slot()
    def _emit_cell(self):
        self.cell_clicked.emit(self.index)

    def image(self):
        return self._image

    def set_image(self, pixmap):
        # None clears the cell
        self._image = pixmap
        self.setIcon(QIcon(pixmap) if pixmap is not None else QIcon())
