"""
texture lookup by name, "TicTacToe:cross" style

with an assets dir, <dir>/<name>.png is loaded; otherwise the built-in
painted markers are used. anything unresolvable raises AssetMissing.
"""
import logging
from pathlib import Path

from PySide6.QtCore import Qt, QPointF
from PySide6.QtGui import QPainter, QPixmap, QPen, QColor

from .. import config
from ..board import Mover
from ..errors import AssetMissing

logger = logging.getLogger(__name__)

NAMESPACE = "TicTacToe"


def _draw_cross(painter, side, color):
    # two crossing lines, same as the board widget used to paint X
    rad = side / 2 * 0.7
    c = side / 2
    painter.setPen(QPen(QColor(color), side / 16, Qt.SolidLine, Qt.RoundCap))
    painter.drawLine(QPointF(c - rad, c - rad), QPointF(c + rad, c + rad))
    painter.drawLine(QPointF(c + rad, c - rad), QPointF(c - rad, c + rad))


def _draw_circle(painter, side, color):
    rad = side / 2 * 0.7
    c = side / 2
    painter.setPen(QPen(QColor(color), side / 16))
    painter.drawEllipse(QPointF(c, c), rad, rad)


def _draw_strike(painter, side):
    painter.setPen(QPen(QColor(config.STRIKE_COLOR), side / 10, Qt.SolidLine, Qt.RoundCap))
    painter.drawLine(QPointF(0, side / 2), QPointF(side, side / 2))


def _painted(draw, color, crossed=False):
    def build(side):
        pixmap = QPixmap(side, side)
        pixmap.fill(Qt.transparent)
        painter = QPainter(pixmap)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            draw(painter, side, color)
            if crossed:
                _draw_strike(painter, side)
        finally:
            painter.end()
        return pixmap
    return build


BUILTIN_TEXTURES = {
    config.CROSS_TEXTURE: _painted(_draw_cross, config.PLAYER_COLOR),
    config.CROSSED_CROSS_TEXTURE: _painted(_draw_cross, config.PLAYER_COLOR, crossed=True),
    config.CIRCLE_TEXTURE: _painted(_draw_circle, config.OPPONENT_COLOR),
    config.CROSSED_CIRCLE_TEXTURE: _painted(_draw_circle, config.OPPONENT_COLOR, crossed=True),
}


class TextureLibrary:
    """
    resolves texture names to pixmaps, caching each one
    """
    def __init__(self, assets_dir=None, size=config.TEXTURE_SIZE):
        self.assets_dir = Path(assets_dir) if assets_dir else None
        self.size = size
        self._cache = {}

    def get(self, name) -> QPixmap:
        if name in self._cache:
            return self._cache[name]
        namespace, sep, short_name = name.partition(":")
        if not sep or namespace != NAMESPACE or not short_name:
            raise AssetMissing(name, "unknown texture name")
        if self.assets_dir is not None:
            pixmap = self._load_file(name, short_name)
        elif name in BUILTIN_TEXTURES:
            pixmap = BUILTIN_TEXTURES[name](self.size)
        else:
            raise AssetMissing(name)
        self._cache[name] = pixmap
        return pixmap

    def _load_file(self, name, short_name):
        path = self.assets_dir / (short_name + config.TEXTURE_FILE_SUFFIX)
        if not path.is_file():
            raise AssetMissing(name, f"no file at {path}")
        pixmap = QPixmap(str(path))
        if pixmap.isNull():
            raise AssetMissing(name, f"could not decode {path}")
        logger.debug("loaded %s from %s", name, path)
        return pixmap


class MarkerTextures:
    """
    the four marker pixmaps a screen needs, looked up once
    """
    def __init__(self, library):
        self._plain = {
            Mover.PLAYER: library.get(config.CROSS_TEXTURE),
            Mover.OPPONENT: library.get(config.CIRCLE_TEXTURE),
        }
        self._crossed = {
            Mover.PLAYER: library.get(config.CROSSED_CROSS_TEXTURE),
            Mover.OPPONENT: library.get(config.CROSSED_CIRCLE_TEXTURE),
        }

    def marker(self, mover):
        return self._plain[mover]

    def crossed(self, mover):
        return self._crossed[mover]
