from .screen import TicTacToeScreen
from .textures import TextureLibrary, MarkerTextures
from .main_window import TicTacToeWindow
