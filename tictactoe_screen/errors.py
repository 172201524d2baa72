class TicTacToeError(Exception):
    """
    base for everything the game raises
    """


class IllegalMove(TicTacToeError):
    """
    placement out of range or onto an occupied cell
    """


class NoLegalMove(TicTacToeError):
    """
    opponent asked to move on a full board
    """


class AssetMissing(TicTacToeError):
    """
    texture could not be resolved at screen init
    """
    def __init__(self, name, reason="not found"):
        super().__init__(f"texture '{name}' unavailable: {reason}")
        self.name = name
