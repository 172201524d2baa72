import logging
import random

from .errors import NoLegalMove

logger = logging.getLogger(__name__)


class RandomOpponent:
    """
    cpu that picks uniformly among the empty cells

    rng only needs randrange(n); defaults to a fresh random.Random
    """
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def choose(self, board):
        """
        returns (row, col) of an empty cell
        raises NoLegalMove on a full board
        """
        if not board.has_free_cell():
            raise NoLegalMove("opponent asked to move on a full board")
        # rejection sampling over all nine cells
        while True:
            row = self.rng.randrange(board.size)
            col = self.rng.randrange(board.size)
            if board.is_empty(row, col):
                logger.debug("opponent picked (%d, %d)", row, col)
                return row, col
