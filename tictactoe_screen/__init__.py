"""
Tic-tac-toe screen
==================
A 3x3 noughts-and-crosses screen against a random cpu opponent, with a
score ledger that survives rematches. Game rules live in board/match and
need no Qt; the widgets live in tictactoe_screen.ui.
"""

from .board import Board, Cell, Mover, WinningLine, LineKind, Diagonal
from .opponent import RandomOpponent
from .match import MatchController, MatchState, MatchView, Scoreboard, Status
from .errors import TicTacToeError, IllegalMove, NoLegalMove, AssetMissing

__version__ = "1.0.0"
