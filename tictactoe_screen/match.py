import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board, Mover
from .opponent import RandomOpponent

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class MatchState:
    status: Status
    winner: Optional[Mover] = None

    @classmethod
    def won(cls, mover):
        return cls(Status.WON, mover)

    @property
    def in_progress(self):
        return self.status is Status.IN_PROGRESS


IN_PROGRESS = MatchState(Status.IN_PROGRESS)
DRAWN = MatchState(Status.DRAWN)


@dataclass
class Scoreboard:
    """
    wins per side, kept across rematches
    """
    player: int = 0
    opponent: int = 0

    def reset(self):
        self.player = 0; self.opponent = 0

    def record_win(self, mover):
        if mover is Mover.PLAYER:
            self.player += 1
        else:
            self.opponent += 1


class MatchView:
    """
    what the controller asks of the screen; base does nothing
    """
    def render_cell(self, row, col, marker):
        # marker is a Mover, or None to blank the cell
        pass

    def render_winning_line(self, line, winner):
        pass

    def render_scores(self, player_score, opponent_score):
        pass

    def bind_clicks(self, handler):
        # handler(index) for index in 0..8, row-major
        pass


class MatchController:
    """
    turn-taking and scoring for one screen session

    call on_open() before feeding clicks
    """
    def __init__(self, view=None, opponent=None):
        self.view = view if view is not None else MatchView()
        self.opponent = opponent if opponent is not None else RandomOpponent()
        self._board = Board()
        self._scores = Scoreboard()
        self._state = IN_PROGRESS
        # seeded so the human opens the first match
        self._last_mover = Mover.OPPONENT
        self.view.bind_clicks(self.on_cell_clicked)

    @property
    def board(self):
        return self._board

    @property
    def state(self):
        return self._state

    @property
    def scores(self):
        return self._scores

    @property
    def last_mover(self):
        return self._last_mover

    def on_open(self):
        """
        screen became visible: zero scores, fresh match
        """
        self._scores.reset()
        self._render_scores()
        self.start_match()

    def start_match(self):
        """
        clear board and begin; cpu opens if the human closed the last match
        """
        self._board.clear()
        self._state = IN_PROGRESS
        for r in range(self._board.size):
            for c in range(self._board.size):
                self.view.render_cell(r, c, None)
        logger.debug("match started, last mover %s", self._last_mover.value)
        if self._last_mover is Mover.PLAYER:
            self._play_opponent()

    def on_cell_clicked(self, index):
        """
        human clicked cell index (0..8); invalid clicks are dropped
        """
        if not self._state.in_progress:
            logger.debug("click %s ignored, match is %s", index, self._state.status.value)
            return
        size = self._board.size
        if not (isinstance(index, int) and 0 <= index < size * size):
            logger.debug("click %r ignored, no such cell", index)
            return
        row, col = divmod(index, size)
        if not self._board.is_empty(row, col):
            logger.debug("click %d ignored, cell taken", index)
            return
        self._place(row, col, Mover.PLAYER)
        if self._state.in_progress:
            self._play_opponent()

    def _play_opponent(self):
        row, col = self.opponent.choose(self._board)
        self._place(row, col, Mover.OPPONENT)

    def _place(self, row, col, mover):
        self._board.place(row, col, mover)
        self._last_mover = mover
        self.view.render_cell(row, col, mover)
        logger.debug("%s placed at (%d, %d)", mover.value, row, col)
        self._evaluate()

    def _evaluate(self):
        # terminal check after every placement
        line = self._board.winning_line()
        if line is not None:
            winner = self._last_mover
            self._state = MatchState.won(winner)
            self._scores.record_win(winner)
            self._render_scores()
            self.view.render_winning_line(line, winner)
            logger.info("%s wins on %s", winner.value, line)
        elif not self._board.has_free_cell():
            self._state = DRAWN
            logger.info("match drawn")

    def _render_scores(self):
        self.view.render_scores(self._scores.player, self._scores.opponent)
