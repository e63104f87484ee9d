"""
game lifecycle: moves, tile spawning and win/over bookkeeping
"""
import enum
import logging
import random

from slide2048.board import SIZE, Board


logger = logging.getLogger(__name__)

START_TILES = 2
SPAWN_TWO_PROBABILITY = 0.9


class Direction(enum.Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


class GameStatus(enum.Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    OVER = 'over'


# (pre, post) clockwise quarter turns around the upward slide
ROTATIONS = {
    Direction.UP: (0, 0),
    Direction.DOWN: (2, 2),
    Direction.LEFT: (1, 3),
    Direction.RIGHT: (3, 1),
}


class Game2048:
    def __init__(self, size=SIZE, rng=None, board=None):
        """
        initialize a game and deal the starting tiles

        rng is anything with choice(seq) and random() methods,
        random.Random by default. tests pass a scripted one.
        a given board is played from as is, without a deal.
        """
        self.board = board if board is not None else Board(size)
        self.rng = rng if rng is not None else random.Random()
        self.status = GameStatus.IN_PROGRESS
        if board is None:
            self.restart()

    @classmethod
    def from_rows(cls, rows, rng=None):
        """start a game from a given position instead of a fresh deal"""
        return cls(rng=rng, board=Board.from_rows(rows))

    def restart(self):
        """clear the board and deal two new tiles"""
        self.board.clear()
        self.status = GameStatus.IN_PROGRESS
        for _ in range(START_TILES):
            self.add_random_tile()
        logger.info("game restarted on a %dx%d board", self.board.size, self.board.size)

    def add_random_tile(self):
        """
        put a 2 (90%) or a 4 (10%) on a random empty cell

        returns the (row, col) that was filled, or None on a full board
        """
        empty_cells = self.board.empty_cells()
        if not empty_cells:
            return None

        row, col = self.rng.choice(empty_cells)
        value = 2 if self.rng.random() < SPAWN_TWO_PROBABILITY else 4
        self.board.set_cell(row, col, value)
        logger.debug("spawned %d at (%d, %d)", value, row, col)
        return row, col

    def apply_move(self, direction):
        """
        slide the board in the given direction

        ignored once the game is won or over. a winning merge ends the
        move without a spawn; any other real move spawns a tile and then
        checks for game over. returns True if the board changed.
        """
        direction = Direction(direction)
        if self.status is not GameStatus.IN_PROGRESS:
            return False

        pre_turns, post_turns = ROTATIONS[direction]
        moved = self.board.slide(pre_turns, post_turns)

        if self.board.won:
            self.status = GameStatus.WON
            logger.info("reached %d moving %s", self.board.max_tile(), direction.value)
        elif moved:
            self.add_random_tile()
            if self.board.is_game_over():
                self.status = GameStatus.OVER
                logger.info("no moves left, game over")

        logger.debug("move %s: moved=%s status=%s", direction.value, moved, self.status.value)
        return moved

    def get_cell(self, row, col):
        return self.board.get_cell(row, col)

    def get_status(self):
        return self.status

    def get_size(self):
        return self.board.size

    @property
    def is_terminal(self):
        return self.status is not GameStatus.IN_PROGRESS

    def print_board(self):
        """print the board to console"""
        width = 5 * self.board.size + 1
        print("-" * width)
        for row in self.board.to_rows():
            print("|", end="")
            for cell in row:
                if cell == 0:
                    print("    |", end="")
                else:
                    print(f"{cell:4}|", end="")
            print()
        print("-" * width)
        if self.status is GameStatus.WON:
            print("YOU WIN!")
        elif self.status is GameStatus.OVER:
            print("GAME OVER!")
        print()
