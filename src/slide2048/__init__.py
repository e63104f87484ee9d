"""
sliding-tile merge puzzle (2048) rule engine
"""
from slide2048.board import SIZE, WIN_TILE, Board, BoardSizeError, rotate_grid
from slide2048.game import Direction, Game2048, GameStatus

__all__ = [
    "SIZE",
    "WIN_TILE",
    "Board",
    "BoardSizeError",
    "Direction",
    "Game2048",
    "GameStatus",
    "rotate_grid",
]
