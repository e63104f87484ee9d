import random

import gymnasium as gym
from gymnasium import spaces
import numpy as np

from slide2048.board import MAX_TILE, SIZE
from slide2048.game import ROTATIONS, Direction, Game2048, GameStatus


def max_tile_value(size):
    """largest tile a size x size board can hold, capped to int32"""
    return min(2 ** (size * size + 1), MAX_TILE)


class Game2048Env(gym.Env):
    """
    gymnasium environment for the 2048 game

    one step is one apply_move, reset is a restart. there is no score,
    so the reward is 1.0 on the move that reaches the winning tile and
    0.0 otherwise. the episode terminates once the game is won or over.
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, size=SIZE, render_mode=None):
        super().__init__()

        self.game = Game2048(size=size)
        self.render_mode = render_mode

        # 0 = up, 1 = down, 2 = left, 3 = right
        self.action_space = spaces.Discrete(4)

        self.observation_space = spaces.Box(
            low=0,
            high=max_tile_value(size),
            shape=(size, size),
            dtype=np.int32
        )

        self.action_to_direction = {
            0: Direction.UP,
            1: Direction.DOWN,
            2: Direction.LEFT,
            3: Direction.RIGHT
        }

        # board after the last slide, before its random tile
        self.last_afterstate = None

    def _get_observation(self):
        return self.game.board.grid.copy()

    def _get_info(self, moved=False):
        return {
            "moved": moved,
            "status": self.game.status.value,
            "max_tile": self.game.board.max_tile(),
            "afterstate": self.last_afterstate,
        }

    def get_afterstate(self, action):
        """
        the deterministic result of an action, before any tile spawns

        returns (afterstate_board, valid); afterstate_board is None when
        the action doesn't change the board
        """
        direction = self.action_to_direction[self._check_action(action)]
        if self.game.is_terminal:
            return None, False

        preview = self.game.board.copy()
        pre_turns, post_turns = ROTATIONS[direction]
        if not preview.slide(pre_turns, post_turns):
            return None, False
        return preview.grid, True

    def _check_action(self, action):
        action = int(action)
        if action not in self.action_to_direction:
            raise ValueError(f"invalid action {action}, expected 0-3")
        return action

    def reset(self, seed=None, options=None):
        """restart the game for a new episode"""
        super().reset(seed=seed)

        if seed is not None:
            self.game.rng = random.Random(seed)
        self.game.restart()
        self.last_afterstate = None

        return self._get_observation(), self._get_info()

    def step(self, action):
        action = self._check_action(action)
        afterstate_board, valid = self.get_afterstate(action)

        was_won = self.game.status is GameStatus.WON
        moved = self.game.apply_move(self.action_to_direction[action])

        reward = 1.0 if self.game.status is GameStatus.WON and not was_won else 0.0
        terminated = self.game.is_terminal
        truncated = False

        self.last_afterstate = afterstate_board if valid else None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, truncated, self._get_info(moved)

    def render(self):
        """display the game state"""
        self.game.print_board()

    def close(self):
        pass
