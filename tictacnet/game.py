"""Tic-tac-toe board state, rules and move selection."""

from __future__ import annotations

import random
import sys
from enum import Enum
from typing import Optional, Protocol, Sequence, TextIO

BOARD_SIZE = 9

_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Player(Enum):
    """Whose turn it is."""

    HUMAN = 0
    AI = 1

    @property
    def other(self) -> "Player":
        return Player.AI if self is Player.HUMAN else Player.HUMAN

    @property
    def mark(self) -> "Cell":
        return Cell.X if self is Player.HUMAN else Cell.O


class Cell(Enum):
    """Content of one square. EMPTY also stands for a draw as a game result."""

    EMPTY = "."
    X = "X"
    O = "O"  # noqa: E741

    def __str__(self) -> str:
        return self.value


class InvalidMoveError(ValueError):
    """Raised when a move is outside the board or on an occupied square."""


class _MovePredictor(Protocol):
    outputs: Sequence[float]

    def forward_pass(self, inputs: Sequence[float]) -> object: ...


class GameState:
    """A board of nine cells and the player to move. The human (X) starts."""

    def __init__(self) -> None:
        self.board: list[Cell] = [Cell.EMPTY] * BOARD_SIZE
        self.current_player: Player = Player.HUMAN

    def __str__(self) -> str:
        rows = [
            " {} | {} | {} ".format(*self.board[start:start + 3])
            for start in range(0, BOARD_SIZE, 3)
        ]
        return "\n-----------\n".join(rows)

    def display_board(self, stdout: Optional[TextIO] = None) -> None:
        """Print the board."""
        out = stdout if stdout is not None else sys.stdout
        out.write(f"{self}\n")

    def make_move(self, position: int) -> None:
        """Place the current player's mark at ``position`` and pass the turn."""
        if not 0 <= position < BOARD_SIZE:
            raise InvalidMoveError("Invalid position: must be 0-8")
        if self.board[position] is not Cell.EMPTY:
            raise InvalidMoveError("Position already occupied")
        self.board[position] = self.current_player.mark
        self.current_player = self.current_player.other

    def board_to_input(self) -> list[float]:
        """Encode the board as 18 floats: one (X, O) pair per cell."""
        encoding = {Cell.EMPTY: (0.0, 0.0), Cell.X: (1.0, 0.0), Cell.O: (0.0, 1.0)}
        return [value for cell in self.board for value in encoding[cell]]

    def check_game_over(self) -> Optional[Cell]:
        """Return the winner's mark, ``Cell.EMPTY`` for a draw, or None if play goes on."""
        for a, b, c in _LINES:
            if self.board[a] is not Cell.EMPTY and self.board[a] == self.board[b] == self.board[c]:
                return self.board[a]
        if Cell.EMPTY not in self.board:
            return Cell.EMPTY
        return None

    def get_valid_moves(self) -> list[int]:
        """Indices of the empty squares, in ascending order."""
        return [index for index, cell in enumerate(self.board) if cell is Cell.EMPTY]

    def get_computer_move(
        self,
        nn: _MovePredictor,
        display_probs: bool = False,
        stdout: Optional[TextIO] = None,
    ) -> Optional[int]:
        """Pick the valid move the network rates highest; the first one wins ties."""
        nn.forward_pass(self.board_to_input())
        valid_moves = self.get_valid_moves()
        if not valid_moves:
            return None

        best_move = valid_moves[0]
        for move in valid_moves:
            if nn.outputs[move] > nn.outputs[best_move]:
                best_move = move

        if display_probs:
            self._display_move_probabilities(nn.outputs, best_move, stdout)
        return best_move

    @staticmethod
    def _display_move_probabilities(
        outputs: Sequence[float], best_move: int, stdout: Optional[TextIO]
    ) -> None:
        out = stdout if stdout is not None else sys.stdout
        lines = ["Move probabilities (NN):"]
        for row in range(3):
            cells = []
            for col in range(3):
                pos = row * 3 + col
                marker = "*" if pos == best_move else " "
                cells.append(f"{outputs[pos] * 100.0:>5.1f}{marker}")
            lines.append(" |".join(cells))
            if row < 2:
                lines.append("      |      |      ")
        lines.append(f"Total probability: {sum(outputs):.2f}")
        out.write("\n".join(lines) + "\n")

    def get_random_move(self, rng: Optional[random.Random] = None) -> Optional[int]:
        """A uniformly chosen valid move, or None when the board is full."""
        valid_moves = self.get_valid_moves()
        if not valid_moves:
            return None
        chooser = rng if rng is not None else random
        return chooser.choice(valid_moves)

    def reset(self) -> None:
        """Clear the board and give the first move back to the human."""
        self.board = [Cell.EMPTY] * BOARD_SIZE
        self.current_player = Player.HUMAN

    def is_valid_move(self, position: int) -> bool:
        """Whether ``position`` is on the board and empty."""
        return 0 <= position < BOARD_SIZE and self.board[position] is Cell.EMPTY