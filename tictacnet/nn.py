"""A small feed-forward network that learns tic-tac-toe by playing."""

from __future__ import annotations

import math
import random
import sys
from typing import Optional, Sequence, TextIO

from tictacnet.game import Cell, GameState, InvalidMoveError, Player

NN_INPUT_SIZE = 18
NN_HIDDEN_SIZE = 100
NN_OUTPUT_SIZE = 9
NN_LEARNING_RATE = 0.1

_REPORT_EVERY = 1000


def relu(x: float) -> float:
    """Rectified linear unit."""
    return max(x, 0.0)


def relu_derivative(x: float) -> float:
    """Derivative of ReLU: 1 for positive input, otherwise 0."""
    return 1.0 if x > 0.0 else 0.0


def softmax(inputs: Sequence[float]) -> list[float]:
    """Turn logits into probabilities; falls back to uniform if they degenerate."""
    if not inputs:
        return []
    max_val = max(inputs)
    exps = [math.exp(value - max_val) for value in inputs]
    total = sum(exps)
    if total > 0.0:
        return [value / total for value in exps]
    return [1.0 / len(inputs)] * len(inputs)


def _parse_position(text: str) -> Optional[int]:
    text = text.strip()
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        return int(digits)
    return None


def _uniform_vector(rng: random.Random, size: int) -> list[float]:
    return [rng.uniform(-0.5, 0.5) for _ in range(size)]


class NeuralNetwork:
    """One hidden ReLU layer with a softmax output over the nine squares.

    ``weights_ih[j][i]`` links input ``j`` to hidden neuron ``i``;
    ``weights_ho[j][i]`` links hidden neuron ``j`` to output ``i``.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.weights_ih = [_uniform_vector(self._rng, NN_HIDDEN_SIZE) for _ in range(NN_INPUT_SIZE)]
        self.weights_ho = [_uniform_vector(self._rng, NN_OUTPUT_SIZE) for _ in range(NN_HIDDEN_SIZE)]
        self.biases_h = _uniform_vector(self._rng, NN_HIDDEN_SIZE)
        self.biases_o = _uniform_vector(self._rng, NN_OUTPUT_SIZE)

        self.inputs = [0.0] * NN_INPUT_SIZE
        self.hidden = [0.0] * NN_HIDDEN_SIZE
        self.raw_logits = [0.0] * NN_OUTPUT_SIZE
        self.outputs = [0.0] * NN_OUTPUT_SIZE

    def forward_pass(self, inputs: Sequence[float]) -> list[float]:
        """Compute move probabilities for ``inputs`` and return them."""
        if len(inputs) != NN_INPUT_SIZE:
            raise ValueError(f"expected {NN_INPUT_SIZE} inputs, got {len(inputs)}")
        self.inputs = [float(value) for value in inputs]

        sums = list(self.biases_h)
        for x, row in zip(self.inputs, self.weights_ih):
            if x:
                sums = [s + x * w for s, w in zip(sums, row)]
        self.hidden = [relu(s) for s in sums]

        logits = list(self.biases_o)
        for h, row in zip(self.hidden, self.weights_ho):
            if h:
                logits = [s + h * w for s, w in zip(logits, row)]
        self.raw_logits = logits

        self.outputs = softmax(self.raw_logits)
        return self.outputs

    def backprop(
        self, target_probs: Sequence[float], learning_rate: float, reward_scaling: float
    ) -> None:
        """Move the weights so the last outputs get closer to ``target_probs``."""
        scale = abs(reward_scaling)
        output_deltas = [(out - target) * scale for out, target in zip(self.outputs, target_probs)]

        hidden_deltas = [
            sum(delta * w for delta, w in zip(output_deltas, row)) * relu_derivative(h)
            for h, row in zip(self.hidden, self.weights_ho)
        ]

        for h, row in zip(self.hidden, self.weights_ho):
            row[:] = [w - learning_rate * delta * h for w, delta in zip(row, output_deltas)]

        self.biases_o = [
            b - learning_rate * delta for b, delta in zip(self.biases_o, output_deltas)
        ]

        for x, row in zip(self.inputs, self.weights_ih):
            row[:] = [w - learning_rate * delta * x for w, delta in zip(row, hidden_deltas)]

        self.biases_h = [
            b - learning_rate * delta for b, delta in zip(self.biases_h, hidden_deltas)
        ]

    def learn_from_game(
        self, move_history: Sequence[int], nn_plays_as_o: bool, winner: Cell
    ) -> None:
        """Reinforce or discourage the network's own moves according to the result."""
        if not move_history:
            raise ValueError("Move history cannot be empty")

        if winner is Cell.EMPTY:
            reward = 0.3
        elif (winner is Cell.O) == nn_plays_as_o:
            reward = 1.0
        else:
            reward = -2.0

        num_moves = len(move_history)
        nn_parity = 1 if nn_plays_as_o else 0

        for move_idx, chosen_move in enumerate(move_history):
            if move_idx % 2 != nn_parity:
                continue

            state = GameState()
            for earlier in move_history[:move_idx]:
                try:
                    state.make_move(earlier)
                except InvalidMoveError:
                    pass

            self.forward_pass(state.board_to_input())

            target_probs = [0.0] * NN_OUTPUT_SIZE
            move_importance = 0.25 + 0.75 * (move_idx / num_moves)
            scaled_reward = reward * move_importance

            if scaled_reward > 0.0:
                target_probs[chosen_move] = 1.0
            else:
                alternatives = [m for m in state.get_valid_moves() if m != chosen_move]
                for move in alternatives:
                    target_probs[move] = 1.0 / len(alternatives)

            self.backprop(target_probs, NN_LEARNING_RATE, scaled_reward)

    def play_game(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        """Play one interactive game: the human is X, the network is O.

        Raises EOFError when input runs out before the game ends.
        """
        inp = stdin if stdin is not None else sys.stdin
        out = stdout if stdout is not None else sys.stdout

        state = GameState()
        move_history: list[int] = []
        out.write("Welcome to Tic-Tac-Toe! You are X, computer is O.\n")

        while True:
            state.display_board(out)

            winner = state.check_game_over()
            if winner is not None:
                messages = {
                    Cell.X: "You win!",
                    Cell.O: "Computer wins!",
                    Cell.EMPTY: "It's a tie!",
                }
                out.write(messages[winner] + "\n")
                self.learn_from_game(move_history, True, winner)
                return

            if state.current_player is Player.HUMAN:
                out.write("Your move (0-8): \n")
                out.flush()
                line = inp.readline()
                if not line:
                    raise EOFError("input ended during the game")
                move = _parse_position(line)
                if move is None or not state.is_valid_move(move):
                    out.write("Invalid move. Try again.\n")
                    continue
            else:
                move = state.get_computer_move(self, True, out)
                if move is None:
                    out.write("No valid moves available!\n")
                    return
                out.write(f"Computer chose position {move}\n")

            state.make_move(move)
            move_history.append(move)

    def play_random_game(self) -> Cell:
        """Play the network (O) against a random X, learn from it, return the result."""
        state = GameState()
        move_history: list[int] = []

        while True:
            winner = state.check_game_over()
            if winner is not None:
                self.learn_from_game(move_history, True, winner)
                return winner

            if state.current_player is Player.HUMAN:
                move = state.get_random_move(self._rng)
            else:
                move = state.get_computer_move(self, False)

            if move is None:
                return Cell.EMPTY
            state.make_move(move)
            move_history.append(move)

    def train_against_random(self, num_games: int, stdout: Optional[TextIO] = None) -> None:
        """Train over ``num_games`` games against a random player, reporting progress."""
        out = stdout if stdout is not None else sys.stdout
        counts = {Cell.O: 0, Cell.X: 0, Cell.EMPTY: 0}
        totals = {Cell.O: 0, Cell.X: 0, Cell.EMPTY: 0}
        total_games = 0

        out.write("Training against random player...\n")

        for game_number in range(1, num_games + 1):
            counts[self.play_random_game()] += 1

            if game_number % _REPORT_EVERY == 0:
                wins, losses, ties = counts[Cell.O], counts[Cell.X], counts[Cell.EMPTY]
                win_rate = wins / _REPORT_EVERY * 100.0
                total_games += _REPORT_EVERY
                for cell, count in counts.items():
                    totals[cell] += count
                out.write(
                    f"Games: {game_number}, Wins: {wins} ({win_rate:.1f}%), "
                    f"Losses: {losses}, Ties: {ties}\n"
                )
                counts = dict.fromkeys(counts, 0)

        out.write(f"Training complete! {num_games} games played.\n")
        out.write(
            f"Total Games: {total_games}, Wins: {totals[Cell.O]}, "
            f"Losses: {totals[Cell.X]}, Ties: {totals[Cell.EMPTY]}\n"
        )
        if total_games:
            rate = f"{totals[Cell.O] / total_games * 100.0:.1f}"
        else:
            rate = "NaN"
        out.write(f"Final Win Rate: {rate}%\n")