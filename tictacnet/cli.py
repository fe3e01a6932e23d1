"""Command line entry point: train the network, then play against it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from tictacnet.nn import NeuralNetwork

DEFAULT_TRAINING_GAMES = 2_000_000
_U32_MAX = 2**32 - 1


def _parse_game_count(text: Optional[str]) -> int:
    if text is None:
        return DEFAULT_TRAINING_GAMES
    digits = text[1:] if text.startswith("+") else text
    if not (digits and digits.isascii() and digits.isdigit()):
        return DEFAULT_TRAINING_GAMES
    value = int(digits)
    return value if value <= _U32_MAX else DEFAULT_TRAINING_GAMES


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Train against a random player for the given number of games, then play."""
    args = list(sys.argv[1:] if argv is None else argv)
    random_games = _parse_game_count(args[0] if args else None)

    print("Creating neural network...")
    nn = NeuralNetwork()

    if random_games > 0:
        print(f"Training against random player with {random_games} games...")
        nn.train_against_random(random_games, sys.stdout)
        print("Training completed!")

    while True:
        try:
            nn.play_game(sys.stdin, sys.stdout)
        except EOFError:
            break
        except OSError as error:
            print(f"Error during game: {error}")
            continue

        print("Play again? (y/n)")
        answer = sys.stdin.readline().strip().lower()
        if not answer.startswith("y"):
            break

    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())