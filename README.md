# tictacnet

Play Tic-Tac-Toe in the terminal against a small neural network.

Before the first game, the network trains by playing many games against an
opponent that moves at random. After that it also learns from every game it
plays against you.

## Installing

```
pip install .
```

## Playing

```
tictacnet
```

By default the network first trains on 2,000,000 random games. Every 1,000
games it prints the wins, losses and ties for that batch. At the end it prints
the totals and the overall win rate. To use a different number of training
games, pass it as the first argument:

```
tictacnet 50000
```

Pass `0` to skip training and play against an untrained network. If the
argument is not a whole number, or is larger than 4294967295, the default of
2,000,000 is used.

You play X and always move first. The squares are numbered 0 to 8, row by row:

```
 0 | 1 | 2
-----------
 3 | 4 | 5
-----------
 6 | 7 | 8
```

Type a square number and press Enter. If the input is not a number, or the
square is taken or off the board, the program prints `Invalid move. Try
again.` and asks again. After each computer move it shows the probability, in
percent, that the network gave each square. The square it chose is marked with
`*`.

When a game ends you are asked `Play again? (y/n)`. An answer that starts with
`y` (in either case) starts a new game. Any other answer quits. The program
also quits if input ends, even in the middle of a game.

## Using it as a library

```python
import random

from tictacnet.game import GameState
from tictacnet.nn import NeuralNetwork

nn = NeuralNetwork(random.Random(42))
nn.train_against_random(10_000)      # prints progress to stdout

state = GameState()
state.make_move(4)                   # X takes the centre
move = state.get_computer_move(nn, False)
state.make_move(move)                # O replies
print(state)
```

- `GameState.make_move` raises `InvalidMoveError` (a `ValueError`) if the
  position is outside 0 to 8 or the square is already taken.
- `GameState.check_game_over` returns `None` while play goes on. Otherwise it
  returns the winning `Cell` (`Cell.X` or `Cell.O`), or `Cell.EMPTY` for a
  draw.
- `GameState.get_random_move` and `NeuralNetwork` each take an optional
  `random.Random`, so runs can be repeated exactly.
- `NeuralNetwork.play_game(stdin, stdout)` and
  `NeuralNetwork.train_against_random(num_games, stdout)` take the streams to
  read from and write to. Each defaults to the process's own stream.

## What it does not do

The trained network is kept only in memory. Nothing is saved to disk, so each
run of `tictacnet` trains from scratch. Anything the network learned from your
games is lost when the program exits.

## Running the tests

```
pip install .[test]
pytest
```