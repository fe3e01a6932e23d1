"""Tic-Tac-Toe against a small neural network that trains by self-play against a random opponent."""

__version__ = "0.1.0"
__all__ = ["game", "nn", "cli"]