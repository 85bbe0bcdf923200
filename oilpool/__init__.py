"""Input state, board geometry, shape tessellation and configuration for a small tic-tac-toe game."""

__version__ = "0.1.0"