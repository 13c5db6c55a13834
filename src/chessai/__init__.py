"""chessai: a small negamax chess engine with a pluggable rules engine."""

__version__ = "0.1.0"
