"""Command-line entry point: analyse a position and print the engine's choice."""

from __future__ import annotations

import argparse
import logging
import sys

from chessai.core.fen import STARTING_FEN, position_from_fen
from chessai.core.position import Position
from chessai.engine.negamax_search import NegamaxEngine
from chessai.engine.search import SearchLimits, SearchResult
from chessai.game.rules import game_status, winner

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessai",
        description="Pick a move with a fixed-depth negamax search.",
    )
    parser.add_argument("--fen", default=STARTING_FEN, help="Position to analyse")
    parser.add_argument("--depth", type=int, default=3, help="Search depth in plies")
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="Number of ranked root moves to print (0 prints all)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log search details")
    return parser


def format_report(position: Position, result: SearchResult, top: int) -> str:
    """Human-readable summary of a search."""
    lines = [repr(position.board), ""]
    side = str(position.side_to_move).capitalize()
    if result.best_move is None:
        lines.append(f"{side} has no move (score {result.score})")
        return "\n".join(lines)

    lines.append(f"{side} plays {result.best_move} (score {result.score})")
    ranked = result.analysis if top <= 0 else result.analysis[:top]
    for index, entry in enumerate(ranked, start=1):
        lines.append(f"{index:>3}. {entry.move!s:<6} {entry.score:>8}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        position = position_from_fen(args.fen)
        limits = SearchLimits(max_depth=args.depth)
    except ValueError as exc:
        print(f"chessai: {exc}", file=sys.stderr)
        return 2

    status = game_status(
        position.board,
        position.side_to_move,
        position.castling,
        position.en_passant,
    )
    if status.is_over:
        won = winner(status, position.side_to_move)
        outcome = f"{str(won).capitalize()} wins" if won is not None else "Draw"
        print(repr(position.board))
        print(f"\nGame over: {status.name.lower()}. {outcome}.")
        return 0

    _LOGGER.info("Searching %s to depth %d", position.side_to_move, limits.max_depth)
    result = NegamaxEngine().search(position, limits)
    print(format_report(position, result, args.top))
    return 0


if __name__ == "__main__":
    sys.exit(main())
