"""Chess engine package: evaluation, move simulation and negamax search.

The Qt worker lives in :mod:`chessai.engine.qt_bridge` and is imported
explicitly so the search stays usable without a Qt runtime.
"""

from chessai.engine.evaluation import (
    PIECE_SQUARE_TABLES,
    PIECE_VALUES,
    evaluate,
    material_value,
    positional_value,
)
from chessai.engine.negamax_search import (
    INF_SCORE,
    MATE_SCORE,
    NegamaxEngine,
    find_best_move,
    negamax,
)
from chessai.engine.search import (
    IEngine,
    LegalMoveSource,
    ScoredMove,
    SearchLimits,
    SearchResult,
)
from chessai.engine.simulation import SimulatedMove, apply_move

__all__ = [
    "INF_SCORE",
    "IEngine",
    "LegalMoveSource",
    "MATE_SCORE",
    "NegamaxEngine",
    "PIECE_SQUARE_TABLES",
    "PIECE_VALUES",
    "ScoredMove",
    "SearchLimits",
    "SearchResult",
    "SimulatedMove",
    "apply_move",
    "evaluate",
    "find_best_move",
    "material_value",
    "negamax",
    "positional_value",
]
