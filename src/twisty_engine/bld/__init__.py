"""twisty_engine.bld

Blindfolded memorization over the piece categories of a cube.
"""

from .buffers import Buffers, CubeMemo, LayerMemo, memo_cube
from .execute import execute_memo
from .memo import Memo, find_unsolved_piece, find_unsolved_piece_on_face, memo, memo_centers
from .pieces import (
    CornerPieces,
    EdgePieces,
    FixedCornerPieces,
    ObliquePieces,
    Pieces,
    TCenterPieces,
    WingPieces,
    XCenterPieces,
    pieces_for,
)

__all__ = [
    "Buffers",
    "CubeMemo",
    "LayerMemo",
    "memo_cube",
    "execute_memo",
    "Memo",
    "find_unsolved_piece",
    "find_unsolved_piece_on_face",
    "memo",
    "memo_centers",
    "CornerPieces",
    "EdgePieces",
    "FixedCornerPieces",
    "ObliquePieces",
    "Pieces",
    "TCenterPieces",
    "WingPieces",
    "XCenterPieces",
    "pieces_for",
]
