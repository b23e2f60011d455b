"""Twisty Engine package."""

from .bld import Buffers, CubeMemo, Memo, execute_memo, memo, memo_centers, memo_cube
from .core.engine import Cube, CubeLayer
from .core.faces import Axis, Face, Handedness
from .core.rotations import Move, RotatedCube, orientation_after_move, rotate_from
from .explorer.pair_frequencies import pair_frequencies

__all__ = [
    "Axis",
    "Buffers",
    "Cube",
    "CubeLayer",
    "CubeMemo",
    "Face",
    "Handedness",
    "Memo",
    "Move",
    "RotatedCube",
    "execute_memo",
    "memo",
    "memo_centers",
    "memo_cube",
    "orientation_after_move",
    "pair_frequencies",
    "rotate_from",
]
