"""Per-category buffers and the memo of a whole cube."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from twisty_engine.bld.memo import Memo, memo, memo_centers
from twisty_engine.core.engine import Cube
from twisty_engine.pieces.corners import CornerSticker
from twisty_engine.pieces.edges import EdgeSticker
from twisty_engine.pieces.wings import WingSticker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Buffers:
    edges: EdgeSticker = EdgeSticker.UF
    corners: CornerSticker = CornerSticker.UFR
    wings: WingSticker = WingSticker.UFR
    xcenters: CornerSticker = CornerSticker.UFR
    tcenters: EdgeSticker = EdgeSticker.UF
    left_obliques: EdgeSticker = EdgeSticker.UF
    right_obliques: EdgeSticker = EdgeSticker.UF

    @classmethod
    def from_indices(
        cls,
        edges: int,
        corners: int,
        wings: int,
        xcenters: int,
        tcenters: int,
        left_obliques: int,
        right_obliques: int,
    ) -> Buffers:
        """Build from sticker indices (the numbers a lettering scheme assigns letters to)."""
        try:
            return cls(
                EdgeSticker(edges),
                CornerSticker(corners),
                WingSticker(wings),
                CornerSticker(xcenters),
                EdgeSticker(tcenters),
                EdgeSticker(left_obliques),
                EdgeSticker(right_obliques),
            )
        except ValueError as e:
            raise ValueError(f"buffer index out of range: {e}") from e


@dataclass(slots=True)
class LayerMemo:
    wings: Memo
    xcenters: Memo
    # None on even cubes, which have no T-centers to solve.
    tcenters: Memo | None = None
    # One (left, right) pair per oblique orbit of the layer.
    obliques: list[tuple[Memo, Memo]] = field(default_factory=list)


@dataclass(slots=True)
class CubeMemo:
    edges: Memo | None = None
    corners: Memo | None = None
    layers: list[LayerMemo] = field(default_factory=list)


def memo_cube(cube: Cube, buffers: Buffers | None = None) -> CubeMemo:
    """Memorize every category of `cube` that has pieces to solve."""
    if buffers is None:
        buffers = Buffers()
    out = CubeMemo()
    if cube.n % 2 == 1:
        out.edges = memo(cube.edges, buffers.edges)
    if cube.n > 1:
        out.corners = memo(cube.corners, buffers.corners)
    for layer in cube.layers:
        out.layers.append(
            LayerMemo(
                wings=memo(layer.wings, buffers.wings),
                xcenters=memo_centers(layer.xcenters, buffers.xcenters),
                tcenters=memo_centers(layer.tcenters, buffers.tcenters) if cube.n % 2 == 1 else None,
                obliques=[
                    (
                        memo_centers(pair.left, buffers.left_obliques),
                        memo_centers(pair.right, buffers.right_obliques),
                    )
                    for pair in layer.obliques
                ],
            )
        )
    logger.debug("memorized %dx%dx%d cube (%d layers)", cube.n, cube.n, cube.n, len(cube.layers))
    return out
