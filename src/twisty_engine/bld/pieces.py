"""Uniform view of one piece category for the memo algorithms.

A category is described by its stickers (what a position looks like), its
permutation values (which piece is which) and, for corners and edges, an
orientation group. Categories without orientation use the sticker itself as the
permutation value and `None` as the orientation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from twisty_engine.core.faces import Face, Handedness
from twisty_engine.pieces.corners import CornerOrientation, CornerPermutation, CornerSticker, Corners
from twisty_engine.pieces.corners_fixed import CornersFixed
from twisty_engine.pieces.edges import EdgeOrientation, EdgePermutation, EdgeSticker, Edges
from twisty_engine.pieces.obliques import Obliques
from twisty_engine.pieces.tcenters import TCenters
from twisty_engine.pieces.wings import Wings, WingSticker
from twisty_engine.pieces.xcenters import XCenters

Sticker = Any
Permutation = Hashable


class Pieces(ABC):
    """One category's state plus the tables memo needs to walk it."""

    __slots__ = ()

    # Every sticker, in index order.
    STICKERS: ClassVar[tuple]
    # Piece identities, in the order fresh cycles are started from.
    PERMUTATIONS: ClassVar[tuple]
    GOOD: ClassVar[Any] = None
    NUM_ORIENTATIONS: ClassVar[int] = 1

    @abstractmethod
    def at(self, sticker: Sticker) -> Sticker:
        """Sticker currently sitting at position `sticker`."""

    @abstractmethod
    def cycle(self, positions: Sequence[Sticker], count: int) -> None:
        """Move the piece at positions[i] to positions[i + count]."""

    @classmethod
    def sticker(cls, permutation: Permutation, orientation: Any = None) -> Sticker:
        return permutation

    @classmethod
    def sticker_permutation(cls, sticker: Sticker) -> Permutation:
        return sticker

    @classmethod
    def sticker_orientation(cls, sticker: Sticker) -> Any:
        return None

    @classmethod
    @abstractmethod
    def stickers_on_face(cls, face: Face) -> tuple:
        """The four stickers of this category on `face`, in face-cycle order."""

    @classmethod
    def is_oriented(cls) -> bool:
        return cls.NUM_ORIENTATIONS > 1


@dataclass(slots=True)
class CornerPieces(Pieces):
    state: Corners

    STICKERS = tuple(CornerSticker)
    PERMUTATIONS = tuple(CornerPermutation)
    GOOD = CornerOrientation.GOOD
    NUM_ORIENTATIONS = 3

    def at(self, sticker: CornerSticker) -> CornerSticker:
        return self.state.at(sticker)

    def cycle(self, positions: Sequence[CornerSticker], count: int) -> None:
        self.state.cycle(positions, count)

    @classmethod
    def sticker(cls, permutation: CornerPermutation, orientation: CornerOrientation = GOOD) -> CornerSticker:
        return CornerSticker.from_permutation_and_orientation(permutation, orientation)

    @classmethod
    def sticker_permutation(cls, sticker: CornerSticker) -> CornerPermutation:
        return sticker.permutation()

    @classmethod
    def sticker_orientation(cls, sticker: CornerSticker) -> CornerOrientation:
        return sticker.orientation()

    @classmethod
    def stickers_on_face(cls, face: Face) -> tuple[CornerSticker, ...]:
        return CornerSticker.face_cycle(face)


@dataclass(slots=True)
class FixedCornerPieces(CornerPieces):
    """Corners of a fixed-DBL 2x2x2; DBL is never a target."""

    state: CornersFixed

    PERMUTATIONS = tuple(CornerPermutation)[:7]


@dataclass(slots=True)
class EdgePieces(Pieces):
    state: Edges

    STICKERS = tuple(EdgeSticker)
    PERMUTATIONS = tuple(EdgePermutation)
    GOOD = EdgeOrientation.GOOD
    NUM_ORIENTATIONS = 2

    def at(self, sticker: EdgeSticker) -> EdgeSticker:
        return self.state.at(sticker)

    def cycle(self, positions: Sequence[EdgeSticker], count: int) -> None:
        self.state.cycle(positions, count)

    @classmethod
    def sticker(cls, permutation: EdgePermutation, orientation: EdgeOrientation = GOOD) -> EdgeSticker:
        return EdgeSticker.from_permutation_and_orientation(permutation, orientation)

    @classmethod
    def sticker_permutation(cls, sticker: EdgeSticker) -> EdgePermutation:
        return sticker.permutation()

    @classmethod
    def sticker_orientation(cls, sticker: EdgeSticker) -> EdgeOrientation:
        return sticker.orientation()

    @classmethod
    def stickers_on_face(cls, face: Face) -> tuple[EdgeSticker, ...]:
        return EdgeSticker.face_cycle(face)


@dataclass(slots=True)
class WingPieces(Pieces):
    """Wings seen through their right-handed stickers.

    A wing piece is identified by the edge sticker slot it is indexed by; its
    target sticker is the right wing of that slot.
    """

    state: Wings

    STICKERS = tuple(WingSticker)
    PERMUTATIONS = tuple(EdgeSticker)

    def at(self, sticker: WingSticker) -> WingSticker:
        return self.state.at(sticker.rh())

    def cycle(self, positions: Sequence[WingSticker], count: int) -> None:
        self.state.cycle([s.permutation() for s in positions], count)

    @classmethod
    def sticker(cls, permutation: EdgeSticker, orientation: Any = None) -> WingSticker:
        return WingSticker.from_permutation_and_handedness_ignoring_orientation(
            permutation, Handedness.RIGHT
        )

    @classmethod
    def sticker_permutation(cls, sticker: WingSticker) -> EdgeSticker:
        return sticker.permutation()

    @classmethod
    def stickers_on_face(cls, face: Face) -> tuple[WingSticker, ...]:
        return tuple(cls.sticker(s) for s in EdgeSticker.face_cycle(face))


@dataclass(slots=True)
class XCenterPieces(Pieces):
    state: XCenters

    STICKERS = tuple(CornerSticker)
    PERMUTATIONS = tuple(CornerSticker)

    def at(self, sticker: CornerSticker) -> CornerSticker:
        return self.state.at(sticker)

    def cycle(self, positions: Sequence[CornerSticker], count: int) -> None:
        self.state.cycle(positions, count)

    @classmethod
    def stickers_on_face(cls, face: Face) -> tuple[CornerSticker, ...]:
        return CornerSticker.face_cycle(face)


@dataclass(slots=True)
class TCenterPieces(Pieces):
    state: TCenters

    STICKERS = tuple(EdgeSticker)
    PERMUTATIONS = tuple(EdgeSticker)

    def at(self, sticker: EdgeSticker) -> EdgeSticker:
        return self.state.at(sticker)

    def cycle(self, positions: Sequence[EdgeSticker], count: int) -> None:
        self.state.cycle(positions, count)

    @classmethod
    def stickers_on_face(cls, face: Face) -> tuple[EdgeSticker, ...]:
        return EdgeSticker.face_cycle(face)


@dataclass(slots=True)
class ObliquePieces(TCenterPieces):
    state: Obliques


_ADAPTERS: dict[type, type[Pieces]] = {
    Corners: CornerPieces,
    CornersFixed: FixedCornerPieces,
    Edges: EdgePieces,
    Wings: WingPieces,
    XCenters: XCenterPieces,
    TCenters: TCenterPieces,
    Obliques: ObliquePieces,
}


def pieces_for(state: object) -> Pieces:
    """Wrap a raw category state in its `Pieces` adapter (adapters pass through)."""
    if isinstance(state, Pieces):
        return state
    try:
        adapter = _ADAPTERS[type(state)]
    except KeyError as e:
        raise ValueError(f"no piece adapter for {type(state).__name__}") from e
    return adapter(state)
