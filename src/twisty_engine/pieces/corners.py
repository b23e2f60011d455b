from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from twisty_engine.core.coords import (
    decode_orientation,
    decode_permutation,
    orientation_coordinate,
    permutation_coordinate,
)
from twisty_engine.core.faces import Face


class CornerPermutation(IntEnum):
    UBL = 0
    UBR = 1
    UFR = 2
    UFL = 3
    DFL = 4
    DFR = 5
    DBR = 6
    DBL = 7


class CornerOrientation(IntEnum):
    """Twist of a corner; `+` composes twists and unary `-` inverts one."""

    GOOD = 0
    BAD_CW = 1
    BAD_CCW = 2

    def __add__(self, other: int) -> CornerOrientation:
        return CornerOrientation((int(self) + int(other)) % 3)

    def __neg__(self) -> CornerOrientation:
        return CornerOrientation(-int(self) % 3)


class CornerDirection(IntEnum):
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_RIGHT = 2
    BOTTOM_LEFT = 3


class CornerSticker(IntEnum):
    UBL = 0
    UBR = 1
    UFR = 2
    UFL = 3
    LUB = 4
    LUF = 5
    LDF = 6
    LDB = 7
    FUL = 8
    FUR = 9
    FDR = 10
    FDL = 11
    RUF = 12
    RUB = 13
    RDB = 14
    RDF = 15
    BUR = 16
    BUL = 17
    BDL = 18
    BDR = 19
    DFL = 20
    DFR = 21
    DBR = 22
    DBL = 23

    @classmethod
    def from_permutation_and_orientation(
        cls, permutation: CornerPermutation, orientation: CornerOrientation
    ) -> CornerSticker:
        return _STICKERS[permutation][orientation]

    @classmethod
    def from_face_and_direction(cls, face: Face, direction: CornerDirection) -> CornerSticker:
        return cls(face * 4 + direction)

    @classmethod
    def from_faces(cls, a: Face, b: Face, c: Face) -> CornerSticker:
        """Sticker on face `a` of the corner shared by faces a, b and c."""
        try:
            return _BY_FACES[(a, frozenset((b, c)))]
        except KeyError as e:
            raise ValueError(f"faces do not meet at a corner: {a.name}, {b.name}, {c.name}") from e

    def color(self) -> Face:
        return Face(self // 4)

    def direction(self) -> CornerDirection:
        return CornerDirection(self % 4)

    def permutation(self) -> CornerPermutation:
        return _PERMUTATIONS[self]

    def orientation(self) -> CornerOrientation:
        return _ORIENTATIONS[self]

    @staticmethod
    def face_cycle(face: Face) -> tuple[CornerSticker, ...]:
        """Corner stickers of a face, clockwise from the top-left one."""
        return tuple(CornerSticker.from_face_and_direction(face, d) for d in CornerDirection)

    @staticmethod
    def slice_center_cycle_lh(face: Face) -> tuple[CornerSticker, ...]:
        return tuple(
            CornerSticker.from_faces(a, face, a.cross_lh(face)) for a in face.neighbors()
        )

    @staticmethod
    def slice_center_cycle_rh(face: Face) -> tuple[CornerSticker, ...]:
        return tuple(
            CornerSticker.from_faces(a, face, a.cross_rh(face)) for a in face.neighbors()
        )


# Per permutation: stickers for GOOD, BAD_CW, BAD_CCW.
_STICKERS: dict[CornerPermutation, tuple[CornerSticker, CornerSticker, CornerSticker]] = {
    CornerPermutation.UBL: (CornerSticker.UBL, CornerSticker.LUB, CornerSticker.BUL),
    CornerPermutation.UBR: (CornerSticker.UBR, CornerSticker.BUR, CornerSticker.RUB),
    CornerPermutation.UFR: (CornerSticker.UFR, CornerSticker.RUF, CornerSticker.FUR),
    CornerPermutation.UFL: (CornerSticker.UFL, CornerSticker.FUL, CornerSticker.LUF),
    CornerPermutation.DFL: (CornerSticker.DFL, CornerSticker.LDF, CornerSticker.FDL),
    CornerPermutation.DFR: (CornerSticker.DFR, CornerSticker.FDR, CornerSticker.RDF),
    CornerPermutation.DBR: (CornerSticker.DBR, CornerSticker.RDB, CornerSticker.BDR),
    CornerPermutation.DBL: (CornerSticker.DBL, CornerSticker.BDL, CornerSticker.LDB),
}

_PERMUTATIONS: dict[CornerSticker, CornerPermutation] = {}
_ORIENTATIONS: dict[CornerSticker, CornerOrientation] = {}
for _p, _stickers in _STICKERS.items():
    for _o, _s in zip(CornerOrientation, _stickers):
        _PERMUTATIONS[_s] = _p
        _ORIENTATIONS[_s] = _o

_BY_FACES: dict[tuple[Face, frozenset[Face]], CornerSticker] = {
    (Face[s.name[0]], frozenset((Face[s.name[1]], Face[s.name[2]]))): s for s in CornerSticker
}

if len(_PERMUTATIONS) != 24 or len(_BY_FACES) != 24:
    raise AssertionError("corner sticker tables are not bijective")


@dataclass(slots=True)
class Corners:
    """The eight corner pieces: where each one is and how it is twisted."""

    permutation: list[CornerPermutation] = field(default_factory=lambda: list(CornerPermutation))
    orientation: list[CornerOrientation] = field(
        default_factory=lambda: [CornerOrientation.GOOD] * 8
    )

    NUM_PERMUTATION_COORDINATES = math.factorial(8)
    NUM_ORIENTATION_COORDINATES = 3**7
    NUM_COORDINATES = NUM_PERMUTATION_COORDINATES * NUM_ORIENTATION_COORDINATES

    @classmethod
    def from_coordinates(cls, permutation: int, orientation: int) -> Corners:
        return cls(
            permutation=[CornerPermutation(p) for p in decode_permutation(permutation, 8)],
            orientation=[CornerOrientation(o) for o in decode_orientation(orientation, 8, 3)],
        )

    @classmethod
    def from_coordinate(cls, coordinate: int) -> Corners:
        if not (0 <= coordinate < cls.NUM_COORDINATES):
            raise ValueError("corner coordinate out of range")
        p, o = divmod(coordinate, cls.NUM_ORIENTATION_COORDINATES)
        return cls.from_coordinates(p, o)

    def copy(self) -> Corners:
        return Corners(list(self.permutation), list(self.orientation))

    def at(self, position: CornerSticker) -> CornerSticker:
        """Sticker currently sitting at `position`."""
        slot = position.permutation()
        return CornerSticker.from_permutation_and_orientation(
            self.permutation[slot], self.orientation[slot] + position.orientation()
        )

    def cycle(self, positions: Sequence[CornerSticker], count: int) -> None:
        old_permutation = list(self.permutation)
        old_orientation = list(self.orientation)
        k = len(positions)
        for i in range(k):
            src = positions[i]
            dst = positions[(i + count) % k]
            self.permutation[dst.permutation()] = old_permutation[src.permutation()]
            self.orientation[dst.permutation()] = (
                old_orientation[src.permutation()] + src.orientation() + -dst.orientation()
            )

    def rotate_face(self, face: Face, count: int) -> None:
        self.cycle(CornerSticker.face_cycle(face), count)

    def are_solved(self) -> bool:
        return self.permutation == list(CornerPermutation) and all(
            o == CornerOrientation.GOOD for o in self.orientation
        )

    def permutation_coordinate(self) -> int:
        return permutation_coordinate(self.permutation)

    def orientation_coordinate(self) -> int:
        return orientation_coordinate(self.orientation, 3)

    def coordinate(self) -> int:
        return (
            self.permutation_coordinate() * self.NUM_ORIENTATION_COORDINATES
            + self.orientation_coordinate()
        )
