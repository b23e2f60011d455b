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


class EdgePermutation(IntEnum):
    UB = 0
    UR = 1
    UF = 2
    UL = 3
    FR = 4
    FL = 5
    BL = 6
    BR = 7
    DF = 8
    DR = 9
    DB = 10
    DL = 11


class EdgeOrientation(IntEnum):
    """Flip of an edge; `^` composes flips."""

    GOOD = 0
    BAD = 1

    def __xor__(self, other: int) -> EdgeOrientation:
        return EdgeOrientation(int(self) ^ int(other))

    def flipped(self) -> EdgeOrientation:
        return EdgeOrientation(1 - int(self))


class EdgeDirection(IntEnum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


class EdgeSticker(IntEnum):
    UB = 0
    UR = 1
    UF = 2
    UL = 3
    LU = 4
    LF = 5
    LD = 6
    LB = 7
    FU = 8
    FR = 9
    FD = 10
    FL = 11
    RU = 12
    RB = 13
    RD = 14
    RF = 15
    BU = 16
    BL = 17
    BD = 18
    BR = 19
    DF = 20
    DR = 21
    DB = 22
    DL = 23

    @classmethod
    def from_permutation_and_orientation(
        cls, permutation: EdgePermutation, orientation: EdgeOrientation
    ) -> EdgeSticker:
        return _STICKERS[permutation][orientation]

    @classmethod
    def from_face_and_direction(cls, face: Face, direction: EdgeDirection) -> EdgeSticker:
        return cls(face * 4 + direction)

    @classmethod
    def from_faces(cls, a: Face, b: Face) -> EdgeSticker:
        """Sticker on face `a` of the edge shared by faces a and b."""
        if a.is_parallel(b):
            raise ValueError(f"faces do not share an edge: {a.name}, {b.name}")
        return _BY_FACES[(a, b)]

    def color(self) -> Face:
        return Face(self // 4)

    def direction(self) -> EdgeDirection:
        return EdgeDirection(self % 4)

    def permutation(self) -> EdgePermutation:
        return _PERMUTATIONS[self]

    def orientation(self) -> EdgeOrientation:
        return _ORIENTATIONS[self]

    def with_orientation(self, orientation: EdgeOrientation) -> EdgeSticker:
        return _STICKERS[self.permutation()][orientation]

    def flipped(self) -> EdgeSticker:
        """The other sticker of the same edge."""
        return self.with_orientation(self.orientation().flipped())

    def xyz(self) -> tuple[int, int, int]:
        """Quarter turns about x, then y, then z that bring UF to this orientation."""
        return _XYZ[self]

    @staticmethod
    def face_cycle(face: Face) -> tuple[EdgeSticker, ...]:
        return tuple(EdgeSticker.from_face_and_direction(face, d) for d in EdgeDirection)

    @staticmethod
    def flipped_cycle(cycle: Sequence[EdgeSticker]) -> tuple[EdgeSticker, ...]:
        return tuple(s.flipped() for s in cycle)

    @staticmethod
    def slice_center_cycle(face: Face) -> tuple[EdgeSticker, ...]:
        """Edge-sticker slots of the slice parallel to `face`, as seen on the neighbouring faces."""
        return EdgeSticker.flipped_cycle(EdgeSticker.face_cycle(face))

    @staticmethod
    def slice_wing_cycle_lh(face: Face) -> tuple[EdgeSticker, ...]:
        return tuple(EdgeSticker.from_faces(a, a.cross_lh(face)) for a in face.neighbors())

    @staticmethod
    def slice_wing_cycle_rh(face: Face) -> tuple[EdgeSticker, ...]:
        return tuple(EdgeSticker.from_faces(a, a.cross_rh(face)) for a in face.neighbors())


_STICKERS: dict[EdgePermutation, tuple[EdgeSticker, EdgeSticker]] = {
    p: (EdgeSticker[p.name], EdgeSticker[p.name[::-1]]) for p in EdgePermutation
}

_PERMUTATIONS: dict[EdgeSticker, EdgePermutation] = {}
_ORIENTATIONS: dict[EdgeSticker, EdgeOrientation] = {}
for _p, _stickers in _STICKERS.items():
    for _o, _s in zip(EdgeOrientation, _stickers):
        _PERMUTATIONS[_s] = _p
        _ORIENTATIONS[_s] = _o

_BY_FACES: dict[tuple[Face, Face], EdgeSticker] = {
    (Face[s.name[0]], Face[s.name[1]]): s for s in EdgeSticker
}

if len(_PERMUTATIONS) != 24 or len(_BY_FACES) != 24:
    raise AssertionError("edge sticker tables are not bijective")

_XYZ: dict[EdgeSticker, tuple[int, int, int]] = {
    EdgeSticker.UB: (0, 2, 0),
    EdgeSticker.UR: (0, 1, 0),
    EdgeSticker.UF: (0, 0, 0),
    EdgeSticker.UL: (0, 3, 0),
    EdgeSticker.LU: (3, 0, 1),
    EdgeSticker.LF: (0, 0, 1),
    EdgeSticker.LD: (1, 0, 1),
    EdgeSticker.LB: (0, 2, 3),
    EdgeSticker.FU: (3, 0, 2),
    EdgeSticker.FR: (0, 1, 1),
    EdgeSticker.FD: (1, 0, 0),
    EdgeSticker.FL: (0, 3, 3),
    EdgeSticker.RU: (3, 0, 3),
    EdgeSticker.RB: (0, 2, 1),
    EdgeSticker.RD: (1, 0, 3),
    EdgeSticker.RF: (0, 0, 3),
    EdgeSticker.BU: (3, 0, 0),
    EdgeSticker.BL: (0, 3, 1),
    EdgeSticker.BD: (1, 0, 2),
    EdgeSticker.BR: (0, 1, 3),
    EdgeSticker.DF: (0, 0, 2),
    EdgeSticker.DR: (0, 1, 2),
    EdgeSticker.DB: (2, 0, 0),
    EdgeSticker.DL: (0, 3, 2),
}


@dataclass(slots=True)
class Edges:
    """The twelve middle edges of an odd cube."""

    permutation: list[EdgePermutation] = field(default_factory=lambda: list(EdgePermutation))
    orientation: list[EdgeOrientation] = field(
        default_factory=lambda: [EdgeOrientation.GOOD] * 12
    )

    NUM_PERMUTATION_COORDINATES = math.factorial(12)
    NUM_ORIENTATION_COORDINATES = 2**11
    NUM_COORDINATES = NUM_PERMUTATION_COORDINATES * NUM_ORIENTATION_COORDINATES

    @classmethod
    def from_coordinates(cls, permutation: int, orientation: int) -> Edges:
        return cls(
            permutation=[EdgePermutation(p) for p in decode_permutation(permutation, 12)],
            orientation=[EdgeOrientation(o) for o in decode_orientation(orientation, 12, 2)],
        )

    @classmethod
    def from_coordinate(cls, coordinate: int) -> Edges:
        if not (0 <= coordinate < cls.NUM_COORDINATES):
            raise ValueError("edge coordinate out of range")
        p, o = divmod(coordinate, cls.NUM_ORIENTATION_COORDINATES)
        return cls.from_coordinates(p, o)

    def copy(self) -> Edges:
        return Edges(list(self.permutation), list(self.orientation))

    def at(self, position: EdgeSticker) -> EdgeSticker:
        slot = position.permutation()
        return EdgeSticker.from_permutation_and_orientation(
            self.permutation[slot], self.orientation[slot] ^ position.orientation()
        )

    def cycle(self, positions: Sequence[EdgeSticker], count: int) -> None:
        old_permutation = list(self.permutation)
        old_orientation = list(self.orientation)
        k = len(positions)
        for i in range(k):
            src = positions[i]
            dst = positions[(i + count) % k]
            self.permutation[dst.permutation()] = old_permutation[src.permutation()]
            self.orientation[dst.permutation()] = (
                old_orientation[src.permutation()] ^ src.orientation() ^ dst.orientation()
            )

    def rotate_face(self, face: Face, count: int) -> None:
        self.cycle(EdgeSticker.face_cycle(face), count)

    def are_solved(self) -> bool:
        return self.permutation == list(EdgePermutation) and all(
            o == EdgeOrientation.GOOD for o in self.orientation
        )

    def permutation_coordinate(self) -> int:
        return permutation_coordinate(self.permutation)

    def orientation_coordinate(self) -> int:
        return orientation_coordinate(self.orientation, 2)

    def coordinate(self) -> int:
        return (
            self.permutation_coordinate() * self.NUM_ORIENTATION_COORDINATES
            + self.orientation_coordinate()
        )
