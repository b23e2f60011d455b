from __future__ import annotations

from enum import IntEnum


class Face(IntEnum):
    U = 0
    L = 1
    F = 2
    R = 3
    B = 4
    D = 5

    def opposite(self) -> Face:
        return _OPPOSITES[self]

    def neighbors(self) -> tuple[Face, Face, Face, Face]:
        """The four adjacent faces, clockwise when looking at this face."""
        return _NEIGHBORS[self]

    def is_parallel(self, other: Face) -> bool:
        return self == other or self == other.opposite()

    def cross_rh(self, other: Face) -> Face | None:
        """Right-handed cross product of two adjacent faces (None if parallel)."""
        if self.is_parallel(other):
            return None
        return _CROSS[self][other]

    def cross_lh(self, other: Face) -> Face | None:
        if self.is_parallel(other):
            return None
        return _CROSS[other][self]


_OPPOSITES = (Face.D, Face.R, Face.B, Face.L, Face.F, Face.U)

_NEIGHBORS = (
    (Face.B, Face.R, Face.F, Face.L),
    (Face.U, Face.F, Face.D, Face.B),
    (Face.U, Face.R, Face.D, Face.L),
    (Face.U, Face.B, Face.D, Face.F),
    (Face.U, Face.L, Face.D, Face.R),
    (Face.F, Face.R, Face.B, Face.L),
)

# Diagonal and opposite entries are never read.
_CROSS = (
    (Face.U, Face.F, Face.R, Face.B, Face.L, Face.U),
    (Face.B, Face.L, Face.U, Face.L, Face.D, Face.F),
    (Face.L, Face.D, Face.F, Face.U, Face.F, Face.R),
    (Face.F, Face.R, Face.D, Face.R, Face.U, Face.B),
    (Face.R, Face.U, Face.B, Face.D, Face.B, Face.L),
    (Face.D, Face.B, Face.L, Face.F, Face.R, Face.D),
)


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2

    def face(self) -> Face:
        """The face a positive quarter turn about this axis turns like."""
        return (Face.R, Face.U, Face.F)[self]


class Handedness(IntEnum):
    """Which side of a wing or oblique pair a sticker belongs to."""

    LEFT = 0
    RIGHT = 1


def rotated_face(face: Face, axis: Axis, count: int) -> Face:
    """Face that takes the place of `face` after `count` quarter turns of the whole cube about `axis`."""
    axis_face = axis.face()
    count %= 4
    if count == 0:
        return face
    if count == 1:
        crossed = face.cross_lh(axis_face)
        return face if crossed is None else crossed
    if count == 2:
        return face if face.is_parallel(axis_face) else face.opposite()
    crossed = face.cross_rh(axis_face)
    return face if crossed is None else crossed
