"""Corners of a 2x2x2 with DBL held in place, for search over U, F and R turns only."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from twisty_engine.core.coords import (
    decode_orientation,
    decode_permutation,
    orientation_coordinate,
    permutation_coordinate,
)
from twisty_engine.core.faces import Face
from twisty_engine.pieces.corners import CornerOrientation, CornerPermutation, CornerSticker

logger = logging.getLogger(__name__)

FIXED_FACES = (Face.U, Face.F, Face.R)

# DBL is the last permutation value, so the first seven keep their indices.
FIXED_PERMUTATIONS = tuple(CornerPermutation)[:7]


def _check_face(face: Face) -> int:
    try:
        return FIXED_FACES.index(face)
    except ValueError as e:
        raise ValueError(f"face must be one of U, F, R (got {face.name})") from e


@dataclass(slots=True)
class CornersFixed:
    permutation: list[CornerPermutation] = field(default_factory=lambda: list(FIXED_PERMUTATIONS))
    orientation: list[CornerOrientation] = field(
        default_factory=lambda: [CornerOrientation.GOOD] * 7
    )

    NUM_PERMUTATION_COORDINATES = math.factorial(7)
    NUM_ORIENTATION_COORDINATES = 3**6
    NUM_COORDINATES = NUM_PERMUTATION_COORDINATES * NUM_ORIENTATION_COORDINATES

    @classmethod
    def from_coordinates(cls, permutation: int, orientation: int) -> CornersFixed:
        return cls(
            permutation=[CornerPermutation(p) for p in decode_permutation(permutation, 7)],
            orientation=[CornerOrientation(o) for o in decode_orientation(orientation, 7, 3)],
        )

    @classmethod
    def from_coordinate(cls, coordinate: int) -> CornersFixed:
        if not (0 <= coordinate < cls.NUM_COORDINATES):
            raise ValueError("fixed corner coordinate out of range")
        p, o = divmod(coordinate, cls.NUM_ORIENTATION_COORDINATES)
        return cls.from_coordinates(p, o)

    def copy(self) -> CornersFixed:
        return CornersFixed(list(self.permutation), list(self.orientation))

    def at(self, position: CornerSticker) -> CornerSticker:
        slot = position.permutation()
        if slot == CornerPermutation.DBL:
            return position
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
        _check_face(face)
        self.cycle(CornerSticker.face_cycle(face), count)

    def are_solved(self) -> bool:
        return self.permutation == list(FIXED_PERMUTATIONS) and all(
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

    def coords(self) -> CornerCoordsFixed:
        return CornerCoordsFixed(self.permutation_coordinate(), self.orientation_coordinate())


@dataclass(frozen=True, slots=True)
class CornerCoordsFixed:
    permutation: int
    orientation: int

    def are_solved(self) -> bool:
        return self.permutation == 0 and self.orientation == 0

    def combined(self) -> int:
        return self.permutation * CornersFixed.NUM_ORIENTATION_COORDINATES + self.orientation

    def to_corners(self) -> CornersFixed:
        return CornersFixed.from_coordinates(self.permutation, self.orientation)


@dataclass(slots=True)
class CornerCoordsMoveTableFixed:
    """Coordinate transitions for every (U/F/R, 1..3) turn.

    Indexed as table[coordinate][face index][count - 1].
    """

    permutation: list[list[list[int]]]
    orientation: list[list[list[int]]]

    def __init__(self):
        self.permutation = [
            self._row(CornersFixed.from_coordinates(c, 0), CornersFixed.permutation_coordinate)
            for c in range(CornersFixed.NUM_PERMUTATION_COORDINATES)
        ]
        self.orientation = [
            self._row(CornersFixed.from_coordinates(0, c), CornersFixed.orientation_coordinate)
            for c in range(CornersFixed.NUM_ORIENTATION_COORDINATES)
        ]
        logger.info(
            "built fixed-corner move table: %d permutation x %d orientation coordinates",
            len(self.permutation),
            len(self.orientation),
        )

    @staticmethod
    def _row(start: CornersFixed, encode) -> list[list[int]]:
        row = []
        for face in FIXED_FACES:
            by_count = []
            for count in (1, 2, 3):
                corners = start.copy()
                corners.rotate_face(face, count)
                by_count.append(encode(corners))
            row.append(by_count)
        return row

    def rotate_face(self, coords: CornerCoordsFixed, face: Face, count: int) -> CornerCoordsFixed:
        face_index = _check_face(face)
        count %= 4
        if count == 0:
            return coords
        return CornerCoordsFixed(
            permutation=self.permutation[coords.permutation][face_index][count - 1],
            orientation=self.orientation[coords.orientation][face_index][count - 1],
        )
