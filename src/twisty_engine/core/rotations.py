from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .engine import Cube
from .faces import Axis, Face, rotated_face
from twisty_engine.pieces.edges import EdgeSticker

# Axis a turn of each face happens about, and whether it runs against the axis.
_FACE_AXES: dict[Face, tuple[Axis, bool]] = {
    Face.R: (Axis.X, False),
    Face.L: (Axis.X, True),
    Face.U: (Axis.Y, False),
    Face.D: (Axis.Y, True),
    Face.F: (Axis.Z, False),
    Face.B: (Axis.Z, True),
}


def map_orientation(orientation: EdgeSticker, face: Face) -> Face:
    """Physical face that is visually at `face` when `orientation` sits at UF."""
    up = orientation.color()
    front = orientation.flipped().color()
    if face == Face.U:
        return up
    if face == Face.F:
        return front
    if face == Face.L:
        return up.cross_lh(front)
    if face == Face.R:
        return up.cross_rh(front)
    if face == Face.B:
        return front.opposite()
    return up.opposite()


def orientation_after_move(
    n: int, orientation: EdgeSticker, face: Face, layers: range, count: int
) -> EdgeSticker:
    """Orientation after turning `layers` of the physical `face`.

    Only a move reaching past the middle moves the visual frame; even cubes have
    no fixed center, so their frame is always reset to UF.
    """
    if n % 2 == 0:
        return EdgeSticker.UF
    if layers.stop <= n // 2:
        return orientation
    axis, invert = _FACE_AXES[face]
    if invert:
        count = 4 - count % 4
    return EdgeSticker.from_faces(
        rotated_face(map_orientation(orientation, Face.U), axis, count),
        rotated_face(map_orientation(orientation, Face.F), axis, count),
    )


@dataclass(frozen=True, slots=True)
class Move:
    """Turn `count` quarter turns of depth layers [start, stop) seen from `face`."""

    n: int
    face: Face
    start: int
    stop: int
    count: int

    @property
    def layers(self) -> range:
        return range(self.start, self.stop)

    def inverse(self) -> Move:
        return Move(self.n, self.face, self.start, self.stop, 4 - self.count % 4)

    def is_rotation(self) -> bool:
        return self.start == 0 and self.stop == self.n


def rotate_from(n: int, orientation: EdgeSticker) -> list[Move]:
    """Whole-cube rotations (x, then y, then z) taking the UF frame to `orientation`."""
    moves = []
    for face, count in zip((Face.R, Face.U, Face.F), orientation.xyz()):
        if count > 0:
            moves.append(Move(n, face, 0, n, count))
    return moves


@dataclass(slots=True)
class RotatedCube:
    """A cube seen from a visual frame that whole-cube rotations move.

    `orientation` is the physical edge sticker currently shown at UF. The wrapped
    cube is mutated in place.
    """

    cube: Cube
    orientation: EdgeSticker = EdgeSticker.UF

    def rotate(self, face: Face, layers: range, count: int) -> None:
        face = map_orientation(self.orientation, face)
        self.orientation = orientation_after_move(self.cube.n, self.orientation, face, layers, count)

        if layers.start != 0:
            self.cube.rotate(face, range(0, layers.stop), count)
            self.cube.rotate(face, range(0, layers.start), 4 - count % 4)
        else:
            self.cube.rotate(face, layers, count)

    def apply(self, moves: Iterable[Move]) -> None:
        for move in moves:
            if move.n != self.cube.n:
                raise ValueError(f"move is for a {move.n}x{move.n}x{move.n} cube, not n={self.cube.n}")
            self.rotate(move.face, move.layers, move.count)
