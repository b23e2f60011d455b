from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from twisty_engine.core.coords import decode_permutation, permutation_coordinate, sticker_cycle
from twisty_engine.core.faces import Face
from twisty_engine.pieces.edges import EdgeSticker


@dataclass(slots=True)
class Obliques:
    """24 oblique pieces of one handedness, indexed by edge sticker slot."""

    permutation: list[EdgeSticker] = field(default_factory=lambda: list(EdgeSticker))

    @classmethod
    def from_permutation_coordinate(cls, coordinate: int) -> Obliques:
        return cls([EdgeSticker(p) for p in decode_permutation(coordinate, 24)])

    def copy(self) -> Obliques:
        return Obliques(list(self.permutation))

    def at(self, position: EdgeSticker) -> EdgeSticker:
        return self.permutation[position]

    def cycle(self, positions: Sequence[EdgeSticker], count: int) -> None:
        sticker_cycle(self.permutation, positions, count)

    def rotate_face(self, face: Face, count: int) -> None:
        self.cycle(EdgeSticker.face_cycle(face), count)

    def are_solved(self) -> bool:
        return all(p.color() == s.color() for s, p in zip(EdgeSticker, self.permutation))

    def are_solved_supercube(self) -> bool:
        return self.permutation == list(EdgeSticker)

    def permutation_coordinate(self) -> int:
        return permutation_coordinate(self.permutation)


@dataclass(slots=True)
class ObliquesPair:
    left: Obliques = field(default_factory=Obliques)
    right: Obliques = field(default_factory=Obliques)

    def copy(self) -> ObliquesPair:
        return ObliquesPair(self.left.copy(), self.right.copy())

    def rotate_face(self, face: Face, count: int) -> None:
        self.left.rotate_face(face, count)
        self.right.rotate_face(face, count)

    def are_solved(self) -> bool:
        return self.left.are_solved() and self.right.are_solved()

    def are_solved_supercube(self) -> bool:
        return self.left.are_solved_supercube() and self.right.are_solved_supercube()
