from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from twisty_engine.core.coords import decode_permutation, permutation_coordinate, sticker_cycle
from twisty_engine.core.faces import Face
from twisty_engine.pieces.edges import EdgeSticker


@dataclass(slots=True)
class TCenters:
    """One ring of 24 T-center pieces (odd cubes only), indexed by edge sticker slot."""

    permutation: list[EdgeSticker] = field(default_factory=lambda: list(EdgeSticker))

    @classmethod
    def from_permutation_coordinate(cls, coordinate: int) -> TCenters:
        return cls([EdgeSticker(p) for p in decode_permutation(coordinate, 24)])

    def copy(self) -> TCenters:
        return TCenters(list(self.permutation))

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
