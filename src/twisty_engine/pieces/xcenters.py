from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from twisty_engine.core.coords import decode_permutation, permutation_coordinate, sticker_cycle
from twisty_engine.core.faces import Face
from twisty_engine.pieces.corners import CornerSticker


@dataclass(slots=True)
class XCenters:
    """One ring of 24 X-center pieces, indexed by corner sticker slot."""

    permutation: list[CornerSticker] = field(default_factory=lambda: list(CornerSticker))

    @classmethod
    def from_permutation_coordinate(cls, coordinate: int) -> XCenters:
        return cls([CornerSticker(p) for p in decode_permutation(coordinate, 24)])

    def copy(self) -> XCenters:
        return XCenters(list(self.permutation))

    def at(self, position: CornerSticker) -> CornerSticker:
        return self.permutation[position]

    def cycle(self, positions: Sequence[CornerSticker], count: int) -> None:
        sticker_cycle(self.permutation, positions, count)

    def rotate_face(self, face: Face, count: int) -> None:
        self.cycle(CornerSticker.face_cycle(face), count)

    def are_solved(self) -> bool:
        return all(p.color() == s.color() for s, p in zip(CornerSticker, self.permutation))

    def are_solved_supercube(self) -> bool:
        return self.permutation == list(CornerSticker)

    def permutation_coordinate(self) -> int:
        return permutation_coordinate(self.permutation)
