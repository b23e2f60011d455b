from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from twisty_engine.core.coords import decode_permutation, permutation_coordinate, sticker_cycle
from twisty_engine.core.faces import Face, Handedness
from twisty_engine.pieces.edges import EdgeSticker


class WingSticker(IntEnum):
    """Wing stickers; 2k and 2k + 1 are the left and right wing next to edge sticker k."""

    UBR = 0
    BUR = 1
    URF = 2
    RUF = 3
    UFL = 4
    FUL = 5
    ULB = 6
    LUB = 7
    LUF = 8
    ULF = 9
    LFD = 10
    FLD = 11
    LDB = 12
    DLB = 13
    LBU = 14
    BLU = 15
    FUR = 16
    UFR = 17
    FRD = 18
    RFD = 19
    FDL = 20
    DFL = 21
    FLU = 22
    LFU = 23
    RUB = 24
    URB = 25
    RBD = 26
    BRD = 27
    RDF = 28
    DRF = 29
    RFU = 30
    FRU = 31
    BUL = 32
    UBL = 33
    BLD = 34
    LBD = 35
    BDR = 36
    DBR = 37
    BRU = 38
    RBU = 39
    DFR = 40
    FDR = 41
    DRB = 42
    RDB = 43
    DBL = 44
    BDL = 45
    DLF = 46
    LDF = 47

    @classmethod
    def from_permutation_and_handedness_ignoring_orientation(
        cls, permutation: EdgeSticker, handedness: Handedness
    ) -> WingSticker:
        return cls(permutation * 2 + handedness)

    @classmethod
    def from_permutation_and_handedness_considering_orientation(
        cls, permutation: EdgeSticker, handedness: Handedness
    ) -> WingSticker:
        """The wing sticker lying on `permutation`'s face, on the given side of it."""
        return _BY_EDGE_STICKER[permutation][handedness]

    def permutation(self) -> EdgeSticker:
        """Edge sticker slot this wing is indexed by (not necessarily the face it lies on)."""
        return EdgeSticker(self // 2)

    def handedness(self) -> Handedness:
        return Handedness(self % 2)

    def edge_sticker_considering_handedness(self) -> EdgeSticker:
        if self.handedness() == Handedness.LEFT:
            return self.permutation()
        return self.permutation().flipped()

    def color(self) -> Face:
        return self.edge_sticker_considering_handedness().color()

    def lh(self) -> WingSticker:
        return WingSticker(self & ~1)

    def rh(self) -> WingSticker:
        return WingSticker(self | 1)

    def with_handedness(self, handedness: Handedness) -> WingSticker:
        return self.lh() if handedness == Handedness.LEFT else self.rh()


# Per edge sticker: the wing on its face to the left and to the right.
_BY_EDGE_STICKER: dict[EdgeSticker, tuple[WingSticker, WingSticker]] = {
    EdgeSticker.UB: (WingSticker.UBR, WingSticker.UBL),
    EdgeSticker.UR: (WingSticker.URF, WingSticker.URB),
    EdgeSticker.UF: (WingSticker.UFL, WingSticker.UFR),
    EdgeSticker.UL: (WingSticker.ULB, WingSticker.ULF),
    EdgeSticker.LU: (WingSticker.LUF, WingSticker.LUB),
    EdgeSticker.LF: (WingSticker.LFD, WingSticker.LFU),
    EdgeSticker.LD: (WingSticker.LDB, WingSticker.LDF),
    EdgeSticker.LB: (WingSticker.LBU, WingSticker.LBD),
    EdgeSticker.FU: (WingSticker.FUR, WingSticker.FUL),
    EdgeSticker.FR: (WingSticker.FRD, WingSticker.FRU),
    EdgeSticker.FD: (WingSticker.FDL, WingSticker.FDR),
    EdgeSticker.FL: (WingSticker.FLU, WingSticker.FLD),
    EdgeSticker.RU: (WingSticker.RUB, WingSticker.RUF),
    EdgeSticker.RB: (WingSticker.RBD, WingSticker.RBU),
    EdgeSticker.RD: (WingSticker.RDF, WingSticker.RDB),
    EdgeSticker.RF: (WingSticker.RFU, WingSticker.RFD),
    EdgeSticker.BU: (WingSticker.BUL, WingSticker.BUR),
    EdgeSticker.BL: (WingSticker.BLD, WingSticker.BLU),
    EdgeSticker.BD: (WingSticker.BDR, WingSticker.BDL),
    EdgeSticker.BR: (WingSticker.BRU, WingSticker.BRD),
    EdgeSticker.DF: (WingSticker.DFR, WingSticker.DFL),
    EdgeSticker.DR: (WingSticker.DRB, WingSticker.DRF),
    EdgeSticker.DB: (WingSticker.DBL, WingSticker.DBR),
    EdgeSticker.DL: (WingSticker.DLF, WingSticker.DLB),
}


@dataclass(slots=True)
class Wings:
    """One ring of 24 wing pieces, indexed by the edge sticker slot they occupy."""

    permutation: list[EdgeSticker] = field(default_factory=lambda: list(EdgeSticker))

    @classmethod
    def from_permutation_coordinate(cls, coordinate: int) -> Wings:
        return cls([EdgeSticker(p) for p in decode_permutation(coordinate, 24)])

    def copy(self) -> Wings:
        return Wings(list(self.permutation))

    def at(self, position: WingSticker) -> WingSticker:
        piece = self.permutation[position.permutation()]
        return WingSticker.from_permutation_and_handedness_ignoring_orientation(
            piece, position.handedness()
        )

    def cycle(self, positions: Sequence[EdgeSticker], count: int) -> None:
        sticker_cycle(self.permutation, positions, count)

    def rotate_face(self, face: Face, count: int) -> None:
        cycle = EdgeSticker.face_cycle(face)
        self.cycle(cycle, count)
        self.cycle(EdgeSticker.flipped_cycle(cycle), count)

    def are_solved(self) -> bool:
        return self.permutation == list(EdgeSticker)

    def permutation_coordinate(self) -> int:
        return permutation_coordinate(self.permutation)
