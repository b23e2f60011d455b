from __future__ import annotations

import pytest

from twisty_engine.core.engine import Cube
from twisty_engine.core.faces import Face, Handedness
from twisty_engine.pieces.edges import EdgeSticker
from twisty_engine.pieces.wings import Wings, WingSticker


def solved_repr(n: int) -> str:
    return " / ".join(" ".join([c * n] * n) for c in "ULFRBD")


def test_handed_stickers():
    assert WingSticker.UFR.lh() == WingSticker.FUR
    assert WingSticker.UFR.rh() == WingSticker.UFR
    assert WingSticker.UFL.lh() == WingSticker.UFL
    assert WingSticker.UFL.rh() == WingSticker.FUL
    for s in WingSticker:
        assert s.with_handedness(s.handedness()) == s
        assert s.permutation() == s.lh().permutation() == s.rh().permutation()


def test_wing_colors_match_their_names():
    for s in WingSticker:
        assert s.color() == Face[s.name[0]]


def test_considering_orientation_lies_on_the_sticker_face():
    for e in EdgeSticker:
        for h in Handedness:
            w = WingSticker.from_permutation_and_handedness_considering_orientation(e, h)
            assert w.color() == e.color()


def test_at_on_solved():
    wings = Wings()
    for s in WingSticker:
        assert wings.at(s) == s


@pytest.mark.parametrize("face", list(Face))
def test_four_quarter_turns_are_identity(face: Face):
    wings = Wings()
    wings.rotate_face(Face.R, 1)
    before = wings.copy()
    wings.rotate_face(face, 4)
    assert wings == before
    for _ in range(4):
        wings.rotate_face(face, 1)
    assert wings == before


def test_cycle_wings_7x7():
    cube = Cube.new_solved(7)
    assert repr(cube) == solved_repr(7)

    cube.layers[0].wings.cycle(EdgeSticker.face_cycle(Face.U), 1)
    assert repr(cube) == (
        "UUUUUUU UUUUUUU UUUUUUU UUUUUUU UUUUUUU UUUUUUU UUUUUUU / "
        "LLFLLLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL / "
        "FFRFFFF FFFFFFF FFFFFFF FFFFFFF FFFFFFF FFFFFFF FFFFFFF / "
        "RRBRRRR RRRRRRR RRRRRRR RRRRRRR RRRRRRR RRRRRRR RRRRRRR / "
        "BBLBBBB BBBBBBB BBBBBBB BBBBBBB BBBBBBB BBBBBBB BBBBBBB / "
        "DDDDDDD DDDDDDD DDDDDDD DDDDDDD DDDDDDD DDDDDDD DDDDDDD"
    )

    cube.layers[0].wings.cycle(EdgeSticker.flipped_cycle(EdgeSticker.face_cycle(Face.U)), 1)
    assert repr(cube) == (
        "UUUUUUU UUUUUUU UUUUUUU UUUUUUU UUUUUUU UUUUUUU UUUUUUU / "
        "LLFLFLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL / "
        "FFRFRFF FFFFFFF FFFFFFF FFFFFFF FFFFFFF FFFFFFF FFFFFFF / "
        "RRBRBRR RRRRRRR RRRRRRR RRRRRRR RRRRRRR RRRRRRR RRRRRRR / "
        "BBLBLBB BBBBBBB BBBBBBB BBBBBBB BBBBBBB BBBBBBB BBBBBBB / "
        "DDDDDDD DDDDDDD DDDDDDD DDDDDDD DDDDDDD DDDDDDD DDDDDDD"
    )

    cube.layers[0].wings.cycle(EdgeSticker.face_cycle(Face.R), 1)
    cube.layers[0].wings.cycle(EdgeSticker.flipped_cycle(EdgeSticker.face_cycle(Face.R)), 1)
    assert repr(cube) == (
        "UUUUUUU UUUUUUU UUUUUUF UUUUUUU UUUUUUF UUUUUUU UUUUUUU / "
        "LLFLFLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL LLLLLLL / "
        "FFRFRFF FFFFFFF FFFFFFD FFFFFFF FFFFFFD FFFFFFF FFFFFFF / "
        "RRRRRRR RRRRRRR RRRRRRB RRRRRRR RRRRRRB RRRRRRR RRRRRRR / "
        "BBLBLBB BBBBBBB UBBBBBB BBBBBBB UBBBBBB BBBBBBB BBBBBBB / "
        "DDDDDDD DDDDDDD DDDDDDB DDDDDDD DDDDDDB DDDDDDD DDDDDDD"
    )


def test_permutation_coordinate_roundtrip():
    wings = Wings()
    assert wings.permutation_coordinate() == 0
    wings.rotate_face(Face.F, 1)
    wings.rotate_face(Face.D, 3)
    c = wings.permutation_coordinate()
    assert Wings.from_permutation_coordinate(c) == wings
