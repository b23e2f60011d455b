from __future__ import annotations

import random

import pytest

from twisty_engine.core.faces import Face
from twisty_engine.pieces.corners import CornerPermutation, CornerSticker
from twisty_engine.pieces.corners_fixed import (
    FIXED_FACES,
    CornerCoordsFixed,
    CornerCoordsMoveTableFixed,
    CornersFixed,
)


@pytest.fixture(scope="module")
def table() -> CornerCoordsMoveTableFixed:
    return CornerCoordsMoveTableFixed()


def test_dbl_never_moves():
    corners = CornersFixed()
    for face in FIXED_FACES:
        corners.rotate_face(face, 1)
    for s in (CornerSticker.DBL, CornerSticker.LDB, CornerSticker.BDL):
        assert corners.at(s) == s
    assert CornerPermutation.DBL not in corners.permutation


def test_only_u_f_r_turns():
    corners = CornersFixed()
    for face in (Face.D, Face.L, Face.B):
        with pytest.raises(ValueError):
            corners.rotate_face(face, 1)
    assert corners.are_solved()


def test_coordinate_roundtrip():
    assert CornersFixed().coordinate() == 0
    assert CornersFixed().coords().are_solved()
    rng = random.Random(5)
    for _ in range(50):
        c = rng.randrange(CornersFixed.NUM_COORDINATES)
        corners = CornersFixed.from_coordinate(c)
        assert corners.coordinate() == c
        assert corners.coords().combined() == c
        assert corners.coords().to_corners() == corners
    with pytest.raises(ValueError):
        CornersFixed.from_coordinate(CornersFixed.NUM_COORDINATES)


def test_table_matches_direct_turns(table: CornerCoordsMoveTableFixed):
    rng = random.Random(8)
    for _ in range(30):
        corners = CornersFixed.from_coordinate(rng.randrange(CornersFixed.NUM_COORDINATES))
        coords = corners.coords()
        for _ in range(10):
            face = rng.choice(FIXED_FACES)
            count = rng.randrange(1, 4)
            corners.rotate_face(face, count)
            coords = table.rotate_face(coords, face, count)
            assert coords == corners.coords()


def test_table_edge_cases(table: CornerCoordsMoveTableFixed):
    start = CornerCoordsFixed(0, 0)
    assert table.rotate_face(start, Face.U, 4) == start
    turned = table.rotate_face(start, Face.R, 1)
    assert not turned.are_solved()
    assert table.rotate_face(turned, Face.R, 3) == start
    with pytest.raises(ValueError):
        table.rotate_face(start, Face.D, 1)


@pytest.mark.parametrize("seed", range(256))
def test_turned_state_survives_coordinates(seed: int):
    rng = random.Random(seed)
    corners = CornersFixed()
    for _ in range(20):
        corners.rotate_face(rng.choice(FIXED_FACES), rng.randrange(1, 4))
    restored = CornersFixed.from_coordinates(
        corners.permutation_coordinate(), corners.orientation_coordinate()
    )
    assert restored == corners
    assert corners.coords().to_corners() == corners
