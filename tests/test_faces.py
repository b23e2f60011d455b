from __future__ import annotations

import pytest

from twisty_engine.core.faces import Axis, Face, rotated_face


def test_opposite_is_involution():
    for face in Face:
        assert face.opposite() != face
        assert face.opposite().opposite() == face


def test_neighbors_are_the_four_adjacent_faces():
    for face in Face:
        ns = face.neighbors()
        assert len(set(ns)) == 4
        assert face not in ns
        assert face.opposite() not in ns


def test_cross_products():
    assert Face.U.cross_rh(Face.F) == Face.R
    assert Face.U.cross_lh(Face.F) == Face.L
    assert Face.U.cross_rh(Face.D) is None
    for a in Face:
        for b in a.neighbors():
            assert a.cross_rh(b) == a.cross_lh(b).opposite()
            assert a.cross_rh(b) == b.cross_lh(a)


def test_axis_faces():
    assert [a.face() for a in Axis] == [Face.R, Face.U, Face.F]


@pytest.mark.parametrize("axis", list(Axis))
def test_rotated_face_group_laws(axis: Axis):
    for face in Face:
        assert rotated_face(face, axis, 0) == face
        assert rotated_face(face, axis, 4) == face
        assert rotated_face(rotated_face(face, axis, 1), axis, 3) == face
        twice = rotated_face(rotated_face(face, axis, 1), axis, 1)
        assert twice == rotated_face(face, axis, 2)
    # The axis faces stay put.
    assert rotated_face(axis.face(), axis, 1) == axis.face()
    assert rotated_face(axis.face().opposite(), axis, 1) == axis.face().opposite()


def test_rotated_face_up_is_never_lost():
    # Face.U has value 0; a rotation mapping onto it must still return it.
    images = {rotated_face(f, Axis.X, 1) for f in Face}
    assert images == set(Face)
