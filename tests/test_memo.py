from __future__ import annotations

import pytest

from twisty_engine.bld import (
    Buffers,
    FixedCornerPieces,
    Memo,
    Pieces,
    execute_memo,
    find_unsolved_piece,
    memo,
    memo_centers,
    memo_cube,
    pieces_for,
)
from twisty_engine.core.engine import Cube
from twisty_engine.core.faces import Face
from twisty_engine.pieces.corners import CornerPermutation, CornerSticker
from twisty_engine.pieces.corners_fixed import CornersFixed
from twisty_engine.pieces.edges import EdgeSticker, Edges
from twisty_engine.pieces.wings import WingSticker

E = EdgeSticker
C = CornerSticker

SEEDS = range(64)


def test_solved_memo_is_empty():
    cube = Cube.new_solved(3)
    m = memo(cube.edges, E.UF)
    assert m == Memo()
    assert m.is_empty()
    assert m.targets() == []
    assert memo(cube.corners, C.UFR).is_empty()
    assert memo_centers(Cube.new_solved(5).layers[0].tcenters, E.UF).is_empty()


def test_memo_after_quarter_turns():
    cube = Cube.new_solved(3)
    cube.rotate_face(Face.R, 1)
    m = memo(cube.edges, E.UF)
    assert m.cycles == [(E.UF, E.UR, E.FR), (E.UF, E.DR, E.BR)]
    assert m.parity == (E.UF, E.UR)
    assert m.twists == []
    assert m.targets() == [E.UR, E.FR, E.DR, E.BR, E.UR]

    cube.rotate_face(Face.R, 1)
    m = memo(cube.edges, E.UF)
    assert m.cycles == [(E.UF, E.UR, E.DR), (E.UF, E.UR, E.FR), (E.UF, E.BR, E.FR)]
    assert m.parity is None


def test_memo_real_scramble():
    cube = Cube.new_solved(3)
    for face, count in [
        (Face.U, 3), (Face.L, 2), (Face.B, 2), (Face.D, 2), (Face.L, 2), (Face.U, 3),
        (Face.F, 2), (Face.U, 1), (Face.F, 2), (Face.B, 1), (Face.L, 2), (Face.R, 1),
        (Face.F, 2), (Face.R, 1), (Face.D, 3), (Face.B, 3), (Face.R, 1), (Face.D, 2),
        (Face.R, 2),
    ]:  # fmt: skip
        cube.rotate_face(face, count)

    edge_memo = memo(cube.edges, E.UF)
    assert edge_memo.cycles == [
        (E.UF, E.UL, E.DL),
        (E.UF, E.FL, E.UB),
        (E.UF, E.RB, E.BL),
        (E.UF, E.RU, E.RD),
        (E.UF, E.DF, E.RF),
    ]
    assert edge_memo.parity == (E.UF, E.DB)
    assert edge_memo.twists == []

    corner_memo = memo(cube.corners, C.UFR)
    assert corner_memo.cycles == [
        (C.UFR, C.BUR, C.FDL),
        (C.UFR, C.FUL, C.LDB),
        (C.UFR, C.LUB, C.RDB),
    ]
    assert corner_memo.parity == (C.UFR, C.RDF)
    assert corner_memo.twists == []


def test_single_flip_and_twist_are_reported():
    cube = Cube.new_solved(3)
    cube.edges.cycle([E.UR, E.RU], 1)
    cube.edges.cycle([E.UF, E.FU], 1)
    m = memo(cube.edges, E.UF)
    assert m.cycles == [] and m.parity is None
    assert [p for p, _ in m.twists] == [E.UR.permutation()]

    cube.corners.cycle([C.DFR, C.FDR], 1)
    cube.corners.cycle([C.UFR, C.FUR], 1)
    m = memo(cube.corners, C.UFR)
    assert m.cycles == [] and m.parity is None
    assert [p for p, _ in m.twists] == [CornerPermutation.DFR]
    execute_memo(cube.corners, C.UFR, m)
    assert cube.corners.are_solved()


@pytest.mark.parametrize("seed", SEEDS)
def test_execute_solves_3x3(seed: int):
    cube = Cube.new_random(3, seed)
    edge_memo = memo(cube.edges, E.UF)
    corner_memo = memo(cube.corners, C.UFR)
    execute_memo(cube.edges, E.UF, edge_memo)
    execute_memo(cube.corners, C.UFR, corner_memo)
    assert (edge_memo.parity is None) == (corner_memo.parity is None)
    assert cube.is_solved()


@pytest.mark.parametrize("seed", SEEDS)
def test_execute_solves_wings(seed: int):
    cube = Cube.new_solved(5)
    cube.layers[0].wings = Cube.new_random(5, seed).layers[0].wings
    m = memo(cube.layers[0].wings, WingSticker.UFR)
    assert not m.twists
    execute_memo(cube.layers[0].wings, WingSticker.UFR, m)
    assert cube.is_solved()


@pytest.mark.parametrize("seed", SEEDS)
def test_execute_solves_centers(seed: int):
    scrambled = Cube.new_random(7, seed)
    cube = Cube.new_solved(7)
    for i, layer in enumerate(cube.layers):
        layer.tcenters = scrambled.layers[i].tcenters
        layer.xcenters = scrambled.layers[i].xcenters
        layer.obliques = scrambled.layers[i].obliques

    for layer in cube.layers:
        for state, buffer in [(layer.tcenters, E.UF), (layer.xcenters, C.UFR)]:
            m = memo_centers(state, buffer)
            execute_memo(state, buffer, m)
            assert state.are_solved()
        for pair in layer.obliques:
            for state in (pair.left, pair.right):
                execute_memo(state, E.UF, memo_centers(state, E.UF))
            assert pair.are_solved()
    assert cube.is_solved()


def test_center_memo_skips_same_colored_swaps():
    cube = Cube.new_solved(5)
    cube.layers[0].tcenters.cycle([E.UB, E.UR, E.UL], 1)
    assert memo_centers(cube.layers[0].tcenters, E.UF).is_empty()
    # The plain memo treats every piece as distinct.
    assert not memo(cube.layers[0].tcenters, E.UF).is_empty()


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7])
def test_memo_cube_then_execute(n: int):
    cube = Cube.new_random(n, 100 + n)
    buffers = Buffers()
    m = memo_cube(cube, buffers)

    assert (m.edges is None) == (n % 2 == 0)
    assert len(m.layers) == len(cube.layers)

    if m.edges is not None:
        execute_memo(cube.edges, buffers.edges, m.edges)
        assert cube.edges.are_solved()
    execute_memo(cube.corners, buffers.corners, m.corners)
    assert cube.corners.are_solved()

    for layer, layer_memo in zip(cube.layers, m.layers):
        assert (layer_memo.tcenters is None) == (n % 2 == 0)
        assert len(layer_memo.obliques) == len(layer.obliques)
        execute_memo(layer.wings, buffers.wings, layer_memo.wings)
        execute_memo(layer.xcenters, buffers.xcenters, layer_memo.xcenters)
        if layer_memo.tcenters is not None:
            execute_memo(layer.tcenters, buffers.tcenters, layer_memo.tcenters)
            assert layer.tcenters.are_solved()
        for pair, (left, right) in zip(layer.obliques, layer_memo.obliques):
            execute_memo(pair.left, buffers.left_obliques, left)
            execute_memo(pair.right, buffers.right_obliques, right)
        assert layer.wings.are_solved()
        assert layer.xcenters.are_solved()
        assert all(pair.are_solved() for pair in layer.obliques)


def test_memo_cube_on_1x1():
    m = memo_cube(Cube.new_solved(1))
    assert m.corners is None
    assert m.edges is not None and m.edges.is_empty()
    assert m.layers == []


def test_buffers_from_indices():
    assert Buffers.from_indices(2, 2, 17, 2, 2, 2, 2) == Buffers()
    with pytest.raises(ValueError):
        Buffers.from_indices(24, 2, 17, 2, 2, 2, 2)


def test_pieces_for():
    edges = Edges()
    adapter = pieces_for(edges)
    assert adapter.state is edges
    assert pieces_for(adapter) is adapter
    assert adapter.is_oriented()
    with pytest.raises(ValueError):
        pieces_for(object())


def test_find_unsolved_piece_order():
    pieces = pieces_for(Edges())
    assert find_unsolved_piece(pieces, set(), []) == E.UB
    assert find_unsolved_piece(pieces, set(), [E.UB.permutation()]) == E.UR
    assert find_unsolved_piece(pieces, set(pieces.PERMUTATIONS), []) is None


def test_fixed_corners_memo():
    corners = CornersFixed()
    corners.rotate_face(Face.R, 1)
    corners.rotate_face(Face.U, 1)
    pieces = FixedCornerPieces(corners)
    m = memo(pieces, C.UFR)
    for cycle in m.cycles:
        assert all(s.permutation() != CornerPermutation.DBL for s in cycle)
    execute_memo(pieces, C.UFR, m)
    assert corners.are_solved()


def test_pieces_subclass_must_list_face_stickers():
    class Incomplete(Pieces):
        STICKERS = ()
        PERMUTATIONS = ()

        def at(self, sticker):
            return sticker

        def cycle(self, positions, count):
            pass

    with pytest.raises(TypeError):
        Incomplete()
