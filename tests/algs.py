"""Small move-notation helper for tests (face turns, wide/slice moves, rotations)."""

from __future__ import annotations

import re

from twisty_engine.bld.memo import Memo
from twisty_engine.core.engine import Cube
from twisty_engine.core.faces import Face
from twisty_engine.core.rotations import Move, RotatedCube
from twisty_engine.pieces.corners import CornerSticker
from twisty_engine.pieces.edges import EdgeOrientation, EdgeSticker

LETTERING = "ABCDEFGHIJKLMNOPQRSTUVWX"

_TOKEN = re.compile(r"^(\d*)([UDLRFBudlrfbMESxyz])(w?)(\d*)(['’]?)$")

_SLICES = {"M": Face.L, "E": Face.D, "S": Face.F}
_ROTATIONS = {"x": Face.R, "y": Face.U, "z": Face.F}


def parse_move(n: int, token: str) -> Move:
    m = _TOKEN.match(token)
    if m is None:
        raise ValueError(f"bad move: {token!r}")
    prefix, letter, wide, suffix, prime = m.groups()
    width = int(prefix) if prefix else None
    count = int(suffix) if suffix else 1
    if prime:
        count = 4 - count % 4

    if letter in _SLICES:
        return Move(n, _SLICES[letter], 1, n - 1, count)
    if letter in _ROTATIONS:
        return Move(n, _ROTATIONS[letter], 0, n, count)

    face = Face[letter.upper()]
    if letter.isupper():
        if wide:
            return Move(n, face, 0, width or 2, count)
        if width is not None:
            return Move(n, face, width - 1, width, count)
        return Move(n, face, 0, 1, count)
    if n == 3:
        return Move(n, face, 0, width or 2, count)
    if width is not None:
        return Move(n, face, width - 1, width, count)
    return Move(n, face, 1, 2, count)


def parse_alg(n: int, alg: str) -> list[Move]:
    return [parse_move(n, token) for token in alg.split()]


def apply_alg(cube: Cube, alg: str) -> RotatedCube:
    rotated = RotatedCube(cube)
    rotated.apply(parse_alg(cube.n, alg))
    return rotated


def letters(memo: Memo, index=int) -> str:
    """Letter pairs of the memo targets, then the parity letter."""
    out = ""
    targets = [target for cycle in memo.cycles for target in cycle[1:]]
    for i, target in enumerate(targets):
        if i != 0 and i % 2 == 0:
            out += " "
        out += LETTERING[index(target)]
    if memo.parity is not None:
        out += " " + LETTERING[index(memo.parity[1])]
    return out


def edge_letters(memo: Memo) -> str:
    out = letters(memo)
    if memo.twists:
        out += "; flip " + "".join(
            LETTERING[EdgeSticker.from_permutation_and_orientation(p, EdgeOrientation.GOOD)]
            for p, _ in memo.twists
        )
    return out


def corner_letters(memo: Memo) -> str:
    out = letters(memo)
    if memo.twists:
        out += "; twist " + "".join(
            LETTERING[CornerSticker.from_permutation_and_orientation(p, -o)] for p, o in memo.twists
        )
    return out


def wing_letters(memo: Memo) -> str:
    return letters(memo, lambda s: int(s.edge_sticker_considering_handedness()))
