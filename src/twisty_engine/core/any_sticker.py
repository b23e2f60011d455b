"""Classify a facelet position into the piece category and slot that owns it.

Coordinates are relative to the face center: x grows to the right and y grows
upwards, both in [-n//2, n//2]. On even cubes the 0 row and column do not exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from twisty_engine.core.faces import Face, Handedness
from twisty_engine.pieces.corners import CornerDirection, CornerSticker
from twisty_engine.pieces.edges import EdgeDirection, EdgeSticker
from twisty_engine.pieces.wings import WingSticker


class AnySticker:
    """Base of the facelet categories returned by `AnySticker.at`."""

    __slots__ = ()

    @staticmethod
    def at(n: int, face: Face, x: int, y: int) -> AnySticker:
        return sticker_at(n, face, x, y)


@dataclass(frozen=True, slots=True)
class Center(AnySticker):
    face: Face


@dataclass(frozen=True, slots=True)
class Edge(AnySticker):
    sticker: EdgeSticker


@dataclass(frozen=True, slots=True)
class Corner(AnySticker):
    sticker: CornerSticker


@dataclass(frozen=True, slots=True)
class Wing(AnySticker):
    layer: int
    sticker: WingSticker


@dataclass(frozen=True, slots=True)
class TCenter(AnySticker):
    layer: int
    sticker: EdgeSticker


@dataclass(frozen=True, slots=True)
class XCenter(AnySticker):
    layer: int
    sticker: CornerSticker


@dataclass(frozen=True, slots=True)
class Oblique(AnySticker):
    layer: int
    index: int
    sticker: EdgeSticker
    handedness: Handedness


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def _off_axis_edge(x: int, y: int, x_is_edge: bool) -> tuple[EdgeDirection, Handedness]:
    """Direction and side for a facelet that is neither on an axis nor on a diagonal."""
    if x_is_edge:
        direction = EdgeDirection.RIGHT if x > 0 else EdgeDirection.LEFT
        right = _sign(x) == _sign(y)
    else:
        direction = EdgeDirection.TOP if y > 0 else EdgeDirection.BOTTOM
        right = _sign(x) != _sign(y)
    return direction, Handedness.RIGHT if right else Handedness.LEFT


def sticker_at(n: int, face: Face, x: int, y: int) -> AnySticker:
    half = n // 2
    if n % 2 == 0 and (x == 0 or y == 0):
        raise ValueError("even cubes have no facelet on the 0 row or column")
    if max(abs(x), abs(y)) > half:
        raise ValueError(f"facelet ({x}, {y}) is outside a {n}x{n} face")

    if x == 0 and y == 0:
        return Center(face)

    if x == 0 or y == 0:
        if x == 0:
            direction = EdgeDirection.TOP if y > 0 else EdgeDirection.BOTTOM
        else:
            direction = EdgeDirection.RIGHT if x > 0 else EdgeDirection.LEFT
        sticker = EdgeSticker.from_face_and_direction(face, direction)
        depth = max(abs(x), abs(y))
        if depth == half:
            return Edge(sticker)
        return TCenter(depth - 1, sticker)

    if abs(x) == abs(y):
        if y > 0:
            direction = CornerDirection.TOP_RIGHT if x > 0 else CornerDirection.TOP_LEFT
        else:
            direction = CornerDirection.BOTTOM_RIGHT if x > 0 else CornerDirection.BOTTOM_LEFT
        sticker = CornerSticker.from_face_and_direction(face, direction)
        if abs(x) == half:
            return Corner(sticker)
        return XCenter(abs(x) - 1, sticker)

    outer, inner = max(abs(x), abs(y)), min(abs(x), abs(y))
    direction, handedness = _off_axis_edge(x, y, abs(x) == outer)
    edge_sticker = EdgeSticker.from_face_and_direction(face, direction)

    if outer == half:
        return Wing(
            inner - 1,
            WingSticker.from_permutation_and_handedness_considering_orientation(
                edge_sticker, handedness
            ),
        )
    return Oblique(outer - 1, inner - 1, edge_sticker, handedness)
