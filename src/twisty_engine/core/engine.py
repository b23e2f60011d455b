from __future__ import annotations

import hashlib
import logging
import random
import struct
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from .any_sticker import AnySticker, Center, Corner, Edge, Oblique, TCenter, Wing, XCenter
from .faces import Face, Handedness
from twisty_engine.pieces.corners import CornerOrientation, CornerPermutation, CornerSticker, Corners
from twisty_engine.pieces.edges import EdgeOrientation, EdgePermutation, EdgeSticker, Edges
from twisty_engine.pieces.obliques import Obliques, ObliquesPair
from twisty_engine.pieces.tcenters import TCenters
from twisty_engine.pieces.wings import Wings
from twisty_engine.pieces.xcenters import XCenters

logger = logging.getLogger(__name__)

T = TypeVar("T")


def n_layers(n: int) -> int:
    """Number of wing/center rings an n x n x n cube has."""
    return max(n // 2 - 1, 0)


def shuffled(rng: random.Random, items: Sequence[T], parity: bool) -> list[T]:
    """Fisher-Yates shuffle forced to an even (parity False) or odd (parity True) permutation."""
    out = list(items)
    swaps = 0
    for i in range(len(out) - 1, 0, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
        if i != j:
            swaps += 1
    if (swaps % 2 == 0) != parity:
        out[0], out[1] = out[1], out[0]
    return out


def random_corner_orientation(rng: random.Random) -> list[CornerOrientation]:
    out = [CornerOrientation(rng.randrange(3)) for _ in range(7)]
    out.append(CornerOrientation(-sum(int(o) for o in out) % 3))
    return out


def random_edge_orientation(rng: random.Random) -> list[EdgeOrientation]:
    out = [EdgeOrientation(rng.randrange(2)) for _ in range(11)]
    out.append(EdgeOrientation(sum(int(o) for o in out) % 2))
    return out


@dataclass(slots=True)
class CubeLayer:
    """Pieces at one distance from the face centers.

    Layer i holds one ring each of wings, T-centers and X-centers, plus i oblique
    pairs.
    """

    wings: Wings = field(default_factory=Wings)
    tcenters: TCenters = field(default_factory=TCenters)
    xcenters: XCenters = field(default_factory=XCenters)
    obliques: list[ObliquesPair] = field(default_factory=list)

    def copy(self) -> CubeLayer:
        return CubeLayer(
            self.wings.copy(),
            self.tcenters.copy(),
            self.xcenters.copy(),
            [pair.copy() for pair in self.obliques],
        )

    def rotate_face(self, face: Face, count: int) -> None:
        self.wings.rotate_face(face, count)
        self.xcenters.rotate_face(face, count)
        self.tcenters.rotate_face(face, count)
        for pair in self.obliques:
            pair.rotate_face(face, count)

    def is_solved(self) -> bool:
        return (
            self.wings.are_solved()
            and self.tcenters.are_solved()
            and self.xcenters.are_solved()
            and all(pair.are_solved() for pair in self.obliques)
        )

    def is_solved_supercube(self) -> bool:
        return (
            self.wings.are_solved()
            and self.tcenters.are_solved_supercube()
            and self.xcenters.are_solved_supercube()
            and all(pair.are_solved_supercube() for pair in self.obliques)
        )


@dataclass(slots=True)
class Cube:
    """State of an n x n x n cube with fixed face centers.

    Whole-cube rotations are not represented here; see `RotatedCube`.
    """

    n: int
    corners: Corners
    edges: Edges
    layers: list[CubeLayer]

    def __init__(
        self,
        n: int,
        corners: Corners | None = None,
        edges: Edges | None = None,
        layers: list[CubeLayer] | None = None,
    ):
        if n < 1:
            raise ValueError("n must be >= 1")
        self.n = n
        self.corners = corners if corners is not None else Corners()
        self.edges = edges if edges is not None else Edges()
        if layers is None:
            layers = [CubeLayer(obliques=[ObliquesPair() for _ in range(i)]) for i in range(n_layers(n))]
        if len(layers) != n_layers(n):
            raise ValueError(f"a {n}x{n}x{n} cube has {n_layers(n)} layers, got {len(layers)}")
        self.layers = layers

    @classmethod
    def new_solved(cls, n: int) -> Cube:
        return cls(n)

    @classmethod
    def new_random(cls, n: int, seed: int) -> Cube:
        """Uniformly random reachable state.

        Corners and edges share one parity bit; every other category draws its own.
        """
        if n < 1:
            raise ValueError("n must be >= 1")
        rng = random.Random(seed)

        corner_edge_parity = rng.randrange(2) != 0
        left_oblique_parity = rng.randrange(2) != 0
        right_oblique_parity = rng.randrange(2) != 0
        wing_parity = rng.randrange(2) != 0
        tcenter_parity = rng.randrange(2) != 0
        xcenter_parity = rng.randrange(2) != 0

        corners = Corners(
            shuffled(rng, list(CornerPermutation), corner_edge_parity),
            random_corner_orientation(rng),
        )
        edges = Edges(
            shuffled(rng, list(EdgePermutation), corner_edge_parity),
            random_edge_orientation(rng),
        )
        layers = []
        for i in range(n_layers(n)):
            obliques = [
                ObliquesPair(
                    Obliques(shuffled(rng, list(EdgeSticker), left_oblique_parity)),
                    Obliques(shuffled(rng, list(EdgeSticker), right_oblique_parity)),
                )
                for _ in range(i)
            ]
            layers.append(
                CubeLayer(
                    wings=Wings(shuffled(rng, list(EdgeSticker), wing_parity)),
                    tcenters=TCenters(shuffled(rng, list(EdgeSticker), tcenter_parity)),
                    xcenters=XCenters(shuffled(rng, list(CornerSticker), xcenter_parity)),
                    obliques=obliques,
                )
            )
        logger.debug("random %dx%dx%d cube from seed %d", n, n, n, seed)
        return cls(n, corners, edges, layers)

    def copy(self) -> Cube:
        return Cube(self.n, self.corners.copy(), self.edges.copy(), [layer.copy() for layer in self.layers])

    # -- facelets -----------------------------------------------------------

    def facelets(self) -> Iterator[tuple[int, int]]:
        """(x, y) of every facelet of one face, row by row from the top-left."""
        half = self.n // 2
        for y in range(self.n | 1):
            for x in range(self.n | 1):
                adj_x = x - half
                adj_y = -(y - half)
                if self.n % 2 == 0 and (adj_x == 0 or adj_y == 0):
                    continue
                yield adj_x, adj_y

    def color_at(self, face: Face, x: int, y: int) -> Face:
        sticker = AnySticker.at(self.n, face, x, y)
        if isinstance(sticker, Center):
            return sticker.face
        if isinstance(sticker, Edge):
            return self.edges.at(sticker.sticker).color()
        if isinstance(sticker, Corner):
            return self.corners.at(sticker.sticker).color()
        layer = self.layers[sticker.layer]
        if isinstance(sticker, Wing):
            return layer.wings.at(sticker.sticker).color()
        if isinstance(sticker, TCenter):
            return layer.tcenters.at(sticker.sticker).color()
        if isinstance(sticker, XCenter):
            return layer.xcenters.at(sticker.sticker).color()
        if isinstance(sticker, Oblique):
            pair = layer.obliques[sticker.index]
            side = pair.left if sticker.handedness == Handedness.LEFT else pair.right
            return side.at(sticker.sticker).color()
        raise AssertionError(f"unhandled sticker kind: {sticker!r}")

    def face_colors(self, face: Face) -> list[list[Face]]:
        rows: list[list[Face]] = []
        last_y = None
        for x, y in self.facelets():
            if y != last_y:
                rows.append([])
                last_y = y
            rows[-1].append(self.color_at(face, x, y))
        return rows

    def __repr__(self) -> str:
        return " / ".join(
            " ".join("".join(c.name for c in row) for row in self.face_colors(face)) for face in Face
        )

    # -- solvedness ---------------------------------------------------------

    def is_solved(self) -> bool:
        return (
            self.corners.are_solved()
            and self.edges.are_solved()
            and all(layer.is_solved() for layer in self.layers)
        )

    def is_solved_supercube(self) -> bool:
        return (
            self.corners.are_solved()
            and self.edges.are_solved()
            and all(layer.is_solved_supercube() for layer in self.layers)
        )

    def is_solved_in_any_orientation(self) -> bool:
        """Every face shows a single color, whichever one it is."""
        for face in Face:
            colors = {self.color_at(face, x, y) for x, y in self.facelets()}
            if len(colors) > 1:
                return False
        return True

    # -- rotation engine ----------------------------------------------------

    def rotate_face(self, face: Face, count: int) -> None:
        self.corners.rotate_face(face, count)
        if self.n % 2 == 1:
            self.edges.rotate_face(face, count)
        for layer in self.layers:
            layer.rotate_face(face, count)

    def rotate(self, face: Face, layers: range, count: int) -> None:
        """Turn the depth layers `layers` (0 = the outer layer of `face`) by `count` quarter turns."""
        if not (0 <= layers.start <= layers.stop <= self.n) or layers.step != 1:
            raise ValueError(f"layers must be a contiguous range within [0..{self.n}]")
        half = self.n // 2
        for i in layers:
            if i >= half and self.n % 2 == 0:
                i += 1
            if i <= half:
                self.rotate_slice(face, half - i, count)
            else:
                self.rotate_slice(face.opposite(), i - half, 4 - count % 4)

    def rotate_slice(self, face: Face, layer_index: int, count: int) -> None:
        """Turn one slice; `layer_index` counts outwards from the middle (n // 2 is the face)."""
        if not (0 <= layer_index <= self.n // 2):
            raise ValueError(f"layer_index must be in [0..{self.n // 2}]")
        if layer_index == self.n // 2:
            self.rotate_face(face, count)
        elif layer_index == 0:
            self._rotate_middle_slice(face, count)
        else:
            self.rotate_non_middle_slice(layer_index - 1, face, count)

    def rotate_non_middle_slice(self, layer_index: int, face: Face, count: int) -> None:
        if not (0 <= layer_index < len(self.layers)):
            raise ValueError(f"layer_index must be in [0..{len(self.layers)})")
        layer = self.layers[layer_index]
        wing_cycle_lh = EdgeSticker.slice_wing_cycle_lh(face)
        wing_cycle_rh = EdgeSticker.slice_wing_cycle_rh(face)
        center_cycle = EdgeSticker.slice_center_cycle(face)

        layer.wings.cycle(wing_cycle_rh, count)
        if self.n % 2 == 1:
            layer.tcenters.cycle(center_cycle, count)
        layer.xcenters.cycle(CornerSticker.slice_center_cycle_lh(face), count)
        layer.xcenters.cycle(CornerSticker.slice_center_cycle_rh(face), count)

        # Obliques of deeper rings whose column lies in this slice.
        for ob_layer in range(layer_index + 1, len(self.layers)):
            pair = self.layers[ob_layer].obliques[layer_index]
            pair.left.cycle(wing_cycle_rh, count)
            pair.right.cycle(wing_cycle_lh, count)

        # This ring's own obliques, which the slice crosses at their row.
        for pair in layer.obliques:
            pair.left.cycle(center_cycle, count)
            pair.right.cycle(center_cycle, count)

    def _rotate_middle_slice(self, face: Face, count: int) -> None:
        # With fixed centers a middle slice equals turning both outer halves the other way.
        if self.n % 2 == 0:
            return
        half = self.n // 2
        self.rotate(face, range(0, half), 4 - count % 4)
        self.rotate(face.opposite(), range(0, half), count)

    # -- integrity ----------------------------------------------------------

    def _canonical_values(self) -> list[int]:
        values = [self.n]
        values += [int(p) for p in self.corners.permutation]
        values += [int(o) for o in self.corners.orientation]
        values += [int(p) for p in self.edges.permutation]
        values += [int(o) for o in self.edges.orientation]
        for layer in self.layers:
            values += [int(p) for p in layer.wings.permutation]
            values += [int(p) for p in layer.tcenters.permutation]
            values += [int(p) for p in layer.xcenters.permutation]
            for pair in layer.obliques:
                values += [int(p) for p in pair.left.permutation]
                values += [int(p) for p in pair.right.permutation]
        return values

    def _canonical_bytes(self) -> bytes:
        # little-endian uint32 array: [n] + every category in declaration order
        values = self._canonical_values()
        return struct.pack("<" + "I" * len(values), *values)

    def hash(self) -> str:
        return hashlib.sha256(self._canonical_bytes()).hexdigest()

    def audit(self) -> None:
        """Raise AssertionError if any category is not a valid state."""
        if self.n < 1:
            raise AssertionError("n must be >= 1")
        if sorted(self.corners.permutation) != list(CornerPermutation):
            raise AssertionError("corner permutation is not a permutation")
        if sum(int(o) for o in self.corners.orientation) % 3 != 0:
            raise AssertionError("corner orientation sum is not 0 mod 3")
        if sorted(self.edges.permutation) != list(EdgePermutation):
            raise AssertionError("edge permutation is not a permutation")
        if sum(int(o) for o in self.edges.orientation) % 2 != 0:
            raise AssertionError("edge orientation sum is not 0 mod 2")
        if len(self.layers) != n_layers(self.n):
            raise AssertionError("layer count mismatch")
        for i, layer in enumerate(self.layers):
            self._audit_stickers(f"layer {i} wings", layer.wings.permutation, EdgeSticker)
            self._audit_stickers(f"layer {i} tcenters", layer.tcenters.permutation, EdgeSticker)
            self._audit_stickers(f"layer {i} xcenters", layer.xcenters.permutation, CornerSticker)
            if len(layer.obliques) != i:
                raise AssertionError(f"layer {i} must hold {i} oblique pairs")
            for j, pair in enumerate(layer.obliques):
                self._audit_stickers(f"layer {i} obliques {j} left", pair.left.permutation, EdgeSticker)
                self._audit_stickers(f"layer {i} obliques {j} right", pair.right.permutation, EdgeSticker)

    @staticmethod
    def _audit_stickers(what: str, permutation: list, kind) -> None:
        if sorted(permutation) != list(kind):
            raise AssertionError(f"{what}: not a permutation of the 24 slots")
