from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable

from twisty_engine.bld.buffers import Buffers
from twisty_engine.bld.memo import memo
from twisty_engine.core.engine import Cube
from twisty_engine.pieces.wings import WingSticker

logger = logging.getLogger(__name__)

LETTERS = 24


def _count_pairs(m, index: Callable[[object], int], counts: Counter) -> int:
    """Add the (first, second) target pairs of one memo; a parity target pairs with itself."""
    added = 0
    for _, b, c in m.cycles:
        counts[index(b), index(c)] += 1
        added += 1
    if m.parity is not None:
        c = m.parity[1]
        counts[index(c), index(c)] += 1
        added += 1
    return added


def _wing_index(sticker: WingSticker) -> int:
    return int(sticker.edge_sticker_considering_handedness())


def pair_frequencies(
    n: int = 5, samples: int = 1000, seed: int = 0, buffers: Buffers | None = None
) -> dict:
    """Letter-pair frequencies over the memos of `samples` random cubes.

    Edges, corners, layer-0 wings, T-centers and X-centers all share one 24x24
    matrix, indexed by sticker index; entries sum to 1.
    """
    if n < 5 or n % 2 == 0:
        raise ValueError("n must be odd and >= 5")
    if samples < 1:
        raise ValueError("samples must be >= 1")
    if buffers is None:
        buffers = Buffers()

    counts: Counter = Counter()
    total = 0
    for i in range(samples):
        cube = Cube.new_random(n, seed + i)
        layer = cube.layers[0]
        total += _count_pairs(memo(cube.edges, buffers.edges), int, counts)
        total += _count_pairs(memo(cube.corners, buffers.corners), int, counts)
        total += _count_pairs(memo(layer.wings, buffers.wings), _wing_index, counts)
        total += _count_pairs(memo(layer.tcenters, buffers.tcenters), int, counts)
        total += _count_pairs(memo(layer.xcenters, buffers.xcenters), int, counts)

    matrix = [
        [counts[a, b] / total if total else 0.0 for b in range(LETTERS)] for a in range(LETTERS)
    ]
    most_common = counts.most_common(1)
    logger.info("pair frequencies: n=%d samples=%d pairs=%d", n, samples, total)
    return {
        "n": n,
        "samples": samples,
        "seed": seed,
        "total_pairs": total,
        "distinct_pairs": len(counts),
        "most_common_pair": list(most_common[0][0]) if most_common else None,
        "matrix": matrix,
    }
