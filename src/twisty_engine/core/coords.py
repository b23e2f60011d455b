from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def permutation_coordinate(values: Sequence[int]) -> int:
    """Lehmer rank: sum of s_i * i! where s_i counts earlier values larger than values[i]."""
    x = 0
    for i in range(len(values) - 1, 0, -1):
        s = 0
        for j in range(i):
            if values[j] > values[i]:
                s += 1
        x = (x + s) * i
    return x


def decode_permutation(coordinate: int, n: int) -> list[int]:
    """Inverse of `permutation_coordinate` for a permutation of range(n)."""
    if not (0 <= coordinate < math.factorial(n)):
        raise ValueError(f"permutation coordinate must be in [0..{n}!)")
    order = [0] * n
    for i in range(n):
        order[i] = coordinate % (i + 1)
        coordinate //= i + 1

    unused = list(range(n))
    out = [0] * n
    for i in range(n - 1, -1, -1):
        # order[i]-th largest value not yet placed
        out[i] = unused.pop(len(unused) - 1 - order[i])
    return out


def orientation_coordinate(values: Sequence[int], base: int) -> int:
    """Mixed-radix encoding of all but the last orientation (the last one is implied)."""
    x = 0
    for i, v in enumerate(values[:-1]):
        x += v * base**i
    return x


def decode_orientation(coordinate: int, n: int, base: int) -> list[int]:
    if not (0 <= coordinate < base ** (n - 1)):
        raise ValueError(f"orientation coordinate must be in [0..{base}**{n - 1})")
    out = [0] * n
    total = 0
    for i in range(n - 1):
        out[i] = coordinate % base
        total += out[i]
        coordinate //= base
    out[n - 1] = (-total) % base
    return out


def sticker_cycle(permutation: list[T], positions: Sequence[int], count: int) -> None:
    """Move the content of positions[i] to positions[(i + count) % len] in place."""
    old = list(permutation)
    k = len(positions)
    for i in range(k):
        j = (i + count) % k
        permutation[positions[j]] = old[positions[i]]
