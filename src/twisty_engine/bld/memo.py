"""Blindfolded memorization: decompose a category into 3-cycles through a buffer.

Both algorithms walk the pieces starting at the buffer, emitting
(buffer, first, second) cycles. When a cycle closes before every piece is
placed, a fresh one is started at the first unsolved piece in canonical order.
An odd leftover is reported as a 2-cycle parity target.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from twisty_engine.bld.pieces import Pieces, pieces_for
from twisty_engine.core.faces import Face

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Memo:
    cycles: list[tuple[Any, Any, Any]] = field(default_factory=list)
    parity: tuple[Any, Any] | None = None
    # (piece, orientation of the piece sitting in its home slot)
    twists: list[tuple[Any, Any]] = field(default_factory=list)

    def targets(self) -> list[Any]:
        """Targets in the order they are memorized: cycles without the buffer, then parity."""
        out = [target for cycle in self.cycles for target in cycle[1:]]
        if self.parity is not None:
            out.append(self.parity[1])
        return out

    def is_empty(self) -> bool:
        return not self.cycles and self.parity is None and not self.twists


def find_unsolved_piece(pieces: Pieces, solved: set, exclude: Iterable) -> Any | None:
    """First piece (as its good sticker) neither solved nor excluded."""
    exclude = set(exclude)
    for permutation in pieces.PERMUTATIONS:
        if permutation not in solved and permutation not in exclude:
            return pieces.sticker(permutation, pieces.GOOD)
    return None


def find_unsolved_piece_on_face(
    pieces: Pieces, solved: set, face: Face, exclude: Iterable
) -> Any | None:
    exclude = set(exclude)
    for sticker in pieces.stickers_on_face(face):
        permutation = pieces.sticker_permutation(sticker)
        if permutation not in solved and permutation not in exclude:
            return sticker
    return None


def memo(state, buffer) -> Memo:
    """Memorize a category whose pieces are all distinct (corners, edges, wings).

    `state` is a raw category (`Corners`, `Edges`, `Wings`, ...) or a `Pieces`
    adapter; `buffer` is a sticker of that category.
    """
    pieces = pieces_for(state)
    perm = pieces.sticker_permutation
    total = len(pieces.PERMUTATIONS)
    buffer_perm = perm(buffer)

    out = Memo()
    solved: set = set()
    for p in pieces.PERMUTATIONS:
        current = pieces.at(pieces.sticker(p, pieces.GOOD))
        if perm(current) == p and p != buffer_perm:
            solved.add(p)
            orientation = pieces.sticker_orientation(current)
            if orientation is not None and orientation != pieces.GOOD:
                out.twists.append((p, orientation))

    if len(solved) == total - 1:
        return out

    zeroth = cycle_end = buffer
    while True:
        first = pieces.at(zeroth)
        second = pieces.at(first)

        if len(solved) == total - 1:
            return out
        if len(solved) == total - 2:
            out.parity = (buffer, first)
            return out

        if perm(first) == buffer_perm or perm(first) in solved:
            # Cycle closed; start a new one from an unsolved piece.
            unsolved = find_unsolved_piece(pieces, solved, [buffer_perm, perm(cycle_end)])
            if unsolved is None:
                raise AssertionError("closed cycle with no unsolved piece left")
            nxt = pieces.at(unsolved)
            out.cycles.append((buffer, unsolved, nxt))
            solved.add(perm(nxt))
            logger.debug("cycle break at %r, new cycle from %r", first, unsolved)
            zeroth = nxt
            cycle_end = unsolved
        elif perm(first) == perm(cycle_end) or perm(second) == buffer_perm:
            # Only `first` is left in this cycle; pair it with a fresh piece.
            unsolved = find_unsolved_piece(pieces, solved, [buffer_perm, perm(first)])
            if unsolved is None:
                raise AssertionError("cycle end reached with no unsolved piece left")
            out.cycles.append((buffer, first, unsolved))
            solved.add(perm(first))
            logger.debug("cycle end at %r, continuing with %r", first, unsolved)
            zeroth = cycle_end = unsolved
        else:
            out.cycles.append((buffer, first, second))
            solved.add(perm(first))
            solved.add(perm(second))
            if perm(second) == perm(cycle_end):
                zeroth = cycle_end = buffer
            else:
                zeroth = second


def memo_centers(state, buffer) -> Memo:
    """Memorize a center category, where same-colored pieces are interchangeable.

    A position counts as solved when it holds any piece of its own color, and
    targets are picked on the face matching the color being placed.
    """
    pieces = pieces_for(state)
    perm = pieces.sticker_permutation
    total = len(pieces.STICKERS)

    out = Memo()
    solved: set = set()
    for sticker in pieces.STICKERS:
        if pieces.at(sticker).color() == sticker.color() and sticker != buffer:
            if perm(sticker) in solved:
                raise AssertionError(f"{sticker!r} counted as solved twice")
            solved.add(perm(sticker))

    zeroth = buffer
    cycle_end = buffer
    while True:
        new_cycle_end = None
        new_solved: set = set()

        first_target = None
        if zeroth is not None:
            face = pieces.at(zeroth).color()
            first_target = find_unsolved_piece_on_face(pieces, solved, face, [perm(buffer)])
            if first_target is not None:
                new_solved.add(perm(first_target))
        if first_target is None:
            first_target = find_unsolved_piece(pieces, solved, [perm(buffer)])
            if first_target is None:
                if zeroth is not None and len(solved) != total - 1:
                    raise AssertionError(f"{len(solved)} centers solved with nothing left to place")
                return out
            new_cycle_end = first_target

        if first_target == cycle_end:
            second_target = find_unsolved_piece(pieces, solved, [perm(buffer), perm(first_target)])
            if second_target is None:
                out.parity = (buffer, first_target)
                return out
            if second_target == cycle_end:
                raise AssertionError("new cycle starts at the old cycle end")
            if new_cycle_end is not None:
                raise AssertionError("two cycle breaks in one step")
            new_cycle_end = second_target
        else:
            face = pieces.at(first_target).color()
            second_target = find_unsolved_piece_on_face(
                pieces, solved, face, [perm(buffer), perm(first_target)]
            )
            if second_target is not None:
                new_solved.add(perm(second_target))
            else:
                second_target = find_unsolved_piece(pieces, solved, [perm(buffer), perm(first_target)])
                if second_target is None:
                    if len(solved) != total - 2:
                        raise AssertionError(f"parity with {len(solved)} centers solved")
                    out.parity = (buffer, first_target)
                    return out
                if first_target == cycle_end or second_target == cycle_end:
                    raise AssertionError("fresh target collides with the cycle end")
                new_cycle_end = second_target
                logger.debug("center cycle break, continuing with %r", second_target)

        out.cycles.append((buffer, first_target, second_target))
        if second_target == cycle_end:
            zeroth = None
            cycle_end = buffer
        else:
            zeroth = second_target
            if new_cycle_end is not None:
                cycle_end = new_cycle_end
        solved |= new_solved
