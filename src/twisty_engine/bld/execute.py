from __future__ import annotations

from twisty_engine.bld.memo import Memo
from twisty_engine.bld.pieces import pieces_for


def execute_memo(state, buffer, memo: Memo) -> None:
    """Apply `memo` to `state` in place; a correct memo leaves the category solved.

    Every cycle and the parity are performed as sticker cycles through the
    buffer, then each twist is undone by twisting the piece back and pushing
    the opposite twist into the buffer.
    """
    pieces = pieces_for(state)
    for cycle in memo.cycles:
        pieces.cycle(list(cycle), 1)
    if memo.parity is not None:
        pieces.cycle(list(memo.parity), 1)

    buffer_perm = pieces.sticker_permutation(buffer)
    for permutation, orientation in memo.twists:
        pieces.cycle(
            [pieces.sticker(permutation, orientation), pieces.sticker(permutation, pieces.GOOD)], 1
        )
        pieces.cycle(
            [pieces.sticker(buffer_perm, pieces.GOOD), pieces.sticker(buffer_perm, orientation)], 1
        )
