"""twisty_engine.explorer"""

from .pair_frequencies import pair_frequencies

__all__ = [
    "pair_frequencies",
]
