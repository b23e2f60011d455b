"""twisty_engine.pieces"""

from .corners import CornerDirection, CornerOrientation, CornerPermutation, CornerSticker, Corners
from .corners_fixed import CornerCoordsFixed, CornerCoordsMoveTableFixed, CornersFixed
from .edges import EdgeDirection, EdgeOrientation, EdgePermutation, EdgeSticker, Edges
from .obliques import Obliques, ObliquesPair
from .tcenters import TCenters
from .wings import Wings, WingSticker
from .xcenters import XCenters

__all__ = [
    "CornerCoordsFixed",
    "CornerCoordsMoveTableFixed",
    "CornerDirection",
    "CornerOrientation",
    "CornerPermutation",
    "CornerSticker",
    "Corners",
    "CornersFixed",
    "EdgeDirection",
    "EdgeOrientation",
    "EdgePermutation",
    "EdgeSticker",
    "Edges",
    "Obliques",
    "ObliquesPair",
    "TCenters",
    "WingSticker",
    "Wings",
    "XCenters",
]
