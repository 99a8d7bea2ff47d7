"""
ordmap: an AVL-balanced ordered map plus the small geometry value types
that travel with it.
"""

import logging

from ordmap import config
from ordmap.geometry import LineSegment, Point
from ordmap.indexing import AVLTreeMap, OrderedMap

__all__ = ["AVLTreeMap", "OrderedMap", "Point", "LineSegment"]

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
if config.LOG_LEVEL is not None:
    _logger.setLevel(config.LOG_LEVEL)
