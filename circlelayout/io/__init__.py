"""I/O utilities for circlelayout"""

from .readers import ChildTableReader, read_children
from .writers import PlacementWriter, write_placements

__all__ = [
    'ChildTableReader', 'read_children',
    'PlacementWriter', 'write_placements',
]
