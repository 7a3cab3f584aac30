"""
Type definitions for circlelayout

Common types used by the I/O and CLI layers.
"""

from __future__ import annotations
from typing import Literal, Optional, TypedDict, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

VisibilityName = Literal['visible', 'invisible', 'gone']
"""Visibility as written in child tables"""

PresetName = Literal['default', 'presentation', 'debug']
"""Name of a PlotConfig preset"""


# Structured data types

class ChildRecord(TypedDict):
    """One row of a child table"""
    id: Optional[str]
    width: float
    height: float
    visibility: VisibilityName
