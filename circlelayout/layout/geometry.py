"""
Geometry helpers for the layout engine

Angles follow the mathematical convention (counter-clockwise positive,
measured from the positive horizontal axis). Conversion to screen space,
where Y grows downward, happens in the engine.
"""
from __future__ import annotations
from typing import Tuple, Union
import math
import numpy as np

FULL_CIRCLE = 2 * math.pi

ArrayLike = Union[float, np.ndarray]


def effective_radius(width: float, height: float) -> float:
    """
    Radius of a child if it were round

    Args:
        width: Measured width
        height: Measured height

    Returns:
        Half of the larger dimension
    """
    return max(width, height) / 2


def equal_angle(num_slices: int) -> float:
    """
    Split a circle into `num_slices` equal slices

    Args:
        num_slices: Number of slices

    Returns:
        Angle between two adjacent slices, or a full turn if num_slices is 0
    """
    return FULL_CIRCLE / (num_slices if num_slices > 0 else 1)


def polar_to_cartesian(radius: ArrayLike, angle: ArrayLike) -> Tuple[ArrayLike, ArrayLike]:
    """
    Convert polar coordinates to Cartesian offsets

    Works on scalars and numpy arrays alike.

    Returns:
        (x, y) with Y growing upward
    """
    return radius * np.cos(angle), radius * np.sin(angle)


def oval_radius_at_angle(semi_x: ArrayLike, semi_y: ArrayLike, angle: ArrayLike) -> ArrayLike:
    """
    Distance from the center of an ellipse to its edge at a given angle

    r(θ) = a·b / sqrt(b²·cos²θ + a²·sin²θ)

    Args:
        semi_x: Semi-axis along the horizontal axis (a)
        semi_y: Semi-axis along the vertical axis (b)
        angle: Polar angle in radians

    Returns:
        Radius at `angle`; 0 where the ellipse degenerates to a point
    """
    cos = np.cos(angle)
    sin = np.sin(angle)
    numerator = np.multiply(semi_x, semi_y)
    denominator = np.sqrt(np.square(semi_y) * cos * cos + np.square(semi_x) * sin * sin)

    with np.errstate(divide='ignore', invalid='ignore'):
        radius = np.where(denominator > 0, numerator / np.where(denominator > 0, denominator, 1.0), 0.0)

    if np.ndim(radius) == 0:
        return float(radius)
    return radius


def rect_from_center(cx: float, cy: float, width: float, height: float) -> Tuple[float, float, float, float]:
    """Rectangle (left, top, width, height) centered on (cx, cy)"""
    return (cx - width / 2, cy - height / 2, width, height)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
