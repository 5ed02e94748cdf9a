# -*- coding: utf-8 -*-

"""Length conversion between millimeters and Revit internal units.

Revit stores every length in decimal feet, while opening clearances and
search radii in the rules file are given in millimeters.

Example:
    >>> from utils_units import mm_to_ft, ft_to_mm
    >>> mm_to_ft(150)
    0.4921259842519685
    >>> ft_to_mm(0.5)
    152.4
"""
from typing import Optional, Union


MM_PER_FOOT: float = 304.8

Number = Union[float, int, str]


def mm_to_ft(mm: Optional[Number]) -> Optional[float]:
    """Convert millimeters to internal feet.

    Numeric strings are accepted since rules may come from hand-edited JSON.
    ``None`` passes through unchanged.
    """
    if mm is None:
        return None
    return float(mm) / MM_PER_FOOT


def ft_to_mm(ft: Optional[Number]) -> Optional[float]:
    """Convert internal feet to millimeters. ``None`` passes through."""
    if ft is None:
        return None
    return float(ft) * MM_PER_FOOT


def offset_size_ft(size_ft: Optional[Number], offset_mm: Optional[Number]) -> Optional[float]:
    """Add a clearance given in millimeters to a size given in feet.

    Examples:
        >>> offset_size_ft(1.0, 304.8)
        2.0
        >>> offset_size_ft(None, 50)
        None
    """
    if size_ft is None:
        return None
    return float(size_ft) + (mm_to_ft(offset_mm) or 0.0)
