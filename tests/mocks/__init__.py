# -*- coding: utf-8 -*-
"""Mock modules for testing Revit-dependent code without Revit."""

from .revit_api import (
    DB,
    MockApplication,
    MockDocument,
    mock_duct,
    mock_hit,
    mock_opening_symbol,
    mock_pipe,
    mock_xyz,
)

__all__ = [
    "DB",
    "MockApplication",
    "MockDocument",
    "mock_duct",
    "mock_hit",
    "mock_opening_symbol",
    "mock_pipe",
    "mock_xyz",
]
