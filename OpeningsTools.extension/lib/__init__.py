# -*- coding: utf-8 -*-

"""Openings Tools shared library.

This folder is auto-added to sys.path by pyRevit for this extension.
Keep modules dependency-free (pyRevit + RevitAPI only).

Modules:
    utils_units: Unit conversion between mm and feet
    utils_revit: Logging, dialogs, parameters and transactions
    config_loader: Rules file loading
    placement_engine: Family type lookup and hosted placement
    rollback_utils: Opening tags and undo
"""

__version__ = "0.1.0"
__author__ = "Openings Team"
