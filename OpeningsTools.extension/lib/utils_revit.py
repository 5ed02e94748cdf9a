# -*- coding: utf-8 -*-

import traceback

from pyrevit import DB
from pyrevit import forms
from pyrevit import revit
from pyrevit import script


TOOL_TITLE = 'Openings Tools'


def get_output():
    return script.get_output()


def get_logger():
    return script.get_logger()


def _safe_log(logger_method, msg):
    try:
        logger_method(msg)
    except UnicodeEncodeError:
        # Консоль без UTF-8 не печатает кириллицу
        logger_method(repr(msg))


def alert(msg, title=TOOL_TITLE, warn_icon=True):
    try:
        forms.alert(msg, title=title, warn_icon=warn_icon)
    except Exception:
        # UI недоступен (например, при запуске из журнала)
        _safe_log(get_logger().warning, msg)


def log_exception(prefix='Error'):
    logger = get_logger()
    _safe_log(logger.error, prefix)
    _safe_log(logger.error, traceback.format_exc())


def id_value(element_id):
    """Integer value of an ElementId across Revit versions (Value in 2024+)."""
    if element_id is None:
        return None
    val = getattr(element_id, 'Value', None)
    if val is None:
        val = getattr(element_id, 'IntegerValue', None)
    try:
        return int(val)
    except (TypeError, ValueError):
        return None


def find_nearest_level(doc, z_ft):
    """Return nearest Level by elevation to given Z (feet)."""
    levels = list(DB.FilteredElementCollector(doc).OfClass(DB.Level).ToElements())
    best = None
    best_d = None
    for lvl in levels:
        d = abs(float(lvl.Elevation) - float(z_ft))
        if best is None or d < best_d:
            best = lvl
            best_d = d
    return best


def ensure_symbol_active(doc, family_symbol):
    if family_symbol is None:
        return
    if not family_symbol.IsActive:
        family_symbol.Activate()
        doc.Regenerate()


def get_param(elem, name):
    if elem is None or not name:
        return None
    return elem.LookupParameter(name)


def set_double_param(elem, param_name, value_ft):
    """Write a length (feet) into a named parameter. False if it can't be set."""
    p = get_param(elem, param_name)
    if p is None or p.IsReadOnly:
        return False
    p.Set(float(value_ft))
    return True


def set_string_param(elem, param_name, value):
    p = get_param(elem, param_name)
    if p is None or p.IsReadOnly:
        return False
    p.Set(value if value is not None else u'')
    return True


def get_comments(elem):
    if elem is None:
        return None
    p = elem.get_Parameter(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
    if p is None:
        return None
    return p.AsString()


def set_comments(elem, value):
    if elem is None:
        return False

    p = elem.get_Parameter(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
    if p is not None and not p.IsReadOnly:
        p.Set(value if value is not None else u'')
        return True

    # Семейства без встроенного параметра
    if set_string_param(elem, 'Comments', value):
        return True
    return set_string_param(elem, u'Комментарии', value)


def tx(name, doc=None):
    """Transaction context manager.

    Usage:
        with tx(u'Размещение отверстий'):
            ...
    """
    doc = doc or revit.doc
    t = DB.Transaction(doc, name)

    class _Tx(object):
        def __enter__(self):
            t.Start()
            return t

        def __exit__(self, exc_type, exc, tb):
            if exc_type:
                t.RollBack()
                return False
            try:
                t.Commit()
            except Exception:
                t.RollBack()
                raise
            return False

    return _Tx()
