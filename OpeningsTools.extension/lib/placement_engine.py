# -*- coding: utf-8 -*-

from pyrevit import DB

from utils_revit import ensure_symbol_active, find_nearest_level


def iter_family_symbols(doc, category_bic=None, limit=None):
    """Yield FamilySymbol, optionally filtered by category, with optional limit."""
    if doc is None:
        return

    col = DB.FilteredElementCollector(doc).OfClass(DB.FamilySymbol)
    if category_bic is not None:
        col = col.OfCategory(category_bic)

    for i, s in enumerate(col):
        if limit is not None and i >= int(limit):
            break
        yield s


def _norm(s):
    return (s or '').strip().lower()


def _parse_family_type(fullname):
    """Parse 'Family : Type' -> (family, type)"""
    if not fullname:
        return None, None
    fam, sep, typ = fullname.partition(':')
    if not sep:
        return None, fam.strip()
    return fam.strip(), typ.strip()


def _symbol_family_name(symbol):
    name = getattr(symbol, 'FamilyName', None)
    if name:
        return name
    fam = getattr(symbol, 'Family', None)
    return fam.Name if fam else ''


def find_family_symbol(doc, fullname, category_bic=None, limit=5000):
    """Find FamilySymbol by 'Family : Type' or by bare type name.

    Type names are compared case-insensitively; the family part is only
    checked when given.
    """
    fam_name, type_name = _parse_family_type(fullname)
    n_fam = _norm(fam_name)
    n_type = _norm(type_name)
    if not n_type:
        return None

    for s in iter_family_symbols(doc, category_bic=category_bic, limit=limit):
        if _norm(getattr(s, 'Name', None)) != n_type:
            continue
        if n_fam and _norm(_symbol_family_name(s)) != n_fam:
            continue
        return s
    return None


def resolve_host_level(doc, host, point_xyz):
    """Level of the host element, or the nearest level to the point."""
    level = None
    level_id = getattr(host, 'LevelId', None)
    if level_id is not None and level_id != DB.ElementId.InvalidElementId:
        level = doc.GetElement(level_id)
    if level is None:
        level = find_nearest_level(doc, point_xyz.Z)
    return level


def place_wall_hosted_instance(doc, symbol, point_xyz, wall, level=None):
    """Place a wall-hosted family instance at XYZ. Returns the created instance."""
    if doc is None or symbol is None or point_xyz is None or wall is None:
        return None

    ensure_symbol_active(doc, symbol)

    lvl = level or resolve_host_level(doc, wall, point_xyz)
    if lvl is None:
        raise Exception('No Level found in host doc to place instance.')

    return doc.Create.NewFamilyInstance(
        point_xyz,
        symbol,
        wall,
        lvl,
        DB.Structure.StructuralType.NonStructural
    )
