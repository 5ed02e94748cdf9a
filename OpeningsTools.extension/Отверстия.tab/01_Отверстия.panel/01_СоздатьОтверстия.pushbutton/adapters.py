# -*- coding: utf-8 -*-

from pyrevit import DB

import config_loader
import placement_engine
import rollback_utils
from utils_revit import get_logger, log_exception, set_double_param

from domain import title_matches


def get_rules():
    try:
        return config_loader.load_rules()
    except Exception:
        log_exception('Failed to load rules')
        return dict(config_loader.DEFAULTS)


def as_list(val):
    if val is None:
        return []
    if isinstance(val, (list, tuple)):
        return [v for v in val if v]
    return [val]


def find_mechanical_doc(app, keywords, host_doc=None):
    """First open project document whose title contains one of the keywords."""
    if app is None:
        return None
    for d in app.Documents:
        if host_doc is not None and d.Equals(host_doc):
            continue
        if getattr(d, 'IsFamilyDocument', False):
            continue
        if title_matches(d.Title, keywords):
            return d
    return None


def find_link_transforms(doc, link_doc):
    """Total transforms of every link instance that shows link_doc.

    An empty list means the model is only open side by side and shares
    coordinates with the host.
    """
    if doc is None or link_doc is None:
        return []
    links = (DB.FilteredElementCollector(doc)
             .OfClass(DB.RevitLinkInstance)
             .WhereElementIsNotElementType()
             .ToElements())
    transforms = []
    for link in links:
        ld = link.GetLinkDocument()
        if ld is None:
            continue
        if ld.Equals(link_doc) or ld.Title == link_doc.Title:
            transforms.append(link.GetTotalTransform())
    return transforms


def find_opening_symbol(doc, type_name):
    return placement_engine.find_family_symbol(
        doc, type_name, category_bic=DB.BuiltInCategory.OST_GenericModel)


def find_3d_view(doc):
    views = DB.FilteredElementCollector(doc).OfClass(DB.View3D).ToElements()
    for v in views:
        if not v.IsTemplate:
            return v
    return None


def _collect_instances(doc, cls):
    return list(DB.FilteredElementCollector(doc)
                .OfClass(cls)
                .WhereElementIsNotElementType()
                .ToElements())


def collect_ducts(doc):
    return _collect_instances(doc, DB.Mechanical.Duct)


def collect_pipes(doc):
    return _collect_instances(doc, DB.Plumbing.Pipe)


def get_element_line(elem):
    """Centerline of a straight MEP curve or None."""
    loc = getattr(elem, 'Location', None)
    if not isinstance(loc, DB.LocationCurve):
        return None
    curve = loc.Curve
    if not isinstance(curve, DB.Line):
        return None
    if float(curve.Length) <= 1e-9:
        return None
    return curve


def get_element_size(elem):
    """(width, height) of the element section in feet.

    Round ducts and pipes report Diameter; rectangular and oval ducts
    throw on Diameter and report Width/Height instead.
    """
    try:
        d = float(elem.Diameter)
        if d > 1e-9:
            return d, d
    except Exception:
        pass
    return float(elem.Width), float(elem.Height)


def make_wall_intersector(view3d):
    return DB.ReferenceIntersector(
        DB.ElementClassFilter(DB.Wall),
        DB.FindReferenceTarget.Element,
        view3d
    )


def find_wall_hits(intersector, origin, direction):
    return list(intersector.Find(origin, direction))


def _instance_point(elem):
    loc = getattr(elem, 'Location', None)
    return getattr(loc, 'Point', None)


def collect_existing_points(doc, tag_prefix):
    pts = []
    for e in rollback_utils.find_tagged_elements(doc, prefix=tag_prefix):
        p = _instance_point(e)
        if p is not None:
            pts.append(p)
    return pts


def set_opening_size(inst, width_param, height_param, width_ft, height_ft):
    """Set both size parameters. Returns names that could not be set."""
    missing = []
    if not set_double_param(inst, width_param, width_ft):
        missing.append(width_param)
    if not set_double_param(inst, height_param, height_ft):
        missing.append(height_param)
    if missing:
        get_logger().debug(u'Opening {0}: not set {1}'.format(inst.Id, u', '.join(missing)))
    return missing
