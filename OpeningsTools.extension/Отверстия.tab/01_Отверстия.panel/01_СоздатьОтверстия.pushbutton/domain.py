# -*- coding: utf-8 -*-
"""Чистая логика размещения отверстий (без обращений к Revit API)."""

from utils_revit import id_value
from utils_units import offset_size_ft


KIND_DUCT = 'DUCT'
KIND_PIPE = 'PIPE'

KIND_LABELS = {
    KIND_DUCT: u'Воздуховоды',
    KIND_PIPE: u'Трубопроводы',
}


class OpeningRequest(object):
    """One opening to place: host wall, point and final size (feet)."""

    def __init__(self, kind, source_id, wall_id, point, width_ft, height_ft):
        self.kind = kind
        self.source_id = source_id
        self.wall_id = wall_id
        self.point = point
        self.width_ft = width_ft
        self.height_ft = height_ft

    def __repr__(self):
        return 'OpeningRequest({0}, src={1}, wall={2})'.format(
            self.kind, self.source_id, self.wall_id)


class RunStats(object):
    def __init__(self, kind):
        self.kind = kind
        self.elements = 0
        self.hits = 0
        self.created = 0
        self.skipped_existing = 0
        self.skipped_geometry = 0
        self.failed = 0

    def as_rows(self):
        return [
            (u'Элементов', self.elements),
            (u'Пересечений', self.hits),
            (u'Создано', self.created),
            (u'Пропущено (уже есть)', self.skipped_existing),
            (u'Пропущено (не линия)', self.skipped_geometry),
            (u'Ошибок', self.failed),
        ]


def reference_key(reference):
    """(LinkedElementId, ElementId) as integers."""
    return (id_value(reference.LinkedElementId), id_value(reference.ElementId))


def filter_hits_by_length(hits, length):
    """Keep hits that lie on the element, i.e. not beyond its end point."""
    limit = float(length)
    return [h for h in hits or [] if float(h.Proximity) <= limit]


def dedupe_hits(hits):
    """Drop repeated hits on the same element; the first one wins.

    A ray crossing a wall reports each face separately.
    """
    seen = set()
    out = []
    for h in hits or []:
        key = reference_key(h.GetReference())
        if key in seen:
            continue
        seen.add(key)
        out.append(h)
    return out


def insertion_point(origin, direction, proximity):
    return origin + direction * float(proximity)


def opening_size_ft(size_ft, offset_mm):
    return offset_size_ft(size_ft, offset_mm)


def title_matches(title, keywords):
    if not title:
        return False
    for kw in keywords or []:
        if kw and kw in title:
            return True
    return False


def points_near(a, b, radius_ft):
    dx = float(a.X) - float(b.X)
    dy = float(a.Y) - float(b.Y)
    dz = float(a.Z) - float(b.Z)
    return (dx * dx + dy * dy + dz * dz) ** 0.5 <= float(radius_ft)


def is_near_any(point, others, radius_ft):
    if not radius_ft or radius_ft <= 1e-9:
        return False
    return any(points_near(point, o, radius_ft) for o in others or [])
