# -*- coding: utf-8 -*-

import placement_engine
import rollback_utils
from utils_revit import alert, get_logger, set_comments, tx
from utils_units import mm_to_ft

import adapters
from domain import (
    KIND_DUCT,
    KIND_LABELS,
    KIND_PIPE,
    OpeningRequest,
    RunStats,
    dedupe_hits,
    filter_hits_by_length,
    insertion_point,
    is_near_any,
    opening_size_ft,
)


TRANSACTION_NAME = u'Размещение отверстий'


def build_requests(kind, elements, intersector, offset_mm, stats, transforms=None):
    """Cast a ray along every element and turn wall hits into requests.

    One ray is cast per link transform, so every placed copy of the
    mechanical link gets its own openings. None stands for host coordinates.
    """
    logger = get_logger()
    transforms = transforms or [None]
    requests = []
    for elem in elements or []:
        stats.elements += 1
        line = adapters.get_element_line(elem)
        if line is None:
            stats.skipped_geometry += 1
            continue

        for transform in transforms:
            origin = line.GetEndPoint(0)
            direction = line.Direction
            if transform is not None:
                origin = transform.OfPoint(origin)
                direction = transform.OfVector(direction)

            try:
                hits = adapters.find_wall_hits(intersector, origin, direction)
                width, height = adapters.get_element_size(elem)
            except Exception as ex:
                stats.failed += 1
                logger.warning(u'{0} {1}: {2}'.format(kind, elem.Id, ex))
                continue

            hits = dedupe_hits(filter_hits_by_length(hits, line.Length))
            stats.hits += len(hits)
            for hit in hits:
                requests.append(OpeningRequest(
                    kind,
                    elem.Id,
                    hit.GetReference().ElementId,
                    insertion_point(origin, direction, hit.Proximity),
                    opening_size_ft(width, offset_mm),
                    opening_size_ft(height, offset_mm),
                ))
    return requests


def place_requests(doc, symbol, requests, rules, stats, existing_points=None, missing_params=None):
    """Place openings for requests of one kind. Must run inside a transaction.

    Names of size parameters the family lacks are added to missing_params.
    """
    logger = get_logger()
    width_param = rules.get('opening_width_param')
    height_param = rules.get('opening_height_param')
    radius_ft = mm_to_ft(rules.get('opening_existing_dedupe_radius_mm')) or 0.0
    if missing_params is None:
        missing_params = set()
    created = []

    for req in requests:
        if is_near_any(req.point, existing_points, radius_ft):
            stats.skipped_existing += 1
            continue

        wall = doc.GetElement(req.wall_id)
        try:
            inst = placement_engine.place_wall_hosted_instance(doc, symbol, req.point, wall)
            if inst is None:
                stats.failed += 1
                continue
            missing_params.update(adapters.set_opening_size(
                inst, width_param, height_param, req.width_ft, req.height_ft))
            set_comments(inst, rollback_utils.generate_tag(req.kind, prefix=rules.get('comment_tag')))
        except Exception as ex:
            stats.failed += 1
            logger.warning(u'{0} {1} -> wall {2}: {3}'.format(req.kind, req.source_id, req.wall_id, ex))
            continue
        created.append(inst)
        stats.created += 1

    return created


def report(output, all_stats):
    output.print_md(u'## Отверстия в стенах')
    for stats in all_stats:
        output.print_md(u'**{0}**'.format(KIND_LABELS.get(stats.kind, stats.kind)))
        for label, value in stats.as_rows():
            output.print_md(u'- {0}: **{1}**'.format(label, value))


def run_placement(doc, app, output, rules=None):
    """Create openings where ducts and pipes of the mechanical model cross walls.

    Returns:
        List of RunStats (ducts, pipes), or None when a precondition failed
        and nothing was changed.
    """
    rules = rules or adapters.get_rules()

    mech_doc = adapters.find_mechanical_doc(
        app, adapters.as_list(rules.get('mechanical_doc_title_keywords')), doc)
    if mech_doc is None:
        alert(u'Не загружен файл ОВ', title='Error')
        return None

    symbol = adapters.find_opening_symbol(doc, rules.get('opening_family_type_name'))
    if symbol is None:
        alert(u'Не загружено семейство отверстия', title='Error')
        return None

    view3d = adapters.find_3d_view(doc)
    if view3d is None:
        alert(u'Не найден 3D вид', title='Error')
        return None

    transforms = adapters.find_link_transforms(doc, mech_doc)
    intersector = adapters.make_wall_intersector(view3d)

    existing = []
    if rules.get('opening_skip_existing'):
        existing = adapters.collect_existing_points(doc, rules.get('comment_tag'))

    # Все лучи до первой вставки: вырезанное отверстие меняет геометрию стены
    batches = []
    for kind, elements, offset_key in (
        (KIND_DUCT, adapters.collect_ducts(mech_doc), 'duct_opening_offset_mm'),
        (KIND_PIPE, adapters.collect_pipes(mech_doc), 'pipe_opening_offset_mm'),
    ):
        stats = RunStats(kind)
        requests = build_requests(kind, elements, intersector, rules.get(offset_key), stats, transforms)
        batches.append((stats, requests))

    missing_params = set()
    with tx(TRANSACTION_NAME, doc=doc):
        for stats, requests in batches:
            place_requests(doc, symbol, requests, rules, stats, existing, missing_params)

    if missing_params:
        get_logger().warning(u'Opening family has no writable parameters: {0}'.format(
            u', '.join(sorted(missing_params))))

    all_stats = [stats for stats, _ in batches]
    report(output, all_stats)
    return all_stats
