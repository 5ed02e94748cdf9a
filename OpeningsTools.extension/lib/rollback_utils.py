# -*- coding: utf-8 -*-
"""Rollback utilities for undoing AUTO_OPENING placements.

Openings placed by Openings Tools carry a tag in their Comments
parameter: ``<PREFIX>:<KIND>[:<TIMESTAMP>]`` where PREFIX is the
``comment_tag`` rule (AUTO_OPENING by default) and KIND is the
crossing element category (DUCT or PIPE).

Example:
    >>> from rollback_utils import find_tagged_elements, delete_elements
    >>> ducts = find_tagged_elements(doc, tool_filter="DUCT")
    >>> count = delete_elements(doc, ducts)
"""
import re
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pyrevit import DB

from utils_revit import get_comments, get_logger, tx


DEFAULT_TAG_PREFIX = "AUTO_OPENING"

# Group name for tags that carry no kind
UNKNOWN_TOOL = "UNKNOWN"

# PREFIX:KIND:YYYYMMDD_HHMMSS
TAG_PATTERN_TEMPLATE = r"^({0})(?::([A-Z_]+))?(?::(\d{{8}}_\d{{6}}))?"


def _tag_pattern(prefix):
    return re.compile(TAG_PATTERN_TEMPLATE.format(re.escape(prefix)), re.IGNORECASE)


def parse_tag(comment: Optional[str], prefix: str = DEFAULT_TAG_PREFIX) -> Optional[Dict[str, Optional[str]]]:
    """Parse opening tag from element comment.

    Examples:
        >>> parse_tag("AUTO_OPENING:DUCT:20260117_143022")
        {'prefix': 'AUTO_OPENING', 'tool': 'DUCT', 'timestamp': '20260117_143022'}
        >>> parse_tag("AUTO_OPENING:PIPE")
        {'prefix': 'AUTO_OPENING', 'tool': 'PIPE', 'timestamp': None}
        >>> parse_tag("Some other comment")
        None
    """
    if not comment:
        return None

    match = _tag_pattern(prefix).match(comment.strip())
    if not match:
        return None

    return {
        "prefix": match.group(1).upper(),
        "tool": match.group(2),
        "timestamp": match.group(3),
    }


def generate_tag(tool_name: str, include_timestamp: bool = False, prefix: str = DEFAULT_TAG_PREFIX) -> str:
    """Generate a tag for opening comments.

    Examples:
        >>> generate_tag("duct")
        'AUTO_OPENING:DUCT'
        >>> generate_tag("pipe", include_timestamp=True)
        'AUTO_OPENING:PIPE:20260117_143022'
    """
    tool_name = tool_name.upper().replace(" ", "_")

    if include_timestamp:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return "{}:{}:{}".format(prefix, tool_name, timestamp)

    return "{}:{}".format(prefix, tool_name)


def _tool_matches(parsed, tool_filter):
    if not tool_filter:
        return True
    return (parsed.get("tool") or UNKNOWN_TOOL).upper() == tool_filter.upper()


def find_tagged_elements(doc, tool_filter: Optional[str] = None, prefix: str = DEFAULT_TAG_PREFIX) -> List:
    """Find all instances whose Comments carry an opening tag.

    Args:
        doc: Revit document to search.
        tool_filter: Optional kind to filter by (e.g., "DUCT").
        prefix: Tag prefix, the ``comment_tag`` rule.
    """
    if doc is None:
        return []

    provider = DB.ParameterValueProvider(
        DB.ElementId(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
    )
    rule = DB.FilterStringRule(provider, DB.FilterStringContains(), prefix)
    collector = (
        DB.FilteredElementCollector(doc)
        .WhereElementIsNotElementType()
        .WherePasses(DB.ElementParameterFilter(rule))
    )

    elements = []
    for elem in collector:
        parsed = parse_tag(get_comments(elem), prefix=prefix)
        if parsed and _tool_matches(parsed, tool_filter):
            elements.append(elem)
    return elements


def get_unique_tags(doc, prefix: str = DEFAULT_TAG_PREFIX) -> List[Tuple[str, int]]:
    """Get all unique opening tags (without timestamp) with counts.

    Returns:
        List of (tag, count) tuples, sorted by count descending.
    """
    tag_counts: Dict[str, int] = {}

    for elem in find_tagged_elements(doc, prefix=prefix):
        parsed = parse_tag(get_comments(elem), prefix=prefix)
        if not parsed:
            continue
        tag_key = "{}:{}".format(parsed["prefix"], parsed.get("tool") or UNKNOWN_TOOL)
        tag_counts[tag_key] = tag_counts.get(tag_key, 0) + 1

    return sorted(tag_counts.items(), key=lambda x: -x[1])


def delete_elements(doc, elements: List, transaction_name: str = "Undo AUTO_OPENING") -> int:
    """Delete elements in a single transaction. Returns number deleted."""
    if doc is None or not elements:
        return 0

    element_ids = [e.Id for e in elements if getattr(e, "Id", None) is not None]
    if not element_ids:
        return 0

    logger = get_logger()
    deleted = 0
    with tx(transaction_name, doc=doc):
        for eid in element_ids:
            try:
                doc.Delete(eid)
                deleted += 1
            except Exception as ex:
                # Элемент уже удалён вместе с основой
                logger.debug("Skip delete {}: {}".format(eid, ex))
    return deleted


def delete_by_tool(doc, tool_name: str, prefix: str = DEFAULT_TAG_PREFIX) -> int:
    """Delete all openings of one kind."""
    elements = find_tagged_elements(doc, tool_filter=tool_name, prefix=prefix)
    transaction_name = "Undo {}:{}".format(prefix, tool_name.upper())
    return delete_elements(doc, elements, transaction_name)


def delete_all_tagged(doc, prefix: str = DEFAULT_TAG_PREFIX) -> int:
    """Delete ALL openings with the tag prefix.

    Can only be undone with Ctrl+Z before the file is saved.
    """
    elements = find_tagged_elements(doc, prefix=prefix)
    return delete_elements(doc, elements, "Delete All {}".format(prefix))
