"""Scheme interpreter: walks a scheme alongside a document node.

``process`` always yields exactly one value. ``process_many`` yields a
position-aligned sequence of same-shaped values and is entered only at LIST
boundaries, which is where "exactly one" turns into "however many".
"""

from __future__ import annotations

import logging
from typing import Dict, List, Union

from .errors import EmptyObjectScheme, FeatureNotImplemented, MismatchedFieldCount, NoElementFound
from .extraction import Node, compile_path, content, query_all, query_first
from .scheme import ListScheme, ObjectScheme, Scheme, StringScheme

logger = logging.getLogger(__name__)

Value = Union[Dict[str, "Value"], List["Value"], str]


def process(scheme: Scheme, node: Node) -> Value:
    """Extract a single value anchored at ``node``."""
    if isinstance(scheme, ObjectScheme):
        return {field.key: process(field.value, node) for field in scheme.fields}
    if isinstance(scheme, StringScheme):
        match = query_first(node, compile_path(scheme.path))
        if match is None:
            raise NoElementFound(scheme.path)
        return content(match, scheme.mode, scheme.path)
    if isinstance(scheme, ListScheme):
        matcher = compile_path(scheme.path)
        anchor = query_first(node, matcher)
        if anchor is None:
            raise NoElementFound(scheme.path)
        values = process_many(scheme.element_scheme, anchor)
        logger.debug("List %r expanded to %d entries", scheme.path, len(values))
        return values
    raise FeatureNotImplemented(type(scheme).__name__)


def process_many(scheme: Scheme, node: Node) -> List[Value]:
    """Extract every match anchored at ``node``; an empty result is valid."""
    if isinstance(scheme, StringScheme):
        matches = query_all(node, compile_path(scheme.path))
        logger.debug("Path %r matched %d nodes", scheme.path, len(matches))
        return [content(match, scheme.mode, scheme.path) for match in matches]
    if isinstance(scheme, ListScheme):
        matcher = compile_path(scheme.path)
        anchors = query_all(node, matcher)
        logger.debug("Nested list %r matched %d containers", scheme.path, len(anchors))
        return [process_many(scheme.element_scheme, anchor) for anchor in anchors]
    if isinstance(scheme, ObjectScheme):
        return _zip_fields(scheme, node)
    raise FeatureNotImplemented(type(scheme).__name__)


def _zip_fields(scheme: ObjectScheme, node: Node) -> List[Value]:
    if not scheme.fields:
        raise EmptyObjectScheme()

    columns: List[List[Value]] = []
    for field in scheme.fields:
        values = process_many(field.value, node)
        # the first field fixes how many objects get built
        if columns and len(values) != len(columns[0]):
            raise MismatchedFieldCount(field.key, len(columns[0]), len(values))
        columns.append(values)

    keys = [field.key for field in scheme.fields]
    return [dict(zip(keys, row)) for row in zip(*columns)]


__all__ = ["Value", "process", "process_many"]
