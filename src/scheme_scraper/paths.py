"""Path utilities: build CSS paths for elements and relativize scheme paths."""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup, Tag

from .scheme import ListScheme, ObjectScheme, Scheme, StringScheme

NTH_OF_TYPE = re.compile(r":nth-of-type\(\d+\)")
_ROOT_TAGS = {"html", "body"}


def element_path(tag: Tag) -> str:
    """CSS path from just below <body> down to ``tag``."""
    segments: List[str] = []
    current = tag
    while isinstance(current, Tag) and not isinstance(current, BeautifulSoup) and current.name not in _ROOT_TAGS:
        segment = current.name
        parent = current.parent
        if parent is not None:
            siblings = parent.find_all(current.name, recursive=False)
            if len(siblings) > 1:
                index = next(i for i, sibling in enumerate(siblings, start=1) if sibling is current)
                segment += f":nth-of-type({index})"
        segments.append(segment)
        current = parent
    return " > ".join(reversed(segments))


def _split(path: str) -> List[str]:
    return [segment.strip() for segment in path.split(">")]


def make_path_relative(child: str, parent: str) -> str:
    """Drop the leading segments ``child`` shares with ``parent``."""
    parent_segments = _split(parent)
    child_segments = _split(child)
    common = 0
    for left, right in zip(parent_segments, child_segments):
        if left != right:
            break
        common += 1
    remaining = child_segments[common:]
    if common == 0 or not remaining:
        return child
    remaining[0] = NTH_OF_TYPE.sub("", remaining[0], count=1)
    return " > ".join(remaining)


def make_paths_relative(scheme: Scheme) -> Scheme:
    """Rewrite each list's element paths relative to that list's own path."""
    if isinstance(scheme, ListScheme):
        return scheme.model_copy(update={"element_scheme": _relative_to(scheme.element_scheme, scheme.path)})
    if isinstance(scheme, ObjectScheme):
        fields = [f.model_copy(update={"value": make_paths_relative(f.value)}) for f in scheme.fields]
        return scheme.model_copy(update={"fields": fields})
    return scheme


def _relative_to(scheme: Scheme, parent: str) -> Scheme:
    if isinstance(scheme, StringScheme):
        return scheme.model_copy(update={"path": make_path_relative(scheme.path, parent)})
    if isinstance(scheme, ObjectScheme):
        fields = [f.model_copy(update={"value": _relative_to(f.value, parent)}) for f in scheme.fields]
        return scheme.model_copy(update={"fields": fields})
    if isinstance(scheme, ListScheme):
        return scheme.model_copy(
            update={
                "path": make_path_relative(scheme.path, parent),
                "element_scheme": _relative_to(scheme.element_scheme, scheme.path),
            }
        )
    return scheme


__all__ = ["element_path", "make_path_relative", "make_paths_relative"]
