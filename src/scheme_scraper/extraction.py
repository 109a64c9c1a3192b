"""Query adapter: HTML parsing, CSS path compilation, and node content helpers."""

from __future__ import annotations

import logging
from typing import Dict, List, Literal, Optional, Union

import soupsieve
from bs4 import BeautifulSoup, Tag

from .errors import InvalidPath, NoAttributeFound

logger = logging.getLogger(__name__)

ContentMode = Literal["INNER_HTML", "TEXT", "SRC"]
Node = Union[BeautifulSoup, Tag]


def parse_document(html: str, features: str = "html.parser") -> BeautifulSoup:
    return BeautifulSoup(html, features)


def root_element(document: BeautifulSoup) -> Node:
    """Anchor for a whole-document scrape: the <html> element when the parser made one."""
    root = document.find("html", recursive=False)
    return root if root is not None else document


def compile_path(path: str) -> soupsieve.SoupSieve:
    """Compile a CSS path, raising InvalidPath before any traversal happens."""
    try:
        return soupsieve.compile(path)
    except (soupsieve.SelectorSyntaxError, ValueError, TypeError) as exc:
        logger.debug("Path %r rejected: %s", path, exc)
        raise InvalidPath(path) from exc


def query_all(node: Node, matcher: soupsieve.SoupSieve) -> List[Tag]:
    """Matching descendants of ``node`` in document order."""
    return matcher.select(node)


def query_first(node: Node, matcher: soupsieve.SoupSieve) -> Optional[Tag]:
    return matcher.select_one(node)


def content(node: Tag, mode: ContentMode = "INNER_HTML", path: str = "") -> str:
    if mode == "TEXT":
        return node.get_text(strip=True)
    if mode == "SRC":
        src = node.get("src")
        if src is None:
            raise NoAttributeFound(path, "src")
        return str(src)
    return node.decode_contents()


def extract_with_selectors(
    html: str,
    css_selectors: Optional[List[str]] = None,
    features: str = "html.parser",
) -> Dict[str, List[str]]:
    soup = root_element(parse_document(html, features))
    output: Dict[str, List[str]] = {}
    for selector in css_selectors or []:
        matcher = compile_path(selector)
        output[selector] = [content(el, "TEXT") for el in query_all(soup, matcher)]
    return output


__all__ = [
    "ContentMode",
    "Node",
    "parse_document",
    "root_element",
    "compile_path",
    "query_all",
    "query_first",
    "content",
    "extract_with_selectors",
]
