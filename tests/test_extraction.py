import pytest

from scheme_scraper.errors import InvalidPath
from scheme_scraper.extraction import (
    compile_path,
    content,
    extract_with_selectors,
    parse_document,
    query_all,
    query_first,
    root_element,
)

HTML = '<div><p>one <em>1</em></p><p>two</p><section><p>three</p></section><img src="x.png"></div>'


def test_query_all_returns_descendants_in_document_order():
    soup = parse_document(HTML)
    div = soup.div
    texts = [p.get_text() for p in query_all(div, compile_path("p"))]
    assert texts == ["one 1", "two", "three"]
    assert query_all(div.p, compile_path("p")) == []


def test_query_first():
    soup = parse_document(HTML)
    assert query_first(soup, compile_path("section p")).get_text() == "three"
    assert query_first(soup, compile_path("table")) is None


def test_content_modes():
    soup = parse_document(HTML)
    assert content(soup.p) == "one <em>1</em>"
    assert content(soup.p, "TEXT") == "one1"
    assert content(soup.img, "SRC") == "x.png"


def test_compile_rejects_malformed_selector():
    with pytest.raises(InvalidPath):
        compile_path("div >> [")


def test_extract_with_selectors():
    result = extract_with_selectors(HTML, css_selectors=["section p", "em"])
    assert result == {"section p": ["three"], "em": ["1"]}


def test_root_element_prefers_html_tag():
    page = parse_document("<!DOCTYPE html><html><body><p>a</p></body></html>")
    assert root_element(page).name == "html"
    assert query_first(root_element(page), compile_path("html")) is None
    fragment = parse_document(HTML)
    assert root_element(fragment) is fragment
