from scheme_scraper.extraction import compile_path, parse_document, query_all
from scheme_scraper.interpreter import process
from scheme_scraper.paths import element_path, make_path_relative, make_paths_relative
from scheme_scraper.scheme import parse_scheme

PAGE = """
<html><body>
  <main>
    <section><ul><li>a</li><li>b</li></ul></section>
    <section><ul><li>c</li></ul></section>
  </main>
  <span>x</span>
</body></html>
"""


def test_element_path_numbers_same_named_siblings():
    soup = parse_document(PAGE)
    paths = [element_path(tag) for tag in query_all(soup, compile_path("li"))]
    assert paths == [
        "main > section:nth-of-type(1) > ul > li:nth-of-type(1)",
        "main > section:nth-of-type(1) > ul > li:nth-of-type(2)",
        "main > section:nth-of-type(2) > ul > li",
    ]
    assert element_path(soup.span) == "span"


def test_element_path_without_body():
    soup = parse_document("<div><p>a</p></div>")
    assert element_path(soup.p) == "div > p"


def test_make_path_relative():
    assert make_path_relative("main > ul > li:nth-of-type(2) > a", "main > ul") == "li > a"
    assert make_path_relative("li > a", "main > ul") == "li > a"
    assert make_path_relative("main > ul", "main > ul") == "main > ul"


def test_make_paths_relative_handles_nested_lists():
    scheme = parse_scheme(
        {
            "type": "OBJECT",
            "fields": [
                {
                    "key": "sections",
                    "value": {
                        "type": "LIST",
                        "path": "main",
                        "element_scheme": {
                            "type": "LIST",
                            "path": "main > section:nth-of-type(1) > ul",
                            "element_scheme": {"type": "STRING", "path": "main > section:nth-of-type(1) > ul > li"},
                        },
                    },
                }
            ],
        }
    )
    relative = make_paths_relative(scheme)
    outer = relative.fields[0].value
    assert outer.path == "main"
    assert outer.element_scheme.path == "section > ul"
    assert outer.element_scheme.element_scheme.path == "li"
    assert process(relative, parse_document(PAGE)) == {"sections": [["a", "b"], ["c"]]}


def test_make_paths_relative_leaves_strings_alone():
    scheme = parse_scheme({"type": "STRING", "path": "main > section > ul"})
    assert make_paths_relative(scheme) == scheme
