"""CLI entrypoint with scrape/select/locate/relativize commands."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import Config, load_config
from .errors import ScrapeError
from .extraction import compile_path, extract_with_selectors, parse_document, query_all, root_element
from .paths import element_path, make_paths_relative
from .scheme import dump_scheme, parse_scheme
from .boundary import scrape_value

logger = logging.getLogger(__name__)


def _read(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scheme-scraper", description="Declarative HTML extraction")
    parser.add_argument("--config", default="config.yaml", help="Path to config yaml")
    parser.add_argument("--log-level", default=None, help="Override configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    scrape_p = sub.add_parser("scrape", help="Extract a value from HTML using a scheme")
    scrape_p.add_argument("--html", required=True, help="HTML file, or - for stdin")
    scrape_p.add_argument("--scheme", required=True, help="Scheme JSON file, or - for stdin")
    scrape_p.add_argument("--indent", type=int, default=None)

    select_p = sub.add_parser("select", help="Show the text matched by CSS selectors")
    select_p.add_argument("--html", required=True)
    select_p.add_argument("selectors", nargs="+")

    locate_p = sub.add_parser("locate", help="Print the element path of every match")
    locate_p.add_argument("--html", required=True)
    locate_p.add_argument("selector")

    rel_p = sub.add_parser("relativize", help="Rewrite list element paths relative to their list")
    rel_p.add_argument("--scheme", required=True)
    return parser


def _run_scrape(config: Config, html: str, scheme: str, indent: Optional[int]) -> int:
    if indent is not None:
        config.output.indent = indent
    value = scrape_value(_read(html), _read(scheme), config)
    print(json.dumps(value, indent=config.output.indent, ensure_ascii=config.output.ensure_ascii))
    return 0


def _run_select(config: Config, html: str, selectors: List[str]) -> int:
    matches = extract_with_selectors(_read(html), selectors, features=config.parser.features)
    print(json.dumps(matches, indent=2, ensure_ascii=False))
    return 0


def _run_locate(config: Config, html: str, selector: str) -> int:
    document = root_element(parse_document(_read(html), config.parser.features))
    for tag in query_all(document, compile_path(selector)):
        print(element_path(tag))
    return 0


def _run_relativize(scheme: str) -> int:
    relative = make_paths_relative(parse_scheme(_read(scheme)))
    print(dump_scheme(relative, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    logging.basicConfig(level=(args.log_level or config.logging.level).upper(), format=config.logging.format)
    try:
        if args.command == "scrape":
            return _run_scrape(config, args.html, args.scheme, args.indent)
        if args.command == "select":
            return _run_select(config, args.html, args.selectors)
        if args.command == "locate":
            return _run_locate(config, args.html, args.selector)
        if args.command == "relativize":
            return _run_relativize(args.scheme)
    except (ScrapeError, OSError) as exc:
        logger.error("%s", exc)
        print(json.dumps({"error": str(exc)}))
        return 1
    return 2


if __name__ == "__main__":
    sys.exit(main())
