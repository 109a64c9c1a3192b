"""Invocation boundary: raw document + raw scheme in, JSON text out."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import Config
from .errors import SchemeTooDeep, ScrapeError
from .extraction import parse_document, root_element
from .interpreter import Value, process
from .scheme import parse_scheme, scheme_depth

logger = logging.getLogger(__name__)


def scrape_value(content: str, instructions: Any, config: Optional[Config] = None) -> Value:
    """Decode ``instructions`` and extract from ``content``; raises ScrapeError."""
    config = config or Config()
    scheme = parse_scheme(instructions)
    depth = scheme_depth(scheme)
    if depth > config.limits.max_scheme_depth:
        raise SchemeTooDeep(depth, config.limits.max_scheme_depth)
    document = parse_document(content, config.parser.features)
    return process(scheme, root_element(document))


def scrape(content: str, instructions: Any, config: Optional[Config] = None) -> str:
    """Serialized extraction result, or ``{"error": ...}`` when it fails."""
    config = config or Config()
    try:
        result: Any = scrape_value(content, instructions, config)
    except ScrapeError as exc:
        logger.warning("Scrape failed: %s", exc)
        result = {"error": str(exc)}
    return json.dumps(result, indent=config.output.indent, ensure_ascii=config.output.ensure_ascii)


__all__ = ["scrape", "scrape_value"]
