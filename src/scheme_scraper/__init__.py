"""Declarative HTML extraction driven by recursive JSON schemes."""

from .errors import ScrapeError
from .interpreter import process, process_many
from .scheme import parse_scheme
from .boundary import scrape, scrape_value

__all__ = [
    "config",
    "errors",
    "extraction",
    "scheme",
    "interpreter",
    "boundary",
    "paths",
    "api",
    "cli",
    "ScrapeError",
    "scrape",
    "scrape_value",
    "parse_scheme",
    "process",
    "process_many",
]

__version__ = "0.1.0"
