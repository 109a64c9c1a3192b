"""Error types raised while decoding schemes and extracting values."""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for every failure surfaced to callers as an error payload."""


class SchemeUndecipherable(ScrapeError):
    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = "couldn't decipher instructions"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidPath(ScrapeError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"'{path}' is not a valid path.")


class NoElementFound(ScrapeError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No element found using the '{path}' path.")


class MismatchedFieldCount(ScrapeError):
    def __init__(self, field: str, expected: int, found: int) -> None:
        self.field = field
        self.expected = expected
        self.found = found
        super().__init__(f"Field '{field}' expected {expected} values, but found {found}.")


class FeatureNotImplemented(ScrapeError):
    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"The '{feature}' feature is not implemented yet.")


class EmptyObjectScheme(ScrapeError):
    def __init__(self) -> None:
        super().__init__("Object scheme has no fields to align.")


class NoAttributeFound(ScrapeError):
    def __init__(self, path: str, attribute: str) -> None:
        self.path = path
        self.attribute = attribute
        super().__init__(f"Element matched by '{path}' has no '{attribute}' attribute.")


class SchemeTooDeep(ScrapeError):
    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(f"Scheme nesting depth {depth} exceeds the limit of {limit}.")


__all__ = [
    "ScrapeError",
    "SchemeUndecipherable",
    "InvalidPath",
    "NoElementFound",
    "MismatchedFieldCount",
    "FeatureNotImplemented",
    "EmptyObjectScheme",
    "NoAttributeFound",
    "SchemeTooDeep",
]
