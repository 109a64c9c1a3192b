"""Scheme model: the recursive description of what to extract and from where.

A scheme is one of three variants tagged by ``type``:

- ``OBJECT``: ordered ``fields`` of ``{key, value}`` pairs, each value a scheme.
- ``LIST``: an ``element_scheme`` evaluated against each anchor ``path`` selects.
- ``STRING``: a ``path`` whose matched node content becomes a string leaf.

Paths stay opaque strings here; they are only compiled during extraction.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .errors import SchemeUndecipherable
from .extraction import ContentMode


class SchemeBase(BaseModel):
    name: Optional[str] = Field(default=None, description="Editor label; ignored during extraction.")
    url: Optional[str] = Field(default=None, description="Source page hint; never fetched.")

    model_config = ConfigDict(frozen=True, extra="ignore")


class StringScheme(SchemeBase):
    type: Literal["STRING"] = "STRING"
    path: str
    mode: ContentMode = "INNER_HTML"


class ListScheme(SchemeBase):
    type: Literal["LIST"] = "LIST"
    element_scheme: Scheme
    path: str


class SchemeField(BaseModel):
    key: str
    value: Scheme

    model_config = ConfigDict(frozen=True, extra="ignore")


class ObjectScheme(SchemeBase):
    type: Literal["OBJECT"] = "OBJECT"
    fields: List[SchemeField]

    @field_validator("fields")
    @classmethod
    def _unique_keys(cls, value: List[SchemeField]) -> List[SchemeField]:
        seen = set()
        for field in value:
            if field.key in seen:
                raise ValueError(f"duplicate field key {field.key!r}")
            seen.add(field.key)
        return value


Scheme = Annotated[Union[ObjectScheme, ListScheme, StringScheme], Field(discriminator="type")]

ListScheme.model_rebuild()
SchemeField.model_rebuild()
ObjectScheme.model_rebuild()

_scheme_adapter: TypeAdapter[Any] = TypeAdapter(Scheme)


def parse_scheme(raw: Any) -> Scheme:
    """Decode a scheme from JSON text or an already-decoded mapping."""
    if isinstance(raw, (ObjectScheme, ListScheme, StringScheme)):
        return raw
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            return _scheme_adapter.validate_json(raw)
        return _scheme_adapter.validate_python(raw)
    except ValidationError as exc:
        raise SchemeUndecipherable(_summarize(exc)) from exc
    except RecursionError as exc:
        raise SchemeUndecipherable("scheme nesting too deep to decode") from exc


def dump_scheme(scheme: Scheme, indent: Optional[int] = None) -> str:
    return json.dumps(scheme.model_dump(mode="json", exclude_none=True), indent=indent, ensure_ascii=False)


def scheme_depth(scheme: Scheme) -> int:
    """Nesting depth; a lone STRING has depth 1."""
    if isinstance(scheme, ObjectScheme):
        return 1 + max((scheme_depth(f.value) for f in scheme.fields), default=0)
    if isinstance(scheme, ListScheme):
        return 1 + scheme_depth(scheme.element_scheme)
    return 1


def _summarize(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first['msg']}" if loc else first["msg"]


__all__ = [
    "Scheme",
    "SchemeBase",
    "ObjectScheme",
    "ListScheme",
    "StringScheme",
    "SchemeField",
    "parse_scheme",
    "dump_scheme",
    "scheme_depth",
]
