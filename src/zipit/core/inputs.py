"""Input descriptors accepted by the archive builder.

Callers hand in loosely shaped values (path strings, ``{"name", "data"}``
mappings). They are parsed once here into ``PathInput``/``InlineInput`` so the
resolver never has to inspect raw types.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from zipit.errors import InvalidInputError


class PathInput(BaseModel):
    """A filesystem path, resolved against the working directory when relative."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="File or directory to add.")


class InlineInput(BaseModel):
    """A named payload that is written to the archive without touching disk."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Archive-relative entry name.")
    data: bytes = Field(..., description="Raw entry contents.")


Input = Union[PathInput, InlineInput]


def _to_bytes(data: Any, encoding: str) -> bytes:
    if isinstance(data, str):
        return data.encode(encoding)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(type(data).__name__)


def parse_input(value: Any, text_encoding: str = "utf-8") -> Input:
    """Parse one raw input value into a ``PathInput`` or ``InlineInput``.

    Raises:
        InvalidInputError: ``value`` is neither a path nor a mapping carrying
            ``name`` and ``data``.
    """
    if isinstance(value, (PathInput, InlineInput)):
        return value

    if isinstance(value, (str, os.PathLike)):
        path = os.fspath(value)
        if isinstance(path, str) and path:
            return PathInput(path=path)
        raise InvalidInputError(value)

    if isinstance(value, Mapping) and "name" in value and "data" in value:
        try:
            data = _to_bytes(value["data"], text_encoding)
            return InlineInput(name=value["name"], data=data)
        except (TypeError, ValidationError) as exc:
            raise InvalidInputError(value) from exc

    raise InvalidInputError(value)


def parse_inputs(value: Any, text_encoding: str = "utf-8") -> List[Input]:
    """Normalise a single input or a list/tuple of inputs into parsed inputs.

    The whole list is validated before any resolution starts, so a bad element
    fails the build without touching the filesystem.
    """
    items = list(value) if isinstance(value, (list, tuple)) else [value]
    return [parse_input(item, text_encoding) for item in items]
