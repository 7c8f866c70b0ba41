"""Common scalar and JSON type aliases."""

from __future__ import annotations

from typing import TypeAlias

PathSegments: TypeAlias = tuple[str, ...]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
