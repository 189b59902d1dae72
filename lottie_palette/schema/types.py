# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Value types shared by the scanning and recoloring layers.

Design principles:
- Immutable: results are frozen dataclasses or named tuples
- Ephemeral: nothing here is cached between calls
- Serializable: every result has a JSON-ready ``to_dict()``

A Lottie document itself is never wrapped in a class. It stays the plain
``dict``/``list`` tree produced by ``json.load``; ``JsonKind`` gives the
walker a tag to dispatch on instead of probing types ad hoc.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Optional


_STRICT_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")


# =============================================================================
# JSON value tags
# =============================================================================


class JsonKind(Enum):
    """Tag for each variant a parsed JSON value can take."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> JsonKind:
    """
    Classify a parsed JSON value.

    ``bool`` is checked before numbers because it subclasses ``int``.
    Tuples count as arrays so hand-built fragments behave like parsed ones.
    Anything unrecognized is reported as NULL, i.e. a leaf.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    return JsonKind.NULL


# =============================================================================
# Colors
# =============================================================================


class RGB(NamedTuple):
    """An sRGB color as three byte channels (0-255)."""

    r: int
    g: int
    b: int


class ColorRole(Enum):
    """
    Paint role a color plays inside a layer.

    Roles come from path heuristics, not from the Lottie schema, so
    UNKNOWN is a normal outcome.
    """

    FILL = "fill"
    STROKE = "stroke"
    GRADIENT = "gradient"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ColorContext:
    """
    One color occurrence found by a layer scan.

    Attributes:
        color: Canonical ``#rrggbb`` string
        path: Dotted/bracketed locator of the value, e.g. ``shapes[0].it[1].c.k``
        role: Best-effort paint role
        parent_role: Role inherited from the enclosing shape item, if any
    """
    color: str
    path: str
    role: ColorRole = ColorRole.UNKNOWN
    parent_role: Optional[ColorRole] = None

    def __post_init__(self) -> None:
        if not _STRICT_HEX_RE.fullmatch(self.color):
            raise ValueError(f"Color must be #RRGGBB, got {self.color!r}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {"color": self.color, "path": self.path, "role": self.role.value}
        if self.parent_role is not None:
            d["parent_role"] = self.parent_role.value
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ColorContext:
        """Deserialize from dictionary."""
        parent = data.get("parent_role")
        return cls(
            color=data["color"],
            path=data["path"],
            role=ColorRole(data.get("role", "unknown")),
            parent_role=ColorRole(parent) if parent is not None else None,
        )


# =============================================================================
# Operation results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ReplaceResult:
    """
    Outcome of a document-level replace.

    ``document`` is the caller's own object, mutated in place.

    Attributes:
        document: The (mutated) input document
        updated_count: Number of values rewritten
        updated_colors: Caller's palette with the old swatch swapped for the new
    """
    document: Any
    updated_count: int = 0
    updated_colors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.updated_count < 0:
            raise ValueError(f"updated_count must be >= 0, got {self.updated_count}")

    def to_dict(self) -> dict:
        return {
            "document": self.document,
            "updated_count": self.updated_count,
            "updated_colors": list(self.updated_colors),
        }


@dataclass(frozen=True, slots=True)
class LayerReplaceResult:
    """Outcome of a layer-level replace. ``layer`` is a private deep copy."""
    layer: Any
    updated_count: int = 0

    def __post_init__(self) -> None:
        if self.updated_count < 0:
            raise ValueError(f"updated_count must be >= 0, got {self.updated_count}")

    def to_dict(self) -> dict:
        return {"layer": self.layer, "updated_count": self.updated_count}


@dataclass(frozen=True, slots=True)
class PreviewResult:
    """Paths a layer-level replace would touch, in traversal order."""
    affected_paths: tuple[str, ...] = ()
    estimated_count: int = 0

    def __post_init__(self) -> None:
        if self.estimated_count != len(self.affected_paths):
            raise ValueError(
                f"estimated_count ({self.estimated_count}) does not match "
                f"{len(self.affected_paths)} affected paths"
            )

    def to_dict(self) -> dict:
        return {
            "affected_paths": list(self.affected_paths),
            "estimated_count": self.estimated_count,
        }
