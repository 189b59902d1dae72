# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Color discovery.

Two entry points:
- ``extract_colors``: flat, deduplicated palette of a whole document
- ``extract_layer_colors``: per-occurrence scan of one layer with roles

The document scan runs a strict pass first. Only when that finds nothing
does it run an aggressive pass, which reads numeric triples both ways and
picks hex runs out of longer strings. Running the aggressive pass by
default would report ordinary numeric fields as colors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from lottie_palette.schema import ColorContext, ColorRole, JsonKind, kind_of
from lottie_palette.recolor.classify import classify_key, next_parent_role
from lottie_palette.recolor.codec import (
    HEX_RUN_RE,
    HEX_STRING_RE,
    STRICT_HEX_RE,
    channel_values,
    infer_unit_rgb,
    is_numeric_triple,
    normalize_hex,
    rgb_to_hex,
)
from lottie_palette.recolor.walker import parent_path, walk


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for document scans."""

    # Run the permissive pass when the strict pass finds no colors
    aggressive_fallback: bool = True


# =============================================================================
# Value detection
# =============================================================================


def detect_color(value: Any) -> Optional[str]:
    """
    Read a single value as a color, strictly.

    Numeric arrays go through encoding inference; strings must be
    entirely hex digits (6 or more, optional ``#``).

    Returns:
        Hex string, or None if the value does not look like a color
    """
    unit = infer_unit_rgb(value)
    if unit is not None:
        return rgb_to_hex(*unit)
    if kind_of(value) is JsonKind.STRING and HEX_STRING_RE.fullmatch(value):
        return normalize_hex(value)
    return None


def _detect_colors_aggressive(value: Any) -> list[str]:
    found = []
    if is_numeric_triple(value):
        channels = channel_values(value)
        if channels is not None and not np.any(np.isnan(channels)):
            # Ambiguous triples contribute both readings
            if np.all((channels >= 0.0) & (channels <= 1.0)):
                found.append(rgb_to_hex(*channels))
            if np.all((channels >= 0.0) & (channels <= 255.0)):
                found.append(rgb_to_hex(*(channels / 255.0)))
    if kind_of(value) is JsonKind.STRING:
        m = HEX_RUN_RE.search(value)
        if m:
            found.append(normalize_hex(m.group(1)))
    return found


def _strict_only(colors: dict[str, None]) -> list[str]:
    return [c for c in colors if STRICT_HEX_RE.fullmatch(c)]


# =============================================================================
# Document scan
# =============================================================================


def extract_colors(document: Any, *, config: Optional[ScanConfig] = None) -> list[str]:
    """
    List the distinct colors used anywhere in a document.

    The strict pass ignores roles entirely: any syntactically color-like
    value at any key counts.

    Args:
        document: Parsed Lottie JSON (or any fragment of it)
        config: Scan settings (uses defaults if None)

    Returns:
        Distinct ``#rrggbb`` strings in first-seen order. Empty for None.

    Example:
        >>> extract_colors({"c": {"k": [1, 0, 0, 1]}})
        ['#ff0000']
    """
    if document is None:
        return []

    cfg = config or ScanConfig()
    colors: dict[str, None] = {}

    def strict(container: dict, key: str, path: str, context: Any) -> None:
        color = detect_color(container[key])
        if color is not None:
            colors[color] = None

    walk(document, strict)

    if not colors and cfg.aggressive_fallback:
        logger.debug("Strict scan found no colors, running aggressive pass")

        def aggressive(container: dict, key: str, path: str, context: Any) -> None:
            for color in _detect_colors_aggressive(container[key]):
                colors[color] = None

        walk(document, aggressive)

    result = _strict_only(colors)
    logger.debug("Extracted %d colors from document", len(result))
    return result


# =============================================================================
# Layer scan
# =============================================================================


def extract_layer_colors(layer: Any) -> list[ColorContext]:
    """
    Scan one layer, recording every color occurrence with its role.

    Roles are inherited down the tree (a ``c`` inside a fill item is a fill
    color) and known non-color fields are skipped even when their value
    looks like a color. There is no aggressive fallback.

    Args:
        layer: Parsed layer object (or any subtree)

    Returns:
        One ColorContext per occurrence, in traversal order
    """
    if layer is None:
        return []

    contexts: list[ColorContext] = []

    def visit(
        container: dict,
        key: str,
        path: str,
        parent_role: Optional[ColorRole],
    ) -> Optional[ColorRole]:
        value = container[key]
        role = classify_key(key, parent_path(path, key), parent_role)
        if role is not None:
            color = detect_color(value)
            if color is not None:
                contexts.append(ColorContext(
                    color=color,
                    path=path,
                    role=role,
                    parent_role=parent_role,
                ))
        return next_parent_role(key, value, parent_role)

    walk(layer, visit)
    return contexts


def unique_layer_colors(layer: Any) -> list[str]:
    """Distinct colors of a layer scan, for callers that only need swatches."""
    colors = dict.fromkeys(ctx.color for ctx in extract_layer_colors(layer))
    return _strict_only(colors)
