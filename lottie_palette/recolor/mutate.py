# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Color replacement.

Two entry points with different ownership:

- ``replace_in_document`` mutates the caller's document in place and
  matches exactly. It is meant for repairing raw documents, so string
  values keep any characters beyond the six color digits.
- ``replace_in_layer`` deep-copies the layer and edits the copy, matching
  within a tolerance. It serves swatch edits from the layer editor and
  can be restricted to a path prefix.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Optional, Sequence

from lottie_palette.schema import RGB, JsonKind, LayerReplaceResult, ReplaceResult, kind_of
from lottie_palette.recolor.codec import parse_color
from lottie_palette.recolor.match import (
    EXACT,
    MatchConfig,
    color_matches,
    in_scope,
    recolor_value,
)
from lottie_palette.recolor.walker import walk


logger = logging.getLogger(__name__)

# Keyframe fields holding the start and end values of an animated property
KEYFRAME_VALUE_KEYS = ("s", "e")


def _swap_swatch(palette: Optional[Sequence[str]], old_color: str, new_color: str) -> list[str]:
    updated = list(palette or [])
    if old_color in updated:
        updated[updated.index(old_color)] = new_color
    return updated


def _parse_pair(old_color: Any, new_color: Any) -> Optional[tuple[RGB, RGB]]:
    old_rgb = parse_color(old_color)
    new_rgb = parse_color(new_color)
    if old_rgb is None or new_rgb is None:
        logger.debug("Rejected color pair %r -> %r", old_color, new_color)
        return None
    return old_rgb, new_rgb


def replace_in_document(
    document: Any,
    old_color: str,
    new_color: str,
    *,
    palette: Optional[Sequence[str]] = None,
) -> ReplaceResult:
    """
    Replace every exact occurrence of ``old_color`` in a document, in place.

    Besides plain values, animated properties are handled: for a ``k`` key
    holding keyframe objects, each keyframe's ``s`` and ``e`` values are
    matched and counted on their own.

    Args:
        document: Parsed Lottie JSON. Mutated in place.
        old_color: Color to replace, ``#rrggbb`` family
        new_color: Replacement color, ``#rrggbb`` family
        palette: The caller's current swatch list, if any

    Returns:
        ReplaceResult holding the same document object, the number of
        values rewritten, and a copy of ``palette`` with the first
        ``old_color`` entry swapped for ``new_color``. Nothing is changed
        if either color fails to parse.
    """
    if document is None:
        return ReplaceResult(document=document, updated_colors=list(palette or []))

    pair = _parse_pair(old_color, new_color)
    if pair is None:
        return ReplaceResult(document=document, updated_colors=list(palette or []))
    old_rgb, new_rgb = pair

    updated_count = 0

    def visit(container: dict, key: str, path: str, context: Any) -> None:
        nonlocal updated_count
        value = container[key]

        if color_matches(value, old_rgb, EXACT):
            recolor_value(container, key, new_rgb)
            updated_count += 1

        if key == "k" and kind_of(value) is JsonKind.ARRAY:
            for keyframe in value:
                if kind_of(keyframe) is not JsonKind.OBJECT:
                    continue
                for field in KEYFRAME_VALUE_KEYS:
                    if keyframe.get(field) and color_matches(keyframe[field], old_rgb, EXACT):
                        recolor_value(keyframe, field, new_rgb)
                        updated_count += 1

    walk(document, visit)

    logger.debug("Replaced %d values of %s with %s", updated_count, old_color, new_color)
    return ReplaceResult(
        document=document,
        updated_count=updated_count,
        updated_colors=_swap_swatch(palette, old_color, new_color),
    )


def replace_in_layer(
    layer: Any,
    old_color: str,
    new_color: str,
    scope_path: Optional[str] = None,
    *,
    config: Optional[MatchConfig] = None,
) -> LayerReplaceResult:
    """
    Replace ``old_color`` within a copy of ``layer``.

    The caller's layer is never modified. Values matching within the
    configured tolerance are rewritten in their own encoding; strings are
    replaced wholesale by the canonical new hex.

    Args:
        layer: Parsed layer object
        old_color: Color to replace
        new_color: Replacement color
        scope_path: Only rewrite values whose path starts with this prefix.
            Out-of-scope subtrees are still walked, unchanged.
        config: Matching settings (uses defaults if None)

    Returns:
        LayerReplaceResult with the edited copy and the number of values
        rewritten. If either color fails to parse, the original layer is
        returned with a zero count.
    """
    if layer is None:
        return LayerReplaceResult(layer=layer)

    pair = _parse_pair(old_color, new_color)
    if pair is None:
        return LayerReplaceResult(layer=layer)
    old_rgb, new_rgb = pair

    cfg = config or MatchConfig()
    layer_copy = copy.deepcopy(layer)
    updated_count = 0

    def visit(container: dict, key: str, path: str, context: Any) -> None:
        nonlocal updated_count
        if not in_scope(path, scope_path):
            return
        if color_matches(container[key], old_rgb, cfg):
            if recolor_value(container, key, new_rgb, keep_suffix=False):
                updated_count += 1

    walk(layer_copy, visit)

    logger.debug(
        "Replaced %d values of %s with %s in layer (scope=%r)",
        updated_count, old_color, new_color, scope_path,
    )
    return LayerReplaceResult(layer=layer_copy, updated_count=updated_count)
