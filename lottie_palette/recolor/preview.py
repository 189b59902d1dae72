# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""Dry run of ``replace_in_layer``: which paths a swatch edit would touch."""

from __future__ import annotations

import logging
from typing import Any, Optional

from lottie_palette.schema import PreviewResult
from lottie_palette.recolor.codec import parse_color
from lottie_palette.recolor.match import MatchConfig, color_matches, in_scope
from lottie_palette.recolor.walker import walk


logger = logging.getLogger(__name__)


def preview_color_change(
    layer: Any,
    target_color: str,
    scope_path: Optional[str] = None,
    *,
    config: Optional[MatchConfig] = None,
) -> PreviewResult:
    """
    List the values ``replace_in_layer`` would rewrite, without rewriting.

    Uses the same matching rules, tolerance and scope as the replacer, so
    ``estimated_count`` equals the replacer's ``updated_count`` for the
    same arguments.

    Args:
        layer: Parsed layer object (read only)
        target_color: Color that would be replaced
        scope_path: Optional path prefix restricting the match
        config: Matching settings (uses defaults if None)
    """
    if layer is None:
        return PreviewResult()

    target_rgb = parse_color(target_color)
    if target_rgb is None:
        logger.debug("Rejected preview color %r", target_color)
        return PreviewResult()

    cfg = config or MatchConfig()
    affected: list[str] = []

    def visit(container: dict, key: str, path: str, context: Any) -> None:
        if in_scope(path, scope_path) and color_matches(container[key], target_rgb, cfg):
            affected.append(path)

    walk(layer, visit)
    return PreviewResult(affected_paths=tuple(affected), estimated_count=len(affected))
