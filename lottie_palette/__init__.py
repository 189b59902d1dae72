# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Lottie Palette -- color extraction and replacement for Lottie animations.

Finds the colors a Lottie document uses and rewrites them in place,
keeping each value in the encoding it was stored in.

Quick start::

    import json
    from lottie_palette import extract_colors, replace_in_document

    doc = json.load(open("animation.json"))
    extract_colors(doc)                              # ['#ff0000', ...]
    replace_in_document(doc, "#ff0000", "#00aaff").updated_count
"""

from __future__ import annotations

__version__ = "1.0.0"

from lottie_palette.recolor import (
    MatchConfig,
    ScanConfig,
    extract_colors,
    extract_layer_colors,
    preview_color_change,
    replace_in_document,
    replace_in_layer,
    unique_layer_colors,
)
from lottie_palette.schema import (
    BlendMode,
    ColorContext,
    ColorRole,
    LayerReplaceResult,
    PreviewResult,
    ReplaceResult,
    get_blend_mode_label,
)

__all__ = [
    # Core API
    "extract_colors",
    "extract_layer_colors",
    "unique_layer_colors",
    "replace_in_document",
    "replace_in_layer",
    "preview_color_change",
    # Configuration
    "ScanConfig",
    "MatchConfig",
    # Types (commonly needed)
    "ColorContext",
    "ColorRole",
    "ReplaceResult",
    "LayerReplaceResult",
    "PreviewResult",
    "BlendMode",
    "get_blend_mode_label",
    # Version
    "__version__",
]
