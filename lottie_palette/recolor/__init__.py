# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Scanning and recoloring core for Lottie documents.

Every operation walks a parsed JSON tree once (twice for the document
scan fallback) and keeps no state between calls.
"""

from lottie_palette.recolor.codec import (
    hex_to_rgb,
    infer_unit_rgb,
    normalize_hex,
    parse_color,
    rgb_to_hex,
)
from lottie_palette.recolor.match import MatchConfig
from lottie_palette.recolor.mutate import replace_in_document, replace_in_layer
from lottie_palette.recolor.preview import preview_color_change
from lottie_palette.recolor.scan import (
    ScanConfig,
    extract_colors,
    extract_layer_colors,
    unique_layer_colors,
)
from lottie_palette.recolor.walker import walk

__all__ = [
    # Codec
    "rgb_to_hex",
    "normalize_hex",
    "hex_to_rgb",
    "infer_unit_rgb",
    "parse_color",
    # Traversal
    "walk",
    # Scanning
    "ScanConfig",
    "extract_colors",
    "extract_layer_colors",
    "unique_layer_colors",
    # Replacement
    "MatchConfig",
    "replace_in_document",
    "replace_in_layer",
    "preview_color_change",
]
