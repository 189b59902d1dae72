# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Schema definitions for color scans and recolor results.

All result types in this module are immutable. Documents are plain
parsed JSON and are never wrapped.
"""

from lottie_palette.schema.blend import BlendMode, get_blend_mode_label
from lottie_palette.schema.types import (
    RGB,
    ColorContext,
    ColorRole,
    JsonKind,
    LayerReplaceResult,
    PreviewResult,
    ReplaceResult,
    kind_of,
)

__all__ = [
    # JSON value tags
    "JsonKind",
    "kind_of",
    # Color types
    "RGB",
    "ColorRole",
    "ColorContext",
    # Results
    "ReplaceResult",
    "LayerReplaceResult",
    "PreviewResult",
    # Layer properties
    "BlendMode",
    "get_blend_mode_label",
]
