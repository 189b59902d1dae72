# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""Lottie layer blend modes (the ``bm`` property) and their display labels."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class BlendMode(Enum):
    """
    Blend modes shown in the layer editor.

    Values 16 (Add) and 17 (Hard Mix) are left out; renderer support for
    them is spotty.
    """

    NORMAL = 0
    MULTIPLY = 1
    SCREEN = 2
    OVERLAY = 3
    DARKEN = 4
    LIGHTEN = 5
    COLOR_DODGE = 6
    COLOR_BURN = 7
    HARD_LIGHT = 8
    SOFT_LIGHT = 9
    DIFFERENCE = 10
    EXCLUSION = 11
    HUE = 12
    SATURATION = 13
    COLOR = 14
    LUMINOSITY = 15

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Color Dodge"``."""
        return self.name.replace("_", " ").title()


def get_blend_mode_label(value: Optional[int]) -> str:
    """
    Label for a raw ``bm`` value.

    Missing values mean Normal. Unknown values are echoed back as text.
    """
    if value is None:
        return BlendMode.NORMAL.label
    try:
        return BlendMode(value).label
    except ValueError:
        return str(value)
