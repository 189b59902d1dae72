# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Matching and rewriting of individual color values.

Shared by the replacers and the preview so that a preview predicts a
replace exactly. Matching is looser than scanning: any all-hex string
counts (it is normalized first), and numeric arrays are rounded to bytes
without a range check.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from lottie_palette.schema import RGB, JsonKind, kind_of
from lottie_palette.recolor.codec import (
    HEX_LIKE_RE,
    array_to_rgb,
    channels_within,
    format_hex,
    hex_to_rgb,
    is_numeric_triple,
    is_unit_range,
    normalize_hex,
)


# Six color digits followed by arbitrary trailing characters
_HEX_PREFIX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


@dataclass(frozen=True)
class MatchConfig:
    """Configuration for color matching."""

    # Per-channel slack in byte units. Layer edits start from swatches
    # that went through a float/byte round trip, hence the default of 2.
    tolerance: int = 2

    # Also match strings whose first six hex digits are followed by
    # non-hex characters, e.g. "#aabbccXY"
    allow_suffix: bool = False


EXACT = MatchConfig(tolerance=0, allow_suffix=True)


def value_rgb(value: Any, config: MatchConfig = EXACT) -> Optional[RGB]:
    """Byte channels of a candidate value, or None if it cannot be a color."""
    kind = kind_of(value)
    if kind is JsonKind.ARRAY:
        return array_to_rgb(value)
    if kind is not JsonKind.STRING:
        return None
    if HEX_LIKE_RE.fullmatch(value):
        return hex_to_rgb(normalize_hex(value))
    if config.allow_suffix:
        m = _HEX_PREFIX_RE.match(value)
        if m:
            return hex_to_rgb(m.group(1))
    return None


def color_matches(value: Any, target: RGB, config: MatchConfig = EXACT) -> bool:
    """True if ``value`` encodes ``target`` within the configured tolerance."""
    rgb = value_rgb(value, config)
    if rgb is None:
        return False
    return channels_within(rgb, target, config.tolerance)


def in_scope(path: str, scope_path: Optional[str]) -> bool:
    """True if ``path`` lies under ``scope_path`` (no scope means everywhere)."""
    return not scope_path or path.startswith(scope_path)


def recolor_value(
    container: Any,
    key: Any,
    new_rgb: RGB,
    *,
    keep_suffix: bool = True,
) -> bool:
    """
    Overwrite ``container[key]`` with ``new_rgb`` in its existing encoding.

    Call only for values that ``color_matches`` accepted. Numeric arrays
    keep their range (unit floats stay unit floats) and any entries past
    the third, such as alpha. Strings keep their ``#`` prefix or lack of
    one; with ``keep_suffix`` the characters after the six color digits
    survive too, otherwise the string becomes the canonical ``#rrggbb``.

    Returns:
        True if the value was rewritten
    """
    value = container[key]

    if is_numeric_triple(value):
        if is_unit_range(value):
            channels = [new_rgb.r / 255, new_rgb.g / 255, new_rgb.b / 255]
        else:
            channels = [new_rgb.r, new_rgb.g, new_rgb.b]
        if isinstance(value, list):
            value[0:3] = channels
        else:
            container[key] = type(value)(channels + list(value[3:]))
        return True

    if kind_of(value) is JsonKind.STRING:
        new_hex = format_hex(new_rgb)
        if not keep_suffix:
            container[key] = new_hex
        elif value.startswith("#"):
            container[key] = new_hex + value[7:]
        else:
            container[key] = new_hex[1:] + value[6:]
        return True

    return False
