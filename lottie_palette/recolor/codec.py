# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Color encodings found in Lottie documents.

Lottie stores colors two ways:
- Numeric arrays ``[r, g, b(, a)]``, either unit floats [0,1] or bytes [0,255]
- Hex strings ``#rrggbb``, sometimes without ``#`` or with trailing characters

The array encoding is ambiguous. It is resolved per value by looking at
the largest of the first three channels: <= 1 means unit floats, anything
larger means bytes.

Rounding is round-half-up everywhere (``floor(x + 0.5)``), not Python's
banker's rounding, so hex output is stable for exact .5 channels.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from lottie_palette.schema import RGB, JsonKind, kind_of


# =============================================================================
# Patterns
# =============================================================================

# Whole string is a hex run of at least 6 digits (strict scan)
HEX_STRING_RE = re.compile(r"#?[0-9A-Fa-f]{6,}")

# A hex run of at least 6 digits anywhere in the string (aggressive scan)
HEX_RUN_RE = re.compile(r"#?([0-9A-Fa-f]{6,})")

# Whole string is hex digits of any length (replace/preview candidates)
HEX_LIKE_RE = re.compile(r"#?[0-9A-Fa-f]+")

# Canonical output shape
STRICT_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")

_TRIPLE_RE = re.compile(
    r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE
)


# =============================================================================
# Hex strings
# =============================================================================


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert unit-float channels to a lowercase hex string.

    Each channel is scaled by 255, clamped to [0, 255] and rounded half up.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        Hex string like "#ff0000"

    Example:
        >>> rgb_to_hex(1, 0, 0)
        '#ff0000'
    """
    scaled = np.clip(np.array([r, g, b], dtype=np.float64) * 255.0, 0.0, 255.0)
    red, green, blue = (int(c) for c in np.floor(scaled + 0.5))
    return f"#{red:02x}{green:02x}{blue:02x}"


def format_hex(rgb: RGB) -> str:
    """Render byte channels as ``#rrggbb``."""
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def normalize_hex(hex_color: str) -> str:
    """
    Coerce a hex-ish string to exactly six digits behind a ``#``.

    One leading ``#`` is dropped. Longer input is truncated, shorter input
    is right-padded with ``0``.
    Characters are not validated; filter with a hex pattern first.

    Example:
        >>> normalize_hex("abc")
        '#abc000'
        >>> normalize_hex("#AABBCCDD")
        '#AABBCC'
    """
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    digits = digits[:6].ljust(6, "0")
    return f"#{digits}"


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """
    Parse an exact six-digit hex string.

    Args:
        hex_color: "#00ff80" or "00ff80" (case-insensitive)

    Returns:
        RGB byte channels, or None if the string is not exactly that shape
    """
    if not isinstance(hex_color, str):
        return None
    m = _TRIPLE_RE.fullmatch(hex_color)
    if not m:
        return None
    return RGB(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def parse_color(value: Any) -> Optional[RGB]:
    """
    Parse a user-supplied color argument.

    Tolerates a missing ``#`` and short or long digit runs by normalizing
    before parsing. Non-strings and non-hex characters yield None.
    """
    if kind_of(value) is not JsonKind.STRING:
        return None
    return hex_to_rgb(normalize_hex(value))


# =============================================================================
# Numeric arrays
# =============================================================================


def is_numeric_triple(value: Any) -> bool:
    """True for an array of 3+ items whose first three are numbers."""
    if kind_of(value) is not JsonKind.ARRAY or len(value) < 3:
        return False
    return all(kind_of(v) is JsonKind.NUMBER for v in value[:3])


def channel_values(values: Sequence[float]) -> Optional[NDArray[np.float64]]:
    """
    First three entries as a float array.

    JSON integers have no size limit; one too large for a float yields None.
    """
    try:
        return np.asarray(values[:3], dtype=np.float64)
    except OverflowError:
        return None


def is_unit_range(values: Sequence[float]) -> bool:
    """True if the largest of the first three channels is at most 1."""
    channels = channel_values(values)
    return channels is not None and bool(np.max(channels) <= 1.0)


def infer_unit_rgb(values: Sequence[float]) -> Optional[tuple[float, float, float]]:
    """
    Interpret the first three entries of a numeric array as unit floats.

    Values already in [0,1] are kept, otherwise all three are divided by
    255. The result must land in [0,1] or the array is not a color.

    Args:
        values: Numeric array with at least three entries

    Returns:
        (r, g, b) in [0, 1], or None if the array is not a plausible color
    """
    if not is_numeric_triple(values):
        return None
    channels = channel_values(values)
    if channels is None:
        return None
    if not is_unit_range(channels):
        channels = channels / 255.0
    if not np.all((channels >= 0.0) & (channels <= 1.0)):
        return None
    return float(channels[0]), float(channels[1]), float(channels[2])


def array_to_rgb(values: Sequence[float]) -> Optional[RGB]:
    """
    Round a numeric color array to byte channels, without range checks.

    Used for matching: out-of-range channels simply fail to match.
    """
    if not is_numeric_triple(values):
        return None
    channels = channel_values(values)
    if channels is None or not np.all(np.isfinite(channels)):
        return None
    if is_unit_range(channels):
        channels = channels * 255.0
    red, green, blue = np.floor(channels + 0.5).astype(int)
    return RGB(int(red), int(green), int(blue))


def channels_within(rgb: RGB, target: RGB, tolerance: int = 0) -> bool:
    """True if every channel differs from ``target`` by at most ``tolerance``."""
    delta = np.abs(np.subtract(rgb, target))
    return bool(np.all(delta <= tolerance))
