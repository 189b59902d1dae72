# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Role classification for color-bearing keys.

Lottie documents in the wild do not follow the schema closely enough for a
schema-driven classifier, so roles are guessed from the key name, from
substrings of the parent path, and from the role inherited from enclosing
shape items. The rules are an ordered table; the first match wins.

Paths checked here are the *parent* path (the path of the object holding
the key), matching how shape items nest: ``shapes[0].it[2]`` holds ``c``.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from lottie_palette.schema import ColorRole, JsonKind, kind_of


RoleRule = Callable[[str, str, Optional[ColorRole]], bool]

_PAINT_ROLES = (ColorRole.FILL, ColorRole.STROKE, ColorRole.GRADIENT)


def _inherited(parent_role: Optional[ColorRole]) -> Optional[ColorRole]:
    return parent_role if parent_role in _PAINT_ROLES else None


# (predicate(key, path, parent_role), role or None to take the inherited role)
_ROLE_RULES: tuple[tuple[RoleRule, Optional[ColorRole]], ...] = (
    (lambda k, p, r: k == "c" and ("fl" in p or r is ColorRole.FILL), ColorRole.FILL),
    (lambda k, p, r: k == "c" and ("st" in p or r is ColorRole.STROKE), ColorRole.STROKE),
    (
        lambda k, p, r: k == "c" and ("g" in p or "grd" in p or r is ColorRole.GRADIENT),
        ColorRole.GRADIENT,
    ),
    (lambda k, p, r: k == "fc" or (k == "c" and "fc" in p), ColorRole.FILL),
    (lambda k, p, r: k == "sc" or (k == "c" and "sc" in p), ColorRole.STROKE),
    (lambda k, p, r: k == "c" and _inherited(r) is not None, None),
)


# Keys that hold geometry, timing or typography, never paint
NON_COLOR_KEYS = frozenset({
    "o",   # opacity
    "w",   # stroke width
    "ml",  # miter limit
    "t",   # tracking / time
    "lh",  # line height
    "ls",  # letter spacing
    "sw",  # stroke width
    "sh",  # stroke height
    "sz",  # size
    "ps",  # path start
    "pe",  # path end
    "cc",  # corner count
    "ir",  # inner radius
    "or",  # outer radius
    "pt",  # points
    "sy",  # star type
    "ix",  # property index
    "x", "y", "z",
})

# Path fragments of transform groups and layer transform properties
NON_COLOR_PATH_FRAGMENTS = (
    "tr.",
    "ks.p", "ks.a", "ks.s", "ks.r",
    "ks.sk", "ks.sa",
    "ks.rx", "ks.ry", "ks.rz",
    "ks.or",
)


def is_non_color_field(key: str, path: str) -> bool:
    """True for keys that must never be read as colors, whatever their shape."""
    if key in NON_COLOR_KEYS:
        return True
    return any(fragment in path for fragment in NON_COLOR_PATH_FRAGMENTS)


def classify_key(
    key: str,
    path: str,
    parent_role: Optional[ColorRole] = None,
) -> Optional[ColorRole]:
    """
    Decide the paint role of ``key``.

    Args:
        key: Object key being inspected
        path: Path of the object holding ``key``
        parent_role: Role inherited from enclosing items

    Returns:
        The role, ``ColorRole.UNKNOWN`` for a plain candidate whose value
        still has to look like a color, or None if the key is a known
        non-color field.
    """
    for predicate, role in _ROLE_RULES:
        if predicate(key, path, parent_role):
            return role if role is not None else _inherited(parent_role)
    if is_non_color_field(key, path):
        return None
    return ColorRole.UNKNOWN


def next_parent_role(
    key: str,
    value: Any,
    parent_role: Optional[ColorRole] = None,
) -> Optional[ColorRole]:
    """
    Role handed down to the subtree under ``key``.

    ``fl``/``ty == 1`` start a fill, ``st``/``ty == 6`` a stroke and
    ``gf``/``gs``/``ty == 5`` a gradient. Everything else, shape item
    lists (``it``) included, keeps the current role.
    """
    ty = value.get("ty") if kind_of(value) is JsonKind.OBJECT else None
    if kind_of(ty) is not JsonKind.NUMBER:
        ty = None

    if key == "fl" or ty == 1:
        return ColorRole.FILL
    if key == "st" or ty == 6:
        return ColorRole.STROKE
    if key in ("gf", "gs") or ty == 5:
        return ColorRole.GRADIENT
    return parent_role
