# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""
Recursive descent over parsed JSON.

Every scan, replace and preview in this package walks the document through
``walk``; none of them re-implement traversal. Order is deterministic:
object keys in insertion order, arrays by index. Path strings and update
counts are therefore reproducible for the same document.

Paths join object keys with ``.`` and array indices with ``[i]``::

    layers[0].shapes[1].c.k
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from lottie_palette.schema import JsonKind, kind_of


Visitor = Callable[[dict, str, str, Any], Any]


def join_path(path: str, key: str) -> str:
    """Append an object key to a path."""
    return f"{path}.{key}" if path else key


def parent_path(path: str, key: str) -> str:
    """Inverse of ``join_path``: the path of the object that holds ``key``."""
    return path[: -len(key) - 1] if len(path) > len(key) else ""


def walk(
    value: Any,
    visit: Visitor,
    path: str = "",
    context: Optional[Any] = None,
) -> None:
    """
    Walk ``value``, calling ``visit`` once per object key.

    For each key the visitor is called *before* the walker descends into
    ``container[key]``, so a visitor that rewrites the value changes what
    is walked next. Scalars are never visited on their own; they are seen
    by the visitor of the key that holds them. Array elements are
    descended into but not visited.

    Args:
        value: Parsed JSON value (dict, list, scalar or None)
        visit: ``visit(container, key, path, context)``. Its return value
            becomes the ``context`` of that key's subtree, which lets
            visitors hand state down the tree (e.g. an inherited role).
        path: Path of ``value`` itself ("" for the root)
        context: Context inherited from the parent frame
    """
    kind = kind_of(value)
    if kind is JsonKind.ARRAY:
        for index, item in enumerate(value):
            walk(item, visit, f"{path}[{index}]", context)
    elif kind is JsonKind.OBJECT:
        for key in list(value.keys()):
            child_path = join_path(path, key)
            child_context = visit(value, key, child_path, context)
            walk(value[key], visit, child_path, child_context)
