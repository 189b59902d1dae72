# Copyright (c) 2026 Lottie Palette
# SPDX-License-Identifier: MIT

"""Tests for document and layer color scans."""

import copy
import json
import math

import pytest

from lottie_palette import ScanConfig, extract_colors, extract_layer_colors, unique_layer_colors
from lottie_palette.schema import ColorContext, ColorRole
from lottie_palette.recolor.scan import _detect_colors_aggressive


def _huge_channel_document():
    # JSON integers are unbounded; this one does not fit in a float
    return json.loads('{"c": {"k": [1' + "0" * 400 + ', 0, 0]}}')


def _animation():
    """Small but realistic animation: one shape layer, a fill and a stroke."""
    return {
        "v": "5.7.4", "fr": 30, "ip": 0, "op": 60, "w": 512, "h": 512,
        "layers": [{
            "ty": 4,
            "nm": "Circle",
            "ks": {
                "o": {"a": 0, "k": 100},
                "p": {"a": 0, "k": [256, 256, 0]},
                "s": {"a": 0, "k": [100, 100, 100]},
            },
            "shapes": [{
                "ty": "gr",
                "it": [
                    {"ty": "fl", "c": {"a": 0, "k": [1, 0, 0, 1]}, "o": {"a": 0, "k": 100}},
                    {"ty": "st", "c": {"a": 0, "k": [0, 0, 1, 1]}, "w": {"a": 0, "k": 4}},
                    {"ty": "tr", "p": {"a": 0, "k": [0, 0]}, "o": {"a": 0, "k": 100}},
                ],
            }],
        }],
    }


@pytest.fixture
def animation():
    return _animation()


@pytest.fixture
def paint_layer():
    """Layer whose color keys sit directly under paint containers."""
    return {
        "nm": "Badge",
        "fl": {"c": [1, 0, 0, 1]},
        "st": {"c": "#0000ff"},
        "gf": {"c": [0, 255, 0]},
        "solid": {"ty": 1, "c": [0.5, 0.5, 0.5]},
        "ks": {"p": {"k": [0.2, 0.4, 0.6]}},
        "o": [1, 1, 1],
    }


class TestExtractColors:
    """Strict document scan finds every color-like value."""

    def test_finds_fill_and_stroke(self, animation):
        colors = extract_colors(animation)
        assert "#ff0000" in colors
        assert "#0000ff" in colors

    def test_strict_pass_ignores_roles(self, animation):
        # A scale of [100, 100, 100] reads as a byte-range gray
        assert "#646464" in extract_colors(animation)

    def test_out_of_range_array_ignored(self):
        assert extract_colors({"p": [256, 256, 0]}) == []

    def test_deduplicated_first_seen_order(self):
        doc = {"a": [1, 0, 0], "b": {"c": [255, 0, 0]}, "d": "#00ff00"}
        assert extract_colors(doc) == ["#ff0000", "#00ff00"]

    def test_hex_strings(self):
        doc = {"sc": "#00FF00", "fc": "aabbccdd", "nm": "Layer 1"}
        assert extract_colors(doc) == ["#00FF00", "#aabbcc"]

    def test_does_not_mutate(self, animation):
        before = copy.deepcopy(animation)
        extract_colors(animation)
        assert animation == before

    def test_none_document(self):
        assert extract_colors(None) == []

    def test_scalar_document(self):
        assert extract_colors("#ff0000") == []

    def test_integer_too_large_for_float_skipped(self):
        assert extract_colors(_huge_channel_document()) == []

    def test_integer_too_large_for_float_beside_real_color(self):
        doc = _huge_channel_document()
        doc["fl"] = {"c": [0, 0, 1]}
        assert extract_colors(doc) == ["#0000ff"]

    def test_every_result_is_strict_hex(self, animation):
        for color in extract_colors(animation):
            assert len(color) == 7 and color.startswith("#")
            int(color[1:], 16)


class TestAggressiveFallback:
    """The permissive pass only runs when the strict pass finds nothing."""

    def test_runs_when_strict_finds_nothing(self):
        doc = {"nm": "foo_ff00ffbar", "w": 512}
        assert extract_colors(doc) == ["#ff00ff"]

    def test_not_run_when_strict_finds_colors(self):
        doc = {"nm": "foo_ff00ffbar", "c": {"k": [0, 0, 1]}}
        colors = extract_colors(doc)
        assert colors == ["#0000ff"]
        assert "#ff00ff" not in colors

    def test_can_be_disabled(self):
        doc = {"nm": "foo_ff00ffbar"}
        assert extract_colors(doc, config=ScanConfig(aggressive_fallback=False)) == []

    def test_nothing_found_anywhere(self):
        assert extract_colors({"nm": "plain", "w": 512, "h": [1, 2]}) == []


class TestDetectColorsAggressive:
    """Permissive reading of a single value."""

    def test_ambiguous_triple_gives_both_readings(self):
        assert _detect_colors_aggressive([1, 1, 0]) == ["#ffff00", "#010100"]

    def test_byte_triple(self):
        assert _detect_colors_aggressive([200, 0, 0]) == ["#c80000"]

    def test_out_of_byte_range(self):
        assert _detect_colors_aggressive([256, 0, 0]) == []

    def test_hex_run_inside_string(self):
        assert _detect_colors_aggressive("id_00ff00") == ["#00ff00"]

    @pytest.mark.parametrize("value", [[math.nan, 0, 0], [10**400, 0, 0], "short", None])
    def test_nothing_found(self, value):
        assert _detect_colors_aggressive(value) == []


class TestExtractLayerColors:
    """Layer scan records each occurrence with its role."""

    def test_roles_from_paint_containers(self, paint_layer):
        contexts = extract_layer_colors(paint_layer)
        assert contexts == [
            ColorContext("#ff0000", "fl.c", ColorRole.FILL, ColorRole.FILL),
            ColorContext("#0000ff", "st.c", ColorRole.STROKE, ColorRole.STROKE),
            ColorContext("#00ff00", "gf.c", ColorRole.GRADIENT, ColorRole.GRADIENT),
            ColorContext("#808080", "solid.c", ColorRole.FILL, ColorRole.FILL),
        ]

    def test_transform_and_opacity_skipped(self, paint_layer):
        paths = [ctx.path for ctx in extract_layer_colors(paint_layer)]
        assert "ks.p.k" not in paths
        assert "o" not in paths

    def test_realistic_layer_paths(self, animation):
        contexts = extract_layer_colors(animation["layers"][0])
        by_path = {ctx.path: ctx for ctx in contexts}
        assert by_path["shapes[0].it[0].c.k"].color == "#ff0000"
        assert by_path["shapes[0].it[1].c.k"].color == "#0000ff"
        # Keyframed values sit under "k", which the role rules do not name
        assert by_path["shapes[0].it[0].c.k"].role is ColorRole.UNKNOWN
        # Layer scale is a transform, not a color
        assert "ks.s.k" not in by_path

    def test_text_colors(self):
        layer = {"t": {"d": {"k": [{"s": {"fc": [1, 1, 1], "sc": "#000000"}}]}}}
        contexts = extract_layer_colors(layer)
        assert [(c.color, c.role) for c in contexts] == [
            ("#ffffff", ColorRole.FILL),
            ("#000000", ColorRole.STROKE),
        ]

    def test_integer_too_large_for_float_skipped(self):
        assert extract_layer_colors(_huge_channel_document()) == []

    def test_no_aggressive_fallback(self):
        assert extract_layer_colors({"nm": "foo_ff00ffbar"}) == []

    def test_none_layer(self):
        assert extract_layer_colors(None) == []


class TestUniqueLayerColors:
    """Distinct swatches of a layer scan."""

    def test_deduplicates(self):
        layer = {"fl": {"c": [1, 0, 0]}, "st": {"c": "#ff0000"}, "x2": {"c": [0, 0, 1]}}
        assert unique_layer_colors(layer) == ["#ff0000", "#0000ff"]

    def test_empty(self):
        assert unique_layer_colors(None) == []
