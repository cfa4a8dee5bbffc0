from __future__ import annotations

"""エクスポート（CSS/JSON/Array/SVG）とラベル対応表のテスト。"""

import json

import pytest

from palette.color_types import Color
from palette.colorspace import hex_to_hsl
from palette.harmony import HarmonyMode
from palette.ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    HARMONY_MODE_OPTIONS,
    ExportFormat,
    copy_text,
    css_root_block,
    export_palette,
    export_svg,
)


@pytest.fixture()
def colors() -> list[Color]:
    return [
        Color(id="a", hsl=hex_to_hsl("#aabbcc")),
        Color(id="b", hsl=hex_to_hsl("#112233")),
    ]


def test_export_css_lines(colors) -> None:
    assert export_palette(colors, "css") == "  --color-1: #aabbcc;\n  --color-2: #112233;"
    assert export_palette(colors, ExportFormat.CSS) == export_palette(colors, "css")


def test_css_root_block(colors) -> None:
    assert css_root_block(colors) == ":root {\n  --color-1: #aabbcc;\n  --color-2: #112233;\n}"


def test_export_json_pretty(colors) -> None:
    text = export_palette(colors, "json")
    assert text.startswith("[\n  {\n    \"hex\": \"#aabbcc\"")
    data = json.loads(text)
    assert [d["hex"] for d in data] == ["#aabbcc", "#112233"]
    assert set(data[0]["hsl"]) == {"h", "s", "l"}


def test_export_array_compact(colors) -> None:
    assert export_palette(colors, "array") == '["#aabbcc","#112233"]'


@pytest.mark.parametrize("fmt", ["svg", "", "CSS", None])
def test_export_unknown_format_is_empty(colors, fmt) -> None:
    assert export_palette(colors, fmt) == ""


def test_export_empty_list() -> None:
    assert export_palette([], "css") == ""
    assert export_palette([], "array") == "[]"


def test_copy_text(colors) -> None:
    assert copy_text(colors) == "#aabbcc, #112233"


def test_export_svg_has_one_rect_per_color(colors) -> None:
    svg = export_svg(colors, width=1000, height=200)
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert svg.count("<rect ") == 2
    assert '<rect x="0" y="0" width="500" height="200" fill="#aabbcc"/>' in svg
    assert '<rect x="500" y="0" width="500" height="200" fill="#112233"/>' in svg
    assert svg.endswith("</svg>")


def test_label_options() -> None:
    assert HARMONY_MODE_OPTIONS[0] == ("Random", HarmonyMode.NONE)
    assert len(HARMONY_MODE_OPTIONS) == 8
    assert [fmt for _, fmt in EXPORT_FORMAT_OPTIONS] == list(ExportFormat)
    with pytest.raises(ValueError):
        ExportFormat.from_value("xml")
