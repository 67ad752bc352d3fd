import json

from mybar.blocks import (
    COMMON_JSON,
    I3_BAR_COLOR,
    LINE_BUFFER_SIZE,
    SOLAR_BLUE,
    separator_json,
    status_json,
)


def test_status_json_is_valid_json_pair():
    text = status_json("#111111", "#222222", "demo", "#333333", "hello")
    first, second = json.loads(f"[{text}]")
    assert first["background"] == "#111111"
    assert first["color"] == "#222222"
    assert second["name"] == "demo"
    assert second["background"] == "#222222"
    assert second["color"] == "#333333"
    assert second["full_text"] == "hello"


def test_status_json_carries_common_fields():
    text = status_json(I3_BAR_COLOR, SOLAR_BLUE, "n", "#ffffff", "t")
    blocks = json.loads(f"[{text}]")
    for block in blocks:
        assert block["border"] == "#000000"
        assert block["separator"] is False
        assert block["separator_block_width"] == 0
        assert block["border_top"] == 2
        assert block["border_bottom"] == 2
        assert block["border_left"] == 0
        assert block["border_right"] == 0


def test_status_json_is_clipped_to_buffer():
    text = status_json("#111111", "#222222", "demo", "#333333", "x" * 2000)
    assert len(text.encode("utf-8")) == LINE_BUFFER_SIZE - 1
    assert text.endswith("x")


def test_separator_json_layout():
    text = separator_json("#111111", "#222222")
    assert text.startswith(
        '{"full_text":"","color":"#222222","background":"#111111"'
    )
    assert text.endswith(COMMON_JSON + "},")