import logging

import pytest

from contrast_utils import (hex_to_rgb, rgb_to_hex, calculate_luminance, calculate_contrast,
                            suggest_passing_color, check_compliance, format_ratio,
                            format_results, ComplianceResult, SUGGEST_STEP)

@pytest.mark.parametrize("hex_str, expected", [
    ("#000000", (0, 0, 0)),
    ("#FFFFFF", (255, 255, 255)),
    ("ffffff", (255, 255, 255)),
    ("#1a2B3c", (26, 43, 60)),
    ("#777777", (119, 119, 119)),
])
def test_hex_to_rgb_valid(hex_str, expected):
    assert hex_to_rgb(hex_str) == expected

@pytest.mark.parametrize("hex_str", [
    "", "#", "#fff", "fff", "#12345", "#1234567", "#ggg000", "##000000",
    "#00000z", "bad", "#000000\n", " #000000", None, 0x000000,
])
def test_hex_to_rgb_invalid(hex_str):
    assert hex_to_rgb(hex_str) is None

def test_rgb_to_hex():
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(255, 255, 255) == "#ffffff"
    assert rgb_to_hex(26, 43, 60) == "#1a2b3c"

def test_rgb_to_hex_clamps_out_of_range():
    assert rgb_to_hex(-5, 300, 128) == "#00ff80"
    assert rgb_to_hex(12.7, 0, 0) == "#0c0000"
    assert rgb_to_hex(float("inf"), float("-inf"), 0) == "#ff0000"

def test_round_trip():
    for v in range(256):
        for rgb in [(v, 0, 0), (0, v, 0), (0, 0, v), (v, v, v), (v, 255 - v, v // 2)]:
            assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb

def test_luminance_extremes():
    assert calculate_luminance(0, 0, 0) == 0.0
    assert calculate_luminance(255, 255, 255) == pytest.approx(1.0)

def test_luminance_uses_piecewise_transform():
    # 10/255 falls under the 0.03928 knee -> linear segment
    assert calculate_luminance(10, 10, 10) == pytest.approx((10 / 255) / 12.92)
    assert calculate_luminance(255, 0, 0) == pytest.approx(0.2126)
    assert calculate_luminance(0, 255, 0) == pytest.approx(0.7152)
    assert calculate_luminance(0, 0, 255) == pytest.approx(0.0722)

def test_contrast_known_values():
    assert calculate_contrast("#000000", "#ffffff") == pytest.approx(21.0)
    assert calculate_contrast("#000000", "#000000") == 1.0
    assert round(calculate_contrast("#777777", "#ffffff"), 2) == 4.48

@pytest.mark.parametrize("a, b", [("#777777", "#ffffff"), ("#123456", "#abcdef"), ("#ff0000", "#00ff00")])
def test_contrast_symmetric_and_in_range(a, b):
    ratio = calculate_contrast(a, b)
    assert ratio == calculate_contrast(b, a)
    assert 1.0 <= ratio <= 21.0

@pytest.mark.parametrize("a, b", [("bad", "#ffffff"), ("#ffffff", "#fff"), ("", "")])
def test_contrast_invalid_is_sentinel(a, b):
    assert calculate_contrast(a, b) == 1

def test_suggest_darkens_on_light_background():
    suggestion = suggest_passing_color("#777777", "#ffffff", 4.5)
    assert calculate_contrast(suggestion, "#ffffff") >= 4.5
    r, g, b = hex_to_rgb(suggestion)
    assert r < 119 and g < 119 and b < 119
    # One step is enough from just under the threshold
    assert suggestion == rgb_to_hex(119 - SUGGEST_STEP, 119 - SUGGEST_STEP, 119 - SUGGEST_STEP)

def test_suggest_lightens_on_dark_background():
    suggestion = suggest_passing_color("#333333", "#000000", 4.5)
    assert calculate_contrast(suggestion, "#000000") >= 4.5
    assert hex_to_rgb(suggestion)[0] > 0x33

def test_suggest_already_passing_returns_normalized_foreground():
    assert suggest_passing_color("#000000", "#FFFFFF") == "#000000"
    assert suggest_passing_color("1A1A1A", "#ffffff") == "#1a1a1a"

def test_suggest_gives_up_after_iteration_cap():
    # Light background: darkening saturates at black without reaching 21:1
    suggestion = suggest_passing_color("#777777", "#cccccc", 21)
    assert suggestion == "#000000"
    assert calculate_contrast(suggestion, "#cccccc") < 21

def test_suggest_fixed_direction_can_miss_target():
    # #bbbbbb sits just under 0.5 luminance, so the search lightens a
    # foreground that is already white
    assert suggest_passing_color("#ffffff", "#bbbbbb") == "#ffffff"

def test_suggest_logs_when_giving_up(caplog):
    with caplog.at_level(logging.DEBUG, logger="contrast_utils"):
        suggest_passing_color("#ffffff", "#bbbbbb")
    assert any("No passing color" in r.getMessage() for r in caplog.records)

def test_suggest_does_not_log_on_success(caplog):
    with caplog.at_level(logging.DEBUG, logger="contrast_utils"):
        suggest_passing_color("#777777", "#ffffff")
    assert not caplog.records

@pytest.mark.parametrize("fg, bg", [("bad", "#ffffff"), ("#777777", "#fff"), ("#12", "nope")])
def test_suggest_invalid_returns_foreground_unchanged(fg, bg):
    assert suggest_passing_color(fg, bg) is fg

@pytest.mark.parametrize("ratio, expected", [
    (4.5, ComplianceResult(True, True, False, True)),
    (7.0, ComplianceResult(True, True, True, True)),
    (2.9, ComplianceResult(False, False, False, False)),
    (3.0, ComplianceResult(False, True, False, False)),
    (1.0, ComplianceResult(False, False, False, False)),
])
def test_check_compliance(ratio, expected):
    assert check_compliance(ratio) == expected

def test_format_ratio():
    assert format_ratio(21) == "21.00:1"
    assert format_ratio(calculate_contrast("#777777", "#ffffff")) == "4.48:1"

def test_format_results():
    text = format_results("#777777", "#FFFFFF", calculate_contrast("#777777", "#FFFFFF"))
    assert text.splitlines() == [
        "Foreground: #777777",
        "Background: #FFFFFF",
        "Contrast Ratio: 4.48:1",
        "WCAG 2.1 AA Text: Fail",
        "WCAG 2.1 AA Large Text: Pass",
        "WCAG 2.1 AAA Text: Fail",
        "WCAG 2.1 AAA Large Text: Fail",
    ]
