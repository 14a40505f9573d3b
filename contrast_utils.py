import logging
import re
from collections import namedtuple

logger = logging.getLogger(__name__)

# Optional '#', then exactly three byte pairs. No 3-digit shorthand.
HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)

# WCAG 2.1 thresholds
AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

SUGGEST_STEP = 5
SUGGEST_MAX_ITERATIONS = 100

ComplianceResult = namedtuple("ComplianceResult", ["aa_normal", "aa_large", "aaa_normal", "aaa_large"])

def hex_to_rgb(hex_str):
    """
    Parses '#RRGGBB' (the '#' is optional) into an (r, g, b) tuple.
    Returns None for anything else.
    """
    if not isinstance(hex_str, str):
        return None
    match = HEX_PATTERN.fullmatch(hex_str)
    if match is None:
        return None
    return tuple(int(pair, 16) for pair in match.groups())

def rgb_to_hex(r, g, b):
    channels = (int(max(0, min(255, c))) for c in (r, g, b))
    return "#" + "".join(f"{c:02x}" for c in channels)

def calculate_luminance(r, g, b):
    """
    Calculates relative luminance using WCAG 2.1 formula.
    """
    components = []
    for c in [r, g, b]:
        v = c / 255.0
        if v <= 0.03928:
            components.append(v / 12.92)
        else:
            components.append(((v + 0.055) / 1.055) ** 2.4)

    r_lin, g_lin, b_lin = components
    return (0.2126 * r_lin) + (0.7152 * g_lin) + (0.0722 * b_lin)

def calculate_contrast(fg_hex, bg_hex):
    """
    Returns contrast ratio (float) between two hex colors.
    1.0 when either color can't be parsed, which fails every level.
    """
    fg_rgb = hex_to_rgb(fg_hex)
    bg_rgb = hex_to_rgb(bg_hex)
    if fg_rgb is None or bg_rgb is None:
        return 1.0

    l1 = calculate_luminance(*fg_rgb)
    l2 = calculate_luminance(*bg_rgb)

    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)

def suggest_passing_color(fg_hex, bg_hex, target_ratio=AA_NORMAL):
    """
    Steps FG towards black (light BG) or white (dark BG) until it meets
    target_ratio against BG. Returns suggested hex string.

    The search gives up after SUGGEST_MAX_ITERATIONS steps and returns the
    last candidate, which may still fail the target.
    """
    fg_rgb = hex_to_rgb(fg_hex)
    bg_rgb = hex_to_rgb(bg_hex)
    if fg_rgb is None or bg_rgb is None:
        return fg_hex

    # Direction is fixed for the whole search
    should_darken = calculate_luminance(*bg_rgb) > 0.5
    step = -SUGGEST_STEP if should_darken else SUGGEST_STEP

    r, g, b = fg_rgb
    ratio = calculate_contrast(fg_hex, bg_hex)
    iterations = 0

    while ratio < target_ratio and iterations < SUGGEST_MAX_ITERATIONS:
        r, g, b = (max(0, min(255, c + step)) for c in (r, g, b))
        ratio = calculate_contrast(rgb_to_hex(r, g, b), bg_hex)
        iterations += 1

    if ratio < target_ratio:
        logger.debug("No passing color for %s on %s (best %.2f < %.2f)",
                     fg_hex, bg_hex, ratio, target_ratio)

    return rgb_to_hex(r, g, b)

def check_compliance(ratio):
    return ComplianceResult(
        aa_normal=ratio >= AA_NORMAL,
        aa_large=ratio >= AA_LARGE,
        aaa_normal=ratio >= AAA_NORMAL,
        aaa_large=ratio >= AAA_LARGE,
    )

def format_ratio(ratio):
    return f"{ratio:.2f}:1"

def format_results(fg_hex, bg_hex, ratio):
    """
    Plain-text summary used by "Copy Results".
    """
    result = check_compliance(ratio)

    def verdict(passed):
        return "Pass" if passed else "Fail"

    lines = [
        f"Foreground: {fg_hex}",
        f"Background: {bg_hex}",
        f"Contrast Ratio: {format_ratio(ratio)}",
        f"WCAG 2.1 AA Text: {verdict(result.aa_normal)}",
        f"WCAG 2.1 AA Large Text: {verdict(result.aa_large)}",
        f"WCAG 2.1 AAA Text: {verdict(result.aaa_normal)}",
        f"WCAG 2.1 AAA Large Text: {verdict(result.aaa_large)}",
    ]
    return "\n".join(lines)
