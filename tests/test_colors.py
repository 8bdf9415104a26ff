import pytest

from storefront.errors import ColorParseError
from storefront.theme.accessibility import check_accessibility, generate_a11y_report
from storefront.theme.colors import (
    HSL,
    complementary_colors,
    contrast_ratio,
    derive_palette,
    is_accessible,
    normalize_hex,
    parse_hex,
    relative_luminance,
    to_hex,
    to_hsl,
)

SAMPLE_COLORS = [
    "#000000",
    "#ffffff",
    "#3b82f6",
    "#10b981",
    "#8b5cf6",
    "#1f2937",
    "#ef4444",
    "#f59e0b",
    "#7f7f7f",
    "#010203",
    "#fefefe",
    "#123456",
]


def test_parse_hex_accepts_short_long_and_missing_hash():
    assert parse_hex("#fff") == (255, 255, 255)
    assert parse_hex("3B82F6") == (59, 130, 246)
    assert parse_hex("#3b82F6") == (59, 130, 246)
    assert normalize_hex("#ABC") == "#aabbcc"


@pytest.mark.parametrize("bad", ["", "#12", "#12345", "#gggggg", "blue", None, 123])
def test_parse_hex_rejects_garbage(bad):
    with pytest.raises(ColorParseError):
        parse_hex(bad)


@pytest.mark.parametrize("color", SAMPLE_COLORS)
def test_hsl_round_trip(color):
    assert to_hex(to_hsl(color)) == color


def test_to_hsl_known_values():
    h, s, l = to_hsl("#ff0000")
    assert (h, s, l) == pytest.approx((0.0, 1.0, 0.5))
    assert to_hex(HSL(120, 1.0, 0.5)) == "#00ff00"
    # hue wraps around
    assert to_hex(HSL(480, 1.0, 0.5)) == "#00ff00"


@pytest.mark.parametrize("color", SAMPLE_COLORS)
def test_contrast_with_self_is_one(color):
    assert contrast_ratio(color, color) == pytest.approx(1.0)


def test_contrast_is_symmetric():
    for a in SAMPLE_COLORS:
        for b in SAMPLE_COLORS:
            assert contrast_ratio(a, b) == contrast_ratio(b, a)


def test_black_white_contrast_and_luminance():
    assert relative_luminance("#000") == 0.0
    assert relative_luminance("#FFFFFF") == pytest.approx(1.0)
    assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)


def test_is_accessible_levels():
    assert is_accessible("#FFFFFF", "#000000", "normal") is True
    assert is_accessible("#FFFFFF", "#FEFEFE", "normal") is False
    # #767676 on white is ~4.54: passes AA, fails AAA
    assert is_accessible("#767676", "#FFFFFF", "AA") is True
    assert is_accessible("#767676", "#FFFFFF", "AAA") is False
    # #949494 on white is ~3.03: large text only
    assert is_accessible("#949494", "#FFFFFF", "large") is True
    assert is_accessible("#949494", "#FFFFFF") is False


def test_is_accessible_fails_closed_on_bad_color():
    assert is_accessible("not-a-color", "#FFFFFF") is False
    assert is_accessible("#FFFFFF", None) is False


def test_is_accessible_rejects_unknown_level():
    with pytest.raises(ValueError):
        is_accessible("#FFFFFF", "#000000", "gold")


def test_contrast_ratio_raises_outside_render_paths():
    with pytest.raises(ColorParseError):
        contrast_ratio("#zzzzzz", "#FFFFFF")


def test_derive_palette_variants():
    palette = derive_palette("#3B82F6")
    variants = {palette.base, palette.light, palette.lighter, palette.dark, palette.darker}
    assert len(variants) == 5
    assert palette.base == "#3b82f6"
    assert palette.alpha50 == "rgba(59, 130, 246, 0.5)"
    assert palette.alpha10 == "rgba(59, 130, 246, 0.1)"
    assert palette.alpha80 == "rgba(59, 130, 246, 0.8)"
    assert to_hsl(palette.light).l > to_hsl(palette.base).l > to_hsl(palette.dark).l


def test_derive_palette_clamps_lightness():
    palette = derive_palette("#FFFFFF")
    assert palette.light == "#ffffff"
    assert palette.lighter == "#ffffff"
    assert derive_palette("#000").darker == "#000000"


def test_derive_palette_is_deterministic():
    assert derive_palette("#8B5CF6") == derive_palette("#8B5CF6")


def test_complementary_colors():
    harmony = complementary_colors("#FF0000")
    assert harmony.complement == "#00ffff"
    assert harmony.triadic == ["#ff0000", "#00ff00", "#0000ff"]
    assert len(harmony.tetrad) == 4
    assert harmony.tetrad[0] == "#ff0000"
    assert harmony.tetrad[2] == harmony.complement
    assert harmony.analogous[0] == "#ff0000"
    assert len(harmony.analogous) == 3
    assert len(harmony.split_complement) == 3


def test_check_accessibility_report():
    report = check_accessibility("#FFFFFF", "#000000")
    assert report.ratio == 21.0
    assert report.normal_text and report.large_text and report.wcag_aa and report.wcag_aaa


def test_generate_a11y_report_covers_each_color():
    report = generate_a11y_report({"primary": "#3B82F6", "text": "#1F2937"})
    assert set(report) == {"primary", "text"}
    assert report["text"]["on_white"].wcag_aa is True
    assert report["text"]["as_background"]["with_white_text"].wcag_aa is True
