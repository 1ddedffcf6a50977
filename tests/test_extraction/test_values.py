"""Tests for color, spacing, and breakpoint extraction."""

from cssrefactor.extraction import ExtractedValueSet, extract, pixel_magnitude
from cssrefactor.model import Declaration, MediaRule, Rule, Stylesheet
from cssrefactor.parser import parse_css


def _sheet(*declarations: tuple[str, str]) -> Stylesheet:
    return Stylesheet(
        rules=(Rule(selector=".x", declarations=tuple(Declaration(p, v) for p, v in declarations)),)
    )


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class TestColors:
    def test_hex_from_color_property(self):
        assert extract(_sheet(("color", "#e6ac55"))).colors == ("#e6ac55",)

    def test_background_and_border_properties(self):
        values = extract(
            _sheet(
                ("background-color", "#111"),
                ("border", "1px solid #222222"),
                ("background", "url(x.png) #333"),
            )
        )
        assert values.colors == ("#111", "#222222", "#333")

    def test_rgb_and_rgba(self):
        values = extract(_sheet(("color", "rgb(1, 2, 3)"), ("background", "rgba(0,0,0,0.5)")))
        assert values.colors == ("rgb(1, 2, 3)", "rgba(0,0,0,0.5)")

    def test_only_first_match_per_declaration(self):
        values = extract(_sheet(("border-color", "#111 #222 #333 #444")))
        assert values.colors == ("#111",)

    def test_other_properties_ignored(self):
        values = extract(_sheet(("box-shadow", "0 0 4px #000"), ("fill", "#fff")))
        assert values.colors == ()

    def test_keyword_colors_not_matched(self):
        assert extract(_sheet(("color", "red"))).colors == ()

    def test_encounter_order_and_exact_dedup(self):
        values = extract(
            _sheet(("color", "#fff"), ("color", "#000"), ("color", "#fff"), ("color", "#FFF"))
        )
        assert values.colors == ("#fff", "#000", "#FFF")

    def test_property_match_is_case_insensitive(self):
        assert extract(_sheet(("COLOR", "#abc"))).colors == ("#abc",)


# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------


class TestSpacing:
    def test_first_pixel_token_only(self):
        values = extract(_sheet(("margin", "10px 20px 10px 20px")))
        assert values.spacing == ("10px",)

    def test_margin_and_padding_longhands(self):
        values = extract(_sheet(("margin-top", "24px"), ("padding-left", "4px")))
        assert values.spacing == ("4px", "24px")

    def test_sorted_by_magnitude_not_text(self):
        values = extract(_sheet(("margin", "100px"), ("padding", "8px"), ("margin", "16px")))
        assert values.spacing == ("8px", "16px", "100px")

    def test_duplicates_collapse(self):
        values = extract(_sheet(("margin", "8px"), ("padding", "8px 0")))
        assert values.spacing == ("8px",)

    def test_no_pixel_token_skipped(self):
        values = extract(_sheet(("margin", "0 auto"), ("padding", "1rem")))
        assert values.spacing == ()

    def test_equal_magnitudes_keep_discovery_order(self):
        values = extract(_sheet(("margin", "08px"), ("padding", "8px")))
        assert values.spacing == ("08px", "8px")

    def test_spec_example(self):
        values = extract(_sheet(("margin", "8px 0 8px 0"), ("padding", "16px 16px 16px 16px")))
        assert values.spacing == ("8px", "16px")


# ---------------------------------------------------------------------------
# Breakpoints
# ---------------------------------------------------------------------------


class TestBreakpoints:
    def test_media_condition(self):
        sheet = Stylesheet(rules=(MediaRule(condition="(max-width: 600px)"),))
        assert extract(sheet).breakpoints == ("600px",)

    def test_sorted_and_deduplicated(self):
        sheet = Stylesheet(
            rules=(
                MediaRule(condition="(max-width: 1024px)"),
                MediaRule(condition="(max-width: 480px)"),
                MediaRule(condition="(max-width: 1024px)"),
            )
        )
        assert extract(sheet).breakpoints == ("480px", "1024px")

    def test_condition_without_pixels(self):
        sheet = Stylesheet(rules=(MediaRule(condition="print"),))
        assert extract(sheet).breakpoints == ()

    def test_nested_rules_not_scanned(self):
        values = extract(
            parse_css("@media (max-width: 768px) { a { color: #123456; margin: 4px; } }")
        )
        assert values.colors == ()
        assert values.spacing == ()
        assert values.breakpoints == ("768px",)


# ---------------------------------------------------------------------------
# Whole-stylesheet behavior
# ---------------------------------------------------------------------------


class TestExtract:
    def test_empty_stylesheet(self):
        assert extract(Stylesheet()) == ExtractedValueSet()

    def test_pure_and_repeatable(self):
        sheet = parse_css("a { color: #fff; margin: 8px; } @media (max-width: 600px) {}")
        assert extract(sheet) == extract(sheet)

    def test_len_counts_all_categories(self):
        sheet = parse_css("a { color: #fff; margin: 8px; } @media (max-width: 600px) {}")
        assert len(extract(sheet)) == 3


class TestPixelMagnitude:
    def test_token(self):
        assert pixel_magnitude("16px") == 16

    def test_leading_zero(self):
        assert pixel_magnitude("08px") == 8

    def test_int_passthrough(self):
        assert pixel_magnitude(12) == 12
