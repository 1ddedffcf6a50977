"""Tests for rendering _variables.scss text."""

from cssrefactor.extraction import ExtractedValueSet, extract, render
from cssrefactor.parser import parse_css


SAMPLE_CSS = """
body { color: #0d0c0d; background: #f0f0f0; margin: 0; }
.btn { background-color: #e6ac55; padding: 8px 16px; border: 1px solid #ffffff; }
.section { padding: 24px 0; margin-bottom: 32px; }
@media (max-width: 768px) { .section { padding: 16px 0; } }
@media (max-width: 480px) { .btn { padding: 4px; } }
"""


class TestRender:
    def test_empty_has_only_headers(self):
        assert render(ExtractedValueSet()) == (
            "// Color Variables\n"
            "\n"
            "// Spacing Variables\n"
            "\n"
            "// Breakpoint Variables\n"
        )

    def test_sections_in_fixed_order(self):
        values = ExtractedValueSet(
            colors=("#e6ac55",), spacing=("8px", "16px"), breakpoints=("600px",)
        )
        assert render(values) == (
            "// Color Variables\n"
            "$color-accent: #e6ac55;\n"
            "\n"
            "// Spacing Variables\n"
            "$spacing-sm: 8px;\n"
            "$spacing-md: 16px;\n"
            "\n"
            "// Breakpoint Variables\n"
            "$breakpoint-tablet: 600px;\n"
        )

    def test_full_stylesheet(self):
        text = render(extract(parse_css(SAMPLE_CSS)))
        assert text == (
            "// Color Variables\n"
            "$color-dark: #0d0c0d;\n"
            "$color-light: #f0f0f0;\n"
            "$color-accent: #e6ac55;\n"
            "$color-white: #ffffff;\n"
            "\n"
            "// Spacing Variables\n"
            "$spacing-sm: 8px;\n"
            "$spacing-lg: 24px;\n"
            "$spacing-xl: 32px;\n"
            "\n"
            "// Breakpoint Variables\n"
            "$breakpoint-mobile: 480px;\n"
            "$breakpoint-tablet: 768px;\n"
        )

    def test_every_assignment_line_has_same_shape(self):
        text = render(extract(parse_css(SAMPLE_CSS)))
        lines = [ln for ln in text.splitlines() if ln and not ln.startswith("//")]
        assert all(ln.startswith("$") and ln.endswith(";") and ": " in ln for ln in lines)

    def test_byte_identical_across_runs(self):
        first = render(extract(parse_css(SAMPLE_CSS)))
        second = render(extract(parse_css(SAMPLE_CSS)))
        assert first == second

    def test_duplicate_values_rendered_once(self):
        text = render(extract(parse_css("a { margin: 8px; } b { padding: 8px 0; }")))
        assert text.count("8px") == 1
        assert "$spacing-sm: 8px;" in text
