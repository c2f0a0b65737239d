"""
Render-Konfiguration
"""

import pytest
from reportlab.lib.pagesizes import A4, LETTER

from fastpdf.config import RenderSpec, get_render_spec


class TestRenderSpec:
    """Seitengrößen und Defaults"""

    def test_defaults_are_a4(self):
        spec = get_render_spec()
        assert (spec.page_w, spec.page_h) == A4
        assert spec.line_width == 1.0
        assert spec.cell_padding == 2.0
        assert spec.title_scale == 0.8
        assert spec.jpeg_quality == 100
        assert spec.fallback_font == "Helvetica"

    def test_named_size_is_case_insensitive(self):
        spec = get_render_spec("letter")
        assert (spec.page_w, spec.page_h) == LETTER

    def test_overrides(self):
        spec = get_render_spec("A5", jpeg_quality=80, line_width=0.5)
        assert spec.jpeg_quality == 80
        assert spec.line_width == 0.5

    def test_unknown_size(self):
        with pytest.raises(ValueError):
            get_render_spec("B7")

    def test_is_immutable(self):
        spec = get_render_spec()
        with pytest.raises(AttributeError):
            spec.page_w = 1  # type: ignore[misc]
        assert isinstance(spec, RenderSpec)
