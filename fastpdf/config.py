# fastpdf/config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "A3": A3,
    "A4": A4,
    "A5": A5,
    "LETTER": LETTER,
    "LEGAL": LEGAL,
}

# Registrierter Name, wenn kein TTF angegeben ist (Type1, immer vorhanden)
FALLBACK_FONT = "Helvetica"


# =========================================================
# RENDER SPEC
# =========================================================
@dataclass(frozen=True)
class RenderSpec:
    page_w: float
    page_h: float
    font_name: str = "font"
    fallback_font: str = FALLBACK_FONT
    line_width: float = 1.0
    cell_padding: float = 2.0
    title_scale: float = 0.8  # Schriftgröße = Zeilenhöhe * title_scale
    jpeg_quality: int = 100


def get_render_spec(page_size: str = "A4", **overrides) -> RenderSpec:
    """
    Liefert die Render-Parameter für eine benannte Seitengröße.
      - page_size: A3, A4, A5, LETTER, LEGAL (case-insensitive)
      - overrides: einzelne Felder von RenderSpec überschreiben
    """
    key = str(page_size).strip().upper()
    if key not in PAGE_SIZES:
        raise ValueError(f"Unknown page size: {page_size}")
    page_w, page_h = PAGE_SIZES[key]
    spec = RenderSpec(page_w=float(page_w), page_h=float(page_h))
    if overrides:
        spec = replace(spec, **overrides)
    return spec
