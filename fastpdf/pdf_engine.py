# fastpdf/pdf_engine.py
from __future__ import annotations

import hashlib
import io
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from .config import RenderSpec, get_render_spec
from .errors import FontLoadFailure, RenderWriteFailure
from .items import BarCodeItem, GridItem, Item, LineItem, QrCodeItem, TableItem, TextItem
from .symbols import bar_code_image, encode_jpeg, qr_code_image
from .table_layout import draw_table

logger = logging.getLogger(__name__)


# =========================================================
# FONTS
# =========================================================
def register_font(font_path: Optional[str], spec: RenderSpec) -> str:
    """
    Registriert ein TTF bei reportlab und liefert den Fontnamen.
    Ohne Pfad -> spec.fallback_font (Type1, keine Registrierung nötig).
    Der Name hängt am Pfad, damit mehrere Sessions sich nicht überschreiben.
    """
    if not font_path:
        return spec.fallback_font

    name = f"{spec.font_name}-{hashlib.sha1(str(font_path).encode('utf-8')).hexdigest()[:10]}"
    if name in pdfmetrics.getRegisteredFontNames():
        return name
    try:
        pdfmetrics.registerFont(TTFont(name, str(font_path)))
    except (OSError, TTFError) as e:
        raise FontLoadFailure(f"Cannot load font {font_path}: {e}") from e
    logger.debug("Registered font %s from %s", name, font_path)
    return name


# =========================================================
# SURFACE
# Koordinaten: links-oben, y nach unten (wie das JSON-Layout).
# reportlab zeichnet links-unten -> hier wird gespiegelt.
# =========================================================
class PdfCanvas:
    def __init__(self, c: canvas.Canvas, *, page_h: float, font_name: str, line_width: float = 1.0):
        self.c = c
        self.page_h = float(page_h)
        self.font_name = font_name
        self.line_width = float(line_width)

    def _y(self, top: float) -> float:
        return self.page_h - float(top)

    def draw_text(self, left: float, top: float, size: int, text: str):
        size = int(size)
        try:
            self.c.setFont(self.font_name, size)
            baseline = self._y(top) - pdfmetrics.getAscent(self.font_name, size)
            self.c.drawString(float(left), baseline, text or "")
        except Exception as e:
            raise RenderWriteFailure(f"Cannot write text {text!r} at ({left}, {top}): {e}") from e

    def draw_line(self, x1: float, y1: float, x2: float, y2: float):
        try:
            self.c.setLineWidth(self.line_width)
            self.c.setDash()
            self.c.line(float(x1), self._y(y1), float(x2), self._y(y2))
        except Exception as e:
            raise RenderWriteFailure(f"Cannot draw line ({x1}, {y1}) -> ({x2}, {y2}): {e}") from e

    def draw_image(self, data: bytes, left: float, top: float, width: float, height: float):
        try:
            img = ImageReader(io.BytesIO(data))
            self.c.drawImage(img, float(left), self._y(top) - height, width=width, height=height)
        except Exception as e:
            raise RenderWriteFailure(f"Cannot place image at ({left}, {top}): {e}") from e


# =========================================================
# PRIMITIVES
# =========================================================
def draw_line(surface, x1: float, y1: float, x2: float, y2: float):
    surface.draw_line(x1, y1, x2, y2)


def draw_grid(surface, left: float, top: float, width: float, height: float, row: int, column: int) -> bool:
    """
    Gleichmäßiges Raster: row+1 Querlinien, column+1 Längslinien.
    Abstände: width/row (quer) und height/column (längs).
    Returns False, wenn row/column nicht positiv sind (nichts gezeichnet).
    """
    if row <= 0 or column <= 0:
        logger.warning("Skipping grid with row=%s column=%s", row, column)
        return False

    distance_h = width / row
    distance_w = height / column
    for i in range(row + 1):
        y = top + distance_h * i
        surface.draw_line(left, y, left + width, y)
    for j in range(column + 1):
        x = left + distance_w * j
        surface.draw_line(x, top, x, top + height)
    return True


def draw_bar_code(surface, left: float, top: float, width: int, height: int, text: str, *, quality: int = 100):
    im = bar_code_image(text, width, height)
    surface.draw_image(encode_jpeg(im, quality), left, top, im.width, im.height)


def draw_qr_code(surface, left: float, top: float, size: int, text: str, *, quality: int = 100):
    im = qr_code_image(text, size)
    surface.draw_image(encode_jpeg(im, quality), left, top, im.width, im.height)


# =========================================================
# SYMBOL PRE-ENCODING
# Bar-/QR-Codes werden vor dem ersten Canvas-Aufruf kodiert:
# ein Encoding-Fehler lässt die Seite unberührt.
# =========================================================
@dataclass(frozen=True)
class EncodedSymbol(Item):
    """Fertiges JPEG eines Bar-/QR-Codes, Pixelgröße = Zeichengröße in pt."""

    width: int = 0
    height: int = 0
    data: bytes = b""


def encode_symbol(item: Item, spec: RenderSpec) -> Item:
    if isinstance(item, BarCodeItem):
        im = bar_code_image(item.text, item.width, item.height)
    elif isinstance(item, QrCodeItem):
        im = qr_code_image(item.text, item.size)
    else:
        return item
    data = encode_jpeg(im, spec.jpeg_quality)
    return EncodedSymbol(left=item.left, top=item.top, width=im.width, height=im.height, data=data)


def encode_symbols(items: Iterable[Item], spec: Optional[RenderSpec] = None) -> List[Item]:
    """Gleiche Reihenfolge; Bar-/QR-Codes ersetzt durch EncodedSymbol."""
    spec = spec or get_render_spec()
    return [encode_symbol(item, spec) for item in items]


# =========================================================
# ITEM DRAWERS
# =========================================================
def _draw_text_item(surface, item: TextItem, spec: RenderSpec):
    surface.draw_text(item.left, item.top, item.size, item.text)


def _draw_bar_code_item(surface, item: BarCodeItem, spec: RenderSpec):
    draw_bar_code(surface, item.left, item.top, item.width, item.height, item.text, quality=spec.jpeg_quality)


def _draw_qr_code_item(surface, item: QrCodeItem, spec: RenderSpec):
    draw_qr_code(surface, item.left, item.top, item.size, item.text, quality=spec.jpeg_quality)


def _draw_line_item(surface, item: LineItem, spec: RenderSpec):
    draw_line(surface, item.left, item.top, item.left + item.width, item.top + item.height)


def _draw_grid_item(surface, item: GridItem, spec: RenderSpec):
    draw_grid(surface, item.left, item.top, item.width, item.height, item.row, item.column)


def _draw_table_item(surface, item: TableItem, spec: RenderSpec):
    draw_table(surface, item, padding=spec.cell_padding, title_scale=spec.title_scale)


def _draw_encoded_symbol(surface, item: EncodedSymbol, spec: RenderSpec):
    surface.draw_image(item.data, item.left, item.top, item.width, item.height)


ItemDrawer = Callable[[object, Item, RenderSpec], None]

ITEM_DRAWERS: Dict[type, ItemDrawer] = {
    TextItem: _draw_text_item,
    BarCodeItem: _draw_bar_code_item,
    QrCodeItem: _draw_qr_code_item,
    LineItem: _draw_line_item,
    GridItem: _draw_grid_item,
    TableItem: _draw_table_item,
    EncodedSymbol: _draw_encoded_symbol,
}


def draw_items(surface, items: Iterable[Item], spec: Optional[RenderSpec] = None) -> int:
    """
    Zeichnet Items in Reihenfolge auf die aktuelle Seite.
    Unbekannte Typen werden übersprungen. Returns Anzahl gezeichneter Items.
    """
    spec = spec or get_render_spec()
    drawn = 0
    for item in items:
        fn = ITEM_DRAWERS.get(type(item))
        if not fn:
            logger.debug("No drawer for %s, skipped", type(item).__name__)
            continue
        logger.debug("Drawing %s at (%s, %s)", type(item).__name__, item.left, item.top)
        fn(surface, item, spec)
        drawn += 1
    return drawn
