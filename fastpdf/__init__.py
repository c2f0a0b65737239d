# fastpdf/__init__.py
"""
Zentraler Einstiegspunkt für fastpdf.
Alle öffentlichen Funktionen und Klassen werden hier exportiert:

    from fastpdf import FastPdf, TextItem, TableItem, TableColumn
"""

__version__ = "0.1.0"

# Session – Seiten, Header/Footer, Ausgabe als Bytes
from .session import FastPdf

# Item-Modell + JSON-Records
from .items import (
    ItemType,
    Item,
    TextItem,
    BarCodeItem,
    QrCodeItem,
    LineItem,
    GridItem,
    TableItem,
    TableColumn,
    parse_item,
    parse_items,
    item_to_record,
)

# Zeichnen ohne Session (eigene Canvas / Tests)
from .pdf_engine import PdfCanvas, draw_items, draw_grid, register_font
from .table_layout import draw_table

from .config import RenderSpec, get_render_spec
from .errors import (
    ErrorKind,
    FastPdfError,
    FontLoadFailure,
    TemplateImportFailure,
    SymbolEncodeFailure,
    ImageEncodeFailure,
    RenderWriteFailure,
    SessionFinalizedError,
)

__all__ = [
    "FastPdf",
    "ItemType",
    "Item",
    "TextItem",
    "BarCodeItem",
    "QrCodeItem",
    "LineItem",
    "GridItem",
    "TableItem",
    "TableColumn",
    "parse_item",
    "parse_items",
    "item_to_record",
    "PdfCanvas",
    "draw_items",
    "draw_grid",
    "draw_table",
    "register_font",
    "RenderSpec",
    "get_render_spec",
    "ErrorKind",
    "FastPdfError",
    "FontLoadFailure",
    "TemplateImportFailure",
    "SymbolEncodeFailure",
    "ImageEncodeFailure",
    "RenderWriteFailure",
    "SessionFinalizedError",
]
