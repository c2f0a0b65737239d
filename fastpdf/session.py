# fastpdf/session.py
from __future__ import annotations

import io
import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from reportlab.pdfgen import canvas

from .config import RenderSpec, get_render_spec
from .errors import FastPdfError, RenderWriteFailure, SessionFinalizedError
from .items import (
    BarCodeItem,
    GridItem,
    Item,
    LineItem,
    QrCodeItem,
    TableColumn,
    TableItem,
    TextItem,
)
from .pdf_engine import PdfCanvas, draw_items, encode_symbols, register_font
from .template import TemplateDocument, TemplateUse, merge_templates, template_plan

logger = logging.getLogger(__name__)


class FastPdf:
    """
    Ein Dokument = eine Session.

      pdf = FastPdf("font.ttf", "vorlage.pdf", header=[...], footer=[...])
      pdf.add_text(20, 20, 12, "Hallo")
      pdf.new_page()
      data = pdf.finalize()

    Header wird beim Öffnen jeder Seite gezeichnet, Footer beim Schließen.
    Body-Items landen bei finalize() auf der letzten Seite.
    Nach finalize() ist die Session abgeschlossen.
    """

    def __init__(
        self,
        font_path: Optional[str] = None,
        template_path: Optional[str] = None,
        *,
        header: Iterable[Item] = (),
        footer: Iterable[Item] = (),
        spec: Optional[RenderSpec] = None,
    ):
        self.spec = spec or get_render_spec()
        self.header: List[Item] = list(header)
        self.footer: List[Item] = list(footer)
        self.body: List[Item] = []

        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(
            self._buffer,
            pagesize=(self.spec.page_w, self.spec.page_h),
            invariant=1,
        )
        self.font_name = register_font(font_path, self.spec)
        self.surface = PdfCanvas(
            self._canvas,
            page_h=self.spec.page_h,
            font_name=self.font_name,
            line_width=self.spec.line_width,
        )

        self.template: Optional[TemplateDocument] = TemplateDocument(template_path) if template_path else None
        self._template_uses: List[Optional[TemplateUse]] = []
        self._finalized = False
        self._failed = False
        self._open_page()

    # -----------------------------
    # STATE
    # -----------------------------
    @property
    def page_count(self) -> int:
        return len(self._template_uses)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _ensure_open(self):
        if self._finalized:
            raise SessionFinalizedError("Document already finalized")
        if self._failed:
            raise SessionFinalizedError("Document is unusable after a failed finalize()")

    # -----------------------------
    # PAGES
    # -----------------------------
    def _open_page(self):
        self._template_uses.append(template_plan(self.template, self.page_count))
        logger.debug("Opened page %d", self.page_count)
        draw_items(self.surface, self.header, self.spec)

    def _close_page(self):
        draw_items(self.surface, self.footer, self.spec)
        self._canvas.showPage()
        logger.debug("Closed page %d", self.page_count)

    def new_page(self):
        self._ensure_open()
        self._close_page()
        self._open_page()

    def set_template(self, path: str):
        """Vorlage gilt ab der aktuellen Seite."""
        self._ensure_open()
        self.template = TemplateDocument(path)
        self._template_uses[-1] = template_plan(self.template, self.page_count - 1)

    # -----------------------------
    # ITEMS
    # -----------------------------
    def render(self, items: Iterable[Item]) -> int:
        """Zeichnet sofort auf die aktuelle Seite."""
        self._ensure_open()
        return draw_items(self.surface, encode_symbols(items, self.spec), self.spec)

    def add(self, item: Item) -> Item:
        self._ensure_open()
        self.body.append(item)
        return item

    def add_text(self, left: float, top: float, size: int, text: str) -> Item:
        return self.add(TextItem(left=left, top=top, size=size, text=text))

    def add_bar_code(self, left: float, top: float, width: int, height: int, text: str) -> Item:
        return self.add(BarCodeItem(left=left, top=top, width=width, height=height, text=text))

    def add_qr_code(self, left: float, top: float, size: int, text: str) -> Item:
        return self.add(QrCodeItem(left=left, top=top, size=size, text=text))

    def add_line(self, left: float, top: float, width: float, height: float) -> Item:
        return self.add(LineItem(left=left, top=top, width=width, height=height))

    def add_grid(self, left: float, top: float, width: float, height: float, row: int, column: int) -> Item:
        return self.add(GridItem(left=left, top=top, width=width, height=height, row=row, column=column))

    def add_table(
        self,
        left: float,
        top: float,
        height: float,
        columns: Sequence[TableColumn],
        data: Sequence[Mapping[str, str]] = (),
    ) -> Item:
        return self.add(TableItem(left=left, top=top, height=height, columns=tuple(columns), data=tuple(data)))

    # -----------------------------
    # OUTPUT
    # -----------------------------
    def finalize(self) -> bytes:
        self._ensure_open()
        # Symbol-Fehler hier: Canvas unberührt, Body darf korrigiert und erneut finalisiert werden
        body = encode_symbols(self.body, self.spec)
        try:
            draw_items(self.surface, body, self.spec)
            self._close_page()
            self._canvas.save()
        except FastPdfError:
            self._failed = True
            raise
        except Exception as e:
            self._failed = True
            raise RenderWriteFailure(f"Cannot serialize document: {e}") from e
        self._finalized = True

        data = self._buffer.getvalue()
        if any(use is not None for use in self._template_uses):
            data = merge_templates(
                data,
                self._template_uses,
                page_w=self.spec.page_w,
                page_h=self.spec.page_h,
            )
        logger.info("Finalized PDF: %d page(s), %d bytes", self.page_count, len(data))
        return data

    def create_new_pdf(self, items: Iterable[Item]) -> bytes:
        self._ensure_open()
        self.body.extend(items)
        return self.finalize()
