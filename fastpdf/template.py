# fastpdf/template.py
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from pypdf import PdfReader, PdfWriter, Transformation
from pypdf.errors import PyPdfError

from .errors import RenderWriteFailure, TemplateImportFailure

logger = logging.getLogger(__name__)


class TemplateDocument:
    """Hintergrund-PDF; Seite i des Dokuments nutzt Vorlagenseite min(i, n-1)."""

    def __init__(self, path: str):
        self.path = str(path)
        try:
            self.reader = PdfReader(self.path)
            count = len(self.reader.pages)
        except (OSError, PyPdfError) as e:
            raise TemplateImportFailure(f"Cannot import template {self.path}: {e}") from e
        if count == 0:
            raise TemplateImportFailure(f"Template {self.path} has no pages")
        self.page_count = count

    def page_index_for(self, page_index: int) -> int:
        return min(max(int(page_index), 0), self.page_count - 1)


@dataclass(frozen=True)
class TemplateUse:
    template: TemplateDocument
    page_index: int


def merge_templates(
    pdf_bytes: bytes,
    uses: Sequence[Optional[TemplateUse]],
    *,
    page_w: float,
    page_h: float,
) -> bytes:
    """
    Legt die Vorlagenseiten unter die gerenderten Seiten.
    uses[i] = None -> Seite i bleibt unverändert.
    Vorlage wird auf page_w x page_h skaliert (MediaBox).
    """
    try:
        overlay = PdfReader(io.BytesIO(pdf_bytes))
        writer = PdfWriter()
        for page, use in zip(overlay.pages, uses):
            if use is None:
                writer.add_page(page)
                continue

            src = use.template.reader.pages[use.page_index]
            box = src.mediabox
            sx = page_w / float(box.width)
            sy = page_h / float(box.height)
            ctm = Transformation().translate(-float(box.left), -float(box.bottom)).scale(sx, sy)

            base = writer.add_blank_page(width=page_w, height=page_h)
            base.merge_transformed_page(src, ctm)
            base.merge_page(page)

        out = io.BytesIO()
        writer.write(out)
    except (OSError, PyPdfError, ZeroDivisionError) as e:
        raise RenderWriteFailure(f"Cannot merge template pages: {e}") from e

    logger.debug("Merged %d template page(s)", sum(1 for u in uses if u is not None))
    return out.getvalue()


def template_plan(template: Optional[TemplateDocument], page_index: int) -> Optional[TemplateUse]:
    if template is None:
        return None
    return TemplateUse(template=template, page_index=template.page_index_for(page_index))
