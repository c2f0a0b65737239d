"""
pytest Konfiguration und gemeinsame Fixtures

    def test_something(surface, vera_ttf, make_template):
        ...
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import pytest
import reportlab
from pypdf import PdfReader
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


# ============================================================================
# Zeichenfläche ohne PDF
# ============================================================================

class RecordingSurface:
    """Nimmt alle Zeichenaufrufe in Reihenfolge auf."""

    def __init__(self):
        self.calls: List[tuple] = []

    def draw_text(self, left, top, size, text):
        self.calls.append(("text", left, top, size, text))

    def draw_line(self, x1, y1, x2, y2):
        self.calls.append(("line", x1, y1, x2, y2))

    def draw_image(self, data, left, top, width, height):
        self.calls.append(("image", left, top, width, height, data))

    @property
    def lines(self) -> List[Tuple[float, float, float, float]]:
        return [c[1:] for c in self.calls if c[0] == "line"]

    @property
    def texts(self) -> List[tuple]:
        return [c[1:] for c in self.calls if c[0] == "text"]

    @property
    def images(self) -> List[tuple]:
        return [c[1:] for c in self.calls if c[0] == "image"]

    @property
    def vertical_lines(self):
        return [ln for ln in self.lines if ln[0] == ln[2]]

    @property
    def horizontal_lines(self):
        return [ln for ln in self.lines if ln[1] == ln[3]]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


# ============================================================================
# Ressourcen
# ============================================================================

@pytest.fixture(scope="session")
def vera_ttf() -> Path:
    """Von reportlab mitgeliefertes TTF"""
    path = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"
    if not path.exists():
        pytest.skip("reportlab bundled Vera.ttf not available")
    return path


@pytest.fixture
def make_template(tmp_path: Path) -> Callable[..., Path]:
    """Erzeugt ein Vorlagen-PDF mit je einer Beschriftung pro Seite."""

    def _make(labels: Sequence[str], pagesize=A4, name: str = "template.pdf") -> Path:
        path = tmp_path / name
        c = canvas.Canvas(str(path), pagesize=pagesize, invariant=1)
        for label in labels:
            c.setFont("Helvetica", 14)
            c.drawString(40, pagesize[1] / 2, label)
            c.showPage()
        c.save()
        return path

    return _make


def read_pdf(data: bytes) -> PdfReader:
    return PdfReader(io.BytesIO(data))


def page_texts(data: bytes) -> List[str]:
    return [page.extract_text() or "" for page in read_pdf(data).pages]


@pytest.fixture
def pdf_reader() -> Callable[[bytes], PdfReader]:
    return read_pdf


@pytest.fixture
def pdf_texts() -> Callable[[bytes], List[str]]:
    return page_texts
