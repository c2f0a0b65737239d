# fastpdf/errors.py
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    FONT_LOAD_FAILURE = "font_load_failure"
    TEMPLATE_IMPORT_FAILURE = "template_import_failure"
    SYMBOL_ENCODE_FAILURE = "symbol_encode_failure"
    IMAGE_ENCODE_FAILURE = "image_encode_failure"
    RENDER_WRITE_FAILURE = "render_write_failure"
    SESSION_FINALIZED = "session_finalized"


class FastPdfError(Exception):
    """Basisklasse aller fastpdf-Fehler. `kind` erlaubt Auswertung ohne isinstance-Kaskade."""

    kind: ErrorKind = ErrorKind.RENDER_WRITE_FAILURE


class FontLoadFailure(FastPdfError):
    kind = ErrorKind.FONT_LOAD_FAILURE


class TemplateImportFailure(FastPdfError):
    kind = ErrorKind.TEMPLATE_IMPORT_FAILURE


class SymbolEncodeFailure(FastPdfError):
    kind = ErrorKind.SYMBOL_ENCODE_FAILURE


class ImageEncodeFailure(FastPdfError):
    kind = ErrorKind.IMAGE_ENCODE_FAILURE


class RenderWriteFailure(FastPdfError):
    kind = ErrorKind.RENDER_WRITE_FAILURE


class SessionFinalizedError(FastPdfError):
    kind = ErrorKind.SESSION_FINALIZED
