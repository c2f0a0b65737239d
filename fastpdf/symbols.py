# fastpdf/symbols.py
from __future__ import annotations

import io
import logging

import numpy as np
import qrcode
from barcode import Code128
from barcode.errors import BarcodeError
from PIL import Image
from qrcode.exceptions import DataOverflowError

from .errors import ImageEncodeFailure, SymbolEncodeFailure

logger = logging.getLogger(__name__)


# =========================================================
# MODULE MATRICES
# True = dunkles Modul
# =========================================================
def code128_modules(content: str) -> np.ndarray:
    """Code 128 als 1D-Bitreihe (ohne Ruhezone)."""
    if not content:
        raise SymbolEncodeFailure("Code 128 content must not be empty")
    try:
        pattern = Code128(content).build()[0]
    except (BarcodeError, KeyError, ValueError) as e:
        raise SymbolEncodeFailure(f"Code 128 encode failed for {content!r}: {e}") from e
    return np.array([ch == "1" for ch in pattern], dtype=bool)


def qr_modules(content: str) -> np.ndarray:
    """QR-Matrix mit Fehlerkorrektur M, Version automatisch, ohne Ruhezone."""
    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_M, border=0)
    try:
        qr.add_data(content)
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        raise SymbolEncodeFailure(f"QR encode failed for {content!r}: {e}") from e
    return np.array(qr.get_matrix(), dtype=bool)


# =========================================================
# SCALING
# Ganzzahliger Faktor, Rest wird als weißer Rand zentriert verteilt.
# =========================================================
def scale_1d(bits: np.ndarray, width: int, height: int) -> Image.Image:
    width, height = int(width), int(height)
    factor = width // bits.size if bits.size else 0
    if factor <= 0 or height <= 0:
        raise SymbolEncodeFailure(
            f"can not scale barcode to an image smaller than {bits.size}x1 (got {width}x{height})"
        )

    offset = (width - bits.size * factor) // 2
    row = np.repeat(np.where(bits, 0, 255).astype(np.uint8), factor)

    pixels = np.full((height, width), 255, dtype=np.uint8)
    pixels[:, offset:offset + row.size] = row
    return Image.fromarray(pixels)


def scale_2d(matrix: np.ndarray, width: int, height: int) -> Image.Image:
    width, height = int(width), int(height)
    rows, cols = matrix.shape
    factor = min(width // cols, height // rows) if rows and cols else 0
    if factor <= 0:
        raise SymbolEncodeFailure(
            f"can not scale barcode to an image smaller than {cols}x{rows} (got {width}x{height})"
        )

    block = np.kron(np.where(matrix, 0, 255).astype(np.uint8), np.ones((factor, factor), dtype=np.uint8))
    off_x = (width - cols * factor) // 2
    off_y = (height - rows * factor) // 2

    pixels = np.full((height, width), 255, dtype=np.uint8)
    pixels[off_y:off_y + block.shape[0], off_x:off_x + block.shape[1]] = block
    return Image.fromarray(pixels)


# =========================================================
# PUBLIC API
# =========================================================
def bar_code_image(content: str, width: int, height: int) -> Image.Image:
    return scale_1d(code128_modules(content), width, height)


def qr_code_image(content: str, size: int) -> Image.Image:
    return scale_2d(qr_modules(content), size, size)


def encode_jpeg(im: Image.Image, quality: int = 100) -> bytes:
    """RAM-only JPEG, keine Temp-Dateien."""
    if im.mode not in ("RGB", "L"):
        im = im.convert("RGB")
    out = io.BytesIO()
    try:
        im.save(out, format="JPEG", quality=int(quality))
    except (OSError, ValueError) as e:
        raise ImageEncodeFailure(f"JPEG encode failed: {e}") from e
    data = out.getvalue()
    logger.debug("Encoded %dx%d symbol to %d JPEG bytes", im.width, im.height, len(data))
    return data
