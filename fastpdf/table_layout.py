# fastpdf/table_layout.py
from __future__ import annotations

from .items import TableItem


def draw_table(surface, item: TableItem, *, padding: float = 2.0, title_scale: float = 0.8) -> int:
    """
    Tabelle mit fester Zeilenhöhe (item.height):
      1. Titelzeile: linker Rand einmal, dann je Spalte oben/unten/rechts + Titel
      2. Datenzeilen: linker Rand einmal, dann je Spalte unten/rechts + Zelltext
    Die Oberkante einer Datenzeile ist die Unterkante der vorherigen Zeile.
    Fehlende Keys -> leerer Text. Keine Breitenprüfung gegen die Seite.
    Returns Anzahl gezeichneter Zeilenbänder (0 ohne Spalten).
    """
    if not item.columns:
        return 0

    row_h = float(item.height)
    font_size = int(row_h * title_scale)

    left = item.left
    top = item.top
    next_top = top + row_h

    # Titelzeile
    surface.draw_line(left, top, left, next_top)
    for column in item.columns:
        next_left = left + column.width
        surface.draw_line(left, top, next_left, top)
        surface.draw_line(left, next_top, next_left, next_top)
        surface.draw_line(next_left, top, next_left, next_top)
        surface.draw_text(left + padding, top + padding, font_size, column.title)
        left = next_left

    bands = 1
    for row in item.data:
        top = next_top
        next_top = top + row_h
        left = item.left

        surface.draw_line(left, top, left, next_top)
        for column in item.columns:
            next_left = left + column.width
            surface.draw_line(left, next_top, next_left, next_top)
            surface.draw_line(next_left, top, next_left, next_top)
            surface.draw_text(left + padding, top + padding, font_size, row.get(column.key, ""))
            left = next_left
        bands += 1

    return bands
