# fastpdf/items.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class ItemType(IntEnum):
    TEXT = 0
    BAR_CODE = 1
    QR_CODE = 2
    LINE = 3
    GRID = 4
    TABLE = 5


# =========================================================
# ITEM MODEL
# Konvention: left/top = links-oben in pt, y wächst nach unten
# =========================================================
@dataclass(frozen=True)
class TableColumn:
    width: float
    title: str = ""
    key: str = ""


@dataclass(frozen=True)
class Item:
    item_type: ClassVar[ItemType]

    left: float = 0.0
    top: float = 0.0


@dataclass(frozen=True)
class TextItem(Item):
    item_type: ClassVar[ItemType] = ItemType.TEXT

    size: int = 12
    text: str = ""


@dataclass(frozen=True)
class BarCodeItem(Item):
    """Code 128; width/height sind Pixel des Rasters (1 px = 1 pt)."""

    item_type: ClassVar[ItemType] = ItemType.BAR_CODE

    width: int = 0
    height: int = 0
    text: str = ""


@dataclass(frozen=True)
class QrCodeItem(Item):
    item_type: ClassVar[ItemType] = ItemType.QR_CODE

    size: int = 0
    text: str = ""


@dataclass(frozen=True)
class LineItem(Item):
    """Line from (left, top) to (left + width, top + height)."""

    item_type: ClassVar[ItemType] = ItemType.LINE

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class GridItem(Item):
    item_type: ClassVar[ItemType] = ItemType.GRID

    width: float = 0.0
    height: float = 0.0
    row: int = 0
    column: int = 0


@dataclass(frozen=True)
class TableItem(Item):
    """height ist die Zeilenhöhe, nicht die Gesamthöhe."""

    item_type: ClassVar[ItemType] = ItemType.TABLE

    height: float = 0.0
    columns: Tuple[TableColumn, ...] = ()
    data: Tuple[Mapping[str, str], ...] = ()


# =========================================================
# RECORD FORM (JSON)
# =========================================================
def _num(record: Mapping[str, Any], key: str, default: float = 0.0) -> float:
    value = record.get(key)
    return float(value) if value is not None else default


def _int(record: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = record.get(key)
    return int(value) if value is not None else default


def _text(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def parse_column(record: Mapping[str, Any]) -> TableColumn:
    return TableColumn(
        width=_num(record, "width"),
        title=_text(record, "title"),
        key=_text(record, "key"),
    )


def parse_item(record: Mapping[str, Any]) -> Optional[Item]:
    """
    Baut ein Item aus einem JSON-Record:
      {"type": 5, "left": 10, "top": 20, "height": 18,
       "tableColumn": [{"width": 50, "title": "A", "key": "a"}],
       "tableData": [{"a": "1"}]}
    Unbekannte Typen -> None (wird geloggt, nicht geworfen).
    """
    try:
        item_type = ItemType(int(record.get("type", -1)))
    except (TypeError, ValueError):
        logger.warning("Skipping record with unknown item type: %r", record.get("type"))
        return None

    left = _num(record, "left")
    top = _num(record, "top")

    if item_type is ItemType.TEXT:
        return TextItem(left=left, top=top, size=_int(record, "size", 12), text=_text(record, "text"))
    if item_type is ItemType.BAR_CODE:
        return BarCodeItem(
            left=left,
            top=top,
            width=_int(record, "width"),
            height=_int(record, "height"),
            text=_text(record, "text"),
        )
    if item_type is ItemType.QR_CODE:
        return QrCodeItem(left=left, top=top, size=_int(record, "size"), text=_text(record, "text"))
    if item_type is ItemType.LINE:
        return LineItem(left=left, top=top, width=_num(record, "width"), height=_num(record, "height"))
    if item_type is ItemType.GRID:
        return GridItem(
            left=left,
            top=top,
            width=_num(record, "width"),
            height=_num(record, "height"),
            row=_int(record, "row"),
            column=_int(record, "column"),
        )

    columns = tuple(parse_column(c) for c in (record.get("tableColumn") or []))
    data = tuple(
        {str(k): _text(row, k) for k in row}
        for row in (record.get("tableData") or [])
    )
    return TableItem(left=left, top=top, height=_num(record, "height"), columns=columns, data=data)


def parse_items(records: Iterable[Mapping[str, Any]]) -> List[Item]:
    items: List[Item] = []
    for record in records:
        item = parse_item(record)
        if item is not None:
            items.append(item)
    return items


def item_to_record(item: Item) -> Dict[str, Any]:
    """Gegenstück zu parse_item: nur die Felder, die der Typ auswertet."""
    record: Dict[str, Any] = {"type": int(item.item_type), "left": item.left, "top": item.top}

    if isinstance(item, TableItem):
        record["height"] = item.height
        record["tableColumn"] = [{"width": c.width, "title": c.title, "key": c.key} for c in item.columns]
        record["tableData"] = [dict(row) for row in item.data]
        return record

    for name in ("size", "width", "height", "text", "row", "column"):
        if hasattr(item, name):
            record[name] = getattr(item, name)
    return record
