"""Tagged cell values exchanged between the reader and the writer."""

# Module responsibilities:
# - Classify the heterogeneous scalars openpyxl hands back into a closed set of kinds.
# - Give the writer a single raw value to store, whatever the kind.

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Union

Scalar = Union[str, int, float, Decimal, bool, datetime, date, time, timedelta, None]


class CellKind(str, Enum):
    """Kinds of scalar a worksheet cell can hold."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class CellValue:
    """A single cell value tagged with its kind."""

    kind: CellKind
    value: Scalar = None

    @classmethod
    def from_raw(cls, raw: object) -> "CellValue":
        """Classify a raw openpyxl value.

        ``bool`` is tested before the numeric types since it subclasses ``int``.
        """

        if raw is None or raw == "":
            return EMPTY
        if isinstance(raw, bool):
            return cls(CellKind.BOOLEAN, raw)
        if isinstance(raw, (int, float, Decimal)):
            return cls(CellKind.NUMBER, raw)
        if isinstance(raw, (datetime, date, time, timedelta)):
            return cls(CellKind.DATE, raw)
        if isinstance(raw, str):
            return cls(CellKind.TEXT, raw)
        return cls(CellKind.TEXT, str(raw))

    @classmethod
    def text(cls, value: str) -> "CellValue":
        return cls(CellKind.TEXT, value)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    @property
    def raw(self) -> Scalar:
        """Value to store back into a worksheet cell."""

        if self.kind is CellKind.EMPTY:
            return None
        return self.value


EMPTY = CellValue(CellKind.EMPTY)
