# engine/operators/scan.py
from __future__ import annotations
from typing import Iterable, List

from .base import Operator
from storage.table_file import TableFile


class LineScan(Operator):
    """Every raw line of the table file, header and trailing "" included."""

    def __init__(self, table_file: TableFile) -> None:
        self.table_file = table_file
        self._lines: List[str] | None = None

    def lines(self) -> List[str]:
        if self._lines is None:
            self._lines = self.table_file.load_raw_lines()
        return self._lines

    def execute(self) -> Iterable[str]:
        yield from self.lines()
