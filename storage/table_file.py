# storage/table_file.py
from __future__ import annotations
import os
from typing import List

from engine.errors import TableAlreadyExists, TableNotFound


class TableFile:
    """
    One table on disk, always read and written as a whole:
      - create(): new file with a single header line, fails if present
      - append(): add one encoded line at the end
      - load_lines(): the file's lines, as read by the query side
      - load_raw_lines(): exact "\\n" split, as used by read-modify-write
      - save_lines(): overwrite the file with lines joined by "\\n"
    No locking and no atomic replace; a crash mid-write can truncate the file.
    """

    def __init__(self, table: str, path: str) -> None:
        self.table = table
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def create(self, header: str) -> None:
        if self.exists():
            raise TableAlreadyExists(self.table, self.path)
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write(header + "\n")

    def append(self, line: str) -> None:
        if not self.exists():
            raise TableNotFound(self.table, self.path)
        with open(self.path, "a", encoding="utf-8", newline="") as f:
            f.write(line + "\n")

    def read_text(self) -> str:
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            raise TableNotFound(self.table, self.path) from None

    def load_raw_lines(self) -> List[str]:
        # exact split; save_lines(load_raw_lines()) reproduces the file byte for byte
        return self.read_text().split("\n")

    def load_lines(self) -> List[str]:
        # newline-terminated lines: the final "\n" does not open an extra empty line
        text = self.read_text()
        if text.endswith("\n"):
            text = text[:-1]
        return text.split("\n")

    def save_lines(self, lines: List[str]) -> None:
        if not self.exists():
            raise TableNotFound(self.table, self.path)
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write("\n".join(lines))
