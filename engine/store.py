# engine/store.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import functools
import os
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from storage.files import file_for_table
from storage.table_file import TableFile

from .errors import StoreError
from .operators.filter import Filter
from .operators.scan import LineScan
from .operators.sort_limit import OrderBy, paginate
from .record import Fields, column_names, decode_line, encode_line, field_values, record_id
from .reporter import LoggingReporter, Reporter
from .types import PageResult, Record, to_text


def _reported(op: Callable) -> Callable:
    """Report store/I-O failures to the reporter, then re-raise them unchanged."""
    @functools.wraps(op)
    def wrapper(self: "RecordStore", table: str, *args, **kwargs):
        try:
            return op(self, table, *args, **kwargs)
        except (StoreError, OSError) as e:
            self.reporter.report_error(f"{op.__name__}({table!r}): {e}")
            raise
    return wrapper


class RecordStore:
    """
    Flat-file record store: one ``<table>.csv`` per table under base_dir.

    Each operation validates the table name, resolves the file, then reads
    or rewrites the whole file. The first line is the header; field 0 of
    every line is treated as the record id. There is no locking, so
    concurrent writers can lose updates.

    Two header behaviours coexist on purpose:
      - get_all_records counts records as ``lines - 1`` (header-aware count)
      - slicing, id scans and filters run over the raw lines, header included
    """

    def __init__(self, base_dir: str, reporter: Optional[Reporter] = None) -> None:
        self.base_dir = os.path.abspath(base_dir)
        self.reporter: Reporter = reporter or LoggingReporter()

    def _file(self, table: str) -> TableFile:
        return TableFile(table, file_for_table(self.base_dir, table))

    def table_path(self, table: str) -> str:
        return self._file(table).path

    # ---------- DDL ----------
    @_reported
    def create_table(self, table: str, columns: Union[Sequence[str], Mapping[str, Any]]) -> bool:
        tf = self._file(table)
        tf.create(",".join(column_names(columns)))
        return True

    # ---------- DML ----------
    @_reported
    def insert_record(self, table: str, fields: Fields) -> bool:
        tf = self._file(table)
        tf.append(encode_line(field_values(fields)))
        return True

    @_reported
    def update_record(self, table: str, rid: Any, fields: Fields) -> bool:
        tf = self._file(table)
        key = to_text(rid)
        new_line = encode_line(field_values(fields))
        lines = [new_line if record_id(line) == key else line for line in tf.load_raw_lines()]
        tf.save_lines(lines)
        return True

    @_reported
    def delete_record(self, table: str, rid: Any) -> bool:
        tf = self._file(table)
        key = to_text(rid)
        tf.save_lines([line for line in tf.load_raw_lines() if record_id(line) != key])
        return True

    # ---------- queries ----------
    @_reported
    def get_all_records(self, table: str, page: int = 1, per_page: int = 10) -> PageResult:
        # newline-terminated lines: a final "\n" does not count as a record
        lines = self._file(table).load_lines()
        return paginate(lines, page, per_page, total_records=len(lines) - 1)

    @_reported
    def get_record_by_id(self, table: str, rid: Any) -> Optional[Record]:
        key = to_text(rid)
        for line in LineScan(self._file(table)):
            fields = decode_line(line)
            if fields[0] == key:
                return fields
        return None

    @_reported
    def filter_records(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
        page: int = 1,
        per_page: int = 10,
        order_by: Optional[Mapping[str, Any]] = None,
    ) -> PageResult:
        plan = Filter(LineScan(self._file(table)), conditions)
        if order_by is not None:
            plan = OrderBy(plan, order_by)
        lines: List[str] = list(plan)
        return paginate(lines, page, per_page, total_records=len(lines))
