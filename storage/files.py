"""
Table file management utilities: validate table names and map a table
name to its file path under the store's base directory.
"""
from __future__ import annotations
import os
import re

from engine.errors import InvalidName

TABLE_SUFFIX = ".csv"
_NAME_RE = re.compile(r"^[A-Za-z0-9_]+$")


def validate_table_name(table: str) -> str:
    # ASCII only: str.isalnum() would also accept non-latin letters
    if not isinstance(table, str) or not _NAME_RE.fullmatch(table):
        raise InvalidName(table)
    return table


def file_for_table(base_dir: str, table: str) -> str:
    return os.path.join(base_dir, f"{validate_table_name(table)}{TABLE_SUFFIX}")
