# engine/errors.py
"""
Error hierarchy for the record store.

Every store error also derives from the matching builtin, so callers that
only know about ``ValueError`` / ``OSError`` still catch them:

  StoreError
    ├── InvalidName         (ValueError)        bad table name, raised before any I/O
    ├── TableAlreadyExists  (FileExistsError)   create_table on an existing file
    └── TableNotFound       (FileNotFoundError) any operation on a missing file
"""
from __future__ import annotations


class StoreError(Exception):
    """Root of all record store errors."""


class InvalidName(StoreError, ValueError):
    def __init__(self, name) -> None:
        super().__init__(f"Invalid table name: {name!r}")
        self.name = name


class TableAlreadyExists(StoreError, FileExistsError):
    def __init__(self, table: str, path: str) -> None:
        # plain Exception init: the OSError (errno, strerror) form would reformat str()
        Exception.__init__(self, f"Table already exists: {table} ({path})")
        self.table = table
        self.path = path


class TableNotFound(StoreError, FileNotFoundError):
    def __init__(self, table: str, path: str) -> None:
        Exception.__init__(self, f"Table not found: {table} ({path})")
        self.table = table
        self.path = path
