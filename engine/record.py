"""Record encode/decode for table lines (comma-joined text, no quoting)."""
from __future__ import annotations
from typing import Any, Iterable, List, Mapping, Sequence, Union

from .types import Record, to_text

DELIMITER = ","

Fields = Union[Sequence[Any], Mapping[str, Any]]


def field_values(fields: Fields) -> List[Any]:
    # mappings contribute their values, in insertion order
    if isinstance(fields, Mapping):
        return list(fields.values())
    return list(fields)


def column_names(columns: Union[Sequence[str], Mapping[str, Any]]) -> List[str]:
    # mappings ({"id": "int", ...}) contribute their keys
    if isinstance(columns, Mapping):
        return [str(k) for k in columns.keys()]
    return [to_text(c) for c in columns]


def encode_line(values: Iterable[Any]) -> str:
    # ',' or '\n' inside a value is written as-is and splits the row on next read
    return DELIMITER.join(to_text(v) for v in values)


def decode_line(line: str) -> Record:
    return line.split(DELIMITER)


def record_id(line: str) -> str:
    return decode_line(line)[0]
