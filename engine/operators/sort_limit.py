# engine/operators/sort_limit.py
from __future__ import annotations
import math
from typing import Any, Iterable, List, Mapping, Tuple

from .base import Operator
from ..predicates import index_of
from ..record import decode_line
from ..types import PageResult, to_text


def order_target(order_by: Mapping[str, Any]) -> Tuple[str, str, bool]:
    """First (column, value) of order_by -> (column, target text, descending)."""
    if not order_by:
        raise ValueError("order_by must contain at least one entry")
    column, value = next(iter(order_by.items()))
    target = to_text(value)
    return column, target, target == "DESC"


class OrderBy(Operator):
    """Stable sort by the position of one fixed target value inside each line.

    Every line is ranked by where ``target`` sits among its own fields
    (-1 when absent). The column name only selects the entry, it is never
    used as a column index.
    """

    def __init__(self, child: Operator, order_by: Mapping[str, Any]) -> None:
        self.child = child
        self.column, self.target, self.desc = order_target(order_by)

    def execute(self) -> Iterable[str]:
        lines = list(self.child)
        lines.sort(key=lambda line: index_of(decode_line(line), self.target), reverse=self.desc)
        yield from lines


def paginate(lines: List[str], page: int, per_page: int, total_records: int) -> PageResult:
    """Slice one page out of raw lines and split it into records.

    Slicing follows plain list slice rules: page 0 is empty and a negative
    page counts back from the end, nothing raises.
    """
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")
    offset = (page - 1) * per_page
    chunk = lines[offset:offset + per_page]
    return PageResult(
        data=[decode_line(line) for line in chunk],
        total_pages=math.ceil(total_records / per_page),
        current_page=page,
        total_records=total_records,
    )
