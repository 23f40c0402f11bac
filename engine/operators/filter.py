from __future__ import annotations
from typing import Any, Iterable, Mapping, Optional

from .base import Operator
from ..predicates import build_predicate


class Filter(Operator):
    def __init__(self, child: Operator, conditions: Optional[Mapping[str, Any]]) -> None:
        self.child = child
        self.pred = build_predicate(conditions)

    def execute(self) -> Iterable[str]:
        for line in self.child:
            if self.pred(line):
                yield line
