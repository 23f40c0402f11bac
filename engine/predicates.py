# engine/predicates.py
from __future__ import annotations
from typing import Any, Callable, List, Mapping, Optional

from .record import decode_line
from .types import to_text


def build_predicate(conditions: Optional[Mapping[str, Any]]) -> Callable[[str], bool]:
    """conditions dict -> predicate over a raw table line.

    Only the condition *values* matter: a line matches when every value
    appears among its fields, in any column. The keys are not resolved.
    """
    if not conditions:
        return lambda line: True
    wanted: List[str] = [to_text(v) for v in conditions.values()]

    def pred(line: str) -> bool:
        fields = decode_line(line)
        return all(w in fields for w in wanted)

    return pred


def index_of(fields: List[str], target: str) -> int:
    try:
        return fields.index(target)
    except ValueError:
        return -1
