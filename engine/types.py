from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

Record = List[str]


def to_text(value: Any) -> str:
    """Render a field / id / condition value the way the files store it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class PageResult:
    data: List[Record] = field(default_factory=list)
    total_pages: int = 0
    current_page: int = 1
    total_records: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": [list(r) for r in self.data],
            "totalPages": self.total_pages,
            "currentPage": self.current_page,
            "totalRecords": self.total_records,
        }
