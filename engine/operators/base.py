from __future__ import annotations
from typing import Iterable, Iterator


class Operator:
    """Pull-based operator over raw table lines; iterating runs execute()."""

    def execute(self) -> Iterable[str]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[str]:
        return iter(self.execute())
