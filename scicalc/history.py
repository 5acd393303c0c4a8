"""Bounded history of successful evaluations, newest first."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, List

DEFAULT_HISTORY_LIMIT = 40


@dataclass(frozen=True)
class HistoryEntry:
    expression: str
    result: str

    def to_dict(self) -> dict:
        return {"expression": self.expression, "result": self.result}


class History:
    """Newest-first list of past evaluations, bounded to ``limit`` entries."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self._entries: deque = deque(maxlen=limit)

    def add(self, expression: str, result: str) -> HistoryEntry:
        entry = HistoryEntry(expression=expression, result=result)
        # appendleft on a full deque drops the oldest entry from the right.
        self._entries.appendleft(entry)
        return entry

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]
