"""
Append-only audit log of pool facts.

The engine appends one record per committed operation and never reads the
log back. Records are numbered from 0 in commit order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple, Union

from ..core.pool_v1.types import Effect, Event
from ..state.canonical import canonical_json_bytes

FactValue = Union[str, int]


@dataclass(frozen=True)
class PoolEvent:
    seq: int
    event: Event
    fields: Dict[str, FactValue] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {"seq": self.seq, "event": self.event.value, **self.fields}


class EventLog:
    """In-memory append-only event sink."""

    def __init__(self) -> None:
        self._records: List[PoolEvent] = []

    def append(self, effect: Effect) -> PoolEvent:
        record = PoolEvent(seq=len(self._records), event=effect.event, fields=effect.fact())
        self._records.append(record)
        return record

    def records(self) -> Tuple[PoolEvent, ...]:
        return tuple(self._records)

    def of_kind(self, event: Event) -> Tuple[PoolEvent, ...]:
        return tuple(r for r in self._records if r.event is event)

    def to_json_lines(self) -> str:
        """One canonical JSON object per line, in commit order."""
        return "".join(canonical_json_bytes(r.to_dict()).decode("utf-8") + "\n" for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PoolEvent]:
        return iter(tuple(self._records))
