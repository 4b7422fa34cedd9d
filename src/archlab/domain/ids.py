"""Node id generation.

Ids are opaque strings, unique within a graph, assigned when a node is
added and never reused or changed afterwards.

INVARIANT: There is no process-wide counter. Callers own a generator and
pass it to :meth:`DomainGraph.add`, which keeps graph construction
reproducible in tests.
"""

from __future__ import annotations

import itertools
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """Anything that can hand out fresh node ids."""

    def next_id(self) -> str: ...


class CounterIds:
    """Monotonic ``{prefix}{n}`` ids, starting at *start*.

    >>> ids = CounterIds()
    >>> ids.next_id(), ids.next_id()
    ('node-1', 'node-2')
    """

    def __init__(self, prefix: str = "node-", *, start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return f"{self._prefix}{next(self._counter)}"


class UuidIds:
    """Random UUID4 ids."""

    def next_id(self) -> str:
        return str(uuid.uuid4())
