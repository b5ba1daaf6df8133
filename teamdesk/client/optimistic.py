from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class OptimisticResult:
    success: bool
    result: Any = None
    error: Optional[BaseException] = None


class OptimisticList(Generic[T]):
    """
    A list with a committed copy (``data``) and a presented copy (``view``).

    ``update`` presents a change before the server confirms it and restores the
    presented list to its exact prior value when the call fails. Each update
    snapshots whatever is presented when it starts, so overlapping updates that
    fail unwind in reverse order of issuance.
    """

    def __init__(self, items: Optional[List[T]] = None):
        self.data: List[T] = list(items or [])
        self.view: List[T] = list(self.data)

    def sync(self, items: List[T]) -> None:
        self.data = list(items)
        self.view = list(items)

    async def update(
        self,
        mutate: Callable[[List[T]], List[T]],
        call: Callable[[], Awaitable[Any]],
    ) -> OptimisticResult:
        previous = copy.deepcopy(self.view)
        new = mutate(self.view)
        self.view = new

        try:
            result = await call()
        except Exception as e:
            logger.warning("Optimistic update rolled back: %s", e)
            self.view = previous
            return OptimisticResult(False, error=e)

        self.data = new
        return OptimisticResult(True, result=result)
