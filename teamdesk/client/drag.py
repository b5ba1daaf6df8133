from typing import List, Optional

from teamdesk.client.api import Team


class TeamDrag:
    """
    Drag-to-reorder over the store's visible list.

    ``items`` is the working copy shown while dragging; ``end`` hands it to
    ``TeamsStore.reorder_teams``.
    """

    def __init__(self, store):
        self.store = store
        self.dragged_index: Optional[int] = None
        self.items: List[Team] = []

    @property
    def dragging(self) -> bool:
        return self.dragged_index is not None

    def start(self, index: int) -> None:
        self.items = list(self.store.filtered_teams)
        self.dragged_index = index

    def over(self, index: int) -> None:
        if self.dragged_index is None or self.dragged_index == index:
            return

        dragged = self.items.pop(self.dragged_index)
        self.items.insert(index, dragged)
        self.dragged_index = index

    async def end(self) -> bool:
        if self.dragged_index is None:
            return False

        try:
            return await self.store.reorder_teams(self.items)
        finally:
            self.dragged_index = None
            self.items = []
