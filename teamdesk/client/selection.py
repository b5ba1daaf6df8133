from typing import Iterable, Set


class TeamSelection:
    """Ids of the teams currently checked in the list."""

    def __init__(self):
        self.selected: Set[str] = set()

    def toggle(self, team_id: str, checked: bool) -> None:
        if checked:
            self.selected.add(team_id)
        else:
            self.selected.discard(team_id)

    def select_all(self, ids: Iterable[str]) -> None:
        self.selected = set(ids)

    def clear(self) -> None:
        self.selected = set()

    def is_selected(self, team_id: str) -> bool:
        return team_id in self.selected

    def all_selected(self, ids: Iterable[str]) -> bool:
        ids = set(ids)
        return bool(ids) and ids <= self.selected

    def __len__(self) -> int:
        return len(self.selected)
