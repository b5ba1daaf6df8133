"""
View-model for the team list.

``TeamsStore`` keeps the team list behind an ``OptimisticList``: every mutator
applies its change locally, calls the API and either keeps the change or puts
the list back exactly as it was. Outcomes are reported through the
``on_success(title, description)`` / ``on_error(title, description)`` callbacks.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from teamdesk.client.api import Team, TeamsApi
from teamdesk.client.approval import ApprovalToggle
from teamdesk.client.optimistic import OptimisticList
from teamdesk.core.enums import ApprovalField, ApprovalStatus
from teamdesk.services.search import filter_teams

logger = logging.getLogger(__name__)

Notify = Callable[[str, str], None]


def _without_teams(ids: Iterable[str]):
    ids = set(ids)
    return lambda teams: [t for t in teams if t.get("_id") not in ids]


def _map_team(team_id: str, change):
    return lambda teams: [change(t) if t.get("_id") == team_id else t for t in teams]


def _reordered(submitted: List[Team]):
    def mutate(teams):
        ordered = [{**t, "order": i} for i, t in enumerate(submitted)]
        seen = {t.get("_id") for t in submitted}
        return ordered + [t for t in teams if t.get("_id") not in seen]

    return mutate


def _status_message(team_name: str, field: str, status: str) -> str:
    approval_type = "Manager" if field == ApprovalField.manager.value else "Director"
    if status == ApprovalStatus.approved.value:
        return f'Team "{team_name}" got {approval_type} Approval'
    if status == ApprovalStatus.not_approved.value:
        return f'Team "{team_name}" was Not Approved by {approval_type}'
    return f'Team "{team_name}" {approval_type} approval status reset to Pending'


class TeamsStore:
    def __init__(self, api: TeamsApi, on_success: Notify, on_error: Notify):
        self.api = api
        self.on_success = on_success
        self.on_error = on_error
        self.loading = False
        self.search_query = ""
        self._teams: OptimisticList[Team] = OptimisticList()

    @property
    def teams(self) -> List[Team]:
        return self._teams.view

    @property
    def filtered_teams(self) -> List[Team]:
        return filter_teams(self._teams.view, self.search_query)

    def set_search_query(self, query: str) -> None:
        self.search_query = query

    def find(self, team_id: str) -> Team | None:
        return next((t for t in self._teams.view if t.get("_id") == team_id), None)

    def _team_name(self, team_id: str, default: str) -> str:
        team = self.find(team_id)
        return (team or {}).get("teamName") or default

    async def fetch_teams(self) -> bool:
        self.loading = True
        try:
            self._teams.sync(await self.api.get_all())
        except Exception:
            logger.exception("Error loading teams")
            self.on_error(
                "Error Loading Teams",
                "Unable to fetch teams from the server. Please refresh the page.",
            )
            return False
        finally:
            self.loading = False
        return True

    async def delete_team(self, team_id: str) -> bool:
        name = self._team_name(team_id, "Team")

        outcome = await self._teams.update(
            _without_teams([team_id]), lambda: self.api.delete(team_id)
        )
        if not outcome.success:
            self.on_error("Error Deleting Team", f'Failed to delete "{name}". Please try again.')
            return False

        self.on_success("Team Deleted Successfully", f'"{name}" has been removed from the system.')
        return True

    async def bulk_delete_teams(self, ids: List[str]) -> bool:
        wanted = set(ids)
        names = ", ".join(t.get("teamName", "") for t in self._teams.view if t.get("_id") in wanted)

        outcome = await self._teams.update(
            _without_teams(ids), lambda: self.api.bulk_delete(list(ids))
        )
        if not outcome.success:
            self.on_error(
                "Error Deleting Teams", f"Failed to delete {len(ids)} team(s). Please try again."
            )
            return False

        self.on_success("Teams Deleted Successfully", f"{len(ids)} team(s) removed: {names}")
        return True

    async def update_team_status(self, team_id: str, field: str, status) -> bool:
        field = ApprovalField(field).value
        status = ApprovalStatus(status).value
        name = self._team_name(team_id, "team")

        outcome = await self._teams.update(
            _map_team(team_id, lambda t: {**t, field: status}),
            lambda: self.api.update_status(team_id, field, status),
        )
        if not outcome.success:
            self.on_error(
                "Error Updating Status",
                f'Failed to update approval status for "{name}". Please try again.',
            )
            return False

        self.on_success("Status Updated Successfully", _status_message(name, field, status))
        return True

    def status_toggle(self, team_id: str, field: str) -> ApprovalToggle:
        team = self.find(team_id) or {}
        current = team.get(ApprovalField(field).value) or ApprovalStatus.pending.value
        return ApprovalToggle(
            current, lambda status: self.update_team_status(team_id, field, status)
        )

    async def delete_member(self, team_id: str, member_id: str) -> bool:
        team = self.find(team_id) or {}
        members = team.get("members") or []
        member_name = next(
            (m.get("name") for m in members if m.get("_id") == member_id), None
        ) or "Member"
        team_name = team.get("teamName") or "team"

        if len(members) == 1:
            self.on_error(
                "Cannot Delete Last Member",
                f'Cannot remove the last member from "{team_name}". '
                "A team must have at least one member.",
            )
            return False

        outcome = await self._teams.update(
            _map_team(
                team_id,
                lambda t: {**t, "members": [m for m in t.get("members", []) if m.get("_id") != member_id]},
            ),
            lambda: self.api.delete_member(team_id, member_id),
        )
        if not outcome.success:
            self.on_error(
                "Error Removing Member",
                f'Failed to remove "{member_name}" from "{team_name}". Please try again.',
            )
            return False

        self.on_success(
            "Member Removed Successfully", f'"{member_name}" has been removed from "{team_name}".'
        )
        return True

    async def update_member(self, team_id: str, member_id: str, name: str) -> bool:
        team_name = self._team_name(team_id, "team")

        def rename(t):
            return {
                **t,
                "members": [
                    {**m, "name": name} if m.get("_id") == member_id else m
                    for m in t.get("members", [])
                ],
            }

        outcome = await self._teams.update(
            _map_team(team_id, rename),
            lambda: self.api.update_member(team_id, member_id, name),
        )
        if not outcome.success:
            self.on_error(
                "Error Updating Member", f'Failed to update member in "{team_name}". Please try again.'
            )
            return False

        self.on_success(
            "Member Updated Successfully", f'Member name changed to "{name}" in "{team_name}".'
        )
        return True

    async def reorder_teams(self, new_teams: List[Team]) -> bool:
        submitted = list(new_teams)

        outcome = await self._teams.update(
            _reordered(submitted), lambda: self.api.reorder(submitted)
        )
        if not outcome.success:
            self.on_error(
                "Error Reordering Teams", "Failed to save the new team order. Please try again."
            )
            return False

        self.on_success("Teams Reordered Successfully", "The new team order has been saved.")
        # pick up the order values the server assigned
        await self.fetch_teams()
        return True
