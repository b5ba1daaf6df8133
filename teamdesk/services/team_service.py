import logging
import uuid
from typing import Any, Dict, List, Optional

from bson import ObjectId

from teamdesk.core.enums import ApprovalField, ApprovalStatus
from teamdesk.repositories.team_repository import TeamRepository

logger = logging.getLogger(__name__)


class InvalidRequest(Exception):
    """Request is well-formed JSON but not an allowed change."""


def new_member_id() -> str:
    return uuid.uuid4().hex


def with_member_ids(members: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {"_id": m.get("_id") or new_member_id(), "name": m.get("name", "")}
        for m in members
    ]


class TeamService:
    def __init__(self, team_repo: TeamRepository):
        self.team_repo = team_repo

    async def list(self, search: Optional[str] = None):
        return await self.team_repo.list(search)

    async def get(self, team_id: str):
        return await self.team_repo.get(team_id)

    async def create(self, data: Dict[str, Any]) -> str:
        last = await self.team_repo.max_order()
        doc = {
            **data,
            "members": with_member_ids(data.get("members") or []),
            "managerApprovalStatus": ApprovalStatus.pending.value,
            "directorApprovalStatus": ApprovalStatus.pending.value,
            "order": 0 if last is None else last + 1,
        }
        team_id = await self.team_repo.create(doc)
        logger.info("Team created id=%s order=%s", team_id, doc["order"])
        return team_id

    async def update(self, team_id: str, data: Dict[str, Any]) -> bool:
        if "members" in data:
            data["members"] = with_member_ids(data["members"] or [])
        return await self.team_repo.update(team_id, data)

    async def update_status(self, team_id: str, field: Optional[str], status: Optional[str]) -> bool:
        if not field or not status:
            raise InvalidRequest("field and status are required")
        try:
            field = ApprovalField(field).value
            status = ApprovalStatus(status).value
        except ValueError as e:
            raise InvalidRequest(str(e)) from e
        return await self.team_repo.update(team_id, {field: status})

    async def delete(self, team_id: str) -> bool:
        return await self.team_repo.delete(team_id)

    async def bulk_delete(self, team_ids: List[str]) -> int:
        return await self.team_repo.delete_many(team_ids)

    async def reorder(self, team_oids: List[ObjectId]) -> None:
        await self.team_repo.reorder(team_oids)

    async def delete_member(self, team_id: str, member_id: str) -> bool:
        return await self.team_repo.pull_member(team_id, member_id)

    async def update_member(self, team_id: str, member_id: str, name: str) -> bool:
        return await self.team_repo.rename_member(team_id, member_id, name)
