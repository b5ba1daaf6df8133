import logging

from fastapi import APIRouter, Depends, HTTPException

from teamdesk.db.mongo import get_teams_collection
from teamdesk.repositories.team_repository import TeamRepository
from teamdesk.schemas.team import (
    BulkDeleteRequest,
    MemberPatch,
    ReorderRequest,
    StatusPatch,
    TeamCreate,
    TeamOut,
    TeamUpdate,
)
from teamdesk.services.team_service import InvalidRequest, TeamService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teams", tags=["Teams"])


def get_team_service(col=Depends(get_teams_collection)) -> TeamService:
    return TeamService(TeamRepository(col))


# ========================
# LIST / CREATE
# ========================
@router.get("", response_model=list[TeamOut])
async def list_teams(search: str | None = None, svc: TeamService = Depends(get_team_service)):
    try:
        return await svc.list(search)
    except Exception:
        logger.exception("Error fetching teams (search=%r)", search)
        raise HTTPException(500, "Failed to fetch teams")


@router.post("")
async def create_team(data: TeamCreate, svc: TeamService = Depends(get_team_service)):
    try:
        team_id = await svc.create(data.model_dump(by_alias=True, mode="json"))
    except Exception:
        logger.exception("Error creating team")
        raise HTTPException(500, "Failed to create team")

    return {"success": True, "id": team_id, "message": "Team created successfully"}


# ========================
# BULK OPERATIONS
# ========================
@router.post("/bulk-delete")
async def bulk_delete_teams(body: BulkDeleteRequest, svc: TeamService = Depends(get_team_service)):
    if not body.ids:
        raise HTTPException(400, "Invalid team IDs")

    try:
        deleted = await svc.bulk_delete(body.ids)
    except Exception:
        logger.exception("Error bulk deleting teams")
        raise HTTPException(500, "Failed to delete teams")

    logger.info("Bulk delete removed %d of %d team(s)", deleted, len(body.ids))
    return {
        "success": True,
        "deletedCount": deleted,
        "message": f"{deleted} team(s) deleted successfully",
    }


@router.post("/reorder")
async def reorder_teams(body: ReorderRequest, svc: TeamService = Depends(get_team_service)):
    if body.teams is None:
        raise HTTPException(400, "Invalid request")

    try:
        await svc.reorder([t.id for t in body.teams])
    except Exception:
        logger.exception("Error reordering teams")
        raise HTTPException(500, "Failed to reorder teams")

    return {"success": True, "message": "Team order updated successfully"}


# ========================
# SINGLE TEAM
# ========================
@router.get("/{team_id}", response_model=TeamOut)
async def get_team(team_id: str, svc: TeamService = Depends(get_team_service)):
    try:
        team = await svc.get(team_id)
    except Exception:
        logger.exception("Error fetching team %s", team_id)
        raise HTTPException(500, "Failed to fetch team")

    if not team:
        raise HTTPException(404, "Team not found")
    return team


@router.put("/{team_id}")
async def replace_team(team_id: str, body: TeamUpdate, svc: TeamService = Depends(get_team_service)):
    updates = body.model_dump(by_alias=True, exclude_unset=True, exclude_none=True, mode="json")

    try:
        found = await svc.update(team_id, updates)
    except Exception:
        logger.exception("Error updating team %s", team_id)
        raise HTTPException(500, "Failed to update team")

    if not found:
        raise HTTPException(404, "Team not found")
    return {"success": True, "message": "Team updated successfully"}


@router.delete("/{team_id}")
async def delete_team(team_id: str, svc: TeamService = Depends(get_team_service)):
    try:
        deleted = await svc.delete(team_id)
    except Exception:
        logger.exception("Error deleting team %s", team_id)
        raise HTTPException(500, "Failed to delete team")

    if not deleted:
        raise HTTPException(404, "Team not found")

    logger.info("Team deleted id=%s", team_id)
    return {"success": True, "message": "Team deleted successfully"}


@router.patch("/{team_id}/status")
async def update_team_status(team_id: str, body: StatusPatch, svc: TeamService = Depends(get_team_service)):
    try:
        found = await svc.update_status(team_id, body.field, body.status)
    except InvalidRequest:
        raise HTTPException(400, "Invalid request")
    except Exception:
        logger.exception("Error updating status of team %s", team_id)
        raise HTTPException(500, "Failed to update status")

    if not found:
        raise HTTPException(404, "Team not found")
    return {"success": True, "message": "Team Status Saved"}


# ========================
# MEMBERS
# ========================
@router.delete("/{team_id}/members/{member_id}")
async def delete_member(team_id: str, member_id: str, svc: TeamService = Depends(get_team_service)):
    try:
        found = await svc.delete_member(team_id, member_id)
    except Exception:
        logger.exception("Error deleting member %s of team %s", member_id, team_id)
        raise HTTPException(500, "Failed to delete member")

    if not found:
        raise HTTPException(404, "Team not found")
    return {"success": True, "message": "Member deleted successfully"}


@router.patch("/{team_id}/members/{member_id}")
async def update_member(
    team_id: str,
    member_id: str,
    body: MemberPatch,
    svc: TeamService = Depends(get_team_service),
):
    if body.name is None:
        raise HTTPException(400, "Invalid request")

    try:
        found = await svc.update_member(team_id, member_id, body.name)
    except Exception:
        logger.exception("Error updating member %s of team %s", member_id, team_id)
        raise HTTPException(500, "Failed to update member")

    if not found:
        raise HTTPException(404, "Team or member not found")
    return {"success": True, "message": "Member updated successfully"}
