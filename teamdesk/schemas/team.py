from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from teamdesk.core.enums import ApprovalStatus
from teamdesk.models.common import PyObjectId, TeamdeskBaseModel


class CamelModel(TeamdeskBaseModel):
    # wire format is camelCase (teamName, managerApprovalStatus, ...)
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


class MemberIn(CamelModel):
    id: Optional[str] = Field(default=None, alias="_id")
    name: str = ""


class MemberOut(CamelModel):
    id: str = Field(alias="_id")
    name: str = ""


class TeamCreate(CamelModel):
    team_name: str = ""
    manager: str = ""
    director: str = ""
    members: List[MemberIn] = []


class TeamUpdate(CamelModel):
    team_name: Optional[str] = None
    manager: Optional[str] = None
    director: Optional[str] = None
    members: Optional[List[MemberIn]] = None
    manager_approval_status: Optional[ApprovalStatus] = None
    director_approval_status: Optional[ApprovalStatus] = None
    order: Optional[int] = None


class TeamOut(CamelModel):
    id: str = Field(alias="_id")
    team_name: str = ""
    manager: str = ""
    director: str = ""
    members: List[MemberOut] = []
    manager_approval_status: ApprovalStatus = ApprovalStatus.pending
    director_approval_status: ApprovalStatus = ApprovalStatus.pending
    order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TeamRef(TeamdeskBaseModel):
    """One entry of a reorder request; everything but the id is ignored."""

    id: PyObjectId = Field(alias="_id")


class ReorderRequest(TeamdeskBaseModel):
    teams: Optional[List[TeamRef]] = None


class BulkDeleteRequest(TeamdeskBaseModel):
    ids: Optional[List[str]] = None


class StatusPatch(TeamdeskBaseModel):
    field: Optional[str] = None
    status: Optional[str] = None


class MemberPatch(TeamdeskBaseModel):
    name: Optional[str] = None
