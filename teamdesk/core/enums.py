from enum import Enum


class ApprovalStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    not_approved = "not-approved"


class ApprovalField(str, Enum):
    manager = "managerApprovalStatus"
    director = "directorApprovalStatus"


_NEXT_STATUS = {
    ApprovalStatus.pending: ApprovalStatus.approved,
    ApprovalStatus.approved: ApprovalStatus.not_approved,
    ApprovalStatus.not_approved: ApprovalStatus.pending,
}


def next_status(current) -> ApprovalStatus:
    """pending -> approved -> not-approved -> pending"""
    return _NEXT_STATUS[ApprovalStatus(current)]
