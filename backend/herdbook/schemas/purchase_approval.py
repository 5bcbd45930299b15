"""Purchase Approval Schemas — supervisor requests and the admin decision.

Invariants:
    - quantity > 0 on request and (when given) on decision
    - approval_status is never accepted from the request body on create/update
    - reject decisions require approver_remarks
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from herdbook.core.domain_types import ApprovalDecision, ApprovalStatus, ItemType
from herdbook.schemas.common import RecordIn, RecordOut


class PurchaseApprovalCreate(RecordIn):
    date: datetime.date
    item_type: ItemType
    item_requested: str = Field(min_length=1, max_length=200)
    quantity: float = Field(gt=0)
    requested_by: str = Field(min_length=1, max_length=120)
    requester_remarks: str | None = Field(None, max_length=2000)


class PurchaseDecision(BaseModel):
    """Admin verdict on a pending request."""
    model_config = ConfigDict(
        str_strip_whitespace=True, use_enum_values=True, validate_default=True,
    )

    decision: ApprovalDecision
    approved_by: str = Field(min_length=1, max_length=120)
    approver_remarks: str | None = Field(None, max_length=2000)
    quantity: float | None = Field(None, gt=0)

    @model_validator(mode="after")
    def validate_decision_fields(self):
        if self.decision == ApprovalDecision.REJECT and not self.approver_remarks:
            raise ValueError("reject decision requires approver_remarks")
        if self.decision == ApprovalDecision.REJECT and self.quantity is not None:
            raise ValueError("quantity can only be adjusted when approving")
        return self


class PurchaseApprovalResponse(RecordOut):
    id: int
    date: datetime.date
    item_type: ItemType
    item_requested: str
    quantity: float
    requested_by: str
    approval_status: ApprovalStatus
    approved_by: str | None = None
    requester_remarks: str | None = None
    approver_remarks: str | None = None


class ApprovalSummary(BaseModel):
    total_records: int
    pending: int
    approved: int
    rejected: int
