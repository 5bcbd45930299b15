"""Purchase Approvals — supervisor requests and the admin approve/reject decision.

Invariants:
    - New requests always start Pending, whatever the body says
    - Only Pending requests can be edited or decided (400 APPROVAL_ALREADY_DECIDED)
    - A decision sets approval_status, approved_by, approver_remarks atomically
    - Approving may adjust the quantity; rejecting never does
    - Delete is allowed in any state

Design Decisions:
    - Decision as PATCH on a sub-resource: the edit form and the admin verdict
      are different actors with different bodies
"""

import datetime
import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.core.domain_types import ApprovalDecision, ApprovalStatus, ItemType
from herdbook.core.errors import ApprovalAlreadyDecidedError
from herdbook.core.formatting import (
    approval_status_label, format_created_at, format_display_date,
)
from herdbook.core.summaries import summarize_approvals
from herdbook.infrastructure.database import get_db
from herdbook.models.purchase_approval import PurchaseApproval
from herdbook.schemas.purchase_approval import (
    ApprovalSummary, PurchaseApprovalCreate, PurchaseApprovalResponse, PurchaseDecision,
)
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/purchase-approvals", tags=["purchase-approvals"])

store = RecordStore(
    PurchaseApproval, "PurchaseApproval",
    key=PurchaseApproval.id,
    search_columns=(
        PurchaseApproval.item_type,
        PurchaseApproval.item_requested,
        PurchaseApproval.requested_by,
        PurchaseApproval.approved_by,
    ),
    date_column=PurchaseApproval.date,
)

EXPORT_COLUMNS = (
    ExportColumn("Date", "date", format_display_date),
    ExportColumn("Item Type", "item_type"),
    ExportColumn("Item Requested", "item_requested"),
    ExportColumn("Quantity", "quantity"),
    ExportColumn("Requested By", "requested_by"),
    ExportColumn("Requester Remarks", "requester_remarks"),
    ExportColumn("Status", "approval_status", approval_status_label),
    ExportColumn("Approved By", "approved_by"),
    ExportColumn("Approver Remarks", "approver_remarks"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(approval_status: ApprovalStatus | None, item_type: ItemType | None) -> list:
    conditions = []
    if approval_status is not None:
        conditions.append(PurchaseApproval.approval_status == approval_status.value)
    if item_type is not None:
        conditions.append(PurchaseApproval.item_type == item_type.value)
    return conditions


async def _get_pending(db: AsyncSession, approval_id: int) -> PurchaseApproval:
    approval = await store.get(db, approval_id)
    if approval.approval_status != ApprovalStatus.PENDING.value:
        raise ApprovalAlreadyDecidedError(approval_id, approval.approval_status)
    return approval


@router.get("", response_model=list[PurchaseApprovalResponse])
async def list_purchase_approvals(
    filters: ListFilters = Depends(list_filters),
    approval_status: ApprovalStatus | None = Query(None),
    item_type: ItemType | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters, *_conditions(approval_status, item_type))


@router.post(
    "", response_model=PurchaseApprovalResponse, status_code=status.HTTP_201_CREATED,
)
async def create_purchase_approval(
    body: PurchaseApprovalCreate, db: AsyncSession = Depends(get_db),
):
    values = body.model_dump()
    values["approval_status"] = ApprovalStatus.PENDING.value
    return await store.create(db, values)


@router.get("/summary", response_model=ApprovalSummary)
async def purchase_approval_summary(
    filters: ListFilters = Depends(export_filters),
    item_type: ItemType | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Counts per status for the filtered requests."""
    rows = await store.list_records(db, filters, *_conditions(None, item_type))
    return ApprovalSummary(**summarize_approvals(rows))


@router.get("/export")
async def export_purchase_approvals(
    filters: ListFilters = Depends(export_filters),
    approval_status: ApprovalStatus | None = Query(None),
    item_type: ItemType | None = Query(None),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(approval_status, item_type))
    return spreadsheet_response(
        fmt, "purchase_approvals", "Purchase Approvals", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{approval_id}", response_model=PurchaseApprovalResponse)
async def get_purchase_approval(approval_id: int, db: AsyncSession = Depends(get_db)):
    return await store.get(db, approval_id)


@router.put("/{approval_id}", response_model=PurchaseApprovalResponse)
async def update_purchase_approval(
    approval_id: int, body: PurchaseApprovalCreate, db: AsyncSession = Depends(get_db),
):
    """Edit a request that is still Pending."""
    approval = await _get_pending(db, approval_id)
    return await store.update(db, approval, body.model_dump())


@router.patch("/{approval_id}/decision", response_model=PurchaseApprovalResponse)
async def decide_purchase_approval(
    approval_id: int, body: PurchaseDecision, db: AsyncSession = Depends(get_db),
):
    """Approve or reject a Pending request."""
    approval = await _get_pending(db, approval_id)
    approved = body.decision == ApprovalDecision.APPROVE.value
    values = {
        "approval_status": (
            ApprovalStatus.APPROVED.value if approved else ApprovalStatus.REJECTED.value
        ),
        "approved_by": body.approved_by,
        "approver_remarks": body.approver_remarks,
    }
    if approved and body.quantity is not None:
        values["quantity"] = body.quantity
    approval = await store.update(db, approval, values)
    logger.info(
        f"Purchase request {approval_id} {approval_status_label(approval.approval_status)}",
        extra={"resource": "PurchaseApproval", "record_id": str(approval_id)},
    )
    return approval


@router.delete("/{approval_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_purchase_approval(approval_id: int, db: AsyncSession = Depends(get_db)):
    approval = await store.get(db, approval_id)
    await store.delete(db, approval)
