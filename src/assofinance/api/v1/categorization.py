"""Bulk categorization endpoint."""

from fastapi import APIRouter, Depends

from assofinance.api.deps import get_categorization_service
from assofinance.schemas.categorization import BulkApplyRequest, BulkApplyResult
from assofinance.services.categorization import CategorizationService

router = APIRouter(prefix="/categorization", tags=["categorization"])


@router.post(
    "/apply",
    response_model=BulkApplyResult,
    summary="Apply categorization rules to existing transactions",
    description="""
    Run the categorization rules over stored transactions.

    - Without **transaction_ids**: every transaction that has no category
    - With **transaction_ids**: exactly those transactions, even if already categorized

    Transactions without a description are skipped. A failed write skips that
    transaction only and is reported in **failed_count**.
    """,
    responses={503: {"description": "Rules or transactions could not be loaded"}},
)
async def apply_categorization(
    payload: BulkApplyRequest | None = None,
    service: CategorizationService = Depends(get_categorization_service),
) -> BulkApplyResult:
    target_ids = payload.transaction_ids if payload else None
    return await service.bulk_apply(target_ids)
