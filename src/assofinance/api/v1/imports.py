"""Bank statement import endpoint."""

from fastapi import APIRouter, Depends

from assofinance.api.deps import get_import_service
from assofinance.schemas.statement_import import StatementImportRequest, StatementImportResult
from assofinance.services.statement_import import StatementImportService

router = APIRouter(prefix="/imports", tags=["imports"])


@router.post(
    "",
    response_model=StatementImportResult,
    summary="Import parsed bank statement rows",
    description="""
    Import statement rows into an account.

    Positive amounts become income, negative amounts expenses. Rows with an
    empty description or a zero amount are skipped. Categorization rules apply
    to every imported row.
    """,
    responses={
        400: {"description": "No usable rows"},
        404: {"description": "Account not found"},
    },
)
async def import_statement(
    payload: StatementImportRequest,
    service: StatementImportService = Depends(get_import_service),
) -> StatementImportResult:
    return await service.import_rows(payload.account_id, payload.rows)
