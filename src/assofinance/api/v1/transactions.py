"""Transaction entry and query endpoints."""

from datetime import date
from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from assofinance.api.deps import get_transaction_service
from assofinance.config import settings
from assofinance.schemas.common import MoneyMeta, PaginationMeta
from assofinance.schemas.transaction import (
    TransactionCategoryRequest,
    TransactionCreateRequest,
    TransactionListResult,
    TransactionResponse,
    TransactionUpdateRequest,
)
from assofinance.services.transaction import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
    description="""
    Record an income or expense on an account.

    When no **category_id** is given and the description is not empty, the
    categorization rules for the transaction type are applied once before the
    transaction is stored. The account balance is updated.
    """,
    responses={
        400: {"description": "Category type does not match transaction type"},
        404: {"description": "Account or category not found"},
    },
)
async def create_transaction(
    payload: TransactionCreateRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    txn = await service.create_transaction(
        account_id=payload.account_id,
        amount=payload.amount,
        transaction_type=payload.type,
        transaction_date=payload.transaction_date,
        description=payload.description,
        category_id=payload.category_id,
    )
    return TransactionResponse.model_validate(txn)


@router.get(
    "",
    response_model=TransactionListResult,
    summary="List transactions with filters",
    description="""
    Query transactions, newest first.

    ## Filters
    - **account_id**: Filter by account
    - **type**: income or expense
    - **category_id**: Filter by category
    - **uncategorized**: Only transactions without a category (overrides category_id)
    - **start_date**, **end_date**: Date range filter (inclusive)
    """,
)
async def list_transactions(
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    limit: Annotated[int | None, Query(ge=1, le=500, description="Items per page")] = None,
    account_id: Annotated[UUID | None, Query(description="Filter by account ID")] = None,
    type: Annotated[
        Literal["income", "expense"] | None, Query(description="Filter by transaction type")
    ] = None,
    category_id: Annotated[UUID | None, Query(description="Filter by category ID")] = None,
    uncategorized: Annotated[
        bool, Query(description="Only transactions without a category")
    ] = False,
    start_date: Annotated[date | None, Query(description="Filter from date (inclusive)")] = None,
    end_date: Annotated[date | None, Query(description="Filter to date (inclusive)")] = None,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionListResult:
    limit = limit or settings.transactions_page_limit
    rows, total = await service.list_transactions(
        page,
        limit,
        account_id=account_id,
        transaction_type=type,
        category_id=category_id,
        uncategorized=uncategorized,
        start_date=start_date,
        end_date=end_date,
    )

    total_pages = (total + limit - 1) // limit if total > 0 else 0
    return TransactionListResult(
        transactions=[
            TransactionResponse.model_validate(txn).model_copy(
                update={"account_name": account_name, "category_name": category_name}
            )
            for txn, account_name, category_name in rows
        ],
        pagination=PaginationMeta(page=page, limit=limit, total=total, total_pages=total_pages),
        money=MoneyMeta(currency=settings.currency, minor_unit=settings.currency_minor_unit),
    )


@router.patch(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Edit a transaction",
    description="Partial update. Categorization rules are not re-run on edit.",
    responses={
        400: {"description": "Category type does not match transaction type"},
        404: {"description": "Transaction, account or category not found"},
    },
)
async def update_transaction(
    transaction_id: UUID,
    payload: TransactionUpdateRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    txn = await service.update_transaction(
        transaction_id, payload.model_dump(exclude_unset=True)
    )
    return TransactionResponse.model_validate(txn)


@router.put(
    "/{transaction_id}/category",
    response_model=TransactionResponse,
    summary="Set or clear a transaction's category",
    responses={
        400: {"description": "Category type does not match transaction type"},
        404: {"description": "Transaction or category not found"},
    },
)
async def set_transaction_category(
    transaction_id: UUID,
    payload: TransactionCategoryRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    txn = await service.set_category(transaction_id, payload.category_id)
    return TransactionResponse.model_validate(txn)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def delete_transaction(
    transaction_id: UUID,
    service: TransactionService = Depends(get_transaction_service),
) -> Response:
    await service.delete_transaction(transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
