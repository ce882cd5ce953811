"""Account management endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from assofinance.api.deps import get_account_service
from assofinance.config import settings
from assofinance.schemas.account import (
    AccountCreateRequest,
    AccountListResult,
    AccountResponse,
    BalanceOverview,
)
from assofinance.schemas.common import MoneyMeta
from assofinance.services.account import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={400: {"description": "Empty name"}},
)
async def create_account(
    payload: AccountCreateRequest,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    account = await service.create_account(payload.name, payload.type)
    return AccountResponse.model_validate(account)


@router.get(
    "",
    response_model=AccountListResult,
    summary="List accounts",
    description="Accounts ordered from most recently created. Balances are in minor units.",
)
async def list_accounts(
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    limit: Annotated[int, Query(ge=1, le=100, description="Items per page (1-100)")] = 100,
    service: AccountService = Depends(get_account_service),
) -> AccountListResult:
    accounts = await service.list_accounts(skip=(page - 1) * limit, limit=limit)
    return AccountListResult(
        accounts=[AccountResponse.model_validate(a) for a in accounts],
        total=len(accounts),
        money=MoneyMeta(currency=settings.currency, minor_unit=settings.currency_minor_unit),
    )


@router.get(
    "/overview",
    response_model=BalanceOverview,
    summary="Total balance and balance per account type",
)
async def get_balance_overview(
    service: AccountService = Depends(get_account_service),
) -> BalanceOverview:
    total, by_type = await service.get_balance_overview()
    return BalanceOverview(
        total_balance=total,
        by_type=by_type,
        money=MoneyMeta(currency=settings.currency, minor_unit=settings.currency_minor_unit),
    )


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    summary="Get an account",
    responses={404: {"description": "Account not found"}},
)
async def get_account(
    account_id: UUID,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return AccountResponse.model_validate(await service.get_account(account_id))


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an account and its transactions",
    responses={404: {"description": "Account not found"}},
)
async def delete_account(
    account_id: UUID,
    service: AccountService = Depends(get_account_service),
) -> Response:
    await service.delete_account(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
