"""Categorization rule endpoints.

Rules cannot be edited: delete and recreate instead.
"""

from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from assofinance.api.deps import get_rule_service
from assofinance.schemas.rule import RuleCreateRequest, RuleListResult, RuleResponse
from assofinance.services.rule import RuleService

router = APIRouter(prefix="/rules", tags=["rules"])


@router.post(
    "",
    response_model=RuleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a categorization rule",
    description="""
    Create a keyword rule.

    - **keywords**: list or comma-separated string; trimmed and lowercased
    - **transaction_type**: the category must have the same type
    - **priority**: 1-10, higher priorities are evaluated first
    """,
    responses={
        400: {"description": "No keywords or category type mismatch"},
        404: {"description": "Category not found"},
    },
)
async def create_rule(
    payload: RuleCreateRequest,
    service: RuleService = Depends(get_rule_service),
) -> RuleResponse:
    rule, category_name = await service.create_rule(
        category_id=payload.category_id,
        keywords=payload.keywords,
        transaction_type=payload.transaction_type,
        priority=payload.priority,
    )
    return RuleResponse.model_validate(rule).model_copy(update={"category_name": category_name})


@router.get(
    "",
    response_model=RuleListResult,
    summary="List rules in evaluation order",
)
async def list_rules(
    transaction_type: Annotated[
        Literal["income", "expense"] | None,
        Query(description="Only rules for this transaction type"),
    ] = None,
    service: RuleService = Depends(get_rule_service),
) -> RuleListResult:
    rows = await service.list_rules(transaction_type)
    return RuleListResult(
        rules=[
            RuleResponse.model_validate(rule).model_copy(update={"category_name": name})
            for rule, name in rows
        ],
        total=len(rows),
    )


@router.delete(
    "/{rule_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a rule",
    responses={404: {"description": "Rule not found"}},
)
async def delete_rule(
    rule_id: UUID,
    service: RuleService = Depends(get_rule_service),
) -> Response:
    await service.delete_rule(rule_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
