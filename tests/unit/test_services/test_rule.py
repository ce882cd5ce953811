"""Unit tests for RuleService."""

import json
import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.api.middleware.logging import JSONLogFormatter
from assofinance.core.exceptions import NotFoundError, ValidationError
from assofinance.services.rule import RuleService


@pytest.fixture
def service():
    svc = RuleService(AsyncMock(spec=AsyncSession))
    svc.category_repo = AsyncMock()
    svc.category_repo.get_by_id = AsyncMock(
        return_value=SimpleNamespace(id=uuid4(), name="Alimentation", type="expense")
    )
    svc.rule_repo = AsyncMock()
    svc.rule_repo.create = AsyncMock(side_effect=lambda rule: rule)
    return svc


class TestCreateRule:
    @pytest.mark.asyncio
    async def test_stores_normalized_keywords(self, service):
        rule, category_name = await service.create_rule(
            uuid4(), "Supermarché, COURSES", "expense", priority=4
        )

        assert rule.keywords == ["supermarché", "courses"]
        assert rule.priority == 4
        assert category_name == "Alimentation"

    @pytest.mark.asyncio
    async def test_empty_keywords(self, service):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_rule(uuid4(), " , ", "expense")

        assert exc_info.value.error_code == "VAL_002"
        service.rule_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_category(self, service):
        service.category_repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError):
            await service.create_rule(uuid4(), "courses", "expense")

    @pytest.mark.asyncio
    async def test_creation_log_keeps_structured_fields(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="assofinance.services.rule"):
            await service.create_rule(uuid4(), "courses, marché", "expense", priority=7)

        record = next(r for r in caplog.records if r.getMessage() == "Categorization rule created")
        payload = json.loads(JSONLogFormatter().format(record))

        assert payload["keywords_count"] == 2
        assert payload["priority"] == 7
        assert "rule_id" in payload
