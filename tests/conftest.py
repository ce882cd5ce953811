import os

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from assofinance.db.session import get_db
from assofinance.main import app

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")

if TEST_DATABASE_URL.startswith("sqlite"):
    # One shared connection keeps the in-memory database alive between sessions.
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)

TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def setup_database():
    """Create tables for tests that need the database, and drop them after.

    Not autouse, so pure unit tests run without touching the database.
    """
    import assofinance.models  # noqa: F401
    from assofinance.models.base import BaseModel

    async with test_engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)


@pytest.fixture
async def db_session(setup_database):
    """Provide test database session with fresh connection per test."""
    async with TestSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session: AsyncSession):
    """Provide test client with database override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def bank_account(db_session: AsyncSession):
    """A bank account with no transactions."""
    from assofinance.models.account import Account
    from assofinance.repositories.account import AccountRepository

    return await AccountRepository(db_session).create(Account(name="Compte courant", type="bank"))


@pytest.fixture
async def categories(db_session: AsyncSession) -> dict:
    """Expense and income categories keyed by short name."""
    from assofinance.models.category import Category
    from assofinance.repositories.category import CategoryRepository

    repo = CategoryRepository(db_session)
    return {
        "food": await repo.create(Category(name="Alimentation", type="expense")),
        "bank_fees": await repo.create(Category(name="Frais bancaires", type="expense")),
        "supplies": await repo.create(Category(name="Fournitures", type="expense")),
        "dues": await repo.create(Category(name="Cotisations", type="income")),
    }


@pytest.fixture
async def rules(db_session: AsyncSession, categories: dict) -> dict:
    """Rules covering the usual association statement lines."""
    from assofinance.models.categorization_rule import CategorizationRule
    from assofinance.repositories.rule import RuleRepository

    repo = RuleRepository(db_session)
    return {
        "food": await repo.create(
            CategorizationRule(
                category_id=categories["food"].id,
                keywords=["supermarché", "courses", "alimentation"],
                transaction_type="expense",
                priority=1,
            )
        ),
        "bank_fees": await repo.create(
            CategorizationRule(
                category_id=categories["bank_fees"].id,
                keywords=["frais", "commission", "paiement par carte"],
                transaction_type="expense",
                priority=5,
            )
        ),
        "dues": await repo.create(
            CategorizationRule(
                category_id=categories["dues"].id,
                keywords=["cotisation", "adhésion"],
                transaction_type="income",
                priority=1,
            )
        ),
    }
