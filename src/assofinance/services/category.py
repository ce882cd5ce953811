"""Category service."""
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.core.exceptions import NotFoundError, ValidationError
from assofinance.models.category import Category
from assofinance.repositories.category import CategoryRepository


class CategoryService:
    """Service layer for category management."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.category_repo = CategoryRepository(db)

    async def create_category(self, name: str, category_type: str) -> Category:
        name = (name or "").strip()
        if not name:
            raise ValidationError("VAL_004", {"field": "name"})
        return await self.category_repo.create(Category(name=name, type=category_type))

    async def list_categories(self, category_type: str | None = None) -> list[Category]:
        return await self.category_repo.get_all_by_name(category_type)

    async def get_category(self, category_id: UUID) -> Category:
        category = await self.category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("API_002", {"category_id": str(category_id)})
        return category

    async def delete_category(self, category_id: UUID) -> None:
        """Delete a category; its transactions become uncategorized and its rules go away."""
        if not await self.category_repo.delete_with_references(category_id):
            raise NotFoundError("API_002", {"category_id": str(category_id)})
