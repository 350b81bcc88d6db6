"""
Category repository: CRUD plus lookups by type and name.
"""
from typing import List

from sqlalchemy.orm import sessionmaker

from sample_mcp.models import Category
from sample_mcp.repositories.base import Repository


class CategoryRepository:
    """Category lookups on top of a generic Repository[Category]."""

    def __init__(self, session_factory: sessionmaker):
        self.base: Repository[Category] = Repository(Category, session_factory)

    def __getattr__(self, name):
        return getattr(self.base, name)

    def find_by_type(self, category_type: str) -> List[Category]:
        with self.base.session() as db:
            return db.query(Category).filter(Category.category_type == category_type).all()

    def find_by_name_like(self, keyword: str) -> List[Category]:
        with self.base.session() as db:
            return db.query(Category).filter(Category.name.ilike(f"%{keyword}%")).all()
