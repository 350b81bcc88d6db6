"""
Category tools for the MCP server.
"""
from typing import Optional

from sample_mcp.errors import NotFoundError
from sample_mcp.mcp.dependencies import get_query_ops
from sample_mcp.models import Category
from sample_mcp.schemas import CategoryResponse


def category_to_dict(category: Category) -> dict:
    return CategoryResponse.model_validate(category).model_dump(mode="json")


def get_category(category_id: int) -> dict | None:
    """
    Get a single category by ID.

    Returns:
        Category dictionary or None if not found
    """
    try:
        category = get_query_ops().get_category_by_id(category_id)
    except NotFoundError:
        return None
    return category_to_dict(category)


def list_categories(category_type: Optional[str] = None) -> list[dict]:
    """
    List categories, optionally only those of one type (e.g. EXPENSE, INCOME).
    """
    query_ops = get_query_ops()
    if category_type:
        categories = query_ops.get_categories_by_type(category_type)
    else:
        categories = query_ops.get_all_categories()
    return [category_to_dict(c) for c in categories]


def search_categories(keyword: str) -> list[dict]:
    return [category_to_dict(c) for c in get_query_ops().search_categories(keyword)]
