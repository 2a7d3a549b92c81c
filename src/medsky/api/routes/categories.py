"""Category listing for the field pickers."""

from fastapi import APIRouter

from medsky.data.categories import CATEGORIES, category_label
from medsky.models.responses import CategoryInfo, CategoryListResponse

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories():
    """List the medical fields case studies can be generated for."""
    categories = [
        CategoryInfo(key=key, label=category_label(key), title_prefix=definition.title_prefix)
        for key, definition in CATEGORIES.items()
    ]
    return CategoryListResponse(categories=categories, count=len(categories))
