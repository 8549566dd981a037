"""Category API endpoints"""

from fastapi import APIRouter, Depends, Form, HTTPException, status

from ..schemas.category import CategoryCreatedResponse, CategoryListResponse
from ..services.item_repository import ItemRepository
from ..utils.dependencies import get_item_repository
from ..utils.logging import get_logger
from ..utils.metrics import record_category_created

logger = get_logger(__name__)

router = APIRouter()


@router.post("", response_model=CategoryCreatedResponse)
def add_category(
    name: str = Form(""),
    repo: ItemRepository = Depends(get_item_repository)
):
    """Create a category; duplicate names create separate rows"""

    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category name is required"
        )

    category = repo.add_category(name)
    logger.info("Category received", category_id=category.id, name=category.name)
    record_category_created()

    return CategoryCreatedResponse(
        message=f"category received: {category.name}",
        **category.model_dump()
    )


@router.get("", response_model=CategoryListResponse)
def list_categories(repo: ItemRepository = Depends(get_item_repository)):
    """List all categories"""

    return CategoryListResponse(categories=repo.list_categories())
