"""Item API endpoints"""

import re

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from starlette.datastructures import UploadFile as StarletteUploadFile
from typing import Optional, Tuple, Union

from ..schemas.item import ItemCreatedResponse, ItemListResponse, ItemResponse
from ..services.image_store import ImageStore
from ..services.item_repository import ItemRepository
from ..utils.dependencies import get_image_store, get_item_repository
from ..utils.logging import get_logger
from ..utils.metrics import record_item_created

logger = get_logger(__name__)

router = APIRouter()

ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def parse_id(value: str) -> Optional[int]:
    """Parse a signed 64-bit decimal id; None if malformed or out of range"""
    if not ID_PATTERN.fullmatch(value):
        return None
    parsed = int(value)
    if parsed < MIN_ID or parsed > MAX_ID:
        return None
    return parsed


def resolve_category(
    repo: ItemRepository,
    category: str,
    category_id: Optional[str]
) -> Tuple[str, Optional[int]]:
    """
    Work out the category text and id an item is stored with

    A non-empty category_id wins over free text and must name an
    existing category.

    Raises:
        HTTPException: 400 if category_id is malformed or unknown
    """
    if category_id is None or category_id == "":
        return category, None

    parsed_id = parse_id(category_id)
    if parsed_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid category_id"
        )

    existing = repo.get_category(parsed_id)
    if existing is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category not found"
        )

    return existing.name, existing.id


@router.post("", response_model=ItemCreatedResponse)
def add_item(
    name: str = Form(""),
    category: str = Form(""),
    category_id: Optional[str] = Form(None),
    image: Union[UploadFile, str, None] = File(None),
    repo: ItemRepository = Depends(get_item_repository),
    images: ImageStore = Depends(get_image_store)
):
    """Upload a new item with its image"""

    # A plain text "image" field is treated as a missing file
    if not isinstance(image, StarletteUploadFile):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Image file is required"
        )

    category_name, resolved_id = resolve_category(repo, category, category_id)

    image_name = images.save_file(image.file)
    item = repo.add_item(name, category_name, image_name, category_id=resolved_id)

    logger.info(
        "Item received",
        item_id=item.id,
        name=item.name,
        category=item.category,
        image_name=item.image_name
    )
    record_item_created("category_id" if resolved_id is not None else "text")

    return ItemCreatedResponse(
        message=f"item received: {item.name}",
        **item.model_dump()
    )


@router.get("", response_model=ItemListResponse)
def list_items(repo: ItemRepository = Depends(get_item_repository)):
    """List all items"""

    return ItemListResponse(items=repo.list_items())


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(item_id: str, repo: ItemRepository = Depends(get_item_repository)):
    """Get a specific item"""

    parsed_id = parse_id(item_id)
    if parsed_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid ID format"
        )

    item = repo.get_item(parsed_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )

    return item
