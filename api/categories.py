import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.errors import DuplicateKeyError

from database import get_categories, get_subcategories
from services.auth_service import get_current_user
from services import catalog_service
from services.collection_gateway import CollectionGateway
from schemas.category import CategoryCreate, CategoryRead, CategoryUpdate, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])

@router.get("", response_model=list[CategoryRead])
async def list_categories(categories: CollectionGateway = Depends(get_categories)):
    try:
        return await categories.find_all()
    except Exception:
        logger.exception("Listing categories failed")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")

@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: str, categories: CollectionGateway = Depends(get_categories)):
    try:
        category = await categories.find_one(category_id)
    except Exception:
        logger.exception("Fetching category %s failed", category_id)
        raise HTTPException(status_code=500, detail="Failed to fetch category")

    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category

@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: Optional[CategoryCreate] = None,
    categories: CollectionGateway = Depends(get_categories),
    current_user = Depends(get_current_user),
):
    payload = payload or CategoryCreate()
    if not payload.name:
        raise HTTPException(status_code=400, detail="Category name required")

    try:
        return await catalog_service.create_category(categories, payload.model_dump(by_alias=True))
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Category name already exists")
    except Exception:
        logger.exception("Creating category failed")
        raise HTTPException(status_code=500, detail="Failed to create category")

@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: str,
    payload: Optional[CategoryUpdate] = None,
    categories: CollectionGateway = Depends(get_categories),
    current_user = Depends(get_current_user),
):
    fields = (payload or CategoryUpdate()).to_fields()
    if "name" in fields and not fields["name"]:
        raise HTTPException(status_code=400, detail="Category name cannot be empty")

    try:
        matched = await categories.update_fields(category_id, fields)
        updated = await categories.find_one(category_id) if matched else None
        if updated is None:
            raise HTTPException(status_code=404, detail="Category not found")
        return updated
    except HTTPException:
        raise
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Category name already exists")
    except Exception:
        logger.exception("Updating category %s failed", category_id)
        raise HTTPException(status_code=500, detail="Failed to update category")

@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: str,
    categories: CollectionGateway = Depends(get_categories),
    subcategories: CollectionGateway = Depends(get_subcategories),
    current_user = Depends(get_current_user),
):
    try:
        removed = await catalog_service.delete_category(categories, subcategories, category_id)
    except Exception:
        logger.exception("Deleting category %s failed", category_id)
        raise HTTPException(status_code=500, detail="Failed to delete category")

    if removed is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return {"message": "Category deleted successfully"}
