import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo.errors import DuplicateKeyError

from database import get_categories, get_subcategories
from services.auth_service import get_current_user
from services import catalog_service
from services.catalog_service import ParentCategoryNotFound
from services.collection_gateway import CollectionGateway
from schemas.category import MessageResponse
from schemas.subcategory import SubcategoryCreate, SubcategoryRead, SubcategoryUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subcategories", tags=["Subcategories"])

@router.get("", response_model=list[SubcategoryRead])
async def list_subcategories(
    category_id: Optional[str] = Query(None, alias="categoryId"),
    subcategories: CollectionGateway = Depends(get_subcategories),
):
    query = {"categoryId": category_id} if category_id else {}
    try:
        return await subcategories.find_all(query)
    except Exception:
        logger.exception("Listing subcategories failed")
        raise HTTPException(status_code=500, detail="Failed to fetch subcategories")

@router.get("/{subcategory_id}", response_model=SubcategoryRead)
async def get_subcategory(subcategory_id: str, subcategories: CollectionGateway = Depends(get_subcategories)):
    try:
        subcategory = await subcategories.find_one(subcategory_id)
    except Exception:
        logger.exception("Fetching subcategory %s failed", subcategory_id)
        raise HTTPException(status_code=500, detail="Failed to fetch subcategory")

    if subcategory is None:
        raise HTTPException(status_code=404, detail="Subcategory not found")
    return subcategory

@router.post("", response_model=SubcategoryRead, status_code=status.HTTP_201_CREATED)
async def create_subcategory(
    payload: Optional[SubcategoryCreate] = None,
    categories: CollectionGateway = Depends(get_categories),
    subcategories: CollectionGateway = Depends(get_subcategories),
    current_user = Depends(get_current_user),
):
    payload = payload or SubcategoryCreate()
    if not payload.name:
        raise HTTPException(status_code=400, detail="Subcategory name required")
    if not payload.category_id:
        raise HTTPException(status_code=400, detail="Category ID required")

    try:
        return await catalog_service.create_subcategory(
            categories, subcategories, payload.model_dump(by_alias=True)
        )
    except ParentCategoryNotFound:
        raise HTTPException(status_code=400, detail="Parent category not found")
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Subcategory name already exists")
    except Exception:
        logger.exception("Creating subcategory failed")
        raise HTTPException(status_code=500, detail="Failed to create subcategory")

@router.put("/{subcategory_id}", response_model=SubcategoryRead)
async def update_subcategory(
    subcategory_id: str,
    payload: Optional[SubcategoryUpdate] = None,
    categories: CollectionGateway = Depends(get_categories),
    subcategories: CollectionGateway = Depends(get_subcategories),
    current_user = Depends(get_current_user),
):
    fields = (payload or SubcategoryUpdate()).to_fields()
    if "name" in fields and not fields["name"]:
        raise HTTPException(status_code=400, detail="Subcategory name cannot be empty")

    try:
        matched = await catalog_service.update_subcategory(
            categories, subcategories, subcategory_id, fields
        )
        updated = await subcategories.find_one(subcategory_id) if matched else None
        if updated is None:
            raise HTTPException(status_code=404, detail="Subcategory not found")
        return updated
    except HTTPException:
        raise
    except ParentCategoryNotFound:
        raise HTTPException(status_code=400, detail="Parent category not found")
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Subcategory name already exists")
    except Exception:
        logger.exception("Updating subcategory %s failed", subcategory_id)
        raise HTTPException(status_code=500, detail="Failed to update subcategory")

@router.delete("/{subcategory_id}", response_model=MessageResponse)
async def delete_subcategory(
    subcategory_id: str,
    subcategories: CollectionGateway = Depends(get_subcategories),
    current_user = Depends(get_current_user),
):
    try:
        deleted = await subcategories.delete_one(subcategory_id)
    except Exception:
        logger.exception("Deleting subcategory %s failed", subcategory_id)
        raise HTTPException(status_code=500, detail="Failed to delete subcategory")

    if not deleted:
        raise HTTPException(status_code=404, detail="Subcategory not found")
    return {"message": "Subcategory deleted successfully"}
