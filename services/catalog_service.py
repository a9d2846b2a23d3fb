import logging
from typing import Optional

from services.collection_gateway import CollectionGateway, to_object_id, utcnow

logger = logging.getLogger(__name__)


class ParentCategoryNotFound(Exception):
    """Raised when a subcategory points at a category that does not exist."""

    def __init__(self, category_id):
        super().__init__(f"Parent category {category_id!r} not found")
        self.category_id = category_id


def new_document(fields: dict) -> dict:
    now = utcnow()
    return {**fields, "createdAt": now, "updatedAt": now}


async def ensure_category_exists(categories: CollectionGateway, category_id) -> dict:
    # Check-then-act: a concurrent category delete can still slip in before the write.
    category = await categories.find_one(category_id)
    if category is None:
        raise ParentCategoryNotFound(category_id)
    return category


async def create_category(categories: CollectionGateway, fields: dict) -> dict:
    return await categories.insert(new_document(fields))


async def create_subcategory(
    categories: CollectionGateway, subcategories: CollectionGateway, fields: dict
) -> dict:
    category = await ensure_category_exists(categories, fields["categoryId"])
    document = new_document({**fields, "categoryId": str(category["_id"])})
    return await subcategories.insert(document)


async def update_subcategory(
    categories: CollectionGateway, subcategories: CollectionGateway, subcategory_id, fields: dict
) -> bool:
    """Apply a partial update, re-validating the parent when it changes.

    The parent check runs before the subcategory lookup, so a bad categoryId
    is reported even when the subcategory itself does not exist.
    """
    fields = dict(fields)
    if "categoryId" in fields:
        category = await ensure_category_exists(categories, fields["categoryId"])
        fields["categoryId"] = str(category["_id"])
    return await subcategories.update_fields(subcategory_id, fields)


async def delete_category(
    categories: CollectionGateway, subcategories: CollectionGateway, category_id
) -> Optional[int]:
    """Delete a category, then every subcategory that references it.

    Returns None when no category matched (nothing is cascaded), otherwise
    the number of subcategories removed. The two deletes are independent
    operations; a crash between them leaves orphans behind.
    """
    deleted = await categories.delete_one(category_id)
    if not deleted:
        return None
    removed = await subcategories.delete_many({"categoryId": str(to_object_id(category_id))})
    logger.info("Deleted category %s and %d subcategories", category_id, removed)
    return removed
