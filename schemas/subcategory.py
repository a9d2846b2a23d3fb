from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.category import CatalogModel, ObjectIdStr, PartialUpdate

class SubcategoryBase(CatalogModel):
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True

class SubcategoryCreate(SubcategoryBase):
    name: Optional[str] = None
    category_id: Optional[str] = None

class SubcategoryUpdate(PartialUpdate):
    name: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None

class SubcategoryRead(SubcategoryBase):
    id: ObjectIdStr = Field(alias="_id")
    name: str
    category_id: str
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
