from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field
from pydantic.alias_generators import to_camel

# ObjectIds leave the API as plain strings
ObjectIdStr = Annotated[str, BeforeValidator(str)]

class CatalogModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class CategoryBase(CatalogModel):
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True

class CategoryCreate(CategoryBase):
    # checked by the handler so a missing name is a 400, not a 422
    name: Optional[str] = None

class PartialUpdate(CatalogModel):
    def to_fields(self) -> dict:
        """Only the fields the caller actually sent, keyed as stored."""
        fields = self.model_dump(by_alias=True, exclude_unset=True)
        if "isActive" in fields and fields["isActive"] is None:
            del fields["isActive"]
        return fields

class CategoryUpdate(PartialUpdate):
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None

class CategoryRead(CategoryBase):
    id: ObjectIdStr = Field(alias="_id")
    name: str
    # older documents may carry null or missing values
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class MessageResponse(BaseModel):
    message: str
