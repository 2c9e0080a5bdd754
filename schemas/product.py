from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

ProductType = Literal["PO", "Ready"]


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: float = Field(..., gt=0)
    type: ProductType
    stock: int = Field(default=0, ge=0)
    image_url: Optional[str] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    type: Optional[ProductType] = None
    stock: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None


class ProductResponse(ProductBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProductResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    product: ProductResponse


class ProductListResult(BaseModel):
    success: bool = True
    products: List[ProductResponse]
