from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status
from sqlalchemy.orm import Session
from typing import Optional

from database import get_db
from models import User
import schemas
from schemas.product import ProductType
from auth import get_current_admin
from services import ProductService, NotFound
from services.storage_service import save_image, delete_image, PRODUCT_FOLDER
from .limiter import limiter

router = APIRouter(prefix="/api/products", tags=["Products"])


def _get_or_404(db: Session, product_id: int):
    product = ProductService.get_product(db, product_id)
    if not product:
        raise NotFound("Product not found")
    return product


@router.get("", response_model=schemas.ProductListResult)
async def get_products(
    product_type: Optional[ProductType] = Query(None, alias="type"),
    search: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db)
):
    """Get all products, newest first"""
    products = ProductService.get_products(db, skip, limit, product_type, search)
    return {"success": True, "products": products}


@router.get("/{product_id}", response_model=schemas.ProductResult)
async def get_product(product_id: int, db: Session = Depends(get_db)):
    """Get a single product by ID"""
    return {"success": True, "product": _get_or_404(db, product_id)}


@router.post("", response_model=schemas.ProductResult, status_code=status.HTTP_201_CREATED)
@limiter.limit("20/minute")
async def create_product(
    request: Request,
    product: schemas.ProductCreate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Create a new product (Admin only)"""
    db_product = ProductService.create_product(db, product.dict())
    return {"success": True, "message": "Product created successfully", "product": db_product}


@router.put("/{product_id}", response_model=schemas.ProductResult)
@limiter.limit("20/minute")
async def update_product(
    request: Request,
    product_id: int,
    product: schemas.ProductUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Update a product (Admin only)"""
    db_product = _get_or_404(db, product_id)
    db_product = ProductService.update_product(db, db_product, product.dict(exclude_unset=True))
    return {"success": True, "message": "Product updated successfully", "product": db_product}


@router.post("/{product_id}/image", response_model=schemas.ProductResult)
@limiter.limit("20/minute")
async def upload_product_image(
    request: Request,
    product_id: int,
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Replace a product's image (Admin only)"""
    db_product = _get_or_404(db, product_id)
    old_image_url = db_product.image_url

    image_url = await save_image(image, PRODUCT_FOLDER)
    db_product = ProductService.update_product(db, db_product, {"image_url": image_url})
    delete_image(old_image_url)
    return {"success": True, "message": "Product image updated successfully", "product": db_product}


@router.delete("/{product_id}", response_model=schemas.MessageResult)
@limiter.limit("20/minute")
async def delete_product(
    request: Request,
    product_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Delete a product (Admin only)"""
    db_product = _get_or_404(db, product_id)
    ProductService.delete_product(db, db_product)
    return {"success": True, "message": "Product deleted successfully"}
