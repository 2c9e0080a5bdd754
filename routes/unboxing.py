from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from sqlalchemy.orm import Session
from typing import Optional

from database import get_db
from models import User
import schemas
from auth import get_current_admin
from services import GalleryService, NotFound
from services.storage_service import save_image, UNBOXING_FOLDER
from .limiter import limiter

router = APIRouter(prefix="/api/unboxing", tags=["Unboxing"])


@router.get("", response_model=schemas.UnboxingPhotoListResult)
async def get_photos(db: Session = Depends(get_db)):
    """Get all unboxing photos"""
    return {"success": True, "photos": GalleryService.get_photos(db)}


@router.post("/upload", response_model=schemas.UnboxingPhotoResult, status_code=status.HTTP_201_CREATED)
@limiter.limit("20/minute")
async def upload_photo(
    request: Request,
    image: Optional[UploadFile] = File(None),
    caption: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Upload an unboxing photo (Admin only)"""
    image_url = await save_image(image, UNBOXING_FOLDER)
    photo = GalleryService.create_photo(db, current_admin.id, image_url, caption)
    return {"success": True, "message": "Unboxing photo uploaded successfully", "photo": photo}


@router.delete("/{photo_id}", response_model=schemas.MessageResult)
async def delete_photo(
    photo_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Delete an unboxing photo and its file (Admin only)"""
    photo = GalleryService.get_photo(db, photo_id)
    if not photo:
        raise NotFound("Unboxing photo not found")

    GalleryService.delete_photo(db, photo)
    return {"success": True, "message": "Unboxing photo deleted successfully"}
