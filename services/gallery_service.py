from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from models import UnboxingPhoto
from .storage_service import delete_image


class GalleryService:
    @staticmethod
    def get_photos(db: Session) -> List[UnboxingPhoto]:
        return (
            db.query(UnboxingPhoto)
            .options(joinedload(UnboxingPhoto.user))
            .order_by(UnboxingPhoto.created_at.desc(), UnboxingPhoto.id.desc())
            .all()
        )

    @staticmethod
    def get_photo(db: Session, photo_id: int) -> Optional[UnboxingPhoto]:
        return db.query(UnboxingPhoto).filter(UnboxingPhoto.id == photo_id).first()

    @staticmethod
    def create_photo(db: Session, user_id: int, image_url: str, caption: Optional[str] = None) -> UnboxingPhoto:
        db_photo = UnboxingPhoto(user_id=user_id, image_url=image_url, caption=caption or None)
        db.add(db_photo)
        db.commit()
        db.refresh(db_photo)
        return db_photo

    @staticmethod
    def delete_photo(db: Session, db_photo: UnboxingPhoto):
        image_url = db_photo.image_url
        db.delete(db_photo)
        db.commit()
        # The row is gone either way; a leftover file is only logged
        delete_image(image_url)
