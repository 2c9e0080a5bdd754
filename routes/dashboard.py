from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from models import User
import schemas
from auth import get_current_admin
from services import OrderService

router = APIRouter(prefix="/api/admin", tags=["Dashboard"])


@router.get("/dashboard-stats", response_model=schemas.DashboardStatsResult)
async def get_dashboard_stats(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Get dashboard statistics (Admin only)"""
    return {"success": True, "stats": OrderService.get_dashboard_stats(db)}
