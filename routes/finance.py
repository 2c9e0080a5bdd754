from datetime import date
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from database import get_db
from models import User
import schemas
from schemas.extras import RecordType
from auth import get_current_admin
from services import FinanceService, NotFound

router = APIRouter(prefix="/api/finance", tags=["Finance"])


@router.get("", response_model=schemas.FinanceListResult)
async def get_records(
    record_type: Optional[RecordType] = Query(None, alias="type"),
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """List income/expense records with totals for the same filter (Admin only)"""
    records = FinanceService.get_records(db, record_type, start_date, end_date)
    return {"success": True, "records": records, "summary": FinanceService.summarize(records)}


@router.post("", response_model=schemas.FinanceRecordResult, status_code=status.HTTP_201_CREATED)
async def create_record(
    record: schemas.FinanceRecordCreate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Create a financial record (Admin only)"""
    db_record = FinanceService.create_record(db, record.dict(), user_id=current_admin.id)
    return {"success": True, "message": "Financial record created successfully", "record": db_record}


@router.get("/summary", response_model=schemas.FinanceSummaryResult)
async def get_summary(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Income, expense, profit and margin for a date window (Admin only)"""
    return {"success": True, "summary": FinanceService.get_summary(db, start_date, end_date)}


@router.delete("/{record_id}", response_model=schemas.MessageResult)
async def delete_record(
    record_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Delete a financial record (Admin only)"""
    db_record = FinanceService.get_record(db, record_id)
    if not db_record:
        raise NotFound("Financial record not found")

    FinanceService.delete_record(db, db_record)
    return {"success": True, "message": "Financial record deleted successfully"}
