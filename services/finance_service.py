from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import FinanceRecord


def _date_window(query, start_date: Optional[date], end_date: Optional[date]):
    if start_date:
        query = query.filter(FinanceRecord.created_at >= datetime.combine(start_date, datetime.min.time()))
    if end_date:
        query = query.filter(FinanceRecord.created_at <= datetime.combine(end_date, datetime.max.time()))
    return query


class FinanceService:
    @staticmethod
    def get_records(db: Session, record_type: str = None, start_date: Optional[date] = None,
                    end_date: Optional[date] = None) -> List[FinanceRecord]:
        query = db.query(FinanceRecord)
        if record_type:
            query = query.filter(FinanceRecord.type == record_type)
        query = _date_window(query, start_date, end_date)
        return query.order_by(FinanceRecord.created_at.desc(), FinanceRecord.id.desc()).all()

    @staticmethod
    def get_record(db: Session, record_id: int) -> Optional[FinanceRecord]:
        return db.query(FinanceRecord).filter(FinanceRecord.id == record_id).first()

    @staticmethod
    def create_record(db: Session, record_data: dict, user_id: Optional[int] = None) -> FinanceRecord:
        db_record = FinanceRecord(user_id=user_id, **record_data)
        db.add(db_record)
        db.commit()
        db.refresh(db_record)
        return db_record

    @staticmethod
    def delete_record(db: Session, db_record: FinanceRecord):
        db.delete(db_record)
        db.commit()

    @staticmethod
    def summarize(records: List[FinanceRecord]) -> dict:
        total_income = sum(r.amount for r in records if r.type == "income")
        total_expense = sum(r.amount for r in records if r.type == "expense")
        return {
            "total_income": float(total_income),
            "total_expense": float(total_expense),
            "profit": float(total_income - total_expense),
        }

    @staticmethod
    def get_totals(db: Session, start_date: Optional[date] = None, end_date: Optional[date] = None) -> dict:
        query = db.query(FinanceRecord.type, func.sum(FinanceRecord.amount))
        query = _date_window(query, start_date, end_date)
        sums = dict(query.group_by(FinanceRecord.type).all())

        total_income = float(sums.get("income") or 0)
        total_expense = float(sums.get("expense") or 0)
        return {
            "total_income": total_income,
            "total_expense": total_expense,
            "profit": total_income - total_expense,
        }

    @staticmethod
    def get_summary(db: Session, start_date: Optional[date] = None, end_date: Optional[date] = None) -> dict:
        totals = FinanceService.get_totals(db, start_date, end_date)
        income = totals["total_income"]
        totals["profit_margin"] = round(totals["profit"] / income * 100, 2) if income > 0 else 0
        return totals
