from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

RecordType = Literal["income", "expense"]


class FinanceRecordCreate(BaseModel):
    type: RecordType
    description: Optional[str] = None
    amount: float = Field(..., gt=0)


class FinanceRecordResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    type: str
    description: Optional[str]
    amount: float
    created_at: datetime

    class Config:
        from_attributes = True


class FinanceTotals(BaseModel):
    total_income: float
    total_expense: float
    profit: float


class FinanceSummary(FinanceTotals):
    profit_margin: float


class FinanceListResult(BaseModel):
    success: bool = True
    records: List[FinanceRecordResponse]
    summary: FinanceTotals


class FinanceRecordResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    record: FinanceRecordResponse


class FinanceSummaryResult(BaseModel):
    success: bool = True
    summary: FinanceSummary


class UnboxingPhotoResponse(BaseModel):
    id: int
    user_id: int
    user_name: Optional[str]
    image_url: str
    caption: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class UnboxingPhotoResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    photo: UnboxingPhotoResponse


class UnboxingPhotoListResult(BaseModel):
    success: bool = True
    photos: List[UnboxingPhotoResponse]


class MessageResult(BaseModel):
    success: bool = True
    message: str


class DashboardStats(BaseModel):
    total_orders: int
    pending_orders: int
    completed_orders: int
    total_revenue: float
    total_products: int
    in_stock_products: int
    total_income: float
    total_expense: float
    profit: float


class DashboardStatsResult(BaseModel):
    success: bool = True
    stats: DashboardStats
