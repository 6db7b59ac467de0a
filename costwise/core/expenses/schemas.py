from pydantic import BaseModel


class VendorTotal(BaseModel):
    vendor: str
    amount: float
    count: int


class MonthlyAmount(BaseModel):
    month: str  # e.g. "Jan 2026"
    amount: float


class ExpenseSummary(BaseModel):
    total_spent: float
    category_breakdown: dict[str, float]
    monthly_trend: list[MonthlyAmount]
    top_vendors: list[VendorTotal]


class ExportFilters(BaseModel):
    category: str | None = None  # "all" or None disables the filter
    start: str | None = None  # ISO date, inclusive
    end: str | None = None  # ISO date, inclusive
