import uuid
from datetime import date
from decimal import Decimal, InvalidOperation

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from costwise.api.deps import get_db
from costwise.common.enums import ExpenseCategory
from costwise.common.exceptions import BadRequestError, NotFoundError
from costwise.common.logging import get_logger
from costwise.core.expenses.schemas import ExpenseSummary, ExportFilters
from costwise.core.expenses.service import export_csv, summarize_expenses
from costwise.db.models.expense import Expense

logger = get_logger("api.expenses")

router = APIRouter(prefix="/expenses", tags=["Expenses"])

_VALID_CATEGORIES = {c.value for c in ExpenseCategory}


# ---------- Schemas ----------


class ExpenseCreateRequest(BaseModel):
    category: str | None = None
    description: str | None = None
    amount: float | str | None = None
    expense_date: date | None = Field(None, alias="date")
    vendor: str | None = None
    project_id: str | None = Field(None, alias="projectId")
    project_name: str | None = Field(None, alias="projectName")

    model_config = {"populate_by_name": True}


class ExpenseResponse(BaseModel):
    id: uuid.UUID
    category: str
    description: str
    amount: float
    date: str | None
    vendor: str | None
    project_id: str | None
    project_name: str | None
    created_at: str


class DateRange(BaseModel):
    start: str | None = None
    end: str | None = None


class ExpenseExportRequest(BaseModel):
    category: str | None = None
    date_range: DateRange | None = Field(None, alias="dateRange")

    model_config = {"populate_by_name": True}


class DeleteResponse(BaseModel):
    success: bool


# ---------- Endpoints ----------


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(db: AsyncSession = Depends(get_db)):
    expenses = await _load_expenses(db)
    return [_expense_to_response(e) for e in expenses]


@router.post("", response_model=ExpenseResponse, status_code=201)
async def add_expense(
    body: ExpenseCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    if not body.category or not body.description or body.amount in (None, ""):
        raise BadRequestError("Category, description, and amount are required")
    if body.category not in _VALID_CATEGORIES:
        raise BadRequestError(
            f"Invalid expense category: '{body.category}'. "
            f"Expected one of: {', '.join(c.value for c in ExpenseCategory)}"
        )

    amount = _parse_amount(body.amount)

    expense = Expense(
        category=body.category,
        description=body.description,
        amount=amount,
        expense_date=body.expense_date,
        vendor=body.vendor,
        project_ref=body.project_id,
        project_name=body.project_name,
    )
    db.add(expense)
    await db.flush()
    await db.refresh(expense)

    logger.info("Recorded %s expense %s for $%s", expense.category, expense.id, expense.amount)
    return _expense_to_response(expense)


@router.get("/summary", response_model=ExpenseSummary)
async def expense_summary(db: AsyncSession = Depends(get_db)):
    expenses = await _load_expenses(db)
    return summarize_expenses(expenses)


@router.post("/export", response_class=PlainTextResponse)
async def export_expenses(
    body: ExpenseExportRequest,
    db: AsyncSession = Depends(get_db),
):
    expenses = await _load_expenses(db)
    date_range = body.date_range or DateRange()
    filters = ExportFilters(category=body.category, start=date_range.start, end=date_range.end)

    return PlainTextResponse(
        export_csv(expenses, filters),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="expenses.csv"'},
    )


@router.delete("/{expense_id}", response_model=DeleteResponse)
async def delete_expense(
    expense_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Expense).where(Expense.id == expense_id, Expense.is_deleted.is_(False))
    )
    expense = result.scalar_one_or_none()
    if not expense:
        raise NotFoundError("Expense", str(expense_id))

    expense.soft_delete()
    await db.flush()
    return DeleteResponse(success=True)


# ---------- Helpers ----------


async def _load_expenses(db: AsyncSession) -> list[Expense]:
    result = await db.execute(
        select(Expense).where(Expense.is_deleted.is_(False)).order_by(Expense.created_at)
    )
    return list(result.scalars().all())


def _parse_amount(raw: float | str) -> Decimal:
    try:
        amount = Decimal(str(raw)).quantize(Decimal("0.01"))
    except InvalidOperation:
        raise BadRequestError("Amount must be a valid number")
    if not amount.is_finite() or amount <= 0:
        raise BadRequestError("Amount must be greater than 0")
    return amount


def _expense_to_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(
        id=expense.id,
        category=expense.category,
        description=expense.description,
        amount=float(expense.amount),
        date=expense.expense_date.isoformat() if expense.expense_date else None,
        vendor=expense.vendor,
        project_id=expense.project_ref,
        project_name=expense.project_name,
        created_at=expense.created_at.isoformat(),
    )
