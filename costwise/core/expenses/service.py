"""Expense aggregation and CSV export.

The functions here operate on already-loaded ``Expense`` rows so they can be
reused by the API and unit-tested without a database.
"""

from __future__ import annotations

import csv
import io
from collections import defaultdict
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from costwise.common.enums import ExpenseCategory
from costwise.common.logging import get_logger
from costwise.core.expenses.schemas import ExpenseSummary, ExportFilters, MonthlyAmount, VendorTotal
from costwise.db.models.expense import Expense

logger = get_logger("expenses.service")

TREND_MONTHS = 6
TOP_VENDOR_LIMIT = 5
CSV_HEADERS = ["Date", "Category", "Description", "Amount", "Vendor", "Project"]


def _month_starts(today: date, count: int = TREND_MONTHS) -> list[date]:
    """First day of the last *count* calendar months, oldest first."""
    year, month = today.year, today.month
    starts = []
    for _ in range(count):
        starts.append(date(year, month, 1))
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    return list(reversed(starts))


def summarize_expenses(expenses: Sequence[Expense], today: date | None = None) -> ExpenseSummary:
    today = today or date.today()

    total_spent = sum((e.amount for e in expenses), Decimal("0.00"))

    by_category: dict[str, Decimal] = {c.value: Decimal("0.00") for c in ExpenseCategory}
    for e in expenses:
        by_category[e.category] = by_category.get(e.category, Decimal("0.00")) + e.amount

    by_month: dict[tuple[int, int], Decimal] = defaultdict(Decimal)
    for e in expenses:
        if e.expense_date:
            by_month[(e.expense_date.year, e.expense_date.month)] += e.amount
    trend = [
        MonthlyAmount(month=start.strftime("%b %Y"), amount=float(by_month.get((start.year, start.month), 0)))
        for start in _month_starts(today)
    ]

    vendor_amounts: dict[str, Decimal] = defaultdict(Decimal)
    vendor_counts: dict[str, int] = defaultdict(int)
    for e in expenses:
        if e.vendor:
            vendor_amounts[e.vendor] += e.amount
            vendor_counts[e.vendor] += 1
    top_vendors = [
        VendorTotal(vendor=vendor, amount=float(amount), count=vendor_counts[vendor])
        for vendor, amount in sorted(vendor_amounts.items(), key=lambda kv: kv[1], reverse=True)
    ][:TOP_VENDOR_LIMIT]

    return ExpenseSummary(
        total_spent=float(total_spent),
        category_breakdown={k: float(v) for k, v in by_category.items()},
        monthly_trend=trend,
        top_vendors=top_vendors,
    )


def filter_expenses(expenses: Sequence[Expense], filters: ExportFilters) -> list[Expense]:
    selected = list(expenses)
    if filters.category and filters.category != "all":
        selected = [e for e in selected if e.category == filters.category]
    # ISO dates compare correctly as strings; undated rows never match a range
    if filters.start:
        selected = [e for e in selected if e.expense_date and e.expense_date.isoformat() >= filters.start]
    if filters.end:
        selected = [e for e in selected if e.expense_date and e.expense_date.isoformat() <= filters.end]
    return selected


def export_csv(expenses: Sequence[Expense], filters: ExportFilters) -> str:
    selected = filter_expenses(expenses, filters)

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for e in selected:
        writer.writerow([
            e.expense_date.isoformat() if e.expense_date else "",
            e.category,
            e.description,
            f"{e.amount:.2f}",
            e.vendor or "",
            e.project_name or "",
        ])

    logger.info("Exported %d of %d expenses", len(selected), len(expenses))
    return buf.getvalue()
