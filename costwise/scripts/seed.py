"""
Seed script for CostWise.

Populates the database with demo data: a handful of saved estimates priced
by the cost engine, and a few months of project expenses.

Usage:
    python -m costwise.scripts.seed
"""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import func, select

from costwise.common.enums import ExpenseCategory
from costwise.core.estimates.schemas import EstimateRequest
from costwise.core.estimates.service import build_estimate
from costwise.db.models import Estimate, Expense
from costwise.db.session import async_session_factory

_DEMO_ESTIMATES = [
    {"projectType": "kitchen-remodel", "area": 200, "materialQuality": "standard",
     "timeline": "4-8 weeks", "zipCode": "20895", "description": "Galley kitchen refresh"},
    {"projectType": "bathroom-remodel", "area": 85, "materialQuality": "premium",
     "timeline": "2-4 weeks", "zipCode": "20817", "description": "Primary bath with walk-in shower"},
    {"projectType": "deck-construction", "area": 320, "materialQuality": "budget",
     "timeline": "3-6 months", "zipCode": "20740", "description": "Pressure-treated rear deck"},
    {"projectType": "roofing-replacement", "area": 1800, "materialQuality": "standard",
     "timeline": "16 hours", "zipCode": "21401", "laborWorkers": 4, "laborRate": 62,
     "description": "Tear-off and architectural shingles"},
]

_DEMO_EXPENSES = [
    (ExpenseCategory.MATERIALS, "Cabinet boxes and hardware", "4820.00", 5, "Capitol Cabinet Supply"),
    (ExpenseCategory.MATERIALS, "Quartz countertop slab", "3150.00", 4, "Stone Source MD"),
    (ExpenseCategory.LABOR, "Demo crew, 2 days", "1760.00", 4, "Ruiz Builders"),
    (ExpenseCategory.PERMITS, "Montgomery County building permit", "412.50", 3, None),
    (ExpenseCategory.SUBS, "Electrical rough-in", "2300.00", 2, "Bright Line Electric"),
    (ExpenseCategory.SUBS, "Plumbing relocation", "1850.00", 1, "Ruiz Builders"),
    (ExpenseCategory.MISC, "Dumpster rental", "525.00", 0, "Metro Haul"),
]


async def main() -> None:
    async with async_session_factory() as session:
        # ------------------------------------------------------------------
        # Guard: skip if already seeded
        # ------------------------------------------------------------------
        existing = (await session.execute(select(func.count()).select_from(Estimate))).scalar() or 0
        if existing:
            print(f"Database already has {existing} estimates; skipping seed")
            return

        for payload in _DEMO_ESTIMATES:
            session.add(build_estimate(EstimateRequest.model_validate(payload)))

        today = date.today()
        for category, description, amount, months_ago, vendor in _DEMO_EXPENSES:
            session.add(
                Expense(
                    category=category.value,
                    description=description,
                    amount=Decimal(amount),
                    expense_date=today - timedelta(days=30 * months_ago),
                    vendor=vendor,
                    project_ref="kitchen-remodel-demo",
                    project_name="Kitchen Remodel Demo",
                )
            )

        await session.commit()

        print(f"Seeded: {len(_DEMO_ESTIMATES)} estimates, {len(_DEMO_EXPENSES)} expenses")


if __name__ == "__main__":
    asyncio.run(main())
