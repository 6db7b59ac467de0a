from costwise.db.models.estimate import Estimate
from costwise.db.models.expense import Expense

__all__ = [
    "Estimate",
    "Expense",
]
