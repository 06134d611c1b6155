"""Model builders shared by the test modules."""

import datetime as dt

from budgetcore.core.models import Category, CategoryType, Transaction

ANCHOR = dt.date(2024, 6, 15)


def make_category(category_id: str, category_type: CategoryType, **fields: object) -> Category:
    """Build a category for budget ``b1``."""
    values = {"budget_id": "b1", "name": category_id, "planned_amount": 0.0} | fields
    return Category(id=category_id, type=category_type, **values)


def make_transaction(transaction_id: str, category_id: str, **fields: object) -> Transaction:
    """Build a transaction for budget ``b1``."""
    values = {"budget_id": "b1", "description": transaction_id, "amount": 10.0, "date": ANCHOR} | fields
    return Transaction(id=transaction_id, category_id=category_id, **values)
