"""Shared aggregation helpers.

Transactions store unsigned magnitudes, so every total here derives direction from the owning category's type.
A transaction whose category cannot be resolved counts on the EXPENSE side.
"""

from collections.abc import Iterable, Mapping

from budgetcore.core.models import (
    BudgetSummary,
    Category,
    CategoryTemplate,
    CategoryType,
    SideTotals,
    Transaction,
    TransactionSummary,
)
DANGLING_CATEGORY_SIDE = CategoryType.EXPENSE


def index_categories(categories: Iterable[Category]) -> dict[str, Category]:
    """Index categories by id."""
    return {category.id: category for category in categories}


def side_of(transaction: Transaction, categories_by_id: Mapping[str, Category]) -> CategoryType:
    """Return the side a transaction counts on, defaulting to EXPENSE for an unknown category."""
    category = categories_by_id.get(transaction.category_id)
    if category is None:
        return DANGLING_CATEGORY_SIDE
    return category.type


def side_totals(transactions: Iterable[Transaction], categories_by_id: Mapping[str, Category]) -> SideTotals:
    """Sum transaction magnitudes per side."""
    income = 0.0
    expense = 0.0
    for transaction in transactions:
        if side_of(transaction, categories_by_id) is CategoryType.INCOME:
            income += abs(transaction.amount)
        else:
            expense += abs(transaction.amount)
    return SideTotals(income=income, expense=expense, net=income - expense)


def category_actuals(transactions: Iterable[Transaction]) -> dict[str, float]:
    """Sum transaction magnitudes per category id."""
    actuals: dict[str, float] = {}
    for transaction in transactions:
        actuals[transaction.category_id] = actuals.get(transaction.category_id, 0.0) + abs(transaction.amount)
    return actuals


def with_actuals(categories: Iterable[Category], transactions: Iterable[Transaction]) -> list[Category]:
    """Return copies of the categories with ``actual_amount`` derived from the transactions."""
    actuals = category_actuals(transactions)
    return [category.model_copy(update={"actual_amount": actuals.get(category.id, 0.0)}) for category in categories]


def category_performance(category: Category) -> float:
    """Actual amount as a percentage of the planned amount (0 when nothing is planned)."""
    if category.planned_amount == 0:
        return 0.0
    return category.actual_amount / category.planned_amount * 100


def planned_totals(categories: Iterable[Category | CategoryTemplate]) -> SideTotals:
    """Sum planned amounts per side, for persisted categories and template categories alike."""
    income = 0.0
    expense = 0.0
    for category in categories:
        if category.type is CategoryType.INCOME:
            income += category.planned_amount
        else:
            expense += category.planned_amount
    return SideTotals(income=income, expense=expense, net=income - expense)


def budget_summary(categories: Iterable[Category], transactions: Iterable[Transaction]) -> BudgetSummary:
    """Planned versus actual totals for a budget."""
    categories = list(categories)
    transactions = list(transactions)
    planned = planned_totals(categories)
    actual = side_totals(transactions, index_categories(categories))
    return BudgetSummary(
        total_planned_income=planned.income,
        total_actual_income=actual.income,
        total_planned_expenses=planned.expense,
        total_actual_expenses=actual.expense,
        net_planned=planned.net,
        net_actual=actual.net,
        category_count=len(categories),
        transaction_count=len(transactions),
    )


def transaction_summary(transactions: Iterable[Transaction]) -> TransactionSummary:
    """Posted/pending magnitudes and counts."""
    posted_amount = 0.0
    pending_amount = 0.0
    posted_count = 0
    pending_count = 0
    for transaction in transactions:
        if transaction.is_posted:
            posted_amount += abs(transaction.amount)
            posted_count += 1
        else:
            pending_amount += abs(transaction.amount)
            pending_count += 1
    return TransactionSummary(
        total_amount=posted_amount + pending_amount,
        posted_amount=posted_amount,
        pending_amount=pending_amount,
        transaction_count=posted_count + pending_count,
        posted_count=posted_count,
        pending_count=pending_count,
    )
