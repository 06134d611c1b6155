"""Transaction query engine: filter, partition by side, group by calendar day and aggregate.

Everything here is a pure function of its inputs and never raises on data problems, because it runs on every
change of a live filter. Aggregates are always computed over the filtered set.
"""

import datetime as dt
from collections.abc import Iterable, Mapping

from budgetcore.core.models import (
    Category,
    CategoryFilter,
    CategoryType,
    DateBucket,
    FilteredCategories,
    FilterSpec,
    QueryResult,
    Transaction,
)
from budgetcore.core.utils import calendar_day, get_logger
from budgetcore.services.aggregation import DANGLING_CATEGORY_SIDE, index_categories, side_of, side_totals

logger = get_logger("budgetcore.query")


def _matches(transaction: Transaction, spec: FilterSpec, allowed_ids: frozenset[str]) -> bool:
    if spec.search and spec.search.lower() not in transaction.description.lower():
        return False
    if allowed_ids:
        if transaction.category_id not in allowed_ids:
            return False
    elif spec.category_id and transaction.category_id != spec.category_id:
        return False
    if spec.is_posted is not None and transaction.is_posted != spec.is_posted:
        return False
    if spec.is_recurring is not None and bool(transaction.is_recurring) != spec.is_recurring:
        return False
    if spec.date_range is not None:
        day = calendar_day(transaction.date)
        if not spec.date_range.start <= day <= spec.date_range.end:
            return False
    return True


def filter_transactions(transactions: Iterable[Transaction], spec: FilterSpec) -> list[Transaction]:
    """Keep the transactions matching every present predicate, in input order."""
    allowed_ids = frozenset(category_id for category_id in spec.category_ids or () if category_id)
    return [transaction for transaction in transactions if _matches(transaction, spec, allowed_ids)]


def partition_by_side(
    transactions: Iterable[Transaction], categories_by_id: Mapping[str, Category]
) -> tuple[list[Transaction], list[Transaction]]:
    """Split transactions into (income, expense); unknown categories land on the expense side."""
    income: list[Transaction] = []
    expense: list[Transaction] = []
    for transaction in transactions:
        if side_of(transaction, categories_by_id) is CategoryType.INCOME:
            income.append(transaction)
        else:
            expense.append(transaction)
    return income, expense


def group_by_day(transactions: Iterable[Transaction], categories_by_id: Mapping[str, Category]) -> list[DateBucket]:
    """Group transactions by calendar day, most recent day first, keeping input order inside a bucket."""
    groups: dict[dt.date, list[Transaction]] = {}
    for transaction in transactions:
        groups.setdefault(calendar_day(transaction.date), []).append(transaction)
    buckets = []
    for day in sorted(groups, reverse=True):
        totals = side_totals(groups[day], categories_by_id)
        buckets.append(
            DateBucket(day=day, transactions=groups[day], income=totals.income, expense=totals.expense, net=totals.net)
        )
    return buckets


def query(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    spec: FilterSpec | None = None,
    *,
    chronological: bool = False,
) -> QueryResult:
    """Filter, group and aggregate a budget's transactions.

    In the default split mode the result holds separate income and expense buckets; in chronological mode a
    single ``timeline`` of buckets covers both sides. Totals are identical in both modes.
    """
    spec = spec or FilterSpec()
    categories_by_id = index_categories(categories)
    filtered = filter_transactions(transactions, spec)
    for transaction in filtered:
        if transaction.category_id not in categories_by_id:
            logger.debug(
                f"Transaction {transaction.id} references unknown category {transaction.category_id}; "
                f"counting it as {DANGLING_CATEGORY_SIDE.value}"
            )
    totals = side_totals(filtered, categories_by_id)

    result = QueryResult(
        chronological=chronological,
        filtered=filtered,
        total_income=totals.income,
        total_expense=totals.expense,
        net=totals.net,
        posted_count=sum(1 for transaction in filtered if transaction.is_posted),
        pending_count=sum(1 for transaction in filtered if not transaction.is_posted),
        recurring_count=sum(1 for transaction in filtered if transaction.is_recurring),
        total_count=len(filtered),
    )
    if chronological:
        result.timeline = group_by_day(filtered, categories_by_id)
    else:
        income, expense = partition_by_side(filtered, categories_by_id)
        result.income_buckets = group_by_day(income, categories_by_id)
        result.expense_buckets = group_by_day(expense, categories_by_id)
    return result


def has_active_filters(spec: FilterSpec) -> bool:
    """Whether any predicate of the filter would narrow the result."""
    return bool(
        spec.search
        or any(spec.category_ids or ())
        or spec.category_id
        or spec.is_posted is not None
        or spec.is_recurring is not None
        or spec.date_range
    )


# --- Multi-select category filter ---


def select_all_categories(spec: FilterSpec, categories: Iterable[Category]) -> FilterSpec:
    """Restrict the filter to every known category."""
    return spec.model_copy(update={"category_ids": [category.id for category in categories], "category_id": None})


def clear_categories(spec: FilterSpec) -> FilterSpec:
    """Drop the category restriction entirely."""
    return spec.model_copy(update={"category_ids": None, "category_id": None})


def toggle_category(spec: FilterSpec, category_id: str) -> FilterSpec:
    """Add ``category_id`` to the selection, or remove it if already selected."""
    selected = list(spec.category_ids or [])
    if category_id in selected:
        selected.remove(category_id)
    else:
        selected.append(category_id)
    return spec.model_copy(update={"category_ids": selected or None, "category_id": None})


# --- Category list filter ---


def filter_categories(categories: Iterable[Category], spec: CategoryFilter | None = None) -> FilteredCategories:
    """Filter categories by type, activity and name/description search, split by side."""
    spec = spec or CategoryFilter()
    term = spec.search.lower() if spec.search else None
    result = FilteredCategories()
    for category in categories:
        if not spec.show_inactive and not category.is_active:
            continue
        if spec.type is not None and category.type is not spec.type:
            continue
        if term and term not in category.name.lower() and term not in (category.description or "").lower():
            continue
        if category.type is CategoryType.INCOME:
            result.income.append(category)
        else:
            result.expense.append(category)
    return result
