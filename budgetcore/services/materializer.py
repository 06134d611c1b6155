"""Template materializer: turns a budget template into concrete budget, category and transaction entities.

Materialization runs in two phases. Categories are built first and a ``name -> id`` map is recorded; then every
sample transaction is resolved through that map. Both phases work on in-memory models only, so a malformed
template fails before anything reaches the store and the caller commits the result as one unit.
"""

import datetime as dt
from collections.abc import Iterable

from budgetcore.core.errors import DuplicateCategoryName, MissingCategoryReference
from budgetcore.core.models import (
    Budget,
    BudgetMeta,
    BudgetTemplate,
    Category,
    CategoryType,
    MaterializedBudget,
    TemplateApplicationCheck,
    TemplateStatistics,
    TemplateSummary,
    Transaction,
)
from budgetcore.core.utils import get_logger, shift_days
from budgetcore.services.aggregation import planned_totals

logger = get_logger("budgetcore.materializer")


def check_template(template: BudgetTemplate) -> None:
    """Raise if category names repeat or a sample transaction names an unknown category."""
    names: set[str] = set()
    for category in template.categories:
        if category.name in names:
            raise DuplicateCategoryName(category.name, template.id)
        names.add(category.name)
    for sample in template.sample_transactions:
        if sample.category_name not in names:
            raise MissingCategoryReference(sample.category_name, template.id)


def build_budget(template: BudgetTemplate, meta: BudgetMeta | None = None) -> Budget:
    """Build the budget record; explicit metadata wins over template defaults."""
    meta = meta or BudgetMeta()
    return Budget(
        name=meta.name if meta.name is not None else template.name,
        description=meta.description if meta.description is not None else template.description,
        color=meta.color if meta.color is not None else template.color,
    )


def _build_categories(template: BudgetTemplate, budget_id: str) -> tuple[list[Category], dict[str, str]]:
    categories: list[Category] = []
    ids_by_name: dict[str, str] = {}
    for spec in template.categories:
        if spec.name in ids_by_name:
            raise DuplicateCategoryName(spec.name, template.id)
        category = Category(
            budget_id=budget_id,
            name=spec.name,
            type=spec.type,
            planned_amount=spec.planned_amount,
            color=spec.color,
            icon=spec.icon,
            description=spec.description,
        )
        ids_by_name[spec.name] = category.id
        categories.append(category)
    return categories, ids_by_name


def _build_transactions(
    template: BudgetTemplate, budget_id: str, ids_by_name: dict[str, str], anchor_date: dt.date
) -> list[Transaction]:
    transactions: list[Transaction] = []
    for sample in template.sample_transactions:
        category_id = ids_by_name.get(sample.category_name)
        if category_id is None:
            raise MissingCategoryReference(sample.category_name, template.id)
        transactions.append(
            Transaction(
                budget_id=budget_id,
                category_id=category_id,
                description=sample.description,
                amount=abs(sample.amount),
                date=shift_days(anchor_date, sample.relative_day_offset),
                is_posted=sample.is_posted,
            )
        )
    return transactions


def materialize_into(
    budget: Budget, template: BudgetTemplate, anchor_date: dt.date | dt.datetime
) -> MaterializedBudget:
    """Build the categories and transactions a template adds to ``budget``.

    Transaction dates are ``anchor_date`` shifted by each sample's relative day offset in whole calendar days;
    amounts are stored as magnitudes. Raises ``DuplicateCategoryName`` or ``MissingCategoryReference`` without
    returning any partial result.
    """
    categories, ids_by_name = _build_categories(template, budget.id)
    transactions = _build_transactions(template, budget.id, ids_by_name, anchor_date)
    logger.info(
        f"Materialized template '{template.id}' for budget {budget.id}: "
        f"{len(categories)} categories, {len(transactions)} transactions"
    )
    return MaterializedBudget(budget=budget, categories=categories, transactions=transactions)


def materialize(
    template: BudgetTemplate, budget_meta: BudgetMeta | None, anchor_date: dt.date | dt.datetime
) -> MaterializedBudget:
    """Turn a template into a new budget with its categories and sample transactions."""
    budget = build_budget(template, budget_meta)
    return materialize_into(budget, template, anchor_date)


def summarize(template: BudgetTemplate) -> TemplateSummary:
    """Preview the counts and planned totals materializing ``template`` would produce."""
    totals = planned_totals(template.categories)
    income_count = sum(1 for category in template.categories if category.type is CategoryType.INCOME)
    return TemplateSummary(
        income_category_count=income_count,
        expense_category_count=len(template.categories) - income_count,
        total_planned_income=totals.income,
        total_planned_expense=totals.expense,
        net_planned=totals.net,
        sample_transaction_count=len(template.sample_transactions),
    )


def template_statistics(template: BudgetTemplate) -> TemplateStatistics:
    """Template summary plus posted/pending sample transaction counts."""
    posted = sum(1 for sample in template.sample_transactions if sample.is_posted)
    return TemplateStatistics(
        **summarize(template).model_dump(),
        posted_transaction_count=posted,
        pending_transaction_count=len(template.sample_transactions) - posted,
    )


def validate_template_application(
    template: BudgetTemplate,
    existing_categories: Iterable[Category],
    existing_transactions: Iterable[Transaction],
) -> TemplateApplicationCheck:
    """Check whether a template can be added to a budget that already holds data.

    Template category names that clash (case-insensitively) with existing categories are conflicts; existing
    categories or transactions only produce warnings.
    """
    existing_categories = list(existing_categories)
    existing_names = {category.name.lower() for category in existing_categories}
    duplicates = [spec.name.lower() for spec in template.categories if spec.name.lower() in existing_names]

    conflicts: list[str] = []
    warnings: list[str] = []
    if duplicates:
        conflicts.append(f"Categories with these names already exist: {', '.join(duplicates)}")
    if existing_categories:
        warnings.append(f"This budget already has {len(existing_categories)} categories")
    if any(True for _ in existing_transactions):
        warnings.append("This budget already has transactions")
    return TemplateApplicationCheck(can_apply=not conflicts, warnings=warnings, conflicts=conflicts)
