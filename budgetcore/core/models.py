"""Pydantic models for budgetcore.

This module defines the template models (read-only catalog data), the persisted entity models (Budget,
Category, Transaction) and the value objects returned by the materializer and the transaction query engine.
"""

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from budgetcore.core.utils import new_id, utcnow


class CategoryType(str, Enum):
    """Side of the ledger a category belongs to."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Frequency(str, Enum):
    """Recurrence frequency of a recurring transaction."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


# --- Templates ---


class CategoryTemplate(BaseModel):
    """A category definition inside a budget template; its name is the join key for sample transactions."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: CategoryType
    planned_amount: float = Field(ge=0)
    color: str = "#6B7280"
    icon: str = ""
    description: str | None = None


class TransactionTemplate(BaseModel):
    """A sample transaction expressed relative to the materialization day.

    The authored sign of ``amount`` is a convenience only; direction always comes from the category type.
    """

    model_config = ConfigDict(frozen=True)

    category_name: str
    description: str
    amount: float
    relative_day_offset: int = 0
    is_posted: bool = True


class BudgetTemplate(BaseModel):
    """A built-in, immutable budget template."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    icon: str = ""
    color: str = "#3B82F6"
    categories: tuple[CategoryTemplate, ...] = ()
    sample_transactions: tuple[TransactionTemplate, ...] = ()


# --- Persisted entities ---


class BudgetMeta(BaseModel):
    """User-supplied budget metadata; absent fields fall back to template defaults."""

    name: str | None = None
    description: str | None = None
    color: str | None = None


class Budget(BaseModel):
    """A budget owned by a user."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=new_id)
    name: str
    description: str = ""
    color: str = "#3B82F6"
    is_archived: bool = False
    created_at: dt.datetime = Field(default_factory=utcnow)


class Category(BaseModel):
    """A category owned by exactly one budget."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=new_id)
    budget_id: str
    name: str
    type: CategoryType
    planned_amount: float = Field(default=0.0, ge=0)
    actual_amount: float = 0.0
    color: str = "#6B7280"
    icon: str = ""
    description: str | None = None
    is_active: bool = True


class Transaction(BaseModel):
    """A transaction owned by one category; ``amount`` is always an unsigned magnitude."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=new_id)
    budget_id: str
    category_id: str
    description: str = ""
    amount: float = Field(ge=0)
    date: dt.date | dt.datetime
    is_posted: bool = True
    is_recurring: bool | None = False
    frequency: Frequency | None = None
    day_of_month: int | None = Field(default=None, ge=1, le=31)


# --- Materializer results ---


class MaterializedBudget(BaseModel):
    """Everything one template application produces, committed as a unit."""

    budget: Budget
    categories: list[Category] = []
    transactions: list[Transaction] = []


class TemplateSummary(BaseModel):
    """Side-effect-free preview of what materializing a template creates."""

    income_category_count: int
    expense_category_count: int
    total_planned_income: float
    total_planned_expense: float
    net_planned: float
    sample_transaction_count: int


class TemplateStatistics(TemplateSummary):
    """Template summary extended with posted/pending sample transaction counts."""

    posted_transaction_count: int
    pending_transaction_count: int


class TemplatePreview(BaseModel):
    """A template together with its summary."""

    template: BudgetTemplate
    summary: TemplateStatistics


class TemplateApplicationCheck(BaseModel):
    """Outcome of checking whether a template can be applied to an existing budget."""

    can_apply: bool
    warnings: list[str] = []
    conflicts: list[str] = []


# --- Query engine ---


class DateRange(BaseModel):
    """Inclusive calendar-day range."""

    start: dt.date
    end: dt.date


class FilterSpec(BaseModel):
    """Transaction filter; every present field narrows the result (logical AND)."""

    search: str | None = None
    category_ids: list[str] | None = None
    category_id: str | None = None
    is_posted: bool | None = None
    is_recurring: bool | None = None
    date_range: DateRange | None = None


class DateBucket(BaseModel):
    """Transactions sharing one calendar day, in input order."""

    day: dt.date
    transactions: list[Transaction] = []
    income: float = 0.0
    expense: float = 0.0
    net: float = 0.0


class QueryResult(BaseModel):
    """Filtered, grouped and aggregated view over a budget's transactions."""

    chronological: bool = False
    filtered: list[Transaction] = []
    income_buckets: list[DateBucket] = []
    expense_buckets: list[DateBucket] = []
    timeline: list[DateBucket] = []
    total_income: float = 0.0
    total_expense: float = 0.0
    net: float = 0.0
    posted_count: int = 0
    pending_count: int = 0
    recurring_count: int = 0
    total_count: int = 0


class CategoryFilter(BaseModel):
    """Category list filter."""

    type: CategoryType | None = None
    show_inactive: bool = False
    search: str | None = None


class FilteredCategories(BaseModel):
    """Categories split by side after filtering."""

    income: list[Category] = []
    expense: list[Category] = []


# --- Aggregates ---


class SideTotals(BaseModel):
    """Income/expense magnitudes and their difference."""

    income: float = 0.0
    expense: float = 0.0
    net: float = 0.0


class BudgetSummary(BaseModel):
    """Planned versus actual totals for a whole budget."""

    total_planned_income: float
    total_actual_income: float
    total_planned_expenses: float
    total_actual_expenses: float
    net_planned: float
    net_actual: float
    category_count: int
    transaction_count: int


class TransactionSummary(BaseModel):
    """Posted/pending breakdown of a transaction list."""

    total_amount: float
    posted_amount: float
    pending_amount: float
    transaction_count: int
    posted_count: int
    pending_count: int


# --- API requests ---


class CreateBudgetRequest(BudgetMeta):
    """Request body for creating a budget, optionally seeded from a template."""

    template_id: str | None = None
    anchor_date: dt.date | None = None


class ApplyTemplateRequest(BaseModel):
    """Request body for applying a template to an existing budget."""

    anchor_date: dt.date | None = None
