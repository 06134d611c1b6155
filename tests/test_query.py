"""Tests for the transaction query engine."""

import datetime as dt
from unittest.mock import patch

from factories import make_category, make_transaction

from budgetcore.core.models import CategoryFilter, CategoryType, DateRange, FilterSpec
from budgetcore.services.query import (
    clear_categories,
    filter_categories,
    filter_transactions,
    has_active_filters,
    query,
    select_all_categories,
    toggle_category,
)

CATEGORIES = [
    make_category("c1", CategoryType.EXPENSE, name="Housing"),
    make_category("c2", CategoryType.EXPENSE, name="Deposits"),
    make_category("c3", CategoryType.INCOME, name="Salary"),
]


def test_filters_combine_with_and() -> None:
    """Search and posted status must both match."""
    transactions = [
        make_transaction("t1", "c1", description="Rent", is_posted=True),
        make_transaction("t2", "c2", description="Rent deposit", is_posted=False),
    ]
    result = filter_transactions(transactions, FilterSpec(search="rent", is_posted=True))
    if [t.id for t in result] != ["t1"]:
        msg = f"Expected only t1, got {[t.id for t in result]}"
        raise AssertionError(msg)


def test_category_ids_take_precedence_over_category_id() -> None:
    """A non-empty multi-select replaces the single category filter."""
    transactions = [make_transaction("t1", "c1"), make_transaction("t2", "c2"), make_transaction("t3", "c3")]
    result = filter_transactions(transactions, FilterSpec(category_id="c1", category_ids=["c2", "c3"]))
    if [t.id for t in result] != ["t2", "t3"]:
        msg = f"Expected t2 and t3, got {[t.id for t in result]}"
        raise AssertionError(msg)


def test_empty_category_ids_means_no_restriction() -> None:
    """An empty selection falls back to category_id, and never hides everything."""
    transactions = [make_transaction("t1", "c1"), make_transaction("t2", "c2")]
    if len(filter_transactions(transactions, FilterSpec(category_ids=[]))) != 2:
        msg = "An empty category selection must not filter anything out"
        raise AssertionError(msg)
    only_c1 = filter_transactions(transactions, FilterSpec(category_ids=[], category_id="c1"))
    if [t.id for t in only_c1] != ["t1"]:
        msg = f"Expected category_id to apply when category_ids is empty, got {[t.id for t in only_c1]}"
        raise AssertionError(msg)


def test_blank_category_ids_mean_no_restriction() -> None:
    """A selection holding only blank ids behaves like an empty selection."""
    transactions = [make_transaction("t1", "c1"), make_transaction("t2", "c2")]
    spec = FilterSpec(category_ids=[""])
    if len(filter_transactions(transactions, spec)) != 2:
        msg = "Blank category ids must not filter anything out"
        raise AssertionError(msg)
    if has_active_filters(spec):
        msg = "Blank category ids must not count as an active filter"
        raise AssertionError(msg)
    mixed = filter_transactions(transactions, FilterSpec(category_ids=["", "c2"]))
    if [t.id for t in mixed] != ["t2"]:
        msg = f"Expected only t2, got {[t.id for t in mixed]}"
        raise AssertionError(msg)


def test_unknown_category_logged_once_per_query() -> None:
    """Each transaction with an unknown category is reported once, however many aggregates it feeds."""
    transactions = [make_transaction("t1", "missing"), make_transaction("t2", "c1")]
    for chronological in (False, True):
        with patch("budgetcore.services.query.logger") as logger:
            query(transactions, CATEGORIES, chronological=chronological)
        if logger.debug.call_count != 1:
            msg = f"Expected one debug line, got {logger.debug.call_count}"
            raise AssertionError(msg)


def test_missing_recurring_flag_counts_as_not_recurring() -> None:
    """is_recurring=None on a transaction matches a filter for False."""
    transactions = [
        make_transaction("t1", "c1", is_recurring=None),
        make_transaction("t2", "c1", is_recurring=True),
    ]
    result = filter_transactions(transactions, FilterSpec(is_recurring=False))
    if [t.id for t in result] != ["t1"]:
        msg = f"Expected only t1, got {[t.id for t in result]}"
        raise AssertionError(msg)


def test_date_range_is_inclusive_on_calendar_days() -> None:
    """Both bounds are included, including late times on the end day."""
    transactions = [
        make_transaction("t1", "c1", date=dt.date(2024, 6, 9)),
        make_transaction("t2", "c1", date=dt.date(2024, 6, 10)),
        make_transaction("t3", "c1", date=dt.datetime(2024, 6, 12, 23, 59)),
        make_transaction("t4", "c1", date=dt.date(2024, 6, 13)),
    ]
    spec = FilterSpec(date_range=DateRange(start=dt.date(2024, 6, 10), end=dt.date(2024, 6, 12)))
    result = filter_transactions(transactions, spec)
    if [t.id for t in result] != ["t2", "t3"]:
        msg = f"Expected t2 and t3, got {[t.id for t in result]}"
        raise AssertionError(msg)


def test_totals_use_category_type_not_stored_sign() -> None:
    """Income and expense totals come from category types over the filtered set."""
    transactions = [
        make_transaction("t1", "c3", amount=5000),
        make_transaction("t2", "c1", amount=1800),
        make_transaction("t3", "c2", amount=200),
    ]
    result = query(transactions, CATEGORIES)
    if (result.total_income, result.total_expense, result.net) != (5000, 2000, 3000):
        msg = f"Unexpected totals: {result.total_income}, {result.total_expense}, {result.net}"
        raise AssertionError(msg)


def test_excluding_expenses_drives_expense_total_to_zero() -> None:
    """Aggregates are recomputed over the filtered set only."""
    transactions = [make_transaction("t1", "c3", amount=5000), make_transaction("t2", "c1", amount=1800)]
    result = query(transactions, CATEGORIES, FilterSpec(category_ids=["c3"]))
    if result.total_expense != 0 or result.net != result.total_income:
        msg = f"Expected no expenses and net == income, got {result.total_expense} and {result.net}"
        raise AssertionError(msg)
    if result.expense_buckets:
        msg = "Expected no expense buckets"
        raise AssertionError(msg)


def test_dangling_category_defaults_to_expense_side() -> None:
    """A transaction with an unknown category is kept and counted as an expense."""
    transactions = [make_transaction("t1", "c3", amount=100), make_transaction("t2", "ghost", amount=40)]
    result = query(transactions, CATEGORIES)
    if result.total_expense != 40 or result.net != 60:
        msg = f"Expected the dangling transaction to count as a 40 expense, got {result}"
        raise AssertionError(msg)
    expense_ids = [t.id for bucket in result.expense_buckets for t in bucket.transactions]
    if expense_ids != ["t2"]:
        msg = f"Expected t2 in the expense buckets, got {expense_ids}"
        raise AssertionError(msg)


def test_same_day_transactions_share_a_bucket_newest_first() -> None:
    """Time-of-day is ignored for bucketing; buckets are ordered most recent first."""
    transactions = [
        make_transaction("morning", "c1", date=dt.datetime(2024, 6, 10, 8, 0)),
        make_transaction("older", "c1", date=dt.date(2024, 6, 1)),
        make_transaction("evening", "c1", date=dt.datetime(2024, 6, 10, 21, 30)),
        make_transaction("newest", "c1", date=dt.date(2024, 6, 12)),
    ]
    buckets = query(transactions, CATEGORIES).expense_buckets
    days = [bucket.day for bucket in buckets]
    if days != [dt.date(2024, 6, 12), dt.date(2024, 6, 10), dt.date(2024, 6, 1)]:
        msg = f"Unexpected bucket order: {days}"
        raise AssertionError(msg)
    if [t.id for t in buckets[1].transactions] != ["morning", "evening"]:
        msg = f"Expected input order inside the bucket, got {[t.id for t in buckets[1].transactions]}"
        raise AssertionError(msg)


def test_chronological_mode_builds_one_timeline() -> None:
    """Chronological mode merges both sides into one set of buckets with per-day net."""
    transactions = [
        make_transaction("t1", "c3", amount=300, date=dt.date(2024, 6, 10)),
        make_transaction("t2", "c1", amount=100, date=dt.date(2024, 6, 10)),
        make_transaction("t3", "c1", amount=50, date=dt.date(2024, 6, 11)),
    ]
    result = query(transactions, CATEGORIES, chronological=True)
    if result.income_buckets or result.expense_buckets:
        msg = "Chronological mode must not fill the side columns"
        raise AssertionError(msg)
    if [(b.day.day, b.net) for b in result.timeline] != [(11, -50), (10, 200)]:
        msg = f"Unexpected timeline: {[(b.day, b.net) for b in result.timeline]}"
        raise AssertionError(msg)
    if result.net != 150:
        msg = f"Expected net 150, got {result.net}"
        raise AssertionError(msg)


def test_status_counts_follow_the_filter() -> None:
    """Posted/pending/recurring counts describe the filtered set."""
    transactions = [
        make_transaction("t1", "c1", is_posted=True, is_recurring=True),
        make_transaction("t2", "c1", is_posted=False),
        make_transaction("t3", "c3", is_posted=True),
    ]
    result = query(transactions, CATEGORIES, FilterSpec(category_id="c1"))
    counts = (result.posted_count, result.pending_count, result.recurring_count, result.total_count)
    if counts != (1, 1, 1, 2):
        msg = f"Unexpected counts: {counts}"
        raise AssertionError(msg)


def test_query_does_not_mutate_inputs() -> None:
    """Inputs are left untouched."""
    transactions = [make_transaction("t1", "c1"), make_transaction("t2", "c3")]
    before = [t.model_dump() for t in transactions]
    query(transactions, CATEGORIES, FilterSpec(search="t"))
    if [t.model_dump() for t in transactions] != before:
        msg = "query() mutated its input transactions"
        raise AssertionError(msg)


def test_multi_select_helpers() -> None:
    """Select all, toggle and clear behave like the category dropdown."""
    spec = FilterSpec(category_id="c1")
    everything = select_all_categories(spec, CATEGORIES)
    if everything.category_ids != ["c1", "c2", "c3"] or everything.category_id is not None:
        msg = f"Unexpected select-all result: {everything}"
        raise AssertionError(msg)
    toggled = toggle_category(everything, "c2")
    if toggled.category_ids != ["c1", "c3"]:
        msg = f"Expected c2 removed, got {toggled.category_ids}"
        raise AssertionError(msg)
    if toggle_category(toggled, "c2").category_ids != ["c1", "c3", "c2"]:
        msg = "Expected c2 added back"
        raise AssertionError(msg)
    if toggle_category(FilterSpec(category_ids=["c1"]), "c1").category_ids is not None:
        msg = "Removing the last selected category must clear the restriction"
        raise AssertionError(msg)
    cleared = clear_categories(everything)
    if cleared.category_ids is not None or has_active_filters(cleared):
        msg = f"Expected no active filters after clearing, got {cleared}"
        raise AssertionError(msg)


def test_filter_categories_by_type_activity_and_search() -> None:
    """Inactive categories are hidden by default and search covers descriptions."""
    categories = [
        *CATEGORIES,
        make_category("c4", CategoryType.EXPENSE, name="Old", is_active=False),
        make_category("c5", CategoryType.INCOME, name="Bonus", description="Year-end housing allowance"),
    ]
    result = filter_categories(categories, CategoryFilter(search="housing"))
    if [c.id for c in result.expense] != ["c1"] or [c.id for c in result.income] != ["c5"]:
        msg = f"Unexpected search result: {result}"
        raise AssertionError(msg)
    with_inactive = filter_categories(categories, CategoryFilter(type=CategoryType.EXPENSE, show_inactive=True))
    if [c.id for c in with_inactive.expense] != ["c1", "c2", "c4"] or with_inactive.income:
        msg = f"Unexpected type filter result: {with_inactive}"
        raise AssertionError(msg)
