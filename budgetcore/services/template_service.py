"""TemplateService applies catalog templates to new or existing budgets through a BudgetStore."""

import datetime as dt

from budgetcore.core.db import BudgetStore
from budgetcore.core.errors import BudgetNotFound, TemplateApplicationConflict
from budgetcore.core.models import Budget, BudgetMeta, MaterializedBudget, TemplatePreview
from budgetcore.core.settings import get_settings
from budgetcore.core.utils import get_logger
from budgetcore.services.materializer import (
    materialize,
    materialize_into,
    template_statistics,
    validate_template_application,
)
from budgetcore.templates import TemplateRegistry

logger = get_logger("budgetcore.templates")


class TemplateService:
    """Service for previewing templates and committing materialized budgets."""

    def __init__(self, store: BudgetStore) -> None:
        """Initialize TemplateService with a BudgetStore instance."""
        self.store = store

    def preview(self, template_id: str) -> TemplatePreview:
        """Return a template together with its statistics."""
        template = TemplateRegistry.get(template_id)
        return TemplatePreview(template=template, summary=template_statistics(template))

    def create_budget(
        self,
        meta: BudgetMeta,
        template_id: str | None = None,
        anchor_date: dt.date | None = None,
    ) -> MaterializedBudget:
        """Create a budget, optionally seeded from a template, and commit it as one unit.

        Without a template, ``meta.name`` is required. With a template, sample transaction dates resolve against
        ``anchor_date`` (today when omitted).
        """
        if template_id is None:
            if not meta.name:
                msg = "A budget name is required when no template is applied"
                raise ValueError(msg)
            budget = Budget(
                name=meta.name,
                description=meta.description or "",
                color=meta.color or get_settings().default_budget_color,
            )
            logger.info(f"Creating empty budget '{budget.name}'")
            return self.store.save_materialized(MaterializedBudget(budget=budget))

        template = TemplateRegistry.get(template_id)
        result = materialize(template, meta, anchor_date or dt.date.today())
        logger.info(f"Creating budget '{result.budget.name}' from template '{template_id}'")
        return self.store.save_materialized(result)

    def apply_to_budget(
        self, budget_id: str, template_id: str, anchor_date: dt.date | None = None
    ) -> MaterializedBudget:
        """Add a template's categories and transactions to an existing budget."""
        budget = self.store.get_budget(budget_id)
        if budget is None:
            raise BudgetNotFound(budget_id)
        template = TemplateRegistry.get(template_id)
        check = validate_template_application(
            template, self.store.list_categories(budget_id), self.store.list_transactions(budget_id)
        )
        for warning in check.warnings:
            logger.warning(f"Applying template '{template_id}' to budget {budget_id}: {warning}")
        if not check.can_apply:
            raise TemplateApplicationConflict(check.conflicts)
        result = materialize_into(budget, template, anchor_date or dt.date.today())
        return self.store.save_materialized(result, include_budget=False)
