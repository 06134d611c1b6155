"""Exception hierarchy for budgetcore.

Template errors signal a malformed catalog entry and are never recovered from by
skipping data. Lookup errors signal an unknown id supplied by a caller.
"""


class BudgetCoreError(Exception):
    """Base class for all budgetcore errors."""


class TemplateError(BudgetCoreError):
    """A budget template violates its own structural invariants."""


class DuplicateCategoryName(TemplateError):
    """Two categories inside one template share the same name."""

    def __init__(self, name: str, template_id: str | None = None) -> None:
        """Record the duplicated category name."""
        self.name = name
        self.template_id = template_id
        where = f" in template '{template_id}'" if template_id else ""
        super().__init__(f"Duplicate category name '{name}'{where}")


class MissingCategoryReference(TemplateError):
    """A template transaction names a category the template does not define."""

    def __init__(self, category_name: str, template_id: str | None = None) -> None:
        """Record the unresolved category name."""
        self.category_name = category_name
        self.template_id = template_id
        where = f" in template '{template_id}'" if template_id else ""
        super().__init__(f"Transaction references unknown category '{category_name}'{where}")


class TemplateNotFound(BudgetCoreError, LookupError):
    """No template is registered under the requested id."""

    def __init__(self, template_id: str) -> None:
        """Record the unknown template id."""
        self.template_id = template_id
        super().__init__(f"Template not found: {template_id}")


class BudgetNotFound(BudgetCoreError, LookupError):
    """No budget is stored under the requested id."""

    def __init__(self, budget_id: str) -> None:
        """Record the unknown budget id."""
        self.budget_id = budget_id
        super().__init__(f"Budget not found: {budget_id}")


class TemplateApplicationConflict(BudgetCoreError):
    """A template cannot be applied to an existing budget without clashing."""

    def __init__(self, conflicts: list[str]) -> None:
        """Record the conflicts that blocked the application."""
        self.conflicts = conflicts
        super().__init__("; ".join(conflicts))
