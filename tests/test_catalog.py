"""Tests for the built-in template catalog and registry."""

import pytest

from budgetcore.core.errors import TemplateNotFound
from budgetcore.core.models import BudgetTemplate
from budgetcore.services.materializer import check_template
from budgetcore.templates import BUDGET_TEMPLATES, TemplateRegistry, get_template_by_id


@pytest.mark.parametrize("template", BUDGET_TEMPLATES, ids=lambda t: t.id)
def test_builtin_templates_are_well_formed(template: BudgetTemplate) -> None:
    """Unique category names and resolvable sample transactions."""
    check_template(template)


def test_registry_lists_builtin_templates_in_order() -> None:
    """Exactly the four built-ins are registered."""
    expected = ["personal-monthly", "student-budget", "family-budget", "business-budget"]
    if TemplateRegistry.available() != expected:
        msg = f"Expected {expected}, got {TemplateRegistry.available()}"
        raise AssertionError(msg)


def test_lookup_by_id() -> None:
    """Known ids resolve; unknown ids give None or TemplateNotFound."""
    template = get_template_by_id("student-budget")
    if template is None or template.name != "Student Budget":
        msg = f"Expected the student template, got {template}"
        raise AssertionError(msg)
    if get_template_by_id("nope") is not None:
        msg = "Expected None for an unknown template id"
        raise AssertionError(msg)
    with pytest.raises(TemplateNotFound):
        TemplateRegistry.get("nope")


def test_templates_are_immutable() -> None:
    """Catalog entries cannot be modified in place."""
    template = get_template_by_id("family-budget")
    with pytest.raises(ValueError):
        template.name = "Changed"
