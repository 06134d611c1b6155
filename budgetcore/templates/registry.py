"""Template registry for looking up built-in budget templates by id.

Templates are static reference data; the registry is filled once at import time by the catalog module.
"""

from typing import ClassVar

from budgetcore.core.errors import TemplateNotFound
from budgetcore.core.models import BudgetTemplate


class TemplateRegistry:
    """Registry of budget templates."""

    _registry: ClassVar[dict[str, BudgetTemplate]] = {}

    @classmethod
    def register(cls, template: BudgetTemplate) -> None:
        """Register a template under its id."""
        cls._registry[template.id] = template

    @classmethod
    def unregister(cls, template_id: str) -> None:
        """Remove a template; unknown ids are ignored."""
        cls._registry.pop(template_id, None)

    @classmethod
    def get(cls, template_id: str) -> BudgetTemplate:
        """Retrieve a template by id, raising TemplateNotFound if it is unknown."""
        try:
            return cls._registry[template_id]
        except KeyError:
            raise TemplateNotFound(template_id) from None

    @classmethod
    def available(cls) -> list[str]:
        """List all registered template ids."""
        return list(cls._registry.keys())

    @classmethod
    def all(cls) -> list[BudgetTemplate]:
        """List all registered templates in registration order."""
        return list(cls._registry.values())


def get_template_by_id(template_id: str) -> BudgetTemplate | None:
    """Return the template registered under ``template_id``, or None."""
    try:
        return TemplateRegistry.get(template_id)
    except TemplateNotFound:
        return None
