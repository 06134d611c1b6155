"""Templates package: provides the template registry and the built-in template catalog."""

from .catalog import BUDGET_TEMPLATES  # noqa: F401
from .registry import TemplateRegistry, get_template_by_id  # noqa: F401
