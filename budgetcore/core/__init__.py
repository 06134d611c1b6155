"""Core package: provides models, errors, database helpers, settings, and shared utilities."""

from .db import BudgetStore, get_store  # noqa: F401
from .errors import DuplicateCategoryName, MissingCategoryReference  # noqa: F401
from .models import Budget, Category, Transaction  # noqa: F401
from .settings import Settings  # noqa: F401
from .utils import get_logger  # noqa: F401
