"""budgetcore: budget templates, template materialization and transaction queries."""

__version__ = "1.0.0"
