"""Services package: template materialization, transaction queries and shared aggregation helpers."""

from .materializer import materialize, summarize  # noqa: F401
from .query import query  # noqa: F401
from .template_service import TemplateService  # noqa: F401
