"""FastAPI endpoints for budgetcore.

This module defines the API routes for browsing budget templates, creating budgets from templates, applying a
template to an existing budget, and querying a budget's transactions. It wires together the template catalog,
the template service, the query engine and the store.
"""

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query

from budgetcore.api.dependencies import get_db_store, get_template_service
from budgetcore.core.db import BudgetStore
from budgetcore.core.errors import BudgetNotFound, TemplateApplicationConflict, TemplateError, TemplateNotFound
from budgetcore.core.models import (
    ApplyTemplateRequest,
    Budget,
    BudgetSummary,
    CreateBudgetRequest,
    DateRange,
    FilterSpec,
    MaterializedBudget,
    QueryResult,
    TemplatePreview,
)
from budgetcore.core.utils import get_logger
from budgetcore.services.aggregation import budget_summary
from budgetcore.services.query import query
from budgetcore.services.template_service import TemplateService
from budgetcore.templates import TemplateRegistry

router = APIRouter()
logger = get_logger("budgetcore.api")


def _template_failure(exc: TemplateError) -> HTTPException:
    logger.exception(f"Malformed template: {exc}")
    return HTTPException(500, {"error": type(exc).__name__, "message": str(exc)})


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get(
    "/templates",
    response_model=list[TemplatePreview],
    summary="List budget templates",
    description="List every built-in budget template together with its category counts and planned totals.",
    response_description="Templates with their previews.",
)
def list_templates(service: TemplateService = Depends(get_template_service)) -> list[TemplatePreview]:
    """List all templates with their previews."""
    return [service.preview(template_id) for template_id in TemplateRegistry.available()]


@router.get(
    "/templates/{template_id}",
    response_model=TemplatePreview,
    summary="Preview a budget template",
    description=(
        "Return a template and a side-effect-free summary of what applying it would create.\n\n"
        "**Path parameter:**\n"
        "- `template_id`: The template identifier, e.g. `personal-monthly`.\n\n"
        "**Response:**\n"
        "- 200 OK: Template and summary.\n"
        "- 404 Not Found: If the template does not exist."
    ),
    responses={
        404: {
            "description": "Template not found.",
            "content": {"application/json": {"example": {"detail": "Template not found: missing"}}},
        },
    },
)
def get_template(template_id: str, service: TemplateService = Depends(get_template_service)) -> TemplatePreview:
    """Preview a single template."""
    try:
        return service.preview(template_id)
    except TemplateNotFound as exc:
        raise HTTPException(404, str(exc)) from exc


@router.post(
    "/budgets",
    status_code=201,
    response_model=MaterializedBudget,
    summary="Create a budget, optionally from a template",
    description=(
        "Create a budget. When `template_id` is given, the template's categories and sample transactions are "
        "created with it in one atomic write; sample dates resolve relative to `anchor_date` (today by default).\n\n"
        "**Response:**\n"
        "- 201 Created: The budget with its categories and transactions.\n"
        "- 400 Bad Request: No template and no name.\n"
        "- 404 Not Found: Unknown template.\n"
        "- 500 Internal Server Error: The template is malformed; nothing is created."
    ),
    responses={
        400: {"description": "Missing budget name."},
        404: {"description": "Template not found."},
        500: {"description": "Malformed template."},
    },
)
def create_budget(
    request: CreateBudgetRequest, service: TemplateService = Depends(get_template_service)
) -> MaterializedBudget:
    """Create a budget, seeding it from a template when one is named."""
    logger.info(f"Received budget creation request: template_id={request.template_id}")
    try:
        return service.create_budget(request, request.template_id, request.anchor_date)
    except TemplateNotFound as exc:
        raise HTTPException(404, str(exc)) from exc
    except TemplateError as exc:
        raise _template_failure(exc) from exc
    except ValueError as exc:
        raise HTTPException(400, str(exc)) from exc


@router.get(
    "/budgets",
    response_model=list[Budget],
    summary="List budgets",
    description="List budgets, oldest first. Archived budgets are hidden unless `include_archived` is set.",
)
def list_budgets(include_archived: bool = False, store: BudgetStore = Depends(get_db_store)) -> list[Budget]:
    """List budgets."""
    return store.list_budgets(include_archived=include_archived)


@router.post(
    "/budgets/{budget_id}/templates/{template_id}",
    status_code=201,
    response_model=MaterializedBudget,
    summary="Apply a template to an existing budget",
    description=(
        "Add a template's categories and sample transactions to an existing budget.\n\n"
        "**Response:**\n"
        "- 201 Created: The categories and transactions that were added.\n"
        "- 404 Not Found: Unknown budget or template.\n"
        "- 409 Conflict: The budget already has categories with the same names."
    ),
    responses={
        404: {"description": "Budget or template not found."},
        409: {"description": "Category name conflicts."},
        500: {"description": "Malformed template."},
    },
)
def apply_template(
    budget_id: str,
    template_id: str,
    request: ApplyTemplateRequest | None = None,
    service: TemplateService = Depends(get_template_service),
) -> MaterializedBudget:
    """Apply a template to an existing budget."""
    anchor_date = request.anchor_date if request else None
    try:
        return service.apply_to_budget(budget_id, template_id, anchor_date)
    except (BudgetNotFound, TemplateNotFound) as exc:
        raise HTTPException(404, str(exc)) from exc
    except TemplateApplicationConflict as exc:
        logger.warning(f"Template '{template_id}' conflicts with budget {budget_id}: {exc}")
        raise HTTPException(409, exc.conflicts) from exc
    except TemplateError as exc:
        raise _template_failure(exc) from exc


@router.get(
    "/budgets/{budget_id}/transactions",
    response_model=QueryResult,
    summary="Query a budget's transactions",
    description=(
        "Filter, group and aggregate a budget's transactions. All filters are optional and combined with AND. "
        "`category_ids` (repeatable) takes precedence over `category_id`. `start`/`end` are inclusive calendar "
        "days. With `chronological=true` a single timeline replaces the income/expense columns."
    ),
    responses={404: {"description": "Budget not found."}},
)
def query_transactions(
    budget_id: str,
    search: str | None = None,
    category_id: str | None = None,
    category_ids: list[str] | None = Query(default=None),
    is_posted: bool | None = None,
    is_recurring: bool | None = None,
    start: dt.date | None = None,
    end: dt.date | None = None,
    chronological: bool = False,
    store: BudgetStore = Depends(get_db_store),
) -> QueryResult:
    """Run the transaction query engine over a stored budget."""
    if store.get_budget(budget_id) is None:
        raise HTTPException(404, f"Budget not found: {budget_id}")
    date_range = None
    if start is not None or end is not None:
        date_range = DateRange(start=start or dt.date.min, end=end or dt.date.max)
    spec = FilterSpec(
        search=search,
        category_id=category_id,
        category_ids=[cid for cid in category_ids or () if cid] or None,
        is_posted=is_posted,
        is_recurring=is_recurring,
        date_range=date_range,
    )
    return query(
        store.list_transactions(budget_id), store.list_categories(budget_id), spec, chronological=chronological
    )


@router.get(
    "/budgets/{budget_id}/summary",
    response_model=BudgetSummary,
    summary="Budget summary",
    description="Planned versus actual income and expense totals for a budget.",
    responses={404: {"description": "Budget not found."}},
)
def get_budget_summary(budget_id: str, store: BudgetStore = Depends(get_db_store)) -> BudgetSummary:
    """Summarize a stored budget."""
    if store.get_budget(budget_id) is None:
        raise HTTPException(404, f"Budget not found: {budget_id}")
    return budget_summary(store.list_categories(budget_id), store.list_transactions(budget_id))
