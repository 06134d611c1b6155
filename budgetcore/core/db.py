"""DB connection and persistence helpers for budgetcore."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    create_engine,
    func,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from budgetcore.core.models import Budget, Category, MaterializedBudget, Transaction
from budgetcore.core.utils import calendar_day, get_logger

Base = declarative_base()
logger = get_logger("budgetcore.store")


class BudgetRow(Base):
    """A persisted budget."""

    __tablename__ = "budgets"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    color = Column(String, nullable=False)
    is_archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


class CategoryRow(Base):
    """A persisted category, owned by one budget."""

    __tablename__ = "categories"
    __table_args__ = (CheckConstraint("planned_amount >= 0", name="ck_category_planned_non_negative"),)
    id = Column(String, primary_key=True)
    budget_id = Column(String, ForeignKey("budgets.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    planned_amount = Column(Float, nullable=False, default=0.0)
    color = Column(String, nullable=False)
    icon = Column(String, nullable=False, default="")
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    position = Column(Integer, nullable=False, default=0)


class TransactionRow(Base):
    """A persisted transaction; ``amount`` holds the unsigned magnitude."""

    __tablename__ = "transactions"
    __table_args__ = (CheckConstraint("amount >= 0", name="ck_transaction_amount_non_negative"),)
    id = Column(String, primary_key=True)
    budget_id = Column(String, ForeignKey("budgets.id"), nullable=False, index=True)
    category_id = Column(String, ForeignKey("categories.id"), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    amount = Column(Float, nullable=False)
    date = Column(Date, nullable=False)
    is_posted = Column(Boolean, nullable=False, default=True)
    is_recurring = Column(Boolean, nullable=False, default=False)
    frequency = Column(String, nullable=True)
    day_of_month = Column(Integer, nullable=True)
    position = Column(Integer, nullable=False, default=0)


def get_engine(url: str | None = None) -> Engine:
    """Create a SQLAlchemy engine using the configured database URL."""
    from budgetcore.core.settings import get_settings

    settings = get_settings()
    url = url or settings.database_url
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=settings.database_echo, connect_args=connect_args)


engine = get_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_store() -> "BudgetStore":
    """Get a BudgetStore instance using a SQLAlchemy session."""
    session = SessionLocal()
    return BudgetStore(session)


def _budget_row(budget: Budget) -> BudgetRow:
    return BudgetRow(
        id=budget.id,
        name=budget.name,
        description=budget.description,
        color=budget.color,
        is_archived=budget.is_archived,
        created_at=budget.created_at,
    )


def _category_row(category: Category, position: int) -> CategoryRow:
    return CategoryRow(
        id=category.id,
        budget_id=category.budget_id,
        name=category.name,
        type=category.type.value,
        planned_amount=category.planned_amount,
        color=category.color,
        icon=category.icon,
        description=category.description,
        is_active=category.is_active,
        position=position,
    )


def _transaction_row(transaction: Transaction, position: int) -> TransactionRow:
    return TransactionRow(
        id=transaction.id,
        budget_id=transaction.budget_id,
        category_id=transaction.category_id,
        description=transaction.description,
        amount=transaction.amount,
        date=calendar_day(transaction.date),
        is_posted=transaction.is_posted,
        is_recurring=bool(transaction.is_recurring),
        frequency=transaction.frequency.value if transaction.frequency else None,
        day_of_month=transaction.day_of_month,
        position=position,
    )


class BudgetStore:
    """Persistence helper for budgets, categories and transactions using SQLAlchemy.

    Every write method issues exactly one commit, so a multi-entity write is either fully visible or not at all.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the BudgetStore with a SQLAlchemy session."""
        self.session = session

    def save_budget(self, budget: Budget) -> Budget:
        """Persist a single budget without categories or transactions."""
        return self.save_materialized(MaterializedBudget(budget=budget)).budget

    def save_materialized(self, result: MaterializedBudget, *, include_budget: bool = True) -> MaterializedBudget:
        """Persist a budget with its categories and transactions in one database transaction.

        With ``include_budget=False`` the budget is assumed to exist already and only the categories and
        transactions are written. On any database error the whole unit is rolled back and the error re-raised.
        """
        rows: list[Base] = []
        if include_budget:
            rows.append(_budget_row(result.budget))
        try:
            category_offset = 0 if include_budget else self._count(CategoryRow, result.budget.id)
            transaction_offset = 0 if include_budget else self._count(TransactionRow, result.budget.id)
            rows.extend(
                _category_row(category, category_offset + index) for index, category in enumerate(result.categories)
            )
            rows.extend(
                _transaction_row(transaction, transaction_offset + index)
                for index, transaction in enumerate(result.transactions)
            )
            self.session.add_all(rows)
            self.session.commit()
        except SQLAlchemyError:
            logger.exception(f"Rolling back write for budget {result.budget.id}")
            self.session.rollback()
            raise
        logger.info(
            f"Committed budget {result.budget.id}: "
            f"{len(result.categories)} categories, {len(result.transactions)} transactions"
        )
        return result

    def _count(self, row_type: type[CategoryRow] | type[TransactionRow], budget_id: str) -> int:
        stmt = select(func.count()).select_from(row_type).where(row_type.budget_id == budget_id)
        return self.session.scalar(stmt) or 0

    def get_budget(self, budget_id: str) -> Budget | None:
        """Retrieve a budget by its ID."""
        row = self.session.get(BudgetRow, budget_id)
        if row is None:
            return None
        return Budget.model_validate(row)

    def list_budgets(self, *, include_archived: bool = False) -> list[Budget]:
        """List budgets, oldest first."""
        stmt = select(BudgetRow).order_by(BudgetRow.created_at)
        if not include_archived:
            stmt = stmt.where(BudgetRow.is_archived.is_(False))
        return [Budget.model_validate(row) for row in self.session.scalars(stmt)]

    def list_categories(self, budget_id: str) -> list[Category]:
        """List the categories of a budget in insertion order."""
        stmt = select(CategoryRow).where(CategoryRow.budget_id == budget_id).order_by(CategoryRow.position)
        return [Category.model_validate(row) for row in self.session.scalars(stmt)]

    def list_transactions(self, budget_id: str) -> list[Transaction]:
        """List the transactions of a budget in insertion order."""
        stmt = select(TransactionRow).where(TransactionRow.budget_id == budget_id).order_by(TransactionRow.position)
        return [Transaction.model_validate(row) for row in self.session.scalars(stmt)]

    def close(self) -> None:
        """Close the SQLAlchemy session."""
        self.session.close()
