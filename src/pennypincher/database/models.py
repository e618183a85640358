"""SQLAlchemy models for pennypincher database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Category(Base):
    """Category model; parent_id points at a main category."""

    __tablename__ = "categories"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    parent_id = Column(String, ForeignKey("categories.id"), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    parent = relationship("Category", remote_side=[id], backref="children")


class Currency(Base):
    """Currency model."""

    __tablename__ = "currencies"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    code = Column(String, nullable=False)
    name = Column(String, nullable=False)
    symbol = Column(String, nullable=False)


class PaymentMethod(Base):
    """Payment method model."""

    __tablename__ = "payment_methods"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)


class IncomeSource(Base):
    """Income source model."""

    __tablename__ = "income_sources"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category_id = Column(String, ForeignKey("categories.id"), nullable=False)
    currency_id = Column(String, nullable=False)
    payment_method_id = Column(String, ForeignKey("payment_methods.id"), nullable=True)
    is_subscription = Column(Boolean, default=False, nullable=False)
    next_due_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_expenses_user_date", "user_id", "date"),)

    # Relationships
    category = relationship("Category")


class Income(Base):
    """Income model."""

    __tablename__ = "incomes"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    income_source_id = Column(String, ForeignKey("income_sources.id"), nullable=False)
    currency_id = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_incomes_user_date", "user_id", "date"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
