"""SQLAlchemy ORM model definitions."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    DateTime,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from fundfolio.repositories.sqlalchemy.database import Base
from fundfolio.domain.models.enums import TradeKind, IntentStatus


class UserORM(Base):
    """SQLAlchemy model for User."""

    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    wallet = relationship("WalletORM", back_populates="user", uselist=False)
    holdings = relationship("HoldingORM", back_populates="user")


class WalletORM(Base):
    """SQLAlchemy model for Wallet (one row per user)."""

    __tablename__ = "wallets"

    user_id = Column(String(36), ForeignKey("users.user_id"), primary_key=True)
    balance = Column(Numeric(precision=18, scale=2), nullable=False, default=Decimal("0"))
    updated_at = Column(DateTime, nullable=True)

    user = relationship("UserORM", back_populates="wallet")


class HoldingORM(Base):
    """SQLAlchemy model for Holding (one row per user and fund)."""

    __tablename__ = "holdings"

    user_id = Column(String(36), ForeignKey("users.user_id"), primary_key=True)
    fund_id = Column(String(20), primary_key=True)
    units = Column(Numeric(precision=18, scale=8), nullable=False)
    purchase_nav = Column(Numeric(precision=18, scale=6), nullable=False)
    updated_at = Column(DateTime, nullable=True)

    user = relationship("UserORM", back_populates="holdings")


class TradeIntentORM(Base):
    """SQLAlchemy model for TradeIntent (durable operation log)."""

    __tablename__ = "trade_intents"

    intent_id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    kind = Column(SqlEnum(TradeKind), nullable=False)
    status = Column(SqlEnum(IntentStatus), nullable=False, default=IntentStatus.PENDING)
    fund_id = Column(String(20), nullable=True)
    units = Column(Numeric(precision=18, scale=8), nullable=True)
    nav = Column(Numeric(precision=18, scale=6), nullable=True)
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    wallet_before = Column(Numeric(precision=18, scale=2), nullable=False)
    wallet_after = Column(Numeric(precision=18, scale=2), nullable=False)
    units_before = Column(Numeric(precision=18, scale=8), nullable=True)
    purchase_nav_before = Column(Numeric(precision=18, scale=6), nullable=True)
    units_after = Column(Numeric(precision=18, scale=8), nullable=True)
    purchase_nav_after = Column(Numeric(precision=18, scale=6), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True)
