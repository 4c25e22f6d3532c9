"""SQLAlchemy implementation of HoldingRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from fundfolio.core.exceptions import StoreError
from fundfolio.core.timezone import now_ist
from fundfolio.domain.models import Holding
from fundfolio.repositories.sqlalchemy.database import store_errors
from fundfolio.repositories.sqlalchemy.orm_models import HoldingORM


class SqlAlchemyHoldingRepository:
    """SQLAlchemy-backed holding repository. Every call commits on its own."""

    def __init__(self, db: Session):
        self._db = db

    def list_by_user(self, user_id: str) -> list[Holding]:
        """List all holdings of a user."""
        with store_errors(self._db, "load holdings"):
            orm_holdings = (
                self._db.query(HoldingORM)
                .filter(HoldingORM.user_id == user_id)
                .order_by(HoldingORM.fund_id)
                .all()
            )
            return [self._to_domain(h) for h in orm_holdings]

    def get(self, user_id: str, fund_id: str) -> Optional[Holding]:
        """Get one holding."""
        with store_errors(self._db, "load holding"):
            orm_holding = self._find(user_id, fund_id)
            return self._to_domain(orm_holding) if orm_holding else None

    def insert(self, holding: Holding) -> Holding:
        """Insert a new holding row."""
        with store_errors(self._db, "insert holding"):
            orm_holding = HoldingORM(
                user_id=holding.user_id,
                fund_id=holding.fund_id,
                units=holding.units,
                purchase_nav=holding.purchase_nav,
                updated_at=now_ist(),
            )
            self._db.add(orm_holding)
            self._db.commit()
            self._db.refresh(orm_holding)
            return self._to_domain(orm_holding)

    def update(self, holding: Holding) -> Holding:
        """Update units and purchase NAV of an existing holding."""
        with store_errors(self._db, "update holding"):
            orm_holding = self._find(holding.user_id, holding.fund_id)
            if not orm_holding:
                raise StoreError(f"Holding not found: {holding.fund_id}")
            orm_holding.units = holding.units
            orm_holding.purchase_nav = holding.purchase_nav
            orm_holding.updated_at = now_ist()
            self._db.commit()
            self._db.refresh(orm_holding)
            return self._to_domain(orm_holding)

    def delete(self, user_id: str, fund_id: str) -> None:
        """Delete a holding row (no-op if absent)."""
        with store_errors(self._db, "delete holding"):
            self._db.query(HoldingORM).filter(
                HoldingORM.user_id == user_id,
                HoldingORM.fund_id == fund_id,
            ).delete()
            self._db.commit()

    def _find(self, user_id: str, fund_id: str) -> Optional[HoldingORM]:
        return (
            self._db.query(HoldingORM)
            .filter(
                HoldingORM.user_id == user_id,
                HoldingORM.fund_id == fund_id,
            )
            .first()
        )

    @staticmethod
    def _to_domain(orm: HoldingORM) -> Holding:
        """Convert ORM model to domain model."""
        return Holding(
            user_id=orm.user_id,
            fund_id=orm.fund_id,
            units=Decimal(str(orm.units)) if orm.units else Decimal("0"),
            purchase_nav=Decimal(str(orm.purchase_nav)) if orm.purchase_nav else Decimal("0"),
            updated_at=orm.updated_at,
        )
