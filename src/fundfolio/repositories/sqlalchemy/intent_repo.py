"""SQLAlchemy implementation of IntentRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from fundfolio.core.timezone import now_ist
from fundfolio.domain.models import TradeIntent, IntentStatus
from fundfolio.repositories.sqlalchemy.database import store_errors
from fundfolio.repositories.sqlalchemy.orm_models import TradeIntentORM


def _dec(value) -> Optional[Decimal]:
    return Decimal(str(value)) if value is not None else None


class SqlAlchemyIntentRepository:
    """SQLAlchemy-backed trade intent log."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, intent: TradeIntent) -> TradeIntent:
        """Persist a new intent."""
        with store_errors(self._db, "record trade intent"):
            orm_intent = TradeIntentORM(
                intent_id=intent.intent_id,
                user_id=intent.user_id,
                kind=intent.kind,
                status=intent.status,
                fund_id=intent.fund_id,
                units=intent.units,
                nav=intent.nav,
                amount=intent.amount,
                wallet_before=intent.wallet_before,
                wallet_after=intent.wallet_after,
                units_before=intent.units_before,
                purchase_nav_before=intent.purchase_nav_before,
                units_after=intent.units_after,
                purchase_nav_after=intent.purchase_nav_after,
                created_at=intent.created_at or now_ist(),
            )
            self._db.add(orm_intent)
            self._db.commit()
            self._db.refresh(orm_intent)
            return self._to_domain(orm_intent)

    def set_status(self, intent_id: str, status: IntentStatus) -> None:
        """Move an intent to a new status."""
        with store_errors(self._db, "update trade intent"):
            self._db.query(TradeIntentORM).filter(
                TradeIntentORM.intent_id == intent_id
            ).update({"status": status, "updated_at": now_ist()})
            self._db.commit()

    def list_pending(self, user_id: str) -> list[TradeIntent]:
        """List PENDING intents of a user, oldest first."""
        with store_errors(self._db, "load pending intents"):
            orm_intents = (
                self._db.query(TradeIntentORM)
                .filter(
                    TradeIntentORM.user_id == user_id,
                    TradeIntentORM.status == IntentStatus.PENDING,
                )
                .order_by(TradeIntentORM.created_at)
                .all()
            )
            return [self._to_domain(i) for i in orm_intents]

    def list_by_user(self, user_id: str, limit: int = 50) -> list[TradeIntent]:
        """List recent intents of a user, newest first."""
        with store_errors(self._db, "load activity"):
            orm_intents = (
                self._db.query(TradeIntentORM)
                .filter(TradeIntentORM.user_id == user_id)
                .order_by(TradeIntentORM.created_at.desc())
                .limit(limit)
                .all()
            )
            return [self._to_domain(i) for i in orm_intents]

    @staticmethod
    def _to_domain(orm: TradeIntentORM) -> TradeIntent:
        """Convert ORM model to domain model."""
        return TradeIntent(
            intent_id=orm.intent_id,
            user_id=orm.user_id,
            kind=orm.kind,
            status=orm.status,
            fund_id=orm.fund_id,
            units=_dec(orm.units),
            nav=_dec(orm.nav),
            amount=_dec(orm.amount),
            wallet_before=_dec(orm.wallet_before),
            wallet_after=_dec(orm.wallet_after),
            units_before=_dec(orm.units_before),
            purchase_nav_before=_dec(orm.purchase_nav_before),
            units_after=_dec(orm.units_after),
            purchase_nav_after=_dec(orm.purchase_nav_after),
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
