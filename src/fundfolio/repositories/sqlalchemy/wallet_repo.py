"""SQLAlchemy implementation of WalletRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from fundfolio.core.timezone import now_ist
from fundfolio.domain.models import Wallet
from fundfolio.repositories.sqlalchemy.database import store_errors
from fundfolio.repositories.sqlalchemy.orm_models import WalletORM


class SqlAlchemyWalletRepository:
    """SQLAlchemy-backed wallet repository. Every call commits on its own."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, user_id: str) -> Optional[Wallet]:
        """Get the wallet for a user."""
        with store_errors(self._db, "load wallet"):
            orm_wallet = self._db.query(WalletORM).filter(WalletORM.user_id == user_id).first()
            return self._to_domain(orm_wallet) if orm_wallet else None

    def set_balance(self, user_id: str, balance: Decimal) -> Wallet:
        """Set the wallet balance to an absolute value (insert if missing)."""
        with store_errors(self._db, "update wallet"):
            orm_wallet = self._db.query(WalletORM).filter(WalletORM.user_id == user_id).first()
            if orm_wallet:
                orm_wallet.balance = balance
                orm_wallet.updated_at = now_ist()
            else:
                orm_wallet = WalletORM(user_id=user_id, balance=balance, updated_at=now_ist())
                self._db.add(orm_wallet)

            self._db.commit()
            self._db.refresh(orm_wallet)
            return self._to_domain(orm_wallet)

    @staticmethod
    def _to_domain(orm: WalletORM) -> Wallet:
        """Convert ORM model to domain model."""
        return Wallet(
            user_id=orm.user_id,
            balance=Decimal(str(orm.balance)) if orm.balance else Decimal("0"),
            updated_at=orm.updated_at,
        )
