"""SQLAlchemy implementation of UserRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from fundfolio.domain.models import User
from fundfolio.repositories.sqlalchemy.database import store_errors
from fundfolio.repositories.sqlalchemy.orm_models import UserORM


class SqlAlchemyUserRepository:
    """SQLAlchemy-backed user repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, user: User) -> User:
        """Persist a new user."""
        with store_errors(self._db, "create user"):
            orm_user = UserORM(
                user_id=user.user_id,
                email=user.email,
                password_hash=user.password_hash,
                created_at=user.created_at,
            )
            self._db.add(orm_user)
            self._db.commit()
            self._db.refresh(orm_user)
            return self._to_domain(orm_user)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID."""
        with store_errors(self._db, "load user"):
            orm_user = self._db.query(UserORM).filter(UserORM.user_id == user_id).first()
            return self._to_domain(orm_user) if orm_user else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve user by email."""
        with store_errors(self._db, "load user"):
            orm_user = self._db.query(UserORM).filter(UserORM.email == email).first()
            return self._to_domain(orm_user) if orm_user else None

    @staticmethod
    def _to_domain(orm: UserORM) -> User:
        """Convert ORM model to domain model."""
        return User(
            user_id=orm.user_id,
            email=orm.email,
            password_hash=orm.password_hash,
            created_at=orm.created_at,
        )
