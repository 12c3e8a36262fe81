# server/core/user_store.py

import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from core.errors import DuplicateUserError, StoreError
from models.user import User


logger = logging.getLogger(__name__)


class UserStore:
    """
    User persistence over a SQLAlchemy session.
    The unique index on ``users.email`` is what finally decides duplicate registrations.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("User lookup failed: %s", e.__class__.__name__)
            raise StoreError("Could not read user") from e

    def add(self, username: str, email: str, password_hash: str) -> User:
        user = User(username=username, email=email, password_hash=password_hash)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateUserError() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("User insert failed: %s", e.__class__.__name__)
            raise StoreError() from e
        return user
