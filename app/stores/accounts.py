"""
GetUs.Fit API - Identity Store.

Account records: creation, lookup, role changes and cascading deletion.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.account import Account, Role
from app.utils.errors import ConflictError, ValidationError


class AccountStore:
    """Store for accounts."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, account_id: int) -> Optional[Account]:
        """Get an account by ID."""
        return self.db.get(Account, account_id)

    def find_by_username(self, username: str) -> Optional[Account]:
        """Case-insensitive username lookup."""
        return self.db.scalars(
            select(Account).where(func.lower(Account.username) == username.lower())
        ).first()

    def create(self, username: str, password_hash: str) -> Account:
        """
        Create a new account with the default ``user`` role.

        Raises:
            ConflictError: Username already taken (in any letter case).
        """
        if self.find_by_username(username) is not None:
            raise ConflictError("Username already taken.")

        account = Account(username=username, password_hash=password_hash, role=Role.USER.value)
        self.db.add(account)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            self.db.rollback()
            raise ConflictError("Username already taken.")
        self.db.refresh(account)
        return account

    def list_all(self) -> List[Account]:
        """List all accounts ordered by id."""
        return list(self.db.scalars(select(Account).order_by(Account.id)))

    def set_role(self, account: Account, role: str) -> Account:
        """
        Change an account's role. Existing assignment edges are left intact.

        Raises:
            ValidationError: Role is not one of the known values.
        """
        if role not in Role.values():
            raise ValidationError(f"Role must be one of: {', '.join(Role.values())}.")
        account.role = role
        self.db.commit()
        return account

    def delete(self, account: Account) -> None:
        """Delete an account with every resource and edge referencing it."""
        self.db.delete(account)
        self.db.commit()
