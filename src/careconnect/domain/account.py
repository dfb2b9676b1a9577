"""Account domain service."""

from functools import lru_cache
from typing import Optional
from datetime import date

import structlog

from careconnect.database.base import Database
from careconnect.domain.entities import Account as AccountEntity
from careconnect.domain.errors import (
    AuthError,
    ValidationError,
    INVALID_CREDENTIALS,
    PASSWORDS_DO_NOT_MATCH,
    missing_field,
)
from careconnect.utils.passwords import hash_password, verify_password

logger = structlog.get_logger()


@lru_cache
def _unknown_account_hash() -> str:
    """Hash checked for unknown emails so they cost as much as a wrong password."""
    return hash_password("careconnect-unknown-account")


class AccountService:
    """Service for registering, authenticating and removing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def register(
        self,
        fullname: str,
        email: str,
        password: str,
        confirm_password: str,
        dob: date,
        phone: str,
        state: str,
    ) -> int:
        """Register a new account.

        Args:
            fullname: Full name
            email: Email address, unique across accounts
            password: Plaintext password (only its hash is stored)
            confirm_password: Must equal password
            dob: Date of birth
            phone: Phone number
            state: Region or state

        Returns:
            Account ID

        Raises:
            ValidationError: If a field is blank or the passwords differ
            ConflictError: If the email is already registered
        """
        fullname = (fullname or "").strip()
        email = (email or "").strip()
        phone = (phone or "").strip()
        state = (state or "").strip()
        required = {
            "fullname": fullname,
            "email": email,
            "password": password,
            "phone": phone,
            "state": state,
        }
        for field_name, value in required.items():
            if not value:
                raise ValidationError(missing_field(field_name))
        if dob is None:
            raise ValidationError(missing_field("dob"))

        if password != confirm_password:
            raise ValidationError(PASSWORDS_DO_NOT_MATCH)

        account_id = self.db.create_account(
            fullname=fullname,
            email=email,
            password_hash=hash_password(password),
            dob=dob,
            phone=phone,
            state=state,
        )
        logger.info("account_registered", account_id=account_id)
        return account_id

    def authenticate(self, email: str, password: str) -> AccountEntity:
        """Check an email/password pair.

        Returns:
            The account, without its credential hash

        Raises:
            AuthError: If the email is unknown or the password is wrong
        """
        email = (email or "").strip()
        credentials = self.db.get_credentials(email) if email else None
        # Always run the hash check so unknown emails take as long as known ones
        stored_hash = credentials.password_hash if credentials else _unknown_account_hash()
        if not verify_password(password or "", stored_hash) or credentials is None:
            logger.info("login_failed", email=email)
            raise AuthError(INVALID_CREDENTIALS)

        account = self.db.get_account(credentials.account_id)
        if account is None:
            # Deleted between the two reads
            raise AuthError(INVALID_CREDENTIALS)
        return account

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def get_account_by_email(self, email: str) -> Optional[AccountEntity]:
        """Get account by email, or None if no account uses it."""
        return self.db.get_account_by_email(email.strip())

    def delete_account(self, account_id: int) -> int:
        """Delete an account.

        Donations made by the account are kept and become anonymous; the
        two steps happen in one transaction.

        Args:
            account_id: Account ID to delete

        Returns:
            Number of donations that were anonymized

        Raises:
            NotFoundError: If account not found
        """
        anonymized = self.db.delete_account(account_id)
        logger.info("account_deleted", account_id=account_id, anonymized_donations=anonymized)
        return anonymized
