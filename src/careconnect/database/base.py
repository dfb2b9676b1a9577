"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from careconnect.domain.entities import (
    Account,
    DonationRecord,
    StoredCredentials,
)


class Database(ABC):
    """Abstract database interface for careconnect.

    Every operation is one logical transaction: it either takes effect in
    full or leaves the store untouched.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        fullname: str,
        email: str,
        password_hash: str,
        dob: date,
        phone: str,
        state: str,
    ) -> int:
        """Create a new account. Returns account ID.

        Raises:
            ConflictError: If the email is already registered
        """
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_email(self, email: str) -> Optional[Account]:
        """Get account by exact email."""
        pass

    @abstractmethod
    def get_credentials(self, email: str) -> Optional[StoredCredentials]:
        """Get the stored credential hash for an email."""
        pass

    @abstractmethod
    def delete_account(self, account_id: int) -> int:
        """Anonymize the account's donations and delete the account atomically.

        Returns:
            Number of donation records whose donor reference was cleared

        Raises:
            NotFoundError: If the account does not exist
        """
        pass

    # Donation operations
    @abstractmethod
    def create_donation(
        self,
        name: str,
        expiry_date: date,
        quantity: int,
        donor_email: str,
    ) -> tuple[int, Optional[int]]:
        """Record a donation, linking it to the account registered under
        ``donor_email`` when one exists.

        Returns:
            Tuple of (donation ID, donor account ID or None)
        """
        pass

    @abstractmethod
    def get_donation(self, donation_id: int) -> Optional[DonationRecord]:
        """Get donation by ID, with donor name resolved."""
        pass

    @abstractmethod
    def list_donations(self, donor_id: Optional[int] = None) -> list[DonationRecord]:
        """List donations, newest first.

        Args:
            donor_id: If given, only donations currently linked to this account
        """
        pass
