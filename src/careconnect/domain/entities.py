"""Domain model entities for careconnect.

These are pure data classes representing business concepts, independent of
database schema. The credential hash lives in its own entity so that an
``Account`` can be handed to any caller without leaking it.
"""

from dataclasses import dataclass
from datetime import datetime, date
from typing import Optional


@dataclass(frozen=True)
class Account:
    """Registered user identity."""

    id: int
    fullname: str
    email: str
    dob: date
    phone: str
    state: str
    created_at: datetime


@dataclass(frozen=True)
class StoredCredentials:
    """Credential hash for an account, looked up by email."""

    account_id: int
    email: str
    password_hash: str


@dataclass(frozen=True)
class DonationRecord:
    """Medicine donation ledger entry.

    ``donor_id`` is None for anonymous donations and for donations whose
    donor account has since been deleted. ``donor_name`` is only filled in
    by projections that resolve the live donor account.
    """

    id: int
    name: str
    expiry_date: date
    quantity: int
    donor_id: Optional[int]
    donor_email: str
    donation_date: datetime
    donor_name: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        """True when the record no longer references a donor account."""
        return self.donor_id is None
