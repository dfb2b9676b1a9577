"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, and is the only place where the
ORM account row (which carries the credential hash) is narrowed down to
the hash-free domain ``Account``.
"""

from typing import Optional

from careconnect.domain import entities as domain
from careconnect.database.models import (
    Account as ORMAccount,
    Donation as ORMDonation,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        fullname=orm_account.fullname,
        email=orm_account.email,
        dob=orm_account.dob,
        phone=orm_account.phone,
        state=orm_account.state,
        created_at=orm_account.created_at,
    )


def credentials_to_domain(orm_account: ORMAccount) -> domain.StoredCredentials:
    """Convert SQLAlchemy Account model to its stored credentials."""
    return domain.StoredCredentials(
        account_id=orm_account.id,
        email=orm_account.email,
        password_hash=orm_account.password_hash,
    )


def donation_to_domain(
    orm_donation: ORMDonation, donor_name: Optional[str] = None
) -> domain.DonationRecord:
    """Convert SQLAlchemy Donation model to domain DonationRecord entity.

    Args:
        orm_donation: ORM donation row
        donor_name: Full name of the linked donor, if resolved by the query
    """
    return domain.DonationRecord(
        id=orm_donation.id,
        name=orm_donation.name,
        expiry_date=orm_donation.expiry_date,
        quantity=orm_donation.quantity,
        donor_id=orm_donation.donor_id,
        donor_email=orm_donation.donor_email,
        donation_date=orm_donation.donation_date,
        donor_name=donor_name,
    )
