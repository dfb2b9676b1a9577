"""Donation domain service."""

from typing import Optional
from datetime import date

import structlog

from careconnect.database.base import Database
from careconnect.domain.entities import DonationRecord as DonationEntity
from careconnect.domain.errors import ValidationError, invalid_quantity, missing_field

logger = structlog.get_logger()

# Largest value a SQLite INTEGER column can hold
MAX_QUANTITY = 2**63 - 1


class DonationService:
    """Service for the medicine donation ledger."""

    def __init__(self, db: Database):
        """Initialize donation service.

        Args:
            db: Database instance
        """
        self.db = db

    def donate(
        self,
        medicine_name: str,
        expiry_date: date,
        quantity: int,
        donor_email: str,
    ) -> int:
        """Record a medicine donation.

        If ``donor_email`` belongs to a registered account the donation is
        attributed to it. Otherwise the donation is recorded anonymously;
        this is not an error. The email is stored as given either way.

        Args:
            medicine_name: Name of the medicine
            expiry_date: Expiry date of the medicine
            quantity: Number of units, must be positive
            donor_email: Email the donor supplied

        Returns:
            Donation ID

        Raises:
            ValidationError: If a field is missing or quantity is not a positive
                storable integer
        """
        medicine_name = (medicine_name or "").strip()
        # Stored and matched exactly as supplied
        donor_email = donor_email or ""
        if not medicine_name:
            raise ValidationError(missing_field("medicineName"))
        if not donor_email.strip():
            raise ValidationError(missing_field("donor_email"))
        if expiry_date is None:
            raise ValidationError(missing_field("expiry_date"))
        if (
            isinstance(quantity, bool)
            or not isinstance(quantity, int)
            or not 0 < quantity <= MAX_QUANTITY
        ):
            raise ValidationError(invalid_quantity(quantity))

        donation_id, donor_id = self.db.create_donation(
            name=medicine_name,
            expiry_date=expiry_date,
            quantity=quantity,
            donor_email=donor_email,
        )
        logger.info(
            "donation_recorded",
            donation_id=donation_id,
            attributed=donor_id is not None,
        )
        return donation_id

    def get_donation(self, donation_id: int) -> Optional[DonationEntity]:
        """Get donation by ID."""
        return self.db.get_donation(donation_id)

    def list_available(self) -> list[DonationEntity]:
        """List all donations, newest first, with donor names resolved.

        Anonymous donations have ``donor_name`` set to None.
        """
        return self.db.list_donations()

    def list_donations_by_account(self, account_id: int) -> list[DonationEntity]:
        """List donations currently attributed to an account, newest first.

        Donations anonymized by account deletion are not included.
        """
        return self.db.list_donations(donor_id=account_id)
