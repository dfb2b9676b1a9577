"""Tests for database mappers."""

from datetime import datetime, date, UTC

from careconnect.database.models import (
    Account as ORMAccount,
    Donation as ORMDonation,
)
from careconnect.database.mappers import (
    account_to_domain,
    credentials_to_domain,
    donation_to_domain,
)
from careconnect.domain.entities import (
    Account,
    DonationRecord,
    StoredCredentials,
)


def _orm_account():
    return ORMAccount(
        id=1,
        fullname="Alice Doe",
        email="a@x.com",
        password_hash="pbkdf2:sha256:1$salt$00",
        dob=date(1990, 5, 17),
        phone="555-0100",
        state="Lagos",
        created_at=datetime.now(UTC),
    )


class TestAccountMapper:
    """Tests for Account mappers."""

    def test_account_to_domain(self):
        orm_account = _orm_account()

        account = account_to_domain(orm_account)

        assert isinstance(account, Account)
        assert account.id == 1
        assert account.fullname == "Alice Doe"
        assert account.email == "a@x.com"
        assert account.dob == date(1990, 5, 17)
        assert account.created_at == orm_account.created_at
        assert not hasattr(account, "password_hash")

    def test_credentials_to_domain(self):
        credentials = credentials_to_domain(_orm_account())

        assert isinstance(credentials, StoredCredentials)
        assert credentials.account_id == 1
        assert credentials.password_hash == "pbkdf2:sha256:1$salt$00"


class TestDonationMapper:
    """Tests for Donation mapper."""

    def test_donation_to_domain(self):
        orm_donation = ORMDonation(
            id=7,
            name="Aspirin",
            expiry_date=date(2025, 1, 1),
            quantity=10,
            donor_id=1,
            donor_email="a@x.com",
            donation_date=datetime(2024, 12, 1, 9, 30),
        )

        donation = donation_to_domain(orm_donation, donor_name="Alice Doe")

        assert isinstance(donation, DonationRecord)
        assert donation.id == 7
        assert donation.quantity == 10
        assert donation.donor_id == 1
        assert donation.donor_name == "Alice Doe"
        assert not donation.is_anonymous

    def test_anonymous_donation_to_domain(self):
        orm_donation = ORMDonation(
            id=8,
            name="Insulin",
            expiry_date=date(2025, 1, 1),
            quantity=1,
            donor_id=None,
            donor_email="gone@x.com",
            donation_date=datetime(2024, 12, 1, 9, 30),
        )

        donation = donation_to_domain(orm_donation)

        assert donation.donor_id is None
        assert donation.donor_name is None
        assert donation.donor_email == "gone@x.com"
        assert donation.is_anonymous
