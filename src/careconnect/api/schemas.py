"""Request and response bodies for the HTTP API.

Field names follow the JSON keys the web front end already sends.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from careconnect.domain.entities import DonationRecord


class RegisterRequest(BaseModel):
    fullname: str
    email: str
    password: str
    confirmPassword: str
    dob: date
    phone: str
    state: str


class RegisterResponse(BaseModel):
    message: str = "User registered successfully"
    userId: int


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    userId: int
    email: str


class MessageResponse(BaseModel):
    message: str


class DonateRequest(BaseModel):
    medicineName: str
    expiry_date: date
    quantity: int
    donor_email: str


class DonateResponse(BaseModel):
    message: str = "Medicine donated successfully"
    donationId: int


class DonationHistoryItem(BaseModel):
    """A donation as shown in its donor's own history."""

    id: int
    name: str
    expiry_date: date
    quantity: int
    donation_date: datetime

    @classmethod
    def from_record(cls, record: DonationRecord) -> "DonationHistoryItem":
        return cls(
            id=record.id,
            name=record.name,
            expiry_date=record.expiry_date,
            quantity=record.quantity,
            donation_date=record.donation_date,
        )


class AvailableMedicine(DonationHistoryItem):
    """A donation as listed publicly; donor_name is None when anonymous."""

    donor_email: str
    donor_name: Optional[str] = None

    @classmethod
    def from_record(cls, record: DonationRecord) -> "AvailableMedicine":
        return cls(
            id=record.id,
            name=record.name,
            expiry_date=record.expiry_date,
            quantity=record.quantity,
            donation_date=record.donation_date,
            donor_email=record.donor_email,
            donor_name=record.donor_name,
        )
