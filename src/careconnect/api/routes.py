"""HTTP routes for accounts and donations."""

from datetime import datetime, UTC

from fastapi import APIRouter, Depends, Request

from careconnect.api.schemas import (
    AvailableMedicine,
    DonateRequest,
    DonateResponse,
    DonationHistoryItem,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
)
from careconnect.database.base import Database
from careconnect.domain.account import AccountService
from careconnect.domain.donation import DonationService

router = APIRouter()


def get_db(request: Request) -> Database:
    """Return the store handle attached to the running app."""
    return request.app.state.db


def get_account_service(db: Database = Depends(get_db)) -> AccountService:
    return AccountService(db)


def get_donation_service(db: Database = Depends(get_db)) -> DonationService:
    return DonationService(db)


@router.get("/health")
def health_check():
    """Returns 200 if the service is running."""
    return {
        "status": "healthy",
        "service": "careconnect",
        "timestamp": datetime.now(UTC).isoformat(),
    }


@router.post("/register", status_code=201, response_model=RegisterResponse)
def register(
    payload: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> RegisterResponse:
    account_id = service.register(
        fullname=payload.fullname,
        email=payload.email,
        password=payload.password,
        confirm_password=payload.confirmPassword,
        dob=payload.dob,
        phone=payload.phone,
        state=payload.state,
    )
    return RegisterResponse(userId=account_id)


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    account = service.authenticate(email=payload.email, password=payload.password)
    return LoginResponse(userId=account.id, email=account.email)


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    service.delete_account(user_id)
    return MessageResponse(message="Account deleted successfully")


@router.get("/users/{user_id}/donations", response_model=list[DonationHistoryItem])
def user_donations(
    user_id: int,
    service: DonationService = Depends(get_donation_service),
) -> list[DonationHistoryItem]:
    records = service.list_donations_by_account(user_id)
    return [DonationHistoryItem.from_record(r) for r in records]


@router.post("/donate", status_code=201, response_model=DonateResponse)
def donate(
    payload: DonateRequest,
    service: DonationService = Depends(get_donation_service),
) -> DonateResponse:
    donation_id = service.donate(
        medicine_name=payload.medicineName,
        expiry_date=payload.expiry_date,
        quantity=payload.quantity,
        donor_email=payload.donor_email,
    )
    return DonateResponse(donationId=donation_id)


@router.get("/medicines", response_model=list[AvailableMedicine])
def available_medicines(
    service: DonationService = Depends(get_donation_service),
) -> list[AvailableMedicine]:
    return [AvailableMedicine.from_record(r) for r in service.list_available()]
