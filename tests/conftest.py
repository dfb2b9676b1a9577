"""Shared pytest fixtures for careconnect tests."""

import tempfile
import os
from datetime import date
import pytest

from careconnect.database.factories import create_sqlite_database
from careconnect.domain.account import AccountService
from careconnect.domain.donation import DonationService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def donation_service(temp_db):
    """Create a DonationService with a temporary database."""
    return DonationService(temp_db)


@pytest.fixture
def registration():
    """Valid registration arguments for AccountService.register."""
    return {
        "fullname": "Alice Doe",
        "email": "a@x.com",
        "password": "pw1",
        "confirm_password": "pw1",
        "dob": date(1990, 5, 17),
        "phone": "555-0100",
        "state": "Lagos",
    }


@pytest.fixture
def sample_account(account_service, registration):
    """Create a sample account for testing."""
    account_id = account_service.register(**registration)
    return account_service.get_account(account_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def api_client(temp_db):
    """Create a FastAPI test client serving the temporary database."""
    from fastapi.testclient import TestClient
    from careconnect.api.app import create_app
    from careconnect.config import Settings

    app = create_app(db=temp_db, settings=Settings(cors_origins=["*"]))
    return TestClient(app)
