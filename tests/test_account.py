"""Tests for account commands."""

import pytest
from click.testing import CliRunner
from careconnect.cli.main import cli


def _register(cli_runner, db_path, email="a@x.com", password="pw1", confirm="pw1"):
    return cli_runner.invoke(
        cli,
        [
            "--db-path", db_path,
            "account", "register", "Alice Doe", email,
            "--dob", "1990-05-17",
            "--phone", "555-0100",
            "--state", "Lagos",
            "--password", password,
            "--confirm-password", confirm,
        ],
    )


def test_account_register(cli_runner, temp_db):
    """Test registering an account."""
    result = _register(cli_runner, temp_db.database_path)

    assert result.exit_code == 0
    assert "Registered account 'a@x.com'" in result.output
    assert "ID:" in result.output
    assert temp_db.get_account_by_email("a@x.com") is not None


def test_account_register_prompts_for_password(cli_runner, temp_db):
    """Test that passwords are prompted when not given."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "account", "register", "Alice Doe", "a@x.com",
            "--dob", "1990-05-17", "--phone", "555-0100", "--state", "Lagos",
        ],
        input="pw1\npw1\n",
    )

    assert result.exit_code == 0
    assert "Registered account" in result.output


def test_account_register_password_mismatch(cli_runner, temp_db):
    """Test that mismatched passwords are rejected."""
    result = _register(cli_runner, temp_db.database_path, confirm="pw2")

    assert result.exit_code == 1
    assert "Passwords do not match" in result.output


def test_account_register_bad_dob(cli_runner, temp_db):
    """Test that an unparseable date of birth is rejected."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "account", "register", "Alice Doe", "a@x.com",
            "--dob", "not a date", "--phone", "1", "--state", "Lagos",
            "--password", "pw1", "--confirm-password", "pw1",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid date of birth" in result.output


def test_account_register_duplicate(cli_runner, temp_db):
    """Test registering the same email twice fails."""
    assert _register(cli_runner, temp_db.database_path).exit_code == 0

    result = _register(cli_runner, temp_db.database_path)

    assert result.exit_code == 1
    assert "already in use" in result.output.lower()


def test_account_login(cli_runner, temp_db, sample_account):
    """Test logging in with the right password."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "login", "a@x.com", "--password", "pw1"]
    )

    assert result.exit_code == 0
    assert "Login successful" in result.output
    assert f"ID: {sample_account.id}" in result.output


def test_account_login_wrong_password(cli_runner, temp_db, sample_account):
    """Test logging in with the wrong password."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "login", "a@x.com", "--password", "nope"]
    )

    assert result.exit_code == 1
    assert "Invalid email or password" in result.output


def test_account_delete_by_email(cli_runner, temp_db, sample_account):
    """Test deleting an account by email with confirmation."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "delete", "a@x.com"], input="y\n"
    )

    assert result.exit_code == 0
    assert "Deleted account 'a@x.com'" in result.output
    assert temp_db.get_account(sample_account.id) is None


def test_account_delete_cancelled(cli_runner, temp_db, sample_account):
    """Test that answering no keeps the account."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "delete", str(sample_account.id)], input="n\n"
    )

    assert result.exit_code == 0
    assert "Deletion cancelled" in result.output
    assert temp_db.get_account(sample_account.id) is not None


def test_account_delete_reports_anonymized(cli_runner, temp_db, sample_account, donation_service):
    """Test that the number of kept donations is reported."""
    from datetime import date

    donation_service.donate("Aspirin", date(2025, 1, 1), 10, "a@x.com")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "delete", "a@x.com", "--yes"]
    )

    assert result.exit_code == 0
    assert "1 donation kept as anonymous" in result.output


def test_account_delete_missing(cli_runner, temp_db):
    """Test deleting an account that does not exist."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "delete", "999", "--yes"]
    )

    assert result.exit_code == 1
    assert "not found" in result.output.lower()


def test_account_delete_account_vanishes_after_lookup(cli_runner, temp_db, sample_account, monkeypatch):
    """Test an account removed between resolution and deletion is reported as missing."""
    from careconnect.domain.account import AccountService

    monkeypatch.setattr(AccountService, "get_account", lambda self, account_id: None)

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "delete", "a@x.com", "--yes"]
    )

    assert result.exit_code == 1
    assert f"User {sample_account.id} not found" in result.output
    assert not isinstance(result.exception, AttributeError)


def test_account_register_storage_failure_hides_driver_error(cli_runner, temp_db, monkeypatch):
    """Test that storage failures print a generic message."""
    from careconnect.domain.account import AccountService
    from careconnect.domain.errors import StorageError

    def failing_register(self, **kwargs):
        raise StorageError("Storage failure: (sqlite3.OperationalError) disk I/O error [SQL: INSERT ...]")

    monkeypatch.setattr(AccountService, "register", failing_register)

    result = _register(cli_runner, temp_db.database_path)

    assert result.exit_code == 1
    assert "Error: Storage failure\n" in result.output
    assert "Error: Storage failure: " not in result.output
