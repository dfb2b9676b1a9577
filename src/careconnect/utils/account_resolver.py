"""Utility for resolving account emails to IDs."""

from careconnect.domain.account import AccountService


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve account email or ID to account ID.

    Args:
        account_service: AccountService instance
        account: Account email (str) or ID (int or string representation of int)

    Returns:
        Account ID

    Raises:
        ValueError: If account is not found
    """
    # If it's already an integer, use it as ID
    if isinstance(account, int):
        account_obj = account_service.get_account(account)
        if account_obj is None:
            raise ValueError(f"Account ID {account} not found")
        return account

    # Try to parse as integer (handles string IDs like "1")
    try:
        account_id = int(account)
    except (ValueError, TypeError):
        # Not a number, treat as email
        pass
    else:
        account_obj = account_service.get_account(account_id)
        if account_obj is None:
            raise ValueError(f"Account ID {account_id} not found")
        return account_id

    account_obj = account_service.get_account_by_email(account)
    if account_obj is None:
        raise ValueError(f"Account '{account}' not found")
    return account_obj.id
