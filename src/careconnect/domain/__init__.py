"""Domain layer for careconnect application."""

__all__ = [
    "AccountService",
    "DonationService",
]


# Services are imported lazily: database.base imports domain.entities, and
# the services import database.base.
def __getattr__(name):
    if name == "AccountService":
        from careconnect.domain.account import AccountService
        return AccountService
    if name == "DonationService":
        from careconnect.domain.donation import DonationService
        return DonationService
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
