"""Utility functions for careconnect."""

from careconnect.utils.date_parser import parse_date
from careconnect.utils.passwords import hash_password, verify_password

__all__ = ["parse_date", "hash_password", "verify_password"]
