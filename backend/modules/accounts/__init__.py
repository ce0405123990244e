"""
Accounts module.

Accounts group certificates under a user. Every certificate references
an account, and ownership of a certificate flows account -> user.

Public API:
- Account: Account record
- AccountRepository: Data access, including atomic get-or-create
"""

from .models import Account, CREDENTIALS_PROVIDER
from .repository import AccountRepository

__all__ = [
    "Account",
    "AccountRepository",
    "CREDENTIALS_PROVIDER",
]
