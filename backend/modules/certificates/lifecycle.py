"""
Certificate lifecycle rules.

Pure functions for status derivation and share-token generation. They
hold no state and do no I/O; the service decides when to call them.

Status rules, in order:
1. now > expiration_date            -> expired
2. now >= effective_date            -> active
3. otherwise                        -> pending

Both boundaries are inclusive for "active". Status is derived on create
and on updates that touch a date, never on reads. Once a certificate has
been accepted through its share link it stays accepted: date edits are
still validated and stored but do not move the status.
"""

import secrets
from datetime import datetime
from typing import Optional

from .exceptions import InvalidDateRangeError
from .models import CertificateStatus

DEFAULT_SHARE_TOKEN_BYTES = 32


def derive_status(
    effective_date: datetime,
    expiration_date: datetime,
    now: datetime,
) -> CertificateStatus:
    """Compute pending / active / expired for the given instant."""
    if now > expiration_date:
        return CertificateStatus.EXPIRED
    if now >= effective_date:
        return CertificateStatus.ACTIVE
    return CertificateStatus.PENDING


def validate_date_range(effective_date: datetime, expiration_date: datetime) -> None:
    """
    Raises:
        InvalidDateRangeError: If expiration_date <= effective_date
    """
    if expiration_date <= effective_date:
        raise InvalidDateRangeError(effective_date, expiration_date)


def status_after_date_change(
    accepted_at: Optional[datetime],
    effective_date: datetime,
    expiration_date: datetime,
    now: datetime,
) -> Optional[CertificateStatus]:
    """
    Status to store after a date edit, or None to leave it untouched.

    Accepted certificates keep their status.
    """
    if accepted_at is not None:
        return None
    return derive_status(effective_date, expiration_date, now)


def generate_share_token(num_bytes: int = DEFAULT_SHARE_TOKEN_BYTES) -> str:
    """
    Opaque URL-safe token from the OS CSPRNG.

    32 bytes gives 256 bits of entropy, so collisions are not a practical
    concern; the unique index on share_token still guards the invariant.
    """
    return secrets.token_urlsafe(num_bytes)
