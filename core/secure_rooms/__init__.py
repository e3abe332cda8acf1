"""
Secure Rooms - Public API
=========================
Card-reader account selection for secure rooms.
"""

from core.secure_rooms.directory import (
    CardholderDirectory,
    CardReaderDirectory,
    InMemoryCardholderDirectory,
    InMemoryCardReaderDirectory,
)
from core.secure_rooms.exceptions import (
    CardholderNotFound,
    CardReaderNotFound,
    LookupFailed,
)
from core.secure_rooms.models import AccountSummary, Cardholder, CardReader
from core.secure_rooms.resolution import (
    NO_ACCOUNTS_REASON,
    AccountResolution,
    Deny,
    SelectAccount,
    resolve_accounts_for_actor,
)
from core.secure_rooms.scan import ScanResponse, process_scan

__all__ = [
    "AccountSummary",
    "Cardholder",
    "CardReader",
    "CardholderDirectory",
    "CardReaderDirectory",
    "InMemoryCardholderDirectory",
    "InMemoryCardReaderDirectory",
    "LookupFailed",
    "CardholderNotFound",
    "CardReaderNotFound",
    "NO_ACCOUNTS_REASON",
    "AccountResolution",
    "SelectAccount",
    "Deny",
    "resolve_accounts_for_actor",
    "ScanResponse",
    "process_scan",
]
