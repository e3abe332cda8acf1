"""
Secure Rooms - Card Scan Handling
=================================
Turns a card swipe at a reader into the JSON body and status code the
reader's controller expects.

    one account       -> 200 select_account
    several accounts  -> 300 select_account
    no accounts       -> 403 deny
    unknown card/reader -> 404 deny
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from core.secure_rooms.directory import CardholderDirectory, CardReaderDirectory
from core.secure_rooms.exceptions import LookupFailed
from core.secure_rooms.resolution import SelectAccount, resolve_accounts_for_actor

logger = logging.getLogger("ability.secure_rooms")

STATUS_OK = 200
STATUS_MULTIPLE_CHOICES = 300
STATUS_FORBIDDEN = 403
STATUS_NOT_FOUND = 404


@dataclass(frozen=True)
class ScanResponse:
    status: int
    body: dict[str, Any]


def _deny(reason: str, status: int) -> ScanResponse:
    return ScanResponse(status=status, body={"response": "deny", "reason": reason})


def process_scan(
    *,
    card_number: str,
    reader_identifier: str,
    controller_identifier: str,
    cardholders: CardholderDirectory,
    card_readers: CardReaderDirectory,
    tablet_identifier: str,
) -> ScanResponse:
    try:
        cardholder = cardholders.find_by_card_number(card_number)
        reader = card_readers.find(reader_identifier, controller_identifier)
    except LookupFailed as exc:
        logger.warning("Scan rejected: %s", exc)
        return _deny(str(exc), STATUS_NOT_FOUND)

    resolution = resolve_accounts_for_actor(cardholder.actor, cardholder.accounts)
    if not isinstance(resolution, SelectAccount):
        return _deny(resolution.reason, STATUS_FORBIDDEN)

    logger.debug(
        "Card %s at reader %s/%s: %d account(s)",
        card_number,
        reader.card_reader_number,
        reader.control_device_number,
        len(resolution.accounts),
    )
    return ScanResponse(
        status=STATUS_MULTIPLE_CHOICES if resolution.has_multiple else STATUS_OK,
        body={
            "response": "select_account",
            "tablet_identifier": tablet_identifier,
            "name": cardholder.name,
            "accounts": [account.to_dict() for account in resolution.accounts],
        },
    )
