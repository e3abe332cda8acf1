"""
Secure Rooms Django Adapter Wiring
==================================
Constructs the directories the scan endpoint reads for local/staging
runs.

This module is adapter-only glue:
- no core contract changes
- in-memory directories seeded with development cardholders
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from core.ability import ActorSnapshot
from core.secure_rooms import (
    AccountSummary,
    Cardholder,
    CardholderDirectory,
    CardReader,
    CardReaderDirectory,
    InMemoryCardholderDirectory,
    InMemoryCardReaderDirectory,
)


DEV_SINGLE_ACCOUNT_CARD = "100001"
DEV_MULTI_ACCOUNT_CARD = "100002"
DEV_NO_ACCOUNT_CARD = "100003"

DEV_READER_NUMBER = "1"
DEV_CONTROLLER_NUMBER = "ctrl-1"

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: SecureRoomsDependencies | None = None


@dataclass(frozen=True)
class SecureRoomsDependencies:
    cardholders: CardholderDirectory
    card_readers: CardReaderDirectory


def _build_cardholders() -> InMemoryCardholderDirectory:
    chemistry = AccountSummary(
        account_id=1,
        account_number="CHEM-0001",
        description="Chemistry core",
        account_type="NufsAccount",
    )
    physics = AccountSummary(
        account_id=2,
        account_number="PHYS-0002",
        description="Physics core",
        account_type="NufsAccount",
    )
    return InMemoryCardholderDirectory(
        (
            Cardholder(
                actor=ActorSnapshot(actor_id="dev-single", display_name="Dana Single"),
                card_number=DEV_SINGLE_ACCOUNT_CARD,
                accounts=(chemistry,),
            ),
            Cardholder(
                actor=ActorSnapshot(actor_id="dev-multi", display_name="Morgan Multi"),
                card_number=DEV_MULTI_ACCOUNT_CARD,
                accounts=(chemistry, physics),
            ),
            Cardholder(
                actor=ActorSnapshot(actor_id="dev-none", display_name="Nico None"),
                card_number=DEV_NO_ACCOUNT_CARD,
            ),
        )
    )


def _build_card_readers() -> InMemoryCardReaderDirectory:
    return InMemoryCardReaderDirectory(
        (
            CardReader(
                card_reader_number=DEV_READER_NUMBER,
                control_device_number=DEV_CONTROLLER_NUMBER,
                facility_id=1,
                description="Clean room door",
            ),
        )
    )


def _create_dependencies() -> SecureRoomsDependencies:
    return SecureRoomsDependencies(
        cardholders=_build_cardholders(),
        card_readers=_build_card_readers(),
    )


def build_dependencies() -> SecureRoomsDependencies:
    """
    Lazy singleton wiring for adapter runtime.

    Only the directories are cached. Settings are read per request by
    the view.
    """
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES = _create_dependencies()
        return _DEPENDENCIES
