"""
Secure Rooms - Cardholder and Card Reader Models
================================================
Records the card-reader flow works with. Loaded by the caller; the
account list of a cardholder is whatever the caller linked to them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Optional

from core.ability.models import ActorSnapshot


@dataclass(frozen=True)
class AccountSummary:
    """An account offered to the cardholder at the reader."""

    account_id: Hashable
    account_number: str
    description: str = ""
    account_type: str = ""

    def __post_init__(self):
        if self.account_id is None:
            raise ValueError("account_id is required.")
        if not isinstance(self.account_number, str):
            raise ValueError("account_number must be a string.")

    def to_dict(self) -> dict:
        return {
            "id": self.account_id,
            "account_number": self.account_number,
            "description": self.description,
            "type": self.account_type,
        }


@dataclass(frozen=True)
class Cardholder:
    actor: ActorSnapshot
    card_number: str
    accounts: tuple[AccountSummary, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.card_number or not isinstance(self.card_number, str):
            raise ValueError("card_number must be a non-empty string.")
        if not isinstance(self.accounts, tuple):
            raise ValueError("accounts must be a tuple.")

    @property
    def name(self) -> str:
        return self.actor.display_name or self.actor.actor_id


@dataclass(frozen=True)
class CardReader:
    card_reader_number: str
    control_device_number: str
    facility_id: Optional[Hashable] = None
    description: str = ""

    def __post_init__(self):
        if not self.card_reader_number or not isinstance(self.card_reader_number, str):
            raise ValueError("card_reader_number must be a non-empty string.")
        if not self.control_device_number or not isinstance(
            self.control_device_number, str
        ):
            raise ValueError("control_device_number must be a non-empty string.")

    def key(self) -> tuple[str, str]:
        return (self.card_reader_number, self.control_device_number)
