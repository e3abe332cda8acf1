"""
Secure Rooms - Directory Protocols and In-Memory Directories
============================================================
Lookup of cardholders by card number and readers by identifiers.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from core.secure_rooms.exceptions import CardholderNotFound, CardReaderNotFound
from core.secure_rooms.models import Cardholder, CardReader


class CardholderDirectory(Protocol):
    def find_by_card_number(self, card_number: str) -> Cardholder:
        ...


class CardReaderDirectory(Protocol):
    def find(self, reader_identifier: str, controller_identifier: str) -> CardReader:
        ...


class InMemoryCardholderDirectory:
    """
    Deterministic in-memory directory used for local runs and tests.
    """

    def __init__(self, cardholders: Iterable[Cardholder] | None = None):
        self._by_card: dict[str, Cardholder] = {}
        for cardholder in cardholders or ():
            if cardholder.card_number in self._by_card:
                raise ValueError(
                    f"Duplicate card_number '{cardholder.card_number}'."
                )
            self._by_card[cardholder.card_number] = cardholder

    def find_by_card_number(self, card_number: str) -> Cardholder:
        cardholder = self._by_card.get(card_number)
        if cardholder is None:
            raise CardholderNotFound(card_number)
        return cardholder


class InMemoryCardReaderDirectory:
    def __init__(self, readers: Iterable[CardReader] | None = None):
        self._by_key: dict[tuple[str, str], CardReader] = {}
        for reader in readers or ():
            if reader.key() in self._by_key:
                raise ValueError(
                    f"Duplicate card reader '{reader.card_reader_number}' on "
                    f"controller '{reader.control_device_number}'."
                )
            self._by_key[reader.key()] = reader

    def find(self, reader_identifier: str, controller_identifier: str) -> CardReader:
        reader = self._by_key.get((reader_identifier, controller_identifier))
        if reader is None:
            raise CardReaderNotFound(reader_identifier, controller_identifier)
        return reader
