"""
Secure Rooms - Lookup Errors
============================
"""

from __future__ import annotations


class LookupFailed(LookupError):
    """A card or reader identifier did not resolve to a record."""
    pass


class CardholderNotFound(LookupFailed):
    def __init__(self, card_number: str):
        self.card_number = card_number
        super().__init__(f"No user found for card number '{card_number}'.")


class CardReaderNotFound(LookupFailed):
    def __init__(self, reader_identifier: str, controller_identifier: str):
        self.reader_identifier = reader_identifier
        self.controller_identifier = controller_identifier
        super().__init__(
            f"No card reader '{reader_identifier}' found on "
            f"controller '{controller_identifier}'."
        )
