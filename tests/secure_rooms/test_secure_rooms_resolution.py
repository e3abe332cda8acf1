"""
Tests for core.secure_rooms — Account resolution and card scan handling.
"""

import pytest

from core.ability import ActorSnapshot
from core.secure_rooms import (
    NO_ACCOUNTS_REASON,
    AccountSummary,
    Cardholder,
    CardholderNotFound,
    CardReader,
    CardReaderNotFound,
    Deny,
    InMemoryCardholderDirectory,
    InMemoryCardReaderDirectory,
    SelectAccount,
    process_scan,
    resolve_accounts_for_actor,
)


ACTOR = ActorSnapshot(actor_id="user-1", display_name="Alex Example")
ACCOUNT_ONE = AccountSummary(account_id=1, account_number="A-1", description="One")
ACCOUNT_TWO = AccountSummary(account_id=2, account_number="A-2", account_type="Chartstring")


# ══════════════════════════════════════════════════════════════
# RESOLUTION
# ══════════════════════════════════════════════════════════════

class TestResolveAccountsForActor:
    def test_single_account(self):
        result = resolve_accounts_for_actor(ACTOR, [ACCOUNT_ONE])
        assert isinstance(result, SelectAccount)
        assert result.accounts == (ACCOUNT_ONE,)
        assert not result.has_multiple

    def test_several_accounts_keep_order(self):
        result = resolve_accounts_for_actor(ACTOR, [ACCOUNT_TWO, ACCOUNT_ONE])
        assert isinstance(result, SelectAccount)
        assert result.accounts == (ACCOUNT_TWO, ACCOUNT_ONE)
        assert result.has_multiple

    def test_no_accounts_denies(self):
        result = resolve_accounts_for_actor(ACTOR, [])
        assert isinstance(result, Deny)
        assert result.reason == NO_ACCOUNTS_REASON

    def test_none_accounts_denies(self):
        assert isinstance(resolve_accounts_for_actor(ACTOR, None), Deny)

    def test_missing_actor_denies(self):
        result = resolve_accounts_for_actor(None, [ACCOUNT_ONE])
        assert result == Deny(reason=NO_ACCOUNTS_REASON)

    def test_roles_do_not_matter(self):
        admin = ActorSnapshot(actor_id="admin", is_global_administrator=True)
        assert isinstance(resolve_accounts_for_actor(admin, []), Deny)

    def test_select_account_requires_accounts(self):
        with pytest.raises(ValueError):
            SelectAccount(accounts=())


class TestAccountSummary:
    def test_to_dict(self):
        assert ACCOUNT_TWO.to_dict() == {
            "id": 2,
            "account_number": "A-2",
            "description": "",
            "type": "Chartstring",
        }

    def test_account_id_required(self):
        with pytest.raises(ValueError):
            AccountSummary(account_id=None, account_number="A-3")


# ══════════════════════════════════════════════════════════════
# DIRECTORIES
# ══════════════════════════════════════════════════════════════

class TestDirectories:
    def test_unknown_card(self):
        directory = InMemoryCardholderDirectory()
        with pytest.raises(CardholderNotFound, match="'999'"):
            directory.find_by_card_number("999")

    def test_duplicate_card_rejected(self):
        cardholder = Cardholder(actor=ACTOR, card_number="1")
        with pytest.raises(ValueError, match="Duplicate"):
            InMemoryCardholderDirectory([cardholder, cardholder])

    def test_reader_lookup_uses_both_identifiers(self):
        reader = CardReader(card_reader_number="1", control_device_number="c1")
        directory = InMemoryCardReaderDirectory([reader])
        assert directory.find("1", "c1") is reader
        with pytest.raises(CardReaderNotFound):
            directory.find("1", "c2")

    def test_cardholder_name_falls_back_to_actor_id(self):
        cardholder = Cardholder(actor=ActorSnapshot(actor_id="u-9"), card_number="9")
        assert cardholder.name == "u-9"


# ══════════════════════════════════════════════════════════════
# SCAN
# ══════════════════════════════════════════════════════════════

class TestProcessScan:
    def setup_method(self):
        self.cardholders = InMemoryCardholderDirectory(
            [
                Cardholder(actor=ACTOR, card_number="11", accounts=(ACCOUNT_ONE,)),
                Cardholder(
                    actor=ActorSnapshot(actor_id="user-2"),
                    card_number="22",
                    accounts=(ACCOUNT_ONE, ACCOUNT_TWO),
                ),
                Cardholder(actor=ActorSnapshot(actor_id="user-3"), card_number="33"),
            ]
        )
        self.readers = InMemoryCardReaderDirectory(
            [CardReader(card_reader_number="1", control_device_number="c1")]
        )

    def _scan(self, card_number, reader="1", controller="c1"):
        return process_scan(
            card_number=card_number,
            reader_identifier=reader,
            controller_identifier=controller,
            cardholders=self.cardholders,
            card_readers=self.readers,
            tablet_identifier="tablet-1",
        )

    def test_single_account_is_ok(self):
        result = self._scan("11")
        assert result.status == 200
        assert result.body == {
            "response": "select_account",
            "tablet_identifier": "tablet-1",
            "name": "Alex Example",
            "accounts": [ACCOUNT_ONE.to_dict()],
        }

    def test_multiple_accounts_is_multiple_choices(self):
        result = self._scan("22")
        assert result.status == 300
        assert [a["id"] for a in result.body["accounts"]] == [1, 2]

    def test_no_accounts_is_forbidden(self):
        result = self._scan("33")
        assert result.status == 403
        assert result.body == {"response": "deny", "reason": NO_ACCOUNTS_REASON}

    def test_unknown_card_is_not_found(self):
        result = self._scan("44")
        assert result.status == 404
        assert result.body["response"] == "deny"
        assert "44" in result.body["reason"]

    def test_unknown_reader_is_not_found(self):
        result = self._scan("11", reader="2")
        assert result.status == 404
